# psview - A PostScript Interpreter
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
psview Types Package - Public API

This package provides the unified types interface for the psview interpreter.
All object types, constants and stacks are available through this single
namespace to support the standard import pattern: `from ..core import types as ps`

**Internal Module Organization:**
- constants.py: type tags, access modes, limits and executor states
- base.py: the PSObject base class
- primitive.py: Int and Real
- composite/: Name, String, Array and Dict
- utility.py: Operator
- context.py: OperandStack, DictionaryStack and the bounded Stack
- graphics.py: graphics state, paths and display list elements

**Usage:**
```python
from ..core import types as ps

ostack.push(ps.Int(42))
name = ps.Name.executable("add")
```
"""

from .constants import *
from .base import *
from .primitive import *
from .composite import *
from .utility import *
from .context import *
from .graphics import *
