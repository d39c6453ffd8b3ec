# psview - A PostScript Interpreter
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
psview Types Composite Sub-Package

**Module Organization:**
- string.py: String class - immutable byte sequences
- name.py: Name class - symbols with hash-based lookups
- array.py: Array class - procedure bodies
- dict.py: Dict class - dictionary stack frames

All classes are re-exported through the main types package.
"""

from .string import String
from .name import Name
from .array import Array
from .dict import Dict

__all__ = [
    'String',
    'Name',
    'Array',
    'Dict',
]
