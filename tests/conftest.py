# psview - A PostScript Interpreter
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Shared fixtures.

- interp: a fresh interpreter with the core operators only
- gfx_interp: a fresh interpreter with the graphics operators installed
- run: load a program into ``interp`` and return (success, operand stack)
- stacks: an operand stack and dictionary stack for calling operators directly
"""

import pytest

from psview.core import context_init
from psview.core.interpreter import Interpreter


@pytest.fixture
def interp():
    return Interpreter()


@pytest.fixture
def gfx_interp():
    return Interpreter(graphics=True)


@pytest.fixture
def run(interp):
    def _run(program):
        ok = interp.load(program)
        return ok, interp.operand_stack
    return _run


@pytest.fixture
def stacks():
    return context_init.create_stacks(context_init.init_system_params())


def values(stack):
    """Payloads of a stack snapshot, bottom first."""
    return [obj.val for obj in stack]
