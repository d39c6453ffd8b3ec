# psview - A PostScript Interpreter
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Interpreter context initialization.

Creates the system parameters and the stacks an interpreter starts with.
"""

from typing import Any, Dict, Optional, Tuple

from . import types as ps
from ..operators import dict as ps_dict


def init_system_params() -> Dict[str, Any]:
    """
    Initialize system parameters for the interpreter.

    Returns:
        Dict[str, Any]: System parameters dictionary containing:
            - MaxOpStack: operand stack depth limit
            - MaxDictStack: dictionary stack depth limit
            - MaxExecDepth: procedure nesting limit
            - MaxGStack: gsave nesting limit
            - PageSize: page width and height in points
            - Resolution: output resolution in dots per inch
            - OutputDirectory: where rendered pages are written
    """

    return {
        "MaxOpStack": ps.O_STACK_MAX,
        "MaxDictStack": ps.D_STACK_MAX,
        "MaxExecDepth": ps.E_DEPTH_MAX,
        "MaxGStack": ps.G_STACK_MAX,
        "PageSize": [612, 792],
        "Resolution": 72,
        "OutputDirectory": ".",
    }


def create_stacks(system_params: Dict[str, Any]) -> Tuple[ps.OperandStack, ps.DictionaryStack]:
    """Build an empty operand stack and a dictionary stack holding systemdict and userdict."""

    ostack = ps.OperandStack(system_params["MaxOpStack"])
    dstack = ps.DictionaryStack(
        ps_dict.create_system_dict(b"systemdict"),
        ps.Dict(b"userdict"),
        system_params["MaxDictStack"],
    )
    return ostack, dstack


def create_graphics_context(system_params: Dict[str, Any], systemdict: ps.Dict) -> ps.GraphicsContext:
    width, height = system_params["PageSize"]
    gfx = ps.GraphicsContext(width, height, system_params["MaxGStack"])
    ps_dict.add_graphics_operators(systemdict, gfx)
    return gfx


def merge_system_params(overrides: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    params = init_system_params()
    if overrides:
        params.update(overrides)
    return params
