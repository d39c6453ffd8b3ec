# psview - A PostScript Interpreter
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

import functools
from typing import Any

from . import device_output as ps_device_output
from . import graphics_state as ps_gstate
from . import math as ps_math
from . import operand_stack as ps_operand_stack
from . import painting as ps_painting
from . import path as ps_path
from ..core import types as ps


def add_to_dict(d: ps.Dict, name: str, the_type: Any, val) -> None:
    d.put(name, the_type(val))


def create_system_dict(name: bytes = b"systemdict") -> ps.Dict:
    """
    Build the table of builtin operators.

    A fresh table is built for every interpreter. It is returned read-only,
    so host definitions land in userdict above it.
    """
    obj = ps.Dict(name)

    ops = [
        # dictionary operators
        ("countdictstack", ps.Operator, countdictstack),
        # math operators
        ("abs", ps.Operator, ps_math.ps_abs),
        ("add", ps.Operator, ps_math.add),
        ("ceiling", ps.Operator, ps_math.ceiling),
        ("div", ps.Operator, ps_math.div),
        ("floor", ps.Operator, ps_math.floor),
        ("idiv", ps.Operator, ps_math.idiv),
        ("mod", ps.Operator, ps_math.mod),
        ("mul", ps.Operator, ps_math.mul),
        ("neg", ps.Operator, ps_math.neg),
        ("round", ps.Operator, ps_math.ps_round),
        ("sqrt", ps.Operator, ps_math.sqrt),
        ("sub", ps.Operator, ps_math.sub),
        ("truncate", ps.Operator, ps_math.truncate),
        # operand stack manipulation operators
        ("clear", ps.Operator, ps_operand_stack.clear),
        ("copy", ps.Operator, ps_operand_stack.ps_copy),
        ("count", ps.Operator, ps_operand_stack.count),
        ("dup", ps.Operator, ps_operand_stack.dup),
        ("exch", ps.Operator, ps_operand_stack.exch),
        ("index", ps.Operator, ps_operand_stack.index),
        ("pop", ps.Operator, ps_operand_stack.pop),
        ("pstack", ps.Operator, ps_operand_stack.pstack),
        ("roll", ps.Operator, ps_operand_stack.roll),
    ]

    for op_name, the_type, val in ops:
        add_to_dict(obj, op_name, the_type, val)

    obj.access = ps.ACCESS_READ_ONLY
    return obj


def add_graphics_operators(d: ps.Dict, gfx: ps.GraphicsContext) -> None:
    """
    Install the path, painting and graphics state operators, each bound to
    the GraphicsContext it draws into.
    """

    ops = [
        # graphics state operators
        ("grestore", ps_gstate.grestore),
        ("gsave", ps_gstate.gsave),
        ("setgray", ps_gstate.setgray),
        ("setlinecap", ps_gstate.setlinecap),
        ("setlinejoin", ps_gstate.setlinejoin),
        ("setlinewidth", ps_gstate.setlinewidth),
        ("setmiterlimit", ps_gstate.setmiterlimit),
        ("setrgbcolor", ps_gstate.setrgbcolor),
        # path construction operators
        ("closepath", ps_path.closepath),
        ("lineto", ps_path.lineto),
        ("moveto", ps_path.moveto),
        ("newpath", ps_path.newpath),
        ("rlineto", ps_path.rlineto),
        ("rmoveto", ps_path.rmoveto),
        # painting operators
        ("eofill", ps_painting.eofill),
        ("fill", ps_painting.fill),
        ("stroke", ps_painting.stroke),
        # device output operators
        ("showpage", ps_device_output.showpage),
    ]

    # the table is read-only once built, so write its entries directly
    for op_name, func in ops:
        d.val[op_name.encode("ascii")] = ps.Operator(functools.partial(func, gfx), op_name)


def countdictstack(ostack, dstack):
    """
    – **countdictstack** int


    counts the number of dictionaries currently on the dictionary stack and pushes
    this count on the operand stack.

    **Errors**:     **stackoverflow**
    **See Also**:   **begin**, **end**
    """

    ostack.push(ps.Int(dstack.depth()))
