# psview - A PostScript Interpreter
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Graphics state operators.

Each operator takes the GraphicsContext it draws into ahead of the two
stacks; ``add_graphics_operators`` binds it when the interpreter is built
with graphics enabled.
"""

from ..core import error as ps_error
from ..core import types as ps


def gsave(gfx: ps.GraphicsContext, ostack, dstack) -> None:
    """
    - **gsave** -


    pushes a copy of the current graphics state on the graphics state stack. The saved
    state can later be restored by a matching **grestore**.

    **Errors**:     **limitcheck**
    **See Also**:   **grestore**
    """

    if gfx.gstate_stack.is_full():
        return ps_error.e(ps_error.LIMITCHECK, gsave.__name__)

    gfx.gstate_stack.append(gfx.gstate.copy())


def grestore(gfx: ps.GraphicsContext, ostack, dstack) -> None:
    """
    - **grestore** -


    resets the current graphics state from the one on the top of the graphics state stack
    and pops the graphics state stack. If the graphics state stack is empty, **grestore**
    has no effect.

    **Errors**:     none
    **See Also**:   **gsave**
    """

    if len(gfx.gstate_stack):
        gfx.gstate = gfx.gstate_stack.pop()


def setgray(gfx: ps.GraphicsContext, ostack, dstack) -> None:
    """
    num **setgray** -

    sets the current color space to **DeviceGray** and the current color to the gray level
    specified by num, 0.0 denoting black and 1.0 denoting white. If num is outside this
    range, the nearest valid value is substituted without error indication.

    **Errors**:     **stackunderflow**, **typecheck**
    **See Also**:   **setrgbcolor**
    """

    # 1. STACKUNDERFLOW - Check stack depth
    if not len(ostack):
        return ps_error.e(ps_error.STACKUNDERFLOW, setgray.__name__)

    # 2. TYPECHECK - Check operand type
    if ostack[-1].TYPE not in ps.NUMERIC_TYPES:
        return ps_error.e(ps_error.TYPECHECK, setgray.__name__)

    gray = max(0.0, min(1.0, float(ostack[-1].val)))

    gfx.gstate.color_space = ps.COLOR_SPACE_GRAY
    gfx.gstate.color = [gray]

    ostack.pop()


def setrgbcolor(gfx: ps.GraphicsContext, ostack, dstack) -> None:
    """
    red green blue **setrgbcolor** -

    sets the current color space to **DeviceRGB** and the current color to the component
    values specified by red, green, and blue. Each component must be a number in the
    range 0.0 to 1.0. If any of the operands is outside this range, the nearest valid
    value is substituted without error indication.

    **Errors**:     **stackunderflow**, **typecheck**
    **See Also**:   **setgray**
    """

    # 1. STACKUNDERFLOW - Check stack depth
    if len(ostack) < 3:
        return ps_error.e(ps_error.STACKUNDERFLOW, setrgbcolor.__name__)

    # 2. TYPECHECK - Check operand types
    for i in range(-3, 0):
        if ostack[i].TYPE not in ps.NUMERIC_TYPES:
            return ps_error.e(ps_error.TYPECHECK, setrgbcolor.__name__)

    rgb = [max(0.0, min(1.0, float(ostack[i].val))) for i in range(-3, 0)]

    gfx.gstate.color_space = ps.COLOR_SPACE_RGB
    gfx.gstate.color = rgb

    for _ in range(3):
        ostack.pop()


def setlinewidth(gfx: ps.GraphicsContext, ostack, dstack) -> None:
    """
    num **setlinewidth** -


    sets the line width parameter in the graphics state to num. This parameter controls
    the thickness of lines rendered by subsequent execution of the **stroke** operator.
    A negative width is taken as its absolute value.

    **Errors**:     **stackunderflow**, **typecheck**
    **See Also**:   **stroke**
    """

    # 1. STACKUNDERFLOW - Check stack depth
    if not len(ostack):
        return ps_error.e(ps_error.STACKUNDERFLOW, setlinewidth.__name__)

    # 2. TYPECHECK - Check operand type
    if ostack[-1].TYPE not in ps.NUMERIC_TYPES:
        return ps_error.e(ps_error.TYPECHECK, setlinewidth.__name__)

    gfx.gstate.line_width = abs(float(ostack.pop().val))


def _set_choice(gfx: ps.GraphicsContext, ostack, op: str, attr: str) -> None:
    # 1. STACKUNDERFLOW - Check stack depth
    if not len(ostack):
        return ps_error.e(ps_error.STACKUNDERFLOW, op)

    # 2. TYPECHECK - Check operand type
    if ostack[-1].TYPE != ps.T_INT:
        return ps_error.e(ps_error.TYPECHECK, op)

    # 3. RANGECHECK - 0, 1 or 2
    if ostack[-1].val not in (0, 1, 2):
        return ps_error.e(ps_error.RANGECHECK, op)

    setattr(gfx.gstate, attr, ostack.pop().val)


def setlinecap(gfx: ps.GraphicsContext, ostack, dstack) -> None:
    """
    int **setlinecap** -


    sets the line cap parameter in the graphics state to int, which must be one of the
    integers 0 (butt cap), 1 (round cap), or 2 (projecting square cap).

    **Errors**:     **rangecheck**, **stackunderflow**, **typecheck**
    **See Also**:   **setlinejoin**, **stroke**
    """
    _set_choice(gfx, ostack, setlinecap.__name__, "line_cap")


def setlinejoin(gfx: ps.GraphicsContext, ostack, dstack) -> None:
    """
    int **setlinejoin** -


    sets the line join parameter in the graphics state to int, which must be one of the
    integers 0 (miter join), 1 (round join), or 2 (bevel join).

    **Errors**:     **rangecheck**, **stackunderflow**, **typecheck**
    **See Also**:   **setlinecap**, **setmiterlimit**, **stroke**
    """
    _set_choice(gfx, ostack, setlinejoin.__name__, "line_join")


def setmiterlimit(gfx: ps.GraphicsContext, ostack, dstack) -> None:
    """
    num **setmiterlimit** -


    sets the miter limit parameter in the graphics state to num, which must be a number
    greater than or equal to 1. The miter limit controls the treatment of corners by
    **stroke** when miter joins have been specified.

    **Errors**:     **rangecheck**, **stackunderflow**, **typecheck**
    **See Also**:   **setlinejoin**, **stroke**
    """

    # 1. STACKUNDERFLOW - Check stack depth
    if not len(ostack):
        return ps_error.e(ps_error.STACKUNDERFLOW, setmiterlimit.__name__)

    # 2. TYPECHECK - Check operand type
    if ostack[-1].TYPE not in ps.NUMERIC_TYPES:
        return ps_error.e(ps_error.TYPECHECK, setmiterlimit.__name__)

    # 3. RANGECHECK - Check limit
    if ostack[-1].val < 1:
        return ps_error.e(ps_error.RANGECHECK, setmiterlimit.__name__)

    gfx.gstate.miter_limit = float(ostack.pop().val)
