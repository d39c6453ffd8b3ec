# psview - A PostScript Interpreter
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

import copy
from typing import Union

from ..core import error as ps_error
from ..core import types as ps


def _setcurrentpoint(gfx: ps.GraphicsContext, x: Union[int, float], y: Union[int, float]) -> None:
    # the currentpoint is always cast to float
    gfx.gstate.currentpoint = ps.Point(float(x), float(y))


def _check_point(ostack, op: str) -> None:
    # 1. STACKUNDERFLOW - Check stack depth
    if len(ostack) < 2:
        ps_error.e(ps_error.STACKUNDERFLOW, op)

    # 2. TYPECHECK - Check operand types
    if ostack[-1].TYPE not in ps.NUMERIC_TYPES or ostack[-2].TYPE not in ps.NUMERIC_TYPES:
        ps_error.e(ps_error.TYPECHECK, op)


def _pop_point(ostack):
    y = ostack.pop().val
    x = ostack.pop().val
    return x, y


def _append_moveto(gfx: ps.GraphicsContext, x: float, y: float) -> None:
    path = gfx.gstate.path
    # consecutive movetos collapse into the last one
    if path and len(path[-1]) == 1 and isinstance(path[-1][0], ps.MoveTo):
        path[-1][0] = ps.MoveTo(ps.Point(float(x), float(y)))
    else:
        subpath = ps.SubPath()
        subpath.append(ps.MoveTo(ps.Point(float(x), float(y))))
        path.append(subpath)
    _setcurrentpoint(gfx, x, y)


def _append_lineto(gfx: ps.GraphicsContext, x: float, y: float) -> None:
    path = gfx.gstate.path
    # a segment after closepath starts a new subpath at the current point
    if isinstance(path[-1][-1], ps.ClosePath):
        start = gfx.gstate.currentpoint
        subpath = ps.SubPath()
        subpath.append(ps.MoveTo(copy.copy(start)))
        path.append(subpath)
    path[-1].append(ps.LineTo(ps.Point(float(x), float(y))))
    _setcurrentpoint(gfx, x, y)


def newpath(gfx: ps.GraphicsContext, ostack, dstack):
    """
    - **newpath** -


    initializes the current path in the graphics state to an empty path.
    The current point becomes undefined.

    **Errors**:     none
    **See Also**:   **closepath**, **stroke**, **fill**
    """
    gfx.gstate.path = ps.Path()
    gfx.gstate.currentpoint = None


def moveto(gfx: ps.GraphicsContext, ostack, dstack):
    """
    x y **moveto** -


    starts a new subpath of the current path. **moveto** sets the current point in the
    graphics state to the user space coordinate (x, y) without adding any line segments
    to the current path.

    If the previous path operation in the current path was also a **moveto** or **rmoveto**,
    that point is deleted from the current path and the new **moveto** point replaces it.

    **Errors**:     **stackunderflow**, **typecheck**
    **See Also**:   **rmoveto**, **lineto**, **closepath**
    """
    _check_point(ostack, moveto.__name__)

    x, y = _pop_point(ostack)
    _append_moveto(gfx, x, y)


def rmoveto(gfx: ps.GraphicsContext, ostack, dstack):
    """
    dx dy **rmoveto** -


    (relative **moveto**) starts a new subpath of the current path in the same manner as
    **moveto**. However, the number pair (dx, dy) is interpreted as a displacement relative
    to the current point (x, y) rather than as an absolute coordinate.

    **Errors**:     **nocurrentpoint**, **stackunderflow**, **typecheck**
    **See Also**:   **moveto**, **rlineto**
    """
    _check_point(ostack, rmoveto.__name__)

    if gfx.gstate.currentpoint is None:
        return ps_error.e(ps_error.NOCURRENTPOINT, rmoveto.__name__)

    dx, dy = _pop_point(ostack)
    cp = gfx.gstate.currentpoint
    _append_moveto(gfx, cp.x + dx, cp.y + dy)


def lineto(gfx: ps.GraphicsContext, ostack, dstack):
    """
    x y **lineto** -


    appends a straight line segment to the current path. The line extends from the current
    point to the point (x, y) in user space; (x, y) then becomes the current point.

    If the current point is undefined because the current path is empty, a
    **nocurrentpoint** error occurs.

    **Errors**:     **nocurrentpoint**, **stackunderflow**, **typecheck**
    **See Also**:   **rlineto**, **moveto**
    """
    _check_point(ostack, lineto.__name__)

    if gfx.gstate.currentpoint is None:
        return ps_error.e(ps_error.NOCURRENTPOINT, lineto.__name__)

    x, y = _pop_point(ostack)
    _append_lineto(gfx, x, y)


def rlineto(gfx: ps.GraphicsContext, ostack, dstack):
    """
    dx dy **rlineto** -


    (relative **lineto**) appends a straight line segment to the current path in the same
    manner as **lineto**. However, the number pair (dx, dy) is interpreted as a displacement
    relative to the current point (x, y) rather than as an absolute coordinate.

    **Errors**:     **nocurrentpoint**, **stackunderflow**, **typecheck**
    **See Also**:   **lineto**, **rmoveto**
    """
    _check_point(ostack, rlineto.__name__)

    if gfx.gstate.currentpoint is None:
        return ps_error.e(ps_error.NOCURRENTPOINT, rlineto.__name__)

    dx, dy = _pop_point(ostack)
    cp = gfx.gstate.currentpoint
    _append_lineto(gfx, cp.x + dx, cp.y + dy)


def closepath(gfx: ps.GraphicsContext, ostack, dstack):
    """
    - **closepath** -


    closes the current subpath by appending a straight line segment connecting the
    current point to the subpath's starting point.

    If the current subpath is already closed or the current path is empty, **closepath**
    does nothing.

    **Errors**:     none
    **See Also**:   **newpath**, **moveto**, **lineto**
    """

    path = gfx.gstate.path
    if path and not isinstance(path[-1][-1], ps.ClosePath):
        path[-1].append(ps.ClosePath())

        # the start of the subpath becomes the current point
        gfx.gstate.currentpoint = copy.copy(path[-1][0].p)
