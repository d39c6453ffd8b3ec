# psview - A PostScript Interpreter
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

import copy

from ..core import types as ps


def _paint(gfx: ps.GraphicsContext, element) -> None:
    gfx.display_list.append(element)

    # Clear current path
    gfx.gstate.path = ps.Path()
    gfx.gstate.currentpoint = None


def fill(gfx: ps.GraphicsContext, ostack, dstack) -> None:
    """
    - **fill** -


    paints the area inside the current path with the current color. The nonzero winding
    number rule is used to determine what points lie inside the path.

    **fill** implicitly closes any open subpaths of the current path before painting.
    After filling the current path, **fill** clears it with an implicit **newpath** operation. To
    preserve the current path across a **fill** operation, use the sequence

        **gsave**
            **fill**
        **grestore**

    **Errors**:     none
    **See Also**:   **stroke**, **eofill**
    """

    if gfx.gstate.path:
        path = copy.deepcopy(gfx.gstate.path)
        _paint(gfx, ps.Fill(path, gfx.gstate.device_color(), ps.WINDING_NON_ZERO))


def eofill(gfx: ps.GraphicsContext, ostack, dstack) -> None:
    """
    - **eofill** -


    paints the area inside the current path with the current color. The even-odd rule is
    used to determine what points lie inside the path. In all other respects, the behavior
    of **eofill** is identical to that of **fill**.

    **Errors**:     none
    **See Also**:   **fill**
    """

    if gfx.gstate.path:
        path = copy.deepcopy(gfx.gstate.path)
        _paint(gfx, ps.Fill(path, gfx.gstate.device_color(), ps.WINDING_EVEN_ODD))


def stroke(gfx: ps.GraphicsContext, ostack, dstack) -> None:
    """
    - **stroke** -


    paints a line centered on the current path, with sides parallel to the path segments.
    The line's graphics properties are defined by various parameters of the graphics state,
    most notably the current line width, the current color, the current line join,
    line cap and miter limit.

    **stroke** clears the current path with an implicit **newpath**.

    **Errors**:     none
    **See Also**:   **setlinewidth**, **setlinejoin**, **setmiterlimit**, **setlinecap**, **fill**
    """

    if gfx.gstate.path:
        path = copy.deepcopy(gfx.gstate.path)
        _paint(gfx, ps.Stroke(path, gfx.gstate.device_color(), gfx.gstate))
