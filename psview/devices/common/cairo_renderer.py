# psview - A PostScript Interpreter
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Shared Cairo Rendering Module

Replays a display list onto a Cairo context. Display list coordinates are
in user space (points, origin at the lower left); the renderer scales them
to the device resolution and flips the y axis.
"""

import cairo

from ...core import types as ps

_FILL_RULES = {
    ps.WINDING_NON_ZERO: cairo.FILL_RULE_WINDING,
    ps.WINDING_EVEN_ODD: cairo.FILL_RULE_EVEN_ODD,
}

_LINE_CAPS = {
    ps.LINE_CAP_BUTT: cairo.LINE_CAP_BUTT,
    ps.LINE_CAP_ROUND: cairo.LINE_CAP_ROUND,
    ps.LINE_CAP_SQUARE: cairo.LINE_CAP_SQUARE,
}

_LINE_JOINS = {
    ps.LINE_JOIN_MITER: cairo.LINE_JOIN_MITER,
    ps.LINE_JOIN_ROUND: cairo.LINE_JOIN_ROUND,
    ps.LINE_JOIN_BEVEL: cairo.LINE_JOIN_BEVEL,
}


def _set_color(cairo_ctx, color) -> None:
    # Safely handle color - ensure we have at least 3 components
    color = color if color else [0, 0, 0]
    if len(color) >= 3:
        cairo_ctx.set_source_rgb(color[0], color[1], color[2])
    elif len(color) == 1:
        cairo_ctx.set_source_rgb(color[0], color[0], color[0])
    else:
        cairo_ctx.set_source_rgb(0, 0, 0)


def _build_path(cairo_ctx, path: ps.Path) -> None:
    cairo_ctx.new_path()
    for subpath in path:
        for pc_item in subpath:
            if isinstance(pc_item, ps.MoveTo):
                cairo_ctx.move_to(pc_item.p.x, pc_item.p.y)
                continue
            if isinstance(pc_item, ps.LineTo):
                cairo_ctx.line_to(pc_item.p.x, pc_item.p.y)
                continue
            if isinstance(pc_item, ps.ClosePath):
                cairo_ctx.close_path()


def render_display_list(display_list: ps.DisplayList, cairo_ctx, page_height: float,
                        scale: float = 1.0, min_line_width: float = 1.0) -> None:
    """
    Render a display list to a Cairo context.

    Device implementations should:
    1. Create a Cairo surface and context
    2. Set up any device-specific initialization (background color, etc.)
    3. Call this function to render the display list
    4. Finalize output (write to file, display to screen, etc.)

    Args:
        display_list: the elements recorded for one page
        cairo_ctx: Cairo context to render to
        page_height: Height of the page in points (for the y flip)
        scale: device pixels per point
        min_line_width: Minimum stroke width in device pixels
    """

    cairo_ctx.save()
    cairo_ctx.translate(0, page_height * scale)
    cairo_ctx.scale(scale, -scale)

    for item in display_list:
        if isinstance(item, ps.Fill):
            _build_path(cairo_ctx, item.path)
            _set_color(cairo_ctx, item.color)
            cairo_ctx.set_fill_rule(_FILL_RULES.get(item.winding_rule, cairo.FILL_RULE_WINDING))
            cairo_ctx.fill()
            continue

        if isinstance(item, ps.Stroke):
            _build_path(cairo_ctx, item.path)
            _set_color(cairo_ctx, item.color)
            cairo_ctx.set_line_join(_LINE_JOINS.get(item.line_join, cairo.LINE_JOIN_MITER))
            cairo_ctx.set_line_cap(_LINE_CAPS.get(item.line_cap, cairo.LINE_CAP_BUTT))
            cairo_ctx.set_miter_limit(item.miter_limit)
            # a zero width line is the thinnest line the device can draw
            cairo_ctx.set_line_width(max(item.line_width, min_line_width / scale))
            cairo_ctx.stroke()
            continue

    cairo_ctx.restore()
