# psview - A PostScript Interpreter
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
psview Types Graphics Classes Module

This module contains the graphics types: the graphics state, paths and the
display list elements recorded by the painting operators. Devices replay
the display list; the interpreter core never draws anything itself.
"""

import copy
from typing import List, Optional, Union

from .constants import (
    COLOR_SPACE_GRAY, G_STACK_MAX, LINE_CAP_BUTT, LINE_JOIN_MITER, WINDING_NON_ZERO
)
from .context import Stack


# SubPath Elements
class Point(object):
    def __init__(self, x: Union[int, float], y: Union[int, float]) -> None:
        self.x = x
        self.y = y

    def __eq__(self, other) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return (self.x, self.y) == (other.x, other.y)

    def __repr__(self) -> str:
        return f"Point({self.x}, {self.y})"


class MoveTo(object):
    def __init__(self, p: Point) -> None:
        self.p = p

    def __repr__(self) -> str:
        return f"MoveTo({self.p.x}, {self.p.y})"


class LineTo(object):
    def __init__(self, p: Point) -> None:
        self.p = p

    def __repr__(self) -> str:
        return f"LineTo({self.p.x}, {self.p.y})"


class ClosePath(object):
    def __repr__(self) -> str:
        return "ClosePath()"


# Path Elements
class Path(list):
    """
    A Path is a list of SubPaths.
    SubPaths consist of path construction elements: MoveTo, LineTo, ClosePath.
    """


class SubPath(list):
    pass


# GSTATE
class GraphicsState(object):
    def __init__(self) -> None:
        self.currentpoint = None  # a Point when not None
        self.path = Path()  # a list of SubPaths
        self.color_space = COLOR_SPACE_GRAY
        self.color = [0.0]  # single gray component for black
        self.line_width = 1.0
        self.line_cap = LINE_CAP_BUTT
        self.line_join = LINE_JOIN_MITER
        self.miter_limit = 10.0

    # Attributes that need deep copy (mutable containers that could be modified)
    _DEEPCOPY_ATTRS = frozenset({'path', 'color', 'currentpoint'})

    _ALL_ATTRS = (
        'currentpoint', 'path', 'color_space', 'color', 'line_width',
        'line_cap', 'line_join', 'miter_limit',
    )

    def copy(self) -> "GraphicsState":
        """
        Copy for gsave - shallow copy most attrs, deep copy only mutables.

        When adding new attributes to GraphicsState, add them to _ALL_ATTRS
        and, if mutable, to _DEEPCOPY_ATTRS.
        """
        new_gs = object.__new__(GraphicsState)
        for attr in GraphicsState._ALL_ATTRS:
            value = getattr(self, attr)
            if attr in GraphicsState._DEEPCOPY_ATTRS:
                setattr(new_gs, attr, copy.deepcopy(value))
            else:
                setattr(new_gs, attr, value)
        return new_gs

    def device_color(self) -> List[float]:
        """The current color as RGB components in 0.0-1.0."""
        if self.color_space == COLOR_SPACE_GRAY:
            return [self.color[0]] * 3
        return list(self.color)


# Display list elements
class Fill:
    def __init__(self, path: Path, device_color: List[float], winding_rule: int = WINDING_NON_ZERO) -> None:
        self.path = path
        self.color = device_color
        self.winding_rule = winding_rule


class Stroke:
    def __init__(self, path: Path, device_color: List[float], gs: GraphicsState) -> None:
        self.path = path
        self.color = device_color
        self.line_width = gs.line_width
        self.line_cap = gs.line_cap
        self.line_join = gs.line_join
        self.miter_limit = gs.miter_limit


class DisplayList(list):
    def __init__(self, width: int = 0, height: int = 0) -> None:
        super().__init__()
        self.width = width
        self.height = height


class GraphicsContext(object):
    """
    Everything the graphics operators read and write: the current graphics
    state, the gsave stack, the display list of the page being built and
    the pages completed by ``showpage``.
    """

    def __init__(self, width: int, height: int, max_gstack: int = G_STACK_MAX) -> None:
        self.width = width
        self.height = height
        self.gstate = GraphicsState()
        self.gstate_stack = Stack(max_gstack)
        self.display_list = DisplayList(width, height)
        self.pages: List[DisplayList] = []

    def show_page(self) -> DisplayList:
        page = self.display_list
        self.pages.append(page)
        self.display_list = DisplayList(self.width, self.height)
        self.gstate = GraphicsState()
        self.gstate_stack.clear()
        return page

    def pending_page(self) -> Optional[DisplayList]:
        """The page under construction, if anything has been painted on it."""
        return self.display_list if self.display_list else None
