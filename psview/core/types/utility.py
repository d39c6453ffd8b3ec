# psview - A PostScript Interpreter
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
psview Types Utility Classes Module

This module contains the Operator type, the object that wraps a native
operator function so it can live in a dictionary and be invoked by the
executor.
"""

from __future__ import annotations

from typing import Callable, Optional

from .base import PSObject
from .constants import ACCESS_UNLIMITED, ATTRIB_EXEC, T_OPERATOR


class Operator(PSObject):
    TYPE = T_OPERATOR

    __slots__ = ("name",)

    def __init__(self, op: Callable, name: Optional[str] = None, attrib: int = ATTRIB_EXEC) -> None:
        super().__init__(op, ACCESS_UNLIMITED, attrib)
        if name is None:
            name = op.__name__[3:] if op.__name__.startswith("ps_") else op.__name__
        self.name = name

    def __call__(self, ostack, dstack) -> None:
        self.val(ostack, dstack)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Operator):
            return NotImplemented
        return self.val is other.val

    def __hash__(self) -> int:
        return id(self.val)

    def __str__(self) -> str:
        return f"--{self.name}--"

    def __repr__(self) -> str:
        return self.__str__()
