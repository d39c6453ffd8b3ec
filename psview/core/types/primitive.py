# psview - A PostScript Interpreter
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
psview Types Primitive Classes Module

This module contains the numeric types. They are immutable and compare by
mathematical value, so an integer and a real holding the same number are
equal.
"""

import math
from typing import Union

from .base import PSObject
from .constants import (
    ACCESS_UNLIMITED, ATTRIB_LIT,
    T_INT, T_REAL, MAX_INTEGER, MIN_INTEGER
)


class Int(PSObject):
    """Integer type - a signed 64-bit whole number."""
    TYPE = T_INT

    __slots__ = ()

    def __init__(self, val: int, access: int = ACCESS_UNLIMITED, attrib: int = ATTRIB_LIT) -> None:
        if not MIN_INTEGER <= val <= MAX_INTEGER:
            raise OverflowError(f"{val} does not fit a 64-bit integer")
        super().__init__(int(val), access, attrib)

    def __eq__(self, other) -> bool:
        if not isinstance(other, (Int, Real)):
            return NotImplemented
        return self.val == other.val

    def __hash__(self) -> int:
        return hash(self.val)

    def __str__(self) -> str:
        return str(self.val)

    def __repr__(self) -> str:
        return f"Int({self.val})"


class Real(PSObject):
    """Real type - a 64-bit floating-point number."""
    TYPE = T_REAL

    __slots__ = ()

    def __init__(self, val: float, access: int = ACCESS_UNLIMITED, attrib: int = ATTRIB_LIT) -> None:
        super().__init__(float(val), access, attrib)

    def __eq__(self, other) -> bool:
        if not isinstance(other, (Int, Real)):
            return NotImplemented
        return self.val == other.val

    def __hash__(self) -> int:
        return hash(self.val)

    def __str__(self) -> str:
        if not math.isfinite(self.val):
            return str(self.val)

        # Round to 6 decimal places to avoid floating-point noise
        rounded = round(self.val, 6)

        if rounded == int(rounded) and abs(rounded) < 1e10:
            return f"{int(rounded)}.0"

        formatted = f"{rounded:.6f}".rstrip('0')
        if formatted.endswith('.'):
            formatted += '0'
        return formatted

    def __repr__(self) -> str:
        return f"Real({self.val!r})"


def number(val: Union[int, float]) -> PSObject:
    """
    Wrap an arithmetic result, applying the promotion rule.

    Integers stay integers while they fit in 64 bits and are promoted to
    reals otherwise; floats are always reals.
    """
    if isinstance(val, int):
        if MIN_INTEGER <= val <= MAX_INTEGER:
            return Int(val)
        return Real(float(val))
    return Real(val)
