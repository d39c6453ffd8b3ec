# psview - A PostScript Interpreter
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
psview Types Base Classes Module

This module contains the base class that every psview object derives from.
It defines the fields shared by all objects (payload, access mode and
literal/executable attribute) and the checked payload accessor.
"""

from typing import Any

from .. import error as ps_error
from .constants import (
    ACCESS_UNLIMITED, ATTRIB_LIT, ATTRIB_EXEC
)

# Host strings and program text map to the bytes held by names, strings and
# dictionary keys through UTF-8; undecodable bytes survive as lone surrogates.
TEXT_ENCODING = "utf-8"


def encode_text(text: str) -> bytes:
    return text.encode(TEXT_ENCODING, "surrogateescape")


def decode_text(data: bytes) -> str:
    return data.decode(TEXT_ENCODING, "surrogateescape")


class PSObject(object):
    """
    Base class for all psview objects.

    The type tag is the class attribute ``TYPE`` and is therefore fixed when
    the object is constructed. Objects are never modified after construction;
    the stacks share references to them freely.
    """
    TYPE = None  # Base class - no specific type

    __slots__ = ("val", "access", "attrib")

    def __init__(
        self,
        val: Any,
        access: int = ACCESS_UNLIMITED,
        attrib: int = ATTRIB_LIT,
    ) -> None:
        self.val = val
        self.access = access
        self.attrib = attrib

    def is_executable(self) -> bool:
        return self.attrib == ATTRIB_EXEC

    def checked(self, *types: int, command: str = "") -> Any:
        """
        Return the payload, provided this object is one of ``types``.

        Raises:
            TypeCheck: the object carries a different tag
        """
        if self.TYPE not in types:
            ps_error.e(ps_error.TYPECHECK, command, f"unexpected {self!r}")
        return self.val

    def __eq__(self, other) -> bool:
        if not isinstance(other, PSObject):
            return NotImplemented
        return self.TYPE == other.TYPE and self.val == other.val

    def __hash__(self) -> int:
        return hash((self.TYPE, self.val))
