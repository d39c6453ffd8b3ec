# psview - A PostScript Interpreter
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
psview Types Composite Name Module

This module contains the Name type. A name is a symbol used as a dictionary
key; its executable attribute decides whether the executor pushes it as a
literal or resolves it through the dictionary stack and runs the result.
"""

from typing import Union

from ..base import PSObject, decode_text, encode_text
from ..constants import (
    ACCESS_UNLIMITED, ATTRIB_LIT, ATTRIB_EXEC, T_NAME
)


class Name(PSObject):
    TYPE = T_NAME

    __slots__ = ("_hash",)

    def __init__(
        self,
        name: Union[str, bytes, bytearray],
        access: int = ACCESS_UNLIMITED,
        attrib: int = ATTRIB_LIT,
    ) -> None:
        if isinstance(name, str):
            name = encode_text(name)
        val = bytes(name)
        super().__init__(val, access, attrib)
        # Name.val is immutable, cache its hash for dictionary lookups
        self._hash = hash(val)

    @classmethod
    def executable(cls, name: Union[str, bytes, bytearray]) -> "Name":
        return cls(name, attrib=ATTRIB_EXEC)

    @property
    def text(self) -> str:
        return decode_text(self.val)

    def __hash__(self):
        return self._hash

    def __eq__(self, other) -> bool:
        if isinstance(other, Name):
            return self.val == other.val
        if isinstance(other, bytes):
            return self.val == other
        return NotImplemented

    def __str__(self) -> str:
        return self.text if self.attrib == ATTRIB_EXEC else f"/{self.text}"

    def __repr__(self) -> str:
        return f"Name({self.__str__()!r})"
