# psview - A PostScript Interpreter
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
psview Types Composite String Module

This module contains the String type, an immutable byte sequence. The
scanner never produces strings; they are created by host code and travel
through the stacks like any other object.
"""

from typing import Union

from ..base import PSObject, decode_text, encode_text
from ..constants import ACCESS_UNLIMITED, ATTRIB_LIT, T_STRING


class String(PSObject):
    TYPE = T_STRING

    __slots__ = ()

    def __init__(
        self,
        data: Union[str, bytes, bytearray],
        access: int = ACCESS_UNLIMITED,
        attrib: int = ATTRIB_LIT,
    ) -> None:
        if isinstance(data, str):
            data = encode_text(data)
        super().__init__(bytes(data), access, attrib)

    def python_string(self) -> str:
        return decode_text(self.val)

    def __len__(self) -> int:
        return len(self.val)

    def __str__(self) -> str:
        return f"({self.python_string()})"

    def __repr__(self) -> str:
        return f"String({self.val!r})"
