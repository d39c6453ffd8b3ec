# psview - A PostScript Interpreter
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
psview Types Composite Dict Module

This module contains the Dict type used for the frames of the dictionary
stack. Keys are name texts (bytes); a later definition of the same key
replaces the earlier one.
"""

from typing import Iterator, Optional, Union

from ..base import PSObject, decode_text, encode_text
from ..constants import ACCESS_UNLIMITED, ATTRIB_LIT, T_DICT
from .name import Name


class Dict(PSObject):
    TYPE = T_DICT

    __slots__ = ("name",)

    def __init__(
        self,
        name: bytes = b"",
        access: int = ACCESS_UNLIMITED,
        attrib: int = ATTRIB_LIT,
    ) -> None:
        super().__init__({}, access, attrib)
        self.name = name

    @staticmethod
    def create_key(key: Union[Name, str, bytes]) -> bytes:
        if isinstance(key, Name):
            return key.val
        if isinstance(key, str):
            return encode_text(key)
        return bytes(key)

    def get(self, key: Union[Name, str, bytes]) -> Optional[PSObject]:
        return self.val.get(self.create_key(key))

    def put(self, key: Union[Name, str, bytes], value: PSObject) -> None:
        self.val[self.create_key(key)] = value

    def __contains__(self, key) -> bool:
        return self.create_key(key) in self.val

    def __len__(self) -> int:
        return len(self.val)

    def __iter__(self) -> Iterator[bytes]:
        return iter(self.val)

    # frames are identified by identity, not by content
    __eq__ = object.__eq__
    __hash__ = object.__hash__

    def __str__(self) -> str:
        return f"-dict:{decode_text(self.name) or len(self.val)}-"

    def __repr__(self) -> str:
        return self.__str__()
