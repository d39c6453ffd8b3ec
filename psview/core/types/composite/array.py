# psview - A PostScript Interpreter
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
psview Types Composite Array Module

An executable Array is a procedure body: when a name resolves to one, the
executor runs its elements in order under the normal dispatch rule. The
scanner has no bracket syntax, so arrays are built by host code (see
``Interpreter.define``).
"""

from typing import Iterable

from ..base import PSObject
from ..constants import ACCESS_UNLIMITED, ATTRIB_LIT, ATTRIB_EXEC, T_ARRAY


class Array(PSObject):
    TYPE = T_ARRAY

    __slots__ = ()

    def __init__(
        self,
        items: Iterable[PSObject] = (),
        access: int = ACCESS_UNLIMITED,
        attrib: int = ATTRIB_LIT,
    ) -> None:
        super().__init__(tuple(items), access, attrib)

    @classmethod
    def procedure(cls, items: Iterable[PSObject], access: int = ACCESS_UNLIMITED) -> "Array":
        return cls(items, access=access, attrib=ATTRIB_EXEC)

    def __len__(self) -> int:
        return len(self.val)

    def __iter__(self):
        return iter(self.val)

    def __str__(self) -> str:
        body = " ".join(str(item) for item in self.val)
        return f"{{{body}}}" if self.attrib == ATTRIB_EXEC else f"[{body}]"

    def __repr__(self) -> str:
        return f"Array({self.__str__()!r})"
