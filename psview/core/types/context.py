# psview - A PostScript Interpreter
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
psview Types Context and Execution Infrastructure Module

This module contains the two stacks an interpreter owns: the operand stack
(values) and the dictionary stack (name resolution scopes), plus the plain
bounded Stack used for saved graphics states.
"""

from typing import Iterator, List, Optional, Tuple, Union

from .. import error as ps_error
from .base import PSObject, decode_text
from .composite import Dict, Name
from .constants import (
    ACCESS_READ_ONLY, ACCESS_UNLIMITED, O_STACK_MAX, D_STACK_MAX, T_DICT
)


class Stack(list):
    """
    Bounded LIFO stack with a PostScript-style string representation.
    """
    def __init__(self, max_length: int) -> None:
        super().__init__()
        self.max_length = max_length

    def is_full(self) -> bool:
        return bool(self.max_length) and len(self) >= self.max_length

    def __str__(self) -> str:
        return "[" + ", ".join(item.__str__() for item in self) + "]"

    def __repr__(self) -> str:
        return self.__str__()


class OperandStack(object):
    """
    The operand stack: a LIFO sequence of objects, top = most recent push.

    Objects are pushed by reference. ``copy``, ``index`` and ``dup`` place a
    second reference to the same object on the stack, never a copy of it.
    Every method validates before mutating, so a failed call leaves the
    stack untouched.
    """

    def __init__(self, max_length: int = O_STACK_MAX) -> None:
        self._items: List[PSObject] = []
        self.max_length = max_length

    def _check_room(self, count: int, command: str) -> None:
        if self.max_length and len(self._items) + count > self.max_length:
            ps_error.e(ps_error.STACKOVERFLOW, command)

    def push(self, obj: PSObject) -> None:
        self._check_room(1, "push")
        self._items.append(obj)

    def pop(self) -> PSObject:
        if not self._items:
            ps_error.e(ps_error.STACKUNDERFLOW, "pop")
        return self._items.pop()

    def peek(self, n: int = 0) -> PSObject:
        """Return the element ``n`` positions below the top (0 = top)."""
        if n < 0 or n >= len(self._items):
            ps_error.e(ps_error.STACKUNDERFLOW, "peek")
        return self._items[-1 - n]

    def depth(self) -> int:
        return len(self._items)

    def clear(self) -> None:
        self._items.clear()

    def copy(self, n: int) -> None:
        """Push the top ``n`` elements again, above the originals, in order."""
        if n < 0 or n > len(self._items):
            ps_error.e(ps_error.RANGECHECK, "copy")
        self._check_room(n, "copy")
        if n:
            self._items.extend(self._items[-n:])

    def index(self, n: int) -> None:
        """Push the element ``n`` positions below the top (0 = top)."""
        if n < 0 or n >= len(self._items):
            ps_error.e(ps_error.RANGECHECK, "index")
        self._check_room(1, "index")
        self._items.append(self._items[-1 - n])

    def roll(self, n: int, j: int) -> None:
        """
        Rotate the top ``n`` elements by ``j`` positions.

        Positive ``j`` moves elements toward the top, so the element that was
        ``j`` below the top becomes the new top. ``j`` is taken modulo ``n``.
        """
        if n < 0 or n > len(self._items):
            ps_error.e(ps_error.RANGECHECK, "roll")
        if n < 2:
            return
        j %= n
        if j == 0:
            return
        top = self._items[-n:]
        self._items[-n:] = top[-j:] + top[:-j]

    def view(self) -> Tuple[PSObject, ...]:
        """Read-only snapshot, bottom first."""
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, key):
        return self._items[key]

    def __iter__(self) -> Iterator[PSObject]:
        return iter(self._items)

    def __str__(self) -> str:
        return "[" + ", ".join(item.__str__() for item in self._items) + "]"

    def __repr__(self) -> str:
        return self.__str__()


class DictionaryStack(object):
    """
    The dictionary stack: name resolution scopes, innermost searched first.

    The frames given at construction (systemdict and, normally, userdict)
    are permanent; ``end`` never pops them.
    """

    def __init__(
        self,
        systemdict: Dict,
        userdict: Optional[Dict] = None,
        max_length: int = D_STACK_MAX,
    ) -> None:
        self._frames: List[Dict] = [systemdict]
        if userdict is not None:
            self._frames.append(userdict)
        self._permanent = len(self._frames)
        self.max_length = max_length

    @property
    def systemdict(self) -> Dict:
        return self._frames[0]

    @property
    def userdict(self) -> Optional[Dict]:
        return self._frames[1] if self._permanent > 1 else None

    @property
    def current(self) -> Dict:
        return self._frames[-1]

    def begin(self, frame: Dict) -> None:
        if frame.TYPE != T_DICT:
            ps_error.e(ps_error.TYPECHECK, "begin")
        if self.max_length and len(self._frames) >= self.max_length:
            ps_error.e(ps_error.DICTSTACKOVERFLOW, "begin")
        self._frames.append(frame)

    def end(self) -> Dict:
        if len(self._frames) <= self._permanent:
            ps_error.e(ps_error.DICTSTACKUNDERFLOW, "end")
        return self._frames.pop()

    def lookup(self, name: Union[Name, str, bytes]) -> Optional[PSObject]:
        # lookup a value in the dictionary stack
        # returns the object found or None if not found
        key = Dict.create_key(name)
        for frame in reversed(self._frames):
            if frame.access < ACCESS_READ_ONLY:
                continue
            value = frame.val.get(key)
            if value is not None:
                return value
        return None

    def resolve(self, name: Union[Name, str, bytes]) -> PSObject:
        value = self.lookup(name)
        if value is None:
            text = name.text if isinstance(name, Name) else decode_text(Dict.create_key(name))
            ps_error.e(ps_error.UNDEFINED, text)
        return value

    def define(self, name: Union[Name, str, bytes], value: PSObject) -> None:
        frame = self._frames[-1]
        if frame.access < ACCESS_UNLIMITED:
            ps_error.e(ps_error.INVALIDACCESS, "def")
        frame.put(name, value)

    def depth(self) -> int:
        return len(self._frames)

    def view(self) -> Tuple[Dict, ...]:
        return tuple(self._frames)

    def __len__(self) -> int:
        return len(self._frames)

    def __iter__(self) -> Iterator[Dict]:
        return iter(self._frames)

    def __str__(self) -> str:
        return "[" + ", ".join(frame.__str__() for frame in self._frames) + "]"
