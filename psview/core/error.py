# psview - A PostScript Interpreter
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later
from __future__ import annotations

from typing import NoReturn

# error types
DICTSTACKOVERFLOW = 0
DICTSTACKUNDERFLOW = 1
EXECSTACKOVERFLOW = 2
INVALIDACCESS = 3
IOERROR = 4
LIMITCHECK = 5
NOCURRENTPOINT = 6
RANGECHECK = 7
STACKOVERFLOW = 8
STACKUNDERFLOW = 9
SYNTAXERROR = 10
TYPECHECK = 11
UNDEFINED = 12
UNDEFINEDRESULT = 13

error_names = [
    "dictstackoverflow",
    "dictstackunderflow",
    "execstackoverflow",
    "invalidaccess",
    "ioerror",
    "limitcheck",
    "nocurrentpoint",
    "rangecheck",
    "stackoverflow",
    "stackunderflow",
    "syntaxerror",
    "typecheck",
    "undefined",
    "undefinedresult",
]


class PSError(Exception):
    """
    Base class for every error raised while scanning or executing a program.

    ``code`` is one of the module level error constants, ``name`` the
    PostScript error name and ``command`` the operator (or token) that
    raised it.
    """
    code: int = -1

    def __init__(self, command: str = "", detail: str = "") -> None:
        self.command = command
        self.detail = detail
        message = f"{self.name} in --{command}--" if command else self.name
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)

    @property
    def name(self) -> str:
        return error_names[self.code]


class DictStackOverflow(PSError):
    code = DICTSTACKOVERFLOW


class DictStackUnderflow(PSError):
    code = DICTSTACKUNDERFLOW


class ExecStackOverflow(PSError):
    code = EXECSTACKOVERFLOW


class InvalidAccess(PSError):
    code = INVALIDACCESS


class PSIOError(PSError):
    code = IOERROR


class LimitCheck(PSError):
    code = LIMITCHECK


class NoCurrentPoint(PSError):
    code = NOCURRENTPOINT


class RangeCheck(PSError):
    code = RANGECHECK


class StackOverflow(PSError):
    code = STACKOVERFLOW


class StackUnderflow(PSError):
    code = STACKUNDERFLOW


class ScanError(PSError):
    code = SYNTAXERROR

    def __init__(self, command: str = "", detail: str = "", token=None) -> None:
        super().__init__(command, detail)
        self.token = token


class TypeCheck(PSError):
    code = TYPECHECK


class UndefinedName(PSError):
    code = UNDEFINED


class UndefinedResult(PSError):
    code = UNDEFINEDRESULT


_error_classes = {
    cls.code: cls
    for cls in (
        DictStackOverflow,
        DictStackUnderflow,
        ExecStackOverflow,
        InvalidAccess,
        PSIOError,
        LimitCheck,
        NoCurrentPoint,
        RangeCheck,
        StackOverflow,
        StackUnderflow,
        ScanError,
        TypeCheck,
        UndefinedName,
        UndefinedResult,
    )
}


def e(error_code: int, func_name: str, detail: str = "") -> NoReturn:
    # operators are registered under their PostScript names, but python
    # keywords and builtins are spelled ps_xxx in the operator modules
    if func_name.startswith("ps_"):
        func_name = func_name[3:]

    raise _error_classes[error_code](func_name, detail)
