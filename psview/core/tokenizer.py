# psview - A PostScript Interpreter
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

import codecs
import io
import logging
import math
from typing import IO, Iterator, Optional, Union

from . import error as ps_error
from . import types as ps

logger = logging.getLogger(__name__)

# White-space characters
NULL = "\0"
TAB = "\t"
LINE_FEED = "\n"
FORM_FEED = "\f"
RETURN = "\r"
SPACE = " "

PERCENT = "%"
DIGITS = frozenset("0123456789")
SIGNS = frozenset("+-")
EXPONENT = "E"
DECIMAL_POINT = "."

# the white_space set
white_space = frozenset([NULL, SPACE, TAB, FORM_FEED])

# the new_line set
new_line = frozenset([LINE_FEED])

# scanner states
MODE_NONE = 0
MODE_INTEGER = 1
MODE_REAL = 2
MODE_NAME = 3
MODE_STRING = 4
MODE_COMMENT = 5


class TokenKind:
    INTEGER = "integer"
    REAL = "real"
    NAME = "name"
    STRING = "string"
    COMMENT = "comment"
    ERROR = "error"


class Token(object):
    """A raw lexeme and its classification."""

    __slots__ = ("kind", "lexeme", "line_num", "value")

    def __init__(self, kind: str, lexeme: str, line_num: int = 1, value=None) -> None:
        self.kind = kind
        self.lexeme = lexeme
        self.line_num = line_num
        self.value = value  # converted number for INTEGER and REAL tokens

    def __eq__(self, other) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return (self.kind, self.lexeme) == (other.kind, other.lexeme)

    def __repr__(self) -> str:
        return f"Token({self.kind}, {self.lexeme!r})"


def _open_source(source: Union[str, bytes, IO]) -> IO:
    if isinstance(source, str):
        return io.StringIO(source)
    if isinstance(source, (bytes, bytearray)):
        return io.BytesIO(bytes(source))
    return source


class Scanner(object):
    """
    Turns a character stream into classified tokens.

    ``next`` returns the next Token, or None at the end of the stream, and
    raises ScanError when a lexeme cannot be converted. Comments are skipped
    unless ``keep_comments`` is set, in which case they come back as COMMENT
    tokens holding the text after the ``%``.

    Classification follows the rule that numbers are names that happen to
    parse: a lexeme that starts like a number but stops looking like one is
    reclassified as a name rather than rejected, so ``1st`` is a name.
    """

    def __init__(self, source: Union[str, bytes, IO], keep_comments: bool = False) -> None:
        self.source = _open_source(source)
        self.keep_comments = keep_comments
        self.line_num = 1
        self._decoder = codecs.getincrementaldecoder(ps.TEXT_ENCODING)("surrogateescape")
        self._pending = ""

    def read(self) -> Optional[str]:
        while not self._pending:
            try:
                data = self.source.read(1)
            except (OSError, ValueError) as exc:
                ps_error.e(ps_error.IOERROR, "read", str(exc))
            if isinstance(data, bytes):
                # a multi-byte character arrives one byte at a time
                chars = self._decoder.decode(data, final=not data)
            else:
                chars = data
            if not data and not chars:
                return None
            self._pending = chars
        c, self._pending = self._pending[0], self._pending[1:]
        return c

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next()
            if token is None:
                return
            yield token

    def next(self) -> Optional[Token]:
        buffer = []
        mode = MODE_NONE
        line_num = self.line_num

        while True:
            c = self.read()
            if c is None:
                break

            # carriage returns are dropped wherever they appear
            if c == RETURN:
                continue

            if c in new_line:
                self.line_num += 1

            if mode == MODE_COMMENT:
                if c in new_line:
                    if self.keep_comments:
                        return Token(TokenKind.COMMENT, "".join(buffer), line_num)
                    buffer.clear()
                    mode = MODE_NONE
                    continue
                if self.keep_comments:
                    buffer.append(c)
                continue

            if c in white_space or c in new_line:
                if mode != MODE_NONE:
                    break
                continue

            if mode == MODE_NONE:
                line_num = self.line_num
                if c == PERCENT:
                    mode = MODE_COMMENT
                    continue
                if c in DIGITS or c in SIGNS:
                    mode = MODE_INTEGER
                else:
                    mode = MODE_NAME
            elif mode == MODE_INTEGER:
                if c == EXPONENT or c == DECIMAL_POINT:
                    mode = MODE_REAL
                elif c not in DIGITS:
                    mode = MODE_NAME
            elif mode == MODE_REAL:
                if c == EXPONENT or c == DECIMAL_POINT:
                    # a second point or exponent marker
                    if c in buffer or (c == DECIMAL_POINT and EXPONENT in buffer):
                        mode = MODE_NAME
                elif c in SIGNS:
                    if buffer[-1] != EXPONENT:
                        mode = MODE_NAME
                elif c not in DIGITS:
                    mode = MODE_NAME

            buffer.append(c)

        if mode == MODE_NONE:
            return None
        if mode == MODE_COMMENT:
            if self.keep_comments:
                return Token(TokenKind.COMMENT, "".join(buffer), line_num)
            return None

        lexeme = "".join(buffer)
        if mode == MODE_INTEGER:
            kind = TokenKind.INTEGER
        elif mode == MODE_REAL:
            kind = TokenKind.REAL
        else:
            kind = TokenKind.NAME

        # a lone sign, or signs and markers without a digit, is a name
        if kind != TokenKind.NAME and not any(ch in DIGITS for ch in lexeme):
            kind = TokenKind.NAME

        token = Token(kind, lexeme, line_num)
        if kind in (TokenKind.INTEGER, TokenKind.REAL):
            token.value = _convert(token)
        logger.debug("scanned %r on line %d", token, line_num)
        return token


def _convert(token: Token):
    # int() and float() ignore the locale
    try:
        if token.kind == TokenKind.INTEGER:
            value = int(token.lexeme, 10)
            if not ps.MIN_INTEGER <= value <= ps.MAX_INTEGER:
                # make_object reads it as a real, so it must fit one
                float(value)
            return value
        value = float(token.lexeme)
    except OverflowError:
        return _scan_failure(token, "number out of range")
    except ValueError:
        if token.lexeme.lstrip("+-").isdigit():
            # int() refuses very long digit strings
            return _scan_failure(token, "number out of range")
        return _scan_failure(token, f"malformed {token.kind}")
    if math.isinf(value):
        return _scan_failure(token, "number out of range")
    return value


def _scan_failure(token: Token, detail: str):
    bad = Token(TokenKind.ERROR, token.lexeme, token.line_num)
    raise ps_error.ScanError(token.lexeme, f"{detail} on line {token.line_num}", token=bad)


def make_object(token: Token) -> ps.PSObject:
    """
    Build the object a token denotes.

    Integers that do not fit in 64 bits become reals. Names coming from
    program text are always executable.
    """
    if token.kind in (TokenKind.INTEGER, TokenKind.REAL):
        value = token.value if token.value is not None else _convert(token)
        if token.kind == TokenKind.INTEGER:
            return ps.number(value)
        return ps.Real(value)
    if token.kind == TokenKind.NAME:
        try:
            return ps.Name(token.lexeme, attrib=ps.ATTRIB_EXEC)
        except UnicodeEncodeError:
            # only a lone surrogate in str input gets here
            return _scan_failure(token, "name is not encodable text")
    if token.kind == TokenKind.STRING:
        return ps.String(token.lexeme)
    return _scan_failure(token, f"no object for a {token.kind} token")
