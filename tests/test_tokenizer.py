# psview - A PostScript Interpreter
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

import io

import pytest

from psview.core import error as ps_error
from psview.core import types as ps
from psview.core.tokenizer import Scanner, Token, TokenKind, make_object


def scan(text, **kwargs):
    return list(Scanner(text, **kwargs))


def kinds(text):
    return [token.kind for token in scan(text)]


def test_integer_then_name():
    tokens = scan("42 paths")
    assert [t.kind for t in tokens] == [TokenKind.INTEGER, TokenKind.NAME]
    assert [t.lexeme for t in tokens] == ["42", "paths"]
    assert tokens[0].value == 42


def test_empty_and_blank_input():
    assert scan("") == []
    assert scan(" \t\f\0\n\n") == []


@pytest.mark.parametrize("text, value", [
    ("0", 0),
    ("+5", 5),
    ("-17", -17),
    ("007", 7),
])
def test_integers(text, value):
    (token,) = scan(text)
    assert token.kind == TokenKind.INTEGER
    assert token.value == value


@pytest.mark.parametrize("text, value", [
    ("3.14", 3.14),
    ("-.5", -0.5),
    ("1.", 1.0),
    ("1E5", 100000.0),
    ("1.5E-3", 0.0015),
    ("2E+2", 200.0),
])
def test_reals(text, value):
    (token,) = scan(text)
    assert token.kind == TokenKind.REAL
    assert token.value == pytest.approx(value)


@pytest.mark.parametrize("text", [
    "1st", "1.2.3", "1E5E", "1.5-3", "1E2.5", "3x", "-", "+", "-.", "abc", ".5", "1e5",
])
def test_number_lookalikes_are_names(text):
    (token,) = scan(text)
    assert token.kind == TokenKind.NAME
    assert token.lexeme == text


def test_carriage_return_is_discarded():
    (token,) = scan("4\r2")
    assert token.kind == TokenKind.INTEGER
    assert token.value == 42

    assert kinds("1\r\n2\r\n") == [TokenKind.INTEGER, TokenKind.INTEGER]


def test_comments_are_skipped():
    tokens = scan("1 % one two three\n2 %trailing")
    assert [t.value for t in tokens] == [1, 2]


def test_percent_inside_a_name_is_not_a_comment():
    (token,) = scan("a%b")
    assert token.kind == TokenKind.NAME
    assert token.lexeme == "a%b"


def test_keep_comments():
    tokens = scan("%!PS-Adobe-3.0\n1 %end", keep_comments=True)
    assert [t.kind for t in tokens] == [TokenKind.COMMENT, TokenKind.INTEGER, TokenKind.COMMENT]
    assert tokens[0].lexeme == "!PS-Adobe-3.0"
    assert tokens[2].lexeme == "end"


def test_line_numbers():
    tokens = scan("1\n2\n\n3")
    assert [t.line_num for t in tokens] == [1, 2, 4]


def test_bytes_and_streams():
    assert kinds(b"1 2.0 x") == [TokenKind.INTEGER, TokenKind.REAL, TokenKind.NAME]
    assert kinds(io.BytesIO(b"1 x")) == [TokenKind.INTEGER, TokenKind.NAME]
    assert kinds(io.StringIO("x 1")) == [TokenKind.NAME, TokenKind.INTEGER]


@pytest.mark.parametrize("text", ["1E", "1E+", "-2.5E-"])
def test_malformed_number_raises(text):
    with pytest.raises(ps_error.ScanError) as exc_info:
        scan(text)
    assert exc_info.value.token.kind == TokenKind.ERROR
    assert exc_info.value.token.lexeme == text
    assert exc_info.value.name == "syntaxerror"


def test_read_failure_is_an_ioerror():
    class BrokenStream:
        def read(self, size):
            raise OSError("device gone")

    with pytest.raises(ps_error.PSIOError):
        scan(BrokenStream())


def test_make_object():
    (integer, real, name) = scan("7 2.5 moveto")
    assert make_object(integer) == ps.Int(7)
    assert make_object(integer).TYPE == ps.T_INT
    assert make_object(real).TYPE == ps.T_REAL

    obj = make_object(name)
    assert obj.TYPE == ps.T_NAME
    assert obj.is_executable()
    assert obj.text == "moveto"


def test_integer_out_of_range_becomes_real():
    (token,) = scan("9223372036854775808")
    obj = make_object(token)
    assert obj.TYPE == ps.T_REAL
    assert obj.val == float(2 ** 63)

    (token,) = scan("-9223372036854775808")
    assert make_object(token).TYPE == ps.T_INT


def test_make_object_rejects_comment_tokens():
    with pytest.raises(ps_error.ScanError):
        make_object(Token(TokenKind.COMMENT, "note"))


@pytest.mark.parametrize("text", [
    "1" + "0" * 400,
    "-" + "9" * 5000,
    "1E400",
    "-2.5E999",
])
def test_number_out_of_range_raises(text):
    with pytest.raises(ps_error.ScanError) as exc_info:
        scan(text)
    assert exc_info.value.name == "syntaxerror"
    assert "out of range" in exc_info.value.detail


def test_large_integer_within_real_range():
    (token,) = scan("1" + "0" * 300)
    assert make_object(token) == ps.Real(1e300)


@pytest.mark.parametrize("source", [
    "caf€ 1",
    "caf€ 1".encode("utf-8"),
    io.BytesIO("caf€ 1".encode("utf-8")),
])
def test_non_ascii_name(source):
    name, number = scan(source)
    assert name.kind == TokenKind.NAME
    assert name.lexeme == "caf€"
    assert make_object(name).val == "caf€".encode("utf-8")
    assert number.value == 1


def test_undecodable_bytes_keep_their_value():
    (token,) = scan(b"x\xff\xe2")
    assert make_object(token).val == b"x\xff\xe2"


def test_lone_surrogate_name_raises():
    (token,) = scan("a\ud800")
    with pytest.raises(ps_error.ScanError):
        make_object(token)
