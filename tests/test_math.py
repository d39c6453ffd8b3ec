# psview - A PostScript Interpreter
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

import pytest

from conftest import values
from psview.core import error as ps_error
from psview.core import types as ps


def result(run, program):
    ok, stack = run(program)
    assert ok
    assert len(stack) == 1
    return stack[0]


def test_nested_arithmetic(run):
    # 100 / (2 * (200 - (100 + 200))) with integer division
    obj = result(run, "100 2 200 100 200 add sub mul div")
    assert obj.TYPE == ps.T_INT
    assert obj.val == 0


@pytest.mark.parametrize("program, expected, type_", [
    ("3 4 add", 7, ps.T_INT),
    ("9.9 1.1 add", 11.0, ps.T_REAL),
    ("1 2.0 add", 3.0, ps.T_REAL),
    ("5 27 sub", -22, ps.T_INT),
    ("8.3 6.6 sub", 1.7, ps.T_REAL),
    ("6 7 mul", 42, ps.T_INT),
    ("2 0.5 mul", 1.0, ps.T_REAL),
    ("3 2 div", 1, ps.T_INT),
    ("-7 2 div", -3, ps.T_INT),
    ("3 2.0 div", 1.5, ps.T_REAL),
    ("3 2 idiv", 1, ps.T_INT),
    ("-5 2 idiv", -2, ps.T_INT),
    ("5 3 mod", 2, ps.T_INT),
    ("-5 3 mod", -2, ps.T_INT),
    ("5 -3 mod", 2, ps.T_INT),
    ("4.5 neg", -4.5, ps.T_REAL),
    ("-3 neg", 3, ps.T_INT),
    ("-3 abs", 3, ps.T_INT),
    ("-4.5 abs", 4.5, ps.T_REAL),
    ("3.2 ceiling", 4.0, ps.T_REAL),
    ("-4.8 ceiling", -4.0, ps.T_REAL),
    ("99 ceiling", 99, ps.T_INT),
    ("3.2 floor", 3.0, ps.T_REAL),
    ("-4.8 floor", -5.0, ps.T_REAL),
    ("6.5 round", 7.0, ps.T_REAL),
    ("-6.5 round", -6.0, ps.T_REAL),
    ("-4.8 round", -5.0, ps.T_REAL),
    ("99 round", 99, ps.T_INT),
    ("-4.8 truncate", -4.0, ps.T_REAL),
    ("3.7 truncate", 3.0, ps.T_REAL),
    ("4 sqrt", 2.0, ps.T_REAL),
    ("2.25 sqrt", 1.5, ps.T_REAL),
])
def test_operators(run, program, expected, type_):
    obj = result(run, program)
    assert obj.TYPE == type_
    assert obj.val == pytest.approx(expected)


@pytest.mark.parametrize("program", [
    "9223372036854775807 1 add",
    "-9223372036854775808 1 sub",
    "4294967296 4294967296 mul",
    "-9223372036854775808 neg",
    "-9223372036854775808 abs",
    "-9223372036854775808 -1 div",
])
def test_integer_overflow_promotes_to_real(run, program):
    obj = result(run, program)
    assert obj.TYPE == ps.T_REAL


def test_largest_integer_stays_integer(run):
    obj = result(run, "9223372036854775806 1 add")
    assert obj.TYPE == ps.T_INT
    assert obj.val == 2 ** 63 - 1


@pytest.mark.parametrize("program, error, remaining", [
    ("1 0 div", ps_error.UndefinedResult, [1, 0]),
    ("1.0 0.0 div", ps_error.UndefinedResult, [1.0, 0.0]),
    ("1 0 idiv", ps_error.UndefinedResult, [1, 0]),
    ("1 0 mod", ps_error.UndefinedResult, [1, 0]),
    ("1E308 10 mul", ps_error.UndefinedResult, [1e308, 10]),
    ("5 2.0 idiv", ps_error.TypeCheck, [5, 2.0]),
    ("5.0 2 mod", ps_error.TypeCheck, [5.0, 2]),
    ("-1 sqrt", ps_error.RangeCheck, [-1]),
    ("1 add", ps_error.StackUnderflow, [1]),
    ("sub", ps_error.StackUnderflow, []),
    ("neg", ps_error.StackUnderflow, []),
])
def test_failures(interp, program, error, remaining):
    assert not interp.load(program)
    assert isinstance(interp.error, error)
    assert values(interp.operand_stack) == remaining


def test_non_numeric_operand(interp):
    interp.define("s", ps.String("text"))
    assert not interp.load("s 1 add")
    assert isinstance(interp.error, ps_error.TypeCheck)
    assert interp.error.command == "add"
    assert interp.operand_stack[0].TYPE == ps.T_STRING
    assert len(interp.operand_stack) == 2


def test_offending_command_uses_postscript_name(interp):
    interp.define("s", ps.String("text"))
    assert not interp.load("s abs")
    assert interp.error.command == "abs"
