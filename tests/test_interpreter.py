# psview - A PostScript Interpreter
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

import io
import logging

import pytest

from conftest import values
from psview.core import error as ps_error
from psview.core import types as ps
from psview.core.interpreter import Interpreter


def proc(*items, access=ps.ACCESS_UNLIMITED):
    body = [ps.Name.executable(item) if isinstance(item, str) else item for item in items]
    return ps.Array.procedure(body, access=access)


class TestLoad:
    def test_undefined_name_stops_execution(self, interp):
        assert not interp.load("42 paths")
        assert isinstance(interp.error, ps_error.UndefinedName)
        assert interp.error.name == "undefined"
        assert interp.error.command == "paths"
        assert interp.operand_stack == (ps.Int(42),)
        assert interp.state == ps.STATE_FAILED

    def test_nothing_after_the_error_runs(self, interp):
        assert not interp.load("1 2 3 foo 4 5")
        assert values(interp.operand_stack) == [1, 2, 3]

    def test_success(self, interp):
        assert interp.state == ps.STATE_IDLE
        assert interp.load("1 2 add")
        assert interp.state == ps.STATE_IDLE
        assert interp.error is None
        assert values(interp.operand_stack) == [3]

    def test_empty_program(self, interp):
        assert interp.load("")
        assert interp.load("   % only a comment\n")
        assert interp.operand_stack == ()

    @pytest.mark.parametrize("source", [
        "1 2 add",
        b"1 2 add",
        io.StringIO("1 2 add"),
        io.BytesIO(b"1 2 add"),
    ])
    def test_sources(self, interp, source):
        assert interp.load(source)
        assert values(interp.operand_stack) == [3]

    def test_stacks_persist_across_loads(self, interp):
        assert interp.load("1")
        assert interp.load("2 add")
        assert values(interp.operand_stack) == [3]

    def test_error_is_cleared_by_the_next_load(self, interp):
        assert not interp.load("nope")
        assert interp.load("1")
        assert interp.error is None

    def test_scan_error(self, interp):
        assert not interp.load("1 2E")
        assert isinstance(interp.error, ps_error.ScanError)
        assert interp.error.name == "syntaxerror"
        assert values(interp.operand_stack) == [1]
        assert interp.state == ps.STATE_FAILED

    def test_read_error(self, interp):
        class BrokenStream:
            def read(self, size):
                raise OSError("device gone")

        assert not interp.load(BrokenStream())
        assert isinstance(interp.error, ps_error.PSIOError)

    def test_huge_integer_literal_fails_cleanly(self, interp):
        assert not interp.load("7 " + "1" + "0" * 400)
        assert isinstance(interp.error, ps_error.ScanError)
        assert values(interp.operand_stack) == [7]
        assert interp.state == ps.STATE_FAILED

    @pytest.mark.parametrize("source", ["1 caf€", "1 caf€".encode("utf-8")])
    def test_non_ascii_names(self, interp, source):
        interp.define("caf€", ps.Int(2))
        assert interp.load(source)
        assert values(interp.operand_stack) == [1, 2]

    def test_undefined_non_ascii_name(self, interp):
        assert not interp.load("1 naïve")
        assert isinstance(interp.error, ps_error.UndefinedName)
        assert interp.error.command == "naïve"

    def test_stack_overflow(self):
        interp = Interpreter({"MaxOpStack": 3})
        assert not interp.load("1 2 3 4")
        assert isinstance(interp.error, ps_error.StackOverflow)
        assert values(interp.operand_stack) == [1, 2, 3]

    def test_error_is_logged(self, interp, caplog):
        with caplog.at_level(logging.WARNING, logger="psview.core.interpreter"):
            interp.load("42 paths")
        assert "%%[ Error: undefined; OffendingCommand: paths ]%%" in caplog.text

    def test_reset(self, interp):
        interp.define("x", ps.Int(1))
        interp.load("1 2 nope")
        interp.reset()
        assert interp.operand_stack == ()
        assert interp.error is None
        assert interp.state == ps.STATE_IDLE
        assert interp.dictionary_stack.lookup("x") is None

    def test_interpreters_are_independent(self):
        first, second = Interpreter(), Interpreter()
        first.define("x", ps.Int(1))
        first.load("5")
        assert second.operand_stack == ()
        assert second.dictionary_stack.lookup("x") is None
        assert first.dictionary_stack.systemdict is not second.dictionary_stack.systemdict


class TestDefinitions:
    def test_systemdict_is_readonly_and_userdict_on_top(self, interp):
        dstack = interp.dictionary_stack
        assert dstack.depth() == 2
        assert dstack.systemdict.access == ps.ACCESS_READ_ONLY
        assert dstack.current is dstack.userdict

    def test_defined_value_is_pushed(self, interp):
        interp.define("x", ps.Int(5))
        assert interp.load("x x add")
        assert values(interp.operand_stack) == [10]

    def test_definition_shadows_builtin(self, interp):
        interp.define("add", ps.Int(1))
        assert interp.load("add")
        assert values(interp.operand_stack) == [1]

    def test_name_bound_to_executable_name(self, interp):
        interp.define("plus", ps.Name.executable("add"))
        assert interp.load("1 2 plus")
        assert values(interp.operand_stack) == [3]

    def test_name_bound_to_literal_name(self, interp):
        interp.define("n", ps.Name("add"))
        assert interp.load("n")
        (obj,) = interp.operand_stack
        assert obj.TYPE == ps.T_NAME
        assert not obj.is_executable()


class TestProcedures:
    def test_procedure_runs_its_body(self, interp):
        interp.define("square", proc("dup", "mul"))
        assert interp.load("5 square")
        assert values(interp.operand_stack) == [25]

    def test_procedures_call_procedures(self, interp):
        interp.define("square", proc("dup", "mul"))
        interp.define("fourth", proc("square", "square"))
        assert interp.load("2 fourth")
        assert values(interp.operand_stack) == [16]

    def test_body_literals_are_pushed(self, interp):
        interp.define("three", proc(ps.Int(1), ps.Int(2), "add", ps.Real(0.5), ps.Name("lit")))
        assert interp.load("three")
        stack = interp.operand_stack
        assert stack[0] == ps.Int(3)
        assert stack[1] == ps.Real(0.5)
        assert stack[2].TYPE == ps.T_NAME and not stack[2].is_executable()

    def test_nested_procedure_is_pushed_not_run(self, interp):
        inner = proc(ps.Int(1), ps.Int(2), "add")
        interp.define("outer", proc(inner))
        assert interp.load("outer")
        (obj,) = interp.operand_stack
        assert obj is inner

    def test_operator_in_body(self, interp):
        add = interp.dictionary_stack.lookup("add")
        interp.define("plus", proc(add))
        assert interp.load("3 4 plus")
        assert values(interp.operand_stack) == [7]

    def test_literal_array_is_pushed(self, interp):
        data = ps.Array([ps.Int(1)])
        interp.define("data", data)
        assert interp.load("data")
        assert interp.operand_stack[0] is data

    def test_execute_only_procedure_runs(self, interp):
        interp.define("square", proc("dup", "mul", access=ps.ACCESS_EXECUTE_ONLY))
        assert interp.load("3 square")
        assert values(interp.operand_stack) == [9]

    def test_no_access_procedure(self, interp):
        interp.define("secret", proc("dup", access=ps.ACCESS_NONE))
        assert not interp.load("1 secret")
        assert isinstance(interp.error, ps_error.InvalidAccess)
        assert interp.error.command == "secret"
        assert values(interp.operand_stack) == [1]

    def test_error_inside_a_procedure(self, interp):
        interp.define("bad", proc(ps.Int(1), "nope", ps.Int(2)))
        assert not interp.load("bad")
        assert isinstance(interp.error, ps_error.UndefinedName)
        assert interp.error.command == "nope"
        assert values(interp.operand_stack) == [1]

    def test_runaway_recursion(self):
        interp = Interpreter({"MaxExecDepth": 20})
        interp.define("forever", proc(ps.Int(1), "forever"))
        assert not interp.load("forever")
        assert isinstance(interp.error, ps_error.ExecStackOverflow)
        assert interp.error.name == "execstackoverflow"
        assert len(interp.operand_stack) == 20

    def test_default_depth_limit(self, interp):
        interp.define("forever", proc("forever"))
        assert not interp.load("forever")
        assert isinstance(interp.error, ps_error.ExecStackOverflow)

    def test_name_cycle(self, interp):
        interp.define("a", ps.Name.executable("b"))
        interp.define("b", ps.Name.executable("a"))
        assert not interp.load("a")
        assert isinstance(interp.error, ps_error.ExecStackOverflow)


class TestGraphicsOptIn:
    def test_core_interpreter_has_no_graphics(self, interp):
        assert interp.graphics is None
        assert not interp.load("newpath 10 10 moveto 100 10 lineto stroke")
        assert isinstance(interp.error, ps_error.UndefinedName)
        assert interp.error.command == "newpath"

    def test_graphics_interpreter(self, gfx_interp):
        assert gfx_interp.load("newpath 10 10 moveto 100 10 lineto stroke")
        assert gfx_interp.operand_stack == ()
        assert len(gfx_interp.graphics.display_list) == 1
