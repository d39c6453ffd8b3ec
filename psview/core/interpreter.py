# psview - A PostScript Interpreter
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
The executor.

An Interpreter owns one operand stack and one dictionary stack. ``load``
scans a program token by token and dispatches each object as it is built:

    1. LITERAL OBJECTS (numbers, strings, literal names):
       → Push directly to operand stack

    2. EXECUTABLE NAMES:
       → Dictionary stack lookup, innermost frame first
       → Operators are called with the two stacks
       → Procedure bodies (executable arrays) run element by element
       → Executable names are executed in turn
       → Any other value is pushed

Errors are not caught by the program; the first one stops execution, is
reported and leaves both stacks as they were at the failure.
"""

import logging
from typing import IO, Any, Dict, Optional, Tuple, Union

from . import context_init
from . import error as ps_error
from . import tokenizer
from . import types as ps

logger = logging.getLogger(__name__)


class Interpreter(object):
    """
    Batch evaluator for one program at a time.

    Args:
        system_params: overrides for the values of ``init_system_params``
        graphics: install the path, painting and graphics state operators
    """

    def __init__(self, system_params: Optional[Dict[str, Any]] = None, graphics: bool = False) -> None:
        self.system_params = context_init.merge_system_params(system_params)
        self._graphics_enabled = graphics
        self.reset()

    def reset(self) -> None:
        """Discard all stack contents and definitions and start from fresh tables."""
        self._ostack, self._dstack = context_init.create_stacks(self.system_params)
        self._gfx = None
        if self._graphics_enabled:
            self._gfx = context_init.create_graphics_context(self.system_params, self._dstack.systemdict)
        self.scanner = None
        self.state = ps.STATE_IDLE
        self.error: Optional[ps_error.PSError] = None

    @property
    def operand_stack(self) -> Tuple[ps.PSObject, ...]:
        """The operand stack, bottom first."""
        return self._ostack.view()

    @property
    def dictionary_stack(self) -> ps.DictionaryStack:
        return self._dstack

    @property
    def graphics(self) -> Optional[ps.GraphicsContext]:
        return self._gfx

    def define(self, name: Union[ps.Name, str, bytes], obj: ps.PSObject) -> None:
        """Bind ``name`` to ``obj`` in the innermost writable frame (userdict by default)."""
        self._dstack.define(name, obj)

    def load(self, source: Union[IO, str, bytes]) -> bool:
        """
        Execute a whole program.

        ``source`` is a text or binary stream, or the program itself as
        ``str`` or ``bytes``. Returns True when the end of the program is
        reached, False when an error stopped it; the error is kept in
        ``self.error``.
        """
        self.error = None
        self.scanner = tokenizer.Scanner(source)
        try:
            while True:
                self.state = ps.STATE_SCANNING
                token = self.scanner.next()
                if token is None:
                    break
                if token.kind == tokenizer.TokenKind.COMMENT:
                    continue

                obj = tokenizer.make_object(token)

                self.state = ps.STATE_DISPATCHING
                self._execute(obj)
        except ps_error.PSError as exc:
            self._fail(exc)
            return False
        finally:
            self.scanner = None

        self.state = ps.STATE_IDLE
        return True

    def _fail(self, exc: ps_error.PSError) -> None:
        self.error = exc
        self.state = ps.STATE_FAILED
        logger.warning("%%%%[ Error: %s; OffendingCommand: %s ]%%%%", exc.name, exc.command)
        if exc.detail:
            logger.debug("%s", exc.detail)

    def _execute(self, obj: ps.PSObject) -> None:
        # EXECUTION PATH 1: LITERAL OBJECTS
        if obj.TYPE != ps.T_NAME or obj.attrib == ps.ATTRIB_LIT:
            logger.debug("push %s", obj)
            self._ostack.push(obj)
            return

        # EXECUTION PATH 2: EXECUTABLE NAMES
        logger.debug("execute %s", obj)
        self._call(self._dstack.resolve(obj), obj.text, 0)

    def _call(self, value: ps.PSObject, command: str, depth: int) -> None:
        if value.TYPE == ps.T_OPERATOR:
            value(self._ostack, self._dstack)

        elif value.TYPE == ps.T_ARRAY and value.attrib == ps.ATTRIB_EXEC:
            if value.access < ps.ACCESS_EXECUTE_ONLY:
                ps_error.e(ps_error.INVALIDACCESS, command)
            self._check_depth(command, depth)
            for item in value:
                self._run_element(item, depth + 1)

        elif value.TYPE == ps.T_NAME and value.attrib == ps.ATTRIB_EXEC:
            self._check_depth(command, depth)
            self._call(self._dstack.resolve(value), value.text, depth + 1)

        else:
            self._ostack.push(value)

    def _run_element(self, item: ps.PSObject, depth: int) -> None:
        # elements of a procedure body: nested arrays are data, not code
        if item.TYPE == ps.T_NAME and item.attrib == ps.ATTRIB_EXEC:
            self._call(self._dstack.resolve(item), item.text, depth)
        elif item.TYPE == ps.T_OPERATOR:
            item(self._ostack, self._dstack)
        else:
            self._ostack.push(item)

    def _check_depth(self, command: str, depth: int) -> None:
        if depth >= self.system_params["MaxExecDepth"]:
            ps_error.e(ps_error.EXECSTACKOVERFLOW, command)
