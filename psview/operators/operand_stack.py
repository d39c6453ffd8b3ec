# psview - A PostScript Interpreter
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

from ..core import error as ps_error
from ..core import types as ps


def clear(ostack, dstack):
    """
    |- any(1) ... any(n) **clear** |-


    pops all objects from the operand stack and discards them.

    **Errors**:     **none**
    **See Also**:   **count**, **pop**
    """

    ostack.clear()


def count(ostack, dstack):
    """
    |- any(1) ... any(n) **count** |- any(1) ... any(n) n


    counts the number of items on the operand stack and pushes this **count** on the
    operand stack.

    **Examples**
        **clear** **count**         -> 0
        **clear** 1 2 3 **count**   -> 1 2 3 3

    **Errors**:     **stackoverflow**
    """

    ostack.push(ps.Int(len(ostack)))


def dup(ostack, dstack):
    """
    any **dup** any any


    duplicates the top element on the operand stack. The object itself is
    shared, not copied.

    **Errors**:     **stackoverflow**, **stackunderflow**
    **See Also**:   **copy**, **index**
    """

    # 1. STACKUNDERFLOW - Check stack depth
    if len(ostack) < 1:
        return ps_error.e(ps_error.STACKUNDERFLOW, dup.__name__)

    ostack.index(0)


def exch(ostack, dstack):
    """
    any₁ any₂ **exch** any₂ any₁


    exchanges the top two elements on the operand stack.

    **Examples**
        1 2 **exch** -> 2 1

    **Errors**:     **stackunderflow**
    **See Also**:   **dup**, **roll**, **index**, **pop**
    """

    # 1. STACKUNDERFLOW - Check stack depth
    if len(ostack) < 2:
        return ps_error.e(ps_error.STACKUNDERFLOW, exch.__name__)

    ostack.roll(2, 1)


def ps_copy(ostack, dstack):
    """
    any₁ ... anyₙ n **copy** any₁ ... anyₙ any₁ ... anyₙ


    when the top element on the operand stack is a nonnegative integer n, removes it and
    duplicates the top n elements on the operand stack as shared references, keeping
    their order.

    **Examples**
        (a) (b) (c) 2 **copy** -> (a) (b) (c) (b) (c)
        (a) (b) (c) 0 **copy** -> (a) (b) (c)

    **Errors**:     **rangecheck**, **stackoverflow**, **stackunderflow**, **typecheck**
    **See Also**:   **dup**, **index**
    """
    op = "copy"

    # 1. STACKUNDERFLOW - Check stack depth
    if len(ostack) < 1:
        return ps_error.e(ps_error.STACKUNDERFLOW, op)
    # 2. TYPECHECK - Check operand type
    if ostack[-1].TYPE != ps.T_INT:
        return ps_error.e(ps_error.TYPECHECK, op)
    # 3. RANGECHECK - n must fit in what is left below it
    n = ostack[-1].val
    if n < 0 or n > len(ostack) - 1:
        return ps_error.e(ps_error.RANGECHECK, op)
    if ostack.max_length and len(ostack) - 1 + n > ostack.max_length:
        return ps_error.e(ps_error.STACKOVERFLOW, op)

    ostack.pop()
    ostack.copy(n)


def index(ostack, dstack):
    """
    any(n) ... any(0) n **index** any(n) ... any(0) any(n)


    removes the nonnegative integer n from the operand stack, counts down
    to the nth element from the top of the stack, and pushes a reference to
    that element on the stack.

    **Examples**
        (a) (b) (c) (d) 0 **index** -> (a) (b) (c) (d) (d)
        (a) (b) (c) (d) 3 **index** -> (a) (b) (c) (d) (a)

    **Errors**:     **rangecheck**, **stackunderflow**, **typecheck**
    **See Also**:   **copy**, **dup**, **roll**
    """

    # 1. STACKUNDERFLOW - Check stack depth
    if len(ostack) < 1:
        return ps_error.e(ps_error.STACKUNDERFLOW, index.__name__)
    # 2. TYPECHECK - Check operand type
    if ostack[-1].TYPE != ps.T_INT:
        return ps_error.e(ps_error.TYPECHECK, index.__name__)
    # 3. RANGECHECK - n counts from the element below the operand
    n = ostack[-1].val
    if n < 0 or n > len(ostack) - 2:
        return ps_error.e(ps_error.RANGECHECK, index.__name__)

    ostack.pop()
    ostack.index(n)


def pop(ostack, dstack):
    """
    any **pop** -


    removes the top element from the operand stack and discards it.

    **Examples**
        1 2 3 **pop**       -> 1 2
        1 2 3 **pop** **pop**   -> 1

    **Errors**:     **stackunderflow**
    **See Also**:   **clear**, **dup**
    """

    # 1. STACKUNDERFLOW - Check stack depth
    if len(ostack) < 1:
        return ps_error.e(ps_error.STACKUNDERFLOW, pop.__name__)

    ostack.pop()


def roll(ostack, dstack):
    """
    any(n-1) ... any(0) n j **roll** any((j-1) mod(n)) ... any(0) any(n-1) ... any((j)mod(n))


    performs a circular shift of the objects any(n-1) through any(0) on the operand stack
    by the amount j. Positive j indicates upward motion on the stack, whereas negative
    j indicates downward motion.

    n must be a nonnegative integer and j must be an integer. **roll** first removes these
    operands from the stack; there must be at least n additional elements. It then performs
    a circular shift of these n elements by j positions. A shift by j is the same as a
    shift by j mod n, and rolling zero or one element does nothing.

    **Examples**
        (a) (b) (c) 3 -1 **roll**   -> (b) (c) (a)
        (a) (b) (c) 3 1 **roll**    -> (c) (a) (b)
        (a) (b) (c) 3 0 **roll**    -> (a) (b) (c)

    **Errors**:     **rangecheck**, **stackunderflow**, **typecheck**
    **See Also**:   **exch**, **index**, **copy**, **pop**
    """

    # 1. STACKUNDERFLOW - Check stack depth
    if len(ostack) < 2:
        return ps_error.e(ps_error.STACKUNDERFLOW, roll.__name__)
    # 2. TYPECHECK - Check operand types (n j)
    if ostack[-1].TYPE != ps.T_INT:
        return ps_error.e(ps_error.TYPECHECK, roll.__name__)
    if ostack[-2].TYPE != ps.T_INT:
        return ps_error.e(ps_error.TYPECHECK, roll.__name__)
    # 3. RANGECHECK - n must be nonnegative and available below the operands
    n = ostack[-2].val
    j = ostack[-1].val
    if n < 0 or len(ostack) < n + 2:
        return ps_error.e(ps_error.RANGECHECK, roll.__name__)

    ostack.pop()
    ostack.pop()
    ostack.roll(n, j)


def pstack(ostack, dstack):
    """
    any(1) ... any(n) **pstack** any(1) ... any(n)

    prints the operand stack to stdout, topmost element first, without changing it.
    """
    for obj in reversed(ostack.view()):
        print(obj)
