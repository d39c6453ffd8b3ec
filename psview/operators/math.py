# psview - A PostScript Interpreter
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Arithmetic operators.

Promotion rule: when either operand is a real the result is a real,
otherwise it is an integer. Integer results that leave the signed 64-bit
range are promoted to reals instead of wrapping. For the non-commutative
operators the first value popped is the right operand, so ``a b sub``
computes a - b.
"""

from __future__ import annotations

import math
from typing import Union

from ..core import error as ps_error
from ..core import types as ps


def _check_binary(ostack: ps.OperandStack, op: str) -> None:
    # 1. STACKUNDERFLOW - Check stack depth
    if len(ostack) < 2:
        ps_error.e(ps_error.STACKUNDERFLOW, op)

    # 2. TYPECHECK - Check operand types
    if ostack[-1].TYPE not in ps.NUMERIC_TYPES:
        ps_error.e(ps_error.TYPECHECK, op)
    if ostack[-2].TYPE not in ps.NUMERIC_TYPES:
        ps_error.e(ps_error.TYPECHECK, op)


def _check_unary(ostack: ps.OperandStack, op: str) -> None:
    # 1. STACKUNDERFLOW - Check stack depth
    if len(ostack) < 1:
        ps_error.e(ps_error.STACKUNDERFLOW, op)

    # 2. TYPECHECK - Check operand type
    if ostack[-1].TYPE not in ps.NUMERIC_TYPES:
        ps_error.e(ps_error.TYPECHECK, op)


def _result(value: Union[int, float], op: str) -> ps.PSObject:
    if isinstance(value, float) and not math.isfinite(value):
        ps_error.e(ps_error.UNDEFINEDRESULT, op)
    return ps.number(value)


def _replace(ostack: ps.OperandStack, operands: int, result: ps.PSObject) -> None:
    for _ in range(operands):
        ostack.pop()
    ostack.push(result)


def _trunc_div(a: int, b: int) -> int:
    # integer quotient rounded toward zero
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def add(ostack: ps.OperandStack, dstack: ps.DictionaryStack) -> None:
    """
    num₁ num₂ **add** sum


    returns the sum of num₁ and num₂. If both operands are integers and the result is
    within integer range, the result is an integer; otherwise, the result is a real number.

    **Examples**
        3 4 **add**         -> 7
        9.9 1.1 **add**     -> 11.0

    **Errors**:     **stackunderflow**, **typecheck**, **undefinedresult**
    **See Also**:   **div**, **mul**, **sub**, **idiv**, **mod**
    """
    _check_binary(ostack, add.__name__)

    result = _result(ostack[-2].val + ostack[-1].val, add.__name__)
    _replace(ostack, 2, result)


def sub(ostack: ps.OperandStack, dstack: ps.DictionaryStack) -> None:
    """
    num₁ num₂ **sub** difference


    returns the result of subtracting num₂ from num₁. If both operands are integers and
    the result is within integer range, the result is an integer; otherwise, the result is
    a real number.

    **Examples**
        5 27 **sub**    -> -22
        8.3 6.6 **sub** -> 1.7

    **Errors**:     **stackunderflow**, **typecheck**, **undefinedresult**
    **See Also**:   **add**, **div**, **mul**, **idiv**, **mod**
    """
    _check_binary(ostack, sub.__name__)

    result = _result(ostack[-2].val - ostack[-1].val, sub.__name__)
    _replace(ostack, 2, result)


def mul(ostack: ps.OperandStack, dstack: ps.DictionaryStack) -> None:
    """
    num₁ num₂ **mul** product


    returns the product of num₁ and num₂. If both operands are integers and the result
    is within integer range, the result is an integer; otherwise, the result is a real number.

    **Errors**:     **stackunderflow**, **typecheck**, **undefinedresult**
    **See Also**:   **add**, **div**, **idiv**, **mod**, **sub**
    """
    _check_binary(ostack, mul.__name__)

    result = _result(ostack[-2].val * ostack[-1].val, mul.__name__)
    _replace(ostack, 2, result)


def div(ostack: ps.OperandStack, dstack: ps.DictionaryStack) -> None:
    """
    num₁ num₂ **div** quotient


    divides num₁ by num₂. If either operand is a real the quotient is a real;
    two integers give an integer quotient truncated toward zero.

    **Examples**
        3 2 **div**     -> 1
        3 2.0 **div**   -> 1.5
        -7 2 **div**    -> -3

    **Errors**:     **stackunderflow**, **typecheck**, **undefinedresult**
    **See Also**:   **idiv**, **add**, **mul**, **sub**, **mod**
    """
    _check_binary(ostack, div.__name__)

    num, den = ostack[-2].val, ostack[-1].val
    if den == 0:
        return ps_error.e(ps_error.UNDEFINEDRESULT, div.__name__)

    if ostack[-1].TYPE == ps.T_INT and ostack[-2].TYPE == ps.T_INT:
        result = _result(_trunc_div(num, den), div.__name__)
    else:
        result = _result(num / den, div.__name__)
    _replace(ostack, 2, result)


def idiv(ostack: ps.OperandStack, dstack: ps.DictionaryStack) -> None:
    """
    int₁ int₂ **idiv** quotient


    divides int₁ by int₂ and returns the integer part of the quotient, with any fractional
    part discarded. Both operands of **idiv** must be integers and the result is an integer.

    **Examples**
        3 2 **idiv**    -> 1
        4 2 **idiv**    -> 2
        -5 2 **idiv**   -> -2

    **Errors**:     **stackunderflow**, **typecheck**, **undefinedresult**
    **See Also**:   **div**, **add**, **mul**, **sub**, **mod**, **cvi**
    """

    # 1. STACKUNDERFLOW - Check stack depth
    if len(ostack) < 2:
        return ps_error.e(ps_error.STACKUNDERFLOW, idiv.__name__)
    # 2. TYPECHECK - Check operand types
    if ostack[-1].TYPE != ps.T_INT or ostack[-2].TYPE != ps.T_INT:
        return ps_error.e(ps_error.TYPECHECK, idiv.__name__)

    if ostack[-1].val == 0:
        return ps_error.e(ps_error.UNDEFINEDRESULT, idiv.__name__)

    result = _result(_trunc_div(ostack[-2].val, ostack[-1].val), idiv.__name__)
    _replace(ostack, 2, result)


def mod(ostack: ps.OperandStack, dstack: ps.DictionaryStack) -> None:
    """
    int₁ int₂ **mod** remainder


    returns the remainder that results from dividing int₁ by int₂. The sign of the result
    is the same as the sign of the dividend int₁. Both operands must be integers and the
    result is an integer.

    **Examples**
        5 3 **mod**     -> 2
        5 2 **mod**     -> 1
        -5 3 **mod**    -> -2

    **Errors**:     **stackunderflow**, **typecheck**, **undefinedresult**
    **See Also**:   **idiv**, **div**
    """

    # 1. STACKUNDERFLOW - Check stack depth
    if len(ostack) < 2:
        return ps_error.e(ps_error.STACKUNDERFLOW, mod.__name__)
    # 2. TYPECHECK - Check operand types
    if ostack[-1].TYPE != ps.T_INT or ostack[-2].TYPE != ps.T_INT:
        return ps_error.e(ps_error.TYPECHECK, mod.__name__)

    num, den = ostack[-2].val, ostack[-1].val
    if den == 0:
        return ps_error.e(ps_error.UNDEFINEDRESULT, mod.__name__)

    _replace(ostack, 2, ps.Int(num - den * _trunc_div(num, den)))


def neg(ostack: ps.OperandStack, dstack: ps.DictionaryStack) -> None:
    """
    num₁ **neg** num₂


    returns the negative of num₁. The type of the result is the same as the type of num₁
    unless num₁ is the smallest (most negative) integer, in which case the result is a real.

    **Examples**
        4.5 **neg**     -> -4.5
        -3 **neg**      -> 3

    **Errors**:     **stackunderflow**, **typecheck**
    **See Also**:   **abs**
    """
    _check_unary(ostack, neg.__name__)

    _replace(ostack, 1, _result(-ostack[-1].val, neg.__name__))


def ps_abs(ostack: ps.OperandStack, dstack: ps.DictionaryStack) -> None:
    """
    num₁ **abs** num₂


    returns the absolute value of num₁. The type of the result is the same as the type of
    num₁ unless num₁ is the smallest (most negative) integer, in which case the result
    is a real number.

    **Examples**
        4.5 **abs**     -> 4.5
        -3 **abs**      -> 3
        0 **abs**       -> 0

    **Errors**:     **stackunderflow**, **typecheck**
    **See Also**:   **neg**
    """
    op = "abs"
    _check_unary(ostack, op)

    _replace(ostack, 1, _result(abs(ostack[-1].val), op))


def _rounding(ostack: ps.OperandStack, op: str, func) -> None:
    _check_unary(ostack, op)

    if ostack[-1].TYPE == ps.T_INT:
        # already integral
        return
    if not math.isfinite(ostack[-1].val):
        return ps_error.e(ps_error.UNDEFINEDRESULT, op)
    _replace(ostack, 1, ps.Real(float(func(ostack[-1].val))))


def ceiling(ostack: ps.OperandStack, dstack: ps.DictionaryStack) -> None:
    """
    num₁ **ceiling** num₂


    returns the least integer value greater than or equal to num₁. The type of
    the result is the same as the type of the operand.

    **Examples**
        3.2 **ceiling**     -> 4.0
        -4.8 **ceiling**    -> -4.0
        99 **ceiling**      -> 99

    **Errors**:     **stackunderflow**, **typecheck**
    **See Also**:   **floor**, **round**, **truncate**
    """
    _rounding(ostack, ceiling.__name__, math.ceil)


def floor(ostack: ps.OperandStack, dstack: ps.DictionaryStack) -> None:
    """
    num₁ **floor** num₂


    returns the greatest integer value less than or equal to num₁. The type of the
    result is the same as the type of the operand.

    **Examples**
        3.2 **floor**   -> 3.0
        -4.8 **floor**  -> -5.0
        99 **floor**    -> 99

    **Errors**:     **stackunderflow**, **typecheck**
    **See Also**:   **ceiling**, **round**, **truncate**
    """
    _rounding(ostack, floor.__name__, math.floor)


def ps_round(ostack: ps.OperandStack, dstack: ps.DictionaryStack) -> None:
    """
    num₁ **round** num₂


    returns the integer value nearest to num₁. If num₁ is equally close to its two nearest
    integers, **round** returns the greater of the two. The type of the result is the same as
    the type of the operand.

    **Examples**
        3.2 **round**   -> 3.0
        6.5 **round**   -> 7.0
        -4.8 **round**  -> -5.0
        -6.5 **round**  -> -6.0
        99 **round**    -> 99

    **Errors**:     **stackunderflow**, **typecheck**
    **See Also**:   **ceiling**, **floor**, **truncate**
    """
    _rounding(ostack, "round", lambda val: math.floor(val + 0.5))


def truncate(ostack: ps.OperandStack, dstack: ps.DictionaryStack) -> None:
    """
    num₁ **truncate** num₂


    truncates num₁ toward 0 by removing its fractional part. The type of the result is the
    same as the type of the operand.

    **Examples**
        3.2 **truncate**    -> 3.0
        -4.8 **truncate**   -> -4.0
        99 **truncate**     -> 99

    **Errors**:     **stackunderflow**, **typecheck**
    **See Also**:   **ceiling**, **floor**, **round**
    """
    _rounding(ostack, truncate.__name__, math.trunc)


def sqrt(ostack: ps.OperandStack, dstack: ps.DictionaryStack) -> None:
    """
    num **sqrt** real


    returns the square root of num, which must be a nonnegative number. The result is
    a real number.

    **Errors**:     **rangecheck**, **stackunderflow**, **typecheck**
    **See Also**:   **exp**
    """
    _check_unary(ostack, sqrt.__name__)

    if ostack[-1].val < 0:
        return ps_error.e(ps_error.RANGECHECK, sqrt.__name__)

    _replace(ostack, 1, ps.Real(math.sqrt(ostack[-1].val)))
