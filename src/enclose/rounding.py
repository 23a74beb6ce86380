"""
###########################################
Directed rounding (:mod:`enclose.rounding`)
###########################################

.. currentmodule:: enclose.rounding

This module provides floating-point primitives rounded towards negative or positive
infinity. Each function first computes the round-to-nearest result and then compares
it with the exact rational value, so the returned bound is the tightest double on the
requested side.

Division
========

.. autosummary::
    :toctree: generated/

    div_low
    div_high

Adjacent values
===============

.. autosummary::
    :toctree: generated/

    next
    prev

Other operations
================

.. autosummary::
    :toctree: generated/

    add_low
    add_high
    sub_low
    sub_high
    mul_low
    mul_high
    pow_low
    pow_high
    root_low
    root_high
    fromint
    RoundingMode

"""

import enum
import fractions
import math
import sys
from typing import Final, assert_never

from mpmath import libmp


class RoundingMode(enum.Enum):
    """Rounding mode specifier.

    Attributes
    ----------
    ROUND_CEILING
    ROUND_FLOOR
    """

    ROUND_CEILING = enum.auto()
    ROUND_FLOOR = enum.auto()

    def __repr__(self):
        return f"<{self.__class__.__name__}.{self.name}>"


ROUND_CEILING: Final = RoundingMode.ROUND_CEILING
ROUND_FLOOR: Final = RoundingMode.ROUND_FLOOR

_PREC: Final = 53


def _floor(approx: float, exact: fractions.Fraction) -> float:
    # approx is the nearest double to exact, so at most one step is needed.
    if math.isinf(approx):
        return approx if approx < 0.0 else sys.float_info.max

    if fractions.Fraction(approx) > exact:
        return math.nextafter(approx, -math.inf)

    return approx


def _ceil(approx: float, exact: fractions.Fraction) -> float:
    if math.isinf(approx):
        return approx if approx > 0.0 else -sys.float_info.max

    if fractions.Fraction(approx) < exact:
        return math.nextafter(approx, math.inf)

    return approx


def next(value: float) -> float:
    """Return the least double strictly greater than `value`.

    ``next(inf)`` is ``inf`` since no double exceeds it.

    Examples
    --------
    >>> next(1.0) - 1.0 == 2.0**-52
    True
    >>> next(0.0)
    5e-324
    """
    return math.nextafter(value, math.inf)


def prev(value: float) -> float:
    """Return the greatest double strictly less than `value`.

    ``prev(-inf)`` is ``-inf`` since no double is below it.
    """
    return math.nextafter(value, -math.inf)


def add_low(lhs: float, rhs: float) -> float:
    """Add and round towards negative infinity."""
    result = lhs + rhs

    if not (math.isfinite(lhs) and math.isfinite(rhs)):
        return result

    return _floor(result, fractions.Fraction(lhs) + fractions.Fraction(rhs))


def add_high(lhs: float, rhs: float) -> float:
    """Add and round towards positive infinity."""
    result = lhs + rhs

    if not (math.isfinite(lhs) and math.isfinite(rhs)):
        return result

    return _ceil(result, fractions.Fraction(lhs) + fractions.Fraction(rhs))


def sub_low(lhs: float, rhs: float) -> float:
    """Subtract and round towards negative infinity.

    This function is defined as ``add_low(lhs, -rhs)``.
    """
    return add_low(lhs, -rhs)


def sub_high(lhs: float, rhs: float) -> float:
    """Subtract and round towards positive infinity.

    This function is defined as ``add_high(lhs, -rhs)``.
    """
    return add_high(lhs, -rhs)


def mul_low(lhs: float, rhs: float) -> float:
    """Multiply and round towards negative infinity.

    Zero times infinity is zero, as is usual for interval endpoints.
    """
    if lhs == 0.0 or rhs == 0.0:
        return 0.0

    result = lhs * rhs

    if not (math.isfinite(lhs) and math.isfinite(rhs)):
        return result

    return _floor(result, fractions.Fraction(lhs) * fractions.Fraction(rhs))


def mul_high(lhs: float, rhs: float) -> float:
    """Multiply and round towards positive infinity.

    Zero times infinity is zero, as is usual for interval endpoints.
    """
    if lhs == 0.0 or rhs == 0.0:
        return 0.0

    result = lhs * rhs

    if not (math.isfinite(lhs) and math.isfinite(rhs)):
        return result

    return _ceil(result, fractions.Fraction(lhs) * fractions.Fraction(rhs))


def div_low(lhs: float, rhs: float) -> float:
    """Divide and round towards negative infinity.

    Raises
    ------
    ZeroDivisionError
        If `rhs` is zero.

    Examples
    --------
    >>> div_low(1.0, 4.0)
    0.25
    >>> div_low(1.0, 3.0) < div_high(1.0, 3.0)
    True
    """
    result = lhs / rhs

    if not (math.isfinite(lhs) and math.isfinite(rhs)):
        return result

    return _floor(result, fractions.Fraction(lhs) / fractions.Fraction(rhs))


def div_high(lhs: float, rhs: float) -> float:
    """Divide and round towards positive infinity.

    Raises
    ------
    ZeroDivisionError
        If `rhs` is zero.
    """
    result = lhs / rhs

    if not (math.isfinite(lhs) and math.isfinite(rhs)):
        return result

    return _ceil(result, fractions.Fraction(lhs) / fractions.Fraction(rhs))


def pow_low(base: float, exponent: int) -> float:
    """Raise a non-negative `base` to a non-negative integer power and round towards
    negative infinity."""
    result = 1.0

    while exponent != 0:
        if exponent % 2 != 0:
            result = mul_low(result, base)

        exponent //= 2

        if exponent != 0:
            base = mul_low(base, base)

    return result


def pow_high(base: float, exponent: int) -> float:
    """Raise a non-negative `base` to a non-negative integer power and round towards
    positive infinity."""
    result = 1.0

    while exponent != 0:
        if exponent % 2 != 0:
            result = mul_high(result, base)

        exponent //= 2

        if exponent != 0:
            base = mul_high(base, base)

    return result


def _root(value: float, n: int, rounding: RoundingMode) -> float:
    match rounding:
        case RoundingMode.ROUND_CEILING:
            rnd = libmp.round_ceiling

        case RoundingMode.ROUND_FLOOR:
            rnd = libmp.round_floor

        case _ as unreachable:
            assert_never(unreachable)

    tmp = libmp.mpf_nthroot(libmp.from_float(value), n, _PREC, rnd)
    return libmp.to_float(tmp, rnd=rnd)


def root_low(value: float, n: int) -> float:
    """Return the `n`-th root of a non-negative `value` rounded towards negative
    infinity.

    Examples
    --------
    >>> root_low(8.0, 3)
    2.0
    """
    if n == 1 or value == 0.0 or math.isinf(value):
        return value + 0.0

    result = _root(value, n, ROUND_FLOOR)
    exact = fractions.Fraction(value)

    while fractions.Fraction(result) ** n > exact:
        result = prev(result)

    while fractions.Fraction(next(result)) ** n <= exact:
        result = next(result)

    return result


def root_high(value: float, n: int) -> float:
    """Return the `n`-th root of a non-negative `value` rounded towards positive
    infinity."""
    if n == 1 or value == 0.0 or math.isinf(value):
        return value + 0.0

    result = _root(value, n, ROUND_CEILING)
    exact = fractions.Fraction(value)

    while fractions.Fraction(result) ** n < exact:
        result = next(result)

    while fractions.Fraction(prev(result)) ** n >= exact:
        result = prev(result)

    return result


def fromint(value: int, rounding: RoundingMode) -> float:
    """Convert the integer to a float with rounding taken into account.

    Examples
    --------
    >>> fromint(9007199254740993, ROUND_FLOOR)
    9007199254740992.0
    >>> fromint(9007199254740993, ROUND_CEILING)
    9007199254740994.0
    """
    if abs(value) <= 0x1FFFFFFFFFFFFF:
        return float(value)

    try:
        approx = float(value)
    except OverflowError:
        approx = math.inf if value > 0 else -math.inf

    match rounding:
        case RoundingMode.ROUND_CEILING:
            return _ceil(approx, fractions.Fraction(value))

        case RoundingMode.ROUND_FLOOR:
            return _floor(approx, fractions.Fraction(value))

        case _ as unreachable:
            assert_never(unreachable)
