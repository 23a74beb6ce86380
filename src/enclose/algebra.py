"""
#########################################
Interval algebra (:mod:`enclose.algebra`)
#########################################

.. currentmodule:: enclose.algebra

This module provides powers, roots, and the floating modulo of intervals. Every
function takes its operands by value and returns a new interval.

.. autosummary::
    :toctree: generated/

    fmod
    nth_root
    pow
    sqrt

"""

import logging
import math

from enclose import rounding as rd
from enclose.constants import EMPTY, ONE
from enclose.context import getcontext
from enclose.exceptions import IntervalDivisionByZero, PowerIsNotInteger
from enclose.interval import Interval

logger = logging.getLogger(__name__)


def _degree(value: Interval | int) -> int:
    match value:
        case Interval():
            if not value.is_singleton():
                raise PowerIsNotInteger(f"power is not an integer: {value}")

            return round(value.low)

        case int():
            return value

    raise TypeError(f"unsupported exponent type: {type(value).__name__}")


def pow(x: Interval, exponent: Interval | int, /) -> Interval:
    """`x` raised to an integer power.

    For an even power the result of a range straddling zero starts at zero; an odd
    power preserves the sign and the ordering of the bounds. A negative power is
    computed as the multiplicative inverse of the positive one.

    Parameters
    ----------
    x : Interval
    exponent : Interval | int
        Integer exponent. An interval exponent must be a singleton, whose value is
        rounded to the nearest integer.

    Raises
    ------
    PowerIsNotInteger
        If `exponent` is an interval but not a singleton.

    Examples
    --------
    >>> from enclose import Interval
    >>> pow(Interval(-1, 2), 2)
    Interval(0.0, 4.0)
    >>> pow(Interval(-1, 2), 3)
    Interval(-1.0, 8.0)
    >>> print(pow(Interval(2), Interval(3)))
    Interval [8.0]
    """
    n = _degree(exponent)

    if x.is_empty():
        return EMPTY

    if n == 0:
        return ONE

    if n < 0:
        return pow(x, -n).multiplicative_inverse()

    is_odd = n % 2 != 0

    if x.high < 0.0:
        inf = rd.pow_low(-x.high, n)
        sup = rd.pow_high(-x.low, n)
        return Interval(-sup, -inf) if is_odd else Interval(inf, sup)

    if x.low < 0.0:
        if is_odd:
            return Interval(-rd.pow_high(-x.low, n), rd.pow_high(x.high, n))

        return Interval(0.0, rd.pow_high(max(-x.low, x.high), n))

    return Interval(rd.pow_low(x.low, n), rd.pow_high(x.high, n))


def nth_root(x: Interval, n: Interval | int, /) -> Interval:
    """`n`-th root of `x`.

    An odd root preserves the sign. For an even root, the behavior on negative
    numbers follows ``getcontext().even_root``; with the default ``"CLAMP"`` policy
    the negative part of `x` is discarded.

    Parameters
    ----------
    x : Interval
    n : Interval | int
        Degree of the root. An interval degree must be a singleton. A degree less than
        one yields the empty interval.

    Raises
    ------
    PowerIsNotInteger
        If `n` is an interval but not a singleton.
    ValueError
        If the root is even, `x` contains a negative number, and the policy is
        ``"FAIL"``.

    Examples
    --------
    >>> from enclose import Interval
    >>> nth_root(Interval(-8, 27), 3)
    Interval(-2.0, 3.0)
    >>> nth_root(Interval(-4, 9), 2)
    Interval(0.0, 3.0)
    """
    n = _degree(n)

    if x.is_empty() or n < 1:
        return EMPTY

    if n % 2 == 0:
        if x.low < 0.0:
            if getcontext().even_root == "FAIL":
                raise ValueError("math domain error")

            logger.debug("discarding the negative part of %s for root %d", x, n)
            x = x & Interval(0.0, math.inf)

            if x.is_empty():
                return EMPTY

        return Interval(rd.root_low(x.low, n), rd.root_high(x.high, n))

    inf = -rd.root_high(-x.low, n) if x.low < 0.0 else rd.root_low(x.low, n)
    sup = -rd.root_low(-x.high, n) if x.high < 0.0 else rd.root_high(x.high, n)
    return Interval(inf, sup)


def sqrt(x: Interval, /) -> Interval:
    """Square root.

    This function is defined as ``nth_root(x, 2)``.

    Examples
    --------
    >>> from enclose import Interval
    >>> sqrt(Interval(4, 9))
    Interval(2.0, 3.0)
    """
    return nth_root(x, 2)


def _fmod_nonnegative(low: float, high: float, divisor: Interval) -> Interval:
    # 0 <= low <= high and 0 < divisor.low
    c = divisor.low
    d = divisor.high
    k_min = math.floor(rd.div_low(low, d))
    k_max = rd.div_high(high, c)

    if math.isfinite(k_max) and k_min == math.floor(k_max):
        k = float(k_min)
        inf = rd.sub_low(low, rd.mul_high(k, d))
        sup = rd.sub_high(high, rd.mul_low(k, c))
        return Interval(inf, sup) & Interval(0.0, d)

    logger.debug("quotient of [%r, %r] by %s is not constant", low, high, divisor)
    return Interval(0.0, min(high, d))


def fmod(x: Interval, y: Interval | float | int, /) -> Interval:
    """Enclosure of ``math.fmod(a, b)`` for every `a` in `x` and `b` in `y`.

    The remainder is ``a - k * b``, where ``k`` is the quotient truncated towards
    zero, so the result has the sign of `a` and a magnitude below ``abs(b)``. If the
    quotient takes a single integer value on the whole of ``x / y``, the result is
    the exact range ``x - k * y``; otherwise it is bounded by the divisor.

    Raises
    ------
    IntervalDivisionByZero
        If `y` contains zero.

    Examples
    --------
    >>> from enclose import Interval
    >>> fmod(Interval(5.5, 5.75), 2)
    Interval(1.5, 1.75)
    >>> fmod(Interval(-7, -5), 3)
    Interval(-3.0, 0.0)
    """
    match y:
        case float() | int():
            y = Interval(y)

    if x.is_empty() or y.is_empty():
        return EMPTY

    if y.has_zero():
        raise IntervalDivisionByZero

    y = abs(y)
    result = EMPTY

    if x.low < 0.0:
        result = -_fmod_nonnegative(-min(x.high, 0.0), -x.low, y)

    if x.high >= 0.0:
        result |= _fmod_nonnegative(max(x.low, 0.0), x.high, y)

    return result
