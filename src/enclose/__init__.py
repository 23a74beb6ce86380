"""
####################################
Interval arithmetic (:mod:`enclose`)
####################################

.. currentmodule:: enclose

This package provides closed intervals of real numbers whose arithmetic always
encloses the exact result, even under floating-point rounding.

Intervals
=========

.. autosummary::
    :toctree: generated/

    Interval
    IntervalTuple
    Kind

Constants
=========

.. autosummary::
    :toctree: generated/

    EMPTY
    ONE
    WHOLE
    ZERO

Exceptions
==========

.. autosummary::
    :toctree: generated/

    IntervalDivisionByZero
    PowerIsNotInteger

"""

# algebra has to be loaded before interval, which refers back to it.
from .algebra import fmod, nth_root, pow, sqrt
from .constants import EMPTY, ONE, WHOLE, ZERO
from .context import Context, getcontext, localcontext, setcontext
from .exceptions import IntervalDivisionByZero, PowerIsNotInteger
from .interval import Interval, Kind
from .intervaltuple import IntervalTuple

__all__ = [
    "fmod",
    "nth_root",
    "pow",
    "sqrt",
    "EMPTY",
    "ONE",
    "WHOLE",
    "ZERO",
    "Context",
    "getcontext",
    "localcontext",
    "setcontext",
    "IntervalDivisionByZero",
    "PowerIsNotInteger",
    "Interval",
    "Kind",
    "IntervalTuple",
]
