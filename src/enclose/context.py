"""
################################
Context (:mod:`enclose.context`)
################################

.. currentmodule:: enclose.context

This module provides the settings shared by interval operations.

.. autosummary::
    :toctree: generated/

    Context
    getcontext
    localcontext
    setcontext

"""

import contextlib
import contextvars
from typing import Final, Literal, Self

DEFAULT_TOLERANCE: Final = 1e-7


class Context:
    """Create a new context.

    Parameters
    ----------
    tolerance : float, default=1e-7
        Absolute tolerance used by :meth:`Interval.is_singleton` and
        :meth:`Interval.almost_equal`.
    even_root : Literal["CLAMP", "FAIL"], default="CLAMP"
        Policy for even roots of ranges containing negative numbers. If `even_root`
        is ``"CLAMP"``, the negative part is discarded before taking the root, and a
        range that is entirely negative yields the empty interval. If `even_root` is
        ``"FAIL"``, :class:`ValueError` is raised instead.

    Raises
    ------
    ValueError
        If `tolerance` is negative or `even_root` is not a known policy.
    """

    __slots__ = ("_tolerance", "_even_root")
    _tolerance: float
    _even_root: Literal["CLAMP", "FAIL"]

    def __init__(
        self,
        tolerance: float = DEFAULT_TOLERANCE,
        even_root: Literal["CLAMP", "FAIL"] = "CLAMP",
    ):
        if not tolerance >= 0.0:
            raise ValueError(f"tolerance must be non-negative, got {tolerance!r}")

        if even_root not in ("CLAMP", "FAIL"):
            raise ValueError(f"unknown even root policy: {even_root!r}")

        self._tolerance = tolerance
        self._even_root = even_root

    @property
    def tolerance(self) -> float:
        return self._tolerance

    @property
    def even_root(self) -> Literal["CLAMP", "FAIL"]:
        return self._even_root

    def copy(self) -> Self:
        return self.__class__(self._tolerance, self._even_root)

    def __repr__(self):
        return (
            f"{type(self).__name__}("
            f"tolerance={self._tolerance!r}, even_root={self._even_root!r})"
        )

    def __copy__(self) -> Self:
        return self.copy()


_var: contextvars.ContextVar[Context] = contextvars.ContextVar("enclose")


def getcontext() -> Context:
    """Return the current context for the active thread."""
    if context := _var.get(None):
        return context

    context = Context()
    _var.set(context)
    return context


def setcontext(ctx: Context) -> None:
    """Set the current context for the active thread to `ctx`."""
    _var.set(ctx)


@contextlib.contextmanager
def localcontext(
    ctx: Context | None = None,
    *,
    tolerance: float | None = None,
    even_root: Literal["CLAMP", "FAIL"] | None = None,
):
    """Return a context manager that will set the current context for the active thread
    to a copy of `ctx` on entry to the with-statement and restore the previous context
    when exiting the with-statement.

    Examples
    --------
    >>> from enclose import Interval
    >>> with localcontext(tolerance=0.5):
    ...     Interval(1.0, 1.25).is_singleton()
    True
    >>> Interval(1.0, 1.25).is_singleton()
    False
    """
    if ctx is None:
        ctx = getcontext()

    if tolerance is None:
        tolerance = ctx.tolerance

    if even_root is None:
        even_root = ctx.even_root

    ctx = Context(tolerance, even_root)
    token = _var.set(ctx)

    try:
        yield ctx
    finally:
        _var.reset(token)
