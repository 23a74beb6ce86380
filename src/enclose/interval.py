import enum
import math
from typing import Final, Self

from enclose import algebra
from enclose import rounding as rd
from enclose.context import getcontext
from enclose.exceptions import IntervalDivisionByZero
from enclose.rounding import ROUND_CEILING, ROUND_FLOOR, RoundingMode

_ZERO: Final = 0.0
_INFINITY: Final = math.inf


class Kind(enum.Enum):
    """Tag distinguishing the three shapes of an interval.

    Attributes
    ----------
    EMPTY
        Contains no real number.
    WHOLE
        Contains every real number.
    BOUNDED
        Has explicit endpoints, at most one of which is infinite.
    """

    EMPTY = enum.auto()
    WHOLE = enum.auto()
    BOUNDED = enum.auto()

    def __repr__(self):
        return f"<{self.__class__.__name__}.{self.name}>"


def _endpoint(value: float | int, rounding: RoundingMode) -> float:
    match value:
        case float():
            return float(value)

        case int():
            return rd.fromint(value, rounding)

    raise TypeError(f"unsupported endpoint type: {type(value).__name__}")


def _isclose(lhs: float, rhs: float, tolerance: float) -> bool:
    return lhs == rhs or abs(lhs - rhs) <= tolerance


class Interval:
    """Closed interval of real numbers with outward-rounded arithmetic.

    Intervals are immutable: every operation returns a new instance, so values such
    as :data:`enclose.EMPTY` can be shared freely.

    Parameters
    ----------
    low : float | int | None, optional
        Lower bound of the interval.
    high : float | int | None, optional
        Upper bound of the interval. If omitted, the interval is the singleton
        ``[low, low]``. If both bounds are omitted, the interval is empty.

    Attributes
    ----------
    low : float
        Lower bound. ``inf`` if the interval is empty.
    high : float
        Upper bound. ``-inf`` if the interval is empty.
    kind : Kind

    Notes
    -----
    An interval is empty if ``high < low``, if either bound is NaN, or if it would
    contain no finite number (``low == inf`` or ``high == -inf``). Integer bounds are
    rounded outwards, and a bound of ``-0.0`` is stored as ``0.0``.

    Examples
    --------
    >>> x = Interval(-2, 3)
    >>> y = Interval(-4, 5)
    >>> print(x * y)
    Interval [-12.0, 15.0]
    >>> print(Interval(3.0, 1.0))
    Interval []
    >>> Interval(0, 4).multiplicative_inverse()
    Interval(0.25, inf)
    """

    __slots__ = ("_kind", "_low", "_high")
    _kind: Kind
    _low: float
    _high: float

    def __init__(
        self,
        low: float | int | None = None,
        high: float | int | None = None,
    ):
        if low is None:
            if high is None:
                self._setempty()
                return

            low = high

        inf = _endpoint(low, ROUND_FLOOR)
        sup = _endpoint(low if high is None else high, ROUND_CEILING)

        if (
            math.isnan(inf)
            or math.isnan(sup)
            or inf > sup
            or inf == _INFINITY
            or sup == -_INFINITY
        ):
            self._setempty()
            return

        if inf == -_INFINITY and sup == _INFINITY:
            self._kind = Kind.WHOLE
        else:
            self._kind = Kind.BOUNDED

        # -0.0 + 0.0 == +0.0
        self._low = inf + _ZERO
        self._high = sup + _ZERO

    def _setempty(self) -> None:
        self._kind = Kind.EMPTY
        self._low = _INFINITY
        self._high = -_INFINITY

    @property
    def low(self) -> float:
        return self._low

    @property
    def high(self) -> float:
        return self._high

    @property
    def kind(self) -> Kind:
        return self._kind

    def copy(self) -> Self:
        """Return a copy of the interval."""
        return self.__class__(self._low, self._high)

    def add(self, other: Self) -> Self:
        """Return an enclosure of ``{a + b | a in self, b in other}``."""
        if self.is_empty() or other.is_empty():
            return self.__class__()

        inf = rd.add_low(self._low, other._low)
        sup = rd.add_high(self._high, other._high)
        return self.__class__(inf, sup)

    def subtract(self, other: Self) -> Self:
        """Return an enclosure of ``{a - b | a in self, b in other}``."""
        if self.is_empty() or other.is_empty():
            return self.__class__()

        inf = rd.sub_low(self._low, other._high)
        sup = rd.sub_high(self._high, other._low)
        return self.__class__(inf, sup)

    def multiply(self, other: Self) -> Self:
        """Return an enclosure of ``{a * b | a in self, b in other}``.

        The result is spanned by the extremes of the four products of the bounds;
        which products are extreme is decided from the signs of the operands.
        """
        if self.is_empty() or other.is_empty():
            return self.__class__()

        fmul = rd.mul_low
        cmul = rd.mul_high

        if self._high <= _ZERO:
            if other._high <= _ZERO:
                inf = fmul(self._high, other._high)
                sup = cmul(self._low, other._low)
            elif other._low >= _ZERO:
                inf = fmul(self._low, other._high)
                sup = cmul(self._high, other._low)
            else:
                inf = fmul(self._low, other._high)
                sup = cmul(self._low, other._low)

            return self.__class__(inf, sup)

        if self._low >= _ZERO:
            if other._high <= _ZERO:
                inf = fmul(self._high, other._low)
                sup = cmul(self._low, other._high)
            elif other._low >= _ZERO:
                inf = fmul(self._low, other._low)
                sup = cmul(self._high, other._high)
            else:
                inf = fmul(self._high, other._low)
                sup = cmul(self._high, other._high)

            return self.__class__(inf, sup)

        if other._high <= _ZERO:
            inf = fmul(self._high, other._low)
            sup = cmul(self._low, other._low)
        elif other._low >= _ZERO:
            inf = fmul(self._low, other._high)
            sup = cmul(self._high, other._high)
        else:
            inf = min(fmul(self._low, other._high), fmul(self._high, other._low))
            sup = max(cmul(self._low, other._low), cmul(self._high, other._high))

        return self.__class__(inf, sup)

    def divide(self, other: Self) -> Self:
        """Return an enclosure of ``{a / b | a in self, b in other}``.

        Raises
        ------
        IntervalDivisionByZero
            If `other` contains zero.
        """
        if self.is_empty() or other.is_empty():
            return self.__class__()

        if other.has_zero():
            raise IntervalDivisionByZero

        fdiv = rd.div_low
        cdiv = rd.div_high

        if other._high < _ZERO:
            if self._high < _ZERO:
                inf = fdiv(self._high, other._low)
                sup = cdiv(self._low, other._high)
            elif self._low > _ZERO:
                inf = fdiv(self._high, other._high)
                sup = cdiv(self._low, other._low)
            else:
                inf = fdiv(self._high, other._high)
                sup = cdiv(self._low, other._high)

            return self.__class__(inf, sup)

        if self._high < _ZERO:
            inf = fdiv(self._low, other._low)
            sup = cdiv(self._high, other._high)
        elif self._low > _ZERO:
            inf = fdiv(self._low, other._high)
            sup = cdiv(self._high, other._low)
        else:
            inf = fdiv(self._low, other._low)
            sup = cdiv(self._high, other._low)

        return self.__class__(inf, sup)

    def multiplicative_inverse(self) -> Self:
        """Return an enclosure of ``{1 / a | a in self, a != 0}``.

        A range with zero in its interior maps to the whole line, and ``[0, 0]`` maps
        to the empty interval.
        """
        if self.is_empty():
            return self.__class__()

        if self.has_zero():
            if self._low != _ZERO:
                if self._high != _ZERO:
                    return self.__class__(-_INFINITY, _INFINITY)

                return self.__class__(-_INFINITY, rd.div_high(1.0, self._low))

            if self._high != _ZERO:
                return self.__class__(rd.div_low(1.0, self._high), _INFINITY)

            return self.__class__()

        return self.__class__(rd.div_low(1.0, self._high), rd.div_high(1.0, self._low))

    def pow(self, exponent: Self | int) -> Self:
        """Alias of :func:`enclose.algebra.pow`."""
        return algebra.pow(self, exponent)

    def sqrt(self) -> Self:
        """Alias of :func:`enclose.algebra.sqrt`."""
        return algebra.sqrt(self)

    def nth_root(self, n: Self | int) -> Self:
        """Alias of :func:`enclose.algebra.nth_root`."""
        return algebra.nth_root(self, n)

    def fmod(self, other: Self | float | int) -> Self:
        """Alias of :func:`enclose.algebra.fmod`."""
        return algebra.fmod(self, other)

    def has_zero(self) -> bool:
        """Return ``True`` if the interval contains zero."""
        return self._low <= _ZERO <= self._high

    def is_empty(self) -> bool:
        return self._kind is Kind.EMPTY

    def is_whole(self) -> bool:
        """Return ``True`` if the interval represents all the real numbers."""
        return self._kind is Kind.WHOLE

    def is_singleton(self) -> bool:
        """Return ``True`` if the interval is ``[n, n]`` for a finite `n`.

        The bounds are compared with the tolerance of the current context.
        """
        if self._kind is not Kind.BOUNDED or not math.isfinite(self._low):
            return False

        return _isclose(self._low, self._high, getcontext().tolerance)

    def is_overlap(self, other: Self) -> bool:
        """Return ``True`` if the intervals share at least one point."""
        if self.is_empty() or other.is_empty():
            return False

        return (self._low <= other._low <= self._high) or (
            other._low <= self._low <= other._high
        )

    def almost_equal(self, other: Self) -> bool:
        """Return ``True`` if both bounds agree within the context tolerance."""
        tolerance = getcontext().tolerance
        return _isclose(self._low, other._low, tolerance) and _isclose(
            self._high, other._high, tolerance
        )

    def half_open_left(self) -> Self:
        """Return ``[next(low), high]``, the closed stand-in for ``(low, high]``."""
        if self.is_empty():
            return self

        return self.__class__(rd.next(self._low), self._high)

    def half_open_right(self) -> Self:
        """Return ``[low, prev(high)]``, the closed stand-in for ``[low, high)``."""
        if self.is_empty():
            return self

        return self.__class__(self._low, rd.prev(self._high))

    def hull(self, *args: Self | float | int) -> Self:
        """Return an interval hull."""
        result = self

        for arg in args:
            result |= arg

        return result

    def intersection(self, other: Self) -> Self:
        """Return the common part of the intervals, which may be empty."""
        if self.is_empty() or other.is_empty():
            return self.__class__()

        return self.__class__(max(self._low, other._low), min(self._high, other._high))

    def __repr__(self) -> str:
        if self.is_empty():
            return f"{type(self).__name__}()"

        return f"{type(self).__name__}({self._low!r}, {self._high!r})"

    def __str__(self) -> str:
        if self.is_empty():
            return "Interval []"

        if self.is_singleton():
            return f"Interval [{self._low!r}]"

        return f"Interval [{self._low!r}, {self._high!r}]"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented

        return (
            self._kind is other._kind
            and self._low == other._low
            and self._high == other._high
        )

    def __hash__(self) -> int:
        return hash((self._kind, self._low, self._high))

    def __contains__(self, item) -> bool:
        match item:
            case float():
                return math.isfinite(item) and self._low <= item <= self._high

            case int():
                return self._low <= item <= self._high

        raise TypeError

    def __add__(self, rhs: Self | float | int) -> Self:
        match rhs:
            case Interval():
                return self.add(rhs)

            case float() | int():
                return self.add(self.__class__(rhs))

        return NotImplemented

    def __sub__(self, rhs: Self | float | int) -> Self:
        match rhs:
            case Interval():
                return self.subtract(rhs)

            case float() | int():
                return self.subtract(self.__class__(rhs))

        return NotImplemented

    def __mul__(self, rhs: Self | float | int) -> Self:
        match rhs:
            case Interval():
                return self.multiply(rhs)

            case float() | int():
                return self.multiply(self.__class__(rhs))

        return NotImplemented

    def __truediv__(self, rhs: Self | float | int) -> Self:
        match rhs:
            case Interval():
                return self.divide(rhs)

            case float() | int():
                return self.divide(self.__class__(rhs))

        return NotImplemented

    def __pow__(self, rhs: Self | int) -> Self:
        match rhs:
            case Interval() | int():
                return algebra.pow(self, rhs)

        return NotImplemented

    def __and__(self, rhs: Self | float | int) -> Self:
        match rhs:
            case Interval():
                return self.intersection(rhs)

            case float() | int():
                return self.intersection(self.__class__(rhs))

        return NotImplemented

    def __or__(self, rhs: Self | float | int) -> Self:
        match rhs:
            case Interval():
                if self.is_empty():
                    return rhs

                if rhs.is_empty():
                    return self

                return self.__class__(
                    min(self._low, rhs._low), max(self._high, rhs._high)
                )

            case float() | int():
                return self.__or__(self.__class__(rhs))

        return NotImplemented

    def __radd__(self, lhs: Self | float | int) -> Self:
        return self.__add__(lhs)

    def __rsub__(self, lhs: Self | float | int) -> Self:
        return self.__neg__().__add__(lhs)

    def __rmul__(self, lhs: Self | float | int) -> Self:
        return self.__mul__(lhs)

    def __rtruediv__(self, lhs: Self | float | int) -> Self:
        match lhs:
            case float() | int():
                return self.__class__(lhs).divide(self)

            case Interval():
                return lhs.divide(self)

        return NotImplemented

    def __rand__(self, lhs: Self | float | int) -> Self:
        return self.__and__(lhs)

    def __ror__(self, lhs: Self | float | int) -> Self:
        return self.__or__(lhs)

    def __neg__(self) -> Self:
        if self.is_empty():
            return self

        return self.__class__(-self._high, -self._low)

    def __pos__(self) -> Self:
        return self

    def __abs__(self) -> Self:
        if self.is_empty() or self._low >= _ZERO:
            return self

        if self._high <= _ZERO:
            return self.__neg__()

        return self.__class__(_ZERO, max(-self._low, self._high))

    def __copy__(self) -> Self:
        return self.copy()
