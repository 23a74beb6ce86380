import dataclasses

from enclose.interval import Interval


@dataclasses.dataclass(frozen=True, slots=True)
class IntervalTuple:
    """Pair of intervals exchanged between a function sampler and a plotter.

    Attributes
    ----------
    x : Interval
        Range of the argument, typically one pixel column.
    y : Interval
        Enclosure of the function values over `x`.

    Examples
    --------
    >>> from enclose import Interval
    >>> t = IntervalTuple(Interval(0, 1), Interval(0, 1) * 2)
    >>> print(t)
    IntervalTuple(x=Interval [0.0, 1.0], y=Interval [0.0, 2.0])
    """

    x: Interval
    y: Interval

    def is_empty(self) -> bool:
        """Return ``True`` if either component is empty."""
        return self.x.is_empty() or self.y.is_empty()

    def almost_equal(self, other: "IntervalTuple") -> bool:
        return self.x.almost_equal(other.x) and self.y.almost_equal(other.y)

    def __str__(self) -> str:
        return f"{type(self).__name__}(x={self.x}, y={self.y})"
