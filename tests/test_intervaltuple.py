import dataclasses

import pytest

from enclose import EMPTY, Interval, IntervalTuple


def test_is_empty():
    assert not IntervalTuple(Interval(0, 1), Interval(2, 3)).is_empty()
    assert IntervalTuple(Interval(0, 1), EMPTY).is_empty()
    assert IntervalTuple(EMPTY, Interval(2, 3)).is_empty()


def test_almost_equal():
    t = IntervalTuple(Interval(0, 1), Interval(2, 3))
    assert t.almost_equal(IntervalTuple(Interval(0, 1.00000001), Interval(2, 3)))
    assert not t.almost_equal(IntervalTuple(Interval(0, 1.1), Interval(2, 3)))
    assert t == IntervalTuple(Interval(0.0, 1.0), Interval(2.0, 3.0))


def test_frozen():
    t = IntervalTuple(Interval(0, 1), Interval(2, 3))

    with pytest.raises(dataclasses.FrozenInstanceError):
        t.x = Interval(5)  # type: ignore


def test_str():
    t = IntervalTuple(Interval(-1, 1), Interval(0.5))
    assert str(t) == "IntervalTuple(x=Interval [-1.0, 1.0], y=Interval [0.5])"
