import fractions
import logging
import math

import numpy as np
import pytest

from enclose import (
    EMPTY,
    ONE,
    WHOLE,
    Interval,
    IntervalDivisionByZero,
    PowerIsNotInteger,
    fmod,
    localcontext,
    nth_root,
    sqrt,
)

F = fractions.Fraction


def test_pow_interval_exponent():
    assert Interval(2, 2).pow(Interval(3, 3)) == Interval(8, 8)
    assert Interval(2).pow(Interval(2.9999999999)) == Interval(8)

    with pytest.raises(PowerIsNotInteger):
        Interval(2, 2).pow(Interval(2, 3))

    with pytest.raises(ValueError):
        Interval(2) ** Interval(2, 3)


def test_pow():
    assert Interval(-2, 3) ** 2 == Interval(0, 9)
    assert Interval(-2, 3) ** 3 == Interval(-8, 27)
    assert Interval(-3, -2) ** 2 == Interval(4, 9)
    assert Interval(-3, -2) ** 3 == Interval(-27, -8)
    assert Interval(1, 2) ** 10 == Interval(1, 1024)
    assert Interval(-5, 7) ** 0 == ONE
    assert (EMPTY**2).is_empty()
    assert WHOLE**2 == Interval(0, math.inf)
    assert WHOLE**3 == WHOLE


def test_pow_negative():
    assert Interval(2, 4) ** -1 == Interval(0.25, 0.5)
    assert Interval(-1, 2) ** -2 == Interval(0.25, math.inf)
    assert (Interval(0) ** -1).is_empty()


def test_pow_encloses_samples():
    x0, x1 = -1.5, 2.5

    for n in range(1, 8):
        r = Interval(x0, x1) ** n

        for a in np.linspace(x0, x1, 41):
            assert F(r.low) <= F(float(a)) ** n <= F(r.high)

    r = Interval(1.1, 1.3) ** 5
    assert F(r.low) <= F(1.1) ** 5
    assert F(1.3) ** 5 <= F(r.high)


def test_sqrt():
    assert Interval(4, 9).sqrt() == Interval(2, 3)
    assert sqrt(Interval(0)) == Interval(0)

    x = sqrt(Interval(2))
    assert F(x.low) ** 2 < 2 < F(x.high) ** 2


def test_sqrt_negative_clamps():
    assert sqrt(Interval(-4, 9)) == Interval(0, 3)
    assert sqrt(Interval(-4, -1)).is_empty()
    assert sqrt(WHOLE) == Interval(0, math.inf)


def test_sqrt_negative_fails():
    with localcontext(even_root="FAIL"):
        assert sqrt(Interval(4, 9)) == Interval(2, 3)

        with pytest.raises(ValueError):
            sqrt(Interval(-4, 9))


def test_sqrt_logs_clamp(caplog):
    with caplog.at_level(logging.DEBUG, logger="enclose.algebra"):
        sqrt(Interval(-1, 4))

    assert "negative part" in caplog.text


def test_nth_root():
    assert Interval(-8, 27).nth_root(3) == Interval(-2, 3)
    assert Interval(-27, -8).nth_root(3) == Interval(-3, -2)
    assert nth_root(Interval(16), Interval(4)) == Interval(2)
    assert nth_root(Interval(16, 81), 4) == Interval(2, 3)
    assert nth_root(Interval(5, 6), 1) == Interval(5, 6)
    assert nth_root(WHOLE, 3) == WHOLE
    assert nth_root(Interval(1, 2), 0).is_empty()
    assert nth_root(EMPTY, 3).is_empty()

    with pytest.raises(PowerIsNotInteger):
        nth_root(Interval(1, 2), Interval(2, 3))


def test_nth_root_encloses_samples():
    for n in range(2, 7):
        r = nth_root(Interval(0.5, 20.0), n)

        for a in np.linspace(0.5, 20.0, 31):
            assert F(r.low) ** n <= F(float(a)) <= F(r.high) ** n


def test_fmod():
    assert fmod(Interval(5.5, 5.75), Interval(2)) == Interval(1.5, 1.75)
    assert fmod(Interval(5, 7), Interval(3)) == Interval(0, 3)
    assert fmod(Interval(-7, -5), 3) == Interval(-3, 0)
    assert fmod(Interval(1, 2), Interval(10, 20)) == Interval(1, 2)
    assert fmod(Interval(1, 2), Interval(-20, -10)) == Interval(1, 2)
    assert Interval(5.5, 5.75).fmod(2) == Interval(1.5, 1.75)


def test_fmod_unbounded():
    assert fmod(WHOLE, Interval(2, 3)) == Interval(-3, 3)
    assert fmod(Interval(0, math.inf), Interval(2)) == Interval(0, 2)
    assert fmod(Interval(1, 2), Interval(1, math.inf)) == Interval(0, 2)


def test_fmod_degenerate():
    assert fmod(EMPTY, Interval(2)).is_empty()
    assert fmod(Interval(1, 2), EMPTY).is_empty()

    with pytest.raises(IntervalDivisionByZero):
        fmod(Interval(1, 2), Interval(-1, 1))

    with pytest.raises(IntervalDivisionByZero):
        fmod(Interval(1, 2), 0)


def test_fmod_encloses_samples():
    rng = np.random.default_rng(5)

    for _ in range(60):
        a0, a1 = sorted(float(v) for v in rng.uniform(-20.0, 20.0, 2))
        b0, b1 = sorted(float(v) for v in rng.uniform(0.5, 4.0, 2))

        if rng.uniform() < 0.5:
            b0, b1 = -b1, -b0

        r = fmod(Interval(a0, a1), Interval(b0, b1))

        for a in np.linspace(a0, a1, 25):
            for b in np.linspace(b0, b1, 7):
                assert r.low <= math.fmod(a, b) <= r.high
