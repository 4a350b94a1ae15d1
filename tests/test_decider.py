import math

import pytest

from suwidgets.decider import DecisionMode, Decider


def test_defaults():
    d = Decider()
    assert d.mode is DecisionMode.ARGUMENT
    assert d.bps == 1
    assert d.intervals == 2
    assert d.delta == pytest.approx(math.pi)
    assert d.symbols == b""


@pytest.mark.parametrize("bps", [1, 2, 3, 4])
def test_intervals_follow_bps(bps):
    d = Decider()
    d.bps = bps
    assert d.intervals == 2 ** bps
    assert d.delta * d.intervals == pytest.approx(d.maximum - d.minimum)


def test_range_updates_delta():
    d = Decider()
    d.minimum = -1.0
    d.maximum = 3.0
    assert d.delta * d.intervals == pytest.approx(4.0)


def test_argument_decision():
    d = Decider()
    d.minimum = -math.pi
    d.maximum = math.pi
    assert list(d.decide([1j, -1j])) == [1, 0]


def test_modulus_clamps():
    d = Decider()
    d.mode = DecisionMode.MODULUS
    d.minimum = 0.0
    d.maximum = 1.0
    d.bps = 2
    result = d.decide([0.1, 0.9, 5.0])
    assert result[0] == 0
    assert result[1] == d.intervals - 1
    assert result[2] == d.intervals - 1


def test_symbols_within_intervals():
    d = Decider()
    d.bps = 3
    samples = [complex(math.cos(a), math.sin(a)) for a in range(-10, 10)]
    assert all(0 <= s < d.intervals for s in d.decide(samples))


def test_feed_stores_decision():
    d = Decider()
    samples = [1 + 1j, -1 - 1j, 0.5j]
    d.feed(samples)
    assert d.symbols == d.decide(samples)
    assert len(d.symbols) == len(samples)


def test_empty_range_raises():
    d = Decider()
    d.maximum = d.minimum
    with pytest.raises(ValueError):
        d.decide([1j])


def test_negative_bps_rejected():
    d = Decider()
    with pytest.raises(ValueError):
        d.bps = -1
    assert d.bps == 1
    assert d.intervals == 2
    assert d.delta == pytest.approx(math.pi)