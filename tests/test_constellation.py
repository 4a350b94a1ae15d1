import cmath

import pytest

from suwidgets.color import Color
from suwidgets.constellation import (
    DEFAULT_HISTORY_SIZE,
    Constellation,
)


def test_defaults():
    c = Constellation()
    assert c.history_size == DEFAULT_HISTORY_SIZE
    assert c.order_hint == 2
    assert c.gain == pytest.approx(1.414)
    assert c.points() == []


def test_feed_fewer_than_history():
    c = Constellation(history_size=8)
    c.feed([1 + 1j, 2 + 2j, 3 + 3j])
    assert c.amount == 3
    assert c.samples() == [1 + 1j, 2 + 2j, 3 + 3j]


def test_feed_more_than_history_keeps_last():
    c = Constellation(history_size=4)
    data = [complex(i, 0) for i in range(10)]
    c.feed(data)
    assert c.amount == 4
    assert c.samples() == data[-4:]


def test_feed_wraps_ring_buffer():
    c = Constellation(history_size=4)
    c.feed([1, 2, 3])
    c.feed([4, 5, 6])
    assert c.samples() == [3, 4, 5, 6]


def test_set_history_size_resets_amount():
    c = Constellation(history_size=4)
    c.feed([1, 2])
    c.set_history_size(10)
    assert c.history_size == 10
    assert c.amount == 0
    assert c.samples() == []


def test_negative_history_size_rejected():
    with pytest.raises(ValueError):
        Constellation().set_history_size(-1)


def test_to_screen_origin_is_centre():
    c = Constellation()
    c.resize(100, 50)
    assert c.to_screen(0, 0) == (50, 25)


def test_to_screen_is_symmetric():
    c = Constellation()
    c.resize(200, 200)
    x, y = c.to_screen(1, 1)
    mx, my = c.to_screen(-1, -1)
    assert x - 100 == 100 - mx
    assert y - 100 == 100 - my
    assert x > 100 and y < 100


def test_points_alpha_increases_and_reaches_full_when_full():
    c = Constellation(history_size=4)
    c.resize(100, 100)
    c.feed([1, 1j, -1, -1j])
    alphas = [p.alpha for p in c.points()]
    assert alphas == sorted(alphas)
    assert alphas[-1] == 255


def test_points_apply_gain():
    c = Constellation(history_size=2)
    c.resize(100, 100)
    c.gain = 1.0
    c.feed([0.5 + 0j])
    point = c.points()[0]
    assert (point.x, point.y) == c.to_screen(0.5, 0)


def test_hint_markers_on_unit_circle():
    c = Constellation()
    markers = c.hint_markers()
    assert len(markers) == 4
    for m in markers:
        assert abs(m) == pytest.approx(1.0)
    assert cmath.phase(markers[0]) == pytest.approx(cmath.pi / 4)


def test_hint_markers_disabled_with_zero_bits():
    c = Constellation()
    c.order_hint = 0
    assert c.hint_markers() == []


def test_marker_size_shrinks_for_high_orders():
    c = Constellation()
    small = c.marker_size
    c.order_hint = 5
    assert c.marker_size < small


def test_order_hint_signal_only_on_change():
    c = Constellation()
    calls = []
    c.order_hint_changed.connect(lambda: calls.append(1))
    c.order_hint = 2
    c.order_hint = 3
    c.order_hint = 3
    assert calls == [1]
    assert c.order_hint == 3


def test_color_setters_emit():
    c = Constellation()
    calls = []
    c.axes_color_changed.connect(lambda: calls.append("axes"))
    c.axes_color = Color(1, 2, 3)
    assert calls == ["axes"]
    assert c.axes_color == Color(1, 2, 3)


def test_resize_negative_rejected():
    with pytest.raises(ValueError):
        Constellation().resize(-1, 10)