import math

import pytest

from suwidgets.decider import DecisionMode, Decider
from suwidgets.helpers import format_quantity
from suwidgets.histogram import DEFAULT_HISTORY_SIZE, Histogram, MouseButton


def make(mode=DecisionMode.ARGUMENT, width=200, height=100):
    hist = Histogram()
    decider = Decider()
    decider.mode = mode
    hist.set_decider(decider)
    hist.resize(width, height)
    return hist, decider


def test_default_history_size():
    hist = Histogram()
    assert len(hist.history) == DEFAULT_HISTORY_SIZE
    assert hist.max == 0


def test_ranges_without_decider():
    hist = Histogram()
    assert hist.data_range() == 1.0
    assert hist.display_range() == 1.0
    assert hist.units() == ""
    assert hist.division_length() == 0.0
    assert hist.axis_labels() == []


def test_ranges_argument_mode():
    hist, _ = make()
    assert hist.data_range() == pytest.approx(2 * math.pi)
    assert hist.display_range() == 360
    assert hist.units() == "º"


def test_ranges_modulus_mode():
    hist, _ = make(DecisionMode.MODULUS)
    assert hist.data_range() == 1.0
    assert hist.display_range() == 1.0
    assert hist.units() == ""


def test_overrides_take_precedence():
    hist, _ = make()
    hist.override_data_range(10.0)
    hist.override_display_range(20.0)
    hist.override_units("V")
    assert hist.data_range() == 10.0
    assert hist.display_range() == 20.0
    assert hist.units() == "V"


def test_resize_matches_history_to_width():
    hist, _ = make(width=123)
    assert len(hist.history) == 123
    assert all(v == 0 for v in hist.history)


def test_resize_negative_raises():
    with pytest.raises(ValueError):
        Histogram().resize(-1, 10)


def test_feed_without_decider_ignored():
    hist = Histogram()
    hist.feed([1j, 0.5])
    assert sum(hist.history) == 0


def test_feed_complex_counts_in_range_only():
    hist, _ = make()
    hist.feed([1j, -1j, 1 + 1j])
    # -1j has a negative phase, outside [0, 2pi)
    assert sum(hist.history) == 2
    assert hist.max == max(hist.history)


def test_feed_real_values_and_max():
    hist, _ = make(DecisionMode.MODULUS)
    hist.reset_decider()
    hist.feed([0.5, 0.5, 0.5, 0.25, 2.0, -0.5])
    assert sum(hist.history) == 4
    assert hist.max == 3


def test_feed_modulus_complex():
    hist, _ = make(DecisionMode.MODULUS)
    hist.reset_decider()
    hist.feed([0.5j, 0.5 + 0j])
    assert hist.max == 2


def test_reset_clears_bins():
    hist, _ = make()
    hist.feed([1j])
    hist.reset()
    assert sum(hist.history) == 0
    assert hist.max == 0


def test_order_hint_follows_decider_and_resets():
    hist, decider = make()
    assert hist.order_hint == decider.bps
    hist.feed([1j])
    events = []
    hist.order_hint_changed.connect(lambda: events.append(1))
    hist.order_hint = 4
    assert events == [1]
    assert sum(hist.history) == 0


def test_snr_model_size_check():
    hist, _ = make(width=10)
    assert hist.set_snr_model([0.1] * 5) is False
    assert hist.model == []
    assert hist.set_snr_model([0.5] * 10) is True
    assert hist.model == [0.5] * 10


def test_reset_decider_argument():
    hist, decider = make()
    limits = []
    hist.reset_limits.connect(lambda: limits.append(True))
    hist.reset_decider()
    assert decider.minimum == pytest.approx(-math.pi)
    assert decider.maximum == pytest.approx(math.pi)
    assert limits == [True]


def test_reset_decider_modulus():
    hist, decider = make(DecisionMode.MODULUS)
    hist.reset_decider()
    assert decider.minimum == 0.0
    assert decider.maximum == 1.0


def test_reset_decider_without_update_keeps_limits():
    hist, decider = make()
    hist.update_decider = False
    hist.reset_decider()
    assert decider.minimum == 0.0
    assert decider.maximum == pytest.approx(2 * math.pi)


def test_division_length_full_circle_degrees():
    hist, _ = make()
    hist.reset_decider()
    assert hist.division_length() == 45


def test_division_length_modulus_unit_range():
    hist, _ = make(DecisionMode.MODULUS)
    hist.reset_decider()
    assert hist.division_length() == pytest.approx(0.2)


def test_axis_labels_are_ordered_and_include_zero():
    hist, _ = make()
    hist.reset_decider()
    labels = hist.axis_labels()
    xs = [label.x for label in labels]
    assert xs == sorted(xs)
    assert all(x > 0 for x in xs)
    texts = [label.text for label in labels]
    assert "0 º" in texts
    assert format_quantity(45.0, 3, "º") in texts


def test_to_screen_orientation():
    hist, _ = make(width=100, height=50)
    x0, y0 = hist.to_screen(0, 0)
    x1, y1 = hist.to_screen(1, 1)
    assert x1 > x0
    assert y1 < y0
    assert 0 <= x0 < x1 <= 100


def test_selection_limits_independent_of_drag_direction():
    hist_a, _ = make()
    hist_a.update_decider = False
    hist_a.press(40, MouseButton.LEFT)
    hist_a.move(100)
    limits_a = hist_a.release(160)

    hist_b, _ = make()
    hist_b.update_decider = False
    hist_b.press(160, MouseButton.LEFT)
    limits_b = hist_b.release(40)

    assert limits_a == pytest.approx(limits_b)
    assert limits_a[0] < limits_a[1]


def test_selection_updates_decider_and_emits():
    hist, decider = make()
    emitted = []
    hist.new_limits.connect(lambda lo, hi: emitted.append((lo, hi)))
    hist.feed([1j])
    limits = hist.release(10)
    assert limits is None
    hist.press(50, MouseButton.LEFT)
    assert hist.selecting
    limits = hist.release(150)
    assert not hist.selecting
    assert emitted == [limits]
    # decider range is widened around the reported limits
    assert decider.minimum < limits[0] < limits[1] < decider.maximum
    assert sum(hist.history) == 0


def test_right_click_resets_decider():
    hist, decider = make()
    hist.press(50, MouseButton.LEFT)
    hist.press(0, MouseButton.RIGHT)
    assert not hist.selecting
    assert decider.minimum == pytest.approx(-math.pi)


def test_press_without_geometry_raises():
    hist = Histogram()
    with pytest.raises(ValueError):
        hist.press(10, MouseButton.LEFT)