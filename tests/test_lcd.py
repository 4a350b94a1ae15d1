import pytest

from suwidgets.lcd import (
    LCD,
    MAX_DEFAULT,
    MAX_DIGITS,
    MIN_DEFAULT,
    Key,
    Segment,
    digit_segments,
)


def test_digit_segments_fixed_glyphs():
    assert digit_segments(8) == Segment.ALL_H | Segment.ALL_V
    assert digit_segments(1) == Segment.TOP_RIGHT | Segment.BOTTOM_RIGHT
    assert digit_segments(10) == Segment.MIDDLE
    assert digit_segments(11) == Segment.NONE


def test_zero_has_all_but_middle():
    assert digit_segments(0) == Segment.ALL & ~Segment.MIDDLE
    assert Segment.MIDDLE not in digit_segments(0)


def test_digit_segments_out_of_range():
    with pytest.raises(IndexError):
        digit_segments(12)


def test_value_clamped_to_default_limits():
    lcd = LCD()
    lcd.value = MAX_DEFAULT + 5
    assert lcd.value == MAX_DEFAULT
    lcd.value = MIN_DEFAULT - 5
    assert lcd.value == MIN_DEFAULT


def test_value_changed_emitted_only_on_change():
    lcd = LCD()
    calls = []
    lcd.value_changed.connect(lambda: calls.append(lcd.value))
    lcd.value = 42
    lcd.value = 42
    assert calls == [42]
    assert lcd.set_value_silent(42) is False


def test_min_never_above_max():
    lcd = LCD()
    lcd.max = 10
    lcd.min = 50
    assert lcd.min == lcd.max == 10


def test_select_digit_clamps():
    lcd = LCD()
    lcd.select_digit(-5)
    assert lcd.selected == -1
    lcd.select_digit(100)
    assert lcd.selected == MAX_DIGITS - 1
    lcd.select_digit(3)
    assert lcd.selected == 3


def test_scroll_digit_adds_power_of_ten():
    lcd = LCD()
    lcd.scroll_digit(2, 1)
    assert lcd.value == 100
    assert lcd.selected == 2
    lcd.scroll_digit(2, -1)
    assert lcd.value == 0


def test_scroll_digit_on_negative_moves_magnitude():
    lcd = LCD()
    lcd.value = -5
    lcd.scroll_digit(0, 1)
    assert lcd.value == -6


def test_digit_key_replaces_selected_digit():
    lcd = LCD()
    lcd.value = 123
    lcd.select_digit(1)
    assert lcd.key_press(Key.DIGIT_7) is True
    assert lcd.value == 173
    assert lcd.selected == 0
    assert lcd.revvideo is True


def test_digit_key_without_selection_keeps_value():
    lcd = LCD()
    lcd.value = 123
    lcd.key_press(Key.DIGIT_9)
    assert lcd.value == 123


def test_sign_keys():
    lcd = LCD()
    lcd.value = 15
    lcd.key_press(Key.MINUS)
    assert lcd.value == -15
    lcd.key_press(Key.PLUS)
    assert lcd.value == 15


def test_arrow_keys_move_selection_and_scroll():
    lcd = LCD()
    lcd.select_digit(0)
    lcd.key_press(Key.LEFT)
    assert lcd.selected == 1
    lcd.key_press(Key.UP)
    assert lcd.value == 10
    lcd.key_press(Key.RIGHT)
    assert lcd.selected == 0


def test_mouse_press_selects_digit_under_cursor():
    lcd = LCD()
    lcd.resize(400, 100)
    gw = lcd.glyph_width
    assert gw > 0
    lcd.mouse_press(400 - 2 * gw - 1)
    assert lcd.selected == 2


def test_wheel_scrolls_digit_under_cursor():
    lcd = LCD()
    lcd.resize(400, 100)
    gw = lcd.glyph_width
    lcd.wheel(400 - gw - 1, -120)
    assert lcd.selected == 1
    assert lcd.value == -10


def test_wheel_without_geometry_does_nothing():
    lcd = LCD()
    lcd.wheel(10, 120)
    assert lcd.value == 0
    assert lcd.selected == -1


def test_digit_count():
    lcd = LCD()
    assert lcd.digit_count() == 1
    lcd.value = -12345
    assert lcd.digit_count() == 5


def test_toggle_blink_round_trip():
    lcd = LCD()
    before = lcd.revvideo
    lcd.toggle_blink()
    assert lcd.revvideo is not before
    lcd.toggle_blink()
    assert lcd.revvideo is before


def test_zoom_change_emits_only_beyond_tolerance():
    lcd = LCD()
    calls = []
    lcd.zoom_changed.connect(lambda: calls.append(lcd.zoom))
    lcd.zoom = lcd.zoom + 1e-10
    assert calls == []
    lcd.zoom = 1.0
    assert calls == [1.0]
    assert lcd.geometry_changed is True


def test_layout_fits_height():
    lcd = LCD()
    lcd.resize(300, 100)
    assert lcd.margin >= 0
    assert 2 * lcd.margin + 2 * lcd.seg_box_length + lcd.seg_box_thickness == pytest.approx(100)
    assert lcd.seg_length < lcd.seg_box_length


def test_negative_geometry_rejected():
    with pytest.raises(ValueError):
        LCD().resize(-1, 10)