"""Seven-segment numeric display model with digit-wise editing."""

from __future__ import annotations

from enum import Enum, IntFlag

from suwidgets.color import Color, Signal

MAX_DIGITS = 11
MAX_DEFAULT = 99999999999
MIN_DEFAULT = -99999999999
BLINKING_INTERVAL_MS = 250
DEFAULT_BACKGROUND_COLOR = Color(0x90, 0xB1, 0x56)
DEFAULT_FOREGROUND_COLOR = Color(0, 0, 0)
DEFAULT_THICKNESS = 0.2
DEFAULT_SEG_SCALE = 0.9
DEFAULT_ZOOM = 0.707

MINUS_GLYPH = 10
BLANK_GLYPH = 11

_CHANGE_TOLERANCE = 1e-8


class Segment(IntFlag):
    """Segments of a seven-segment glyph."""

    NONE = 0
    TOP = 1
    MIDDLE = 2
    BOTTOM = 4
    TOP_LEFT = 8
    BOTTOM_LEFT = 16
    TOP_RIGHT = 32
    BOTTOM_RIGHT = 64
    ALL_H = TOP | MIDDLE | BOTTOM
    ALL_V = TOP_LEFT | BOTTOM_LEFT | TOP_RIGHT | BOTTOM_RIGHT
    ALL = ALL_H | ALL_V


_GLYPHS = (
    Segment.ALL & ~Segment.MIDDLE,
    Segment.TOP_RIGHT | Segment.BOTTOM_RIGHT,
    Segment.ALL & ~Segment.TOP_LEFT & ~Segment.BOTTOM_RIGHT,
    Segment.ALL & ~Segment.TOP_LEFT & ~Segment.BOTTOM_LEFT,
    Segment.TOP_RIGHT | Segment.BOTTOM_RIGHT | Segment.TOP_LEFT | Segment.MIDDLE,
    Segment.ALL & ~Segment.TOP_RIGHT & ~Segment.BOTTOM_LEFT,
    Segment.ALL & ~Segment.TOP_RIGHT,
    Segment.TOP_LEFT | Segment.TOP | Segment.TOP_RIGHT | Segment.BOTTOM_RIGHT,
    Segment.ALL_H | Segment.ALL_V,
    Segment.ALL & ~Segment.BOTTOM_LEFT,
    Segment.MIDDLE,
    Segment.NONE,
)


def digit_segments(index: int) -> Segment:
    """Lit segments of glyph ``index``: digits 0-9, 10 for minus, 11 for blank."""
    if not 0 <= index < len(_GLYPHS):
        raise IndexError(f"no glyph with index {index}")
    return _GLYPHS[index]


class Key(Enum):
    """Keys the display reacts to."""

    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    PLUS = "+"
    MINUS = "-"
    DIGIT_0 = "0"
    DIGIT_1 = "1"
    DIGIT_2 = "2"
    DIGIT_3 = "3"
    DIGIT_4 = "4"
    DIGIT_5 = "5"
    DIGIT_6 = "6"
    DIGIT_7 = "7"
    DIGIT_8 = "8"
    DIGIT_9 = "9"

    @property
    def digit(self) -> int | None:
        """Digit typed by this key, or None for non-digit keys."""
        return int(self.value) if self.value.isdigit() else None


def _trunc_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


class LCD:
    """Integer value shown on a seven-segment display, editable digit by digit."""

    def __init__(self) -> None:
        self._value = 0
        self._max = MAX_DEFAULT
        self._min = MIN_DEFAULT

        self._background = DEFAULT_BACKGROUND_COLOR
        self._foreground = DEFAULT_FOREGROUND_COLOR
        self._zoom = DEFAULT_ZOOM
        self._thickness = DEFAULT_THICKNESS
        self._seg_scale = DEFAULT_SEG_SCALE

        self.width = 0
        self.height = 0
        self.dirty = False
        self.geometry_changed = False

        self.revvideo = False
        self.selected = -1

        self.value_changed = Signal()
        self.zoom_changed = Signal()
        self.thickness_changed = Signal()
        self.seg_scale_changed = Signal()
        self.background_color_changed = Signal()
        self.foreground_color_changed = Signal()
        self.max_changed = Signal()
        self.min_changed = Signal()

    # Value and limits

    def set_value_silent(self, value: int) -> bool:
        """Set the value clamped to the limits; True if it changed."""
        value = min(max(int(value), self._min), self._max)
        if value != self._value:
            self._value = value
            self.dirty = True
            return True
        return False

    @property
    def value(self) -> int:
        return self._value

    @value.setter
    def value(self, value: int) -> None:
        if self.set_value_silent(value):
            self.value_changed.emit()

    def set_max_silent(self, value: int) -> bool:
        """Set the upper limit (never below the lower one); True if the value changed."""
        current = min(self._value, self._max)
        self._max = max(int(value), self._min)
        if current != self._value:
            self._value = current
            self.dirty = True
            return True
        return False

    @property
    def max(self) -> int:
        return self._max

    @max.setter
    def max(self, value: int) -> None:
        if self.set_max_silent(value):
            self.value_changed.emit()

    def set_min_silent(self, value: int) -> bool:
        """Set the lower limit (never above the upper one); True if the value changed."""
        current = max(self._value, self._min)
        self._min = min(int(value), self._max)
        if current != self._value:
            self._value = current
            self.dirty = True
            return True
        return False

    @property
    def min(self) -> int:
        return self._min

    @min.setter
    def min(self, value: int) -> None:
        if self.set_min_silent(value):
            self.value_changed.emit()

    # Appearance

    def _set_shape(self, name: str, value: float, signal: Signal) -> None:
        if abs(getattr(self, name) - value) >= _CHANGE_TOLERANCE:
            setattr(self, name, value)
            self.dirty = True
            self.geometry_changed = True
            signal.emit()

    @property
    def zoom(self) -> float:
        return self._zoom

    @zoom.setter
    def zoom(self, value: float) -> None:
        self._set_shape("_zoom", value, self.zoom_changed)

    @property
    def thickness(self) -> float:
        return self._thickness

    @thickness.setter
    def thickness(self, value: float) -> None:
        self._set_shape("_thickness", value, self.thickness_changed)

    @property
    def seg_scale(self) -> float:
        return self._seg_scale

    @seg_scale.setter
    def seg_scale(self, value: float) -> None:
        self._set_shape("_seg_scale", value, self.seg_scale_changed)

    @property
    def background_color(self) -> Color:
        return self._background

    @background_color.setter
    def background_color(self, color: Color) -> None:
        self._background = color
        self.dirty = True
        self.geometry_changed = True
        self.background_color_changed.emit()

    @property
    def foreground_color(self) -> Color:
        return self._foreground

    @foreground_color.setter
    def foreground_color(self, color: Color) -> None:
        self._foreground = color
        self.dirty = True
        self.geometry_changed = True
        self.foreground_color_changed.emit()

    # Geometry

    def resize(self, width: int, height: int) -> None:
        """Set the display area."""
        if width < 0 or height < 0:
            raise ValueError("geometry must not be negative")
        if (width, height) != (self.width, self.height):
            self.width = width
            self.height = height
            self.geometry_changed = True
            self.dirty = True

    @property
    def seg_box_length(self) -> float:
        return 0.5 * self.height * self._zoom

    @property
    def seg_box_thickness(self) -> float:
        return self.seg_box_length * self._thickness

    @property
    def seg_length(self) -> float:
        return self.seg_box_length * self._seg_scale

    @property
    def seg_thickness(self) -> float:
        return self.seg_box_thickness * self._seg_scale

    @property
    def margin(self) -> float:
        """Vertical space above and below the glyphs."""
        return 0.5 * (self.height - 2 * self.seg_box_length - self.seg_box_thickness)

    @property
    def glyph_width(self) -> int:
        return int(self.seg_box_length + 2 * self.seg_box_thickness)

    def digit_count(self) -> int:
        """Number of decimal digits of the magnitude of the value (at least 1)."""
        return len(str(abs(self._value)))

    # Interaction

    def select_digit(self, digit: int) -> None:
        """Select a digit position, counted from the right; negative deselects."""
        if digit < 0:
            self.selected = -1
        elif digit >= MAX_DIGITS:
            self.selected = MAX_DIGITS - 1
        else:
            self.selected = digit

    def scroll_digit(self, digit: int, delta: int) -> None:
        """Select ``digit`` and add ``delta`` units of it to the magnitude."""
        if digit >= MAX_DIGITS:
            return
        self.select_digit(digit)
        if self.selected < 0:
            return
        value = self._value
        negative = value < 0
        if negative:
            value, delta = -value, -delta
        value += delta * 10 ** self.selected
        self.value = -value if negative else value

    def _digit_at(self, x: int) -> int:
        return _trunc_div(self.width - x, self.glyph_width)

    def mouse_press(self, x: int) -> None:
        """Select the digit under horizontal position ``x``."""
        if self.glyph_width > 0:
            self.select_digit(self._digit_at(x))

    def wheel(self, x: int, delta: int) -> None:
        """Scroll the digit under ``x`` up for positive ``delta``, down otherwise."""
        if self.glyph_width > 0:
            self.scroll_digit(self._digit_at(x), 1 if delta > 0 else -1)

    def key_press(self, key: Key) -> bool:
        """Handle a key; returns True if the key was recognised."""
        if key is Key.RIGHT:
            self.select_digit(self.selected - 1)
        elif key is Key.LEFT:
            self.select_digit(self.selected + 1)
        elif key is Key.UP:
            self.scroll_digit(self.selected, 1)
        elif key is Key.DOWN:
            self.scroll_digit(self.selected, -1)
        elif key is Key.PLUS:
            self.value = abs(self._value)
        elif key is Key.MINUS:
            self.value = -self._value
        elif key.digit is not None:
            if self.selected != -1:
                value = self._value
                negative = value < 0
                if negative:
                    value = -value
                mult = 10 ** self.selected
                value -= (value // mult) % 10 * mult
                value += key.digit * mult
                self.value = -value if negative else value
                self.select_digit(self.selected - 1)
        else:
            return False

        self.revvideo = True
        self.dirty = True
        return True

    def toggle_blink(self) -> None:
        """Flip the reverse-video state of the selected digit."""
        self.revvideo = not self.revvideo
        self.dirty = True