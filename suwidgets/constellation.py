"""Constellation diagram model for phase-modulated signals."""

from __future__ import annotations

import cmath
import math
from typing import Iterable, NamedTuple

from suwidgets.color import Color, Signal

DEFAULT_BACKGROUND_COLOR = Color(0, 0, 0)
DEFAULT_FOREGROUND_COLOR = Color(255, 255, 255)
DEFAULT_AXES_COLOR = Color(128, 128, 128)
DEFAULT_HISTORY_SIZE = 256

CROSS_MARK_REL_DIM = 0.1
_SCREEN_SCALE = 0.707


class ScreenPoint(NamedTuple):
    x: int
    y: int
    alpha: int


class Constellation:
    """Keeps a ring buffer of recent samples and maps them to screen points."""

    def __init__(self, history_size: int = DEFAULT_HISTORY_SIZE) -> None:
        self._history: list[complex] = [0j] * history_size
        self._amount = 0
        self._ptr = 0

        self._background = DEFAULT_BACKGROUND_COLOR
        self._foreground = DEFAULT_FOREGROUND_COLOR
        self._axes = DEFAULT_AXES_COLOR
        self.zoom = 0.5
        self._bits = 2
        self.gain = 1.414

        self.width = 0
        self.height = 0
        self._ox = 0
        self._oy = 0
        self.axes_stale = True

        self.order_hint_changed = Signal()
        self.background_color_changed = Signal()
        self.foreground_color_changed = Signal()
        self.axes_color_changed = Signal()
        self.axes_updated = Signal()

    # Properties

    @property
    def history_size(self) -> int:
        return len(self._history)

    @property
    def amount(self) -> int:
        """Number of valid samples held in the history."""
        return self._amount

    @property
    def background_color(self) -> Color:
        return self._background

    @background_color.setter
    def background_color(self, color: Color) -> None:
        self._background = color
        self.axes_stale = True
        self.background_color_changed.emit()

    @property
    def foreground_color(self) -> Color:
        return self._foreground

    @foreground_color.setter
    def foreground_color(self, color: Color) -> None:
        self._foreground = color
        self.axes_stale = True
        self.foreground_color_changed.emit()

    @property
    def axes_color(self) -> Color:
        return self._axes

    @axes_color.setter
    def axes_color(self, color: Color) -> None:
        self._axes = color
        self.axes_stale = True
        self.axes_color_changed.emit()

    @property
    def order_hint(self) -> int:
        """Bits per symbol of the hinted constellation (0 disables the hint)."""
        return self._bits

    @order_hint.setter
    def order_hint(self, bits: int) -> None:
        if bits < 0:
            raise ValueError("order hint must not be negative")
        if bits != self._bits:
            self._bits = bits
            self.axes_stale = True
            self.order_hint_changed.emit()

    # Data

    def set_history_size(self, length: int) -> None:
        """Resize the history, keeping old entries but forgetting them as valid."""
        if length < 0:
            raise ValueError("history size must not be negative")
        current = len(self._history)
        if length < current:
            del self._history[length:]
        else:
            self._history.extend([0j] * (length - current))
        self._amount = 0
        self._ptr = 0

    def feed(self, samples: Iterable[complex]) -> None:
        """Append samples; only the last ``history_size`` are kept."""
        size = len(self._history)
        data = list(samples)
        if size == 0:
            return
        if len(data) > size:
            data = data[-size:]
        for sample in data:
            self._history[self._ptr] = complex(sample)
            self._ptr = (self._ptr + 1) % size
        self._amount = min(self._amount + len(data), size)

    def samples(self) -> list[complex]:
        """Valid samples, oldest first."""
        size = len(self._history)
        if self._amount == 0:
            return []
        start = (self._ptr - self._amount) % size
        return [self._history[(start + i) % size] for i in range(self._amount)]

    # Geometry

    def resize(self, width: int, height: int) -> None:
        """Set the drawing area and recompute the origin."""
        if width < 0 or height < 0:
            raise ValueError("geometry must not be negative")
        if (width, height) != (self.width, self.height):
            self.width = width
            self.height = height
            self._ox = width // 2
            self._oy = height // 2
            self.axes_stale = True
            self.axes_updated.emit()

    def to_screen(self, x: float, y: float) -> tuple[int, int]:
        """Map a point of the complex plane to pixel coordinates."""
        return (
            self._ox + int(_SCREEN_SCALE * self.width * self.zoom * x),
            self._oy - int(_SCREEN_SCALE * self.height * self.zoom * y),
        )

    def points(self) -> list[ScreenPoint]:
        """Screen points of the history, oldest first, fading in with age."""
        size = len(self._history)
        if self._amount == 0:
            return []
        alpha_k = 255.0 / size
        skip = size - self._amount
        result = []
        for p, sample in enumerate(self.samples(), start=1):
            c = self.gain * sample
            x, y = self.to_screen(c.real, c.imag)
            result.append(ScreenPoint(x, y, int(alpha_k * (p + skip))))
        return result

    @property
    def marker_size(self) -> float:
        """Half size of a hint marker cross, in plane units."""
        if self._bits <= 3:
            return CROSS_MARK_REL_DIM
        return CROSS_MARK_REL_DIM / (1 << (self._bits - 3))

    def hint_markers(self) -> list[complex]:
        """Centres of the ideal constellation points for the order hint."""
        if self._bits == 0:
            return []
        states = 1 << self._bits
        angle = 2 * math.pi / states
        return [cmath.exp(1j * (k + 0.5) * angle) for k in range(states)]