"""Symbol histogram model: bins decided quantities and drives decider limits."""

from __future__ import annotations

import cmath
import math
import numbers
import sys
from enum import Enum
from typing import Iterable, NamedTuple, Optional, Sequence

from suwidgets.color import Color, Signal
from suwidgets.decider import DecisionMode, Decider
from suwidgets.helpers import format_quantity

DEFAULT_BACKGROUND_COLOR = Color(0, 0, 0)
DEFAULT_FOREGROUND_COLOR = Color(255, 255, 0)
DEFAULT_AXES_COLOR = Color(128, 128, 128)
DEFAULT_TEXT_COLOR = Color(255, 255, 255)
DEFAULT_INTERVAL_COLOR = Color(128, 128, 128, 128)
DEFAULT_HISTORY_SIZE = 256

RIGHT_MARGIN = 0.01
LEFT_MARGIN = 0.01
TOP_MARGIN = 0.01
BOTTOM_MARGIN = 0.01
HORIZONTAL_SCALE_INV = 1.0 + RIGHT_MARGIN + LEFT_MARGIN
HORIZONTAL_SCALE = 1 / HORIZONTAL_SCALE_INV
VERTICAL_SCALE = 1 / (1.0 + TOP_MARGIN + BOTTOM_MARGIN)
LABEL_PRECISION = 3


class MouseButton(Enum):
    LEFT = "left"
    RIGHT = "right"
    MIDDLE = "middle"


class AxisLabel(NamedTuple):
    x: int
    text: str


class Histogram:
    """Histogram of decided quantities, with a selectable decision range."""

    def __init__(self) -> None:
        self._history: list[int] = [0] * DEFAULT_HISTORY_SIZE
        self._model: list[float] = []
        self._max = 0
        self._decider: Optional[Decider] = None

        self._background = DEFAULT_BACKGROUND_COLOR
        self._foreground = DEFAULT_FOREGROUND_COLOR
        self._axes = DEFAULT_AXES_COLOR
        self._text = DEFAULT_TEXT_COLOR
        self._interval = DEFAULT_INTERVAL_COLOR

        self._data_range_override = 0.0
        self._display_range_override = 0.0
        self._units_override = ""

        self.update_decider = True
        self.draw_threshold = True
        self._bits = 2
        self.axes_stale = True

        self._s_start = 0.0
        self._s_end = 0.0
        self._selecting = False

        self.width = 0
        self.height = 0
        self._ox = 0
        self._oy = 0
        self.legend_height = 0

        self.order_hint_changed = Signal()
        self.background_color_changed = Signal()
        self.foreground_color_changed = Signal()
        self.axes_color_changed = Signal()
        self.text_color_changed = Signal()
        self.interval_color_changed = Signal()
        self.axes_updated = Signal()
        self.reset_limits = Signal()
        self.new_limits = Signal()
        self.blanked = Signal()

    # Data access

    @property
    def history(self) -> list[int]:
        """Bin counts, one bin per horizontal pixel."""
        return list(self._history)

    @property
    def model(self) -> list[float]:
        return list(self._model)

    @property
    def max(self) -> int:
        """Largest bin count seen since the last reset."""
        return self._max

    @property
    def decider(self) -> Optional[Decider]:
        return self._decider

    @property
    def selecting(self) -> bool:
        return self._selecting

    @property
    def selection(self) -> tuple[float, float]:
        """Current selection bounds, relative to the plot width."""
        return (self._s_start, self._s_end)

    # Colors

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
    def text_color(self) -> Color:
        return self._text

    @text_color.setter
    def text_color(self, color: Color) -> None:
        self._text = color
        self.axes_stale = True
        self.text_color_changed.emit()

    @property
    def interval_color(self) -> Color:
        return self._interval

    @interval_color.setter
    def interval_color(self, color: Color) -> None:
        self._interval = color
        self.axes_stale = True
        self.interval_color_changed.emit()

    @property
    def order_hint(self) -> int:
        return self._bits

    @order_hint.setter
    def order_hint(self, bits: int) -> None:
        if bits < 0:
            raise ValueError("order hint must not be negative")
        if bits != self._bits:
            self._bits = bits
            self.axes_stale = True
            self.reset()
            self.order_hint_changed.emit()

    # Ranges and units

    def override_data_range(self, value: float) -> None:
        self._data_range_override = value
        self.axes_stale = True

    def override_display_range(self, value: float) -> None:
        self._display_range_override = value
        self.axes_stale = True

    def override_units(self, units: str) -> None:
        self._units_override = units
        self.axes_stale = True

    def _is_argument(self) -> bool:
        return self._decider is not None and self._decider.mode is DecisionMode.ARGUMENT

    def data_range(self) -> float:
        """Span of the raw data the decider works on."""
        if self._data_range_override > 0:
            return self._data_range_override
        return 2 * math.pi if self._is_argument() else 1.0

    def display_range(self) -> float:
        """Span of the data as shown on the axis."""
        if self._display_range_override > 0:
            return self._display_range_override
        return 360.0 if self._is_argument() else 1.0

    def units(self) -> str:
        if self._units_override:
            return self._units_override
        return "º" if self._is_argument() else ""

    # Geometry

    def resize(self, width: int, height: int) -> None:
        """Set the drawing area; a new width resizes and clears the bins."""
        if width < 0 or height < 0:
            raise ValueError("geometry must not be negative")
        if (width, height) != (self.width, self.height):
            self._history = [0] * width
            self.reset()
            self.axes_stale = True
            self.blanked.emit()
        self.width = width
        self.height = height
        self._ox = 0
        self._oy = height - 1

    def to_screen(self, x: float, y: float) -> tuple[int, int]:
        """Map plot coordinates (0..1 on both axes) to pixels."""
        return (
            self._ox + int(self.width * (x * HORIZONTAL_SCALE + LEFT_MARGIN)),
            self._oy
            - int((self.height - self.legend_height) * (y * VERTICAL_SCALE + BOTTOM_MARGIN))
            - self.legend_height,
        )

    def division_length(self) -> float:
        """Distance between vertical grid lines in display units, 0 if none."""
        if self._decider is None:
            return 0.0
        degs = abs(self.display_range() - 360) < sys.float_info.epsilon
        span = (self._decider.maximum - self._decider.minimum) * (
            self.display_range() / self.data_range()
        )
        if not math.isfinite(span) or span <= 0:
            return 0.0

        if degs:
            if span >= 180:
                return 45.0
            if span >= 90:
                return 15.0

        div = 10.0 ** math.floor(math.log10(span))
        if span / div < 5:
            div /= 2
            if span / div < 5:
                div /= 2.5
                if span / div < 5:
                    div /= 4
        return div

    def axis_labels(self) -> list[AxisLabel]:
        """Labels of the vertical grid lines, left to right."""
        div = self.division_length()
        if div <= 0 or self._decider is None:
            return []
        data_range = self.data_range()
        full_range = self.display_range()
        start = self._decider.minimum / data_range * full_range
        end = self._decider.maximum / data_range * full_range
        span = end - start

        labels = []
        axis = math.floor(start / div)
        while axis * div <= end:
            x, _ = self.to_screen((axis * div - start) / span, 1.0)
            if x > 0:
                labels.append(
                    AxisLabel(x, format_quantity(axis * div, LABEL_PRECISION, self.units()))
                )
            axis += 1
        return labels

    # Data

    def reset(self) -> None:
        """Clear every bin."""
        self._history = [0] * len(self._history)
        self._max = 0

    def set_decider(self, decider: Optional[Decider]) -> None:
        """Attach a decider (or detach with None) and take its bits per symbol."""
        self._decider = decider
        if decider is not None:
            self.order_hint = decider.bps
        self.axes_stale = True

    def feed(self, data: Iterable[complex | float]) -> None:
        """Bin samples: real values directly, complex ones by the decider's mode."""
        if self._decider is None:
            return
        hlen = len(self._history)
        low = self._decider.minimum
        delta = self._decider.maximum - low
        if delta == 0:
            return
        detect = cmath.phase if self._decider.mode is DecisionMode.ARGUMENT else abs

        for value in data:
            if isinstance(value, numbers.Real):
                arg = float(value)
            else:
                arg = detect(complex(value))
            rel = (arg - low) / delta
            if not math.isfinite(rel):
                continue
            index = int(hlen * rel)
            if 0 <= index < hlen:
                self._history[index] += 1
                if self._history[index] > self._max:
                    self._max = self._history[index]

    def set_snr_model(self, model: Sequence[float]) -> bool:
        """Use ``model`` as the SNR curve if it has one value per bin."""
        if len(model) != len(self._history):
            return False
        self._model = [float(v) for v in model]
        return True

    def reset_decider(self) -> None:
        """Restore the decider's full default range."""
        if self._decider is None:
            return
        if self.update_decider:
            data_range = self.data_range()
            if self._decider.mode is DecisionMode.MODULUS:
                self._decider.minimum = 0.0
                self._decider.maximum = data_range
            else:
                self._decider.minimum = -0.5 * data_range
                self._decider.maximum = 0.5 * data_range
            self.axes_stale = True
            self.reset()
            self.blanked.emit()
        self.reset_limits.emit()

    # Mouse selection

    def _relative_x(self, x: int) -> float:
        if self.width == 0:
            raise ValueError("histogram has no geometry")
        return HORIZONTAL_SCALE_INV * (x / self.width - LEFT_MARGIN)

    def press(self, x: int, button: MouseButton) -> None:
        """Left button starts a selection; right button resets the decider."""
        if button is MouseButton.LEFT:
            rel = self._relative_x(x)
            self._selecting = True
            self._s_start = rel
            self._s_end = rel
        elif button is MouseButton.RIGHT:
            self._selecting = False
            self.reset_decider()

    def move(self, x: int) -> None:
        if self._selecting:
            self._s_end = self._relative_x(x)

    def release(self, x: int) -> Optional[tuple[float, float]]:
        """Finish a selection; returns the new limits, or None if none resulted."""
        if not self._selecting:
            return None
        self._s_end = self._relative_x(x)
        self._selecting = False

        if self._s_start > self._s_end:
            self._s_start, self._s_end = self._s_end, self._s_start

        intervals = 1 << self._bits
        add = (self._s_end - self._s_start) / (2 * intervals)
        self._s_start -= add
        self._s_end += add

        if self._decider is None:
            return None

        low = self._decider.minimum
        span = self._decider.maximum - low
        if self.update_decider:
            self._decider.minimum = low + self._s_start * span
            self._decider.maximum = low + self._s_end * span
            self.axes_stale = True
            self.reset()
            self.blanked.emit()

        limits = (
            low + (self._s_start + add) * span,
            low + (self._s_end - add) * span,
        )
        self.new_limits.emit(*limits)
        return limits