"""Colors, a minimal signal mechanism and a color chooser model."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable, Optional

from PIL import Image

PREVIEW_WIDTH = 48
PREVIEW_HEIGHT = 16


@dataclass(frozen=True)
class Color:
    """An RGBA color with 8-bit components."""

    red: int
    green: int
    blue: int
    alpha: int = 255

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue", "alpha"):
            component = getattr(self, name)
            if not 0 <= component <= 255:
                raise ValueError(f"{name} component out of range: {component}")

    @property
    def rgba(self) -> tuple[int, int, int, int]:
        return (self.red, self.green, self.blue, self.alpha)

    def with_alpha(self, alpha: int) -> "Color":
        """Return a copy of this color with another alpha value."""
        return replace(self, alpha=alpha)


class Signal:
    """A list of callbacks invoked together."""

    def __init__(self) -> None:
        self._slots: list[Callable[..., object]] = []

    def connect(self, slot: Callable[..., object]) -> None:
        self._slots.append(slot)

    def disconnect(self, slot: Callable[..., object]) -> None:
        """Remove ``slot``; raises ValueError if it is not connected."""
        self._slots.remove(slot)

    def emit(self, *args: object) -> None:
        for slot in list(self._slots):
            slot(*args)


class ColorChooser:
    """Holds a chosen color and a preview swatch of it."""

    def __init__(self, color: Color = Color(0, 0, 0)) -> None:
        self._color = color
        self.color_changed = Signal()
        self._preview = self._make_preview()

    def _make_preview(self) -> Image.Image:
        return Image.new("RGBA", (PREVIEW_WIDTH, PREVIEW_HEIGHT), self._color.rgba)

    @property
    def color(self) -> Color:
        return self._color

    @color.setter
    def color(self, value: Color) -> None:
        self._color = value
        self._preview = self._make_preview()
        self.color_changed.emit(value)

    @property
    def preview(self) -> Image.Image:
        """Swatch filled with the current color."""
        return self._preview

    def choose(self, picker: Callable[[Color], Optional[Color]]) -> bool:
        """Ask ``picker`` for a color; keep it unless the picker returns None."""
        chosen = picker(self._color)
        if chosen is None:
            return False
        self.color = chosen
        return True