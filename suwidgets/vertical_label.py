"""Geometry of a label whose text is drawn rotated by 270 degrees."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, Optional


class Size(NamedTuple):
    width: int
    height: int


class Rect(NamedTuple):
    x: int
    y: int
    width: int
    height: int


def _half(n: int) -> int:
    return int(n / 2)


@dataclass
class VerticalLabel:
    """A label laid out vertically.

    ``text_size`` is the size the text would need when laid out
    horizontally; ``minimum_text_size`` defaults to it.
    """

    text: str = ""
    text_size: tuple[int, int] = (0, 0)
    minimum_text_size: Optional[tuple[int, int]] = None

    def size_hint(self) -> Size:
        """Preferred size: the horizontal size with the axes swapped."""
        width, height = self.text_size
        return Size(height, width)

    def minimum_size_hint(self) -> Size:
        width, height = self.minimum_text_size or self.text_size
        return Size(height, width)

    def text_rect(self, width: int, height: int) -> Rect:
        """Rectangle the text is drawn into, in rotated coordinates.

        ``width`` and ``height`` are the widget's current dimensions.
        """
        hint = self.size_hint()
        rotated_width = hint.height
        rotated_height = hint.width
        return Rect(
            -(_half(height) - _half(rotated_width)),
            _half(width) - _half(rotated_height),
            self.text_size[0],
            self.text_size[1],
        )