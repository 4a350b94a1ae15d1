"""Symbol stream viewer model: lays decided symbols out as an image."""

from __future__ import annotations

import os
from enum import Enum, IntEnum
from typing import Iterable, Optional, Union

from PIL import Image

from suwidgets.color import Color, Signal

MAX_ZOOM = 50
DEFAULT_BG_COLOR = Color(0, 0, 0)
DEFAULT_LO_COLOR = Color(0, 0, 0)
DEFAULT_HI_COLOR = Color(0xFF, 0xFF, 0xFF)

_HIGHLIGHT = (255, 0, 0, 255)

Pixel = tuple[int, int, int, int]


class FileFormat(IntEnum):
    """Formats a symbol stream can be saved in."""

    TEXT = 0
    RAW = 1
    C_ARRAY = 2
    BMP = 3
    PNG = 4
    JPEG = 5
    PPM = 6


class Key(Enum):
    """Keys the viewer reacts to."""

    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    UP = "up"
    DOWN = "down"
    HOME = "home"
    END = "end"
    LEFT = "left"
    RIGHT = "right"
    PLUS = "+"
    MINUS = "-"


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


class SymView:
    """Holds a symbol buffer and renders it row by row, one pixel block per symbol."""

    def __init__(self, width: int = 0, height: int = 0) -> None:
        self._buffer = bytearray()
        self._auto_scroll = True
        self._auto_stride = True
        self._reverse = False

        self._bps = 1
        self._zoom = 1
        self._offset = 0
        self._h_offset = 0
        self._stride = 1
        self.hover_x = -1
        self.hover_y = -1

        self._background = DEFAULT_BG_COLOR
        self._low = DEFAULT_LO_COLOR
        self._high = DEFAULT_HI_COLOR

        self.width = 0
        self.height = 0

        self.offset_changed = Signal()
        self.h_offset_changed = Signal()
        self.stride_changed = Signal()
        self.zoom_changed = Signal()
        self.hover_symbol = Signal()
        self.background_color_changed = Signal()
        self.lo_color_changed = Signal()
        self.hi_color_changed = Signal()

        self.resize(width, height)

    # Buffer

    @property
    def symbols(self) -> bytes:
        return bytes(self._buffer)

    @property
    def length(self) -> int:
        return len(self._buffer)

    @property
    def lines(self) -> int:
        """Number of rows the whole buffer takes at the current stride."""
        return (len(self._buffer) + self._stride - 1) // self._stride

    def feed(self, symbols: Iterable[int]) -> None:
        """Append symbols (each 0..255) to the buffer."""
        data = bytes(symbols)
        self._buffer.extend(data)
        if data and self._auto_scroll:
            self.scroll_to_bottom()

    def clear(self) -> None:
        self._buffer.clear()
        self._offset = 0

    # Behaviour

    @property
    def auto_scroll(self) -> bool:
        return self._auto_scroll

    @auto_scroll.setter
    def auto_scroll(self, value: bool) -> None:
        self._auto_scroll = value
        if value:
            self.scroll_to_bottom()

    @property
    def auto_stride(self) -> bool:
        return self._auto_stride

    @auto_stride.setter
    def auto_stride(self, value: bool) -> None:
        self._auto_stride = value
        if value:
            self.set_stride(max(1, self.width // self._zoom))

    @property
    def reverse(self) -> bool:
        return self._reverse

    @reverse.setter
    def reverse(self, value: bool) -> None:
        self._reverse = value

    @property
    def bits_per_symbol(self) -> int:
        return self._bps

    @bits_per_symbol.setter
    def bits_per_symbol(self, bps: int) -> None:
        if bps < 0:
            raise ValueError("bits per symbol must not be negative")
        self._bps = bps

    # Layout

    @property
    def stride(self) -> int:
        return self._stride

    def set_stride(self, stride: int) -> None:
        """Set the number of symbols per row."""
        if stride < 1:
            raise ValueError("stride must be at least 1")
        if stride != self._stride:
            self._stride = stride
            self.stride_changed.emit(stride)

    @property
    def offset(self) -> int:
        return self._offset

    def set_offset(self, offset: int) -> None:
        """Set the first shown symbol, clamped to the buffer length."""
        if offset < 0:
            raise ValueError("offset must not be negative")
        offset = min(offset, len(self._buffer))
        if offset != self._offset:
            self._offset = offset
            self.offset_changed.emit(offset)

    @property
    def h_offset(self) -> int:
        return self._h_offset

    def set_h_offset(self, offset: int) -> None:
        """Set the horizontal scroll, in symbols, clamped below the stride."""
        if offset < 0:
            raise ValueError("horizontal offset must not be negative")
        offset = min(offset, self._stride - 1)
        if offset != self._h_offset:
            self._h_offset = offset
            self.h_offset_changed.emit(offset)

    @property
    def zoom(self) -> int:
        return self._zoom

    def set_zoom(self, zoom: int) -> None:
        """Set pixels per symbol; values outside 1..MAX_ZOOM are ignored."""
        if 0 < zoom <= MAX_ZOOM and zoom != self._zoom:
            self._zoom = zoom
            self.auto_stride = self._auto_stride
            self.zoom_changed.emit(zoom)

    def resize(self, width: int, height: int) -> None:
        """Set the view size in pixels."""
        if width < 0 or height < 0:
            raise ValueError("geometry must not be negative")
        if (width, height) != (self.width, self.height):
            self.width = width
            self.height = height
            if self._auto_stride:
                self.set_stride(max(1, width))

    def scroll_to_bottom(self) -> None:
        """Scroll so that the last row of symbols is the last visible one."""
        lines = self.lines
        visible = self.height // self._zoom
        new_offset = (lines - visible) * self._stride if lines > visible else 0
        self.set_offset(new_offset)

    # Colors

    @property
    def background_color(self) -> Color:
        return self._background

    @background_color.setter
    def background_color(self, color: Color) -> None:
        if color != self._background:
            self._background = color
            self.background_color_changed.emit()

    @property
    def lo_color(self) -> Color:
        return self._low

    @lo_color.setter
    def lo_color(self, color: Color) -> None:
        if color != self._low:
            self._low = color
            self.lo_color_changed.emit()

    @property
    def hi_color(self) -> Color:
        return self._high

    @hi_color.setter
    def hi_color(self, color: Color) -> None:
        if color != self._high:
            self._high = color
            self.hi_color_changed.emit()

    # Rendering

    def _palette(self) -> list[Pixel]:
        conv = (1 << self._bps) - 1
        if conv <= 0:
            raise ValueError("bits per symbol must be positive to render")
        lo = (self._low.red, self._low.green, self._low.blue)
        hi = (self._high.red, self._high.green, self._high.blue)
        palette = []
        for sym in range(256):
            level = sym * 255 // conv
            if self._reverse:
                level = ~level
            r, g, b = (
                _trunc_div(lc * (255 - level) + hc * level, 255) & 0xFF
                for lc, hc in zip(lo, hi)
            )
            palette.append((r, g, b, 255))
        return palette

    def _draw_to_image(
        self,
        pixels: list[Pixel],
        img_w: int,
        img_h: int,
        start: int,
        end: int,
        zoom: int = 1,
        line_size: int = 0,
        line_skip: int = 0,
        line_start: int = 0,
    ) -> None:
        palette = self._palette()
        buf = self._buffer
        if line_size == 0:
            line_size = img_w

        if self._zoom == 1:
            x = y = 0
            p = start
            while p < end and y < img_h:
                color = palette[buf[p]]
                p += 1
                if x >= line_start and x - line_start < img_w:
                    pixels[y * img_w + x - line_start] = color
                x += 1
                if x >= line_size:
                    x = 0
                    y += 1
                    p += line_skip
            return

        stride = line_size + line_skip
        highlight = zoom > 2 and self.hover_x > 0 and self.hover_y > 0
        width = min(stride * zoom, img_w)
        p = start

        for j in range(img_h):
            row = j // zoom
            for i in range(width):
                x = i // zoom + line_start
                if x < stride:
                    p = start + x + row * stride
                    if p >= end:
                        break
                    pixels[j * img_w + i] = palette[buf[p]]
            if p > end:
                break

        if not highlight:
            return

        y = self.hover_y // zoom
        x = self.hover_x // zoom
        ptr = start + x + line_start + y * stride
        u_width = stride - line_start
        if not (start <= ptr < end and x < u_width):
            return

        x *= zoom
        y *= zoom
        u_width *= zoom
        self.hover_symbol.emit(ptr)

        def mark(col: int, row: int) -> None:
            if 0 <= col < img_w:
                pixels[row * img_w + col] = _HIGHLIGHT

        for j in range(zoom):
            row = y + j
            if row >= img_h:
                continue
            if j == 0 or j == zoom - 1:
                for i in range(x, max(0, min(x + zoom, u_width))):
                    mark(i, row)
            else:
                mark(x, row)
                if x + zoom <= u_width:
                    mark(x + zoom - 1, row)

    def render(self) -> Image.Image:
        """Return the current view as an RGBA image of the view size."""
        w, h = self.width, self.height
        pixels: list[Pixel] = [self._background.rgba] * (w * h)
        zoom = self._zoom

        line_size = min(self._stride, w // zoom)
        line_skip = self._stride - line_size
        line_start = min(self._h_offset, line_skip)
        visible_lines = (h + zoom - 1) // zoom
        visible = self._stride * visible_lines

        if self._bps > 0 and len(self._buffer) > self._offset:
            visible = min(visible, len(self._buffer) - self._offset)
            self._draw_to_image(
                pixels,
                w,
                h,
                self._offset,
                self._offset + visible,
                zoom,
                line_size + line_start,
                line_skip - line_start,
                line_start,
            )

        image = Image.new("RGBA", (w, h))
        if pixels:
            image.putdata(pixels)
        return image

    def _full_image(self) -> Image.Image:
        if not self._buffer:
            raise ValueError("no symbols to save")
        if self._bps <= 0:
            raise ValueError("bits per symbol must be positive to render")
        w, h = self._stride, self.lines
        pixels: list[Pixel] = [self._background.rgba] * (w * h)
        self._draw_to_image(
            pixels, w, h, self._offset % self._stride, len(self._buffer)
        )
        image = Image.new("RGBA", (w, h))
        image.putdata(pixels)
        return image

    def save(self, dest: Union[str, os.PathLike], fmt: FileFormat) -> None:
        """Write the whole buffer to ``dest`` in the given format."""
        fmt = FileFormat(fmt)

        if fmt is FileFormat.TEXT:
            payload: Optional[bytes] = bytes((0x30 + s) & 0xFF for s in self._buffer)
        elif fmt is FileFormat.RAW:
            mask = (1 << self._bps) - 1
            payload = bytes(s & mask & 0xFF for s in self._buffer)
        elif fmt is FileFormat.C_ARRAY:
            parts = [
                "#include <stdint.h>\n\n",
                f"static uint8_t data[{len(self._buffer)}] = {{\n",
            ]
            for i, sym in enumerate(self._buffer):
                if i % 16 == 0:
                    parts.append("  ")
                parts.append(f"0x{sym:02x}, ")
                if i % 16 == 15:
                    parts.append("\n")
            parts.append("};\n")
            payload = "".join(parts).encode("utf-8")
        else:
            payload = None

        if payload is not None:
            with open(dest, "wb") as fp:
                fp.write(payload)
            return

        image = self._full_image()
        if fmt is not FileFormat.PNG:
            image = image.convert("RGB")
        with open(dest, "wb") as fp:
            image.save(fp, fmt.name)

    # Interaction

    def _page_size(self) -> int:
        return self._stride * (self.height // self._zoom)

    def _forward(self, step: int) -> None:
        length = len(self._buffer)
        page = self._page_size()
        if length > page:
            limit = length - page
            self.set_offset(self._offset + step if self._offset + step < limit else limit)

    def _backward(self, step: int) -> None:
        self.set_offset(0 if self._offset < step else self._offset - step)

    def key_press(self, key: Key, control: bool = False) -> None:
        """Scroll, pan or zoom in response to a key."""
        line_size = self._stride
        page = self._page_size()
        visible = self.width // self._zoom

        if key is Key.PAGE_UP:
            self._backward(page)
        elif key is Key.PAGE_DOWN:
            self._forward(page)
        elif key is Key.UP:
            self._backward(line_size)
        elif key is Key.DOWN:
            self._forward(line_size)
        elif key is Key.HOME:
            self.set_offset(0)
        elif key is Key.END:
            target = len(self._buffer) - page
            self.set_offset(target if target >= 0 else len(self._buffer))
        elif key is Key.LEFT:
            if self._h_offset > 0:
                self.set_h_offset(self._h_offset - 1)
        elif key is Key.RIGHT:
            if self._h_offset + visible <= line_size:
                self.set_h_offset(self._h_offset + 1)
        elif key is Key.PLUS:
            if control:
                self.set_zoom(self._zoom + 1)
        elif key is Key.MINUS:
            if control and self._zoom > 1:
                self.set_zoom(self._zoom - 1)

    def wheel(self, delta: int, control: bool = False) -> None:
        """Scroll by wheel ``delta`` (120 per notch); with control, zoom instead."""
        count = _trunc_div(delta + 119, 120)
        if control:
            if count <= 0:
                step = -count + 1
                self.set_zoom(self._zoom - step if step < self._zoom else 1)
            else:
                self.set_zoom(min(self._zoom + count, MAX_ZOOM))
        elif count > 0:
            self._backward(5 * count * self._stride * self._zoom)
        else:
            self._forward(5 * (-count + 1) * self._stride * self._zoom)

    def hover(self, x: int, y: int) -> None:
        """Record the pointer position; only used when zoomed beyond 2."""
        if self._zoom > 2:
            self.hover_x = x
            self.hover_y = y