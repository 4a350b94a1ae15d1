"""Symbol decider: maps complex samples to symbol indices."""

from __future__ import annotations

import cmath
import math
from enum import Enum
from typing import Iterable


class DecisionMode(Enum):
    """Quantity of a sample used to decide its symbol."""

    ARGUMENT = "argument"
    MODULUS = "modulus"


class Decider:
    """Splits a value range into ``2 ** bps`` intervals and decides symbols."""

    def __init__(self) -> None:
        self.mode = DecisionMode.ARGUMENT
        self._bps = 1
        self._intervals = 2
        self._min = 0.0
        self._max = 2 * math.pi
        self._delta = math.pi
        self._symbols = b""

    def _update(self) -> None:
        self._delta = (self._max - self._min) / self._intervals

    @property
    def delta(self) -> float:
        return self._delta

    @property
    def minimum(self) -> float:
        return self._min

    @minimum.setter
    def minimum(self, value: float) -> None:
        if abs(self._min - value) > 1e-15:
            self._min = value
            self._update()

    @property
    def maximum(self) -> float:
        return self._max

    @maximum.setter
    def maximum(self, value: float) -> None:
        if abs(self._max - value) > 1e-15:
            self._max = value
            self._update()

    @property
    def intervals(self) -> int:
        return self._intervals

    @property
    def bps(self) -> int:
        return self._bps

    @bps.setter
    def bps(self, value: int) -> None:
        if value < 0:
            raise ValueError("bits per symbol must not be negative")
        if value != self._bps:
            self._bps = value
            self._intervals = 1 << value
            self._update()

    @property
    def symbols(self) -> bytes:
        """Symbols decided by the last call to :meth:`feed`."""
        return self._symbols

    def feed(self, data: Iterable[complex]) -> None:
        """Decide ``data`` and keep the result in :attr:`symbols`."""
        self._symbols = self.decide(data)

    def decide(self, data: Iterable[complex]) -> bytes:
        """Return the symbol of every sample in ``data``."""
        if self._delta == 0:
            raise ValueError("decision range is empty")
        detect = cmath.phase if self.mode is DecisionMode.ARGUMENT else abs
        last = self._intervals - 1
        out = bytearray()
        for sample in data:
            sym = math.floor((detect(sample) - self._min) / self._delta)
            sym = min(max(sym, 0), last)
            out.append(sym & 0xFF)
        return bytes(out)