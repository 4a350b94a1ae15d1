"""Frequency entry model with automatic SI unit multipliers."""

from __future__ import annotations

from enum import IntEnum

from suwidgets.color import Signal


class FrequencyUnitMultiplier(IntEnum):
    NONE = 0
    KILO = 1
    MEGA = 2
    GIGA = 3
    TERA = 4

    @property
    def factor(self) -> float:
        return 10.0 ** (3 * self.value)

    @property
    def prefix(self) -> str:
        return ("", "k", "M", "G", "T")[self.value]


class FrequencySpinBox:
    """Holds a frequency and how it is shown: multiplier, suffix and decimals."""

    def __init__(self) -> None:
        self._multiplier = FrequencyUnitMultiplier.NONE
        self._units = "Hz"
        self._auto = True
        self._value = 0.0
        self._max = 18e9
        self._min = 0.0
        self._extra_decimals = 0
        self.editable = True
        self.value_changed = Signal()

    # Value and limits

    @property
    def value(self) -> float:
        return self._value

    @value.setter
    def value(self, value: float) -> None:
        self._value = value
        if self._auto:
            self.adjust_unit_multiplier()

    @property
    def maximum(self) -> float:
        return self._max

    @maximum.setter
    def maximum(self, value: float) -> None:
        self._max = value

    @property
    def minimum(self) -> float:
        return self._min

    @minimum.setter
    def minimum(self, value: float) -> None:
        self._min = value

    @property
    def extra_decimals(self) -> int:
        return self._extra_decimals

    @extra_decimals.setter
    def extra_decimals(self, extra: int) -> None:
        if extra < 0:
            raise ValueError("extra decimals must not be negative")
        self._extra_decimals = extra

    @property
    def units(self) -> str:
        return self._units

    @units.setter
    def units(self, units: str) -> None:
        self._units = units

    @property
    def auto_unit_multiplier(self) -> bool:
        return self._auto

    @auto_unit_multiplier.setter
    def auto_unit_multiplier(self, enabled: bool) -> None:
        self._auto = enabled
        if enabled:
            self.adjust_unit_multiplier()

    @property
    def unit_multiplier(self) -> FrequencyUnitMultiplier:
        return self._multiplier

    @unit_multiplier.setter
    def unit_multiplier(self, multiplier: FrequencyUnitMultiplier) -> None:
        self._multiplier = FrequencyUnitMultiplier(multiplier)

    # Multiplier handling

    def adjust_unit_multiplier(self) -> None:
        """Pick the multiplier that fits the magnitude of the current value."""
        magnitude = abs(self._value)
        if magnitude >= 1e12:
            self.unit_multiplier = FrequencyUnitMultiplier.TERA
        elif magnitude >= 1e9:
            self.unit_multiplier = FrequencyUnitMultiplier.GIGA
        elif magnitude >= 1e6:
            self.unit_multiplier = FrequencyUnitMultiplier.MEGA
        elif magnitude >= 1e3:
            self.unit_multiplier = FrequencyUnitMultiplier.KILO
        else:
            self.unit_multiplier = FrequencyUnitMultiplier.NONE

    def inc_unit_multiplier(self) -> None:
        if self._multiplier < FrequencyUnitMultiplier.TERA:
            self.unit_multiplier = FrequencyUnitMultiplier(self._multiplier + 1)

    def dec_unit_multiplier(self) -> None:
        if self._multiplier > FrequencyUnitMultiplier.NONE:
            self.unit_multiplier = FrequencyUnitMultiplier(self._multiplier - 1)

    @property
    def can_increment(self) -> bool:
        return self._multiplier != FrequencyUnitMultiplier.TERA

    @property
    def can_decrement(self) -> bool:
        return self._multiplier != FrequencyUnitMultiplier.NONE

    # Display

    def suffix(self) -> str:
        """Units with the SI prefix of the current multiplier."""
        return self._multiplier.prefix + self._units

    def multiplier(self) -> float:
        return self._multiplier.factor

    def decimals(self) -> int:
        return 3 * int(self._multiplier) + self._extra_decimals

    def displayed_value(self) -> float:
        """Value in display units, clamped to the limits and rounded to the decimals."""
        mul = 1 / self.multiplier()
        low, high = self._min * mul, self._max * mul
        shown = min(max(self._value * mul, low), high)
        return round(shown, self.decimals())

    def on_display_value_changed(self, freq: float) -> None:
        """Take a value typed in display units and notify listeners."""
        self._value = freq * self.multiplier()
        self.value_changed.emit(self._value)