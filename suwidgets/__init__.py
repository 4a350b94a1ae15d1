"""Toolkit-independent models of signal-analysis display widgets."""

__version__ = "0.2.0"

__all__ = [
    "catalog",
    "color",
    "constellation",
    "decider",
    "frequency_spinbox",
    "helpers",
    "histogram",
    "lcd",
    "symview",
    "vertical_label",
]