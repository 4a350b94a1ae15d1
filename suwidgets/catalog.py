"""Catalog of the widgets this package provides, with their designer metadata."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from suwidgets.color import ColorChooser
from suwidgets.constellation import Constellation
from suwidgets.frequency_spinbox import FrequencySpinBox
from suwidgets.histogram import Histogram
from suwidgets.lcd import LCD
from suwidgets.symview import SymView
from suwidgets.vertical_label import VerticalLabel

_OPEN_ICON = ":/icons/open_icon.png"


@dataclass(frozen=True)
class WidgetInfo:
    """Description of one widget and how to build it."""

    name: str
    factory: Callable[[], object]
    dom_xml: str
    include_file: str
    whats_this: str = ""
    tool_tip: str = ""
    group: str = ""
    icon: Optional[str] = None
    is_container: bool = False

    def create(self) -> object:
        """Build a new instance of the widget."""
        return self.factory()


def _dom(cls_name: str, obj_name: str) -> str:
    return f'<widget class="{cls_name}" name="{obj_name}">\n</widget>\n'


_WIDGETS: tuple[WidgetInfo, ...] = (
    WidgetInfo(
        name="Constellation",
        factory=Constellation,
        dom_xml=_dom("Constellation", "constellation"),
        include_file="Constellation.h",
        whats_this="Constellation widget for phase-modulated signals",
        icon=_OPEN_ICON,
    ),
    WidgetInfo(
        name="Histogram",
        factory=Histogram,
        dom_xml=_dom("Histogram", "histogram"),
        include_file="Histogram.h",
    ),
    WidgetInfo(
        name="LCD",
        factory=LCD,
        dom_xml=_dom("LCD", "lcd"),
        include_file="LCD.h",
    ),
    WidgetInfo(
        name="SymView",
        factory=SymView,
        dom_xml=_dom("SymView", "symView"),
        include_file="SymView.h",
    ),
    WidgetInfo(
        name="ColorChooserButton",
        factory=ColorChooser,
        dom_xml=_dom("ColorChooserButton", "ColorChooserButton"),
        include_file="ColorChooserButton.h",
        whats_this="Button that allows you to pick a color",
        icon=_OPEN_ICON,
    ),
    WidgetInfo(
        name="QVerticalLabel",
        factory=VerticalLabel,
        dom_xml=_dom("QVerticalLabel", "verticalLabel"),
        include_file="QVerticalLabel.h",
    ),
    WidgetInfo(
        name="FrequencySpinBox",
        factory=FrequencySpinBox,
        dom_xml=_dom("FrequencySpinBox", "frequencySpinBox"),
        include_file="FrequencySpinBox.h",
        whats_this="Button that allows you to pick a color",
        icon=_OPEN_ICON,
    ),
)


def custom_widgets() -> list[WidgetInfo]:
    """All widgets in registration order."""
    return list(_WIDGETS)


def find_widget(name: str) -> WidgetInfo:
    """Return the widget registered as ``name``; raises KeyError if there is none."""
    for info in _WIDGETS:
        if info.name == name:
            return info
    raise KeyError(name)