# suwidgets

Toolkit-independent models of widgets for looking at demodulated radio
signals. Each class keeps the state, limits and arithmetic of one widget
(what a GUI needs in order to draw it and react to input) without being
tied to any GUI library.

## Installation

```
pip install suwidgets
```

## What is inside

- `suwidgets.helpers`: text formatting of quantities with SI prefixes
  (`format_quantity`, `format_quantity_auto`, `format_quantity_from_delta`;
  values in seconds of a minute or more come out as `mm:ss` or
  `hh:mm:ss`), binary sizes (`format_binary_quantity`), complex and real
  numbers (`format_complex`, `format_real`, `format_scientific`,
  `format_integer_part`), and file-dialog helpers (`ensure_extension`,
  `extract_filter_extension`).
- `suwidgets.decider`: `Decider` and `DecisionMode`. A decider splits a
  range into `2 ** bps` intervals and turns complex samples into symbols
  by their argument or their modulus.
- `suwidgets.color`: `Color` (RGBA, 8 bits per component), `Signal`
  (a list of callbacks fired by `emit`), and `ColorChooser`, which holds
  a color, a Pillow preview swatch, and asks a picker callable for a new
  color in `choose`.
- `suwidgets.vertical_label`: `VerticalLabel`, the size hints and text
  rectangle of a label drawn rotated by 270 degrees.
- `suwidgets.constellation`: `Constellation`, a ring buffer of complex
  samples with a mapping to screen points that fade with age, and the
  marker positions for a modulation-order hint.
- `suwidgets.frequency_spinbox`: `FrequencySpinBox` and
  `FrequencyUnitMultiplier`, for frequency entry with automatic
  Hz/kHz/MHz/GHz/THz scaling, suffix and decimals.
- `suwidgets.histogram`: `Histogram`, which bins decided quantities,
  computes grid divisions and axis labels, and lets a mouse selection
  (`press`, `move`, `release`) set new decider limits.
- `suwidgets.lcd`: `LCD`, a seven-segment numeric display with digit
  selection and keyboard and wheel editing; `digit_segments` gives the
  lit `Segment` flags of each glyph.
- `suwidgets.symview`: `SymView`, a symbol raster viewer. `render`
  returns the current view as a Pillow image; `save` writes the whole
  buffer as text, raw bytes, a C array, BMP, PNG, JPEG or PPM
  (`FileFormat`).
- `suwidgets.catalog`: `custom_widgets()` and `find_widget(name)` list
  the available widgets as `WidgetInfo` records, whose `create()` builds
  a new instance.

## Examples

```python
from suwidgets.helpers import format_quantity, format_binary_quantity

format_quantity(1500.0, 3, "Hz")   # '1.50 kHz'
format_binary_quantity(2048)       # '2.000 KiB'
```

```python
from suwidgets.decider import Decider

decider = Decider()
symbols = decider.decide([1 + 1j, -1 - 1j])   # bytes, one symbol per sample
```

```python
from suwidgets.lcd import LCD

lcd = LCD()
lcd.set_value_silent(12345)
lcd.digit_count()  # 5
```

```python
from suwidgets.symview import SymView, FileFormat

view = SymView(64, 32)
view.feed([0, 1, 1, 0] * 100)
image = view.render()                  # 64x32 RGBA image
view.save("symbols.txt", FileFormat.TEXT)
```

```python
from suwidgets.catalog import custom_widgets, find_widget

names = [info.name for info in custom_widgets()]
lcd = find_widget("LCD").create()
```

## What it does not do

- It draws no windows and depends on no GUI toolkit. Apart from
  `SymView.render` and the `ColorChooser` preview swatch, it produces
  coordinates, labels and flags for a GUI to draw, not pixels.
- `ColorChooser.choose` opens no dialog; it calls the picker you pass in.
- It has no command-line program.

## Running the tests

```
pip install suwidgets[test]
pytest
```