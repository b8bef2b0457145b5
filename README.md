# scopeplot

Building blocks for oscilloscope-style plotting of data streamed from a
serial device. It holds the logic that sits around a plot widget:
number formatting, axis ranges, tick labels, a rolling time axis, spectrum
helpers, CSV export and encoding of values for the serial line.

## Modules

- **`scopeplot.formatting`**: values printed with a fixed number of
  significant digits and SI prefixes (`float_to_nice_string`,
  `to_significant_digits`, `int_log10`). It rounds values to "nice" 1-2-5
  steps (`floor_to_nice_value`, `ceil_to_nice_value`, `ceil_to_multiple_of`,
  `next_pow2`), parses unit strings such as `-V`, `!mV`, `index` or
  `time(hh:mm)` (`parse_unit`, `UnitOfMeasure`, `UnitMode`) and decodes
  binary value prefixes such as `u2`, `F8` or `kI4` (`read_value_prefix`,
  `ValueType`, `ValueKind`, `value_type_to_string`).
- **`scopeplot.channels`**: numbering of analog, math and logic channels and
  their display names (`ChannelLayout`, `ChannelType`), and per-channel
  display settings (`ChannelSettings`).
- **`scopeplot.ticker`**: axis tick labels with unit prefixes, `MM:SS` time
  labels and index labels (`UnitTicker`).
- **`scopeplot.viewport`**: axis ranges kept within a zoom limit (`Range`,
  `AxisView`, `clip_range`), the grid step that follows the visible size,
  placement of the tracer label (`choose_tracer_text_position`,
  `TracerTextPosition`) and the nearest sample to a key
  (`key_to_nearest_sample`).
- **`scopeplot.tracer`**: the sample nearest to a point by pixel distance
  (`nearest_point_index`).
- **`scopeplot.rolling`**: the state machine behind a rolling time axis
  (`RollingView`, `RollingMode`).
- **`scopeplot.channelview`**: a channel's own axis range from offset, scale
  and inversion (`channel_axis_range`), widening of the vertical range to a
  nice value (`expand_vertical_range`), the time span of the data
  (`data_time_span`) and the number of used logic bits (`logic_bits_used`).
- **`scopeplot.spectrum`**: automatic ranging (`fft_auto_range`), hold-max
  merging (`hold_max`) and peak search (`peak_frequency`) for spectrum plots.
- **`scopeplot.csvexport`**: CSV export of single channels
  (`export_channel_csv`), logic groups (`export_logic_csv`) and merged
  multi-channel tables (`export_merged_csv`).
- **`scopeplot.transmit`**: encoding of text or numbers (`u8` … `i64`,
  `float`, `double`; an upper-case first letter means big endian) into byte
  chunks (`encode_for_serial`, `TerminalEncodingError`), and a small
  callback bridge (`TerminalInterface`).

## Installation

```
pip install scopeplot
```

## Examples

```python
from scopeplot.formatting import float_to_nice_string, parse_unit, ceil_to_nice_value

print(float_to_nice_string(0.0123, 3, False, False, False, parse_unit("V")))
# 12.3 mV

print(ceil_to_nice_value(3.2))
# 5.0
```

```python
from scopeplot.transmit import encode_for_serial

encode_for_serial([1, 2], "U16")
# [b'\x00\x01', b'\x00\x02']
```

```python
from scopeplot.csvexport import export_channel_csv

csv_text = export_channel_csv("Ch 1", [(0.0, 1.5), (0.1, 2.0)], ",", ".", 3, None)
```

## What it does not do

The package contains no drawing code and no widgets: it does not render
plots, handle the mouse or open a window. It does not open serial ports
either; `TerminalInterface` only hands encoded bytes to the callbacks it is
given. There is no message log and no command-line program.

## Running the tests

```
pip install -e ".[test]"
pytest
```