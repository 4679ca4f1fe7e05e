# ohmmeter

Measurement logic for a simple voltage-divider ohmmeter. It turns averaged
12-bit ADC readings into a resistance, snaps that resistance to the nearest
E24 standard value, works out the colour bands, and renders the result to an
in-memory SSD1306 128×64 framebuffer and a 5×5 RGB LED matrix.

The display and the LED matrix take a `write` callable that receives the
bytes that would go on the wire, so everything runs on an ordinary computer.

## Installation

```
pip install .
```

For the test suite:

```
pip install .[test]
pytest
```

## Command line

```
ohmmeter [--range {0,1,2,3}] [SAMPLE ...]
```

The samples given as arguments are averaged as one batch of ADC readings. With
no samples, each non-blank line of standard input is read as one batch of
whitespace-separated samples. For every batch one line is printed, either

```
4700 Ohms: Amarelo, Violeta, Vermelho (ADC 1331)
```

or `Sem resistor (ADC ...)` when the computed resistance is below 100 Ω or
above 190 kΩ. `--range` picks the reference resistor (default 0):

| range | span           | reference |
|-------|----------------|-----------|
| 0     | 500-10k Ohms   | 9753 Ω    |
| 1     | 10k-47k Ohms   | 47000 Ω   |
| 2     | 47k-100k Ohms  | 100000 Ω  |
| 3     | 100k-147k Ohms | 147000 Ω  |

## Library use

### `ohmmeter.resistor`

- `average_reading(samples)` returns the mean of the samples; an empty
  sequence raises `ValueError`.
- `unknown_resistance(reading, known=9753, resolution=4095)` solves the
  divider for the unknown resistor; a full-scale reading gives `math.inf`.
- `nearest_e24(resistance)` returns the closest E24 value from 10 Ω to
  910 kΩ; on a tie the smaller value wins.
- `color_bands(value)` returns a frozen `Bands(first, second, multiplier)`;
  negative values raise `ValueError`. `Bands.colors` gives the three colour
  names.
- `color_name(digit)` names the colour for a digit 0–9 (`"Preto"`,
  `"Marrom"`, … `"Branco"`) and raises `IndexError` otherwise.

### `ohmmeter.ssd1306`

`SSD1306(write, width=128, height=64, address=0x3C, external_vcc=False)` is a
framebuffer in vertical addressing order. `write(address, data)` receives
each command (`0x80` followed by the byte) and each frame (`0x40` followed by
the buffer). Methods: `config`, `command`, `send_data`, `pixel`, `get_pixel`,
`fill`, `rect`, `line` (Bresenham), `hline`, `vline`, `draw_char` and
`draw_string` (wraps lines and stops at the bottom edge). Pixels outside the
display raise `IndexError`. The `buffer` property returns the raw frame, and
`Command` lists the controller opcodes. The 8×8 font is in `ohmmeter.font`;
`glyph(char)` returns a character's eight column bytes, drawing characters
outside printable ASCII as a space.

### `ohmmeter.led_matrix`

`LedMatrix(write)` holds 25 LEDs; `write()` sends all of them as bytes in
G, R, B order. `set_led(index, r, g, b)` checks the index and 0–255 channels,
`clear()` turns all LEDs off, `leds` gives the current colours and
`draw_sprite(sprite)` copies a 5×5 sprite indexed `sprite[column][row]`.
`grid_index(x, y)` maps a grid cell to its position in the serpentine chain.
`show_bands(matrix, first, second, multiplier)` lights rows 1 to 3 in the band
colours (`RESISTOR_COLORS`) and `show_empty(matrix)` blanks the matrix.

### `ohmmeter.ranges`

`MeasurementRange` has `known_resistance`, `label`, `reference_label` and
`next()`. `RangeSelector(debounce_us=300000).press(button, now_us)` handles
a press of `Button.A` or `Button.B` at a time on a wrapping 32-bit
microsecond counter and returns an `Action`: presses within the debounce
time are `IGNORED`, button A cycles the range (`RANGE_CHANGED`), button B
returns `BOOTLOADER`.

### `ohmmeter.screens`

`draw_range(display, measurement_range)`,
`draw_no_resistor(display, measurement_range)` and
`draw_reading(display, bands, reading, value)` draw the three screens and
send them to the display.

### `ohmmeter.app`

`Ohmmeter(display, matrix, selector)` ties it together. `refresh_range()`
shows the range screen when the selected range has changed, holds it for
`hold_seconds` (5 by default), then clears the display; it returns whether
the range had changed. `measure(samples)` returns a `Measurement` with
`reading`, `resistance`, `value`, `bands` and `in_range`, and updates the
display and matrix.

## What it does not do

The package does not talk to any hardware: it has no I2C, ADC, GPIO or LED
driver of its own, runs no continuous sampling loop, and does not reboot
anything when `Action.BOOTLOADER` is returned. The command renders into
display and matrix writers that discard their output and only prints the
results.