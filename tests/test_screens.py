import pytest

from ohmmeter.font import glyph
from ohmmeter.ranges import MeasurementRange
from ohmmeter.resistor import Bands
from ohmmeter.screens import draw_no_resistor, draw_range, draw_reading
from ohmmeter.ssd1306 import DEFAULT_ADDRESS, SSD1306


def make_display():
    writes = []
    display = SSD1306(lambda address, data: writes.append((address, data)))
    return display, writes


def shows_text(display, text, x, y):
    return all(
        display.get_pixel(x + 8 * k + i, y + j) == bool((column >> j) & 1)
        for k, char in enumerate(text)
        for i, column in enumerate(glyph(char))
        for j in range(8)
    )


def test_no_resistor_screen_texts():
    display, _ = make_display()
    draw_no_resistor(display, MeasurementRange.REF_10K)
    assert shows_text(display, "500-10k Ohms", 15, 8)
    assert shows_text(display, "ADC", 13, 41)
    assert shows_text(display, "Resisten.", 50, 41)
    assert shows_text(display, "Sem resistor", 20, 25)


@pytest.mark.parametrize("measurement_range", [1, 2, 3])
def test_no_resistor_label_offset_for_other_ranges(measurement_range):
    display, _ = make_display()
    draw_no_resistor(display, measurement_range)
    assert shows_text(display, MeasurementRange(measurement_range).label, 10, 8)


def test_no_resistor_frame_and_lines():
    display, _ = make_display()
    draw_no_resistor(display, 0)
    assert all(display.get_pixel(x, 37) for x in range(3, 124))
    assert all(display.get_pixel(44, y) for y in range(37, 61))
    assert display.get_pixel(3, 3)
    assert display.get_pixel(124, 62)
    assert not display.get_pixel(0, 0)
    assert not display.get_pixel(127, 63)


def test_no_resistor_sends_buffer():
    display, writes = make_display()
    draw_no_resistor(display, 0)
    assert writes[-1] == (DEFAULT_ADDRESS, display.buffer)
    assert len(writes) == 7


def test_reading_screen_texts():
    display, _ = make_display()
    draw_reading(display, Bands(4, 7, 2), 1234.4, 4700.0)
    assert shows_text(display, "Amarelo", 8, 6)
    assert shows_text(display, "Violeta", 8, 16)
    assert shows_text(display, "Vermelho", 8, 26)
    assert shows_text(display, "1234", 8, 52)
    assert shows_text(display, "4700 Ohms", 48, 52)
    assert shows_text(display, "ADC", 13, 41)


def test_reading_screen_replaces_previous_screen():
    display, writes = make_display()
    draw_no_resistor(display, 0)
    draw_reading(display, Bands(1, 0, 2), 100.0, 1000.0)
    assert not shows_text(display, "Sem resistor", 20, 25)
    assert shows_text(display, "Marrom", 8, 6)
    assert writes[-1] == (DEFAULT_ADDRESS, display.buffer)


def test_reading_screen_rejects_bad_band():
    display, _ = make_display()
    with pytest.raises(IndexError):
        draw_reading(display, Bands(10, 0, 0), 100.0, 1000.0)


@pytest.mark.parametrize("measurement_range", list(MeasurementRange))
def test_range_screen(measurement_range):
    display, writes = make_display()
    draw_range(display, measurement_range)
    assert shows_text(display, "Margem:", 0, 0)
    assert shows_text(display, measurement_range.label, 10, 16)
    assert shows_text(display, measurement_range.reference_label, 0, 32)
    assert shows_text(display, "Conecte Ref!", 10, 48)
    assert writes[-1] == (DEFAULT_ADDRESS, display.buffer)


def test_range_screen_clears_display():
    display, _ = make_display()
    display.pixel(127, 63, True)
    draw_range(display, 0)
    assert not display.get_pixel(127, 63)


def test_range_screen_rejects_unknown_range():
    display, _ = make_display()
    with pytest.raises(ValueError):
        draw_range(display, 7)