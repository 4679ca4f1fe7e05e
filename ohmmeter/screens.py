"""Screens shown on the OLED display while measuring."""

from __future__ import annotations

from .ranges import MeasurementRange
from .resistor import Bands
from .ssd1306 import SSD1306

_INK = True
_PAPER = False


def _draw_frame(display: SSD1306) -> None:
    display.fill(_PAPER)
    display.rect(3, 3, 122, 60, _INK, _PAPER)
    display.line(3, 37, 123, 37, _INK)


def _draw_footer_headings(display: SSD1306) -> None:
    display.draw_string("ADC", 13, 41)
    display.draw_string("Resisten.", 50, 41)
    display.line(44, 37, 44, 60, _INK)


def draw_no_resistor(display: SSD1306, measurement_range: MeasurementRange | int) -> None:
    """Show the selected range and that no resistor is connected."""
    measurement_range = MeasurementRange(measurement_range)
    _draw_frame(display)
    label_x = 15 if measurement_range is MeasurementRange.REF_10K else 10
    display.draw_string(measurement_range.label, label_x, 8)
    display.draw_string("Sem resistor", 20, 25)
    _draw_footer_headings(display)
    display.send_data()


def draw_reading(display: SSD1306, bands: Bands, reading: float, value: float) -> None:
    """Show the band colours, the averaged ADC reading and the E24 value."""
    first, second, multiplier = bands.colors
    _draw_frame(display)
    display.draw_string(first, 8, 6)
    display.draw_string(second, 8, 16)
    display.draw_string(multiplier, 8, 26)
    _draw_footer_headings(display)
    display.draw_string(f"{reading:1.0f}", 8, 52)
    display.draw_string(f"{value:.0f} Ohms", 48, 52)
    display.send_data()


def draw_range(display: SSD1306, measurement_range: MeasurementRange | int) -> None:
    """Show the newly selected range and which reference to connect."""
    measurement_range = MeasurementRange(measurement_range)
    display.fill(False)
    display.draw_string("Margem:", 0, 0)
    display.draw_string(measurement_range.label, 10, 16)
    display.draw_string(measurement_range.reference_label, 0, 32)
    display.draw_string("Conecte Ref!", 10, 48)
    display.send_data()