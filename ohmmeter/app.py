"""Measurement loop tying the ADC readings to the display and LED matrix."""

from __future__ import annotations

import argparse
import sys
import time
from dataclasses import dataclass
from typing import Iterable, Optional

from .led_matrix import LedMatrix, show_bands, show_empty
from .ranges import MeasurementRange, RangeSelector
from .resistor import (
    Bands,
    average_reading,
    color_bands,
    nearest_e24,
    unknown_resistance,
)
from .screens import draw_no_resistor, draw_range, draw_reading
from .ssd1306 import SSD1306

MIN_RESISTANCE = 100
MAX_RESISTANCE = 190000
RANGE_HOLD_SECONDS = 5.0


@dataclass(frozen=True)
class Measurement:
    """Result of one measurement cycle."""

    reading: float
    resistance: float
    value: Optional[float] = None
    bands: Optional[Bands] = None

    @property
    def in_range(self) -> bool:
        """Whether a resistor was detected within the usable span."""
        return self.value is not None


class Ohmmeter:
    """Measures a resistor and shows the result on the display and matrix."""

    hold_seconds = RANGE_HOLD_SECONDS

    def __init__(self, display: SSD1306, matrix: LedMatrix, selector: RangeSelector) -> None:
        self.display = display
        self.matrix = matrix
        self.selector = selector
        self.known_resistance = MeasurementRange.REF_10K.known_resistance
        self._shown_range: Optional[MeasurementRange] = None

    def refresh_range(self) -> bool:
        """React to a range change; return whether the range had changed."""
        current = self.selector.measurement_range
        if current is self._shown_range:
            return False
        self._shown_range = current
        self.known_resistance = current.known_resistance
        show_empty(self.matrix)
        draw_range(self.display, current)
        time.sleep(self.hold_seconds)
        self.display.fill(False)
        self.display.send_data()
        return True

    def measure(self, samples: Iterable[float]) -> Measurement:
        """Average ``samples``, compute the resistance and show the result."""
        reading = average_reading(samples)
        resistance = unknown_resistance(reading, self.known_resistance)
        if not MIN_RESISTANCE <= resistance <= MAX_RESISTANCE:
            draw_no_resistor(self.display, self.selector.measurement_range)
            show_empty(self.matrix)
            return Measurement(reading, resistance)
        value = nearest_e24(resistance)
        bands = color_bands(value)
        draw_reading(self.display, bands, reading, value)
        show_bands(self.matrix, bands.first, bands.second, bands.multiplier)
        return Measurement(reading, resistance, value, bands)


def _describe(measurement: Measurement) -> str:
    if measurement.bands is None or measurement.value is None:
        return f"Sem resistor (ADC {measurement.reading:.0f})"
    colors = ", ".join(measurement.bands.colors)
    return f"{measurement.value:.0f} Ohms: {colors} (ADC {measurement.reading:.0f})"


def _parse_samples(parser: argparse.ArgumentParser, line: str) -> list[float]:
    try:
        return [float(field) for field in line.split()]
    except ValueError:
        parser.error(f"invalid ADC samples: {line.strip()!r}")
        raise


def main(argv=None) -> int:
    """Measure from ADC samples given as arguments or, line by line, on stdin."""
    parser = argparse.ArgumentParser(
        prog="ohmmeter",
        description="Compute resistor values and colour bands from ADC samples.",
    )
    parser.add_argument(
        "--range",
        type=int,
        choices=[member.value for member in MeasurementRange],
        default=MeasurementRange.REF_10K.value,
        help="measurement range (reference resistor) to use",
    )
    parser.add_argument("samples", nargs="*", type=float, help="ADC samples to average")
    args = parser.parse_args(argv)

    selector = RangeSelector()
    selector.measurement_range = MeasurementRange(args.range)
    ohmmeter = Ohmmeter(
        SSD1306(lambda address, data: None),
        LedMatrix(lambda data: None),
        selector,
    )
    ohmmeter.hold_seconds = 0
    ohmmeter.refresh_range()

    if args.samples:
        batches: Iterable[list[float]] = [args.samples]
    else:
        batches = (
            _parse_samples(parser, line) for line in sys.stdin if line.strip()
        )
    for samples in batches:
        print(_describe(ohmmeter.measure(samples)))
    return 0


if __name__ == "__main__":
    sys.exit(main())