"""Resistance calculation, E24 rounding and colour-band encoding."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

KNOWN_RESISTANCE = 9753
ADC_RESOLUTION = 4095
SAMPLE_COUNT = 500

E24_SERIES = (
    10, 11, 12, 13, 15, 16, 18, 20, 22, 24, 27, 30,
    33, 36, 39, 43, 47, 51, 56, 62, 68, 75, 82, 91,
)
SCALE_FACTORS = (1, 10, 100, 1000, 10000)

COLOR_NAMES = (
    "Preto", "Marrom", "Vermelho", "Laranja", "Amarelo",
    "Verde", "Azul", "Violeta", "Cinza", "Branco",
)

_MAX_ERROR = 1e9


@dataclass(frozen=True)
class Bands:
    """The three colour bands of a resistor: two digits and a multiplier."""

    first: int
    second: int
    multiplier: int

    @property
    def colors(self) -> tuple[str, str, str]:
        """Colour names of the three bands, in order."""
        return (
            color_name(self.first),
            color_name(self.second),
            color_name(self.multiplier),
        )


def average_reading(samples: Iterable[float]) -> float:
    """Return the mean of a sequence of ADC samples."""
    values = list(samples)
    if not values:
        raise ValueError("at least one sample is required")
    return sum(values) / len(values)


def unknown_resistance(
    reading: float,
    known: float = KNOWN_RESISTANCE,
    resolution: float = ADC_RESOLUTION,
) -> float:
    """Resistance of the unknown resistor in a divider with ``known``.

    A reading at full scale means an open circuit and gives infinity.
    """
    if reading == resolution:
        return math.inf
    return (known * reading) / (resolution - reading)


def nearest_e24(resistance: float) -> float:
    """Closest E24 value between 10 ohms and 910 kilohms.

    Ties go to the smaller candidate. Returns 0 when every candidate is
    further than 1e9 ohms away.
    """
    best = 0.0
    best_error = _MAX_ERROR
    for factor in SCALE_FACTORS:
        for base in E24_SERIES:
            candidate = float(base * factor)
            error = abs(resistance - candidate)
            if error < best_error:
                best_error = error
                best = candidate
    return best


def color_bands(value: float) -> Bands:
    """Split a resistance into two significant digits and a power of ten."""
    if value < 0:
        raise ValueError(f"resistance cannot be negative: {value}")
    multiplier = 0
    while value >= 100:
        value /= 10
        multiplier += 1
    first, second = divmod(int(value + 0.5), 10)
    return Bands(first, second, multiplier)


def color_name(digit: int) -> str:
    """Name of the colour that stands for ``digit`` (0 to 9)."""
    if not 0 <= digit < len(COLOR_NAMES):
        raise IndexError(f"no colour for digit {digit}")
    return COLOR_NAMES[digit]