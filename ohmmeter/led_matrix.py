"""5x5 addressable RGB LED matrix and the resistor-band picture on it."""

from __future__ import annotations

from typing import Callable, NamedTuple, Sequence

LED_COUNT = 25
SIDE = 5
BRIGHTNESS = 1


class Color(NamedTuple):
    """An RGB colour with 8-bit channels."""

    r: int
    g: int
    b: int


BLACK = Color(0, 0, 0)

RESISTOR_COLORS = (
    Color(0, 0, 0),
    Color(90, 20, 0),
    Color(255, 0, 0),
    Color(255, 80, 0),
    Color(255, 225, 0),
    Color(0, 255, 0),
    Color(0, 0, 255),
    Color(128, 0, 128),
    Color(128, 128, 128),
    Color(255, 255, 255),
)

Sprite = Sequence[Sequence[Sequence[int]]]


def grid_index(x: int, y: int) -> int:
    """Position in the serpentine LED chain of grid cell ``(x, y)``."""
    if not (0 <= x < SIDE and 0 <= y < SIDE):
        raise IndexError(f"cell ({x}, {y}) is outside the matrix")
    if y % 2 == 0:
        return LED_COUNT - 1 - (y * SIDE + x)
    return LED_COUNT - 1 - (y * SIDE + (SIDE - 1 - x))


class LedMatrix:
    """A chain of LEDs whose colours are pushed through ``write(data)``.

    ``write`` receives the whole chain as bytes in G, R, B order per LED.
    """

    def __init__(self, write: Callable[[bytes], None]) -> None:
        self._write = write
        self._leds = [BLACK] * LED_COUNT

    @property
    def leds(self) -> tuple[Color, ...]:
        """Current colour of every LED in chain order."""
        return tuple(self._leds)

    def set_led(self, index: int, r: int, g: int, b: int) -> None:
        """Set the colour of one LED in the buffer."""
        if not 0 <= index < LED_COUNT:
            raise IndexError(f"no LED at index {index}")
        for channel in (r, g, b):
            if not 0 <= channel <= 255:
                raise ValueError(f"channel value {channel} is not 0-255")
        self._leds[index] = Color(
            int(r * BRIGHTNESS), int(g * BRIGHTNESS), int(b * BRIGHTNESS)
        )

    def clear(self) -> None:
        """Turn every LED off in the buffer."""
        self._leds = [BLACK] * LED_COUNT

    def write(self) -> None:
        """Send the buffer to the LEDs."""
        self._write(bytes(
            channel for led in self._leds for channel in (led.g, led.r, led.b)
        ))

    def draw_sprite(self, sprite: Sprite) -> None:
        """Copy a 5x5 sprite, indexed ``sprite[column][row]``, into the buffer."""
        for row in range(SIDE):
            for column in range(SIDE):
                self.set_led(grid_index(row, column), *sprite[column][row])


def show_bands(matrix: LedMatrix, first: int, second: int, multiplier: int) -> None:
    """Light rows 1 to 3 in the colours of the three resistor bands."""
    bands = {
        1: RESISTOR_COLORS[first],
        2: RESISTOR_COLORS[second],
        3: RESISTOR_COLORS[multiplier],
    }
    sprite = [
        [bands.get(row, BLACK) for row in range(SIDE)]
        for _ in range(SIDE)
    ]
    matrix.draw_sprite(sprite)
    matrix.write()


def show_empty(matrix: LedMatrix) -> None:
    """Turn the whole matrix off."""
    matrix.clear()
    matrix.write()