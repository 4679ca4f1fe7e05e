"""Measurement ranges and the debounced buttons that select them."""

from __future__ import annotations

from enum import Enum, IntEnum

DEBOUNCE_US = 300_000
_U32 = 0xFFFFFFFF


class Button(IntEnum):
    """Push buttons, numbered by their GPIO pin."""

    A = 5
    B = 6


class Action(Enum):
    """Outcome of a button press."""

    IGNORED = "ignored"
    RANGE_CHANGED = "range_changed"
    BOOTLOADER = "bootloader"


class MeasurementRange(IntEnum):
    """Selectable ranges, each with its own reference resistor."""

    REF_10K = 0
    REF_47K = 1
    REF_100K = 2
    REF_147K = 3

    @property
    def known_resistance(self) -> int:
        """Value in ohms of the reference resistor for this range."""
        return _KNOWN_RESISTANCE[self]

    @property
    def label(self) -> str:
        """Span of resistances the range is meant for."""
        return _LABELS[self]

    @property
    def reference_label(self) -> str:
        """Text telling which reference resistor to connect."""
        return _REFERENCE_LABELS[self]

    def next(self) -> "MeasurementRange":
        """The following range, wrapping back to the first."""
        members = list(MeasurementRange)
        return members[(members.index(self) + 1) % len(members)]


_KNOWN_RESISTANCE = {
    MeasurementRange.REF_10K: 9753,
    MeasurementRange.REF_47K: 47000,
    MeasurementRange.REF_100K: 100000,
    MeasurementRange.REF_147K: 147000,
}

_LABELS = {
    MeasurementRange.REF_10K: "500-10k Ohms",
    MeasurementRange.REF_47K: "10k-47k Ohms",
    MeasurementRange.REF_100K: "47k-100k Ohms",
    MeasurementRange.REF_147K: "100k-147k Ohms",
}

_REFERENCE_LABELS = {
    MeasurementRange.REF_10K: "Res. Ref: 10k",
    MeasurementRange.REF_47K: "Res. Ref: 47k",
    MeasurementRange.REF_100K: "Res. Ref: 100k",
    MeasurementRange.REF_147K: "Res. Ref: 100k",
}


class RangeSelector:
    """Tracks the selected range from debounced button presses.

    Times are microseconds since boot on a 32-bit wrapping counter.
    """

    def __init__(self, debounce_us: int = DEBOUNCE_US) -> None:
        self.debounce_us = debounce_us
        self.measurement_range = MeasurementRange.REF_10K
        self._last_us = 0

    def press(self, button: Button | int, now_us: int) -> Action:
        """Handle a falling edge on ``button`` at time ``now_us``."""
        button = Button(button)
        now_us &= _U32
        if (now_us - self._last_us) & _U32 <= self.debounce_us:
            return Action.IGNORED
        self._last_us = now_us
        if button is Button.A:
            self.measurement_range = self.measurement_range.next()
            return Action.RANGE_CHANGED
        return Action.BOOTLOADER