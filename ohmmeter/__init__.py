"""Voltage-divider ohmmeter: resistance, E24 matching, colour bands and rendering."""

__version__ = "0.1.0"