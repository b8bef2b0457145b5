"""Formatting, axis, viewport, spectrum, export and serial-encoding helpers for oscilloscope-style plots."""

__version__ = "0.1.0"

__all__ = [
    "formatting",
    "channels",
    "tracer",
    "ticker",
    "transmit",
    "viewport",
    "rolling",
    "spectrum",
    "channelview",
    "csvexport",
]