"""Jetson monitoring: readers for power rails, thermal zones and processes, and plain-text screens."""

__version__ = "0.1.0"