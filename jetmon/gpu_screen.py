"""GPU screen: usage, frequency, temperature and device details."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from jetmon.temperature_screen import SimpleTemperatureStats


def _display_number(value: float) -> str:
    """Format a float the way a plain display of it reads: no trailing '.0'."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer():
        return str(int(value))
    return repr(value)


@dataclass
class SimpleGpuStats:
    """GPU usage in percent and frequency in Hz."""

    usage: float = 0.0
    frequency: int = 0


@dataclass
class GpuScreenStats:
    """Everything the GPU screen displays."""

    gpu: SimpleGpuStats
    temperature: SimpleTemperatureStats
    gpu_name: str
    gpu_arch: str


class GpuScreen:
    """Holds the latest GPU stats and renders them as text lines."""

    def __init__(self) -> None:
        self.stats: Optional[GpuScreenStats] = None

    def update(self, stats: GpuScreenStats) -> None:
        self.stats = stats

    def render(self) -> list[str]:
        """Return the screen as lines of text."""
        if self.stats is None:
            return ["GPU", "Loading..."]

        stats = self.stats
        return [
            "jetmon | GPU Details",
            "GPU Usage",
            f"{_display_number(stats.gpu.usage)}%",
            "GPU Details",
            f"Name: {stats.gpu_name}",
            f"Arch: {stats.gpu_arch}",
            f"Freq: {stats.gpu.frequency // 1_000_000}MHz",
            "GPU Temperature",
            f"GPU: {stats.temperature.gpu:.1f}°C",
            "GPU Information",
            f"Device: {stats.gpu_name}",
            "Governor: Unknown",
            f"q: quit | 1-8: screens | h: help | GPU: {stats.temperature.gpu:.1f}°C",
        ]