"""CPU screen: overall usage and per-core details."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional

from jetmon.temperature_screen import SimpleTemperatureStats

_U32_MAX = 2**32 - 1


def _display_number(value: float) -> str:
    """Format a float the way a plain display of it reads: no trailing '.0'."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _saturating_u32(value: float) -> int:
    if math.isnan(value) or value <= 0:
        return 0
    if value >= _U32_MAX:
        return _U32_MAX
    return int(value)


@dataclass
class SimpleCpuStats:
    """Overall CPU usage in percent and frequency in Hz."""

    usage: float = 0.0
    frequency: int = 0


@dataclass
class SimpleFanStats:
    """Fan speed in percent."""

    speed: int = 0


@dataclass
class CoreStats:
    """Usage, frequency (Hz) and governor of one CPU core."""

    index: int
    usage: float
    frequency: int
    governor: str


@dataclass
class CpuScreenStats:
    """Everything the CPU screen displays."""

    overall: SimpleCpuStats
    cores: list[CoreStats] = field(default_factory=list)
    fan: SimpleFanStats = field(default_factory=SimpleFanStats)
    temperature: SimpleTemperatureStats = field(default_factory=SimpleTemperatureStats)


class CpuScreen:
    """Holds the latest CPU stats and renders them as text lines."""

    def __init__(self) -> None:
        self.stats: Optional[CpuScreenStats] = None
        self.selected_core = 0

    def update(self, stats: CpuScreenStats) -> None:
        self.stats = stats

    def render(self) -> list[str]:
        """Return the screen as lines of text."""
        if self.stats is None:
            return ["CPU", "Loading..."]

        stats = self.stats
        lines = [
            "jetmon | CPU Details",
            "Overall CPU",
            f"{_display_number(stats.overall.usage)}%",
            "CPU Cores",
        ]
        lines.extend(
            f"Core {core.index}: {_saturating_u32(core.usage)}% @ "
            f"{core.frequency // 1_000_000}MHz ({core.governor})"
            for core in stats.cores
        )
        lines.append(
            f"q: quit | 1-8: screens | h: help | "
            f"Fan: {stats.fan.speed}% | CPU: {stats.temperature.cpu:.1f}°C"
        )
        return lines