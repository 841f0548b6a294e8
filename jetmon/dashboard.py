"""Main dashboard: a summary of every statistic on one screen."""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Any, Optional

from jetmon.cpu_screen import SimpleCpuStats, SimpleFanStats
from jetmon.gpu_screen import SimpleGpuStats
from jetmon.info_screen import SimpleBoardInfo
from jetmon.power_screen import SimplePowerStats
from jetmon.temperature_screen import SimpleTemperatureStats

_VERSION = "0.1.0"
_U16_MASK = 0xFFFF
_UNITS = ("B", "KB", "MB", "GB", "TB")


def _display_number(value: float) -> str:
    """Format a float the way a plain display of it reads: no trailing '.0'."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _format_bytes(size: int) -> tuple[float, str]:
    """Scale a byte count to the largest binary unit that keeps it at or above 1."""
    value = float(size)
    unit = _UNITS[0]
    for unit in _UNITS:
        if value < 1024.0 or unit == _UNITS[-1]:
            break
        value /= 1024.0
    return value, unit


@dataclass
class SimpleMemoryStats:
    """RAM and swap usage in bytes."""

    ram_used: int = 0
    ram_total: int = 0
    swap_used: int = 0
    swap_total: int = 0


@dataclass
class JetsonStats:
    """A snapshot of every headline statistic."""

    cpu: SimpleCpuStats
    gpu: SimpleGpuStats
    memory: SimpleMemoryStats
    fan: SimpleFanStats
    temperature: SimpleTemperatureStats
    power: SimplePowerStats
    board: SimpleBoardInfo

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


class AllScreen:
    """Holds the latest snapshot and renders the dashboard as text lines."""

    def __init__(self) -> None:
        self.stats: Optional[JetsonStats] = None

    def update(self, stats: JetsonStats) -> None:
        self.stats = stats

    def render(self) -> list[str]:
        """Return the screen as lines of text."""
        if self.stats is None:
            return ["jetmon", "Loading..."]

        stats = self.stats
        memory = stats.memory
        if memory.ram_total > 0:
            ram_percent = (memory.ram_used * 100 // memory.ram_total) & _U16_MASK
        else:
            ram_percent = 0
        used_val, used_unit = _format_bytes(memory.ram_used)
        total_val, total_unit = _format_bytes(memory.ram_total)
        board_temp = 0.0

        return [
            f"jetmon | v{_VERSION}",
            "CPU Usage",
            f"{_display_number(stats.cpu.usage)}%",
            "GPU Usage",
            f"{_display_number(stats.gpu.usage)}%",
            f"Memory: {used_val:.1f}{used_unit} / {total_val:.1f}{total_unit}",
            f"{ram_percent}%",
            "Temperature",
            f"CPU: {stats.temperature.cpu:.1f}°C | GPU: {stats.temperature.gpu:.1f}°C"
            f" | Board: {board_temp:.1f}°C",
            "Power Consumption",
            f"Total: {stats.power.total:.2f}W",
            "q: quit | 1-8: screens | h: help",
        ]