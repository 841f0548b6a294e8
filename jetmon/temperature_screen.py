"""Temperature screen: headline temperatures and every thermal zone."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional

from jetmon.temperature import TemperatureStats

_U16_MAX = 65535


@dataclass
class SimpleTemperatureStats:
    """CPU and GPU temperatures in degrees Celsius."""

    cpu: float = 0.0
    gpu: float = 0.0


@dataclass
class ScreenThermalZone:
    """A thermal zone as shown on screen, with its share of the critical limit."""

    name: str
    current_temp: float
    max_temp: float
    critical_temp: float
    usage_percent: int


def zone_usage_percent(current_temp: float, critical_temp: float) -> int:
    """Percentage of the critical temperature reached, clamped to 0..65535."""
    if not critical_temp > 0.0:
        return 0
    ratio = current_temp / critical_temp * 100.0
    if math.isnan(ratio):
        return 0
    return max(0, min(_U16_MAX, int(ratio))) if math.isfinite(ratio) else _U16_MAX


@dataclass
class TemperatureScreenStats:
    """Everything the temperature screen displays."""

    temperature: SimpleTemperatureStats
    zones: list[ScreenThermalZone] = field(default_factory=list)

    @classmethod
    def from_stats(cls, stats: TemperatureStats) -> "TemperatureScreenStats":
        return cls(
            temperature=SimpleTemperatureStats(cpu=stats.cpu, gpu=stats.gpu),
            zones=[
                ScreenThermalZone(
                    name=zone.name,
                    current_temp=zone.current_temp,
                    max_temp=zone.max_temp,
                    critical_temp=zone.critical_temp,
                    usage_percent=zone_usage_percent(zone.current_temp, zone.critical_temp),
                )
                for zone in stats.thermal_zones
            ],
        )


class TemperatureScreen:
    """Holds the latest temperature stats and renders them as text lines."""

    def __init__(self) -> None:
        self.stats: Optional[TemperatureScreenStats] = None

    def update(self, stats: TemperatureScreenStats) -> None:
        self.stats = stats

    def render(self) -> list[str]:
        """Return the screen as lines of text."""
        if self.stats is None:
            return ["Temperature", "Loading..."]

        stats = self.stats
        temps = stats.temperature
        lines = [
            "jetmon | Temperature Details",
            "Main Temperatures",
            f"CPU: {temps.cpu:.1f}°C",
            f"GPU: {temps.gpu:.1f}°C",
            "",
            "All Thermal Zones",
        ]
        lines.extend(
            f"{zone.name:<18} {zone.current_temp:.1f}°C / {zone.max_temp:.1f}°C "
            f"({zone.usage_percent}%)"
            for zone in stats.zones
        )
        lines.append(
            f"q: quit | 1-8: screens | h: help | CPU: {temps.cpu:.1f}°C | GPU: {temps.gpu:.1f}°C"
        )
        return lines