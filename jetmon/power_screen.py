"""Power screen: total power draw and each rail."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from jetmon.power import PowerStats


@dataclass
class SimplePowerStats:
    """Total power draw in watts."""

    total: float = 0.0


@dataclass
class ScreenPowerRail:
    """A power rail as shown on screen."""

    name: str
    current: float
    voltage: float
    power: float


@dataclass
class PowerScreenStats:
    """Everything the power screen displays."""

    power: SimplePowerStats
    rails: list[ScreenPowerRail] = field(default_factory=list)

    @classmethod
    def from_stats(cls, stats: PowerStats) -> "PowerScreenStats":
        return cls(
            power=SimplePowerStats(total=stats.total),
            rails=[
                ScreenPowerRail(
                    name=rail.name,
                    current=rail.current,
                    voltage=rail.voltage,
                    power=rail.power,
                )
                for rail in stats.rails
            ],
        )


class PowerScreen:
    """Holds the latest power stats and renders them as text lines."""

    def __init__(self) -> None:
        self.stats: Optional[PowerScreenStats] = None

    def update(self, stats: PowerScreenStats) -> None:
        self.stats = stats

    def render(self) -> list[str]:
        """Return the screen as lines of text."""
        if self.stats is None:
            return ["Power", "Loading..."]

        stats = self.stats
        total = stats.power.total
        lines = [
            "jetmon | Power Details",
            "Total Power",
            f"Total: {total:.2f}W",
            "",
            "Power Rails",
        ]
        lines.extend(
            f"{rail.name:<12} {rail.current:.2f}mA {rail.voltage:.2f}mV {rail.power:.2f}mW"
            for rail in stats.rails
        )
        lines.append(f"q: quit | 1-8: screens | h: help | Total: {total:.2f}W")
        return lines