"""Thermal zone readings from the sysfs thermal class."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Optional, Union

DEFAULT_THERMAL_PATH = Path("/sys/class/thermal")

_ZONE_PREFIX = "thermal_zone"
_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1
_INT_RE = re.compile(r"[+-]?[0-9]+")
_UINT_RE = re.compile(r"\+?[0-9]+")

PathLike = Union[str, Path]


@dataclass
class ThermalZone:
    """One thermal zone; temperatures are in degrees Celsius."""

    index: int = 0
    name: str = ""
    current_temp: float = 0.0
    max_temp: float = 0.0
    critical_temp: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "index": self.index,
            "name": self.name,
            "current_temp": self.current_temp,
            "max_temp": self.max_temp,
            "critical_temp": self.critical_temp,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ThermalZone":
        return cls(
            index=int(data["index"]),
            name=str(data["name"]),
            current_temp=float(data["current_temp"]),
            max_temp=float(data["max_temp"]),
            critical_temp=float(data["critical_temp"]),
        )


@dataclass
class TemperatureStats:
    """Headline temperatures and the zones they were picked from."""

    cpu: float = 0.0
    gpu: float = 0.0
    board: float = 0.0
    pmic: float = 0.0
    thermal_zones: list[ThermalZone] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "cpu": self.cpu,
            "gpu": self.gpu,
            "board": self.board,
            "pmic": self.pmic,
            "thermal_zones": [zone.to_dict() for zone in self.thermal_zones],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TemperatureStats":
        return cls(
            cpu=float(data["cpu"]),
            gpu=float(data["gpu"]),
            board=float(data["board"]),
            pmic=float(data["pmic"]),
            thermal_zones=[ThermalZone.from_dict(z) for z in data["thermal_zones"]],
        )

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, text: str) -> "TemperatureStats":
        return cls.from_dict(json.loads(text))

    @classmethod
    def from_zones(cls, zones: Iterable[ThermalZone]) -> "TemperatureStats":
        """Build stats from zones, picking CPU, GPU, PMIC and board by name.

        When several zones match the same category, the last one wins.
        """
        stats = cls(thermal_zones=list(zones))
        for zone in stats.thermal_zones:
            lower = zone.name.lower()
            if "cpu" in lower or zone.name in ("CPU-therm", "cpu-thermal"):
                stats.cpu = zone.current_temp
            elif "gpu" in lower or zone.name in ("GPU-therm", "gpu-thermal"):
                stats.gpu = zone.current_temp
            elif "pmic" in lower:
                stats.pmic = zone.current_temp
            elif "board" in lower or "Tboard" in zone.name:
                stats.board = zone.current_temp
        return stats


def _read_text(path: Path) -> Optional[str]:
    try:
        return path.read_text()
    except (OSError, UnicodeDecodeError):
        return None


def _read_millidegrees(path: Path) -> float:
    text = _read_text(path)
    if text is None:
        return 0.0
    text = text.strip()
    if not _INT_RE.fullmatch(text):
        return 0.0
    value = int(text)
    if not _I32_MIN <= value <= _I32_MAX:
        return 0.0
    return value / 1000.0


def _zone_index(dir_name: str) -> int:
    suffix = dir_name[len(_ZONE_PREFIX):]
    return int(suffix) if _UINT_RE.fullmatch(suffix) else 0


def read_thermal_zones(base_path: PathLike) -> list[ThermalZone]:
    """Read every ``thermal_zone*`` entry under base_path."""
    base_path = Path(base_path)
    try:
        entries = sorted(base_path.iterdir())
    except OSError:
        return []

    zones = []
    for entry in entries:
        if not entry.name.startswith(_ZONE_PREFIX):
            continue
        zone_type = _read_text(entry / "type")
        zones.append(
            ThermalZone(
                index=_zone_index(entry.name),
                name=zone_type.strip() if zone_type is not None else "unknown",
                current_temp=_read_millidegrees(entry / "temp"),
                max_temp=_read_millidegrees(entry / "trip_point_0_temp"),
                critical_temp=_read_millidegrees(entry / "crit_temp"),
            )
        )
    return zones


def read_temperature_stats(base_path: PathLike = DEFAULT_THERMAL_PATH) -> TemperatureStats:
    """Collect temperature statistics; empty stats when the tree is absent."""
    base_path = Path(base_path)
    if not base_path.exists():
        return TemperatureStats()
    return TemperatureStats.from_zones(read_thermal_zones(base_path))