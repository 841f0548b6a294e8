"""Power rail readings from INA3221 sensors exposed through sysfs."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Optional, Union

DEFAULT_I2C_PATH = Path("/sys/bus/i2c/devices")

_U32_MAX = 2**32 - 1

PathLike = Union[str, Path]


@dataclass
class PowerRail:
    """A single power rail: current in uA, voltage in uV, power in mW."""

    name: str = ""
    current: float = 0.0
    voltage: float = 0.0
    power: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "current": self.current,
            "voltage": self.voltage,
            "power": self.power,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PowerRail":
        return cls(
            name=str(data["name"]),
            current=float(data["current"]),
            voltage=float(data["voltage"]),
            power=float(data["power"]),
        )


@dataclass
class PowerStats:
    """Total power in watts and the rails it was summed from."""

    total: float = 0.0
    rails: list[PowerRail] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"total": self.total, "rails": [rail.to_dict() for rail in self.rails]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PowerStats":
        return cls(
            total=float(data["total"]),
            rails=[PowerRail.from_dict(item) for item in data["rails"]],
        )

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, text: str) -> "PowerStats":
        return cls.from_dict(json.loads(text))


def total_power(rails: Iterable[PowerRail]) -> float:
    """Sum rail power (mW) and return watts."""
    return sum(rail.power for rail in rails) / 1000.0


def _read_text(path: Path) -> Optional[str]:
    try:
        return path.read_text()
    except (OSError, UnicodeDecodeError):
        return None


def _read_sysfs_u32(path: Path, filename: str) -> Optional[int]:
    text = _read_text(path / filename)
    if text is None:
        return None
    text = text.strip()
    if text.startswith("+"):
        text = text[1:]
    if not text or not (text.isascii() and text.isdigit()):
        return None
    value = int(text)
    return value if value <= _U32_MAX else None


def read_ina3221_rail(iio_path: PathLike, rail_num: int) -> Optional[PowerRail]:
    """Read one INA3221 channel from an IIO device directory, or None."""
    iio_path = Path(iio_path)
    label = _read_text(iio_path / f"in{rail_num}_label")
    if label is not None:
        rail_name = label.strip()
    else:
        device_name = _read_text(iio_path / "name")
        if device_name is not None and "ina3221" in device_name:
            rail_name = f"in{rail_num}"
        else:
            rail_name = ""

    if not rail_name:
        return None

    current_ua = float(_read_sysfs_u32(iio_path, f"curr{rail_num}_input") or 0)
    voltage_uv = float(_read_sysfs_u32(iio_path, f"in{rail_num}_input") or 0)
    power_mw = current_ua * voltage_uv / 1_000_000.0

    return PowerRail(name=rail_name, current=current_ua, voltage=voltage_uv, power=power_mw)


def read_power_rails(base_path: PathLike) -> list[PowerRail]:
    """Read the first channel of every ``iio:device*`` entry under base_path."""
    base_path = Path(base_path)
    try:
        entries = sorted(base_path.iterdir())
    except OSError:
        return []

    rails = []
    for entry in entries:
        if not entry.name.startswith("iio:device"):
            continue
        rail = read_ina3221_rail(entry, 0)
        if rail is not None:
            rails.append(rail)
    return rails


def read_power_stats(base_path: PathLike = DEFAULT_I2C_PATH) -> PowerStats:
    """Collect power statistics; empty stats when the sysfs tree is absent."""
    base_path = Path(base_path)
    if not base_path.exists():
        return PowerStats()
    rails = read_power_rails(base_path)
    return PowerStats(total=total_power(rails), rails=rails)