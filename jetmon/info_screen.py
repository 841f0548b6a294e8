"""Info screen: board, CPU and GPU information."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class SimpleBoardInfo:
    """Board model and software versions."""

    model: str = ""
    jetpack: str = ""
    l4t: str = ""


@dataclass
class InfoStats:
    """Everything the info screen displays."""

    board: SimpleBoardInfo
    cpu_cores: int
    cpu_governor: str
    gpu_name: str


class InfoScreen:
    """Holds hardware information and renders it as text lines."""

    def __init__(self) -> None:
        self.stats: Optional[InfoStats] = None

    def update(self, stats: InfoStats) -> None:
        self.stats = stats

    def render(self) -> list[str]:
        """Return the screen as lines of text."""
        if self.stats is None:
            return ["Info", "Loading..."]

        stats = self.stats
        return [
            "jetmon | Info",
            "Board Information",
            f"Model: {stats.board.model}",
            f"Jetpack: {stats.board.jetpack}",
            f"L4T: {stats.board.l4t}",
            "CPU Information",
            f"Cores: {stats.cpu_cores}",
            f"Governor: {stats.cpu_governor}",
            "GPU Information",
            f"Device: {stats.gpu_name}",
            "q: quit | 1-8: screens | h: help",
        ]