"""Control screen: fan, clocks and power model settings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

_ITEM_LABELS = ("Fan Speed", "Jetson Clocks", "NVP Model")


@dataclass
class ControlStats:
    """Current state of the hardware controls."""

    fan_speed: int
    fan_mode: str
    jetson_clocks: bool
    jetson_clocks_status: str
    nvpmodel_id: int
    nvpmodel_name: str


class ControlScreen:
    """Hardware control list with a movable selection."""

    def __init__(self) -> None:
        self.stats: Optional[ControlStats] = None
        self.selected_item = 0

    def update(self, stats: ControlStats) -> None:
        self.stats = stats

    def _items(self, stats: ControlStats) -> list[str]:
        clocks = "ON" if stats.jetson_clocks else "OFF"
        return [
            f"Fan Speed: {stats.fan_speed}% ({stats.fan_mode})",
            f"Jetson Clocks: {clocks} ({stats.jetson_clocks_status})",
            f"NVP Model: {stats.nvpmodel_id} ({stats.nvpmodel_name})",
        ]

    def render(self) -> list[str]:
        """Return the screen as lines of text; the selected item is marked."""
        if self.stats is None:
            return ["Control", "Loading..."]

        lines = ["jetmon | Control", "Hardware Control"]
        lines.extend(
            (">> " if position == self.selected_item else "   ") + item
            for position, item in enumerate(self._items(self.stats))
        )
        lines.append("q: quit | ↑↓: navigate | Enter: select | 1-8: screens | h: help")
        return lines

    def handle_key(self, key: str) -> Optional[str]:
        """Handle "up", "down" or "enter"; return the selected label on enter."""
        name = key.lower()
        if name == "up":
            if self.selected_item > 0:
                self.selected_item -= 1
        elif name == "down":
            if self.selected_item < len(_ITEM_LABELS) - 1:
                self.selected_item += 1
        elif name == "enter":
            return self.select()
        return None

    def select(self) -> str:
        """Return the label of the currently selected control."""
        return _ITEM_LABELS[self.selected_item]