"""Output model: resolved colors and the appearance set."""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class Platform(StrEnum):
    """Platform a color is restricted to, taken from the style description."""

    IOS = "ios"
    ANDROID = "android"

    @classmethod
    def from_description(cls, description: str) -> Platform | None:
        try:
            return cls(description)
        except ValueError:
            return None


@dataclass(frozen=True)
class Color:
    """A named color with normalized components."""

    name: str
    red: float
    green: float
    blue: float
    alpha: float = 1.0
    platform: Platform | None = None

    @property
    def hex(self) -> str:
        """``#RRGGBBAA`` representation."""
        channels = (self.red, self.green, self.blue, self.alpha)
        return "#" + "".join(f"{round(max(0.0, min(1.0, c)) * 255):02X}" for c in channels)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "platform": self.platform.value if self.platform else None,
            "red": self.red,
            "green": self.green,
            "blue": self.blue,
            "alpha": self.alpha,
            "hex": self.hex,
        }


@dataclass(frozen=True)
class AppearanceSet:
    """Colors per appearance. None means the appearance is not configured."""

    light: list[Color]
    dark: list[Color] | None = None
    light_hc: list[Color] | None = None
    dark_hc: list[Color] | None = None

    def to_dict(self) -> dict[str, Any]:
        def dump(colors: list[Color] | None) -> list[dict[str, Any]] | None:
            return None if colors is None else [c.to_dict() for c in colors]

        return {
            "light": dump(self.light),
            "dark": dump(self.dark),
            "light_hc": dump(self.light_hc),
            "dark_hc": dump(self.dark_hc),
        }
