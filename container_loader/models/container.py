"""
Container model describing the fixed cargo space items are loaded into.

Dimensions are internal dimensions in millimetres (mm) and max weight is in
kilograms (kg). Values are validated eagerly so that an invalid container never
reaches the placement engine.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, Tuple


def _require_positive(name: str, value: float) -> float:
    if value is None or not math.isfinite(value) or value <= 0:
        raise ValueError(f"{name} must be a positive finite number, got {value!r}")
    return value


@dataclass(frozen=True)
class Container:
    """Immutable container used as the single bin for one packing run."""

    length: float
    width: float
    height: float
    max_weight: float  # kg
    name: str = field(default="Container")
    container_id: str = field(default="")

    def __post_init__(self) -> None:
        object.__setattr__(self, "length", float(_require_positive("length", self.length)))
        object.__setattr__(self, "width", float(_require_positive("width", self.width)))
        object.__setattr__(self, "height", float(_require_positive("height", self.height)))
        object.__setattr__(self, "max_weight", float(_require_positive("max_weight", self.max_weight)))

    @property
    def volume(self) -> float:
        """Return internal volume in mm^3."""
        return self.length * self.width * self.height

    @property
    def volume_m3(self) -> float:
        return self.volume / 1_000_000_000.0

    @property
    def dimensions(self) -> Tuple[float, float, float]:
        """Return inner dimensions (length, width, height)."""
        return self.length, self.width, self.height

    def to_dict(self) -> Dict[str, float | str]:
        return {
            "id": self.container_id,
            "name": self.name,
            "length": self.length,
            "width": self.width,
            "height": self.height,
            "max_weight": self.max_weight,
            "volume_m3": self.volume_m3,
        }

    @classmethod
    def from_dict(cls, payload: Dict[str, float | str]) -> "Container":
        """Instantiate from a raw configuration dictionary."""
        return cls(
            container_id=str(payload.get("id", "")),
            name=str(payload.get("name", "Container")),
            length=float(payload["length"]),
            width=float(payload["width"]),
            height=float(payload["height"]),
            max_weight=float(payload["max_weight"]),
        )
