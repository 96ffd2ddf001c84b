"""
Data model for cargo specifications and the individual units derived from them.

Dimensions are expressed in millimetres (mm) and weight in kilograms (kg).
Unlike :class:`~container_loader.models.container.Container`, a ``CargoSpec``
never raises on construction: degenerate values are reported through
:meth:`CargoSpec.defects` so the engine can route the affected units to the
unplaced list instead of aborting the whole run.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from numbers import Integral, Real
from typing import Any, Dict, List, Optional, Tuple


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value)


def _optional_float(value: Any) -> Optional[float]:
    if value is None or value == "":
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _optional_quantity(value: Any) -> Optional[int | float]:
    number = _optional_float(value)
    if number is None or not math.isfinite(number):
        return number
    # Integral floats (e.g. 12.0 from a spreadsheet cell) are accepted as counts.
    return int(number) if number.is_integer() else number


TRUE_STRINGS = {"true", "yes", "y", "1"}


def _flag(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in TRUE_STRINGS
    return bool(value)


@dataclass(frozen=True)
class CargoSpec:
    """A class of identical physical items requested for loading."""

    group_id: str
    length: Optional[float]
    width: Optional[float]
    height: Optional[float]
    weight: Optional[float]  # kg per unit
    quantity: Optional[int] = field(default=1)
    allow_rotation: bool = field(default=False)
    name: str = field(default="Cargo")
    color: Optional[str] = field(default=None)

    @property
    def dimensions(self) -> Tuple[Optional[float], Optional[float], Optional[float]]:
        """Expose dimensions as an (L, W, H) tuple."""
        return self.length, self.width, self.height

    @property
    def volume(self) -> float:
        """Return the cubic volume of a single unit in mm^3 (0.0 when undefined)."""
        if not all(_is_number(value) for value in self.dimensions):
            return 0.0
        return self.length * self.width * self.height

    def quantity_is_valid(self) -> bool:
        return (
            isinstance(self.quantity, Integral)
            and not isinstance(self.quantity, bool)
            and self.quantity >= 0
        )

    def defects(self) -> List[str]:
        """
        Return a list of human readable problems; empty when the spec is loadable.
        """
        problems: List[str] = []
        for axis in ("length", "width", "height"):
            value = getattr(self, axis)
            if not _is_number(value) or value <= 0:
                problems.append(f"{axis} must be a positive number, got {value!r}")
        if not _is_number(self.weight) or self.weight < 0:
            problems.append(f"weight must be a non-negative number, got {self.weight!r}")
        if not self.quantity_is_valid():
            problems.append(f"quantity must be a non-negative integer, got {self.quantity!r}")
        return problems

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the spec for reporting."""
        return {
            "id": self.group_id,
            "name": self.name,
            "length": self.length,
            "width": self.width,
            "height": self.height,
            "weight": self.weight,
            "quantity": self.quantity,
            "allow_rotation": self.allow_rotation,
            "color": self.color,
        }

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "CargoSpec":
        """Instantiate from a raw configuration or table row; missing values stay ``None``."""
        color = payload.get("color")
        return cls(
            group_id=str(payload.get("id", "")),
            name=str(payload.get("name") or "Cargo"),
            length=_optional_float(payload.get("length")),
            width=_optional_float(payload.get("width")),
            height=_optional_float(payload.get("height")),
            weight=_optional_float(payload.get("weight")),
            quantity=_optional_quantity(payload.get("quantity")),
            allow_rotation=_flag(payload.get("allow_rotation", False)),
            color=str(color) if color else None,
        )


@dataclass(frozen=True)
class PackableInstance:
    """One physical unit of a :class:`CargoSpec`, alive for a single packing run."""

    group_id: str
    instance_index: int
    length: Optional[float]
    width: Optional[float]
    height: Optional[float]
    weight: Optional[float]
    allow_rotation: bool
    name: str
    color: Optional[str]
    input_order: int

    @property
    def instance_id(self) -> str:
        return f"{self.group_id}-{self.instance_index}"

    @property
    def dimensions(self) -> Tuple[Optional[float], Optional[float], Optional[float]]:
        return self.length, self.width, self.height

    @property
    def volume(self) -> float:
        if not all(_is_number(value) for value in self.dimensions):
            return 0.0
        return self.length * self.width * self.height

    @classmethod
    def from_spec(cls, spec: CargoSpec, instance_index: int, input_order: int) -> "PackableInstance":
        return cls(
            group_id=spec.group_id,
            instance_index=instance_index,
            length=spec.length,
            width=spec.width,
            height=spec.height,
            weight=spec.weight,
            allow_rotation=spec.allow_rotation,
            name=spec.name,
            color=spec.color,
            input_order=input_order,
        )
