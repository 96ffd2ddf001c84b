"""
Greedy anchor-point loading of cargo units into a single container.

Every unit is tried once, heaviest first, at the lowest available anchor that
accepts any of its orientations. There is no backtracking: a unit that is
rejected is never retried, even if a later placement would have left room for
it. The result is a reproducible heuristic layout, not an optimal packing.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from container_loader.core.anchors import AnchorPool
from container_loader.core.instances import partition_instances, sort_instances
from container_loader.core.metrics import center_of_gravity, volume_utilization, weight_utilization
from container_loader.core.utils_geometry import (
    Orientation,
    Point,
    center_from_corner,
    generate_orientations,
    is_valid_placement,
)
from container_loader.models.cargo import CargoSpec, PackableInstance
from container_loader.models.container import Container

logger = logging.getLogger(__name__)

REASON_INVALID_SPEC = "invalid_spec"
REASON_WEIGHT_LIMIT = "weight_limit"
REASON_NO_FIT = "no_fit"


@dataclass(frozen=True)
class PlacedItem:
    """A committed unit. ``position`` is the box centre in the centred container frame."""

    group_id: str
    instance_id: str
    name: str
    color: Optional[str]
    length: float
    width: float
    height: float
    weight: float
    position: Point
    step: int

    @property
    def dimensions(self) -> Orientation:
        return self.length, self.width, self.height

    @property
    def volume(self) -> float:
        return self.length * self.width * self.height

    def as_dict(self) -> dict:
        return {
            "id": self.instance_id,
            "group_id": self.group_id,
            "name": self.name,
            "color": self.color,
            "length": self.length,
            "width": self.width,
            "height": self.height,
            "weight": self.weight,
            "position": list(self.position),
            "step": self.step,
        }


@dataclass(frozen=True)
class UnplacedItem:
    instance: PackableInstance
    reason: str

    def as_dict(self) -> dict:
        instance = self.instance
        return {
            "id": instance.instance_id,
            "group_id": instance.group_id,
            "name": instance.name,
            "length": instance.length,
            "width": instance.width,
            "height": instance.height,
            "weight": instance.weight,
            "reason": self.reason,
        }


@dataclass
class PackResult:
    placed_items: List[PlacedItem]
    unplaced_items: List[UnplacedItem]
    volume_utilization_pct: float
    weight_utilization_pct: float
    placed_count: int
    total_weight: float
    center_of_gravity: Point = field(default=(0.0, 0.0, 0.0))

    def to_dict(self) -> dict:
        x, y, z = self.center_of_gravity
        return {
            "placed_items": [item.as_dict() for item in self.placed_items],
            "unplaced_items": [item.as_dict() for item in self.unplaced_items],
            "volume_utilization": self.volume_utilization_pct,
            "weight_utilization": self.weight_utilization_pct,
            "item_count": self.placed_count,
            "total_weight": self.total_weight,
            "center_of_gravity": {"x": x, "y": y, "z": z},
        }


def pack_cargo_into_container(
    container: Container,
    specs: Sequence[CargoSpec],
    gap: float = 0.0,
) -> PackResult:
    """
    Load ``specs`` into ``container`` and report the layout with its metrics.

    ``gap`` (mm) is added between a placed box and the anchors it spawns, so
    neighbours generated from it keep that clearance.
    """
    if gap is None or not math.isfinite(gap) or gap < 0:
        raise ValueError(f"gap cannot be negative, got {gap!r}")
    gap = float(gap)

    valid, invalid = partition_instances(specs)
    unplaced: List[UnplacedItem] = [UnplacedItem(instance, REASON_INVALID_SPEC) for instance in invalid]
    for instance in invalid:
        logger.warning("Rejected %s: invalid cargo specification", instance.instance_id)

    placed: List[PlacedItem] = []
    anchors = AnchorPool()
    total_weight = 0.0

    for instance in sort_instances(valid):
        if total_weight + instance.weight > container.max_weight:
            logger.debug(
                "Skipped %s: %.2f kg would exceed capacity %.2f kg",
                instance.instance_id,
                total_weight + instance.weight,
                container.max_weight,
            )
            unplaced.append(UnplacedItem(instance, REASON_WEIGHT_LIMIT))
            continue

        fit = _find_first_fit(instance, container, anchors, placed)
        if fit is None:
            logger.debug("No anchor accepts %s", instance.instance_id)
            unplaced.append(UnplacedItem(instance, REASON_NO_FIT))
            continue

        anchor, dims = fit
        placed.append(
            PlacedItem(
                group_id=instance.group_id,
                instance_id=instance.instance_id,
                name=instance.name,
                color=instance.color,
                length=dims[0],
                width=dims[1],
                height=dims[2],
                weight=float(instance.weight),
                position=center_from_corner(anchor, dims, container),
                step=len(placed) + 1,
            )
        )
        total_weight += instance.weight
        anchors.consume(anchor, dims, gap)
        logger.debug("Placed %s at %s as %s (step %d)", instance.instance_id, anchor, dims, len(placed))

    used_volume = sum(item.volume for item in placed)
    result = PackResult(
        placed_items=placed,
        unplaced_items=unplaced,
        volume_utilization_pct=volume_utilization(used_volume, container.volume),
        weight_utilization_pct=weight_utilization(total_weight, container.max_weight),
        placed_count=len(placed),
        total_weight=total_weight,
        center_of_gravity=center_of_gravity(placed),
    )
    logger.info(
        "Packed %d/%d units into %s (volume %.2f%%, weight %.2f%%)",
        result.placed_count,
        result.placed_count + len(unplaced),
        container.name,
        result.volume_utilization_pct,
        result.weight_utilization_pct,
    )
    return result


def _find_first_fit(
    instance: PackableInstance,
    container: Container,
    anchors: AnchorPool,
    placed: Sequence[PlacedItem],
) -> Optional[Tuple[Point, Orientation]]:
    """
    Return the first (anchor, orientation) that validates.

    Anchor priority dominates orientation priority: every orientation is tried
    at an anchor before moving to the next anchor.
    """
    orientations = generate_orientations(instance.dimensions, instance.allow_rotation)
    for anchor in anchors.ordered():
        for dims in orientations:
            if is_valid_placement(anchor, dims, container, placed):
                return anchor, dims
    return None
