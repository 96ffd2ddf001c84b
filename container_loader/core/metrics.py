"""
Utilisation and centre-of-gravity metrics for a finished placement set.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from container_loader.core.utils_geometry import Point

if TYPE_CHECKING:
    from container_loader.core.solver_cargo_to_container import PlacedItem


def volume_utilization(used_volume: float, container_volume: float) -> float:
    """
    Simple volume utilisation metric expressed as a percentage (0.0 - 100.0).
    """
    if container_volume <= 0:
        return 0.0
    return float(used_volume) / float(container_volume) * 100.0


def weight_utilization(total_weight: float, max_weight: float) -> float:
    """
    Loaded weight as a percentage of capacity.

    Not clamped: the admission check keeps it at or below 100 for engine
    output, but the formula reports inconsistent inputs as they are.
    """
    if max_weight <= 0:
        return 0.0
    return float(total_weight) / float(max_weight) * 100.0


def center_of_gravity(placed: Sequence["PlacedItem"]) -> Point:
    """Weight-averaged centre of the placed boxes in the centred frame."""
    total_weight = sum(item.weight for item in placed)
    if total_weight <= 0:
        return 0.0, 0.0, 0.0

    moments = [0.0, 0.0, 0.0]
    for item in placed:
        for axis in range(3):
            moments[axis] += item.weight * item.position[axis]
    return (
        moments[0] / total_weight,
        moments[1] / total_weight,
        moments[2] / total_weight,
    )
