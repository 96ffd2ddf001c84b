"""
Candidate insertion points for the greedy placement loop.
"""

from __future__ import annotations

from typing import List

from container_loader.core.utils_geometry import Orientation, Point


ORIGIN: Point = (0.0, 0.0, 0.0)


def anchor_sort_key(anchor: Point) -> tuple[float, float, float]:
    """Floor-up first (y), then along the length (x), then across the width (z)."""
    x, y, z = anchor
    return y, x, z


class AnchorPool:
    """
    Working set of anchors for one packing run, seeded with the container origin.

    Duplicates are never removed; a repeated anchor simply fails validation
    again.
    """

    def __init__(self) -> None:
        self._anchors: List[Point] = [ORIGIN]

    def __len__(self) -> int:
        return len(self._anchors)

    def ordered(self) -> List[Point]:
        """Sort the pool in place and return a snapshot in priority order."""
        self._anchors.sort(key=anchor_sort_key)
        return list(self._anchors)

    def consume(self, anchor: Point, dims: Orientation, gap: float = 0.0) -> None:
        """
        Replace ``anchor`` with the three corners exposed by a box placed on it.
        """
        x, y, z = anchor
        l, w, h = dims
        self._anchors.extend(
            [
                (x, y + h + gap, z),  # on top
                (x + l + gap, y, z),  # beside, along length
                (x, y, z + w + gap),  # in front, along width
            ]
        )
        self._anchors.remove(anchor)
