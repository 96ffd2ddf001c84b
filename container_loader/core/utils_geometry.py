"""
Geometry helper utilities shared by the placement engine.

Frames
------
The engine works in the *uncentered* container frame: the origin sits at one
bottom corner, x runs along the container length, y along its height and z
along its width. Published positions use the *centred* frame instead: the
origin is the container's geometric centre and every position is the centre of
the box. Both frames use the same axis pairing:

    x <-> length,  y <-> height,  z <-> width

and convert with::

    position_axis = corner_axis + item_dim_axis / 2 - container_dim_axis / 2
    corner_axis   = position_axis + container_dim_axis / 2 - item_dim_axis / 2
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Sequence, Tuple

if TYPE_CHECKING:
    from container_loader.core.solver_cargo_to_container import PlacedItem
    from container_loader.models.container import Container


Orientation = Tuple[float, float, float]  # (length, width, height)
Point = Tuple[float, float, float]  # (x, y, z)

EPS = 1e-6


def generate_orientations(dimensions: Sequence[float], allow_rotation: bool) -> List[Orientation]:
    """
    Return the axis-aligned (length, width, height) triples to try, in priority order.

    The original orientation always comes first. With rotation allowed the
    remaining five permutations follow: spin on the floor, the two sideways
    lays, then the two upright stands. Equal dimensions produce duplicates,
    which only cost a repeated validation.
    """
    l, w, h = (float(value) for value in dimensions)
    orientations = [(l, w, h)]
    if allow_rotation:
        orientations.extend(
            [
                (w, l, h),
                (l, h, w),
                (h, l, w),
                (w, h, l),
                (h, w, l),
            ]
        )
    return orientations


def axis_extents(dims: Orientation) -> Point:
    """Map an (l, w, h) orientation onto (x, y, z) extents."""
    l, w, h = dims
    return l, h, w


def rects_overlap_1d(a_start: float, a_len: float, b_start: float, b_len: float) -> bool:
    """
    Determine if two segments on the same axis share interior length.

    Segments that only touch at an end point do not overlap.
    """
    return a_start < b_start + b_len - EPS and b_start < a_start + a_len - EPS


def boxes_overlap(
    a_origin: Point,
    a_dims: Orientation,
    b_origin: Point,
    b_dims: Orientation,
) -> bool:
    """
    Check whether two axis-aligned cuboids intersect in their interiors.

    Origins are bottom corners in the uncentered frame; dims are (l, w, h).
    """
    a_ext = axis_extents(a_dims)
    b_ext = axis_extents(b_dims)
    return all(
        rects_overlap_1d(a_origin[axis], a_ext[axis], b_origin[axis], b_ext[axis])
        for axis in range(3)
    )


def fits_within(anchor: Point, dims: Orientation, container: "Container") -> bool:
    """Check that the far edge of the box stays inside the container on every axis."""
    x, y, z = anchor
    l, w, h = dims
    return (
        x + l <= container.length
        and y + h <= container.height
        and z + w <= container.width
    )


def center_from_corner(corner: Point, dims: Orientation, container: "Container") -> Point:
    """Convert a bottom corner (uncentered frame) to a box centre (centred frame)."""
    l, w, h = dims
    return (
        corner[0] + l / 2 - container.length / 2,
        corner[1] + h / 2 - container.height / 2,
        corner[2] + w / 2 - container.width / 2,
    )


def corner_from_center(position: Point, dims: Orientation, container: "Container") -> Point:
    """
    Convert a box centre (centred frame) back to its bottom corner (uncentered frame).

    This is the public coordinate contract consumed by downstream reporting:
    ``corner_axis = position_axis + container_dim_axis / 2 - item_dim_axis / 2``.
    """
    l, w, h = dims
    return (
        position[0] + container.length / 2 - l / 2,
        position[1] + container.height / 2 - h / 2,
        position[2] + container.width / 2 - w / 2,
    )


def is_valid_placement(
    anchor: Point,
    dims: Orientation,
    container: "Container",
    placed: Sequence["PlacedItem"],
) -> bool:
    """
    Validate a candidate box against the container walls and every committed item.

    The overlap scan is linear in the number of placed items and dominates the
    run time; a spatial index would be the place to speed it up.
    """
    if not fits_within(anchor, dims, container):
        return False

    for item in placed:
        item_dims = item.dimensions
        item_corner = corner_from_center(item.position, item_dims, container)
        if boxes_overlap(anchor, dims, item_corner, item_dims):
            return False
    return True
