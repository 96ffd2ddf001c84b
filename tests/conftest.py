"""Shared fixtures and geometry checks for the container loading tests."""

import math

import pytest

from container_loader.models.cargo import CargoSpec
from container_loader.models.container import Container

TOLERANCE = 1e-6


@pytest.fixture
def container_20gp():
    """20' standard container."""
    return Container(length=5898, width=2352, height=2393, max_weight=28200, name="20GP", container_id="20gp")


@pytest.fixture
def small_container():
    """1.2 m x 1.0 m x 0.8 m crate with a 500 kg payload."""
    return Container(length=1200, width=1000, height=800, max_weight=500, name="Crate")


@pytest.fixture
def mixed_specs():
    """Twenty-eight units of mixed shape, weight and rotation permission."""
    return [
        CargoSpec("A", 400, 300, 200, weight=12, quantity=6, allow_rotation=False),
        CargoSpec("B", 300, 300, 300, weight=8, quantity=5, allow_rotation=True),
        CargoSpec("C", 500, 200, 250, weight=20, quantity=4, allow_rotation=True),
        CargoSpec("D", 250, 250, 100, weight=3, quantity=10, allow_rotation=False),
        CargoSpec("E", 600, 450, 350, weight=12, quantity=3, allow_rotation=True),
    ]


def corner_of(item, container):
    """Bottom corner (x along length, y along height, z along width) of a placed item."""
    x, y, z = item.position
    return (
        x + container.length / 2 - item.length / 2,
        y + container.height / 2 - item.height / 2,
        z + container.width / 2 - item.width / 2,
    )


def bounds_of(item, container):
    x, y, z = corner_of(item, container)
    assert all(math.isfinite(value) for value in (x, y, z, item.length, item.width, item.height)), (
        f"{item.instance_id} has non-finite geometry"
    )
    return (
        (x, x + item.length),
        (y, y + item.height),
        (z, z + item.width),
    )


def assert_no_overlaps(result, container):
    boxes = [bounds_of(item, container) for item in result.placed_items]
    for i in range(len(boxes)):
        for j in range(i + 1, len(boxes)):
            overlapping = all(
                boxes[i][axis][0] < boxes[j][axis][1] - TOLERANCE
                and boxes[j][axis][0] < boxes[i][axis][1] - TOLERANCE
                for axis in range(3)
            )
            assert not overlapping, (
                f"{result.placed_items[i].instance_id} overlaps {result.placed_items[j].instance_id}"
            )


def assert_within_container(result, container):
    limits = (container.length, container.height, container.width)
    for item in result.placed_items:
        for axis, (low, high) in enumerate(bounds_of(item, container)):
            assert low >= -TOLERANCE, f"{item.instance_id} below 0 on axis {axis}"
            assert high <= limits[axis] + TOLERANCE, f"{item.instance_id} beyond wall on axis {axis}"
