"""
Explosion of cargo specifications into individually tracked units and their
placement priority.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

from container_loader.models.cargo import CargoSpec, PackableInstance


def expand_instances(specs: Sequence[CargoSpec]) -> List[Tuple[PackableInstance, List[str]]]:
    """
    Yield one instance per unit of quantity, paired with the defects of its spec.

    A spec whose quantity is itself unusable contributes a single instance
    (index 0) so that it still surfaces in the unplaced output.
    """
    expanded: List[Tuple[PackableInstance, List[str]]] = []
    for input_order, spec in enumerate(specs):
        defects = spec.defects()
        count = spec.quantity if spec.quantity_is_valid() else 1
        for index in range(count):
            expanded.append((PackableInstance.from_spec(spec, index, input_order), defects))
    return expanded


def partition_instances(
    specs: Sequence[CargoSpec],
) -> Tuple[List[PackableInstance], List[PackableInstance]]:
    """Split expanded instances into (loadable, invalid), both in expansion order."""
    valid: List[PackableInstance] = []
    invalid: List[PackableInstance] = []
    for instance, defects in expand_instances(specs):
        (invalid if defects else valid).append(instance)
    return valid, invalid


def placement_priority(instance: PackableInstance) -> Tuple[float, float, float, int, int]:
    return (
        -instance.weight,
        -instance.height,
        -instance.volume,
        instance.input_order,
        instance.instance_index,
    )


def sort_instances(instances: Iterable[PackableInstance]) -> List[PackableInstance]:
    """
    Heaviest first, then tallest, then largest volume.

    Units that tie on all three fall back to input order: spec position, then
    instance index.
    """
    return sorted(instances, key=placement_priority)
