"""
Loading of the bundled container presets and default cargo list.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

from container_loader.models.cargo import CargoSpec
from container_loader.models.container import Container

CONFIG_DIR = Path(__file__).resolve().parent / "config"


def load_json_config(filename: str, config_dir: Path = CONFIG_DIR) -> Any:
    with open(config_dir / filename, "r", encoding="utf-8") as file:
        return json.load(file)


def load_container_presets(config_dir: Path = CONFIG_DIR) -> Dict[str, Container]:
    """Return the container presets keyed by their id, in file order."""
    payload = load_json_config("containers.json", config_dir)
    return {key: Container.from_dict(value) for key, value in payload.items()}


def load_default_cargo(config_dir: Path = CONFIG_DIR) -> List[CargoSpec]:
    payload = load_json_config("cargo.json", config_dir)
    return [CargoSpec.from_dict(row) for row in payload]
