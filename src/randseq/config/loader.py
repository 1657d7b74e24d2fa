"""Load generation parameters from YAML/JSON and merge overrides over defaults."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

import yaml

from .schema import GenerationParams

logger = logging.getLogger(__name__)

KEY_ALIASES = {"isUnique": "is_unique"}


class ConfigLoadError(ValueError):
    """Raised when config cannot be loaded or parsed."""


def _load_yaml(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as file:
        parsed = yaml.safe_load(file)

    return {} if parsed is None else parsed


def _load_json(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as file:
        return json.load(file)


READERS: dict[str, Callable[[Path], Any]] = {
    ".yaml": _load_yaml,
    ".yml": _load_yaml,
    ".json": _load_json,
}


def read_config_file(path: str | Path) -> dict[str, Any]:
    """Parse a parameter file into a plain mapping with canonical key names."""
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    suffix = config_path.suffix.lower()
    reader = READERS.get(suffix)
    if reader is None:
        raise ConfigLoadError(
            f"Unsupported config format '{suffix}'. Use .yaml/.yml or .json."
        )

    data = reader(config_path)
    if not isinstance(data, dict):
        raise ConfigLoadError("Config root must be a JSON/YAML object.")

    return {KEY_ALIASES.get(str(key), str(key)): value for key, value in data.items()}


def load_config(path: str | Path) -> GenerationParams:
    """Load a parameter file; keys it leaves out keep their defaults."""
    return GenerationParams.model_validate(read_config_file(path))


def resolve_params(
    overrides: Mapping[str, Any] | None = None,
    *,
    base: GenerationParams | None = None,
) -> GenerationParams:
    """Merge ``overrides`` over ``base`` (defaults when omitted).

    Keys whose value is None are treated as unset. Each key's source is logged:
    overrides, the config ``base`` if it set the key explicitly, else defaults.
    """
    from_config = base.model_fields_set if base is not None else set()
    resolved = (base or GenerationParams()).model_dump()
    supplied = {
        KEY_ALIASES.get(key, key): value
        for key, value in (overrides or {}).items()
        if value is not None
    }

    for key in GenerationParams.model_fields:
        if key in supplied:
            logger.info("Using %s from overrides.", key)
            resolved[key] = supplied.pop(key)
        elif key in from_config:
            logger.info("Using %s from config.", key)
        else:
            logger.info("Using %s from defaults.", key)

    # Leftover keys are unknown; let the schema reject them.
    resolved.update(supplied)
    return GenerationParams.model_validate(resolved)
