"""Define utility functions for loading robot descriptions and settings from YAML files."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from task_constructor_utils.io.logging import log_debug


def load_yaml_data(yaml_path: Path | str, required_keys: set[str] | None = None) -> Any:
    """Load data from a YAML file into Python data structures.

    :param yaml_path: Path to the YAML file to be imported
    :param required_keys: Keys required at the top level of the loaded mapping (if None, ignored)
    :return: Dictionary mapping strings to values, or a list of dictionaries, etc.
    :raises FileNotFoundError: If the file doesn't exist
    :raises RuntimeError: If the file isn't valid YAML
    :raises TypeError: If keys are required but the file doesn't hold a mapping
    :raises KeyError: If any required key is missing in the loaded data
    """
    yaml_path = Path(yaml_path)
    if not yaml_path.exists():
        raise FileNotFoundError(f"Cannot load data from nonexistent YAML file: {yaml_path}")

    try:
        with yaml_path.open() as yaml_file:
            yaml_data = yaml.safe_load(yaml_file)
    except yaml.YAMLError as error:
        raise RuntimeError(f"Failed to load from YAML file: {yaml_path}") from error

    if required_keys:
        if not isinstance(yaml_data, dict):
            raise TypeError(f"Expected a mapping in {yaml_path}, got {type(yaml_data).__name__}")
        missing = sorted(required_keys - yaml_data.keys())
        if missing:
            raise KeyError(f"Required keys {missing} were missing in data loaded from {yaml_path}")

    log_debug(f"Loaded YAML data from {yaml_path}.")
    return yaml_data
