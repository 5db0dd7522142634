"""Unit tests for loading data from YAML files."""

from pathlib import Path

import pytest

from task_constructor_utils.io import load_yaml_data

YAML_DIR = Path(__file__).parent / "test_data/yaml"


def test_load_yaml_data_with_required_keys() -> None:
    """Verify that data is loaded when every required key is present."""
    # Act
    data = load_yaml_data(YAML_DIR / "test_arm.yaml", required_keys={"name", "root_link"})

    # Assert
    assert data["name"] == "test_arm"
    assert "shoulder_pan" in data["joints"]


def test_load_yaml_data_reports_missing_keys() -> None:
    """Verify that every missing required key is named in the raised KeyError."""
    # Act/Assert
    with pytest.raises(KeyError, match="'groups', 'robot'"):
        load_yaml_data(str(YAML_DIR / "collision_markers.yaml"), {"robot", "groups"})


def test_load_yaml_data_from_nonexistent_file() -> None:
    """Verify that loading from a nonexistent file raises a FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        load_yaml_data(YAML_DIR / "no_such_file.yaml")


def test_load_yaml_data_requires_mapping_for_keys(tmp_path: Path) -> None:
    """Verify that keys can only be required of YAML files holding a mapping."""
    # Arrange
    yaml_path = tmp_path / "points.yaml"
    yaml_path.write_text("- [0.0, 0.0, 0.0]\n- [1.0, 0.0, 0.0]\n")

    # Act/Assert
    with pytest.raises(TypeError, match="mapping"):
        load_yaml_data(yaml_path, required_keys={"points"})
    assert len(load_yaml_data(yaml_path)) == 2
