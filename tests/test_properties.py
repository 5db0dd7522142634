"""Unit tests for configuration properties that may be empty."""

import pytest

from task_constructor_utils import Property, PropertyTypeError
from task_constructor_utils.messages import PoseMsg, PoseStamped


def test_new_property_is_empty() -> None:
    """Verify that a property without a value or default is not defined."""
    # Arrange/Act
    ik_frame = Property(PoseStamped, "frame to be placed at the IK target")

    # Assert
    assert not ik_frame.defined()
    assert ik_frame.value is None
    assert ik_frame.description == "frame to be placed at the IK target"


def test_value_overrides_default_until_reset() -> None:
    """Verify that a set value hides the default, which returns once the value is reset."""
    # Arrange
    default_msg = PoseStamped()
    value_msg = PoseStamped(pose=PoseMsg())
    ik_frame = Property(PoseStamped, default=default_msg)

    # Act/Assert
    ik_frame.set_value(value_msg)
    assert ik_frame.value is value_msg

    ik_frame.reset()
    assert ik_frame.value is default_msg
    assert ik_frame.defined()


def test_typed_property_rejects_other_types() -> None:
    """Verify that a typed property refuses values and defaults of another type."""
    # Arrange
    ik_frame = Property(PoseStamped)

    # Act/Assert
    with pytest.raises(PropertyTypeError):
        ik_frame.set_value(PoseMsg())
    with pytest.raises(PropertyTypeError):
        ik_frame.set_default("base_link")
    assert not ik_frame.defined()


def test_value_as_decodes_expected_type() -> None:
    """Verify that a value is decoded only as the type it holds."""
    # Arrange
    pose_msg = PoseMsg()
    untyped = Property()
    untyped.set_value(pose_msg)

    # Act/Assert
    assert untyped.value_as(PoseMsg) is pose_msg
    with pytest.raises(PropertyTypeError, match="PoseStamped"):
        untyped.value_as(PoseStamped)


def test_value_as_rejects_empty_property() -> None:
    """Verify that decoding an empty property is a contract violation."""
    # Act/Assert
    with pytest.raises(PropertyTypeError):
        Property(PoseStamped).value_as(PoseStamped)


def test_property_type_error_is_a_type_error() -> None:
    """Verify that property type errors can be handled as ordinary TypeErrors."""
    assert issubclass(PropertyTypeError, TypeError)
