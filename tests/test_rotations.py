"""Unit tests for classes representing 3D rotations and orientations."""

import numpy as np
import pytest
from hypothesis import given

from task_constructor_utils.geometry import Point3D
from task_constructor_utils.spatial import Pose3D, Quaternion

from .strategies.spatial_strategies import quaternions


@given(quaternions())
def test_quaternion_to_euler_rpy_and_back(quat: Quaternion) -> None:
    """Verify that any Quaternion is unchanged after converting to and from Euler angles."""
    # Arrange/Act - Given a unit quaternion, convert to and from Euler RPY angles
    euler_rpy = quat.to_euler_rpy()
    result_quat = euler_rpy.to_quaternion()

    # Assert - Expect that the resulting quaternion equals the original (modulo negation)
    assert quat.approx_equal(result_quat, rtol=1e-05, atol=1e-07)


@given(quaternions())
def test_quaternion_to_homogeneous_matrix_and_back(quat: Quaternion) -> None:
    """Verify that a Quaternion is unchanged after converting to and from a homogeneous matrix."""
    # Arrange/Act - Given a unit quaternion, convert to and from a homogeneous matrix
    matrix = quat.to_homogeneous_matrix()
    result_quat = Quaternion.from_homogeneous_matrix(matrix)

    # Assert - Expect that the resulting quaternion equals the original (modulo negation)
    assert quat.approx_equal(result_quat)


def test_zero_quaternion_raises_error() -> None:
    """Verify that attempting to construct an all-zero Quaternion raises a ValueError."""
    # Arrange/Act/Assert - Expect that constructing an all-zero Quaternion will raise an error
    with pytest.raises(ValueError, match="zero"):
        _ = Quaternion(0.0, 0.0, 0.0, 0.0)


def test_quaternion_from_axis_angle() -> None:
    """Verify that a quarter turn about z maps the x-axis onto the y-axis."""
    # Arrange
    quarter_turn = Quaternion.from_axis_angle(np.array([0.0, 0.0, 1.0]), np.pi / 2)

    # Act
    rotated = Pose3D(Point3D.identity(), quarter_turn) @ Point3D(1.0, 0.0, 0.0)

    # Assert
    assert rotated.approx_equal(Point3D(0.0, 1.0, 0.0), atol=1e-9)
