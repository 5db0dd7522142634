"""Define a class to represent rigid transforms between 3D coordinate frames."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Tuple, TypeVar

import numpy as np

from task_constructor_utils.geometry import Point3D
from task_constructor_utils.spatial.frames import DEFAULT_FRAME
from task_constructor_utils.spatial.rotations import EulerRPY, Quaternion

MultiplyT = TypeVar("MultiplyT", "Pose3D", Point3D)

XYZ_RPY = Tuple[float, float, float, float, float, float]
"""A 6-tuple of (x, y, z, roll, pitch, yaw) values."""


@dataclass(frozen=True)
class Pose3D:
    """A rigid transform: the position and orientation of a frame relative to `ref_frame`."""

    position: Point3D
    orientation: Quaternion
    ref_frame: str = DEFAULT_FRAME

    def __matmul__(self, other: MultiplyT) -> MultiplyT:
        """Chain this transform with a pose (pose_A_B @ pose_B_C = pose_A_C) or apply it to a point.

        The composed pose takes the "left-side" reference frame.

        :param other: 3D pose or 3D point right-multiplied with this pose
        :return: Result from the matrix multiplication
        """
        if isinstance(other, Pose3D):
            product = self.to_homogeneous_matrix() @ other.to_homogeneous_matrix()
            return Pose3D.from_homogeneous_matrix(product, self.ref_frame)
        if isinstance(other, Point3D):
            result = self.to_homogeneous_matrix() @ other.to_homogeneous_coordinate()
            return Point3D.from_homogeneous_coordinate(result)

        raise NotImplementedError(f"Cannot matrix-multiply Pose3D with: {other}")

    def __str__(self) -> str:
        """Return a human-readable string representation of the Pose3D."""
        xyz_rpy = ", ".join(f"{value:.3f}" for value in self.to_xyz_rpy())
        return f'Pose3D([{xyz_rpy}], ref_frame="{self.ref_frame}")'

    @classmethod
    def identity(cls, ref_frame: str = DEFAULT_FRAME) -> Pose3D:
        """Construct a Pose3D corresponding to the identity transformation."""
        return Pose3D(Point3D.identity(), Quaternion.identity(), ref_frame)

    @classmethod
    def from_translation(cls, translation: Point3D, ref_frame: str = DEFAULT_FRAME) -> Pose3D:
        """Construct a pure translation (identity rotation) relative to the given frame."""
        return Pose3D(translation, Quaternion.identity(), ref_frame)

    @classmethod
    def from_xyz_rpy(
        cls,
        x: float = 0.0,
        y: float = 0.0,
        z: float = 0.0,
        roll_rad: float = 0.0,
        pitch_rad: float = 0.0,
        yaw_rad: float = 0.0,
        ref_frame: str = DEFAULT_FRAME,
    ) -> Pose3D:
        """Construct a Pose3D from the given XYZ coordinates and fixed-frame Euler RPY angles."""
        position = Point3D(x, y, z)
        orientation = EulerRPY(roll_rad, pitch_rad, yaw_rad).to_quaternion()

        return Pose3D(position, orientation, ref_frame)

    def to_xyz_rpy(self) -> XYZ_RPY:
        """Convert the pose into a tuple of its (x, y, z, roll, pitch, yaw) values."""
        return (*self.position.to_tuple(), *self.orientation.to_euler_rpy().to_tuple())

    @classmethod
    def from_sequence(cls, data: XYZ_RPY | list[float], ref_frame: str = DEFAULT_FRAME) -> Pose3D:
        """Construct a Pose3D from a sequence of six (x, y, z, roll, pitch, yaw) values."""
        if len(data) != 6:
            raise ValueError(f"Cannot construct Pose3D from sequence of length {len(data)}.")
        x, y, z, roll, pitch, yaw = data
        return Pose3D.from_xyz_rpy(x, y, z, roll, pitch, yaw, ref_frame)

    @classmethod
    def from_homogeneous_matrix(cls, matrix: np.ndarray, ref_frame: str = DEFAULT_FRAME) -> Pose3D:
        """Construct a Pose3D from a 4x4 homogeneous transformation matrix."""
        if matrix.shape != (4, 4):
            raise ValueError(f"Expected a 4x4 matrix but received shape {matrix.shape}")

        position = Point3D(float(matrix[0, 3]), float(matrix[1, 3]), float(matrix[2, 3]))
        orientation = Quaternion.from_homogeneous_matrix(matrix)
        return Pose3D(position, orientation, ref_frame)

    def to_homogeneous_matrix(self) -> np.ndarray:
        """Convert the Pose3D into a 4x4 homogeneous transformation matrix."""
        matrix = self.orientation.to_homogeneous_matrix()
        matrix[:3, 3] = self.position.to_array()
        return matrix

    @classmethod
    def from_yaml_data(cls, pose_data: dict | list, default_frame: str = DEFAULT_FRAME) -> Pose3D:
        """Construct a Pose3D from an `xyz_rpy` list, or a dict with `xyz_rpy` and `frame` keys.

        :raises TypeError: If the given YAML data has an unsupported type
        """
        if isinstance(pose_data, dict):
            xyz_rpy = pose_data["xyz_rpy"]
            ref_frame = pose_data.get("frame", default_frame)
        elif isinstance(pose_data, list):
            xyz_rpy = pose_data
            ref_frame = default_frame
        else:
            raise TypeError(f"Cannot load Pose3D from YAML data of type {type(pose_data)}")

        return Pose3D.from_sequence(xyz_rpy, ref_frame)

    def with_ref_frame(self, ref_frame: str) -> Pose3D:
        """Return the same transform relabeled as relative to the given frame."""
        return replace(self, ref_frame=ref_frame)

    def inverse(self, pose_frame: str) -> Pose3D:
        """Return a pose representing the inverse transformation of this pose.

        :param pose_frame: Name of the frame represented by this pose (the inverse's reference)
        """
        inverse_matrix = np.linalg.inv(self.to_homogeneous_matrix())
        return Pose3D.from_homogeneous_matrix(inverse_matrix, pose_frame)

    def approx_equal(self, other: Pose3D, rtol: float = 1e-05, atol: float = 1e-08) -> bool:
        """Evaluate whether another Pose3D is approximately equal to this one."""
        return (
            self.ref_frame == other.ref_frame
            and self.position.approx_equal(other.position, rtol=rtol, atol=atol)
            and self.orientation.approx_equal(other.orientation, rtol=rtol, atol=atol)
        )
