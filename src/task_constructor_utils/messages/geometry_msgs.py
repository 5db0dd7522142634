"""Define dataclasses mirroring the geometry_msgs message schemas."""

from __future__ import annotations

from dataclasses import dataclass, field

from task_constructor_utils.messages.std_msgs import Header


@dataclass
class PointMsg:
    """Mirror of geometry_msgs/Point."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass
class Vector3Msg:
    """Mirror of geometry_msgs/Vector3."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass
class QuaternionMsg:
    """Mirror of geometry_msgs/Quaternion (defaults to the identity rotation)."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0


@dataclass
class PoseMsg:
    """Mirror of geometry_msgs/Pose."""

    position: PointMsg = field(default_factory=PointMsg)
    orientation: QuaternionMsg = field(default_factory=QuaternionMsg)


@dataclass
class PoseStamped:
    """Mirror of geometry_msgs/PoseStamped: a pose expressed relative to `header.frame_id`."""

    header: Header = field(default_factory=Header)
    pose: PoseMsg = field(default_factory=PoseMsg)
