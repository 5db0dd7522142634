"""Define functions to convert between spatial data structures and message dataclasses."""

from __future__ import annotations

from task_constructor_utils.geometry import Point3D
from task_constructor_utils.messages.geometry_msgs import (
    PointMsg,
    PoseMsg,
    PoseStamped,
    QuaternionMsg,
)
from task_constructor_utils.messages.std_msgs import Header
from task_constructor_utils.spatial import DEFAULT_FRAME, Pose3D, Quaternion


def point_to_msg(point: Point3D) -> PointMsg:
    """Convert the given point into a geometry_msgs/Point message."""
    return PointMsg(point.x, point.y, point.z)


def point_from_msg(point_msg: PointMsg) -> Point3D:
    """Construct a Point3D from a geometry_msgs/Point message."""
    return Point3D(point_msg.x, point_msg.y, point_msg.z)


def quaternion_to_msg(q: Quaternion) -> QuaternionMsg:
    """Convert the given quaternion into a geometry_msgs/Quaternion message."""
    return QuaternionMsg(q.x, q.y, q.z, q.w)


def quaternion_from_msg(q_msg: QuaternionMsg) -> Quaternion:
    """Construct a Quaternion from a geometry_msgs/Quaternion message."""
    return Quaternion(q_msg.x, q_msg.y, q_msg.z, q_msg.w)


def pose_to_msg(pose: Pose3D) -> PoseMsg:
    """Convert the given pose into a geometry_msgs/Pose message (dropping its frame)."""
    return PoseMsg(point_to_msg(pose.position), quaternion_to_msg(pose.orientation))


def pose_to_stamped_msg(pose: Pose3D) -> PoseStamped:
    """Convert the given pose into a geometry_msgs/PoseStamped message."""
    return PoseStamped(header=Header(frame_id=pose.ref_frame), pose=pose_to_msg(pose))


def pose_from_msg(pose_msg: PoseMsg | PoseStamped) -> Pose3D:
    """Construct a Pose3D from a geometry_msgs/Pose or geometry_msgs/PoseStamped message.

    :param pose_msg: Message representing a pose or time-stamped pose
    :return: Constructed Pose3D instance
    :raises TypeError: If the given message is neither a geometry_msgs/Pose nor PoseStamped
    """
    if isinstance(pose_msg, PoseMsg):
        frame_id = DEFAULT_FRAME
        pose = pose_msg
    elif isinstance(pose_msg, PoseStamped):
        frame_id = pose_msg.header.frame_id
        pose = pose_msg.pose  # Extract just the Pose from the PoseStamped
    else:
        raise TypeError(f"Received unexpected message type: {type(pose_msg)}")

    return Pose3D(point_from_msg(pose.position), quaternion_from_msg(pose.orientation), frame_id)
