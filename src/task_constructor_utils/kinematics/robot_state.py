"""Define classes to represent the kinematic state of a robot and bodies attached to it."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, NamedTuple

from task_constructor_utils.spatial import Pose3D, normalize_frame_id

if TYPE_CHECKING:
    from task_constructor_utils.kinematics.robot_model import Link, RobotModel

Configuration = Dict[str, float]
"""A map from joint names to positions (rad or m)."""


@dataclass(frozen=True)
class AttachedBody:
    """An object rigidly attached to a robot link, e.g., an object held in a gripper."""

    name: str

    attach_link: str
    """Name of the link to which the body is attached; this link becomes the body's parent frame."""

    pose: Pose3D
    """Pose of the body relative to its attach link."""

    subframes: dict[str, Pose3D] = field(default_factory=dict)
    """Named frames on the body (e.g., a tool tip), each relative to the body's frame."""

    touch_links: frozenset[str] = frozenset()
    """Names of links permitted to touch the body without counting as a collision."""


class FrameInfo(NamedTuple):
    """The result of looking up a named frame in a robot state."""

    link: Link | None
    """Robot link the frame is rigidly connected to (None if no link was identified)."""

    found: bool
    """Whether the frame name was recognized."""

    transform: Pose3D
    """Global transform of the frame (identity if the frame wasn't found)."""


class RobotState:
    """A joint configuration of a robot model, plus any bodies attached to its links."""

    def __init__(self, robot_model: RobotModel, positions: Configuration | None = None) -> None:
        """Initialize the state with all actuated joints at zero, then apply the given positions."""
        self.robot_model = robot_model
        self.positions: Configuration = {name: 0.0 for name in robot_model.variable_names}
        self.attached_bodies: dict[str, AttachedBody] = {}

        if positions:
            self.set_joint_positions(positions)

    def __repr__(self) -> str:
        """Return a concise representation of the state's joint positions."""
        return f"RobotState({self.robot_model.name!r}, {self.positions})"

    def copy(self) -> RobotState:
        """Create an independent copy of this state."""
        state = RobotState(self.robot_model, self.positions)
        state.attached_bodies = dict(self.attached_bodies)
        return state

    def set_joint_positions(self, positions: Configuration) -> None:
        """Update the positions of the named joints.

        :raises KeyError: If a position is given for a joint that isn't actuated in the model
        """
        for joint_name, position in positions.items():
            if joint_name not in self.positions:
                raise KeyError(f"Cannot set position of unknown joint: '{joint_name}'.")
            self.positions[joint_name] = float(position)

    def get_joint_position(self, joint_name: str) -> float:
        """Retrieve the position (rad or m) of the named joint."""
        if joint_name not in self.positions:
            raise KeyError(f"Cannot get position of unknown joint: '{joint_name}'.")
        return self.positions[joint_name]

    def attach_body(self, body: AttachedBody) -> None:
        """Attach a body to one of the robot's links (replacing any body of the same name)."""
        self.robot_model.get_link(body.attach_link)  # Raises KeyError for unknown links
        self.attached_bodies[body.name] = body

    def detach_body(self, body_name: str) -> AttachedBody | None:
        """Detach the named body, returning it (or None if no such body was attached)."""
        return self.attached_bodies.pop(body_name, None)

    def global_link_transform(self, link: Link | str) -> Pose3D:
        """Compute the pose of a link relative to the model frame by chaining joint transforms.

        :param link: Link (or link name) whose global transform is computed
        :return: Pose of the link expressed in the model frame
        """
        link_name = link if isinstance(link, str) else link.name
        current = self.robot_model.get_link(link_name)
        model_frame = self.robot_model.model_frame

        transform = Pose3D.identity(link_name)
        while current.parent_joint is not None:
            joint = self.robot_model.get_joint(current.parent_joint)
            position = self.positions.get(joint.name, 0.0)
            transform = joint.child_transform(position) @ transform
            current = self.robot_model.get_link(joint.parent_link)

        return transform.with_ref_frame(model_frame)

    def global_body_transform(self, body_name: str) -> Pose3D:
        """Compute the pose of an attached body relative to the model frame."""
        body = self.attached_bodies[body_name]
        return self.global_link_transform(body.attach_link) @ body.pose

    def knows_frame(self, frame_id: str) -> bool:
        """Evaluate whether the given frame name is recognized by this state."""
        return self.frame_info(frame_id).found

    def frame_info(self, frame_id: str) -> FrameInfo:
        """Look up a named frame among the model frame, links, attached bodies, and subframes.

        :param frame_id: Name of the frame (a leading '/' is ignored)
        :return: Link the frame is connected to, whether it was found, and its global transform
        """
        frame_id = normalize_frame_id(frame_id)
        model = self.robot_model

        if frame_id == model.model_frame:
            return FrameInfo(model.root_link, True, Pose3D.identity(model.model_frame))

        if model.has_link(frame_id):
            return FrameInfo(model.get_link(frame_id), True, self.global_link_transform(frame_id))

        if frame_id in self.attached_bodies:
            body = self.attached_bodies[frame_id]
            link = model.get_link(body.attach_link)
            return FrameInfo(link, True, self.global_body_transform(frame_id))

        body_name, _, subframe_name = frame_id.partition("/")
        if subframe_name and body_name in self.attached_bodies:
            body = self.attached_bodies[body_name]
            if subframe_name in body.subframes:
                link = model.get_link(body.attach_link)
                body_pose = self.global_body_transform(body_name)
                return FrameInfo(link, True, body_pose @ body.subframes[subframe_name])

        return FrameInfo(None, False, Pose3D.identity(model.model_frame))
