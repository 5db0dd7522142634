"""Define classes to represent the kinematic model of an actuated robot."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

from task_constructor_utils.geometry import Point3D
from task_constructor_utils.io.yaml_utils import load_yaml_data
from task_constructor_utils.spatial import Pose3D, Quaternion

if TYPE_CHECKING:
    from pathlib import Path


class JointType(Enum):
    """An enumeration of robot joint types."""

    FIXED = "fixed"
    REVOLUTE = "revolute"
    PRISMATIC = "prismatic"


@dataclass(frozen=True)
class Link:
    """A named rigid body of a robot."""

    name: str

    parent_joint: str | None = None
    """Name of the joint connecting this link to its parent (None for the root link)."""


@dataclass(frozen=True)
class Joint:
    """A joint connecting a parent link to a child link."""

    name: str
    joint_type: JointType

    parent_link: str
    child_link: str

    origin: Pose3D
    """Transform from the parent link to the joint frame at zero position."""

    axis: Point3D = Point3D(0.0, 0.0, 1.0)
    """Joint axis, specified in the joint frame."""

    lower_limit: float = 0.0
    """Minimum position (rad or m) of the joint."""

    upper_limit: float = 0.0
    """Maximum position (rad or m) of the joint."""

    @property
    def actuated(self) -> bool:
        """Check whether the joint has a position variable."""
        return self.joint_type != JointType.FIXED

    def child_transform(self, position: float) -> Pose3D:
        """Compute the transform from the parent link to the child link at the given position.

        :param position: Joint position (rad or m), ignored for fixed joints
        :return: Pose of the child link relative to the parent link
        """
        if self.joint_type == JointType.REVOLUTE:
            rotation = Quaternion.from_axis_angle(self.axis.to_array(), position)
            motion = Pose3D(Point3D.identity(), rotation, self.child_link)
        elif self.joint_type == JointType.PRISMATIC:
            offset = self.axis.normalized().to_array() * position
            motion = Pose3D.from_translation(Point3D.from_array(offset), self.child_link)
        else:
            return self.origin.with_ref_frame(self.parent_link)

        return self.origin.with_ref_frame(self.parent_link) @ motion


@dataclass(frozen=True)
class JointModelGroup:
    """A named kinematic chain of a robot, e.g., an arm ending in an end-effector."""

    name: str
    link_names: tuple[str, ...]
    end_effector_tips: tuple[Link, ...] = ()
    """Parent links of the end-effectors attached to this group, without duplicates."""

    def get_end_effector_tips(self) -> list[Link]:
        """Retrieve the candidate tip links of the group (one per attached end-effector)."""
        return list(self.end_effector_tips)

    def has_link(self, link_name: str) -> bool:
        """Evaluate whether the named link belongs to the group."""
        return link_name in self.link_names


@dataclass(frozen=True)
class EndEffector:
    """An end-effector (e.g., a gripper) mounted on a link of a parent group."""

    name: str
    parent_link: str
    parent_group: str


@dataclass
class RobotModel:
    """A kinematic model of an actuated robot: a tree of links connected by joints."""

    name: str
    root_link: Link
    links: dict[str, Link] = field(default_factory=dict)
    joints: dict[str, Joint] = field(default_factory=dict)
    groups: dict[str, JointModelGroup] = field(default_factory=dict)
    end_effectors: dict[str, EndEffector] = field(default_factory=dict)

    @property
    def model_frame(self) -> str:
        """Name of the frame in which global link transforms are expressed."""
        return self.root_link.name

    @property
    def variable_names(self) -> list[str]:
        """Names of all actuated joints, in declaration order."""
        return [name for name, joint in self.joints.items() if joint.actuated]

    def has_link(self, link_name: str) -> bool:
        """Evaluate whether the model contains the named link."""
        return link_name in self.links

    def get_link(self, link_name: str) -> Link:
        """Retrieve the named link.

        :raises KeyError: If the model has no such link
        """
        if link_name not in self.links:
            raise KeyError(f"Robot model '{self.name}' has no link named '{link_name}'.")
        return self.links[link_name]

    def get_joint(self, joint_name: str) -> Joint:
        """Retrieve the named joint.

        :raises KeyError: If the model has no such joint
        """
        if joint_name not in self.joints:
            raise KeyError(f"Robot model '{self.name}' has no joint named '{joint_name}'.")
        return self.joints[joint_name]

    def get_joint_model_group(self, group_name: str) -> JointModelGroup:
        """Retrieve the named joint model group.

        :raises KeyError: If the model has no such group
        """
        if group_name not in self.groups:
            raise KeyError(f"Robot model '{self.name}' has no group named '{group_name}'.")
        return self.groups[group_name]

    def add_joint(self, joint: Joint) -> None:
        """Add a joint and its child link to the model.

        :raises ValueError: If the parent link is unknown or the child link already exists
        """
        if joint.parent_link not in self.links:
            raise ValueError(f"Joint '{joint.name}' has unknown parent link '{joint.parent_link}'.")
        if joint.child_link in self.links:
            raise ValueError(f"Joint '{joint.name}' re-parents existing link '{joint.child_link}'.")

        self.joints[joint.name] = joint
        self.links[joint.child_link] = Link(joint.child_link, parent_joint=joint.name)

    def add_end_effector(self, end_effector: EndEffector) -> None:
        """Attach an end-effector to its parent group, updating that group's tip links."""
        parent_group = self.get_joint_model_group(end_effector.parent_group)
        tip = self.get_link(end_effector.parent_link)

        self.end_effectors[end_effector.name] = end_effector
        if tip not in parent_group.end_effector_tips:
            tips = (*parent_group.end_effector_tips, tip)
            self.groups[parent_group.name] = JointModelGroup(
                parent_group.name,
                parent_group.link_names,
                tips,
            )

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> RobotModel:
        """Construct a RobotModel using data from the given YAML file."""
        yaml_data: dict[str, Any] = load_yaml_data(yaml_path, required_keys={"name", "root_link"})
        return cls.from_yaml_data(yaml_data)

    @classmethod
    def from_yaml_data(cls, data: dict[str, Any]) -> RobotModel:
        """Construct a RobotModel from a dictionary of robot description data.

        Joints must be listed so that each parent link is defined before its children.

        :param data: Dictionary with `name`, `root_link`, and optional `joints`, `groups`,
            and `end_effectors` entries
        :return: Constructed RobotModel instance
        """
        root = Link(data["root_link"])
        model = RobotModel(name=data["name"], root_link=root, links={root.name: root})

        for joint_name, joint_data in data.get("joints", {}).items():
            joint_type = JointType(joint_data.get("type", "fixed"))
            lower, upper = joint_data.get("limits", [0.0, 0.0])
            joint = Joint(
                name=joint_name,
                joint_type=joint_type,
                parent_link=joint_data["parent"],
                child_link=joint_data["child"],
                origin=Pose3D.from_sequence(joint_data.get("origin", [0.0] * 6)),
                axis=Point3D.from_sequence(joint_data.get("axis", [0.0, 0.0, 1.0])),
                lower_limit=float(lower),
                upper_limit=float(upper),
            )
            model.add_joint(joint)

        for group_name, group_data in data.get("groups", {}).items():
            for link_name in group_data["links"]:
                model.get_link(link_name)  # Raises KeyError for unknown links
            model.groups[group_name] = JointModelGroup(group_name, tuple(group_data["links"]))

        for ee_name, ee_data in data.get("end_effectors", {}).items():
            ee = EndEffector(ee_name, ee_data["parent_link"], ee_data["parent_group"])
            model.add_end_effector(ee)

        return model
