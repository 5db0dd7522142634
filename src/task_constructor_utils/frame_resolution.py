"""Resolve the frame used as the target of inverse kinematics (the "IK frame").

An IK frame property is either empty, meaning "use the group's end-effector tip link", or holds a
PoseStamped whose pose is expressed relative to a named frame (a link, an attached body, or a
subframe of an attached body). Resolution yields the robot link the IK frame is rigidly
attached to and the IK frame's global transform.

Rules, in order of precedence (a "tip" is the group's single tip link):

    property  frame id   lookup            rule                    link    reference
    --------  ---------  ----------------  ----------------------  ------  ---------
    empty                                  DEFAULT_TIP             tip     tip
    pose      non-empty  not found         UNKNOWN_FRAME (fails)
    pose      any        found, link       EXPLICIT_FRAME          lookup  lookup
    pose      empty      not found, link   LINK_IN_LINK_FRAME      lookup  link
    pose      any        found, no link    TIP_IN_LOOKED_UP_FRAME  tip     lookup
    pose      empty      not found         TIP_IN_TIP_FRAME        tip     tip

Rules using the tip fail if the group doesn't have exactly one tip link. The IK frame's global
transform is the reference transform composed with the property's local pose.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Protocol, Union

from task_constructor_utils.io.logging import log_debug
from task_constructor_utils.messages import PoseStamped
from task_constructor_utils.messages.conversion import pose_from_msg
from task_constructor_utils.outcome import Outcome

if TYPE_CHECKING:
    from task_constructor_utils.kinematics import FrameInfo, Link, RobotState
    from task_constructor_utils.planning_scene import PlanningScene
    from task_constructor_utils.properties import Property
    from task_constructor_utils.spatial import Pose3D


class FrameResolutionError(Exception):
    """Base class for recoverable failures to resolve an IK frame."""

    def __init__(self, message: str) -> None:
        """Initialize the error with a human-readable message."""
        super().__init__(message)
        self.message = message


class AmbiguousOrMissingFrameError(FrameResolutionError):
    """The group has zero or several tip links, and no link frame was specified to compensate."""


class UnknownFrameError(FrameResolutionError):
    """A non-empty frame id names no frame known to the robot state."""

    def __init__(self, frame_id: str) -> None:
        """Initialize the error for the offending frame id."""
        super().__init__(f"ik_frame specified in unknown frame '{frame_id}'")
        self.frame_id = frame_id


class TipLinkGroup(Protocol):
    """Protocol for kinematic chains that expose their candidate end-effector tip links."""

    def get_end_effector_tips(self) -> list[Link]:
        """Retrieve the candidate tip links of the chain."""
        ...


class FrameRule(Enum):
    """Rules selecting the IK frame's link and reference transform (see the module docstring)."""

    DEFAULT_TIP = "default_tip"
    UNKNOWN_FRAME = "unknown_frame"
    EXPLICIT_FRAME = "explicit_frame"
    LINK_IN_LINK_FRAME = "link_in_link_frame"
    TIP_IN_LOOKED_UP_FRAME = "tip_in_looked_up_frame"
    TIP_IN_TIP_FRAME = "tip_in_tip_frame"

    @property
    def uses_tip(self) -> bool:
        """Check whether the rule takes its link from the group's single tip link."""
        return self in (FrameRule.DEFAULT_TIP, *_TIP_IN_FRAME_RULES)

    @property
    def uses_looked_up_reference(self) -> bool:
        """Check whether the rule takes its reference transform from the frame lookup."""
        return self in (FrameRule.EXPLICIT_FRAME, FrameRule.TIP_IN_LOOKED_UP_FRAME)


_TIP_IN_FRAME_RULES = (FrameRule.TIP_IN_LOOKED_UP_FRAME, FrameRule.TIP_IN_TIP_FRAME)


class FrameResolution(Enum):
    """How the link of a resolved IK frame was determined."""

    BY_TIP = "resolved_by_tip"
    BY_EXPLICIT_FRAME = "resolved_by_explicit_frame"


@dataclass(frozen=True)
class ResolvedFrame:
    """A robot link and the global transform of the IK frame attached to it."""

    link: Link
    tip_in_global_frame: Pose3D
    resolution: FrameResolution


FrameOutcome = Outcome[Union[ResolvedFrame, FrameResolutionError]]
"""Successful outcomes carry a ResolvedFrame; failed outcomes carry the error."""


def select_frame_rule(frame_id: str | None, frame_info: FrameInfo | None) -> FrameRule:
    """Select the rule that determines the IK frame's link and reference transform.

    :param frame_id: Frame id of the IK frame property (None if the property is empty)
    :param frame_info: Result of looking up the frame id (None if the property is empty)
    :return: Rule to be applied
    """
    if frame_id is None or frame_info is None:
        return FrameRule.DEFAULT_TIP
    if not frame_info.found and frame_id:
        return FrameRule.UNKNOWN_FRAME
    if frame_info.link is not None:
        return FrameRule.EXPLICIT_FRAME if frame_info.found else FrameRule.LINK_IN_LINK_FRAME
    if frame_info.found:
        return FrameRule.TIP_IN_LOOKED_UP_FRAME
    return FrameRule.TIP_IN_TIP_FRAME


def get_single_tip(group: TipLinkGroup) -> Link | None:
    """Retrieve the group's tip link, or None unless the group has exactly one tip link."""
    tips = group.get_end_effector_tips()
    return tips[0] if len(tips) == 1 else None


def resolve_ik_frame(
    ik_frame: Property,
    scene: PlanningScene,
    group: TipLinkGroup,
) -> ResolvedFrame:
    """Resolve an IK frame property into a robot link and the IK frame's global transform.

    :param ik_frame: Property that is empty or holds a PoseStamped
    :param scene: Planning scene whose current state provides frame transforms
    :param group: Kinematic chain providing the fallback tip link
    :return: Resolved link, global transform, and how the link was determined
    :raises AmbiguousOrMissingFrameError: If a needed tip link is missing or ambiguous
    :raises UnknownFrameError: If the property names an unknown, non-empty frame
    :raises PropertyTypeError: If the property holds something other than a PoseStamped
    """
    state: RobotState = scene.current_state

    if not ik_frame.defined():
        tip = get_single_tip(group)
        if tip is None:
            raise AmbiguousOrMissingFrameError("missing ik_frame")
        return ResolvedFrame(tip, state.global_link_transform(tip), FrameResolution.BY_TIP)

    ik_pose_msg = ik_frame.value_as(PoseStamped)
    frame_id = ik_pose_msg.header.frame_id
    local_transform = pose_from_msg(ik_pose_msg)
    frame_info = state.frame_info(frame_id)

    rule = select_frame_rule(frame_id, frame_info)
    log_debug(f"Resolving ik_frame given in frame '{frame_id}' using rule {rule.name}.")

    if rule == FrameRule.UNKNOWN_FRAME:
        raise UnknownFrameError(frame_id)

    link = get_single_tip(group) if rule.uses_tip else frame_info.link
    if link is None:
        raise AmbiguousOrMissingFrameError("ik_frame doesn't specify a link frame")

    if rule.uses_looked_up_reference:
        reference = frame_info.transform
    else:  # An empty frame id carries no reference pose of its own
        reference = state.global_link_transform(link)

    resolution = FrameResolution.BY_TIP if rule.uses_tip else FrameResolution.BY_EXPLICIT_FRAME
    return ResolvedFrame(link, reference @ local_transform, resolution)


def get_robot_tip_for_frame(
    ik_frame: Property,
    scene: PlanningScene,
    group: TipLinkGroup,
) -> FrameOutcome:
    """Resolve an IK frame property, reporting recoverable failures as an unsuccessful outcome.

    :param ik_frame: Property that is empty or holds a PoseStamped
    :param scene: Planning scene whose current state provides frame transforms
    :param group: Kinematic chain providing the fallback tip link
    :return: Outcome with the ResolvedFrame on success, or the error and its message on failure
    :raises PropertyTypeError: If the property holds something other than a PoseStamped
    """
    try:
        resolved = resolve_ik_frame(ik_frame, scene, group)
    except FrameResolutionError as error:
        return Outcome(success=False, message=error.message, output=error)

    return Outcome(success=True, message="", output=resolved)
