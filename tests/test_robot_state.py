"""Unit tests for robot states and the lookup of named frames within them."""

import math

import pytest

from task_constructor_utils.geometry import Point3D
from task_constructor_utils.kinematics import AttachedBody, RobotModel, RobotState
from task_constructor_utils.spatial import Pose3D

from .fixtures.scene_fixtures import load_test_arm


@pytest.fixture
def state() -> RobotState:
    """Create a state of the test arm with its shoulder turned 90 degrees."""
    return RobotState(load_test_arm(), {"shoulder_pan": math.pi / 2})


@pytest.fixture
def tool() -> AttachedBody:
    """Create a tool held 0.1 m beyond the wrist, with a "tip" subframe 0.05 m further."""
    return AttachedBody(
        name="tool",
        attach_link="wrist_link",
        pose=Pose3D.from_xyz_rpy(x=0.1, ref_frame="wrist_link"),
        subframes={"tip": Pose3D.from_xyz_rpy(x=0.05, ref_frame="tool")},
        touch_links=frozenset({"wrist_link"}),
    )


def test_frame_info_of_model_frame(state: RobotState) -> None:
    """Verify that the model frame resolves to the root link at the identity transform."""
    # Arrange/Act
    info = state.frame_info("base_link")

    # Assert
    assert info.found
    assert info.link == state.robot_model.root_link
    assert info.transform.approx_equal(Pose3D.identity("base_link"))


@pytest.mark.parametrize("frame_id", ["forearm", "/forearm"])
def test_frame_info_of_link(state: RobotState, frame_id: str) -> None:
    """Verify that link frames resolve to their link and its global transform."""
    # Arrange/Act
    info = state.frame_info(frame_id)

    # Assert
    assert info.found
    assert info.link == state.robot_model.get_link("forearm")
    assert info.transform.approx_equal(state.global_link_transform("forearm"))


def test_frame_info_of_attached_body(state: RobotState, tool: AttachedBody) -> None:
    """Verify that an attached body's frame resolves to the link holding the body."""
    # Arrange
    state.attach_body(tool)

    # Act
    info = state.frame_info("tool")

    # Assert - The wrist is at (0, 0.7, 0.5), pointing along +y
    assert info.found
    assert info.link == state.robot_model.get_link("wrist_link")
    assert info.transform.position.approx_equal(Point3D(0.0, 0.8, 0.5), atol=1e-9)


def test_frame_info_of_subframe(state: RobotState, tool: AttachedBody) -> None:
    """Verify that a subframe of an attached body resolves to the link holding the body."""
    # Arrange
    state.attach_body(tool)

    # Act
    info = state.frame_info("tool/tip")

    # Assert
    expected = state.global_link_transform("wrist_link") @ tool.pose @ tool.subframes["tip"]
    assert info.found
    assert info.link == state.robot_model.get_link("wrist_link")
    assert info.transform.approx_equal(expected, atol=1e-9)


@pytest.mark.parametrize("frame_id", ["", "ghost", "tool/no_such_subframe", "forearm/tip"])
def test_frame_info_of_unknown_frame(state: RobotState, tool: AttachedBody, frame_id: str) -> None:
    """Verify that unknown frames are reported as not found, without a link."""
    # Arrange
    state.attach_body(tool)

    # Act
    info = state.frame_info(frame_id)

    # Assert
    assert not info.found
    assert info.link is None
    assert not state.knows_frame(frame_id)


def test_detached_body_is_no_longer_known(state: RobotState, tool: AttachedBody) -> None:
    """Verify that detaching a body removes its frames from the state."""
    # Arrange
    state.attach_body(tool)

    # Act
    detached = state.detach_body("tool")

    # Assert
    assert detached == tool
    assert not state.knows_frame("tool")
    assert not state.knows_frame("tool/tip")
    assert state.detach_body("tool") is None


def test_attach_body_to_unknown_link_raises_key_error(state: RobotState) -> None:
    """Verify that bodies can only be attached to links of the robot."""
    # Arrange
    body = AttachedBody("box", "ghost_link", Pose3D.identity("ghost_link"))

    # Act/Assert
    with pytest.raises(KeyError, match="ghost_link"):
        state.attach_body(body)


def test_set_unknown_joint_raises_key_error(state: RobotState) -> None:
    """Verify that positions can only be set for actuated joints of the robot."""
    # Act/Assert - Fixed joints have no position variable
    with pytest.raises(KeyError, match="camera_mount"):
        state.set_joint_positions({"camera_mount": 0.1})


def test_copy_is_independent(state: RobotState, tool: AttachedBody) -> None:
    """Verify that modifying a copied state leaves the original unchanged."""
    # Arrange
    state_copy = state.copy()

    # Act
    state_copy.set_joint_positions({"elbow": 1.0})
    state_copy.attach_body(tool)

    # Assert
    assert state.get_joint_position("elbow") == 0.0
    assert state_copy.get_joint_position("elbow") == 1.0
    assert not state.knows_frame("tool")


def test_new_state_starts_at_zero() -> None:
    """Verify that a new state places every actuated joint at zero."""
    # Arrange
    model: RobotModel = load_test_arm()

    # Act
    state = RobotState(model)

    # Assert
    assert state.positions == {"shoulder_pan": 0.0, "elbow": 0.0, "wrist_slide": 0.0}
