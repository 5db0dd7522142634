"""Define a read-mostly planning scene combining a robot's state with a collision environment."""

from __future__ import annotations

from typing import TYPE_CHECKING

from task_constructor_utils.collision_detection import (
    CollisionCheckError,
    CollisionRequest,
    CollisionResult,
)
from task_constructor_utils.io.logging import log_debug, log_info, log_warning
from task_constructor_utils.kinematics import RobotState

if TYPE_CHECKING:
    from task_constructor_utils.collision_detection import CollisionEnvironment
    from task_constructor_utils.kinematics import RobotModel
    from task_constructor_utils.spatial import Pose3D


class PlanningScene:
    """The robot's current state and a collision engine, shared by planning stages."""

    def __init__(
        self,
        robot_model: RobotModel,
        collision_env: CollisionEnvironment | None = None,
        name: str = "",
    ) -> None:
        """Initialize the scene with the robot at its default (all-zero) configuration.

        :param robot_model: Kinematic model of the robot in the scene
        :param collision_env: Engine answering collision queries (None reports no collisions)
        :param name: Optional name used in log messages
        """
        self.robot_model = robot_model
        self.collision_env = collision_env
        self.name = name or robot_model.name

        self._current_state = RobotState(robot_model)

    @property
    def planning_frame(self) -> str:
        """Name of the frame in which the scene expresses transforms and contact positions."""
        return self.robot_model.model_frame

    @property
    def current_state(self) -> RobotState:
        """The robot's current state in the scene."""
        return self._current_state

    def set_current_state(self, state: RobotState) -> None:
        """Replace the robot's current state.

        :raises ValueError: If the state belongs to a different robot model
        """
        if state.robot_model is not self.robot_model:
            raise ValueError(f"Cannot set state of scene '{self.name}' from another robot model.")
        self._current_state = state.copy()

    def get_frame_transform(self, frame_id: str) -> Pose3D:
        """Retrieve the global transform of a frame known to the current state.

        :raises KeyError: If the frame is unknown
        """
        info = self._current_state.frame_info(frame_id)
        if not info.found:
            raise KeyError(f"Frame '{frame_id}' is unknown to planning scene '{self.name}'.")
        return info.transform

    def check_collision(
        self,
        request: CollisionRequest,
        state: RobotState | None = None,
    ) -> CollisionResult:
        """Check a robot state (defaults to the current state) for collisions.

        Engine failures are logged and reported as a collision-free result.

        :param request: Settings controlling which contacts are reported
        :param state: Robot state to be checked
        :return: Result of the collision query
        """
        state = self._current_state if state is None else state

        if self.collision_env is None:
            log_debug(f"Planning scene '{self.name}' has no collision environment to query.")
            return CollisionResult()

        try:
            result = self.collision_env.check_collision(request, state)
        except CollisionCheckError as error:
            log_warning(f"Collision check failed in planning scene '{self.name}': {error}")
            return CollisionResult()

        if request.verbose:
            for contact_list in result.contacts.values():
                for contact in contact_list:
                    log_info(
                        f"Found a contact between '{contact.body_name_1}' "
                        f"(type '{contact.body_type_1.value}') and '{contact.body_name_2}' "
                        f"(type '{contact.body_type_2.value}'), which constitutes a collision.",
                    )

        return result
