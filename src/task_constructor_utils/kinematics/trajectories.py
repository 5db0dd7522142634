"""Define classes to represent planned robot trajectories."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from task_constructor_utils.kinematics.robot_state import Configuration, RobotState

if TYPE_CHECKING:
    from collections.abc import Iterator

    from task_constructor_utils.kinematics.robot_model import RobotModel


@dataclass
class TrajectoryPoint:
    """A planned state of joint values at a specified time in a trajectory."""

    time_s: float
    """Time (seconds) since the trajectory started."""

    positions: Configuration
    velocities: Configuration = field(default_factory=dict)

    @property
    def joint_names(self) -> list[str]:
        """Retrieve the names of the joints specified by the point."""
        return list(self.positions.keys())


@dataclass
class Trajectory:
    """A sequence of planned joint configurations at specified times."""

    points: list[TrajectoryPoint]

    def __post_init__(self) -> None:
        """Verify properties expected of any valid trajectory."""
        if not self.points:
            return

        # All points in any non-empty trajectory should use the same joint names
        j0_names = self.points[0].joint_names
        for p in self.points[1:]:
            jn_names = p.joint_names
            if j0_names != jn_names:
                raise ValueError(f"Trajectory points used joint names: {j0_names} and {jn_names}.")

    @property
    def joint_names(self) -> list[str]:
        """Retrieve the names of the joints specified by the trajectory."""
        return [] if not self.points else self.points[0].joint_names


class RobotTrajectory:
    """An ordered sequence of full robot states (waypoints) for one joint model group."""

    def __init__(self, robot_model: RobotModel, group_name: str = "") -> None:
        """Initialize an empty trajectory for the named group of the given robot model."""
        self.robot_model = robot_model
        self.group_name = group_name

        self._waypoints: list[RobotState] = []
        self._durations_from_previous: list[float] = []

    def __len__(self) -> int:
        """Return the number of waypoints in the trajectory."""
        return len(self._waypoints)

    def __iter__(self) -> Iterator[RobotState]:
        """Provide an iterator over the trajectory's waypoints, in order."""
        return iter(self._waypoints)

    @property
    def waypoint_count(self) -> int:
        """Number of waypoints in the trajectory."""
        return len(self._waypoints)

    @property
    def duration_s(self) -> float:
        """Total duration (seconds) of the trajectory."""
        return sum(self._durations_from_previous)

    def get_waypoint(self, index: int) -> RobotState:
        """Retrieve the waypoint at the given index.

        :raises IndexError: If the index is out of range
        """
        if not 0 <= index < len(self._waypoints):
            raise IndexError(f"Waypoint index {index} out of range for {len(self)} waypoints.")
        return self._waypoints[index]

    def get_duration_from_previous(self, index: int) -> float:
        """Retrieve the time (seconds) between the given waypoint and its predecessor."""
        return self._durations_from_previous[index]

    def add_suffix_waypoint(self, state: RobotState, duration_from_previous_s: float = 0.0) -> None:
        """Append a waypoint to the end of the trajectory.

        :raises ValueError: If the state is from another robot model or the duration is negative
        """
        if state.robot_model is not self.robot_model:
            raise ValueError("Cannot add a waypoint belonging to a different robot model.")
        if duration_from_previous_s < 0.0:
            raise ValueError(f"Waypoint duration must be non-negative: {duration_from_previous_s}")

        self._waypoints.append(state)
        self._durations_from_previous.append(duration_from_previous_s)

    @classmethod
    def from_joint_trajectory(
        cls,
        reference_state: RobotState,
        group_name: str,
        trajectory: Trajectory,
    ) -> RobotTrajectory:
        """Build full-state waypoints by applying each point's positions to a reference state.

        :param reference_state: State providing values of joints not named in the trajectory
        :param group_name: Name of the joint model group the trajectory moves
        :param trajectory: Time-parameterized joint trajectory
        :return: Constructed RobotTrajectory with one waypoint per trajectory point
        """
        robot_trajectory = cls(reference_state.robot_model, group_name)

        previous_time_s = 0.0
        for point in trajectory.points:
            waypoint = reference_state.copy()
            waypoint.set_joint_positions(point.positions)
            robot_trajectory.add_suffix_waypoint(waypoint, point.time_s - previous_time_s)
            previous_time_s = point.time_s

        return robot_trajectory
