"""Mark the collisions found along a planned robot trajectory with visualization markers."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from itertools import repeat
from typing import TYPE_CHECKING

from task_constructor_utils.collision_detection import (
    CollisionRequest,
    get_collision_markers_from_contacts,
)
from task_constructor_utils.io.logging import log_debug

if TYPE_CHECKING:
    from task_constructor_utils.collision_detection import CollisionMarkerConfig
    from task_constructor_utils.kinematics import RobotState, RobotTrajectory
    from task_constructor_utils.messages import Constraints, Marker, MarkerArray
    from task_constructor_utils.planning_scene import PlanningScene

MAX_CONTACTS = 10
"""Maximum number of contacts reported per waypoint; further contacts are silently dropped."""

MAX_CONTACTS_PER_PAIR = 3
"""Maximum number of contacts reported for each pair of colliding bodies per waypoint."""


def make_path_collision_request() -> CollisionRequest:
    """Create the verbose, contact-reporting request used to check each waypoint of a path."""
    return CollisionRequest(
        contacts=True,
        max_contacts=MAX_CONTACTS,
        max_contacts_per_pair=MAX_CONTACTS_PER_PAIR,
        verbose=True,
    )


def markers_for_waypoint(
    waypoint: RobotState,
    scene: PlanningScene,
    config: CollisionMarkerConfig | None = None,
) -> list[Marker]:
    """Check one waypoint for collisions and convert any contacts into markers.

    :param waypoint: Robot state to be checked
    :param scene: Planning scene providing the collision query and planning frame
    :param config: Visual settings of the generated markers
    :return: Markers for the waypoint's contacts (empty if the waypoint is collision-free)
    """
    result = scene.check_collision(make_path_collision_request(), waypoint)
    if result.contact_count == 0:
        return []

    return get_collision_markers_from_contacts(result.contacts, scene.planning_frame, config)


def mark_path_collisions(
    trajectory: RobotTrajectory,
    scene: PlanningScene,
    path_constraints: Constraints,
    group_name: str,
    markers_out: MarkerArray,
    config: CollisionMarkerConfig | None = None,
    max_workers: int | None = None,
) -> None:
    """Append a marker for every contact found at each waypoint of a trajectory.

    Waypoints are checked in order, and the markers of waypoint i precede those of waypoint i+1.
    Each waypoint's query requests at most `MAX_CONTACTS` contacts (and `MAX_CONTACTS_PER_PAIR`
    per pair of bodies). The collision engine is trusted to honor these caps, e.g., by recording
    contacts through `CollisionResult.add_contact`; every contact in its result is marked.

    :param trajectory: Trajectory whose waypoints are checked for collisions
    :param scene: Planning scene providing the collision query and planning frame
    :param path_constraints: Constraints of the planned path (not used in collision checks)
    :param group_name: Name of the planning group that moved along the path (not used in checks)
    :param markers_out: Marker collection to which markers are appended
    :param config: Visual settings of the generated markers
    :param max_workers: If greater than one, check waypoints concurrently using this many threads
    """
    n_waypoints = trajectory.waypoint_count
    constraints_desc = "unconstrained" if path_constraints.empty else f"'{path_constraints.name}'"
    log_debug(
        f"Marking collisions along {n_waypoints} waypoints of group '{group_name}' "
        f"(path constraints: {constraints_desc}).",
    )

    waypoints = [trajectory.get_waypoint(i) for i in range(n_waypoints)]

    if max_workers is not None and max_workers > 1 and n_waypoints > 1:
        # Each waypoint fills its own buffer; map() yields the buffers in waypoint order
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            checks = executor.map(markers_for_waypoint, waypoints, repeat(scene), repeat(config))
            buffers = list(checks)
    else:
        buffers = (markers_for_waypoint(wp, scene, config) for wp in waypoints)

    for index, waypoint_markers in enumerate(buffers):
        if waypoint_markers:
            log_debug(f"Waypoint {index} has {len(waypoint_markers)} collision contact(s).")
        markers_out.extend(waypoint_markers)
