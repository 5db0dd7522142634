"""Define functions to convert collision contacts into RViz visualization markers."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import TYPE_CHECKING

from task_constructor_utils.io.yaml_utils import load_yaml_data
from task_constructor_utils.messages import ColorRGBA, Header, Marker, PoseMsg, Vector3Msg
from task_constructor_utils.messages.conversion import point_to_msg

if TYPE_CHECKING:
    from pathlib import Path

    from task_constructor_utils.collision_detection.collision_common import ContactMap


@dataclass(frozen=True)
class CollisionMarkerConfig:
    """Visual settings for markers placed at collision contact points."""

    color: ColorRGBA = ColorRGBA(r=1.0, g=0.0, b=0.0, a=0.8)
    radius_m: float = 0.035  # Radius (meters) of the sphere drawn at each contact
    lifetime_s: float = 60.0  # Lifetime (seconds) of published markers

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> CollisionMarkerConfig:
        """Load marker settings from the `collision_markers` entry of a YAML file.

        Missing settings keep their default values.
        """
        yaml_data = load_yaml_data(yaml_path, required_keys={"collision_markers"})
        marker_data = yaml_data["collision_markers"] or {}

        default = cls()
        color = default.color
        if "color" in marker_data:
            r, g, b, a = marker_data["color"]
            color = ColorRGBA(float(r), float(g), float(b), float(a))

        return cls(
            color=color,
            radius_m=float(marker_data.get("radius_m", default.radius_m)),
            lifetime_s=float(marker_data.get("lifetime_s", default.lifetime_s)),
        )


def get_collision_markers_from_contacts(
    contacts: ContactMap,
    frame_id: str,
    config: CollisionMarkerConfig | None = None,
) -> list[Marker]:
    """Convert every contact point into a sphere marker located at the contact position.

    Markers are namespaced by their contact-map key "<body 1>=<body 2>", so every contact of a
    pair shares one namespace, and are numbered from zero within each namespace.

    :param contacts: Contact points reported by a collision query, grouped by body pair
    :param frame_id: Frame in which the contact positions are expressed
    :param config: Visual settings of the markers (defaults to `CollisionMarkerConfig()`)
    :return: One marker per contact point, in the order the contacts were reported
    """
    config = config or CollisionMarkerConfig()
    diameter_m = 2.0 * config.radius_m
    stamp_s = time.time()

    markers: list[Marker] = []
    for (body_1, body_2), pair_contacts in contacts.items():
        ns = f"{body_1}={body_2}"
        for marker_id, contact in enumerate(pair_contacts):
            marker = Marker(
                header=Header(frame_id=frame_id, stamp_s=stamp_s),
                ns=ns,
                id=marker_id,
                type=Marker.SPHERE,
                action=Marker.ADD,
                pose=PoseMsg(position=point_to_msg(contact.position)),
                scale=Vector3Msg(diameter_m, diameter_m, diameter_m),
                color=config.color,
                lifetime_s=config.lifetime_s,
            )
            markers.append(marker)

    return markers
