"""Define dataclasses mirroring the visualization_msgs message schemas."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar

from task_constructor_utils.messages.geometry_msgs import PoseMsg, Vector3Msg
from task_constructor_utils.messages.std_msgs import ColorRGBA, Header

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


@dataclass
class Marker:
    """Mirror of visualization_msgs/Marker."""

    ARROW: ClassVar[int] = 0
    CUBE: ClassVar[int] = 1
    SPHERE: ClassVar[int] = 2
    CYLINDER: ClassVar[int] = 3
    LINE_LIST: ClassVar[int] = 5

    ADD: ClassVar[int] = 0
    DELETE: ClassVar[int] = 2

    header: Header = field(default_factory=Header)
    ns: str = ""
    id: int = 0
    type: int = SPHERE
    action: int = ADD
    pose: PoseMsg = field(default_factory=PoseMsg)
    scale: Vector3Msg = field(default_factory=Vector3Msg)
    color: ColorRGBA = field(default_factory=ColorRGBA)
    lifetime_s: float = 0.0
    """Duration (seconds) before the marker is removed (0 means forever)."""


@dataclass
class MarkerArray:
    """Mirror of visualization_msgs/MarkerArray, used as an append-only marker accumulator."""

    markers: list[Marker] = field(default_factory=list)

    def __len__(self) -> int:
        """Return the number of markers collected so far."""
        return len(self.markers)

    def __iter__(self) -> Iterator[Marker]:
        """Provide an iterator over the collected markers, in insertion order."""
        return iter(self.markers)

    def append(self, marker: Marker) -> None:
        """Append one marker to the end of the collection."""
        self.markers.append(marker)

    def extend(self, markers: Iterable[Marker]) -> None:
        """Append the given markers to the end of the collection, preserving their order."""
        self.markers.extend(markers)
