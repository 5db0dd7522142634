"""Define dataclasses mirroring the moveit_msgs message schemas."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Constraints:
    """Mirror of moveit_msgs/Constraints, carried through path checks without interpretation."""

    name: str = ""
    joint_constraints: list[Any] = field(default_factory=list)
    position_constraints: list[Any] = field(default_factory=list)
    orientation_constraints: list[Any] = field(default_factory=list)
    visibility_constraints: list[Any] = field(default_factory=list)

    @property
    def empty(self) -> bool:
        """Check whether the message constrains nothing."""
        return not (
            self.joint_constraints
            or self.position_constraints
            or self.orientation_constraints
            or self.visibility_constraints
        )
