"""Define the request, contact, and result types exchanged with a collision-checking engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Dict, List, Protocol, Tuple

if TYPE_CHECKING:
    from task_constructor_utils.geometry import Point3D
    from task_constructor_utils.kinematics import RobotState


class BodyType(Enum):
    """The kind of body involved in a contact."""

    ROBOT_LINK = "Robot link"
    ROBOT_ATTACHED = "Robot attached"
    WORLD_OBJECT = "Object"


class CollisionCheckError(RuntimeError):
    """Raised by a collision environment that cannot evaluate a query."""


@dataclass(frozen=True)
class CollisionRequest:
    """Settings controlling how much contact information a collision query reports."""

    group_name: str = ""
    """Group whose links are checked (empty means the complete robot)."""

    contacts: bool = False
    """Should contact points be computed, or only a yes/no collision verdict?"""

    max_contacts: int = 1
    """Maximum number of contact points reported across all colliding pairs."""

    max_contacts_per_pair: int = 1
    """Maximum number of contact points reported for any single pair of bodies."""

    verbose: bool = False
    """Should the engine log details about each contact it finds?"""


@dataclass(frozen=True)
class Contact:
    """A single point of contact (or interpenetration) between two bodies."""

    position: Point3D
    """Contact position, expressed in the planning frame."""

    normal: Point3D
    """Unit normal of the contact, pointing from body 2 toward body 1."""

    depth: float
    """Penetration depth (meters)."""

    body_name_1: str
    body_name_2: str
    body_type_1: BodyType = BodyType.ROBOT_LINK
    body_type_2: BodyType = BodyType.WORLD_OBJECT

    @property
    def pair(self) -> BodyPair:
        """Order-independent key identifying the pair of colliding bodies."""
        return (
            (self.body_name_1, self.body_name_2)
            if self.body_name_1 <= self.body_name_2
            else (self.body_name_2, self.body_name_1)
        )


BodyPair = Tuple[str, str]
"""Names of two colliding bodies, in sorted order."""

ContactMap = Dict[BodyPair, List[Contact]]
"""Maps each pair of colliding bodies to the contact points reported between them."""


@dataclass
class CollisionResult:
    """The outcome of a collision query: a verdict plus any reported contact points."""

    collision: bool = False
    contact_count: int = 0
    contacts: ContactMap = field(default_factory=dict)

    def add_contact(self, contact: Contact, request: CollisionRequest) -> bool:
        """Record a contact found by an engine, honoring the request's contact caps.

        Contacts beyond `max_contacts` overall, or `max_contacts_per_pair` for their pair, are
        dropped without notice; the collision verdict is set regardless.

        :param contact: Contact point found by the engine
        :param request: Request whose caps bound the reported contacts
        :return: True if the contact was recorded, else False
        """
        self.collision = True
        if not request.contacts or self.contact_count >= request.max_contacts:
            return False

        pair_contacts = self.contacts.get(contact.pair, [])
        if len(pair_contacts) >= request.max_contacts_per_pair:
            return False

        pair_contacts.append(contact)
        self.contacts[contact.pair] = pair_contacts
        self.contact_count += 1
        return True

    def clear(self) -> None:
        """Reset the result to its collision-free state."""
        self.collision = False
        self.contact_count = 0
        self.contacts = {}


class CollisionEnvironment(Protocol):
    """Protocol for collision engines queried by a planning scene."""

    def check_collision(self, request: CollisionRequest, state: RobotState) -> CollisionResult:
        """Check the given robot state for collisions, reporting contacts as requested.

        :raises CollisionCheckError: If the engine cannot evaluate the query
        """
        ...
