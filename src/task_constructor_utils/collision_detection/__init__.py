"""Import classes and functions for querying collision engines and visualizing contacts."""

from .collision_common import BodyType as BodyType
from .collision_common import CollisionCheckError as CollisionCheckError
from .collision_common import CollisionEnvironment as CollisionEnvironment
from .collision_common import CollisionRequest as CollisionRequest
from .collision_common import CollisionResult as CollisionResult
from .collision_common import Contact as Contact
from .collision_common import ContactMap as ContactMap
from .collision_tools import CollisionMarkerConfig as CollisionMarkerConfig
from .collision_tools import (
    get_collision_markers_from_contacts as get_collision_markers_from_contacts,
)
