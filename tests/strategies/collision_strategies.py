"""Define strategies for generating collision contacts for property-based testing."""

import hypothesis.strategies as st

from task_constructor_utils.collision_detection import Contact
from task_constructor_utils.geometry import Point3D

from .spatial_strategies import bounded_floats, positions

BODY_NAMES = ("upper_arm", "forearm", "wrist_link", "table", "shelf", "wall")


@st.composite
def contacts(draw: st.DrawFn) -> Contact:
    """Generate random contacts between two distinct named bodies."""
    names = st.lists(st.sampled_from(BODY_NAMES), min_size=2, max_size=2, unique=True)
    body_1, body_2 = draw(names)
    return Contact(
        position=draw(positions()),
        normal=Point3D(0.0, 0.0, 1.0),
        depth=abs(draw(bounded_floats(0.1))),
        body_name_1=body_1,
        body_name_2=body_2,
    )
