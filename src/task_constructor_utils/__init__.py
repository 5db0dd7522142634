"""Utilities for resolving IK frames and marking collisions along planned robot paths."""

from .frame_resolution import AmbiguousOrMissingFrameError as AmbiguousOrMissingFrameError
from .frame_resolution import FrameResolution as FrameResolution
from .frame_resolution import FrameResolutionError as FrameResolutionError
from .frame_resolution import ResolvedFrame as ResolvedFrame
from .frame_resolution import UnknownFrameError as UnknownFrameError
from .frame_resolution import get_robot_tip_for_frame as get_robot_tip_for_frame
from .frame_resolution import resolve_ik_frame as resolve_ik_frame
from .outcome import Outcome as Outcome
from .path_collisions import mark_path_collisions as mark_path_collisions
from .planning_scene import PlanningScene as PlanningScene
from .properties import Property as Property
from .properties import PropertyTypeError as PropertyTypeError
