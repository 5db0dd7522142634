"""Import classes and definitions representing 3D coordinate frames, poses, and rotations."""

from .frames import DEFAULT_FRAME as DEFAULT_FRAME
from .frames import normalize_frame_id as normalize_frame_id
from .poses import XYZ_RPY as XYZ_RPY
from .poses import Pose3D as Pose3D
from .rotations import EulerRPY as EulerRPY
from .rotations import Quaternion as Quaternion
