"""Import dataclasses mirroring the ROS message schemas exchanged with planners and RViz."""

from .geometry_msgs import PointMsg as PointMsg
from .geometry_msgs import PoseMsg as PoseMsg
from .geometry_msgs import PoseStamped as PoseStamped
from .geometry_msgs import QuaternionMsg as QuaternionMsg
from .geometry_msgs import Vector3Msg as Vector3Msg
from .moveit_msgs import Constraints as Constraints
from .std_msgs import ColorRGBA as ColorRGBA
from .std_msgs import Header as Header
from .visualization_msgs import Marker as Marker
from .visualization_msgs import MarkerArray as MarkerArray
