"""Import classes and definitions for robot kinematics."""

from .robot_model import EndEffector as EndEffector
from .robot_model import Joint as Joint
from .robot_model import JointModelGroup as JointModelGroup
from .robot_model import JointType as JointType
from .robot_model import Link as Link
from .robot_model import RobotModel as RobotModel
from .robot_state import AttachedBody as AttachedBody
from .robot_state import Configuration as Configuration
from .robot_state import FrameInfo as FrameInfo
from .robot_state import RobotState as RobotState
from .trajectories import RobotTrajectory as RobotTrajectory
from .trajectories import Trajectory as Trajectory
from .trajectories import TrajectoryPoint as TrajectoryPoint
