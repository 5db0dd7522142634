"""Import definitions used for logging and loading data from files."""

from .logging import configure_logging as configure_logging
from .logging import console as console
from .logging import log_debug as log_debug
from .logging import log_info as log_info
from .logging import log_warning as log_warning
from .yaml_utils import load_yaml_data as load_yaml_data
