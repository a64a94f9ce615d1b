from . import constants
from .config import Config, ConfigNode, load_default_config

__all__ = ["Config", "ConfigNode", "constants", "load_default_config"]
