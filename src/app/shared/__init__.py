# Order matters: logger imports Config and load_config from this package
from .config import Config, load_config
from .logger import Logger

__all__ = ["Config", "Logger", "load_config"]
