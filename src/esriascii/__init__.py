__version__ = "v0.10.0"


__all__ = ["__version__", "cli", "config", "constants", "coordinates", "errors", "esriascii", "models", "readers", "sinks"]

from . import cli
from . import config
from . import constants
from . import coordinates
from . import errors
from . import esriascii
from . import models
from . import readers
from . import sinks
