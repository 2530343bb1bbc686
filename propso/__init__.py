from importlib.metadata import PackageNotFoundError, version

try:
    # Change here if project is renamed and does not equal the package name
    __version__ = version(__name__)
except PackageNotFoundError:
    __version__ = "unknown"
finally:
    del version, PackageNotFoundError

from . import propagators
from .global_best import GlobalBest
from .mode import Mode
from .population import FitnessIndex, Particle
from .swarm import Swarm, Swarm32, Swarm64
from .utils import set_logger_config

__all__ = [
    "FitnessIndex",
    "GlobalBest",
    "Mode",
    "Particle",
    "Swarm",
    "Swarm32",
    "Swarm64",
    "propagators",
    "set_logger_config",
]
