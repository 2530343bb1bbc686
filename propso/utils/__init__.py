import logging
import sys
import time
from pathlib import Path
from typing import Optional, Tuple, Union

import colorlog
import numpy as np

from .._globals import MAXIMIZE_SENTINEL, MINIMIZE_SENTINEL, SEED_BOUND
from .locking import ReadWriteLock

__all__ = [
    "ReadWriteLock",
    "derive_seed",
    "is_better",
    "make_rng",
    "set_logger_config",
    "worst_fitness",
]

log = logging.getLogger(__name__)


def worst_fitness(maximize: bool) -> float:
    """
    Get the worst possible fitness for the given objective direction.

    Parameters
    ----------
    maximize : bool
        True if the fitness is maximized, False if it is minimized.

    Returns
    -------
    float
        ``-inf`` when maximizing, ``inf`` when minimizing.
    """
    return MAXIMIZE_SENTINEL if maximize else MINIMIZE_SENTINEL


def is_better(candidate: float, incumbent: float, maximize: bool) -> bool:
    """Check if ``candidate`` strictly improves on ``incumbent`` in the given objective direction."""
    if maximize:
        return candidate > incumbent
    return candidate < incumbent


def make_rng(seed: Optional[int] = None) -> Tuple[np.random.Generator, int]:
    """
    Create the random number generator a swarm derives its particles' seeds from.

    Parameters
    ----------
    seed : int, optional
        The seed. If None or negative, the generator is seeded from the wall clock, i.e., two swarms created this way
        are not reproducible across runs.

    Returns
    -------
    numpy.random.Generator
        The random number generator.
    int
        The seed actually used.
    """
    if seed is None or seed < 0:
        seed = time.time_ns()
        log.debug(f"No seed given. Seeding random source from wall clock with {seed}.")
    return np.random.default_rng(seed), seed


def derive_seed(rng: np.random.Generator) -> int:
    """Draw a non-negative 63-bit seed for a new particle from ``rng``."""
    return int(rng.integers(0, SEED_BOUND))


def set_logger_config(
    level: int = logging.INFO,
    log_file: Optional[Union[str, Path]] = None,
    log_to_stdout: bool = True,
    log_thread: bool = False,
    colors: bool = True,
) -> None:
    """
    Set up the logger. Should only need to be done once.

    Parameters
    ----------
    level : int
        The default level for logging. Default is ``logging.INFO``.
    log_file : str | Path, optional
        The file to save the log to.
    log_to_stdout : bool
        A flag indicating if the log should be printed on stdout. Default is True.
    log_thread : bool
        A flag for prepending the name of the emitting thread to the logging message. Useful when updating a swarm
        asynchronously from several worker threads. Default is False.
    colors : bool
        A flag for using colored logs. Default is True.
    """
    thread = "%(threadName)s:" if log_thread else ""
    # Get base logger.
    base_logger = logging.getLogger()
    base_logger.handlers.clear()
    simple_formatter = logging.Formatter(f"{thread}[%(asctime)s][%(name)s][%(levelname)s] - %(message)s")
    if colors:
        formatter = colorlog.ColoredFormatter(
            fmt=f"{thread}[%(cyan)s%(asctime)s%(reset)s][%(blue)s%(name)s%(reset)s]"
            f"[%(log_color)s%(levelname)s%(reset)s] - %(message)s",
            datefmt=None,
            reset=True,
            log_colors={
                "DEBUG": "cyan",
                "INFO": "green",
                "WARNING": "yellow",
                "ERROR": "red",
                "CRITICAL": "red,bg_white",
            },
            secondary_log_colors={},
        )
        std_handler = logging.StreamHandler(stream=sys.stdout)
        std_handler.setFormatter(formatter)
    else:
        std_handler = logging.StreamHandler(stream=sys.stdout)
        std_handler.setFormatter(simple_formatter)

    if log_to_stdout:
        base_logger.addHandler(std_handler)
    if log_file is not None:
        log_file = Path(log_file)
        log_dir = log_file.parents[0]
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(filename=log_file)
        file_handler.setFormatter(simple_formatter)
        base_logger.addHandler(file_handler)
    base_logger.setLevel(level)
