import logging
from typing import TYPE_CHECKING

import numpy as np

from . import is_better

if TYPE_CHECKING:
    from ..swarm import Swarm

log = logging.getLogger(__name__)


def swarm_consistency_check(swarm: "Swarm") -> None:
    """
    Check the invariants of a configured swarm that is not being updated concurrently.

    1.  All particles' arrays and the global best position have the swarm's dimension and precision.
    2.  No particle's personal best fitness is better than the global best fitness.

    Parameters
    ----------
    swarm : propso.Swarm
        The swarm to check.

    Raises
    ------
    AssertionError
        If an invariant is violated. The offending particle is logged.
    """
    dims = swarm.dims
    assert swarm.global_best is not None, "Swarm is not configured."
    assert swarm.global_best.position.shape == (dims,)
    assert swarm.global_best.position.dtype == swarm.dtype
    for i, particle in enumerate(swarm.particles):
        for name in ("position", "velocity", "p_best"):
            array: np.ndarray = getattr(particle, name)
            if array.shape != (dims,) or array.dtype != swarm.dtype:
                log.error(f"Particle {i}: {name} has shape {array.shape} and dtype {array.dtype}.")
                assert False
        if is_better(particle.p_best_fitness, swarm.global_fitness, swarm.maximize):
            log.error(
                f"Particle {i}: Personal best fitness {particle.p_best_fitness} beats global best fitness "
                f"{swarm.global_fitness}."
            )
            assert False
