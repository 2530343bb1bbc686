from typing import Callable, Dict, List

import numpy as np
import pytest

from propso import Swarm


def sphere(position: np.ndarray) -> float:
    """Sphere function: continuous, convex, separable, differentiable, unimodal; global minimum 0 at the origin."""
    return float(np.sum(position.astype(np.float64) ** 2))


@pytest.fixture
def loss_fn() -> Callable[[np.ndarray], float]:
    """Get the objective function used throughout the tests."""
    return sphere


@pytest.fixture
def snapshot() -> Callable[[Swarm], List[Dict[str, np.ndarray]]]:
    """Get a function copying the state of every particle of a swarm, to be compared with ``deepdiff``."""

    def _snapshot(swarm: Swarm) -> List[Dict[str, np.ndarray]]:
        return [
            {
                "position": particle.position.copy(),
                "velocity": particle.velocity.copy(),
                "p_best": particle.p_best.copy(),
                "p_best_fitness": float(particle.p_best_fitness),
                "inertia": float(particle.inertia),
                "alpha": float(particle.alpha),
            }
            for particle in swarm.particles
        ]

    return _snapshot
