import logging
from typing import Callable

import numpy as np
import pytest

from propso import Mode, Swarm, Swarm32, Swarm64, set_logger_config
from propso.utils.consistency_checks import swarm_consistency_check

log = logging.getLogger("propso")  # Get logger instance.

NUM_PARTICLES = 20
DIMS = 2
POSITION_LIMIT = 5.12  # Search space of the sphere function
ITERATIONS = 100


@pytest.fixture(
    params=[
        lambda swarm: swarm.set_vanilla(NUM_PARTICLES, DIMS, 1.49445, 1.49445, 1.0, -POSITION_LIMIT, POSITION_LIMIT),
        lambda swarm: swarm.set_constant_inertia(
            NUM_PARTICLES, DIMS, 1.49445, 1.49445, 1.0, -POSITION_LIMIT, POSITION_LIMIT, 0.729
        ),
        lambda swarm: swarm.set_linear_inertia_reduction(
            NUM_PARTICLES, DIMS, 1.49445, 1.49445, 1.0, -POSITION_LIMIT, POSITION_LIMIT, 0.99, 0.9
        ),
        lambda swarm: swarm.set_constriction(NUM_PARTICLES, DIMS, 2.05, 2.05, 1.0, -POSITION_LIMIT, POSITION_LIMIT),
        lambda swarm: swarm.set_dynamic_inertia_max_velocity_reduction(
            NUM_PARTICLES, DIMS, 1.49445, 1.49445, 0.2, -POSITION_LIMIT, POSITION_LIMIT, 0.729
        ),
    ],
    ids=["vanilla", "constant_inertia", "linear_inertia_reduction", "constriction", "dimvr"],
)
def configure(request: pytest.FixtureRequest) -> Callable[[Swarm], None]:
    """Iterate over the PSO variants."""
    return request.param


@pytest.fixture(params=[Swarm32, Swarm64], ids=["float32", "float64"])
def swarm_type(request: pytest.FixtureRequest) -> type:
    """Iterate over both floating point precisions."""
    return request.param


def test_pso(
    configure: Callable[[Swarm], None], swarm_type: type, loss_fn: Callable[[np.ndarray], float]
) -> None:
    """
    Test a PSO variant by optimizing the sphere function with synchronous updates.

    Parameters
    ----------
    configure : Callable[[propso.Swarm], None]
        Function configuring the PSO variant to test.
    swarm_type : type
        The swarm class, determining the floating point precision.
    loss_fn : Callable[[numpy.ndarray], float]
        The function to optimize.
    """
    set_logger_config()
    swarm = swarm_type(seed=42)
    configure(swarm)
    assert swarm.mode != Mode.GENERIC

    swarm.sync_update([loss_fn(swarm.particle_position(i)) for i in range(len(swarm))])
    first_best = swarm.global_fitness
    for _ in range(ITERATIONS - 1):
        swarm.sync_update([loss_fn(swarm.particle_position(i)) for i in range(len(swarm))])
        for particle in swarm.particles:
            assert np.all(np.isfinite(particle.position))
            if swarm.mode != Mode.DYNAMIC_INERTIA_MAX_VELOCITY_REDUCTION:  # v_max is a relative factor there.
                assert np.all(np.abs(particle.velocity) <= swarm.v_max)

    log.info(f"{swarm}")
    swarm_consistency_check(swarm)
    assert swarm.iteration == ITERATIONS
    assert swarm.global_fitness < first_best
    # Fitness is stored in the swarm's precision, subnormal values included.
    np.testing.assert_allclose(swarm.dtype.type(loss_fn(swarm.global_position())), swarm.global_fitness, rtol=1e-5)


def test_constriction_converges(loss_fn: Callable[[np.ndarray], float]) -> None:
    """Test that the constriction variant with the classic coefficients homes in on the optimum."""
    swarm = Swarm64(seed=7)
    swarm.set_constriction(NUM_PARTICLES, DIMS, 2.05, 2.05, 1.0, -POSITION_LIMIT, POSITION_LIMIT)
    for _ in range(ITERATIONS):
        swarm.sync_update([loss_fn(swarm.particle_position(i)) for i in range(len(swarm))])
    assert swarm.global_fitness < 1e-2
    np.testing.assert_allclose(swarm.global_position(), np.zeros(DIMS), atol=0.1)


def test_constriction_nan(loss_fn: Callable[[np.ndarray], float]) -> None:
    """Test that coefficients violating the stability precondition propagate NaN instead of raising."""
    swarm = Swarm64(seed=1)
    swarm.set_constriction(4, DIMS, 1.0, 1.0, 1.0, -POSITION_LIMIT, POSITION_LIMIT)
    assert np.isnan(swarm.constriction)
    swarm.sync_update([loss_fn(swarm.particle_position(i)) for i in range(len(swarm))])
    for particle in swarm.particles:
        assert np.all(np.isnan(particle.velocity))
        assert np.all(np.isnan(particle.position))
    # NaN fitness values never improve on anything.
    best = swarm.global_fitness
    swarm.sync_update([loss_fn(swarm.particle_position(i)) for i in range(len(swarm))])
    assert swarm.global_fitness == best


def test_dynamic_velocity_limit(loss_fn: Callable[[np.ndarray], float]) -> None:
    """Test that each update's velocity is bounded by the spread of the particle's position before moving."""
    swarm = Swarm64(seed=3)
    swarm.set_dynamic_inertia_max_velocity_reduction(8, 5, 1.49445, 1.49445, 0.1, -POSITION_LIMIT, POSITION_LIMIT, 0.9)
    for _ in range(30):
        positions = [particle.position.copy() for particle in swarm.particles]
        swarm.sync_update([loss_fn(position) for position in positions])
        for particle, position in zip(swarm.particles, positions):
            v_max = swarm.v_max * (position.max() - position.min())
            assert np.all(np.abs(particle.velocity) <= v_max)
            np.testing.assert_allclose(particle.position, position + particle.velocity)


def test_linear_inertia_decay(loss_fn: Callable[[np.ndarray], float]) -> None:
    """Test that every particle's inertia decays geometrically with its alpha."""
    swarm = Swarm64(seed=11)
    swarm.set_linear_inertia_reduction(10, DIMS, 1.49445, 1.49445, 1.0, -POSITION_LIMIT, POSITION_LIMIT, 0.95, 0.9)
    initial = [(particle.inertia, particle.alpha) for particle in swarm.particles]
    for _ in range(10):
        previous = [particle.inertia for particle in swarm.particles]
        swarm.sync_update([loss_fn(swarm.particle_position(i)) for i in range(len(swarm))])
        for particle, inertia in zip(swarm.particles, previous):
            assert particle.inertia <= inertia
    for particle, (inertia, alpha) in zip(swarm.particles, initial):
        assert particle.inertia == pytest.approx(inertia * alpha**10)
