import copy
import logging
from typing import Tuple

import numpy as np
import pytest

from propso import Mode, Particle
from propso.propagators import Propagator, get_propagator
from propso.propagators.pso import (
    ConstantInertia,
    Constriction,
    DynamicInertiaMaxVelocityReduction,
    LinearInertiaReduction,
    Vanilla,
    clamp_velocity,
    constriction_coefficient,
)

C_COGNITIVE = 2.05
C_SOCIAL = 2.05
V_MAX = 0.5


@pytest.fixture(params=[np.float32, np.float64])
def particle(request: pytest.FixtureRequest) -> Particle:
    """Get a particle whose personal best differs from its position, in single and double precision."""
    p = Particle(
        v_max=1.0,
        position_min=-5.0,
        position_max=5.0,
        alpha_max=0.9,
        inertia_max=0.9,
        dims=6,
        seed=1234,
        dtype=request.param,
    )
    p.p_best[:] = np.linspace(-2.0, 2.0, 6)
    return p


@pytest.fixture
def g_best(particle: Particle) -> np.ndarray:
    """Get a global best position far away from the particle, so that clamping actually kicks in."""
    return np.full(particle.dims, 4.0, dtype=particle.dtype)


def expected_attraction(particle: Particle, g_best: np.ndarray) -> Tuple[np.ndarray, np.random.Generator]:
    """Compute the attraction term on a copy of the particle's random stream."""
    rng = copy.deepcopy(particle.rng)
    r_cognitive = rng.random(particle.dims, dtype=particle.dtype)
    r_social = rng.random(particle.dims, dtype=particle.dtype)
    attraction = C_COGNITIVE * r_cognitive * (particle.p_best - particle.position) + C_SOCIAL * r_social * (
        g_best - particle.position
    )
    return attraction, rng


def assert_moved(particle: Particle, old_position: np.ndarray, raw_velocity: np.ndarray, v_max: float) -> None:
    """Check velocity and position after the final clamping step of an update."""
    rtol = 1e-5 if particle.dtype == np.float32 else 1e-12
    velocity = np.clip(raw_velocity, -v_max, v_max)
    np.testing.assert_allclose(particle.velocity, velocity, rtol=rtol, atol=rtol)
    np.testing.assert_allclose(particle.position, old_position + velocity, rtol=rtol, atol=rtol)
    assert particle.velocity.dtype == particle.dtype
    assert particle.position.dtype == particle.dtype


@pytest.mark.parametrize("v_max", [0.0, 0.5, 3.0])
@pytest.mark.parametrize("velocity", [-7.5, -1.0, -0.25, 0.25, 1.0, 7.5])
def test_clamp_velocity(velocity: float, v_max: float) -> None:
    """
    Test that the velocity clamp caps the magnitude and preserves the sign.

    Parameters
    ----------
    velocity : float
        The velocity component to clamp.
    v_max : float
        The maximum magnitude.
    """
    clamped = float(clamp_velocity(velocity, v_max))
    assert abs(clamped) <= v_max
    if v_max > 0.0:
        assert np.sign(clamped) == np.sign(velocity)
    if abs(velocity) <= v_max:
        assert clamped == velocity


def test_clamp_velocity_in_place() -> None:
    """Test clamping an array into itself, keeping NaN components untouched."""
    velocity = np.array([-3.0, -0.5, 0.0, 0.5, 3.0, np.nan])
    out = clamp_velocity(velocity, 1.0, out=velocity)
    assert out is velocity
    np.testing.assert_array_equal(velocity[:5], [-1.0, -0.5, 0.0, 0.5, 1.0])
    assert np.isnan(velocity[5])


def test_constriction_coefficient() -> None:
    """Test the constriction coefficient against the closed form for the classic choice c_cognitive = c_social = 2.05."""
    phi = 4.1
    expected = 2.0 / abs(2.0 - phi - np.sqrt(phi**2 - 4.0 * phi))
    assert constriction_coefficient(2.05, 2.05) == pytest.approx(expected)
    assert constriction_coefficient(2.05, 2.05) == pytest.approx(0.7298437881283576)
    assert constriction_coefficient(2.0, 2.0) == pytest.approx(1.0)


def test_constriction_coefficient_nan(caplog: pytest.LogCaptureFixture) -> None:
    """Test that violating the stability precondition yields NaN and a warning instead of an error."""
    with caplog.at_level(logging.WARNING, logger="propso"):
        chi = constriction_coefficient(1.0, 1.0)
    assert np.isnan(chi)
    assert "NaN" in caplog.text


@pytest.mark.parametrize(
    "mode, propagator_type",
    [
        (Mode.VANILLA, Vanilla),
        (Mode.CONSTANT_INERTIA, ConstantInertia),
        (Mode.LINEAR_INERTIA_REDUCTION, LinearInertiaReduction),
        (Mode.CONSTRICTION, Constriction),
        (Mode.DYNAMIC_INERTIA_MAX_VELOCITY_REDUCTION, DynamicInertiaMaxVelocityReduction),
    ],
)
def test_get_propagator(mode: Mode, propagator_type: type) -> None:
    """
    Test the dispatch from mode to update rule.

    Parameters
    ----------
    mode : propso.Mode
        The mode to dispatch.
    propagator_type : type
        The expected update rule type.
    """
    propagator = get_propagator(mode, C_COGNITIVE, C_SOCIAL, V_MAX, 0.7)
    assert type(propagator) is propagator_type
    assert propagator.c_cognitive == C_COGNITIVE
    assert propagator.c_social == C_SOCIAL
    assert propagator.v_max == V_MAX


def test_get_propagator_generic() -> None:
    """Test that the generic sentinel has no update rule."""
    with pytest.raises(ValueError):
        get_propagator(Mode.GENERIC, C_COGNITIVE, C_SOCIAL, V_MAX, 0.7)


def test_abstract_propagator(particle: Particle, g_best: np.ndarray) -> None:
    """Test that the abstract base class cannot be applied."""
    with pytest.raises(NotImplementedError):
        Propagator(C_COGNITIVE, C_SOCIAL, V_MAX)(particle, g_best)


def test_vanilla(particle: Particle, g_best: np.ndarray) -> None:
    """Test the vanilla update: the old velocity is carried over without any weight."""
    position, velocity = particle.position.copy(), particle.velocity.copy()
    attraction, rng = expected_attraction(particle, g_best)
    particle.update(Vanilla(C_COGNITIVE, C_SOCIAL, V_MAX), g_best)
    assert_moved(particle, position, velocity + attraction, V_MAX)
    # Exactly two draws per dimension are consumed.
    assert particle.rng.random() == rng.random()


def test_constant_inertia(particle: Particle, g_best: np.ndarray) -> None:
    """Test the constant inertia update: the old velocity is weighted with the particle's inertia, which stays."""
    position, velocity, inertia = particle.position.copy(), particle.velocity.copy(), particle.inertia
    attraction, _ = expected_attraction(particle, g_best)
    particle.update(ConstantInertia(C_COGNITIVE, C_SOCIAL, V_MAX), g_best)
    assert_moved(particle, position, inertia * velocity + attraction, V_MAX)
    assert particle.inertia == inertia


def test_linear_inertia_reduction(particle: Particle, g_best: np.ndarray) -> None:
    """Test the linear inertia reduction update: the old velocity is weighted with alpha * inertia, then inertia decays."""
    position, velocity = particle.position.copy(), particle.velocity.copy()
    inertia, alpha = particle.inertia, particle.alpha
    attraction, _ = expected_attraction(particle, g_best)
    propagator = LinearInertiaReduction(C_COGNITIVE, C_SOCIAL, V_MAX)
    particle.update(propagator, g_best)
    assert_moved(particle, position, alpha * inertia * velocity + attraction, V_MAX)
    assert particle.inertia == pytest.approx(inertia * alpha, rel=1e-6)
    for _ in range(5):
        previous = particle.inertia
        particle.update(propagator, g_best)
        assert particle.inertia <= previous
    assert particle.alpha == alpha


def test_constriction(particle: Particle, g_best: np.ndarray) -> None:
    """Test the constriction update: the whole new velocity is scaled by the constriction coefficient."""
    chi = particle.dtype.type(constriction_coefficient(C_COGNITIVE, C_SOCIAL))
    position, velocity = particle.position.copy(), particle.velocity.copy()
    attraction, _ = expected_attraction(particle, g_best)
    particle.update(Constriction(C_COGNITIVE, C_SOCIAL, V_MAX, chi), g_best)
    assert_moved(particle, position, chi * (velocity + attraction), V_MAX)


@pytest.mark.parametrize("v_max_gamma", [0.01, 0.1, 10.0])
def test_dynamic_inertia_max_velocity_reduction(particle: Particle, g_best: np.ndarray, v_max_gamma: float) -> None:
    """
    Test the dynamic inertia max velocity reduction update: the clamp limit follows the spread of the position.

    Parameters
    ----------
    particle : propso.Particle
        The particle to update.
    g_best : numpy.ndarray
        The global best position.
    v_max_gamma : float
        The factor scaling the position spread to the velocity limit.
    """
    position, velocity, inertia = particle.position.copy(), particle.velocity.copy(), particle.inertia
    attraction, _ = expected_attraction(particle, g_best)
    v_max = v_max_gamma * (position.max() - position.min())
    propagator = DynamicInertiaMaxVelocityReduction(C_COGNITIVE, C_SOCIAL, v_max_gamma)
    assert propagator.v_max_gamma == v_max_gamma
    particle.update(propagator, g_best)
    assert_moved(particle, position, inertia * velocity + attraction, v_max)


def test_update_in_place(particle: Particle, g_best: np.ndarray) -> None:
    """Test that updates overwrite the particle's buffers instead of rebinding them."""
    position, velocity, p_best = particle.position, particle.velocity, particle.p_best
    for propagator in (
        Vanilla(C_COGNITIVE, C_SOCIAL, V_MAX),
        ConstantInertia(C_COGNITIVE, C_SOCIAL, V_MAX),
        LinearInertiaReduction(C_COGNITIVE, C_SOCIAL, V_MAX),
        Constriction(C_COGNITIVE, C_SOCIAL, V_MAX, 0.73),
        DynamicInertiaMaxVelocityReduction(C_COGNITIVE, C_SOCIAL, 0.2),
    ):
        particle.update(propagator, g_best)
        assert particle.position is position
        assert particle.velocity is velocity
        assert particle.p_best is p_best
