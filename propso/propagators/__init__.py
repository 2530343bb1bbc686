__all__ = [
    "Propagator",
    "get_propagator",
]

from ..mode import Mode
from .base import Propagator
from .pso import (
    ConstantInertia,
    Constriction,
    DynamicInertiaMaxVelocityReduction,
    LinearInertiaReduction,
    Vanilla,
)


def get_propagator(mode: Mode, c_cognitive: float, c_social: float, v_max: float, constriction: float) -> Propagator:
    """
    Get the configured update rule for a mode.

    Parameters
    ----------
    mode : propso.Mode
        The mode to get the update rule for.
    c_cognitive : float
        The cognitive factor.
    c_social : float
        The social factor.
    v_max : float
        The velocity clamping limit. For ``Mode.DYNAMIC_INERTIA_MAX_VELOCITY_REDUCTION``, this is the factor the spread
        of a particle's position is scaled with to get its velocity limit.
    constriction : float
        The constriction coefficient. Only used by ``Mode.CONSTRICTION``.

    Returns
    -------
    propso.propagators.Propagator
        The update rule.

    Raises
    ------
    ValueError
        If there is no update rule for the given mode, i.e., for ``Mode.GENERIC``.
    """
    if mode == Mode.VANILLA:
        return Vanilla(c_cognitive, c_social, v_max)
    elif mode == Mode.CONSTANT_INERTIA:
        return ConstantInertia(c_cognitive, c_social, v_max)
    elif mode == Mode.LINEAR_INERTIA_REDUCTION:
        return LinearInertiaReduction(c_cognitive, c_social, v_max)
    elif mode == Mode.CONSTRICTION:
        return Constriction(c_cognitive, c_social, v_max, constriction)
    elif mode == Mode.DYNAMIC_INERTIA_MAX_VELOCITY_REDUCTION:
        return DynamicInertiaMaxVelocityReduction(c_cognitive, c_social, v_max)
    raise ValueError(f"No update rule for mode {mode!r}.")
