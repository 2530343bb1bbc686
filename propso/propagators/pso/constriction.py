"""
This file contains a propagator providing constriction-flavoured PSO.
"""
import logging
from typing import TYPE_CHECKING

import numpy as np

from .vanilla import Vanilla

if TYPE_CHECKING:
    from ...population import Particle

log = logging.getLogger(__name__)


def constriction_coefficient(c_cognitive: float, c_social: float) -> float:
    """
    Compute Clerc's constriction coefficient ``2 / |2 - phi - sqrt(phi^2 - 4 phi)|`` with ``phi = c_cognitive + c_social``.

    The coefficient guarantees bounded particle trajectories only for ``phi >= 4``. This precondition is not enforced:
    for ``0 < phi < 4`` the square root is taken of a negative number, the coefficient is NaN and every constriction
    update using it yields NaN velocities and positions. A warning is logged in that case.

    Parameters
    ----------
    c_cognitive : float
        The cognitive factor.
    c_social : float
        The social factor.

    Returns
    -------
    float
        The constriction coefficient.
    """
    phi = c_cognitive + c_social
    with np.errstate(invalid="ignore"):
        chi = 2.0 / np.abs(2.0 - phi - np.sqrt(phi * phi - 4.0 * phi))
    if np.isnan(chi):
        log.warning(f"c_cognitive + c_social = {phi} lies in (0, 4). Constriction coefficient is NaN.")
    return float(chi)


class Constriction(Vanilla):
    """
    This propagator subclass features constriction PSO as proposed by Clerc and Kennedy in 2002.

    Instead of an inertia factor that affects the old velocity value within the velocity update, there is a
    constriction factor that is applied to the whole new velocity. The constriction factor is passed in rather than
    computed here, so that a swarm computes it once from its coefficients and can switch modes without recomputation.
    Use ``constriction_coefficient`` to obtain it.

    Original publication: M. Clerc and J. Kennedy, "The particle swarm - explosion, stability, and convergence in a
    multidimensional complex space", IEEE Transactions on Evolutionary Computation 6(1), 2002, pp. 58-73,
    https://doi.org/10.1109/4235.985692
    """

    def __init__(self, c_cognitive: float, c_social: float, v_max: float, constriction: float) -> None:
        """
        The class constructor.

        Parameters
        ----------
        c_cognitive : float
            The cognitive factor.
        c_social : float
            The social factor.
        v_max : float
            The velocity clamping limit.
        constriction : float
            The constriction coefficient.
        """
        super().__init__(c_cognitive, c_social, v_max)
        self.constriction = constriction

    def __call__(self, particle: "Particle", g_best: np.ndarray) -> None:
        """
        Apply the constriction PSO update rule.

        Parameters
        ----------
        particle : propso.population.Particle
            The particle to move in place.
        g_best : numpy.ndarray
            The global best position.
        """
        particle.velocity[:] = self.constriction * (particle.velocity + self._attraction(particle, g_best))
        self._move(particle, self.v_max)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(c_cognitive={self.c_cognitive}, c_social={self.c_social}, v_max={self.v_max}, "
            f"constriction={self.constriction})"
        )
