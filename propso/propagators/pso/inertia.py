"""
This file contains the inertia-weighted PSO propagators.
"""
from typing import TYPE_CHECKING

import numpy as np

from .vanilla import Vanilla

if TYPE_CHECKING:
    from ...population import Particle


class ConstantInertia(Vanilla):
    """
    This propagator features an inertia factor applied to the old velocity in the velocity update.

    The inertia factor is a property of each particle. It is drawn once at creation or reset of the particle and stays
    constant afterward.

    This variant was first proposed in Y. Shi and R. Eberhart. "A modified particle swarm optimizer", 1998,
    https://doi.org/10.1109/ICEC.1998.699146
    """

    def __call__(self, particle: "Particle", g_best: np.ndarray) -> None:
        """
        Apply the standard PSO update rule with inertia.

        Parameters
        ----------
        particle : propso.population.Particle
            The particle to move in place.
        g_best : numpy.ndarray
            The global best position.
        """
        particle.velocity[:] = particle.inertia * particle.velocity + self._attraction(particle, g_best)
        self._move(particle, self.v_max)


class LinearInertiaReduction(ConstantInertia):
    """
    This propagator lets the inertia factor of each particle decay over the course of the optimization.

    The old velocity is weighted with ``alpha * inertia``. After each update, the particle's inertia is multiplied by
    its ``alpha``, so for ``alpha`` in [0, 1) the inertia shrinks geometrically toward zero and the swarm turns from
    exploration to exploitation.
    """

    def __call__(self, particle: "Particle", g_best: np.ndarray) -> None:
        """
        Apply the PSO update rule with decaying inertia.

        Parameters
        ----------
        particle : propso.population.Particle
            The particle to move in place. Its inertia is reduced afterward.
        g_best : numpy.ndarray
            The global best position.
        """
        particle.velocity[:] = particle.alpha * particle.inertia * particle.velocity + self._attraction(
            particle, g_best
        )
        self._move(particle, self.v_max)
        particle.inertia *= particle.alpha


class DynamicInertiaMaxVelocityReduction(ConstantInertia):
    """
    Inertia PSO whose velocity limit adapts to the spread of the particle's current position.

    Instead of a static velocity limit, the maximum velocity is recomputed in every update as
    ``v_max_gamma * (max(x) - min(x))``, where ``x`` is the particle's position before it moves. This keeps step sizes
    proportional to the scale the particle currently lives on.
    """

    def __init__(self, c_cognitive: float, c_social: float, v_max_gamma: float) -> None:
        """
        The class constructor.

        Parameters
        ----------
        c_cognitive : float
            The cognitive factor.
        c_social : float
            The social factor.
        v_max_gamma : float
            The factor the spread of the particle's position is multiplied with to get the velocity limit.
        """
        super().__init__(c_cognitive, c_social, v_max_gamma)

    @property
    def v_max_gamma(self) -> float:
        """The factor scaling the position spread to the velocity limit."""
        return self.v_max

    def __call__(self, particle: "Particle", g_best: np.ndarray) -> None:
        """
        Apply the inertia PSO update rule with a position-spread-relative velocity limit.

        Parameters
        ----------
        particle : propso.population.Particle
            The particle to move in place.
        g_best : numpy.ndarray
            The global best position.
        """
        particle.velocity[:] = particle.inertia * particle.velocity + self._attraction(particle, g_best)
        v_max = self.v_max_gamma * (particle.position.max() - particle.position.min())
        self._move(particle, v_max)
