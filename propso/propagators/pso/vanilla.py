"""
This file contains the vanilla PSO propagator, the foundation of all other PSO propagators.
"""
from typing import TYPE_CHECKING

import numpy as np

from ..base import Propagator
from .velocity_clamping import clamp_velocity

if TYPE_CHECKING:
    from ...population import Particle


class Vanilla(Propagator):
    """
    This propagator implements the most basic PSO variant one possibly could think of.

    The old velocity is carried over unweighted, i.e., without any inertia factor, and the cognitive and social
    attraction are added on top of it. As nothing damps the velocity, it is only kept in check by velocity clamping.

    This propagator also serves as the foundation of all other PSO propagators and supplies them with protected
    methods that help in the update process. Further PSO propagators should be derived from this propagator or from
    one that is derived from this.

    Original publication: J. Kennedy and R. Eberhart, "Particle swarm optimization", Proceedings of ICNN'95 -
    International Conference on Neural Networks, 1995, pp. 1942-1948 vol.4, https://doi.org/10.1109/ICNN.1995.488968
    """

    def __call__(self, particle: "Particle", g_best: np.ndarray) -> None:
        """
        Apply the vanilla PSO update rule.

        Parameters
        ----------
        particle : propso.population.Particle
            The particle to move in place.
        g_best : numpy.ndarray
            The global best position.
        """
        particle.velocity += self._attraction(particle, g_best)
        self._move(particle, self.v_max)

    def _attraction(self, particle: "Particle", g_best: np.ndarray) -> np.ndarray:
        """
        Compute the cognitive plus social attraction of a particle.

        Fresh random factors uniform in [0, 1) are drawn for each dimension from the particle's own random stream,
        first all cognitive ones, then all social ones.

        Parameters
        ----------
        particle : propso.population.Particle
            The particle to compute the attraction for.
        g_best : numpy.ndarray
            The global best position.

        Returns
        -------
        numpy.ndarray
            ``c_cognitive * r1 * (p_best - x) + c_social * r2 * (g_best - x)``
        """
        r_cognitive = particle.rng.random(particle.dims, dtype=particle.dtype)
        r_social = particle.rng.random(particle.dims, dtype=particle.dtype)
        return self.c_cognitive * r_cognitive * (particle.p_best - particle.position) + self.c_social * r_social * (
            g_best - particle.position
        )

    @staticmethod
    def _move(particle: "Particle", v_max: float) -> None:
        """Clamp the particle's velocity to ``v_max`` in magnitude and add it to its position."""
        clamp_velocity(particle.velocity, v_max, out=particle.velocity)
        particle.position += particle.velocity
