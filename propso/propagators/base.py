from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from ..population import Particle


class Propagator:
    """
    Abstract base class for all update rules, i.e., PSO propagators.

    A propagator takes one particle and the swarm's global best position and moves the particle one step through the
    search space. In contrast to an evolutionary operator breeding new individuals, it works in place: the particle's
    velocity and position buffers are overwritten, their identity never changes.

    Attributes
    ----------
    c_cognitive : float
        The cognitive factor scaling the distance to the particle's personal best position.
    c_social : float
        The social factor scaling the distance to the swarm's global best position.
    v_max : float
        The velocity clamping limit.

    Methods
    -------
    __call__()
        Apply the propagator.
    """

    def __init__(self, c_cognitive: float, c_social: float, v_max: float) -> None:
        """
        Initialize a propagator with given parameters.

        Parameters
        ----------
        c_cognitive : float
            The cognitive factor.
        c_social : float
            The social factor.
        v_max : float
            The velocity clamping limit.
        """
        self.c_cognitive = c_cognitive
        self.c_social = c_social
        self.v_max = v_max

    def __call__(self, particle: "Particle", g_best: np.ndarray) -> None:
        """
        Apply the propagator (not implemented for abstract base class).

        Parameters
        ----------
        particle : propso.population.Particle
            The particle to move. It is mutated in place.
        g_best : numpy.ndarray
            The global best position the particle is attracted to. It is only read.

        Raises
        ------
        NotImplementedError
            Whenever called (abstract base class method).
        """
        raise NotImplementedError()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(c_cognitive={self.c_cognitive}, c_social={self.c_social}, v_max={self.v_max})"
