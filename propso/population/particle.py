"""
This file contains the Particle class, a single candidate solution moving through the search space.
"""
from typing import TYPE_CHECKING, Union

import numpy as np

from ..utils import is_better, worst_fitness

if TYPE_CHECKING:
    from ..propagators import Propagator


class Particle:
    """
    A candidate solution together with its velocity, its personal best and its own random number generator.

    All arrays are allocated once on creation and mutated in place afterward, so their lengths never change and
    references to them stay valid (and observe every later update).

    Each particle owns a separate random stream seeded once on creation. It is used for the particle's initial values,
    for every reset and for the random factors of every velocity update, so the particles' stochastic behavior is
    independent of each other and reproducible given the seeds.

    Attributes
    ----------
    alpha : numpy.floating
        The factor the inertia decays with in every update under linear inertia reduction.
    dtype : numpy.dtype
        The floating point precision of all arrays and coefficients of the particle.
    inertia : numpy.floating
        The inertia weight applied to the old velocity.
    p_best : numpy.ndarray
        The best position the particle has visited so far.
    p_best_fitness : numpy.floating
        The fitness of ``p_best``. Initially the worst possible fitness.
    position : numpy.ndarray
        The current position.
    rng : numpy.random.Generator
        The particle's own random number generator.
    seed : int
        The seed ``rng`` was created from.
    velocity : numpy.ndarray
        The current velocity.

    Methods
    -------
    reset()
        Reinitialize the particle randomly, continuing its random stream.
    record_if_best()
        Update the personal best with a new fitness value for the current position.
    update()
        Move the particle with a PSO propagator.
    """

    def __init__(
        self,
        v_max: float,
        position_min: float,
        position_max: float,
        alpha_max: float,
        inertia_max: float,
        dims: int,
        seed: int,
        maximize: bool = False,
        dtype: Union[type, np.dtype] = np.float64,
    ) -> None:
        """
        Create a randomly initialized particle.

        Parameters
        ----------
        v_max : float
            Initial velocities are drawn uniformly from [0, v_max).
        position_min : float
            The lower limit of initial positions.
        position_max : float
            The upper limit (exclusive) of initial positions.
        alpha_max : float
            ``alpha`` is drawn uniformly from [0, alpha_max).
        inertia_max : float
            ``inertia`` is drawn uniformly from [0, inertia_max).
        dims : int
            The dimension of the search space.
        seed : int
            The seed of the particle's random number generator.
        maximize : bool, optional
            True if the fitness is maximized. Determines the initial personal best fitness. Default is False.
        dtype : type | numpy.dtype, optional
            The floating point precision. Default is ``numpy.float64``.
        """
        self.dtype = np.dtype(dtype)
        self.seed = seed
        self.rng = np.random.default_rng(seed)
        self.position = np.empty(dims, dtype=self.dtype)
        self.velocity = np.empty(dims, dtype=self.dtype)
        self.p_best = np.empty(dims, dtype=self.dtype)
        self.p_best_fitness = self.dtype.type(worst_fitness(maximize))
        self.inertia = self.dtype.type(0.0)
        self.alpha = self.dtype.type(0.0)
        self._randomize(v_max, position_min, position_max, alpha_max, inertia_max)

    @property
    def dims(self) -> int:
        """The dimension of the search space."""
        return len(self.position)

    def _randomize(
        self, v_max: float, position_min: float, position_max: float, alpha_max: float, inertia_max: float
    ) -> None:
        """Draw position, velocity, inertia and alpha from the particle's random stream; personal best := position."""
        self.position[:] = self.rng.random(self.dims, dtype=self.dtype) * (position_max - position_min) + position_min
        self.p_best[:] = self.position
        self.velocity[:] = self.rng.random(self.dims, dtype=self.dtype) * v_max
        self.inertia = self.dtype.type(self.rng.random() * inertia_max)
        self.alpha = self.dtype.type(self.rng.random() * alpha_max)

    def reset(
        self, v_max: float, position_min: float, position_max: float, alpha_max: float, inertia_max: float
    ) -> None:
        """
        Reinitialize the particle in place.

        Position, personal best, velocity, inertia and alpha are drawn anew as on creation. The random stream is
        continued rather than reseeded, so a reset particle does not repeat its initial values. The personal best
        fitness is left untouched.

        Parameters
        ----------
        v_max : float
            Velocities are drawn uniformly from [0, v_max).
        position_min : float
            The lower limit of positions.
        position_max : float
            The upper limit (exclusive) of positions.
        alpha_max : float
            ``alpha`` is drawn uniformly from [0, alpha_max).
        inertia_max : float
            ``inertia`` is drawn uniformly from [0, inertia_max).
        """
        self._randomize(v_max, position_min, position_max, alpha_max, inertia_max)

    def record_if_best(self, fitness: float, maximize: bool) -> bool:
        """
        Record the fitness of the current position if it improves on the personal best.

        Parameters
        ----------
        fitness : float
            The fitness of the particle's current position.
        maximize : bool
            True if the fitness is maximized, False if it is minimized.

        Returns
        -------
        bool
            True if the personal best was updated.
        """
        fitness = self.dtype.type(fitness)
        if not is_better(fitness, self.p_best_fitness, maximize):
            return False
        self.p_best_fitness = fitness
        self.p_best[:] = self.position
        return True

    def update(self, propagator: "Propagator", g_best: np.ndarray) -> None:
        """
        Move the particle one step.

        Parameters
        ----------
        propagator : propso.propagators.Propagator
            The update rule to apply.
        g_best : numpy.ndarray
            The global best position the particle is attracted to.
        """
        propagator(self, g_best)

    def __repr__(self) -> str:
        return (
            f"Particle(position={self.position}, velocity={self.velocity}, p_best={self.p_best}, "
            f"p_best_fitness={self.p_best_fitness}, inertia={self.inertia}, alpha={self.alpha})"
        )
