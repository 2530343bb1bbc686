"""
This file contains the GlobalBest class, the only state of a swarm shared between the updates of different particles.
"""
from contextlib import AbstractContextManager
from typing import Optional, Union

import numpy as np

from .utils import ReadWriteLock, is_better, worst_fitness


class GlobalBest:
    """
    The best position found by any particle of a swarm, together with its fitness and the lock guarding both.

    The position is stored as a copy of the position of the particle that achieved it. Moving that particle afterward
    does not change the stored position.

    Mutations of position and fitness must hold the exclusive lock, reading the position while particles are moved
    must hold the shared lock. ``compare_and_maybe_update`` and ``snapshot`` acquire the lock themselves, the methods
    whose docstrings state it expect the caller to hold it, e.g., to combine several steps in one critical section::

        with global_best.write():
            global_best.update_if_better(position, fitness, maximize)
            iteration += 1

    Attributes
    ----------
    dtype : numpy.dtype
        The floating point precision.
    fitness : numpy.floating
        The fitness of the global best position.
    lock : propso.utils.ReadWriteLock
        The reader/writer lock guarding ``position`` and ``fitness``.
    position : numpy.ndarray
        The global best position.
    """

    def __init__(self, dims: int, maximize: bool = False, dtype: Union[type, np.dtype] = np.float64) -> None:
        """
        Initialize a global best at the origin with the worst possible fitness.

        Parameters
        ----------
        dims : int
            The dimension of the search space.
        maximize : bool, optional
            True if the fitness is maximized. Default is False.
        dtype : type | numpy.dtype, optional
            The floating point precision. Default is ``numpy.float64``.
        """
        self.dtype = np.dtype(dtype)
        self.position = np.zeros(dims, dtype=self.dtype)
        self.fitness = self.dtype.type(worst_fitness(maximize))
        self.lock = ReadWriteLock()

    @property
    def dims(self) -> int:
        """The dimension of the search space."""
        return len(self.position)

    def read(self) -> AbstractContextManager:
        """Get a context manager holding the shared lock."""
        return self.lock.read_locked()

    def write(self) -> AbstractContextManager:
        """Get a context manager holding the exclusive lock."""
        return self.lock.write_locked()

    def is_better(self, fitness: float, maximize: bool) -> bool:
        """Check if ``fitness`` strictly improves on the global best fitness."""
        return is_better(fitness, self.fitness, maximize)

    def store(self, position: np.ndarray, fitness: float) -> None:
        """
        Overwrite the global best unconditionally. The caller must hold the exclusive lock.

        Parameters
        ----------
        position : numpy.ndarray
            The new global best position. It is copied.
        fitness : float
            The fitness of ``position``.
        """
        self.position[:] = position
        self.fitness = self.dtype.type(fitness)

    def update_if_better(self, position: np.ndarray, fitness: float, maximize: bool) -> bool:
        """
        Store a candidate if it strictly improves on the global best. The caller must hold the exclusive lock.

        Parameters
        ----------
        position : numpy.ndarray
            The candidate position. It is copied.
        fitness : float
            The fitness of the candidate position.
        maximize : bool
            True if the fitness is maximized, False if it is minimized.

        Returns
        -------
        bool
            True if the candidate was stored.
        """
        if not self.is_better(fitness, maximize):
            return False
        self.store(position, fitness)
        return True

    def compare_and_maybe_update(self, position: np.ndarray, fitness: float, maximize: bool) -> bool:
        """
        Atomically store a candidate if it strictly improves on the global best.

        Parameters
        ----------
        position : numpy.ndarray
            The candidate position. It is copied.
        fitness : float
            The fitness of the candidate position.
        maximize : bool
            True if the fitness is maximized, False if it is minimized.

        Returns
        -------
        bool
            True if the candidate was stored.
        """
        with self.write():
            return self.update_if_better(position, fitness, maximize)

    def snapshot(self, out: Optional[np.ndarray] = None) -> np.ndarray:
        """
        Copy the global best position under the shared lock.

        Parameters
        ----------
        out : numpy.ndarray, optional
            A preallocated buffer to copy into. A new one is allocated if it is None or of the wrong size.

        Returns
        -------
        numpy.ndarray
            The copy of the global best position.
        """
        if out is None or len(out) != self.dims:
            out = np.empty(self.dims, dtype=self.dtype)
        with self.read():
            out[:] = self.position
        return out

    def reset_position(self) -> None:
        """Move the global best position to the origin. The caller must hold the exclusive lock."""
        self.position[:] = 0.0

    def reset_fitness(self, maximize: bool) -> None:
        """Set the global best fitness to the worst possible one. The caller must hold the exclusive lock."""
        self.fitness = self.dtype.type(worst_fitness(maximize))

    def __repr__(self) -> str:
        return f"GlobalBest(position={self.position}, fitness={self.fitness})"
