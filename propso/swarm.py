"""
This file contains the Swarm class orchestrating the particles' updates, and its single and double precision variants.
"""
import logging
import operator
from typing import Iterable, List, Optional, Sequence, Union

import numpy as np

from .global_best import GlobalBest
from .mode import Mode
from .population import FitnessIndex, Particle
from .propagators import Propagator, get_propagator
from .propagators.pso import constriction_coefficient
from .utils import derive_seed, is_better, make_rng, worst_fitness

log = logging.getLogger(__name__)  # Get logger instance.


class Swarm:
    """
    A population of particles plus the swarm-wide global best and the control parameters of the PSO update.

    The swarm never evaluates the objective function itself. The caller evaluates the particles' positions and feeds
    the fitness values back through one of three update protocols:

    - ``sync_update`` takes one fitness per particle, resolves the global best and then moves all particles.
    - ``sync_update_part1``, ``sync_update_part2`` and ``sync_update_part3`` split the synchronous update into phases
      whose per-particle parts (1 and 3) may be fanned out to worker threads by the caller.
    - ``async_update`` takes the fitness of a single particle and moves that particle right away. It may be called
      concurrently from several threads, as long as no two concurrent calls concern the same particle.

    A particle's index in ``particles`` is its identity in all of these operations. Killing particles shifts the
    indices of the survivors.

    The floating point precision is given by the class attribute ``dtype``. ``Swarm32`` and ``Swarm64`` fix it to
    single and double precision, respectively.

    Attributes
    ----------
    alpha_max : numpy.floating
        The upper limit of the particles' randomly drawn ``alpha``.
    c_cognitive : numpy.floating
        The cognitive factor.
    c_social : numpy.floating
        The social factor.
    constriction : numpy.floating
        The constriction coefficient derived from ``c_cognitive + c_social``. NaN if that sum lies in (0, 4).
    dtype : numpy.dtype
        The floating point precision of all arrays and coefficients.
    global_best : propso.global_best.GlobalBest
        The global best position and fitness. None until the swarm is configured.
    inertia_max : numpy.floating
        The upper limit of the particles' randomly drawn inertia.
    iteration : int
        The number of completed update cycles.
    maximize : bool
        True if the fitness is maximized, False if it is minimized.
    mode : propso.Mode
        The update rule applied to the particles.
    particles : List[propso.population.Particle]
        The particles.
    position_max : numpy.floating
        The upper limit of new or reset particles' positions.
    position_min : numpy.floating
        The lower limit of new or reset particles' positions.
    propagator : propso.propagators.Propagator
        The configured update rule matching ``mode``.
    rng : numpy.random.Generator
        The random number generator the particles' seeds are derived from.
    seed : int
        The seed of ``rng``.
    v_max : numpy.floating
        The velocity clamping limit. In ``Mode.DYNAMIC_INERTIA_MAX_VELOCITY_REDUCTION``, the factor the spread of a
        particle's position is scaled with to get its velocity limit.

    Methods
    -------
    generic_set()
        Configure the swarm for any mode.
    sync_update()
        Feed back the fitness of all particles and move them.
    async_update()
        Feed back the fitness of one particle and move it.
    kill()
        Remove particles.
    add()
        Append new particles.
    reset()
        Reinitialize particles.
    all_fitnesses()
        Get the personal best fitness of all particles.
    """

    dtype: np.dtype = np.dtype(np.float64)

    def __init__(self, seed: Optional[int] = None) -> None:
        """
        Create an empty swarm. Configure it with one of the ``set_*`` methods or ``generic_set`` before use.

        Parameters
        ----------
        seed : int, optional
            The seed of the swarm's random number generator. Each particle gets its own generator seeded from this one,
            so two swarms with equal seeds and equal configuration behave identically. If None or negative, the
            generator is seeded from the wall clock and runs are not reproducible.
        """
        self.rng, self.seed = make_rng(seed)
        self.particles: List[Particle] = []
        self.global_best: Optional[GlobalBest] = None
        self.mode = Mode.GENERIC
        self.propagator: Optional[Propagator] = None
        self.maximize = False
        self.iteration = 0
        self.c_cognitive = self.dtype.type(0.0)
        self.c_social = self.dtype.type(0.0)
        self.v_max = self.dtype.type(0.0)
        self.constriction = self.dtype.type(0.0)
        self.alpha_max = self.dtype.type(0.0)
        self.inertia_max = self.dtype.type(0.0)
        self.position_min = self.dtype.type(0.0)
        self.position_max = self.dtype.type(0.0)

    # ------------------------------------------------------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------------------------------------------------------

    def generic_set(
        self,
        mode: Mode,
        num_particles: int,
        dims: int,
        c_cognitive: float,
        c_social: float,
        v_max: float,
        position_min: float,
        position_max: float,
        alpha_max: float,
        inertia_max: float,
    ) -> None:
        """
        Configure the swarm for any mode and populate it with new particles.

        All control parameters are stored, the constriction coefficient is derived from ``c_cognitive + c_social``
        regardless of the mode (so a later mode change needs no recomputation), and the global best is reset to the
        origin with the worst possible fitness.

        Parameters
        ----------
        mode : propso.Mode
            The update rule to apply.
        num_particles : int
            The number of particles.
        dims : int
            The dimension of the search space.
        c_cognitive : float
            The cognitive factor.
        c_social : float
            The social factor.
        v_max : float
            The velocity clamping limit (or the spread factor for dynamic inertia max velocity reduction). Initial
            velocities are drawn from [0, v_max).
        position_min : float
            The lower limit of initial positions.
        position_max : float
            The upper limit (exclusive) of initial positions.
        alpha_max : float
            The upper limit of the particles' ``alpha``.
        inertia_max : float
            The upper limit of the particles' inertia.
        """
        cast = self.dtype.type
        self.mode = Mode(mode)
        self.c_cognitive = cast(c_cognitive)
        self.c_social = cast(c_social)
        self.v_max = cast(v_max)
        self.position_min = cast(position_min)
        self.position_max = cast(position_max)
        self.alpha_max = cast(alpha_max)
        self.inertia_max = cast(inertia_max)
        self.constriction = cast(constriction_coefficient(c_cognitive, c_social))
        self.global_best = GlobalBest(dims, self.maximize, self.dtype)
        self.particles = [self._create_particle(dims) for _ in range(num_particles)]
        self._update_propagator()
        log.info(
            f"Configured {self.mode.name} swarm of {num_particles} particles in {dims} dimensions "
            f"({self.dtype.name}, seed {self.seed})."
        )

    def set_vanilla(
        self,
        num_particles: int,
        dims: int,
        c_cognitive: float,
        c_social: float,
        v_max: float,
        position_min: float,
        position_max: float,
    ) -> None:
        """
        Configure the swarm for vanilla PSO. See ``generic_set`` for the parameters.
        """
        self.generic_set(
            Mode.VANILLA, num_particles, dims, c_cognitive, c_social, v_max, position_min, position_max, 0.0, 0.0
        )

    def set_constant_inertia(
        self,
        num_particles: int,
        dims: int,
        c_cognitive: float,
        c_social: float,
        v_max: float,
        position_min: float,
        position_max: float,
        inertia_max: float,
    ) -> None:
        """
        Configure the swarm for PSO with constant inertia. See ``generic_set`` for the parameters.
        """
        self.generic_set(
            Mode.CONSTANT_INERTIA,
            num_particles,
            dims,
            c_cognitive,
            c_social,
            v_max,
            position_min,
            position_max,
            0.0,
            inertia_max,
        )

    def set_linear_inertia_reduction(
        self,
        num_particles: int,
        dims: int,
        c_cognitive: float,
        c_social: float,
        v_max: float,
        position_min: float,
        position_max: float,
        alpha_max: float,
        inertia_max: float,
    ) -> None:
        """
        Configure the swarm for PSO with decaying inertia. See ``generic_set`` for the parameters.
        """
        self.generic_set(
            Mode.LINEAR_INERTIA_REDUCTION,
            num_particles,
            dims,
            c_cognitive,
            c_social,
            v_max,
            position_min,
            position_max,
            alpha_max,
            inertia_max,
        )

    def set_constriction(
        self,
        num_particles: int,
        dims: int,
        c_cognitive: float,
        c_social: float,
        v_max: float,
        position_min: float,
        position_max: float,
    ) -> None:
        """
        Configure the swarm for constriction PSO.

        ``c_cognitive + c_social`` should be at least 4, e.g., 2.05 each. This is not checked: for smaller positive
        sums, the constriction coefficient and subsequently all particles become NaN. See ``generic_set`` for the
        parameters.
        """
        self.generic_set(
            Mode.CONSTRICTION, num_particles, dims, c_cognitive, c_social, v_max, position_min, position_max, 0.0, 0.0
        )

    def set_dynamic_inertia_max_velocity_reduction(
        self,
        num_particles: int,
        dims: int,
        c_cognitive: float,
        c_social: float,
        v_max_gamma: float,
        position_min: float,
        position_max: float,
        inertia_max: float,
    ) -> None:
        """
        Configure the swarm for inertia PSO with a velocity limit relative to each particle's position spread.

        ``v_max_gamma`` is stored as ``v_max``. See ``generic_set`` for the other parameters.
        """
        self.generic_set(
            Mode.DYNAMIC_INERTIA_MAX_VELOCITY_REDUCTION,
            num_particles,
            dims,
            c_cognitive,
            c_social,
            v_max_gamma,
            position_min,
            position_max,
            0.0,
            inertia_max,
        )

    def set_fitness(self, maximize: bool) -> None:
        """
        Set the objective direction. Minimizing is the default.

        The direction can be switched at any time. As long as no update cycle has been completed, the global best
        fitness and all particles' personal best fitnesses are also reset to the worst possible fitness of the new
        direction. Afterward, they are kept.

        Parameters
        ----------
        maximize : bool
            True to maximize the fitness, False to minimize it.
        """
        self.maximize = maximize
        if self.iteration == 0:
            if self.global_best is not None:
                with self.global_best.write():
                    self.global_best.reset_fitness(maximize)
            worst = self.dtype.type(worst_fitness(maximize))
            for particle in self.particles:
                particle.p_best_fitness = worst

    def change_update_values(self, c_cognitive: float, c_social: float, v_max: float) -> None:
        """
        Change the coefficients used in the particle updates.

        Ignored values and combinations:

        1.  A negative factor leaves that factor unchanged, as long as the other one is non-negative.
        2.  If neither factor is negative, both are only changed if both are positive.
        3.  ``v_max <= 0`` leaves ``v_max`` unchanged.

        The constriction coefficient is always recomputed.

        Parameters
        ----------
        c_cognitive : float
            The new cognitive factor.
        c_social : float
            The new social factor.
        v_max : float
            The new velocity clamping limit.
        """
        cast = self.dtype.type
        if c_cognitive < 0 <= c_social:
            self.c_social = cast(c_social)
        elif c_social < 0 <= c_cognitive:
            self.c_cognitive = cast(c_cognitive)
        elif c_cognitive > 0 and c_social > 0:
            self.c_cognitive = cast(c_cognitive)
            self.c_social = cast(c_social)
        if v_max > 0:
            self.v_max = cast(v_max)
        self.constriction = cast(constriction_coefficient(float(self.c_cognitive), float(self.c_social)))
        self._update_propagator()

    def change_min_start(self, position_min: float) -> None:
        """
        Change the lower position limit for new or reset particles.

        It is up to the caller to keep ``position_max > position_min`` before particles are added or reset.
        """
        self.position_min = self.dtype.type(position_min)

    def change_max_start(self, position_max: float) -> None:
        """
        Change the upper position limit for new or reset particles.

        It is up to the caller to keep ``position_max > position_min`` before particles are added or reset.
        """
        self.position_max = self.dtype.type(position_max)

    def change_alpha_max(self, alpha_max: float) -> None:
        """Change the upper limit of ``alpha`` for new or reset particles. Values <= 0 are ignored."""
        if alpha_max > 0:
            self.alpha_max = self.dtype.type(alpha_max)

    def change_inertia_max(self, inertia_max: float) -> None:
        """Change the upper limit of the inertia for new or reset particles. Values <= 0 are ignored."""
        if inertia_max > 0:
            self.inertia_max = self.dtype.type(inertia_max)

    def change_mode(self, mode: Mode) -> None:
        """
        Change the update rule.

        Different modes need different initial values; e.g., vanilla particles have zero inertia. Consider changing the
        limits first, then the mode, and finally resetting a good share of the particles.
        """
        self.mode = Mode(mode)
        self._update_propagator()

    def _update_propagator(self) -> None:
        """Rebuild the update rule from the current mode and coefficients."""
        if self.mode == Mode.GENERIC:
            self.propagator = None
            return
        self.propagator = get_propagator(self.mode, self.c_cognitive, self.c_social, self.v_max, self.constriction)

    def _create_particle(self, dims: int) -> Particle:
        """Create a new particle from the current configuration with a seed drawn from the swarm's generator."""
        return Particle(
            self.v_max,
            self.position_min,
            self.position_max,
            self.alpha_max,
            self.inertia_max,
            dims,
            derive_seed(self.rng),
            self.maximize,
            self.dtype,
        )

    # ------------------------------------------------------------------------------------------------------------------
    # Update protocols
    # ------------------------------------------------------------------------------------------------------------------

    def sync_update(self, fitnesses: Sequence[float]) -> None:
        """
        Feed back the fitness of every particle's current position and move all particles.

        First, each particle's personal best is updated. The particle with the best fitness improving on the global
        best (the lowest index among ties) is copied into the global best. Only then all particles are moved, so they
        all see the same, fully resolved global best.

        Parameters
        ----------
        fitnesses : Sequence[float]
            The fitness of each particle, in particle order.

        Raises
        ------
        ValueError
            If the number of fitness values does not match the number of particles. Nothing is changed then.
        RuntimeError
            If the swarm is not configured or its mode has no update rule. Nothing is changed then.
        """
        self._check_configured()
        self._check_update_rule()
        self._check_num_fitnesses(fitnesses)
        with self.global_best.write():
            self._resolve_global_best(fitnesses, record=True)
            for particle in self.particles:
                particle.update(self.propagator, self.global_best.position)
            self.iteration += 1
        log.debug(f"Iteration {self.iteration}: Global best fitness is {self.global_best.fitness}.")

    def sync_update_part1(self, index: int, fitness: float) -> None:
        """
        Phase 1 of 3 of the partitioned synchronous update: update one particle's personal best.

        Calls for different particles touch disjoint state and can run in parallel. All calls of a cycle must be done
        before phase 2.

        Parameters
        ----------
        index : int
            The index of the particle.
        fitness : float
            The fitness of the particle's current position.

        Raises
        ------
        IndexError
            If ``index`` is out of range.
        """
        self._check_index(index)
        self.particles[index].record_if_best(fitness, self.maximize)

    def sync_update_part2(self, fitnesses: Sequence[float]) -> None:
        """
        Phase 2 of 3 of the partitioned synchronous update: resolve the global best.

        This phase is serial. It must run after all phase 1 calls of a cycle and before any phase 3 call.

        Parameters
        ----------
        fitnesses : Sequence[float]
            The fitness of each particle, in particle order.

        Raises
        ------
        ValueError
            If the number of fitness values does not match the number of particles. Nothing is changed then.
        RuntimeError
            If the swarm is not configured.
        """
        self._check_configured()
        self._check_num_fitnesses(fitnesses)
        with self.global_best.write():
            self._resolve_global_best(fitnesses, record=False)
            self.iteration += 1
        log.debug(f"Iteration {self.iteration}: Global best fitness is {self.global_best.fitness}.")

    def sync_update_part3(self, index: int, g_best: Optional[np.ndarray] = None) -> np.ndarray:
        """
        Phase 3 of 3 of the partitioned synchronous update: move one particle.

        This is the computationally heaviest phase and the one with the most to gain from parallelism. Each parallel
        worker should hold its own copy of the global best, e.g., the one returned by its first call, and pass it in.

        Parameters
        ----------
        index : int
            The index of the particle.
        g_best : numpy.ndarray, optional
            The worker's copy of the global best position. If None or of the wrong size, a fresh copy is taken.

        Returns
        -------
        numpy.ndarray
            The global best position used, i.e., ``g_best`` or the fresh copy.

        Raises
        ------
        IndexError
            If ``index`` is out of range.
        RuntimeError
            If the swarm is not configured or its mode has no update rule. Nothing is changed then.
        """
        self._check_configured()
        self._check_update_rule()
        self._check_index(index)
        if g_best is None or len(g_best) != self.global_best.dims:
            g_best = self.global_best.snapshot()
        self.particles[index].update(self.propagator, g_best)
        return g_best

    def async_update(self, index: int, fitness: float) -> None:
        """
        Feed back the fitness of a single particle and move it.

        The fitness is compared against the global best, which is updated with the particle's position if improved;
        this and counting the iteration form one exclusive critical section. Then the particle's personal best is
        updated and the particle is moved toward the (possibly just updated) global best while holding the shared
        lock, so updates of other particles proceed concurrently.

        This method is safe to call from several threads at once, as long as no two concurrent calls use the same
        ``index``.

        Parameters
        ----------
        index : int
            The index of the particle.
        fitness : float
            The fitness of the particle's current position.

        Raises
        ------
        IndexError
            If ``index`` is out of range. Nothing is changed then.
        RuntimeError
            If the swarm is not configured or its mode has no update rule. Nothing is changed then.
        """
        self._check_configured()
        self._check_update_rule()
        self._check_index(index)
        fitness = self.dtype.type(fitness)
        particle = self.particles[index]
        with self.global_best.write():
            self.global_best.update_if_better(particle.position, fitness, self.maximize)
            self.iteration += 1
        with self.global_best.read():
            particle.record_if_best(fitness, self.maximize)
            particle.update(self.propagator, self.global_best.position)

    def _resolve_global_best(self, fitnesses: Sequence[float], record: bool) -> int:
        """
        Copy the position of the best particle improving on the global best into it.

        The caller must hold the global best's exclusive lock.

        Parameters
        ----------
        fitnesses : Sequence[float]
            The fitness of each particle, in particle order.
        record : bool
            Whether to also update each particle's personal best.

        Returns
        -------
        int
            The index of the particle now holding the global best, or -1 if it did not change.
        """
        winner = -1
        best = self.global_best.fitness
        for i, fitness in enumerate(fitnesses):
            fitness = self.dtype.type(fitness)
            if record:
                self.particles[i].record_if_best(fitness, self.maximize)
            if is_better(fitness, best, self.maximize):
                best = fitness
                winner = i
        if winner > -1:
            self.global_best.store(self.particles[winner].position, best)
        return winner

    # ------------------------------------------------------------------------------------------------------------------
    # Population management
    # ------------------------------------------------------------------------------------------------------------------

    def kill(self, indices: Iterable[Union[int, FitnessIndex]]) -> None:
        """
        Remove particles. The survivors keep their relative order, their indices shift accordingly.

        Parameters
        ----------
        indices : Iterable[int | propso.population.FitnessIndex]
            The indices of the particles to remove, e.g., a slice of the result of ``all_fitnesses``. Duplicates are
            removed once.

        Raises
        ------
        IndexError
            If more indices are given than there are particles or any index is out of range. Nothing is changed then.
        """
        doomed = set(self._as_indices(indices))
        self.particles = [particle for i, particle in enumerate(self.particles) if i not in doomed]
        log.info(f"Killed {len(doomed)} particles, {len(self.particles)} left.")

    def add(self, num_particles: int) -> None:
        """
        Append new particles created from the current configuration.

        Existing particles and the global best are left untouched.

        Parameters
        ----------
        num_particles : int
            The number of particles to append.

        Raises
        ------
        RuntimeError
            If the swarm is not configured.
        """
        self._check_configured()
        self.particles.extend(self._create_particle(self.global_best.dims) for _ in range(num_particles))
        log.info(f"Added {num_particles} particles, {len(self.particles)} in total.")

    def reset(self, indices: Iterable[Union[int, FitnessIndex]], reset_global_position: bool = False) -> None:
        """
        Reinitialize particles in place from the current configuration.

        The particles' personal best fitness is kept. The global best fitness is never changed here; callers resetting
        the global position usually want to degrade it by other means, e.g., ``set_fitness`` before the first cycle.

        Parameters
        ----------
        indices : Iterable[int | propso.population.FitnessIndex]
            The indices of the particles to reset.
        reset_global_position : bool, optional
            If True, the global best position is moved to the origin. Default is False.

        Raises
        ------
        IndexError
            If more indices are given than there are particles or any index is out of range. Nothing is changed then.
        RuntimeError
            If the swarm is not configured.
        """
        self._check_configured()
        indices = self._as_indices(indices)
        if reset_global_position:
            with self.global_best.write():
                self.global_best.reset_position()
        for i in indices:
            self.particles[i].reset(self.v_max, self.position_min, self.position_max, self.alpha_max, self.inertia_max)
        log.info(f"Reset {len(indices)} particles.")

    def all_fitnesses(self, out: Optional[List[FitnessIndex]] = None) -> List[FitnessIndex]:
        """
        Get the personal best fitness of every particle.

        The result is sorted by raw ascending fitness, regardless of the objective direction, i.e., when maximizing,
        the best particles come last. Ties keep particle order.

        Parameters
        ----------
        out : List[propso.population.FitnessIndex], optional
            A list to fill and return, to avoid allocating a new one. A new one is created if it is None or its length
            does not match the number of particles.

        Returns
        -------
        List[propso.population.FitnessIndex]
            The particles' indices and fitnesses.
        """
        fitnesses = sorted(
            (FitnessIndex(i, particle.p_best_fitness) for i, particle in enumerate(self.particles)),
            key=lambda f: f.fitness,
        )
        if out is None or len(out) != len(fitnesses):
            return fitnesses
        out[:] = fitnesses
        return out

    # ------------------------------------------------------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------------------------------------------------------

    @property
    def global_fitness(self) -> float:
        """The fitness of the global best position."""
        if self.global_best is None:
            return self.dtype.type(worst_fitness(self.maximize))
        return self.global_best.fitness

    def global_position(self, copy: bool = False) -> np.ndarray:
        """
        Get the global best position.

        Parameters
        ----------
        copy : bool, optional
            If False (default), the swarm's live buffer is returned without copying. It changes whenever the global
            best improves, also while the caller holds it. If True, a copy taken under the shared lock is returned.

        Returns
        -------
        numpy.ndarray
            The global best position.
        """
        self._check_configured()
        if copy:
            return self.global_best.snapshot()
        return self.global_best.position

    def particle_position(self, index: int, copy: bool = False) -> np.ndarray:
        """
        Get the current position of a particle, i.e., the position to evaluate next.

        Parameters
        ----------
        index : int
            The index of the particle.
        copy : bool, optional
            If False (default), the particle's live buffer is returned without copying. It is overwritten by the
            particle's next update. If True, a copy is returned.

        Returns
        -------
        numpy.ndarray
            The particle's position.
        """
        self._check_index(index)
        position = self.particles[index].position
        return position.copy() if copy else position

    def particle_fitness(self, index: int) -> FitnessIndex:
        """Get the personal best fitness of a particle."""
        self._check_index(index)
        return FitnessIndex(index, self.particles[index].p_best_fitness)

    @property
    def num_particles(self) -> int:
        """The number of particles."""
        return len(self.particles)

    @property
    def dims(self) -> int:
        """The dimension of the search space, 0 if not configured."""
        return 0 if self.global_best is None else self.global_best.dims

    def __len__(self) -> int:
        return len(self.particles)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(mode={self.mode.name}, particles={len(self.particles)}, dims={self.dims}, "
            f"iteration={self.iteration}, global_fitness={self.global_fitness})"
        )

    # ------------------------------------------------------------------------------------------------------------------
    # Checks
    # ------------------------------------------------------------------------------------------------------------------

    def _check_configured(self) -> None:
        if self.global_best is None:
            raise RuntimeError("Swarm is not configured. Call generic_set or one of the set_* methods first.")

    def _check_update_rule(self) -> None:
        if self.propagator is None:
            raise RuntimeError(f"Mode {self.mode.name} has no update rule. Call change_mode with another mode first.")

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.particles):
            raise IndexError(f"Particle index {index} out of range for swarm of {len(self.particles)} particles.")

    def _check_num_fitnesses(self, fitnesses: Sequence[float]) -> None:
        if len(fitnesses) != len(self.particles):
            raise ValueError(
                f"Number of fitness values ({len(fitnesses)}) does not match number of particles "
                f"({len(self.particles)})."
            )

    def _as_indices(self, indices: Iterable[Union[int, FitnessIndex]]) -> List[int]:
        """Convert ints or ``FitnessIndex`` items to validated particle indices."""
        indices = [
            index.particle if isinstance(index, FitnessIndex) else operator.index(index) for index in indices
        ]
        if len(indices) > len(self.particles):
            raise IndexError(
                f"Got {len(indices)} indices, but there are only {len(self.particles)} particles in the swarm."
            )
        for index in indices:
            self._check_index(index)
        return indices


class Swarm32(Swarm):
    """A swarm computing in single precision (``numpy.float32``)."""

    dtype = np.dtype(np.float32)


class Swarm64(Swarm):
    """A swarm computing in double precision (``numpy.float64``)."""

    dtype = np.dtype(np.float64)
