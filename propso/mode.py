"""
This file contains the mode flag selecting which velocity update rule a swarm applies to its particles.
"""
import enum


class Mode(enum.IntEnum):
    """
    The update rule applied to every particle of a swarm.

    The five public members correspond to the five update rules in ``propso.propagators.pso``.
    ``GENERIC`` is an internal sentinel marking a swarm that has not been configured through one of the mode-specific
    configuration calls yet; it has no update rule of its own.
    """

    GENERIC = 0
    VANILLA = 1
    CONSTANT_INERTIA = 2
    LINEAR_INERTIA_REDUCTION = 3
    CONSTRICTION = 4
    DYNAMIC_INERTIA_MAX_VELOCITY_REDUCTION = 5
