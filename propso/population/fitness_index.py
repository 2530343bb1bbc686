from typing import NamedTuple


class FitnessIndex(NamedTuple):
    """A particle's index within its swarm together with its personal best fitness."""

    particle: int
    fitness: float
