"""
This package bundles the classes describing the members of a swarm.
"""
__all__ = ["FitnessIndex", "Particle"]
from .fitness_index import FitnessIndex
from .particle import Particle
