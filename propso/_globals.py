from typing import Final

# Per-particle seeds are drawn from [0, SEED_BOUND) by the swarm's random source, mirroring a non-negative int64.
SEED_BOUND: Final[int] = 2**63 - 1
MINIMIZE_SENTINEL: Final[float] = float("inf")  # Worst possible fitness when minimizing
MAXIMIZE_SENTINEL: Final[float] = float("-inf")  # Worst possible fitness when maximizing
