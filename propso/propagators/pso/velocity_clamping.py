"""
This file contains the velocity clamp shared by all PSO propagators.
"""
from typing import Optional, Union

import numpy as np


def clamp_velocity(
    velocity: Union[float, np.ndarray], v_max: float, out: Optional[np.ndarray] = None
) -> np.ndarray:
    """
    Cut velocities down to a maximum magnitude while preserving their sign.

    Each component whose magnitude exceeds ``v_max`` is replaced by ``v_max`` carrying the component's sign, all other
    components are kept as they are. NaN components are never clamped and propagate.

    Parameters
    ----------
    velocity : float | numpy.ndarray
        The velocity (components) to clamp.
    v_max : float
        The maximum velocity magnitude.
    out : numpy.ndarray, optional
        The array to write the result into. May be ``velocity`` itself for clamping in place.

    Returns
    -------
    numpy.ndarray
        The clamped velocity. This is ``out`` if given.
    """
    clamped = np.where(np.abs(velocity) > v_max, np.copysign(v_max, velocity), velocity)
    if out is None:
        return clamped
    out[...] = clamped
    return out
