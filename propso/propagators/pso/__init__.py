__all__ = [
    "Vanilla",
    "ConstantInertia",
    "LinearInertiaReduction",
    "Constriction",
    "DynamicInertiaMaxVelocityReduction",
    "clamp_velocity",
    "constriction_coefficient",
]

from .constriction import Constriction, constriction_coefficient
from .inertia import ConstantInertia, DynamicInertiaMaxVelocityReduction, LinearInertiaReduction
from .vanilla import Vanilla
from .velocity_clamping import clamp_velocity
