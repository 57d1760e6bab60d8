"""Human-like difficulty estimation."""

__all__ = [
    "HumanWalker",
    "WalkResult",
    "STEP_SCALE",
    "PREFERENCES",
    "Preference",
    "estimate_human_steps",
]

from .table import PREFERENCES, Preference
from .walker import STEP_SCALE, HumanWalker, WalkResult, estimate_human_steps
