"""Spanning-tree maze generators."""

__all__ = [
    "AldousBroderGenerator",
    "ALDOUS_BRODER_MAX_DIMENSION",
    "BinaryTreeGenerator",
    "RecursiveBacktrackerGenerator",
]

from .aldous_broder import ALDOUS_BRODER_MAX_DIMENSION, AldousBroderGenerator
from .backtracker import RecursiveBacktrackerGenerator
from .binary_tree import BinaryTreeGenerator
