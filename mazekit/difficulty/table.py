"""Empirical turn preferences of a human solving a maze without a map.

Keys are ``(free directions, came_from)`` where ``came_from`` is the side the
walker just entered the cell through. Probabilities were measured on players
and are used as-is. Each entry names one primary and one secondary turn; at
three-way junctions the remaining direction is never taken.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, FrozenSet, Optional, Tuple

from ..grid import Direction

N, S, E, W = Direction.NORTH, Direction.SOUTH, Direction.EAST, Direction.WEST


@dataclass(frozen=True)
class Preference:
    primary: Direction
    probability: float
    secondary: Direction


PreferenceKey = Tuple[FrozenSet[Direction], Optional[Direction]]

PREFERENCES: Dict[PreferenceKey, Preference] = {
    # three-way junctions
    (frozenset({N, E, S}), W): Preference(E, 0.61, N),
    (frozenset({W, S, E}), N): Preference(S, 0.58, W),
    # two-way junctions
    (frozenset({E, S}), W): Preference(E, 0.72, S),
    (frozenset({W, S}), E): Preference(S, 0.85, W),
    (frozenset({E, S}), N): Preference(S, 0.62, E),
    (frozenset({E, N}), S): Preference(E, 0.75, N),
    (frozenset({N, E}), W): Preference(E, 0.87, N),
    (frozenset({W, E}), N): Preference(E, 0.65, W),
    (frozenset({N, S}), W): Preference(S, 0.80, N),
    (frozenset({W, S}), N): Preference(S, 0.82, W),
}

# Tie-break order when no preference applies: right, down, up, left.
FALLBACK_PRIORITY: Tuple[Direction, ...] = (E, S, N, W)


def lookup(free, came_from: Optional[Direction]) -> Optional[Preference]:
    return PREFERENCES.get((frozenset(free), came_from))


__all__ = ["Preference", "PREFERENCES", "FALLBACK_PRIORITY", "lookup"]
