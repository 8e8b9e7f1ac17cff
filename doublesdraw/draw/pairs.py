"""
Pair universe: every unordered pair of player slots for a team of size N.
"""
from __future__ import annotations

from itertools import combinations

from .errors import InsufficientPlayersError
from .schemas import Pair


def pair_count(players_per_team: int) -> int:
    """N(N-1)/2."""
    return players_per_team * (players_per_team - 1) // 2


def pair_universe(players_per_team: int) -> frozenset[Pair]:
    """
    All canonical pairs over slots 1..N.
    Raises InsufficientPlayersError when N < 2 (no pair can be formed).
    """
    if players_per_team < 2:
        raise InsufficientPlayersError(
            f"Need at least 2 players to form a pair, got {players_per_team}"
        )
    slots = range(1, players_per_team + 1)
    return frozenset(Pair(a, b) for a, b in combinations(slots, 2))
