"""
Load-balanced pair selector.

Draws pairs one at a time from the universe, steering each draw toward the players
with the fewest selections so far, until waves x courts pairs are chosen for one
team. Greedy and randomized: a dead end fails the attempt instead of backtracking,
and the orchestrator retries with fresh randomness.
"""
from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from .errors import InsufficientCombinationsError, NoFeasibleSelectionError
from .rng import SeededRNG
from .schemas import Pair


def allowed_spread(target: int, players_per_team: int) -> int:
    """ceil(2M/N) - floor(2M/N): 0 when selections split evenly, else 1."""
    return 0 if (2 * target) % players_per_team == 0 else 1


@dataclass
class SelectionState:
    """
    Bookkeeping for one selection attempt.
    remaining keeps universe order so a seeded RNG picks the same pairs every run.
    """
    remaining: list[Pair]
    loads: dict[int, int]
    selected: list[Pair] = field(default_factory=list)

    @classmethod
    def start(cls, universe: Iterable[Pair], players_per_team: int) -> SelectionState:
        return cls(
            remaining=sorted(universe),
            loads={slot: 0 for slot in range(1, players_per_team + 1)},
        )

    def take(self, pair: Pair) -> None:
        self.remaining.remove(pair)
        self.selected.append(pair)
        self.loads[pair.a] += 1
        self.loads[pair.b] += 1

    def active_slots(self) -> set[int]:
        """Slots that still have at least one unselected pair."""
        return {slot for pair in self.remaining for slot in pair}

    def spread(self) -> int:
        return max(self.loads.values()) - min(self.loads.values())


def candidate_pool(state: SelectionState) -> list[Pair]:
    """
    Unselected pairs allowed by the current load gap.
      gap 0  -> every remaining pair
      gap 1  -> pairs without a max-load player; if none, pairs with a min-load player
      gap 2+ -> pairs without a max-load player and with at least one min-load player
    """
    active = state.active_slots()
    if not active:
        return []
    active_loads = [state.loads[s] for s in active]
    min_load, max_load = min(active_loads), max(active_loads)
    if min_load == max_load:
        return list(state.remaining)

    max_players = {s for s in active if state.loads[s] == max_load}
    min_players = {s for s in active if state.loads[s] == min_load}
    without_max = [
        p for p in state.remaining if p.a not in max_players and p.b not in max_players
    ]
    if max_load - min_load == 1:
        if without_max:
            return without_max
        return [p for p in state.remaining if p.a in min_players or p.b in min_players]
    return [p for p in without_max if p.a in min_players or p.b in min_players]


def select_pairs(
    universe: Iterable[Pair],
    players_per_team: int,
    target: int,
    rng: SeededRNG,
) -> list[Pair]:
    """
    Select exactly `target` distinct pairs with per-player counts as even as possible.
    Returned in selection order.

    Raises InsufficientCombinationsError when the universe holds fewer than `target`
    pairs, NoFeasibleSelectionError when the balancer runs out of candidates or
    finishes with a wider load spread than integer division allows.
    """
    state = SelectionState.start(universe, players_per_team)
    if len(state.remaining) < target:
        raise InsufficientCombinationsError(
            f"Only {len(state.remaining)} distinct pairs for {target} pair slots"
        )
    while len(state.selected) < target:
        pool = candidate_pool(state)
        if not pool:
            raise NoFeasibleSelectionError(
                f"No candidate pair after {len(state.selected)} of {target} selections"
            )
        state.take(rng.choice(pool))

    limit = allowed_spread(target, players_per_team)
    if state.spread() > limit:
        raise NoFeasibleSelectionError(
            f"Selection finished with load spread {state.spread()} (allowed {limit})"
        )
    return state.selected
