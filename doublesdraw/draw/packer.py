"""
Wave/court packer: arranges a selected pair set into a waves x courts grid.

Depth-first backtracking over the pairs in their given order. Within a wave no
slot may repeat, and no slot may appear in more than MAX_CONSECUTIVE_WAVES waves
in a row. Every placement returns an undo record; backtracking replays it, so the
search state is owned by one WavePacker and never shared.
"""
from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass
from functools import lru_cache

from doublesdraw.config import MAX_CONSECUTIVE_WAVES

from .errors import PackingError
from .schemas import Pair, Schedule

_NEVER = -1  # last-wave marker for slots not yet placed


def max_appearances(waves: int, max_consecutive: int = MAX_CONSECUTIVE_WAVES) -> int:
    """Most waves one slot can fill without exceeding the consecutive cap."""
    return waves - waves // (max_consecutive + 1)


@lru_cache(maxsize=None)
def max_appearances_after(waves_left: int, run: int, max_consecutive: int = MAX_CONSECUTIVE_WAVES) -> int:
    """
    Most of the next `waves_left` waves a slot can still fill when it is on a
    streak of `run` waves (0 = sat out the last wave).
    """
    if waves_left <= 0:
        return 0
    best = max_appearances_after(waves_left - 1, 0, max_consecutive)
    if run < max_consecutive:
        best = max(best, 1 + max_appearances_after(waves_left - 1, run + 1, max_consecutive))
    return best


@dataclass(frozen=True)
class Placement:
    """Undo record for one placed pair: the run/last-wave values it overwrote."""
    index: int
    wave: int
    prev_a: tuple[int, int]  # (run, last_wave) of pair.a before placing
    prev_b: tuple[int, int]


class WavePacker:
    """
    One packing attempt. Not reusable and not thread-safe; build a new packer
    per attempt.
    """

    def __init__(
        self,
        pairs: Sequence[Pair],
        waves: int,
        courts: int,
        step_limit: int | None = None,
        max_consecutive: int = MAX_CONSECUTIVE_WAVES,
    ) -> None:
        if waves < 1 or courts < 1:
            raise ValueError("waves and courts must be positive")
        if len(pairs) != waves * courts:
            raise ValueError(
                f"Need exactly {waves * courts} pairs for {waves} waves x {courts} courts, got {len(pairs)}"
            )
        self.pairs = list(pairs)
        self.waves = waves
        self.courts = courts
        self.step_limit = step_limit or None
        self.max_consecutive = max_consecutive
        self.steps = 0
        self._grid: list[list[Pair]] = [[] for _ in range(waves)]
        self._in_wave: list[set[int]] = [set() for _ in range(waves)]
        self._used = [False] * len(self.pairs)
        self._run: dict[int, int] = {}
        self._last: dict[int, int] = {}
        # unplaced pairs per slot
        self._pending = Counter(slot for pair in self.pairs for slot in pair)

    # ---------- Bookkeeping ----------

    def _run_if_placed(self, slot: int, wave: int) -> int:
        if self._last.get(slot, _NEVER) == wave - 1:
            return self._run.get(slot, 0) + 1
        return 1

    def can_place(self, pair: Pair, wave: int) -> bool:
        members = self._in_wave[wave]
        if pair.a in members or pair.b in members:
            return False
        return (
            self._run_if_placed(pair.a, wave) <= self.max_consecutive
            and self._run_if_placed(pair.b, wave) <= self.max_consecutive
        )

    def place(self, index: int, wave: int) -> Placement:
        pair = self.pairs[index]
        undo = Placement(
            index=index,
            wave=wave,
            prev_a=(self._run.get(pair.a, 0), self._last.get(pair.a, _NEVER)),
            prev_b=(self._run.get(pair.b, 0), self._last.get(pair.b, _NEVER)),
        )
        for slot in pair:
            self._run[slot] = self._run_if_placed(slot, wave)
            self._last[slot] = wave
        self._grid[wave].append(pair)
        self._in_wave[wave].update(pair)
        self._used[index] = True
        self._pending.subtract(pair)
        return undo

    def undo(self, placement: Placement) -> None:
        pair = self.pairs[placement.index]
        for slot, (run, last) in ((pair.a, placement.prev_a), (pair.b, placement.prev_b)):
            if last == _NEVER:
                self._run.pop(slot, None)
                self._last.pop(slot, None)
            else:
                self._run[slot] = run
                self._last[slot] = last
        self._grid[placement.wave].remove(pair)
        self._in_wave[placement.wave].difference_update(pair)
        self._used[placement.index] = False
        self._pending.update(pair)

    # ---------- Search ----------

    def _future_fits(self, wave: int) -> bool:
        """After `wave` is full, can every slot still play all its unplaced pairs?"""
        waves_left = self.waves - wave - 1
        for slot, need in self._pending.items():
            if need <= 0:
                continue
            run = self._run.get(slot, 0) if self._last.get(slot, _NEVER) == wave else 0
            if need > max_appearances_after(waves_left, run, self.max_consecutive):
                return False
        return True

    def _fill(self, wave: int, start: int) -> bool:
        if wave == self.waves:
            return True
        if len(self._grid[wave]) == self.courts:
            if not self._future_fits(wave):
                return False
            return self._fill(wave + 1, 0)
        for i in range(start, len(self.pairs)):
            if self._used[i] or not self.can_place(self.pairs[i], wave):
                continue
            self.steps += 1
            if self.step_limit is not None and self.steps > self.step_limit:
                raise PackingError(f"Packing search gave up after {self.step_limit} placements")
            placement = self.place(i, wave)
            if self._fill(wave, i + 1):
                return True
            self.undo(placement)
        return False

    def _check_frequencies(self) -> None:
        cap = max_appearances(self.waves, self.max_consecutive)
        for slot, count in sorted(self._pending.items()):
            if count > cap:
                raise PackingError(
                    f"Player {slot} is in {count} pairs but can play at most {cap} of {self.waves} waves"
                )

    def pack(self) -> Schedule:
        """Return the grid, or raise PackingError when no legal arrangement exists."""
        self._check_frequencies()
        if not self._fill(0, 0):
            raise PackingError(
                f"No arrangement of {len(self.pairs)} pairs into {self.waves} waves x {self.courts} courts"
            )
        return [list(wave) for wave in self._grid]


def pack_waves(
    pairs: Sequence[Pair],
    waves: int,
    courts: int,
    step_limit: int | None = None,
) -> Schedule:
    """Arrange `pairs` into `waves` waves of `courts` pairs. See WavePacker."""
    return WavePacker(pairs, waves, courts, step_limit=step_limit).pack()
