"""
Draw Orchestrator: selection + packing with retries for each team, then the
Red and Black schedules are zipped court by court into doubles matches.

Structural problems (team too small, too few distinct pairs) are checked once
and raised straight away. Selection dead ends and packing failures only cost an
attempt; the whole draw fails with NoValidScheduleFoundError when either team
runs out of attempts, and nothing partial is returned.
"""
from __future__ import annotations

import math

from doublesdraw.config import DEFAULT_MAX_ATTEMPTS, MIN_PLAYERS_PER_TEAM, PACK_STEP_LIMIT
from doublesdraw.log import setup_logger

from .errors import (
    InsufficientCombinationsError,
    InsufficientPlayersError,
    NoFeasibleSelectionError,
    NoValidScheduleFoundError,
    PackingError,
)
from .packer import max_appearances, pack_waves
from .pairs import pair_count, pair_universe
from .rng import SeededRNG
from .schemas import CombinedMatch, CombinedSchedule, DrawConfig, Schedule
from .selector import select_pairs

logger = setup_logger(__name__)


def check_preconditions(players_per_team: int, waves: int, courts: int, max_attempts: int = 1) -> None:
    """
    Reject impossible geometry before any randomized work.
    ValueError for non-positive inputs, otherwise the structural ScheduleErrors.
    """
    for name, value in (
        ("players_per_team", players_per_team),
        ("waves", waves),
        ("courts", courts),
        ("max_attempts", max_attempts),
    ):
        if value < 1:
            raise ValueError(f"{name} must be a positive integer, got {value}")
    if players_per_team < max(MIN_PLAYERS_PER_TEAM, 2 * courts):
        raise InsufficientPlayersError(
            f"{players_per_team} players per team cannot fill {courts} court(s) with disjoint pairs "
            f"(need at least {max(MIN_PLAYERS_PER_TEAM, 2 * courts)})"
        )
    needed = waves * courts
    available = pair_count(players_per_team)
    if available < needed:
        raise InsufficientCombinationsError(
            f"{players_per_team} players form only {available} distinct pairs; "
            f"{waves} waves x {courts} courts need {needed}"
        )
    share = math.ceil(2 * needed / players_per_team)
    cap = max_appearances(waves)
    if share > cap:
        raise InsufficientPlayersError(
            f"Each player would play {share} of {waves} waves; at most {cap} is possible "
            "without three waves in a row"
        )


def combine_schedules(red: Schedule, black: Schedule) -> CombinedSchedule:
    """Pair Red and Black schedules positionally: same wave, same court."""
    if len(red) != len(black) or any(len(r) != len(b) for r, b in zip(red, black)):
        raise ValueError("Red and Black schedules must have the same waves x courts shape")
    return [
        [CombinedMatch(red=r, black=b) for r, b in zip(red_wave, black_wave)]
        for red_wave, black_wave in zip(red, black)
    ]


class DrawOrchestrator:
    """
    Runs one draw. Each attempt builds its selection and packing state from
    scratch; only the RNG carries over between attempts (and from Red to Black).
    """

    def __init__(self, config: DrawConfig, rng: SeededRNG | None = None) -> None:
        self.config = config
        self.rng = rng or SeededRNG(config.seed)
        self._universe = None

    @property
    def seed(self) -> int:
        return self.rng.seed

    def run_once(self) -> Schedule:
        """One selection + packing attempt. Raises the attempt-local errors."""
        cfg = self.config
        if self._universe is None:
            self._universe = pair_universe(cfg.players_per_team)
        selected = select_pairs(
            self._universe, cfg.players_per_team, cfg.matches_per_team, self.rng
        )
        return pack_waves(selected, cfg.waves, cfg.courts, step_limit=cfg.step_limit)

    def team_schedule(self, team: str = "team") -> Schedule:
        """Retry run_once up to max_attempts times."""
        cfg = self.config
        check_preconditions(cfg.players_per_team, cfg.waves, cfg.courts, cfg.max_attempts)
        for attempt in range(1, cfg.max_attempts + 1):
            try:
                schedule = self.run_once()
            except (NoFeasibleSelectionError, PackingError) as exc:
                logger.debug("%s attempt %d/%d failed: %s", team, attempt, cfg.max_attempts, exc)
                continue
            logger.info("%s schedule found on attempt %d", team, attempt)
            return schedule
        logger.warning("No valid %s schedule after %d attempts", team, cfg.max_attempts)
        raise NoValidScheduleFoundError(
            f"No valid {team} schedule after {cfg.max_attempts} attempts",
            attempts=cfg.max_attempts,
        )

    def run(self) -> CombinedSchedule:
        """Red then Black; both must succeed."""
        red = self.team_schedule("red")
        black = self.team_schedule("black")
        lineup = combine_schedules(red, black)
        logger.info(
            "Draw ready: %d waves x %d courts (seed=%s)",
            self.config.waves, self.config.courts, self.seed,
        )
        return lineup


def _build_config(
    players_per_team: int,
    waves: int,
    courts: int,
    max_attempts: int | None,
    step_limit: int | None,
    seed: int | None,
) -> DrawConfig:
    return DrawConfig(
        players_per_team=players_per_team,
        waves=waves,
        courts=courts,
        max_attempts=DEFAULT_MAX_ATTEMPTS if max_attempts is None else max_attempts,
        step_limit=PACK_STEP_LIMIT if step_limit is None else step_limit,
        seed=seed,
    )


def generate_team_schedule(
    players_per_team: int,
    waves: int,
    courts: int,
    max_attempts: int | None = None,
    *,
    seed: int | None = None,
    rng: SeededRNG | None = None,
    step_limit: int | None = None,
) -> Schedule:
    """Schedule for one team: `waves` lists of `courts` pairs."""
    config = _build_config(players_per_team, waves, courts, max_attempts, step_limit, seed)
    return DrawOrchestrator(config, rng).team_schedule()


def generate_combined_lineup(
    players_per_team: int,
    waves: int,
    courts: int,
    max_attempts: int | None = None,
    *,
    seed: int | None = None,
    rng: SeededRNG | None = None,
    step_limit: int | None = None,
) -> CombinedSchedule:
    """
    Full doubles draw: lineup[w][c] is the Red pair vs the Black pair on court c+1
    of wave w+1. Slots are 1-based roster positions within each team.
    Same seed (or same RNG state) and same arguments give the same draw.
    """
    config = _build_config(players_per_team, waves, courts, max_attempts, step_limit, seed)
    return DrawOrchestrator(config, rng).run()
