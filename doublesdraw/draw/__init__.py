"""
Fair doubles draw generator: two equal teams, waves x courts grid, every court a
pair from each team. No teammate pair repeats, appearances are spread as evenly
as integer division allows, and nobody plays three waves in a row.
"""
from .schemas import (
    Pair,
    Wave,
    Schedule,
    CombinedMatch,
    CombinedSchedule,
    DrawConfig,
    combined_schedule_to_list,
)
from .errors import (
    ScheduleError,
    InsufficientPlayersError,
    InsufficientCombinationsError,
    NoFeasibleSelectionError,
    PackingError,
    NoValidScheduleFoundError,
)
from .rng import SeededRNG, fresh_seed
from .pairs import pair_universe, pair_count
from .selector import SelectionState, allowed_spread, candidate_pool, select_pairs
from .packer import Placement, WavePacker, max_appearances, pack_waves
from .orchestrator import (
    DrawOrchestrator,
    check_preconditions,
    combine_schedules,
    generate_combined_lineup,
    generate_team_schedule,
)
from .validation import appearance_counts, longest_run, validate_schedule

__all__ = [
    "Pair",
    "Wave",
    "Schedule",
    "CombinedMatch",
    "CombinedSchedule",
    "DrawConfig",
    "combined_schedule_to_list",
    "ScheduleError",
    "InsufficientPlayersError",
    "InsufficientCombinationsError",
    "NoFeasibleSelectionError",
    "PackingError",
    "NoValidScheduleFoundError",
    "SeededRNG",
    "fresh_seed",
    "pair_universe",
    "pair_count",
    "SelectionState",
    "allowed_spread",
    "candidate_pool",
    "select_pairs",
    "Placement",
    "WavePacker",
    "max_appearances",
    "pack_waves",
    "DrawOrchestrator",
    "check_preconditions",
    "combine_schedules",
    "generate_combined_lineup",
    "generate_team_schedule",
    "appearance_counts",
    "longest_run",
    "validate_schedule",
]
