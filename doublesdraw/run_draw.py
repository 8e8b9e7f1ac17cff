"""
Print a Red vs Black doubles draw in the terminal.
Slots are roster positions (1-based) within each team.

  python -m doublesdraw.run_draw --players 12 --waves 6 --courts 3 --seed 7 --check
"""
from __future__ import annotations

import argparse
import sys

from doublesdraw.config import DEFAULT_MAX_ATTEMPTS
from doublesdraw.draw import (
    CombinedSchedule,
    NoValidScheduleFoundError,
    ScheduleError,
    SeededRNG,
    generate_combined_lineup,
    validate_schedule,
)


def _print_lineup(lineup: CombinedSchedule, seed: int) -> None:
    waves = len(lineup)
    courts = len(lineup[0]) if lineup else 0
    print(f"\n  Draw: {waves} waves x {courts} courts  [seed={seed}]")
    print("  " + "-" * 56)
    for w, wave in enumerate(lineup, start=1):
        print(f"  Wave {w}")
        for c, m in enumerate(wave, start=1):
            r1, r2 = m.red.as_tuple()
            b1, b2 = m.black.as_tuple()
            print(f"    Court {c}:  Red {r1:>2} & {r2:<2}  vs  Black {b1:>2} & {b2:<2}")
    print()


def _check(lineup: CombinedSchedule, players: int, waves: int, courts: int) -> list[str]:
    problems: list[str] = []
    sides = {
        "red": [[m.red for m in wave] for wave in lineup],
        "black": [[m.black for m in wave] for wave in lineup],
    }
    for colour, side in sides.items():
        problems.extend(f"{colour}: {p}" for p in validate_schedule(side, players, waves, courts))
    return problems


def run(
    players: int,
    waves: int,
    courts: int,
    seed: int | None = None,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    check: bool = False,
) -> int:
    rng = SeededRNG(seed)
    try:
        lineup = generate_combined_lineup(players, waves, courts, max_attempts, rng=rng)
    except NoValidScheduleFoundError as exc:
        print(f"{exc.user_message} ({exc})", file=sys.stderr)
        return 2
    except ScheduleError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    _print_lineup(lineup, rng.seed)
    if check:
        problems = _check(lineup, players, waves, courts)
        if problems:
            for p in problems:
                print(f"  ! {p}")
            return 3
        print("  All checks passed.")
    return 0


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate a fair Red vs Black doubles draw.")
    parser.add_argument("--players", type=int, required=True, help="Players per team")
    parser.add_argument("--waves", type=int, required=True, help="Number of waves (rounds)")
    parser.add_argument("--courts", type=int, required=True, help="Courts per wave")
    parser.add_argument("--seed", type=int, default=None, help="RNG seed for reproducibility")
    parser.add_argument("--max-attempts", type=int, default=DEFAULT_MAX_ATTEMPTS, help="Retries per team")
    parser.add_argument("--check", action="store_true", help="Verify the draw's fairness properties")
    args = parser.parse_args()
    if min(args.players, args.waves, args.courts, args.max_attempts) < 1:
        parser.error("--players, --waves, --courts and --max-attempts must be positive")
    sys.exit(run(args.players, args.waves, args.courts, args.seed, args.max_attempts, args.check))


if __name__ == "__main__":
    main()
