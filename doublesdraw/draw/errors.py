"""
Error taxonomy for draw generation.

Structural errors (InsufficientPlayersError, InsufficientCombinationsError) are
detected once up front and never retried. NoFeasibleSelectionError and
PackingError belong to a single randomized attempt; the orchestrator swallows them
and only escalates to NoValidScheduleFoundError when the retry budget is spent.
"""
from __future__ import annotations


class ScheduleError(ValueError):
    """Base class for every draw generation failure."""


class InsufficientPlayersError(ScheduleError):
    """Team too small to fill a wave with disjoint pairs (or to rest every third wave)."""


class InsufficientCombinationsError(ScheduleError):
    """Fewer distinct pairs than waves x courts slots; a pair would have to repeat."""


class NoFeasibleSelectionError(ScheduleError):
    """The load balancer hit a dead end in this attempt."""


class PackingError(ScheduleError):
    """The selected pairs cannot be arranged into waves in this attempt."""


class NoValidScheduleFoundError(ScheduleError):
    """Every attempt failed to select and pack a schedule."""

    user_message = "could not generate a valid draw; try adjusting team size, waves, or courts"

    def __init__(self, message: str, attempts: int = 0) -> None:
        super().__init__(message)
        self.attempts = attempts
