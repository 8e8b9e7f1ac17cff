"""
Domain objects for a generated draw.
The generator works on roster positions; these hold real players once the
session layer has resolved the positions.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


# ---------- Team colour ----------
class TeamColour(str, Enum):
    RED = "red"
    BLACK = "black"


# ---------- Doubles match ----------
@dataclass
class DoublesMatch:
    """
    One court in one wave: two Red players against two Black players.
    wave_number and court_number are 1-based. Scores start at zero and are
    filled in by whoever records results.
    """
    wave_number: int
    court_number: int
    red_player_1: str
    red_player_2: str
    black_player_1: str
    black_player_2: str
    red_score_first_set: int = 0
    black_score_first_set: int = 0
    red_score_second_set: int = 0
    black_score_second_set: int = 0
    is_complete: bool = False

    def players(self, colour: TeamColour) -> tuple[str, str]:
        if colour is TeamColour.RED:
            return (self.red_player_1, self.red_player_2)
        return (self.black_player_1, self.black_player_2)

    def to_dict(self) -> dict[str, Any]:
        return {
            "wave_number": self.wave_number,
            "court_number": self.court_number,
            "red": [self.red_player_1, self.red_player_2],
            "black": [self.black_player_1, self.black_player_2],
            "red_score_first_set": self.red_score_first_set,
            "black_score_first_set": self.black_score_first_set,
            "red_score_second_set": self.red_score_second_set,
            "black_score_second_set": self.black_score_second_set,
            "is_complete": self.is_complete,
        }
