"""
Runtime settings for the draw generator.
Read once from the environment at import time; every entry point also takes
explicit overrides.
"""
from __future__ import annotations

import os

DEFAULT_MAX_ATTEMPTS = int(os.environ.get("DRAW_MAX_ATTEMPTS", "10"))
# Placements one packing search may try before giving up; 0 = unlimited
PACK_STEP_LIMIT = int(os.environ.get("DRAW_PACK_STEP_LIMIT", "200000"))
LOG_LEVEL = os.environ.get("DRAW_LOG_LEVEL", "INFO").upper()

# A player may sit in at most this many waves in a row
MAX_CONSECUTIVE_WAVES = 2
# Smallest team that can field two disjoint pairs
MIN_PLAYERS_PER_TEAM = 4
