"""
Numbers round settings.

Pool contents and score bands are game rules; the environment only
overrides operational knobs (logging, how hard to try for a solvable deal).
"""

import os

# --- Tile pools ---
LARGE_POOL = (25, 50, 75, 100)
SMALL_POOL = tuple(n for n in range(1, 11) for _ in range(2))
TILE_COUNT = 6
MAX_LARGE = 4

# --- Solver ---
# Reachable values above this are dropped from the search.
MAX_REACHABLE_VALUE = 50000

# --- Scoring: (max diff, points), checked in order ---
SCORE_BANDS = (
    (0, 10),
    (5, 7),
    (10, 5),
)

# --- Round dealing ---
SOLVABLE_ROUND_ATTEMPTS = int(os.getenv("NUMBERS_SOLVABLE_ATTEMPTS", "50"))

# --- Logging ---
LOG_LEVEL = os.getenv("NUMBERS_LOG_LEVEL", "WARNING").upper()
