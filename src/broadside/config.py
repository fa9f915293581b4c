"""Central configuration for runtime-tunable parameters.

All tunables can be overridden via environment variables so that simulated
matches run with sensible defaults, while the automated test-suite can pin
the random seed or shrink the search budgets when necessary.
"""

from __future__ import annotations

import os


# ===========================================================================
# Board Limits
# ===========================================================================
# Hard upper bounds on board dimensions. A catalog asking for more rows or
# columns than this is rejected at construction time.
MAXROWS: int = 10
MAXCOLS: int = 10

# BROADSIDE_BOARD_ROWS / BROADSIDE_BOARD_COLS: Board dimensions used by the
#   simulation CLI when no --rows/--cols flag is given.
#   Default to 10 (for a 10x10 grid).
#   Example: export BROADSIDE_BOARD_ROWS=8
BOARD_ROWS: int = int(os.getenv("BROADSIDE_BOARD_ROWS", "10"))
BOARD_COLS: int = int(os.getenv("BROADSIDE_BOARD_COLS", "10"))


# ===========================================================================
# Board Markers
# ===========================================================================
# Characters used when a board is rendered to rows of text. Ship symbols may
# never collide with any of these.
HIT_MARK = "X"
MISS_MARK = "o"
EMPTY_MARK = "."
RESERVED_MARKS = frozenset({HIT_MARK, MISS_MARK, EMPTY_MARK})


# ===========================================================================
# Fleet
# ===========================================================================
# Standard ship roster: list of (name, length, symbol) tuples. Not typically
# overridden by env vars.
SHIPS = [
    ("aircraft carrier", 5, "A"),
    ("battleship", 4, "B"),
    ("destroyer", 3, "D"),
    ("submarine", 3, "S"),
    ("patrol boat", 2, "P"),
]


# ===========================================================================
# Automated Player Tuning
# ===========================================================================
# BROADSIDE_PLACEMENT_ATTEMPTS: How many randomized (or blocked) placement
#   attempts an automated player makes before giving up on that strategy.
#   Defaults to 50.
#   Example: export BROADSIDE_PLACEMENT_ATTEMPTS=10
PLACEMENT_ATTEMPTS: int = int(os.getenv("BROADSIDE_PLACEMENT_ATTEMPTS", "50"))

# BROADSIDE_QUEUE_LIMIT: Upper bound on the target-mode candidate queue. If the
#   queue grows past this the targeting logic abandons the chase and hunts.
#   Defaults to 200.
QUEUE_LIMIT: int = int(os.getenv("BROADSIDE_QUEUE_LIMIT", "200"))


# ===========================================================================
# Randomness
# ===========================================================================
# BROADSIDE_SEED: If set, the simulation CLI seeds its random source with this
#   integer so that a run can be reproduced exactly.
#   Defaults to unset (fresh entropy every run).
#   Example: export BROADSIDE_SEED=1234
SEED: int | None = int(os.environ["BROADSIDE_SEED"]) if os.getenv("BROADSIDE_SEED") else None


# ===========================================================================
# Debugging and Logging
# ===========================================================================
# BROADSIDE_DEBUG: If "1", enables detailed debug logging across modules.
#   Defaults to "0" (disabled).
#   Example: export BROADSIDE_DEBUG=1
DEBUG: bool = os.getenv("BROADSIDE_DEBUG", "0") == "1"
