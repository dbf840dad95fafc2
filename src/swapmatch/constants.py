GRID_COLS = 8
GRID_ROWS = 8
NUM_COLORS = 7

# Sentinel for a cleared cell awaiting refill. Never visible between player moves.
EMPTY = 0

# Shortest run that counts as a match.
MIN_RUN = 3

# Base score keyed by cell count; larger matches add SCORE_PER_EXTRA_CELL per cell past 5.
BASE_SCORES = {3: 100, 4: 200, 5: 300}
SCORE_PER_EXTRA_CELL = 50
# Subtracted from matches that span both axes (T, L, plus).
CROSS_PENALTY = 50

# Layout attempts before the generator gives up.
GENERATOR_MAX_ATTEMPTS = 200
