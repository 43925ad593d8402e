"""Solver defaults. Every value can be overridden per call."""

# Results closer than this count as equal (probability sums, duality gap)
TOLERANCE = 1e-6

# maximin == minimax comparison; only absorbs float noise
SADDLE_TOLERANCE = 1e-10

MAX_ITERATIONS = 10_000

BACKENDS = ("glop", "highs")
DEFAULT_BACKEND = "glop"

# Hurwicz optimism coefficient
DEFAULT_ALPHA = 0.5
