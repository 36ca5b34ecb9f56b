"""
Quiz Constants and Parameters

All tunable parameters for pool selection and session flow in one place.
"""

from enum import Enum


# ---- Mastery Pools ----

class Pool(str, Enum):
    """Mastery category an item currently belongs to."""
    UNSEEN = "unseen"    # Never answered in this scope
    WRONG = "wrong"      # Last answer was incorrect
    CORRECT = "correct"  # Last answer was correct


# ---- Selection Weights ----
# Relative chance of drawing from each pool. Empty pools drop out and the
# remaining weights are not renormalized.

POOL_WEIGHTS = {
    Pool.UNSEEN: 0.60,
    Pool.WRONG: 0.30,
    Pool.CORRECT: 0.10,
}

# Order in which pools are walked during the weighted draw
POOL_ORDER = (Pool.UNSEEN, Pool.WRONG, Pool.CORRECT)


# ---- Session Parameters ----

HISTORY_SIZE = 3            # Recent picks excluded from the next draw
OPTION_COUNT = 4            # Options per question (correct + distractors)
REVEAL_DELAY_MS = 1200      # Feedback display time before the next question
MIN_ITEM_COUNT = 4          # Smallest catalog scope accepted at setup
DEFAULT_TOTAL_QUESTIONS = 20
