"""
Game Configuration Constants Module

Rules for the Higher/Lower game and the matchup selector. All tunable
parameters are centralized here so pacing can be adjusted without touching
the selection algorithm.
"""

from typing import Dict, Final, Tuple

# Every powerstat a hero document may carry
POWERSTAT_ATTRIBUTES: Final[Tuple[str, ...]] = (
    'intelligence', 'strength', 'speed', 'durability', 'power', 'combat'
)

# Attributes a Higher/Lower session may be started on
SESSION_ATTRIBUTES: Final[Tuple[str, ...]] = ('strength', 'speed', 'intelligence', 'power')

# Difficulty buckets
EASY: Final[str] = 'easy'
MEDIUM: Final[str] = 'medium'
HARD: Final[str] = 'hard'

# Highest-streak thresholds: below MEDIUM_STREAK is easy, below HARD_STREAK is medium
MEDIUM_STREAK: Final[int] = 5
HARD_STREAK: Final[int] = 10

TARGET_DIFF_RANGES: Final[Dict[str, Dict[str, int]]] = {
    EASY: {'min': 20, 'max': 50},
    MEDIUM: {'min': 10, 'max': 25},
    HARD: {'min': 3, 'max': 15},
}
"""
Inclusive attribute-gap window per bucket. Easy rounds get large, obvious
gaps; hard rounds get close, tricky comparisons.
"""

# Score penalty added to pairs whose gap falls outside the target window
OUT_OF_RANGE_PENALTY: Final[int] = 10

# Upper bound on heroes scanned per matchup (the pair scan is quadratic)
MATCHUP_POOL_LIMIT: Final[int] = 150

# Guess tokens
HIGHER: Final[str] = 'Higher'
LOWER: Final[str] = 'Lower'
TIE_ANSWER: Final[str] = HIGHER

# Points awarded for a correct guess
CORRECT_GUESS_POINTS: Final[int] = 1

# User field constraints
USERNAME_MIN_LENGTH: Final[int] = 4
PASSWORD_MIN_LENGTH: Final[int] = 5
