"""
Dynamic Matchup Selection

Selects two heroes for a Higher/Lower round by:
1. Filtering heroes that have a numeric value for the requested attribute.
2. Scoring every candidate pair by how well its attribute gap fits the
   target window of the player's difficulty bucket.
3. Returning the best pair, with ties broken by a random shuffle.

Difficulty is derived from the player's best recorded Higher/Lower score.
"""

import math
import random
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from ..config.game_settings import (
    EASY, HARD, MEDIUM, HARD_STREAK, MEDIUM_STREAK, MATCHUP_POOL_LIMIT,
    OUT_OF_RANGE_PENALTY, POWERSTAT_ATTRIBUTES, TARGET_DIFF_RANGES
)
from ..exceptions import InsufficientData, InvalidArgument, NoSuitablePair
from ..models import Hero, MatchupResult, User

Number = Union[int, float]


def difficulty_bucket(highest_streak: Optional[int] = 0) -> str:
    """
    Map a player's best streak to a difficulty bucket.

    Args:
        highest_streak: Best recorded Higher/Lower score, None treated as 0

    Returns:
        "easy", "medium" or "hard"
    """
    streak = highest_streak or 0
    if streak < MEDIUM_STREAK:
        return EASY
    if streak < HARD_STREAK:
        return MEDIUM
    return HARD


def target_diff_range(bucket: str) -> Dict[str, int]:
    """Inclusive ``{min, max}`` attribute gap for a bucket; unknown buckets get the hard range."""
    return dict(TARGET_DIFF_RANGES.get(bucket, TARGET_DIFF_RANGES[HARD]))


def numeric_stat(hero: Optional[Hero], attribute: str) -> Optional[Number]:
    """
    Parse a hero's powerstat as a number.

    Powerstats are stored as strings and may be missing or hold values such
    as ``"null"``. Returns None for anything that is not a finite number.
    """
    if hero is None or not hero.powerstats:
        return None
    raw = hero.powerstats.get(attribute)
    if raw is None or isinstance(raw, bool):
        return None
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(value):
        return None
    return int(value) if value.is_integer() else value


def highest_streak_of(user: Union[User, Mapping[str, Any], None]) -> int:
    """Best Higher/Lower score recorded for ``user``, 0 when unknown."""
    if user is None:
        return 0
    if isinstance(user, User):
        return user.higher_lower_game_highest_score or 0
    return user.get('higherLowerGameHighestScore') or 0


def score_pair(diff: Number, target_range: Dict[str, int]) -> Number:
    """
    Cost of a pair gap against the target window; lower is better.

    Gaps inside the window cost their distance to the window midpoint. Gaps
    outside it cost their distance to the nearest edge plus a fixed penalty,
    so any in-range pair beats any out-of-range pair of similar distance.
    """
    low, high = target_range['min'], target_range['max']
    if diff < low:
        return (low - diff) + OUT_OF_RANGE_PENALTY
    if diff > high:
        return (diff - high) + OUT_OF_RANGE_PENALTY
    return abs(diff - (low + high) / 2)


def pick_balanced_pair(hero_store,
                       attribute: str,
                       user: Union[User, Mapping[str, Any], None] = None,
                       rng: Optional[random.Random] = None,
                       pool_limit: int = MATCHUP_POOL_LIMIT) -> MatchupResult:
    """
    Choose the hero pair whose gap on ``attribute`` best suits the player.

    Args:
        hero_store: Catalog reader exposing ``list_up_to(n)``
        attribute: Powerstat to compare, e.g. "strength"
        user: Optional player whose best score sets the difficulty
        rng: Random source used for the tie-breaking shuffle
        pool_limit: Maximum number of heroes scanned

    Returns:
        MatchupResult with two distinct heroes and a non-zero gap

    Raises:
        InvalidArgument: If the attribute is missing or not a powerstat
        InsufficientData: If fewer than two heroes have a numeric value
        NoSuitablePair: If every candidate pair has identical values
    """
    if not attribute:
        raise InvalidArgument("Attribute is required for dynamic matchup selection.")
    if attribute not in POWERSTAT_ATTRIBUTES:
        raise InvalidArgument(f"Unsupported attribute '{attribute}'.")

    difficulty = difficulty_bucket(highest_streak_of(user))
    target_range = target_diff_range(difficulty)

    valid: List[Tuple[Hero, Number]] = []
    for hero in hero_store.list_up_to(pool_limit):
        stat = numeric_stat(hero, attribute)
        if stat is not None:
            valid.append((hero, stat))

    if len(valid) < 2:
        raise InsufficientData(
            f"Not enough heroes with numeric '{attribute}' stats to create a matchup."
        )

    # Shuffle so equal-scoring pairs are not always resolved in storage order
    (rng or random.Random()).shuffle(valid)

    best: Optional[Tuple[Hero, Hero, Number]] = None
    best_score = math.inf

    for i in range(len(valid)):
        hero_a, stat_a = valid[i]
        for j in range(i + 1, len(valid)):
            hero_b, stat_b = valid[j]

            diff = abs(stat_a - stat_b)
            if diff == 0:
                continue

            score = score_pair(diff, target_range)
            if score < best_score:
                best_score = score
                best = (hero_a, hero_b, diff)

    if best is None:
        raise NoSuitablePair(
            f"Unable to find a balanced hero pair for attribute '{attribute}'."
        )

    hero_a, hero_b, diff = best
    return MatchupResult(
        hero_a=hero_a,
        hero_b=hero_b,
        attribute=attribute,
        difficulty=difficulty,
        diff=diff,
    )
