"""
Game Service

Business logic for the Higher/Lower flow and draft result recording.

Sessions are stateless round-trips: the caller keeps the hero ids and the
running score between calls, and the server only reconciles the final score
with the stored high score when the session ends.
"""

import random
import re
from typing import Optional

from ..config.game_settings import (
    CORRECT_GUESS_POINTS, HIGHER, LOWER, MATCHUP_POOL_LIMIT, SESSION_ATTRIBUTES, TIE_ANSWER
)
from ..exceptions import HeroNotFound, InvalidArgument, UserNotFound
from ..models import GuessResult, Hero, HigherLowerSession, PersistResult, User
from .hero_store import HeroStore
from .matchup_service import pick_balanced_pair
from .user_store import UserStore

_LEADING_INT = re.compile(r'\s*([+-]?\d+)')


def integer_stat(hero: Hero, attribute: str) -> int:
    """Read the leading integer of a powerstat; missing or non-numeric values count as 0."""
    raw = hero.powerstats.get(attribute) if hero.powerstats else None
    if raw is None:
        return 0
    match = _LEADING_INT.match(str(raw))
    return int(match.group(1)) if match else 0


def correct_answer(value_a: int, value_b: int) -> str:
    """Whether A is Higher or Lower than B. Ties count as Higher."""
    if value_a > value_b:
        return HIGHER
    if value_a < value_b:
        return LOWER
    return TIE_ANSWER


def build_prompt(hero_a: Hero, hero_b: Hero, attribute: str) -> str:
    return (
        f"Is {hero_a.name}'s {attribute} HIGHER or LOWER "
        f"than {hero_b.name}'s {attribute}?"
    )


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class GameService:
    """
    Higher/Lower and draft game operations.

    This class handles:
    - Starting a session with a difficulty-balanced hero pair
    - Validating a single guess against hero stats
    - Persisting the final score with a raise-only high score
    - Recording draft wins and losses
    """

    def __init__(self,
                 hero_store: HeroStore,
                 user_store: UserStore,
                 rng: Optional[random.Random] = None,
                 pool_limit: int = MATCHUP_POOL_LIMIT):
        self.hero_store = hero_store
        self.user_store = user_store
        self.rng = rng or random.Random()
        self.pool_limit = pool_limit

    def start_session(self, attribute: str, user: Optional[User] = None) -> HigherLowerSession:
        """
        Start a Higher/Lower round on ``attribute``.

        Raises:
            InvalidArgument: If the attribute is missing or not playable
            InsufficientData: If the catalog cannot produce a pair
        """
        if not attribute:
            raise InvalidArgument("Attribute is required")
        if attribute not in SESSION_ATTRIBUTES:
            raise InvalidArgument(
                f"Invalid attribute '{attribute}'. Must be one of: {', '.join(SESSION_ATTRIBUTES)}"
            )

        matchup = pick_balanced_pair(
            self.hero_store, attribute, user, rng=self.rng, pool_limit=self.pool_limit
        )
        return HigherLowerSession(
            matchup=matchup,
            prompt=build_prompt(matchup.hero_a, matchup.hero_b, attribute),
        )

    def validate_guess(self, guess: str, attribute: str, hero_a_id: str, hero_b_id: str) -> GuessResult:
        """
        Check a "Higher"/"Lower" guess for hero A against hero B.

        The score delta is +1 for a correct guess and 0 otherwise; the running
        total is the caller's to keep.

        Raises:
            InvalidArgument: If any input is missing
            HeroNotFound: If either hero id is unknown
        """
        if not guess or not attribute or not hero_a_id or not hero_b_id:
            raise InvalidArgument("guess, attribute, heroAId and heroBId are required")

        hero_a = self.hero_store.find_by_id(hero_a_id)
        hero_b = self.hero_store.find_by_id(hero_b_id)
        if hero_a is None or hero_b is None:
            raise HeroNotFound("Invalid hero IDs")

        answer = correct_answer(integer_stat(hero_a, attribute), integer_stat(hero_b, attribute))
        is_correct = guess == answer

        return GuessResult(
            is_correct=is_correct,
            new_score=CORRECT_GUESS_POINTS if is_correct else 0,
            correct_answer=answer,
        )

    def end_session(self, user_id: str, final_score: int) -> PersistResult:
        """
        Count a finished session and ratchet the stored high score.

        Raises:
            InvalidArgument: If the score is not a non-negative integer
            UserNotFound: If the user no longer exists
        """
        if not _is_int(final_score) or final_score < 0:
            raise InvalidArgument("finalScore must be a non-negative integer")

        user = self.user_store.increment_and_raise_max(
            user_id, 'higherLowerGamesPlayed', 'higherLowerGameHighestScore', final_score
        )
        if user is None:
            raise UserNotFound("User not found")

        return PersistResult(
            higher_lower_games_played=user.higher_lower_games_played,
            higher_lower_game_highest_score=user.higher_lower_game_highest_score,
        )

    def update_highest_score(self, user_id: str, streak) -> User:
        """Older client entry point with the same ratchet; a missing or negative streak counts as 0."""
        if not _is_int(streak) or streak < 0:
            streak = 0

        user = self.user_store.increment_and_raise_max(
            user_id, 'higherLowerGamesPlayed', 'higherLowerGameHighestScore', streak
        )
        if user is None:
            raise UserNotFound("User not found")
        return user

    def record_draft_result(self, user_id: str, won: bool) -> User:
        """Count a finished draft game as a win or a loss."""
        if not isinstance(won, bool):
            raise InvalidArgument("won must be a boolean")

        user = self.user_store.record_draft_result(user_id, won)
        if user is None:
            raise UserNotFound("User not found")
        return user


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(hero_store: HeroStore,
                            user_store: UserStore,
                            rng: Optional[random.Random] = None,
                            pool_limit: int = MATCHUP_POOL_LIMIT) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(hero_store, user_store, rng, pool_limit)
    return _game_service
