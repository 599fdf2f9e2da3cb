"""
Game Data Models

Results produced by the Higher/Lower game flow. None of these are persisted.
"""

from dataclasses import dataclass
from typing import Any, Dict

from .hero import Hero


@dataclass
class MatchupResult:
    """A balanced hero pair chosen for one Higher/Lower round."""
    hero_a: Hero
    hero_b: Hero
    attribute: str
    difficulty: str  # "easy" | "medium" | "hard"
    diff: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            'heroA': self.hero_a.to_dict(),
            'heroB': self.hero_b.to_dict(),
            'attribute': self.attribute,
            'difficulty': self.difficulty,
            'diff': self.diff,
        }


@dataclass
class GuessResult:
    """Outcome of a single Higher/Lower guess."""
    is_correct: bool
    new_score: int
    correct_answer: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            'isCorrect': self.is_correct,
            'newScore': self.new_score,
            'correctAnswer': self.correct_answer,
        }


@dataclass
class PersistResult:
    """Counters stored on the user after a session ends."""
    higher_lower_games_played: int
    higher_lower_game_highest_score: int

    def to_dict(self) -> Dict[str, int]:
        return {
            'higherLowerGamesPlayed': self.higher_lower_games_played,
            'higherLowerGameHighestScore': self.higher_lower_game_highest_score,
        }


@dataclass
class HigherLowerSession:
    """Opening state of a Higher/Lower round handed back to the caller."""
    matchup: MatchupResult
    prompt: str

    def to_dict(self) -> Dict[str, Any]:
        data = self.matchup.to_dict()
        data['prompt'] = self.prompt
        return data
