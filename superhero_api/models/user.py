"""
User Data Models

Contains user-related data structures.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class User:
    """User account and game progress counters."""
    id: str
    email: str
    username: str
    higher_lower_games_played: int = 0
    higher_lower_game_highest_score: int = 0
    draft_games_played: int = 0
    draft_game_wins: int = 0
    draft_game_losses: int = 0
    password_hash: Optional[str] = None  # Never serialized

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> 'User':
        return cls(
            id=str(doc['_id']),
            email=doc.get('email', ''),
            username=doc.get('username', ''),
            higher_lower_games_played=doc.get('higherLowerGamesPlayed', 0),
            higher_lower_game_highest_score=doc.get('higherLowerGameHighestScore', 0),
            draft_games_played=doc.get('draftGamesPlayed', 0),
            draft_game_wins=doc.get('draftGameWins', 0),
            draft_game_losses=doc.get('draftGameLosses', 0),
            password_hash=doc.get('password'),
        )

    def identity(self) -> Dict[str, str]:
        """The ``{_id, email, username}`` triple carried in bearer tokens."""
        return {'_id': self.id, 'email': self.email, 'username': self.username}

    def to_dict(self) -> Dict[str, Any]:
        return {
            '_id': self.id,
            'email': self.email,
            'username': self.username,
            'higherLowerGamesPlayed': self.higher_lower_games_played,
            'higherLowerGameHighestScore': self.higher_lower_game_highest_score,
            'draftGamesPlayed': self.draft_games_played,
            'draftGameWins': self.draft_game_wins,
            'draftGameLosses': self.draft_game_losses,
        }
