"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import GuessResult, HigherLowerSession, MatchupResult, PersistResult
from .hero import Hero
from .user import User

__all__ = ['GuessResult', 'HigherLowerSession', 'MatchupResult', 'PersistResult', 'Hero', 'User']
