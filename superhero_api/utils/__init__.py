"""
Utilities Package

Contains utility functions, decorators, and helper modules.
"""

from .decorators import bearer_token, optional_auth, require_auth
from .game_logger import game_logger

__all__ = ['bearer_token', 'optional_auth', 'require_auth', 'game_logger']
