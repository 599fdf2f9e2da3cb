"""
Services Package

Contains all business logic, persistence stores and service classes.
"""

from .auth_service import AuthService, get_auth_service
from .database import connect_database, initialize_services
from .game_service import GameService, get_game_service
from .hero_store import HeroStore, get_hero_store, load_hero_seed
from .matchup_service import difficulty_bucket, pick_balanced_pair, target_diff_range
from .user_store import UserStore, get_user_store

__all__ = [
    'AuthService', 'get_auth_service',
    'connect_database', 'initialize_services',
    'GameService', 'get_game_service',
    'HeroStore', 'get_hero_store', 'load_hero_seed',
    'difficulty_bucket', 'pick_balanced_pair', 'target_diff_range',
    'UserStore', 'get_user_store'
]
