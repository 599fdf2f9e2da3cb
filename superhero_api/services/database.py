"""
Database Connection

Creates the MongoDB client and wires the stores and services onto one
database handle.
"""

import random
from typing import Optional

from pymongo.database import Database
from pymongo.mongo_client import MongoClient
from pymongo.server_api import ServerApi

from ..utils.game_logger import game_logger
from .auth_service import initialize_auth_service
from .game_service import initialize_game_service
from .hero_store import initialize_hero_store
from .user_store import initialize_user_store


def connect_database(mongo_uri: str, db_name: str) -> Database:
    """
    Connect to MongoDB and return the named database.

    Raises:
        pymongo.errors.PyMongoError: If the server cannot be reached
    """
    client = MongoClient(mongo_uri, server_api=ServerApi('1'))
    try:
        client.admin.command('ping')
    except Exception as e:
        game_logger.logger.error(f"MongoDB connection error: {e}")
        client.close()
        raise
    game_logger.logger.info(f"Connected to MongoDB database '{db_name}'")
    return client[db_name]


def initialize_services(db: Database, config_class, rng: Optional[random.Random] = None):
    """
    Initialize every global store and service against ``db``.

    Returns:
        Tuple of (hero_store, user_store, auth_service, game_service)
    """
    hero_store = initialize_hero_store(db.heroes)
    user_store = initialize_user_store(db.users, config_class.BCRYPT_ROUNDS)
    auth_service = initialize_auth_service(
        user_store, config_class.JWT_SECRET, config_class.JWT_EXPIRATION_HOURS
    )
    game_service = initialize_game_service(
        hero_store, user_store, rng=rng, pool_limit=config_class.MATCHUP_POOL_LIMIT
    )
    return hero_store, user_store, auth_service, game_service
