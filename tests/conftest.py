"""
Shared fixtures: an in-memory MongoDB (mongomock), the wired services and a
Flask test client.
"""

import random

import mongomock
import pytest

from superhero_api import create_app
from superhero_api.config import TestingConfig
from superhero_api.services import initialize_services


def make_hero_doc(hero_id, name, **powerstats):
    return {
        "id": str(hero_id),
        "name": name,
        "powerstats": {attr: str(value) for attr, value in powerstats.items()},
    }


@pytest.fixture
def db():
    """Fresh in-memory database for each test."""
    return mongomock.MongoClient()[TestingConfig.MONGO_DB_NAME]


@pytest.fixture
def services(db):
    return initialize_services(db, TestingConfig, rng=random.Random(1234))


@pytest.fixture
def hero_store(services):
    return services[0]


@pytest.fixture
def user_store(services):
    return services[1]


@pytest.fixture
def auth_service(services):
    return services[2]


@pytest.fixture
def game_service(services):
    return services[3]


@pytest.fixture
def seeded_heroes(hero_store):
    docs = [
        make_hero_doc(101, "Alpha-Man", intelligence=80, strength=90, speed=60, power=88),
        make_hero_doc(102, "Beta-Woman", intelligence=75, strength=70, speed=95, power=77),
        make_hero_doc(103, "Gamma Kid", intelligence=40, strength=20, speed=55, power=30),
        make_hero_doc(104, "Delta Force", intelligence=95, strength=55, speed=40, power=60),
        make_hero_doc(105, "Epsilon", intelligence=60, strength=10, speed=35, power=45),
    ]
    hero_store.seed(docs)
    return docs


@pytest.fixture
def user(user_store):
    return user_store.create_user("player@example.com", "player1", "P@ssw0rd!")


@pytest.fixture
def client(services):
    """Flask test client backed by the in-memory database."""
    app = create_app(TestingConfig)
    with app.test_client() as c:
        yield c


@pytest.fixture
def token(auth_service, user):
    return auth_service.sign_token(user)


@pytest.fixture
def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}
