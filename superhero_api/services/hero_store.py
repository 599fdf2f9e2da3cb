"""
Hero Catalog Store

Read access to the hero catalog held in the MongoDB ``heroes`` collection,
plus the seeding helpers used to load it from the bundled JSON dataset.
"""

import json
import os
from typing import Any, Dict, Iterable, List, Optional

from pymongo.collection import Collection

from ..models import Hero
from ..utils.game_logger import game_logger


class HeroStore:
    """
    Catalog reader used by the matchup selector and the guess validator.

    Heroes are looked up by their external ``id`` string, never by the
    storage-assigned ``_id``.
    """

    def __init__(self, collection: Collection):
        self.collection = collection
        self.collection.create_index("id")

    def list_up_to(self, limit: int) -> List[Hero]:
        """Return at most ``limit`` heroes in natural storage order."""
        if limit <= 0:
            # pymongo treats limit(0) as "no limit"
            return []
        return [Hero.from_document(doc) for doc in self.collection.find().limit(limit)]

    def list_all(self) -> List[Hero]:
        return [Hero.from_document(doc) for doc in self.collection.find()]

    def find_by_id(self, hero_id: str) -> Optional[Hero]:
        doc = self.collection.find_one({"id": str(hero_id)})
        return Hero.from_document(doc) if doc else None

    def count(self) -> int:
        return self.collection.count_documents({})

    def seed(self, heroes: Iterable[Dict[str, Any]], replace: bool = False) -> int:
        """
        Insert hero documents into the catalog.

        Args:
            heroes: Raw hero documents
            replace: Drop the existing catalog first

        Returns:
            Number of heroes inserted
        """
        documents = [dict(hero) for hero in heroes]
        for doc in documents:
            # Lookups always compare against the string form of the id
            if doc.get("id") is not None:
                doc["id"] = str(doc["id"])
        if replace:
            self.collection.delete_many({})
        if not documents:
            return 0
        result = self.collection.insert_many(documents)
        game_logger.logger.info(f"Seeded {len(result.inserted_ids)} heroes into the catalog")
        return len(result.inserted_ids)


def load_hero_seed(json_file_path: str) -> List[Dict[str, Any]]:
    """
    Load hero documents from a JSON file.

    Raises:
        FileNotFoundError: If the seed file does not exist
        ValueError: If the file is not a JSON array of objects, or an entry has no ``id``
    """
    if not os.path.exists(json_file_path):
        raise FileNotFoundError(f"Hero seed file not found: {json_file_path}")

    with open(json_file_path, 'r', encoding='utf-8') as f:
        try:
            heroes = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {json_file_path}: {e}") from e

    if not isinstance(heroes, list):
        raise ValueError("Hero seed file must contain an array of heroes")

    for index, hero in enumerate(heroes):
        if not isinstance(hero, dict):
            raise ValueError(f"Hero at index {index} is not an object")
        if not hero.get('id'):
            raise ValueError(f"Hero at index {index} has no 'id'")

    return heroes


# Global store instance
_hero_store = None


def get_hero_store() -> Optional[HeroStore]:
    """Get the global hero store instance."""
    return _hero_store


def initialize_hero_store(collection: Collection) -> HeroStore:
    """Initialize the global hero store instance."""
    global _hero_store
    _hero_store = HeroStore(collection)
    return _hero_store
