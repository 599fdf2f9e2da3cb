"""
Seed the hero catalog from a JSON file.

Usage:
    python seed_heroes.py                       # bundled dataset
    python seed_heroes.py --file heroes.json --replace
"""

import argparse
import sys

from superhero_api.config import Config
from superhero_api.services import connect_database, load_hero_seed
from superhero_api.services.hero_store import HeroStore


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Load superheroes into MongoDB")
    parser.add_argument("--file", default=Config.HERO_SEED_FILE, help="JSON array of hero documents")
    parser.add_argument("--replace", action="store_true", help="Drop the existing catalog first")
    parser.add_argument("--mongo-uri", default=Config.MONGO_URI)
    parser.add_argument("--db", default=Config.MONGO_DB_NAME)
    args = parser.parse_args(argv)

    try:
        heroes = load_hero_seed(args.file)
    except (FileNotFoundError, ValueError) as e:
        print(f"Seed file rejected: {e}", file=sys.stderr)
        return 1

    store = HeroStore(connect_database(args.mongo_uri, args.db).heroes)
    inserted = store.seed(heroes, replace=args.replace)
    print(f"Seeded {inserted} heroes ({store.count()} in catalog)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
