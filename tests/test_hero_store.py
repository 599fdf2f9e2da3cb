"""
tests/test_hero_store.py - Catalog reads and seeding.
"""

import json

import pytest

import seed_heroes

from conftest import make_hero_doc
from superhero_api.config import Config
from superhero_api.services.hero_store import load_hero_seed


class TestHeroStore:
    def test_list_up_to_caps_the_pool(self, hero_store):
        hero_store.seed([make_hero_doc(i, f"Hero{i}", strength=i) for i in range(10)])
        assert len(hero_store.list_up_to(4)) == 4
        assert len(hero_store.list_up_to(150)) == 10

    def test_list_up_to_zero_is_empty(self, hero_store, seeded_heroes):
        assert hero_store.list_up_to(0) == []

    def test_find_by_external_id(self, hero_store, seeded_heroes):
        hero = hero_store.find_by_id("102")
        assert hero.name == "Beta-Woman"
        assert hero.powerstats["speed"] == "95"
        assert hero.mongo_id is not None
        assert hero_store.find_by_id("999") is None

    def test_partial_documents_are_allowed(self, hero_store):
        hero_store.seed([{"id": "partial-1", "name": "PartialHero"}])
        hero = hero_store.find_by_id("partial-1")
        assert hero.name == "PartialHero"
        assert hero.powerstats == {}

    def test_powerstats_keep_string_type(self, hero_store):
        hero_store.seed([make_hero_doc("string-check", "StringStatHero", strength=95)])
        assert hero_store.find_by_id("string-check").powerstats["strength"] == "95"

    def test_integer_ids_are_looked_up_by_string(self, hero_store, tmp_path):
        path = tmp_path / "heroes.json"
        path.write_text(json.dumps([
            {"id": 1, "name": "One", "powerstats": {"strength": "10"}},
            {"id": 2, "name": "Two", "powerstats": {"strength": "40"}},
        ]))
        hero_store.seed(load_hero_seed(str(path)))
        assert [h.id for h in hero_store.list_all()] == ["1", "2"]
        assert hero_store.find_by_id("1").name == "One"
        assert hero_store.find_by_id(2).name == "Two"

    def test_seed_replace(self, hero_store, seeded_heroes):
        hero_store.seed([make_hero_doc(1, "Solo", power=1)], replace=True)
        assert hero_store.count() == 1

    def test_to_dict_passes_descriptive_groups_through(self, hero_store):
        doc = make_hero_doc("7", "Described", strength=10)
        doc["biography"] = {"full-name": "Test Hero", "aliases": ["The Tester"]}
        doc["image"] = {"url": "https://example.com/img.png"}
        hero_store.seed([doc])
        data = hero_store.find_by_id("7").to_dict()
        assert data["biography"]["aliases"] == ["The Tester"]
        assert data["image"]["url"].startswith("https://")


class TestLoadHeroSeed:
    def test_bundled_catalog(self):
        heroes = load_hero_seed(Config.HERO_SEED_FILE)
        ids = [h["id"] for h in heroes]
        assert len(heroes) >= 5
        assert len(set(ids)) == len(ids)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_hero_seed(str(tmp_path / "missing.json"))

    def test_rejects_non_array(self, tmp_path):
        path = tmp_path / "heroes.json"
        path.write_text(json.dumps({"id": "1"}))
        with pytest.raises(ValueError):
            load_hero_seed(str(path))

    def test_rejects_hero_without_id(self, tmp_path):
        path = tmp_path / "heroes.json"
        path.write_text(json.dumps([{"name": "Nameless"}]))
        with pytest.raises(ValueError, match="no 'id'"):
            load_hero_seed(str(path))

    def test_rejects_malformed_json(self, tmp_path):
        path = tmp_path / "heroes.json"
        path.write_text("[{")
        with pytest.raises(ValueError):
            load_hero_seed(str(path))


class TestSeedCommand:
    def test_rejects_bad_file_before_connecting(self, tmp_path, capsys):
        path = tmp_path / "heroes.json"
        path.write_text("{}")
        assert seed_heroes.main(["--file", str(path)]) == 1
        assert "Seed file rejected" in capsys.readouterr().err
