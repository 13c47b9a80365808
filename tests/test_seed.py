"""
Tests for the demo seed script's --reset mode.

These tests verify:
  - The collection paths come from DATA_DIR / USERS_FILE / DEVELOPERS_FILE
  - Deleted collections are recreated empty by the next load, no restart needed
  - Non-JSON backends are left untouched
"""

import pytest

from app.config import settings
from app.models.developer import Developer
from app.storage import JsonFileStore
from demo import seed


@pytest.fixture
def json_settings(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "STORAGE_BACKEND", "json")
    monkeypatch.setattr(settings, "DATA_DIR", str(tmp_path / "custom-data"))
    monkeypatch.setattr(settings, "USERS_FILE", "people.json")
    monkeypatch.setattr(settings, "DEVELOPERS_FILE", "devs.json")
    return tmp_path / "custom-data"


class TestResetData:

    def test_deletes_configured_collections(self, json_settings):
        json_settings.mkdir()
        for filename in ("people.json", "devs.json", "keep.json"):
            (json_settings / filename).write_text("[]", encoding="utf-8")

        seed.reset_data()

        assert sorted(path.name for path in json_settings.iterdir()) == ["keep.json"]

    async def test_next_load_recreates_collection(self, json_settings):
        json_settings.mkdir()
        (json_settings / "devs.json").write_text('[{"id": "stale"}]', encoding="utf-8")

        seed.reset_data()

        store = JsonFileStore(json_settings / "devs.json", "developers", Developer)
        assert await store.load() == []
        assert (json_settings / "devs.json").exists()

    def test_missing_files_are_reported(self, json_settings, capsys):
        seed.reset_data()
        assert "No collection found" in capsys.readouterr().out

    def test_other_backends_are_skipped(self, json_settings, monkeypatch, capsys):
        monkeypatch.setattr(settings, "STORAGE_BACKEND", "sql")
        json_settings.mkdir()
        (json_settings / "devs.json").write_text("[]", encoding="utf-8")

        seed.reset_data()

        assert (json_settings / "devs.json").exists()
        assert "only JSON collections are reset" in capsys.readouterr().out
