from __future__ import annotations

import json
from pathlib import Path

from saleshistory.core.settings import Settings, load_settings, save_settings


def test_missing_file_writes_defaults(tmp_path: Path) -> None:
    p = tmp_path / "cfg" / "settings.json"
    s = load_settings(p)
    assert s == Settings()
    assert p.exists()
    assert json.loads(p.read_text(encoding="utf-8"))["log_level"] == "INFO"


def test_unknown_keys_are_ignored(tmp_path: Path) -> None:
    p = tmp_path / "settings.json"
    p.write_text(json.dumps({"log_level": "DEBUG", "theme": "dark"}), encoding="utf-8")
    s = load_settings(p)
    assert s.log_level == "DEBUG"
    assert not hasattr(s, "theme")


def test_corrupt_file_falls_back_without_overwrite(tmp_path: Path) -> None:
    p = tmp_path / "settings.json"
    p.write_text("{not json", encoding="utf-8")
    assert load_settings(p) == Settings()
    assert p.read_text(encoding="utf-8") == "{not json"


def test_round_trip_and_database_url(tmp_path: Path) -> None:
    p = tmp_path / "settings.json"
    db = tmp_path / "shop.db"
    save_settings(Settings(database_path=str(db), dialog_width=1024), p)
    s = load_settings(p)
    assert s.dialog_width == 1024
    assert s.database_url() == f"sqlite:///{db.as_posix()}"
    assert not (tmp_path / "settings.json.tmp").exists()
