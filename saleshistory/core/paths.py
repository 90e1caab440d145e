from __future__ import annotations

import sys
from pathlib import Path


def is_frozen() -> bool:
    return bool(getattr(sys, "frozen", False))


def user_writable_dir() -> Path:
    """Directory suitable for user-writable files (settings.json, the sales DB).

    - In PyInstaller onefile, prefer the directory containing the executable.
    - In dev, use the project root.
    """
    if is_frozen():
        return Path(sys.executable).resolve().parent
    return Path(__file__).resolve().parents[2]


def settings_path() -> Path:
    """Location for settings.json that is readable and writable."""
    return user_writable_dir() / "settings.json"


def default_db_path() -> Path:
    return user_writable_dir() / "sales.db"
