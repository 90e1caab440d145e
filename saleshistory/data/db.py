from __future__ import annotations

from typing import Generator, Optional
from contextlib import contextmanager
from pathlib import Path
import logging

from sqlmodel import SQLModel, Session, create_engine
from sqlalchemy.engine import Engine

from saleshistory.core.paths import default_db_path

logger = logging.getLogger(__name__)

_ENGINE: Optional[Engine] = None


def _default_url() -> str:
	# Use posix path for SQLAlchemy URL compatibility on Windows
	return f"sqlite:///{default_db_path().as_posix()}"


def _build_engine(url: str, echo: bool = False) -> Engine:
	connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
	return create_engine(url, echo=echo, connect_args=connect_args)


def get_engine(url: Optional[str] = None, echo: bool = False) -> Engine:
	"""Return a singleton SQLAlchemy engine for the sales DB.

	The first call decides the URL; later calls return the same engine. Use
	configure_engine() to point the process at a different database.
	"""
	global _ENGINE
	if _ENGINE is None:
		_ENGINE = _build_engine(url or _default_url(), echo=echo)
		logger.debug("Engine created for %s", _ENGINE.url)
	return _ENGINE


def configure_engine(url: str, echo: bool = False) -> Engine:
	"""Replace the singleton engine (disposing the old one)."""
	global _ENGINE
	if _ENGINE is not None:
		_ENGINE.dispose()
	_ENGINE = _build_engine(url, echo=echo)
	logger.debug("Engine configured for %s", _ENGINE.url)
	return _ENGINE


def create_db_and_tables(engine: Optional[Engine] = None) -> None:
	"""Create the SQLite database file and all SQLModel tables."""
	# Ensure models are imported so metadata has all tables
	import saleshistory.data.models  # noqa: F401

	engine = engine or get_engine()
	database = engine.url.database
	if engine.url.get_backend_name() == "sqlite" and database and database != ":memory:":
		Path(database).parent.mkdir(parents=True, exist_ok=True)
	SQLModel.metadata.create_all(engine)


def get_session(engine: Optional[Engine] = None) -> Session:
	"""Create a new SQLModel Session bound to the given (or project) engine.

	expire_on_commit=False so returned instances keep attribute values after commit.
	"""
	return Session(engine or get_engine(), expire_on_commit=False)


@contextmanager
def session_scope(engine: Optional[Engine] = None) -> Generator[Session, None, None]:
	"""Transactional session: commit on success, rollback on error.

	Usage:
		with session_scope() as s:
			... use s ...
	"""
	session = get_session(engine)
	try:
		yield session
		session.commit()
	except Exception:
		session.rollback()
		raise
	finally:
		session.close()
