"""
Environment configuration.

Values come from the process environment, with a local .env file loaded
first if present.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment
load_dotenv()


# Default locations
LOG_DIR = Path(__file__).parent.parent / "logs"
DEFAULT_WORDS_FILE = "words.json"
DEFAULT_MONGO_DB = "drill_trainer"
DEFAULT_MONGO_COLLECTION = "lexicon"


def is_test_mode() -> bool:
    """Check if running in test mode."""
    return os.getenv("TEST_MODE", "false").lower() == "true"


def get_database_url() -> str:
    """
    Get the SQLAlchemy URL for the session store.

    Uses DATABASE_URL when set; otherwise a SQLite file under logs/
    (test_drill_state.db in test mode).
    """
    url = os.getenv("DATABASE_URL")
    if url:
        return url

    db_name = "test_drill_state.db" if is_test_mode() else "drill_state.db"
    return f"sqlite:///{LOG_DIR / db_name}"


def get_persistence_backend() -> str:
    """
    "database" -> SqlStateStore
    "session"  -> MemoryStateStore (nothing outlives the process)
    """
    mode = os.getenv("PERSISTENCE_BACKEND", "database").strip().lower()
    if mode not in ("database", "session"):
        mode = "database"
    return mode


def get_catalog_source() -> str:
    """Either "file" or "mongo"."""
    source = os.getenv("CATALOG_SOURCE", "file").strip().lower()
    if source not in ("file", "mongo"):
        raise ValueError(f"CATALOG_SOURCE must be 'file' or 'mongo', got {source!r}")
    return source


def get_words_file() -> Path:
    return Path(os.getenv("WORDS_FILE", DEFAULT_WORDS_FILE))


def get_mongo_settings() -> tuple[str, str, str]:
    """
    Returns:
        (uri, database name, collection name)
    """
    mongo_uri = os.getenv("MONGO_URI")
    if not mongo_uri:
        raise ValueError("MONGO_URI not found in environment variables")
    return (
        mongo_uri,
        os.getenv("MONGO_DB", DEFAULT_MONGO_DB),
        os.getenv("MONGO_COLLECTION", DEFAULT_MONGO_COLLECTION),
    )


def get_log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()
