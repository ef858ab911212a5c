"""
Application configuration.

All settings come from environment variables (a local .env file is loaded
on import). Study constants live here too so every mode reads the same caps.
"""

from __future__ import annotations

import logging
import os
import sys

from dotenv import load_dotenv
from pythonjsonlogger import jsonlogger

# Load environment
load_dotenv()


# ---- Storage ----

DEFAULT_DATABASE_URL = "sqlite:///data/study_deck.db"

ITEMS_KEY_PREFIX = "studyApp_data"  # Item collections live under "<prefix>_<selector>"
SELECTOR_KEY = "current_db_key"     # Active dataset selector


# ---- Seed Documents ----

DEFAULT_DATASET_LOCATIONS = {
    "general": "data/general.json",
    "daily": "data/daily.json",
}


# ---- Study Constants ----

MAX_SESSION_ITEMS = 51          # Items shown per rendering pass
MIN_MULTIPLE_CHOICE_ITEMS = 4   # Multiple choice needs at least this many items
MULTIPLE_CHOICE_OPTIONS = 4     # Correct answer + up to 3 distractors
TIMED_WRITING_SECONDS = 60      # Countdown per timed-writing question


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def is_test_mode() -> bool:
    """Check if running in test mode."""
    return _env_bool("TEST_MODE")


def get_database_url() -> str:
    """
    Get the store database URL from environment variables.

    In test mode the SQLite file name gets a "test_" prefix so experiments
    never touch the real study data.

    Returns:
        SQLAlchemy connection string
    """
    url = os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL)
    if is_test_mode() and url.startswith("sqlite:///") and not url.endswith(":memory:"):
        head, _, name = url.rpartition("/")
        if name and not name.startswith("test_"):
            url = f"{head}/test_{name}"
    return url


def get_dataset_locations() -> dict[str, str]:
    """
    Resolve the seed document location for every dataset.

    Returns:
        Mapping of selector value to URL or local path
    """
    return {
        selector: os.getenv(f"DATASET_URL_{selector.upper()}", default)
        for selector, default in DEFAULT_DATASET_LOCATIONS.items()
    }


def get_default_dataset() -> str:
    """Dataset used when no selector has been persisted yet."""
    return os.getenv("DEFAULT_DATASET", "general")


def get_fetch_timeout() -> float:
    """Network timeout (seconds) for seed document downloads."""
    return float(os.getenv("FETCH_TIMEOUT_SECONDS", "10"))


# ---- Logging ----

LOG_FIELDS = "%(asctime)s %(levelname)s %(name)s %(message)s"


def build_log_handler() -> logging.Handler:
    """
    Console handler formatted per LOG_FORMAT ("json" or "text").
    """
    handler = logging.StreamHandler(sys.stdout)
    if os.getenv("LOG_FORMAT", "json") == "json":
        handler.setFormatter(jsonlogger.JsonFormatter(LOG_FIELDS))
    else:
        handler.setFormatter(logging.Formatter(LOG_FIELDS))
    return handler


def configure_logging() -> None:
    """
    Configure root logging from LOG_LEVEL and LOG_FORMAT (runs once per process).
    """
    root = logging.getLogger()
    if root.handlers:
        return
    root.setLevel(os.getenv("LOG_LEVEL", "INFO").upper())
    root.addHandler(build_log_handler())
    logging.captureWarnings(True)
