"""
Service settings loaded from environment variables via pydantic-settings.

Every field can be overridden with a PEOPLE_SEARCH_ prefixed variable
(e.g. PEOPLE_SEARCH_PEOPLE_PATH=/srv/people.json) or from a local .env file.
"""

import sys  # stderr sink for loguru

from loguru import logger  # console logging
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import DuplicatePolicy


class Settings(BaseSettings):
	"""People search settings. Environment variables override defaults."""

	model_config = SettingsConfigDict(env_prefix="PEOPLE_SEARCH_", env_file=".env", env_file_encoding="utf-8", extra="ignore")

	# === Seed documents ===
	people_path: str = "data/people.json"
	artists_path: str = "data/artists.json"

	# === Artist directory ===
	# strict rejects a repeated artist with 409; idempotent accepts it as a no-op
	duplicate_artist_policy: DuplicatePolicy = DuplicatePolicy.STRICT

	# === Logging ===
	log_level: str = "INFO"


def get_settings() -> Settings:
	"""Build settings from the current environment (not cached, so tests can monkeypatch env)."""
	return Settings()


def configure_logging(level: str) -> None:
	"""Replace loguru's default stderr sink with one at `level`."""
	logger.remove()
	logger.add(sys.stderr, level=level.upper())
