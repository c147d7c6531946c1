"""Shared pytest fixtures for the people search test suite."""

import json
from pathlib import Path

import pytest

from people_search.artists import ArtistDirectory
from people_search.models import Person
from people_search.search_engine import SearchEngine


@pytest.fixture
def project_root() -> Path:
	"""Return the project root directory."""
	return Path(__file__).parent.parent


@pytest.fixture
def mock_artists() -> dict:
	return {
		"Rock": ["The Beatles", "Led Zeppelin", "Queen"],
		"Jazz": ["Miles Davis", "John Coltrane", "Ella Fitzgerald"],
		"Classical": ["Mozart", "Beethoven", "Bach"],
		"Country": ["Johnny Cash", "Dolly Parton", "Willie Nelson"],
	}


@pytest.fixture
def mock_people() -> list:
	return [
		{"name": "John Smith", "musicGenres": ["Rock", "Jazz"], "movies": ["The Matrix", "Inception"], "location": "New York"},
		{"name": "Jane Doe", "musicGenres": ["Classical"], "movies": ["The Godfather", "Pulp Fiction"], "location": "California"},
		{"name": "Bob Johnson", "musicGenres": ["Country"], "movies": ["Star Wars", "The Matrix"], "location": "Texas"},
		{"name": "Alice Williams", "musicGenres": ["Rock"], "movies": ["Titanic", "Avatar"], "location": "Florida"},
	]


@pytest.fixture
def artists(mock_artists) -> ArtistDirectory:
	return ArtistDirectory(mock_artists)


@pytest.fixture
def engine(mock_people, artists) -> SearchEngine:
	return SearchEngine([Person.from_dict(p) for p in mock_people], artists)


@pytest.fixture
def seed_files(tmp_path, mock_people, mock_artists):
	"""Write the mock roster and artist map to disk; returns (people_path, artists_path)."""
	people_path = tmp_path / "people.json"
	artists_path = tmp_path / "artists.json"
	people_path.write_text(json.dumps(mock_people), encoding="utf-8")
	artists_path.write_text(json.dumps(mock_artists), encoding="utf-8")
	return people_path, artists_path
