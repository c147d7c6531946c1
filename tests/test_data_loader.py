"""
Tests for DataLoader: seed document parsing and handling of malformed input.
"""

import json

import pytest

from people_search.data_loader import DataLoader
from people_search.models import Person


def write_json(path, data):
	path.write_text(json.dumps(data), encoding="utf-8")
	return path


def test_load_people(seed_files):
	people_path, _ = seed_files
	people = DataLoader().load_people(people_path)
	assert [p.name for p in people] == ["John Smith", "Jane Doe", "Bob Johnson", "Alice Williams"]
	assert people[0] == Person(
		name="John Smith",
		music_genres=["Rock", "Jazz"],
		movies=["The Matrix", "Inception"],
		location="New York",
	)


def test_load_artists(seed_files, mock_artists):
	_, artists_path = seed_files
	assert DataLoader().load_artists(artists_path) == mock_artists


def test_bundled_seed_documents_load(project_root):
	loader = DataLoader()
	people = loader.load_people(project_root / "data" / "people.json")
	artists = loader.load_artists(project_root / "data" / "artists.json")
	assert people and artists
	assert all(p.name for p in people)


def test_extra_fields_are_kept(tmp_path):
	path = write_json(tmp_path / "people.json", [{"name": "Ann", "musicGenres": [], "movies": [], "location": "Oslo", "pet": "cat"}])
	[ann] = DataLoader().load_people(path)
	assert ann.extra == {"pet": "cat"}
	assert ann.to_dict()["pet"] == "cat"


def test_missing_optional_fields_default_to_empty(tmp_path):
	path = write_json(tmp_path / "people.json", [{"name": "Ann"}])
	[ann] = DataLoader().load_people(path)
	assert (ann.music_genres, ann.movies, ann.location) == ((), (), "")


def test_comma_separated_lists(tmp_path):
	path = write_json(tmp_path / "people.json", [{"name": "Ann", "musicGenres": "Rock, Jazz", "movies": "Alien"}])
	[ann] = DataLoader().load_people(path)
	assert ann.music_genres == ("Rock", "Jazz")
	assert ann.movies == ("Alien",)


def test_invalid_people_records_are_skipped(tmp_path):
	path = write_json(tmp_path / "people.json", [
		{"name": "Ok"},
		"not an object",
		{"musicGenres": ["Rock"]},
		{"name": "   "},
		{"name": "Bad list", "movies": [1, 2]},
		{"name": "Bad location", "location": ["x"]},
	])
	assert [p.name for p in DataLoader().load_people(path)] == ["Ok"]


def test_invalid_artist_genres_are_skipped(tmp_path):
	path = write_json(tmp_path / "artists.json", {"Rock": ["Queen"], "Bad": "Queen", "Worse": [1]})
	assert DataLoader().load_artists(path) == {"Rock": ["Queen"]}


def test_missing_file(tmp_path):
	with pytest.raises(FileNotFoundError):
		DataLoader().load_people(tmp_path / "nope.json")


def test_invalid_json(tmp_path):
	path = tmp_path / "people.json"
	path.write_text("[{", encoding="utf-8")
	with pytest.raises(ValueError):
		DataLoader().load_people(path)


def test_wrong_document_shape(tmp_path):
	loader = DataLoader()
	with pytest.raises(ValueError):
		loader.load_people(write_json(tmp_path / "people.json", {"name": "Ann"}))
	with pytest.raises(ValueError):
		loader.load_artists(write_json(tmp_path / "artists.json", ["Queen"]))
