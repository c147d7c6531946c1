"""
Unit tests for ArtistDirectory: inserts, duplicate policies, and genre-scoped search.
"""

import pytest

from people_search.artists import ArtistDirectory
from people_search.errors import DuplicateArtistError
from people_search.models import DuplicatePolicy


def test_add_artist_to_existing_genre(artists):
	assert artists.add_artist("Rock", "Pink Floyd") is True
	assert artists.get_artists("Rock") == ("The Beatles", "Led Zeppelin", "Queen", "Pink Floyd")


def test_add_artist_creates_genre(artists):
	assert "Electronic" not in artists
	artists.add_artist("Electronic", "Daft Punk")
	assert "Electronic" in artists
	assert artists.get_artists("Electronic") == ("Daft Punk",)
	assert artists.genres()[-1] == "Electronic"


def test_strict_policy_rejects_duplicate_and_keeps_state(artists):
	before = artists.to_dict()
	with pytest.raises(DuplicateArtistError) as exc_info:
		artists.add_artist("Rock", "The Beatles")
	assert str(exc_info.value) == "Artist already exists in this genre"
	assert exc_info.value.genre == "Rock"
	assert exc_info.value.artist == "The Beatles"
	assert artists.to_dict() == before


def test_strict_policy_second_insert_fails():
	directory = ArtistDirectory()
	directory.add_artist("Pop", "Abba")
	with pytest.raises(DuplicateArtistError):
		directory.add_artist("Pop", "Abba")


def test_idempotent_policy_ignores_duplicate():
	directory = ArtistDirectory({"Rock": ["Queen"]}, policy="idempotent")
	assert directory.policy is DuplicatePolicy.IDEMPOTENT
	assert directory.add_artist("Rock", "Queen") is False
	assert directory.get_artists("Rock") == ("Queen",)


def test_same_artist_allowed_in_different_genres(artists):
	artists.add_artist("Jazz", "Queen")
	assert "Queen" in artists.get_artists("Rock")
	assert "Queen" in artists.get_artists("Jazz")


def test_duplicates_are_case_sensitive(artists):
	assert artists.add_artist("Rock", "the beatles") is True
	assert artists.add_artist("rock", "The Beatles") is True  # different genre key


def test_empty_and_punctuated_genres_are_valid_keys():
	directory = ArtistDirectory()
	directory.add_artist("", "Nameless")
	directory.add_artist("Drum & Bass / Jungle", "Goldie")
	assert directory.search_by_genre("", "name")
	assert directory.search_by_genre("Drum & Bass / Jungle", "gold")


def test_search_by_genre(artists):
	assert artists.search_by_genre("Rock", "beatles")
	assert artists.search_by_genre("Jazz", "MILES")
	assert not artists.search_by_genre("Rock", "Mozart")


def test_search_by_unknown_genre_is_false(artists):
	assert artists.search_by_genre("Polka", "") is False
	assert artists.search_by_genre("rock", "Queen") is False  # genres are case-sensitive


def test_added_artist_is_searchable(artists):
	artists.add_artist("Metal", "Black Sabbath")
	assert artists.search_by_genre("Metal", "Black Sabbath")


def test_seed_mapping_is_copied(mock_artists):
	directory = ArtistDirectory(mock_artists)
	directory.add_artist("Rock", "Pink Floyd")
	mock_artists["Rock"].append("Nirvana")
	assert "Pink Floyd" not in mock_artists["Rock"]
	assert "Nirvana" not in directory.get_artists("Rock")


def test_views_do_not_expose_internal_lists(artists):
	snapshot = artists.to_dict()
	snapshot["Rock"].append("Nirvana")
	assert "Nirvana" not in artists.get_artists("Rock")


def test_seed_duplicates_are_collapsed():
	directory = ArtistDirectory({"Rock": ["Queen", "Queen", "Kiss"]})
	assert directory.get_artists("Rock") == ("Queen", "Kiss")
	assert len(directory) == 1


def test_unknown_policy_is_rejected():
	with pytest.raises(ValueError):
		ArtistDirectory(policy="lenient")
