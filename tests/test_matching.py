"""
Unit tests for the substring matching helpers.
"""

from people_search.matching import matches_any, matches_string


def test_matches_string_is_case_insensitive():
	assert matches_string("smith", "John Smith")
	assert matches_string("JOHN", "john smith")
	assert not matches_string("Smyth", "John Smith")


def test_matches_string_is_contiguous_substring():
	assert matches_string("n Sm", "John Smith")
	assert not matches_string("John  Smith", "John Smith")  # no whitespace collapsing
	assert not matches_string("Jon", "John")


def test_empty_query_matches_everything():
	assert matches_string("", "anything")
	assert matches_string("", "")
	assert matches_any("", ["x"])


def test_special_characters_are_literal():
	assert matches_string("M*A*S*H", "M*A*S*H Fan")
	assert not matches_string(".*", "anything")


def test_no_accent_folding():
	assert not matches_string("amelie", "Amélie")


def test_matches_any():
	assert matches_any("matrix", ["Inception", "The Matrix"])
	assert not matches_any("matrix", ["Inception", "Titanic"])
	assert not matches_any("matrix", [])
	assert not matches_any("", [])  # nothing to contain the empty string


def test_matches_any_short_circuits():
	seen = []

	def values():
		for v in ["Rock", "Jazz", "Classical"]:
			seen.append(v)
			yield v

	assert matches_any("ROCK", values())
	assert seen == ["Rock"]
