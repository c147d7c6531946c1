"""
Substring matching helpers.
Plain case-insensitive containment: no tokenizing, stemming, or fuzzy matching.
"""

from typing import Iterable  # any sequence of candidate strings


def matches_string(query: str, value: str) -> bool:
	"""Return True if `query` occurs in `value`, ignoring case. An empty query matches everything."""
	return query.lower() in value.lower()


def matches_any(query: str, values: Iterable[str]) -> bool:
	"""Return True if `query` occurs in at least one of `values`; stops at the first hit."""
	needle = query.lower()  # fold the query once for the whole scan
	for value in values:
		if needle in value.lower():
			return True
	return False
