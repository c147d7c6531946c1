"""
Ranking module.
Scores a person against a query with a fixed field weight table and orders the results.
"""

from typing import Callable, List, NamedTuple, Sequence, Tuple, Union

from .artists import ArtistDirectory
from .matching import matches_any, matches_string
from .models import Person, SearchResult, SortDirection, SortKey


class SearchField(NamedTuple):
	"""One row of the weight table: field id, score contribution, and how it matches."""
	name: str
	weight: int
	matcher: Callable[[Person, str, ArtistDirectory], bool]


def _match_artists(person: Person, query: str, artists: ArtistDirectory) -> bool:
	"""One-hop join: does any artist in any of the person's genres contain the query?"""
	for genre in person.music_genres:
		if artists.search_by_genre(genre, query):
			return True
	return False


# Evaluated in this order, which is also the order of SearchResult.matches
SEARCH_FIELDS: Tuple[SearchField, ...] = (
	SearchField("name", 4, lambda p, q, a: matches_string(q, p.name)),
	SearchField("location", 1, lambda p, q, a: matches_string(q, p.location)),
	SearchField("movies", 1, lambda p, q, a: matches_any(q, p.movies)),
	SearchField("musicGenres", 1, lambda p, q, a: matches_any(q, p.music_genres)),
	SearchField("artists", 2, _match_artists),
)

# Ties on the primary key are always broken on the other key in this direction,
# whatever direction was requested for the primary key.
TIE_BREAK_DIRECTION = SortDirection.DESC


class Ranker:
	"""
	Computes per-person scores and orders results:
	- score: sum of the weights of every field that matches the query
	- sort: primary key (name or score) in the requested direction,
	  ties broken on the other key in TIE_BREAK_DIRECTION
	"""

	def __init__(self, fields: Sequence[SearchField] = SEARCH_FIELDS):
		self.fields = tuple(fields)

	def score(self, person: Person, query: str, artists: ArtistDirectory) -> SearchResult:
		"""Evaluate every field once and accumulate weights and matched field ids."""
		result = SearchResult(name=person.name)
		for f in self.fields:
			if f.matcher(person, query, artists):
				result.matches.append(f.name)
				result.score += f.weight
		return result

	def sort(
		self,
		results: List[SearchResult],
		sort: Union[SortKey, str] = SortKey.SCORE,
		sort_dir: Union[SortDirection, str] = SortDirection.DESC,
	) -> List[SearchResult]:
		"""
		Return a new list ordered by `sort`/`sort_dir`.
		Two stable passes: first by the tie-break key, then by the primary key, so
		equal primary keys keep the tie-break order and full ties keep storage order.
		"""
		key = SortKey(sort)
		direction = SortDirection(sort_dir)
		secondary = SortKey.NAME if key is SortKey.SCORE else SortKey.SCORE

		ordered = sorted(results, key=_sort_value(secondary), reverse=TIE_BREAK_DIRECTION is SortDirection.DESC)
		ordered.sort(key=_sort_value(key), reverse=direction is SortDirection.DESC)
		return ordered


def _sort_value(key: SortKey) -> Callable[[SearchResult], Union[str, int]]:
	if key is SortKey.NAME:
		return lambda r: r.name  # code-point ordering
	return lambda r: r.score
