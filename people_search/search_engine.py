"""
Search engine module.
Scans the roster, scores every person against the query, filters, and produces ranked results.
"""

import time  # measure search latency for logs
from typing import Iterable, List, Optional, Union  # type annotations for clarity

# Import project modules for data structures and components
from .models import Person, SearchResult, SortDirection, SortKey  # core data classes
from .artists import ArtistDirectory  # genre -> artists lookup for the artist field
from .ranking import Ranker  # weight table scoring and ordering

# Import loguru for console logging
from loguru import logger  # simple structured logger


class SearchEngine:
	"""
	High-level search API over an in-memory roster of people.
	The artist directory is shared with the caller and only ever read here.
	"""
	def __init__(
		self,
		people: Iterable[Person],  # initial roster, copied into engine-owned storage
		artists: ArtistDirectory,  # shared directory used for the artists field
		ranker: Optional[Ranker] = None,  # scoring/ordering strategy
	):
		# Own the storage list so callers can't mutate it behind our back
		self._people: List[Person] = list(people)  # append-only, storage order matters for ties
		self.artists = artists  # not owned, never mutated here
		self.ranker = ranker or Ranker()  # default weight table
		logger.info(f"[Engine] Ready with {len(self._people)} people and {len(artists)} genres")

	def add(self, person: Person) -> None:
		"""Append a person to the roster; duplicates (even identical names) are allowed."""
		self._people.append(person)  # storage order preserved
		logger.debug(f"[Engine] Added person '{person.name}' (total={len(self._people)})")

	def size(self) -> int:
		"""Number of people currently stored."""
		return len(self._people)

	def search(
		self,
		query: str,
		sort: Union[SortKey, str] = SortKey.SCORE,
		sort_dir: Union[SortDirection, str] = SortDirection.DESC,
	) -> List[SearchResult]:
		"""Score every person, drop zero scores, and return the ordered result list."""
		start = time.time()  # start timer
		key = SortKey(sort)  # validate before scanning
		direction = SortDirection(sort_dir)

		results: List[SearchResult] = []  # accumulator
		for person in self._people:  # storage order
			result = self.ranker.score(person, query, self.artists)  # per-field evaluation
			if result.score == 0:  # nothing matched
				continue
			results.append(result)  # collect

		ordered = self.ranker.sort(results, sort=key, sort_dir=direction)  # primary + tie-break ordering
		elapsed_ms = (time.time() - start) * 1000  # compute ms
		logger.debug(
			f"[Engine] query='{query}' sort={key.value} dir={direction.value} | {len(ordered)} of {len(self._people)} matched in {elapsed_ms:.2f} ms"
		)
		return ordered
