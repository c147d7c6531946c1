"""
Artist directory module.
Keeps the genre -> artists mapping used to resolve a person's favorite artists.
"""

from typing import Dict, List, Mapping, Optional, Sequence, Tuple, Union  # type annotations

from .errors import DuplicateArtistError  # strict-policy conflict
from .matching import matches_any  # substring search over a genre's artists
from .models import DuplicatePolicy  # strict vs idempotent inserts

# Import loguru for console logging
from loguru import logger  # simple structured logger


class ArtistDirectory:
	"""
	Owns a mapping from genre name to the artists registered under it.
	Genres are case-sensitive and created lazily on first insert; artist order is insertion order.
	The same artist may appear under several genres, but only once per genre.
	"""

	def __init__(
		self,
		initial: Optional[Mapping[str, Sequence[str]]] = None,  # seed data, copied on construction
		policy: Union[DuplicatePolicy, str] = DuplicatePolicy.STRICT,  # duplicate handling
	):
		self.policy = DuplicatePolicy(policy)  # accept "strict"/"idempotent" strings too
		self._artists: Dict[str, List[str]] = {}  # private store, only reachable through methods

		# Copy the seed mapping so outside references can't alias our lists
		for genre, names in (initial or {}).items():
			bucket = self._artists.setdefault(genre, [])
			for name in names:
				if name in bucket:
					logger.warning(f"[Artists] Ignoring duplicate seed artist '{name}' in genre '{genre}'")
					continue
				bucket.append(name)
		logger.debug(f"[Artists] Directory ready with {len(self._artists)} genres (policy={self.policy.value})")

	def add_artist(self, genre: str, artist: str) -> bool:
		"""
		Register `artist` under `genre`, creating the genre if needed.
		Returns True when the artist was appended. On a duplicate, the strict policy raises
		DuplicateArtistError and the idempotent policy returns False; state is unchanged either way.
		"""
		bucket = self._artists.get(genre)
		if bucket is not None and artist in bucket:
			if self.policy is DuplicatePolicy.STRICT:
				logger.info(f"[Artists] Rejected duplicate artist '{artist}' in genre '{genre}'")
				raise DuplicateArtistError(genre, artist)
			logger.debug(f"[Artists] '{artist}' already in genre '{genre}', nothing to do")
			return False

		if bucket is None:
			bucket = self._artists[genre] = []  # lazily create the genre
			logger.debug(f"[Artists] Created genre '{genre}'")
		bucket.append(artist)
		logger.info(f"[Artists] Added '{artist}' to genre '{genre}' ({len(bucket)} artists)")
		return True

	def search_by_genre(self, genre: str, query: str) -> bool:
		"""True if any artist in `genre` contains `query`; unknown genres simply return False."""
		bucket = self._artists.get(genre)
		if bucket is None:
			return False
		return matches_any(query, bucket)

	def genres(self) -> List[str]:
		"""Genre names in insertion order."""
		return list(self._artists)

	def get_artists(self, genre: str) -> Tuple[str, ...]:
		"""Read-only snapshot of a genre's artists (empty for unknown genres)."""
		return tuple(self._artists.get(genre, ()))

	def to_dict(self) -> Dict[str, List[str]]:
		"""Deep copy of the whole mapping, safe to serialize or mutate."""
		return {genre: list(names) for genre, names in self._artists.items()}

	def __contains__(self, genre: object) -> bool:
		return genre in self._artists

	def __len__(self) -> int:
		return len(self._artists)
