"""
Data models for the People Search service.
Defines the core data structures used throughout the system.
"""

# Import dataclass to define simple "record-like" classes without boilerplate
from dataclasses import dataclass, field  # auto-generates __init__, __repr__, etc.
# Enum gives the sort options and duplicate policy a closed set of values
from enum import Enum  # string-valued enumerations
# Import typing helpers for precise and self-documenting types
from typing import Any, Dict, List, Mapping, Tuple  # lists, tuples, mappings, and free-form values


class SortKey(str, Enum):
	"""Result attribute used as the primary sort key."""
	NAME = "name"
	SCORE = "score"


class SortDirection(str, Enum):
	"""Direction applied to the primary sort key."""
	ASC = "ASC"
	DESC = "DESC"


class DuplicatePolicy(str, Enum):
	"""
	What the artist directory does when an artist is added twice to one genre.
	strict: reject with DuplicateArtistError. idempotent: silently keep the existing entry.
	"""
	STRICT = "strict"
	IDEMPOTENT = "idempotent"


# Keys of the person document that map onto dedicated Person attributes
PERSON_KEYS = ("name", "musicGenres", "movies", "location")


@dataclass(frozen=True)
class Person:
	"""
	Represents one searchable individual from the roster.
	Records are never mutated after creation; the engine only appends new ones.
	"""
	name: str  # display name, also the name tie-break key
	music_genres: Tuple[str, ...] = ()  # genre names, soft references into the artist directory
	movies: Tuple[str, ...] = ()  # free-text movie titles
	location: str = ""  # free-text location
	extra: Dict[str, Any] = field(default_factory=dict, hash=False)  # any other fields from the source document, not scored

	def __post_init__(self):
		# Freeze list fields so a stored record can't change under the engine
		object.__setattr__(self, "music_genres", tuple(self.music_genres))
		object.__setattr__(self, "movies", tuple(self.movies))

	@classmethod
	def from_dict(cls, data: Mapping[str, Any]) -> "Person":
		"""Build a Person from the camelCase JSON shape used by the seed documents and the API."""
		return cls(
			name=data["name"],
			music_genres=tuple(data.get("musicGenres") or ()),
			movies=tuple(data.get("movies") or ()),
			location=data.get("location") or "",
			extra={k: v for k, v in data.items() if k not in PERSON_KEYS},
		)

	def to_dict(self) -> Dict[str, Any]:
		"""Inverse of from_dict."""
		out: Dict[str, Any] = dict(self.extra)
		out.update({
			"name": self.name,
			"musicGenres": list(self.music_genres),
			"movies": list(self.movies),
			"location": self.location,
		})
		return out


@dataclass
class SearchResult:
	"""One ranked hit produced by a search call; never stored."""
	name: str  # copied from the matching person
	score: int = 0  # sum of the weights of the matched fields
	matches: List[str] = field(default_factory=list)  # matched field ids, in weight-table order

	def to_dict(self) -> Dict[str, Any]:
		return {"name": self.name, "score": self.score, "matches": list(self.matches)}
