"""
People Search: weighted substring search over a roster of people and their favorite artists.
"""

from .artists import ArtistDirectory
from .data_loader import DataLoader
from .errors import DuplicateArtistError, PeopleSearchError
from .models import DuplicatePolicy, Person, SearchResult, SortDirection, SortKey
from .search_engine import SearchEngine

__all__ = [
	"ArtistDirectory",
	"DataLoader",
	"DuplicateArtistError",
	"DuplicatePolicy",
	"PeopleSearchError",
	"Person",
	"SearchEngine",
	"SearchResult",
	"SortDirection",
	"SortKey",
]
