"""
Exceptions raised by the search core.
"""


class PeopleSearchError(Exception):
	"""Base class for errors raised by the people_search package."""


class DuplicateArtistError(PeopleSearchError):
	"""Raised when an artist is added to a genre that already lists it (strict policy only)."""

	def __init__(self, genre: str, artist: str):
		self.genre = genre
		self.artist = artist
		super().__init__("Artist already exists in this genre")
