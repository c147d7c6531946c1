"""
Data loading module.
Reads the people roster and the genre -> artists map from their JSON seed documents.
"""

# Standard libs for JSON parsing, typing, and paths
import json  # read JSON documents
from typing import Any, Dict, List, Union  # type hints
from pathlib import Path  # filesystem-safe paths

# Import our Person data class used across the project
from .models import Person  # structured person record

# Console logging
from loguru import logger  # console logger


class DataLoader:
	"""
	Handles loading and light cleanup of the seed documents.
	"""

	def load_people(self, filepath: Union[str, Path]) -> List[Person]:
		"""
		Load people from a JSON document holding an array of person objects.
		Invalid records are skipped with a warning; returns a list of Person objects.
		"""
		data = self._read_json(filepath)  # parsed document
		if not isinstance(data, list):  # the roster must be an array
			logger.error(f"[DataLoader] Expected a JSON array of people in {filepath}, got {type(data).__name__}")
			raise ValueError(f"People document must be a JSON array: {filepath}")

		people = []  # accumulator for parsed Person objects
		for index, record in enumerate(data):  # keep track of position for diagnostics
			try:
				people.append(self._parse_person(record))  # convert dict -> Person
			except (TypeError, ValueError, KeyError) as e:
				logger.warning(f"[DataLoader] Skipping invalid person at index {index}: {e}")  # malformed record
				continue  # move on

		logger.info(f"[DataLoader] Successfully loaded {len(people)} people.")  # summary
		return people  # return list

	def load_artists(self, filepath: Union[str, Path]) -> Dict[str, List[str]]:
		"""
		Load the genre -> artists mapping from a JSON object.
		Genres whose value is not a list of strings are skipped with a warning.
		"""
		data = self._read_json(filepath)  # parsed document
		if not isinstance(data, dict):  # must be an object keyed by genre
			logger.error(f"[DataLoader] Expected a JSON object of genres in {filepath}, got {type(data).__name__}")
			raise ValueError(f"Artists document must be a JSON object: {filepath}")

		artists: Dict[str, List[str]] = {}  # accumulator
		for genre, names in data.items():
			try:
				artists[genre] = self._parse_string_list(names, strict=True)  # validated names
			except ValueError as e:
				logger.warning(f"[DataLoader] Skipping genre '{genre}': {e}")  # malformed bucket
				continue

		total = sum(len(v) for v in artists.values())  # artist count for the summary
		logger.info(f"[DataLoader] Successfully loaded {total} artists across {len(artists)} genres.")
		return artists

	def _read_json(self, filepath: Union[str, Path]) -> Any:
		"""Open and parse one JSON document with clear errors for missing or broken files."""
		filepath = Path(filepath)  # normalize path

		# Validate the file presence early to give clear error messages
		if not filepath.exists():
			raise FileNotFoundError(f"Data file not found: {filepath}")

		logger.info(f"[DataLoader] Loading {filepath}...")  # log action
		with open(filepath, 'r', encoding='utf-8') as f:
			try:
				return json.load(f)
			except json.JSONDecodeError as e:
				logger.error(f"[DataLoader] Invalid JSON in {filepath}: {e}")
				raise ValueError(f"Invalid JSON in {filepath}: {e}") from e

	def _parse_person(self, data: Any) -> Person:
		"""
		Convert a raw dictionary into a Person.
		List fields may arrive as lists or comma-separated strings.
		"""
		if not isinstance(data, dict):
			raise TypeError(f"expected an object, got {type(data).__name__}")

		name = data.get('name')
		if not isinstance(name, str) or not name.strip():  # name is required and searchable
			raise ValueError("missing or empty 'name'")

		location = data.get('location') or ''
		if not isinstance(location, str):
			raise ValueError("'location' must be a string")

		cleaned = dict(data)  # keep any extra fields untouched
		cleaned['musicGenres'] = self._parse_string_list(data.get('musicGenres'))
		cleaned['movies'] = self._parse_string_list(data.get('movies'))
		cleaned['location'] = location
		return Person.from_dict(cleaned)

	def _parse_string_list(self, value: Any, strict: bool = False) -> List[str]:
		"""
		Normalize a value that may be None, a list, or a comma-separated string
		into a list of strings. With strict=True only real lists are accepted.
		"""
		if value is None:  # missing field
			if strict:
				raise ValueError("expected a list of strings, got null")
			return []  # treat as empty list
		if isinstance(value, list):  # already a list
			if not all(isinstance(item, str) for item in value):
				raise ValueError("list entries must be strings")
			return list(value)
		if isinstance(value, str) and not strict:  # comma-separated string
			return [item.strip() for item in value.split(',') if item.strip()]  # split/trim
		raise ValueError(f"expected a list of strings, got {type(value).__name__}")
