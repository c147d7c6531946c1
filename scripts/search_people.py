"""
Search the seed roster from the command line.

This script:
1) Loads artists and people from the configured seed documents
2) Builds the artist directory and search engine
3) Runs one query and prints the ranked results

Usage:
    python -m scripts.search_people "beatles" --sort name --sort-dir ASC
"""

import argparse  # command-line options

from loguru import logger  # console logging

from people_search.artists import ArtistDirectory  # genre -> artists directory
from people_search.config import configure_logging, get_settings  # env-driven settings
from people_search.data_loader import DataLoader  # data ingestion
from people_search.models import SortDirection, SortKey  # sort options
from people_search.search_engine import SearchEngine  # scoring + ordering


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(description="Search people by name, location, movies, genres and artists.")
	parser.add_argument("query", help="text to search for (case-insensitive substring)")
	parser.add_argument("--sort", choices=[k.value for k in SortKey], default=SortKey.SCORE.value)
	parser.add_argument("--sort-dir", choices=[d.value for d in SortDirection], default=SortDirection.DESC.value)
	parser.add_argument("--people", help="people JSON document (defaults to settings)")
	parser.add_argument("--artists", help="artists JSON document (defaults to settings)")
	return parser


def main(argv=None):
	args = build_parser().parse_args(argv)
	settings = get_settings()  # env/.env defaults
	configure_logging(settings.log_level)

	loader = DataLoader()  # loader instance
	artists = ArtistDirectory(loader.load_artists(args.artists or settings.artists_path), policy=settings.duplicate_artist_policy)
	engine = SearchEngine(loader.load_people(args.people or settings.people_path), artists)

	results = engine.search(args.query, sort=args.sort, sort_dir=args.sort_dir)  # ranked list
	logger.info(f"[CLI] {len(results)} people matched '{args.query}'")
	for i, r in enumerate(results, 1):
		print(f"{i:>3}. [{r.score}] {r.name}  ({', '.join(r.matches)})")
	return results


if __name__ == '__main__':
	main()  # invoke search
