"""
Score actors against the anchor actor from the command line.

This script:
1) Loads the movie/actor dataset named on the command line
2) Reads actor names from stdin, one per line
3) Prints "Score: <n>" or "Score: No Bacon!" for each (with -l, the hop chain too)

Usage:
    poetry run python -m scripts.bacon_score [-l] data/movies.txt < queries.txt

Exit status is 1 when the arguments or the dataset are unusable, or when any
queried actor could not be found; otherwise 0.
"""

import argparse  # command-line flags
import sys  # standard streams and exit codes
from typing import List, Optional  # type hints

from loguru import logger  # console logging

from baconscore import config  # anchor and log level
from baconscore.data_loader import DataLoader  # dataset -> graph
from baconscore.errors import MalformedDatasetError  # bad dataset structure
from baconscore.query_driver import QueryDriver  # per-line scoring


def build_arg_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(description="Compute Bacon scores for actors read from stdin.")
	parser.add_argument('-l', dest='long', action='count', default=0, help="also print the chain of movies for each score")
	parser.add_argument('--anchor', default=None, help=f"reference actor (default: {config.ANCHOR_NAME})")
	parser.add_argument('--log-level', default=config.LOG_LEVEL, help="loguru level for stderr diagnostics")
	parser.add_argument('dataset', nargs='*', help="movie/actor dataset file")
	return parser


def main(argv: Optional[List[str]] = None) -> int:
	args = build_arg_parser().parse_args(argv)

	# Keep diagnostics on stderr so stdout only carries score lines
	logger.remove()
	logger.add(sys.stderr, level=args.log_level.upper())

	if args.long > 1:
		sys.stderr.write("Too many optional Arguments.\n")
		return 1
	if len(args.dataset) > 1:
		sys.stderr.write("Too many Files were given.\n")
		return 1
	if not args.dataset:
		sys.stderr.write("Could not Open the File.\n")
		return 1

	loader = DataLoader()
	try:
		store = loader.load_graph_from_file(args.dataset[0])
	except (FileNotFoundError, IsADirectoryError, PermissionError) as e:
		logger.error(f"[CLI] {e}")
		sys.stderr.write("Could not Open the File.\n")
		return 1
	except MalformedDatasetError as e:
		logger.error(f"[CLI] {e}")
		sys.stderr.write(f"Malformed dataset: {e}\n")
		return 1

	driver = QueryDriver(store, anchor_name=args.anchor)
	return driver.run(sys.stdin, sys.stdout, sys.stderr, long_output=bool(args.long))


if __name__ == '__main__':
	sys.exit(main())
