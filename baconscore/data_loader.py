"""
Data loading module.
Parses the line-oriented movie/actor dataset into typed records and builds the graph from them.

Dataset format (one record per line):
	Movie: <title>      any line containing ':' opens a new movie block
	<actor name>        any other non-blank line is an actor of the current movie
Lines starting with whitespace (including empty lines) are ignored.
"""

# Standard libs for typing and paths
from pathlib import Path  # filesystem-safe paths
from typing import Iterable, Iterator, Optional, Union  # type hints

# Console logging
from loguru import logger  # console logger

# Project modules
from .errors import MalformedDatasetError  # actor line before any movie
from .graph_store import GraphStore  # destination of parsed records
from .models import ActorLine, Movie, MovieHeader  # typed records and movie entity

Record = Union[MovieHeader, ActorLine]


class DataLoader:
	"""
	Record parser and graph builder for the movie/actor dataset.
	"""

	# Character that marks a movie header line
	DELIMITER = ':'
	# The title starts this many characters after the delimiter (": Title")
	TITLE_OFFSET = 2

	def parse_line(self, line: str, line_number: int = 0) -> Optional[Record]:
		"""
		Classify a single raw line.
		Returns None for blank lines, a MovieHeader for lines with ':', an ActorLine otherwise.
		"""
		if not line or line[0].isspace():  # blank or whitespace-leading line
			return None

		if line.endswith('\n'):  # drop the line terminator only, nothing else
			line = line[:-1]

		if self.DELIMITER in line:
			return MovieHeader(line_number=line_number, title=self.extract_title(line))
		return ActorLine(line_number=line_number, name=line)

	def extract_title(self, line: str) -> str:
		"""Title is everything from two characters after the first ':' to end of line."""
		return line[line.index(self.DELIMITER) + self.TITLE_OFFSET:]

	def iter_records(self, lines: Iterable[str]) -> Iterator[Record]:
		"""Yield typed records for every non-blank line, keeping 1-based line numbers."""
		for line_num, line in enumerate(lines, 1):
			record = self.parse_line(line, line_num)
			if record is not None:
				yield record

	def load_graph_from_lines(self, lines: Iterable[str], store: Optional[GraphStore] = None) -> GraphStore:
		"""
		Build (or extend) a GraphStore from dataset lines.
		Raises MalformedDatasetError if an actor line comes before the first movie header.
		"""
		store = store if store is not None else GraphStore()
		current: Optional[Movie] = None  # movie block being filled

		for record in self.iter_records(lines):
			if isinstance(record, MovieHeader):
				# Close the previous block before opening a new one
				if current is not None:
					store.add_movie(current)
				current = Movie(title=record.title)
				continue

			if current is None:
				logger.error(f"[DataLoader] Actor line before any movie header at line {record.line_number}")
				raise MalformedDatasetError(record.line_number, record.name)

			actor = store.find_or_create_actor(record.name)
			store.link(actor, current)

		# Last block has no following header to close it
		if current is not None:
			store.add_movie(current)

		stats = store.stats()
		logger.info(
			f"[DataLoader] Graph ready: {stats['actors']} actors, {stats['movies']} movies, "
			f"{stats['memberships']} memberships"
		)
		return store

	def load_graph_from_file(self, filepath: Union[str, Path]) -> GraphStore:
		"""
		Load the dataset file at filepath into a new GraphStore.
		"""
		filepath = Path(filepath)  # normalize path

		# Validate the file presence early to give clear error messages
		if not filepath.exists():
			raise FileNotFoundError(f"Movie data file not found: {filepath}")

		logger.info(f"[DataLoader] Loading graph from {filepath}...")

		# Read line-by-line so large datasets are never held in memory as one string
		with open(filepath, 'r', encoding='utf-8') as f:
			return self.load_graph_from_lines(f)
