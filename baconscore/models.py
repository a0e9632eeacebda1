"""
Data models for the Bacon Score engine.
Defines the graph entities (actors, movies), the parsed record events and query results.
"""

# Import dataclass to define simple "record-like" classes without boilerplate
from dataclasses import dataclass, field  # auto-generates __init__, __repr__, etc.
# Enum gives the query outcome a closed set of values
from enum import Enum  # outcome labels
# Import typing helpers for precise and self-documenting types
from typing import List, Optional  # lists and optional values


@dataclass(eq=False)
class Actor:
	"""
	A single actor node in the bipartite actor-movie graph.
	Compared by identity: two Actor objects are the same node only if they are the same object.
	"""
	name: str  # unique, case-sensitive name as it appears in the dataset
	movies: List['Movie'] = field(default_factory=list)  # membership list in appearance order

	def has_movie(self, movie: 'Movie') -> bool:
		"""True if this exact movie (by identity) is already in the membership list."""
		return any(m is movie for m in self.movies)

	def __repr__(self) -> str:
		return f"Actor(name={self.name!r}, movies={len(self.movies)})"


@dataclass(eq=False)
class Movie:
	"""
	A movie node. Each movie header in the dataset creates a distinct Movie,
	even when two headers carry the same title.
	"""
	title: str  # text after the ': ' of the header line
	actors: List[Actor] = field(default_factory=list)  # cast, no repeated names

	def has_actor_named(self, name: str) -> bool:
		"""True if an actor with this exact name is already in the cast."""
		return any(a.name == name for a in self.actors)

	def __repr__(self) -> str:
		return f"Movie(title={self.title!r}, actors={len(self.actors)})"


@dataclass(frozen=True)
class MovieHeader:
	"""Parsed record: a line containing ':' that opens a new movie block."""
	line_number: int  # 1-based position in the input
	title: str  # extracted movie title


@dataclass(frozen=True)
class ActorLine:
	"""Parsed record: a non-blank line without ':' naming an actor of the current movie."""
	line_number: int  # 1-based position in the input
	name: str  # actor name taken verbatim


@dataclass(frozen=True)
class Hop:
	"""One step of a shortest path: from_actor and to_actor both appear in movie."""
	from_actor: Actor
	movie: Movie
	to_actor: Actor


class ScoreStatus(str, Enum):
	FOUND = "found"  # a path exists, score holds the distance
	NO_BACON = "no_bacon"  # anchor missing from the graph or no path exists


@dataclass
class QueryResult:
	"""
	Outcome of a single resolved query.
	Unresolved names never produce a QueryResult; they raise ActorNotFoundError instead.
	"""
	actor: str  # queried name
	anchor: str  # reference actor name
	status: ScoreStatus  # found / no_bacon
	score: Optional[int] = None  # distance when found
	path: Optional[List[Hop]] = None  # hop chain when requested and found
