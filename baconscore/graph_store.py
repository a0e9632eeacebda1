"""
Graph store module.
Owns every Actor and Movie of the bipartite graph and the links between them.
"""

from typing import Dict, Iterator, List, Optional

from loguru import logger

from .models import Actor, Movie


class GraphStore:
	"""
	In-memory store for the actor-movie graph.

	Actors are unique by exact (case-sensitive) name and kept in insertion order.
	Movies are kept in registration order and never merged by title.
	The store only grows; nothing is ever removed.
	"""

	def __init__(self):
		self._actors: Dict[str, Actor] = {}  # name -> actor, dict keeps insertion order
		self._movies: List[Movie] = []  # finalized movies in dataset order

	def find_actor(self, name: str) -> Optional[Actor]:
		"""Exact-match lookup; returns None when no actor has this name."""
		return self._actors.get(name)

	def find_or_create_actor(self, name: str) -> Actor:
		"""Return the actor with this name, creating and registering it on first sight."""
		actor = self._actors.get(name)
		if actor is None:
			actor = Actor(name=name)
			self._actors[name] = actor
			logger.debug(f"[GraphStore] New actor #{len(self._actors)}: {name}")
		return actor

	def register_movie(self, title: str, cast: Optional[List[Actor]] = None) -> Movie:
		"""
		Append a finalized movie to the movie index.
		Any cast passed in is linked both ways, so the result is the same as
		linking each actor one by one.
		"""
		movie = Movie(title=title)
		for actor in cast or []:
			self.link(actor, movie)
		self.add_movie(movie)
		return movie

	def add_movie(self, movie: Movie) -> Movie:
		"""Register an already built movie (used by the parser when a movie block ends)."""
		self._movies.append(movie)
		logger.debug(f"[GraphStore] Registered movie #{len(self._movies)}: {movie.title} ({len(movie.actors)} actors)")
		return movie

	def link(self, actor: Actor, movie: Movie) -> None:
		"""
		Connect an actor and a movie in both directions.
		The movie is added to the actor's list unless that same movie is already there;
		the actor is added to the cast unless an actor with the same name is already there.
		"""
		if not actor.has_movie(movie):
			actor.movies.append(movie)
		if not movie.has_actor_named(actor.name):
			movie.actors.append(actor)

	def actors(self) -> Iterator[Actor]:
		"""Iterate actors in first-seen order."""
		return iter(self._actors.values())

	def movies(self) -> Iterator[Movie]:
		"""Iterate movies in registration order."""
		return iter(self._movies)

	def actor_names(self) -> List[str]:
		return list(self._actors.keys())

	def __contains__(self, name: object) -> bool:
		return name in self._actors

	def __len__(self) -> int:
		return len(self._actors)

	def stats(self) -> Dict[str, int]:
		"""Counts of actors, movies and actor-movie membership pairs."""
		return {
			"actors": len(self._actors),
			"movies": len(self._movies),
			"memberships": sum(len(a.movies) for a in self._actors.values()),
		}
