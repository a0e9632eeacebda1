"""
Path search module.
Breadth-first search over the bipartite actor-movie graph, hopping Actor -> Movie -> Actor.
"""

from collections import deque  # FIFO work queue
from dataclasses import dataclass, field  # per-query scratch container
from typing import Dict, List, Optional, Set, Tuple  # type annotations

from loguru import logger  # console logging

from .models import Actor, Hop, Movie  # graph entities


@dataclass
class SearchState:
	"""
	Scratch state of one search. A new instance is created for every query,
	so nothing discovered by one query is visible to the next.
	"""
	visited: Set[int] = field(default_factory=set)  # id() of discovered actors
	level: Dict[int, int] = field(default_factory=dict)  # id(actor) -> distance from anchor
	parent: Dict[int, Tuple[Actor, Movie]] = field(default_factory=dict)  # id(actor) -> (previous actor, shared movie)
	expanded: int = 0  # actors popped from the queue

	def discover(self, actor: Actor, level: int, via: Optional[Tuple[Actor, Movie]] = None) -> None:
		key = id(actor)
		self.visited.add(key)
		self.level[key] = level
		if via is not None:
			self.parent[key] = via

	def is_visited(self, actor: Actor) -> bool:
		return id(actor) in self.visited

	def level_of(self, actor: Actor) -> int:
		"""Distance from the anchor, or -1 if the actor was never discovered."""
		return self.level.get(id(actor), -1)


class PathSearchEngine:
	"""
	Computes shortest movie-hop distances between actors.
	Both actors must already be resolved handles from the same GraphStore.
	"""

	def shortest_distance(self, anchor: Actor, target: Actor) -> Optional[int]:
		"""Number of shared-movie hops from anchor to target, or None when unreachable."""
		if anchor is target:
			return 0
		state = self._search(anchor, target)
		return state.level_of(target) if state.is_visited(target) else None

	def shortest_path(self, anchor: Actor, target: Actor) -> Optional[List[Hop]]:
		"""
		The chain of hops from anchor to target along one shortest path.
		Empty when anchor is target, None when unreachable.
		"""
		if anchor is target:
			return []
		state = self._search(anchor, target)
		if not state.is_visited(target):
			return None

		hops: List[Hop] = []
		cur = target
		while cur is not anchor:
			prev, movie = state.parent[id(cur)]
			hops.append(Hop(from_actor=prev, movie=movie, to_actor=cur))
			cur = prev
		hops.reverse()
		return hops

	def _search(self, anchor: Actor, target: Actor) -> SearchState:
		"""Run BFS from anchor, stopping as soon as target is discovered."""
		state = SearchState()
		state.discover(anchor, 0)
		queue = deque([anchor])

		while queue:
			a = queue.popleft()
			state.expanded += 1
			next_level = state.level_of(a) + 1

			for movie in a.movies:
				for c in movie.actors:
					if state.is_visited(c):
						continue
					state.discover(c, next_level, via=(a, movie))
					if c is target:
						logger.debug(
							f"[Search] {anchor.name} -> {target.name}: distance {next_level} "
							f"after expanding {state.expanded} actors"
						)
						return state
					queue.append(c)

		logger.debug(f"[Search] {anchor.name} -> {target.name}: unreachable after expanding {state.expanded} actors")
		return state
