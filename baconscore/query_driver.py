"""
Query driver module.
Resolves queried actor names against the graph and reports their Bacon score.
"""

import sys  # default output streams
from typing import Iterable, List, Optional, TextIO  # type annotations

from loguru import logger  # console logging

from . import config  # anchor name and suggestion settings
from .errors import ActorNotFoundError  # per-query resolution failure
from .graph_store import GraphStore  # resolved graph
from .models import Actor, Hop, QueryResult, ScoreStatus  # entities and results
from .name_matcher import NameMatcher  # "did you mean" hints
from .search_engine import PathSearchEngine  # BFS

NOT_FOUND_MESSAGE = "Actor Could Not be Found."


def format_score(result: QueryResult) -> str:
	"""Render the one-line score report for a resolved query."""
	if result.status is ScoreStatus.FOUND:
		return f"Score: {result.score}"
	return "Score: No Bacon!"


def format_hop(hop: Hop) -> str:
	return f"\t{hop.from_actor.name} was in {hop.movie.title} with {hop.to_actor.name}"


class QueryDriver:
	"""
	Answers score queries against a fully built GraphStore.
	Queries are independent: a failed lookup never affects the ones after it.
	"""

	def __init__(
		self,
		store: GraphStore,
		anchor_name: Optional[str] = None,  # defaults to config.ANCHOR_NAME
		engine: Optional[PathSearchEngine] = None,
		suggestion_limit: Optional[int] = None,  # defaults to config.SUGGESTION_LIMIT
		suggestion_cutoff: Optional[float] = None,  # defaults to config.SUGGESTION_CUTOFF
	):
		self.store = store
		self.anchor_name = anchor_name if anchor_name is not None else config.ANCHOR_NAME
		self.engine = engine or PathSearchEngine()
		self.suggestion_limit = suggestion_limit if suggestion_limit is not None else config.SUGGESTION_LIMIT
		self.suggestion_cutoff = suggestion_cutoff if suggestion_cutoff is not None else config.SUGGESTION_CUTOFF
		self._matcher: Optional[NameMatcher] = None  # built on first failed lookup

	def resolve(self, name: str) -> Actor:
		"""Exact-match lookup; raises ActorNotFoundError with close names when missing."""
		actor = self.store.find_actor(name)
		if actor is None:
			raise ActorNotFoundError(name, self._suggest(name))
		return actor

	def _suggest(self, name: str) -> List[str]:
		if self.suggestion_limit <= 0:
			return []
		if self._matcher is None:
			self._matcher = NameMatcher(self.store.actor_names())
		return self._matcher.suggest(name, limit=self.suggestion_limit, cutoff=self.suggestion_cutoff)

	def score(self, name: str, with_path: bool = False) -> QueryResult:
		"""
		Score a single actor name.
		Raises ActorNotFoundError when the name is unknown; an unknown anchor or a
		missing path yields a NO_BACON result instead.
		"""
		actor = self.resolve(name)
		anchor = self.store.find_actor(self.anchor_name)

		if anchor is None:
			logger.debug(f"[Driver] Anchor '{self.anchor_name}' not in graph; '{name}' scores No Bacon")
			return QueryResult(actor=name, anchor=self.anchor_name, status=ScoreStatus.NO_BACON)

		if with_path:
			path = self.engine.shortest_path(anchor, actor)
			distance = len(path) if path is not None else None
		else:
			path = None
			distance = self.engine.shortest_distance(anchor, actor)

		if distance is None:
			return QueryResult(actor=name, anchor=self.anchor_name, status=ScoreStatus.NO_BACON)
		return QueryResult(
			actor=name,
			anchor=self.anchor_name,
			status=ScoreStatus.FOUND,
			score=distance,
			path=path,
		)

	def run(
		self,
		queries: Iterable[str],
		out: Optional[TextIO] = None,
		err: Optional[TextIO] = None,
		long_output: bool = False,
	) -> int:
		"""
		Answer one query per line, writing score lines to out and lookup errors to err.
		With long_output, each found score is followed by its hop chain.
		Returns 1 if any name failed to resolve, else 0.
		"""
		out = out or sys.stdout
		err = err or sys.stderr
		error_seen = False
		answered = 0

		for line in queries:
			name = line[:-1] if line.endswith('\n') else line

			try:
				result = self.score(name, with_path=long_output)
			except ActorNotFoundError as e:
				error_seen = True
				logger.warning(f"[Driver] {e}")
				err.write(NOT_FOUND_MESSAGE + "\n")
				if e.suggestions:
					err.write(f"Did you mean: {', '.join(e.suggestions)}?\n")
				continue

			answered += 1
			out.write(format_score(result) + "\n")
			if long_output and result.path:
				for hop in result.path:
					out.write(format_hop(hop) + "\n")

		logger.info(f"[Driver] Answered {answered} queries; lookup errors: {'yes' if error_seen else 'no'}")
		return 1 if error_seen else 0
