"""
Close-name suggestions for actor names that do not resolve exactly.
Only used to enrich error messages; resolution itself stays exact and case-sensitive.
"""

from typing import Iterable, List

from rapidfuzz import process, fuzz, utils  # fuzzy matching utilities

from loguru import logger  # console logging


class NameMatcher:
	"""Fuzzy lookup over the known actor names."""

	def __init__(self, names: Iterable[str]):
		# Pre-build the choice list once to avoid recreating it on each lookup
		self._names = list(names)
		logger.debug(f"[Matcher] Initialized with {len(self._names)} names")

	def suggest(self, name: str, limit: int = 3, cutoff: float = 80) -> List[str]:
		"""Return up to limit known names scoring at least cutoff against name, best first."""
		if not name or not name.strip() or limit <= 0 or not self._names:
			return []
		# Case-insensitive scoring; the returned names keep their original spelling
		matches = process.extract(
			name,
			self._names,
			scorer=fuzz.WRatio,
			processor=utils.default_process,
			limit=limit,
			score_cutoff=cutoff,
		)
		for match, score, _ in matches:
			logger.debug(f"[Matcher] '{name}' ~ '{match}' (score={score:.1f})")
		return [match for match, _, _ in matches]
