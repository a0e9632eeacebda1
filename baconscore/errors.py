"""
Exception types raised by the Bacon Score engine.
"""

from typing import List, Optional


class BaconScoreError(Exception):
	"""Base class for all engine errors."""


class MalformedDatasetError(BaconScoreError):
	"""An actor line appeared before any movie header; the graph cannot be trusted past it."""

	def __init__(self, line_number: int, line: str):
		self.line_number = line_number
		self.line = line
		super().__init__(f"Actor line before any movie header at line {line_number}: {line!r}")


class ActorNotFoundError(BaconScoreError, LookupError):
	"""A queried name does not match any actor in the graph."""

	def __init__(self, name: str, suggestions: Optional[List[str]] = None):
		self.name = name
		self.suggestions = list(suggestions or [])
		message = f"Actor not found: {name!r}"
		if self.suggestions:
			message += f" (did you mean: {', '.join(self.suggestions)})"
		super().__init__(message)
