"""
Bacon Score

Degrees of separation between actors over a movie/actor dataset,
computed by breadth-first search over the bipartite actor-movie graph.
"""

__version__ = "1.0.0"
