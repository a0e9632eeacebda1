"""
Unit tests for GraphStore: find-or-create, linking and movie registration.
"""

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
	sys.path.insert(0, str(ROOT))

from baconscore.graph_store import GraphStore
from baconscore.models import Movie


def test_find_or_create_is_idempotent():
	store = GraphStore()
	a = store.find_or_create_actor("Kevin Bacon")
	b = store.find_or_create_actor("Kevin Bacon")
	assert a is b
	assert len(store) == 1
	assert a.movies == []


def test_names_are_case_sensitive():
	store = GraphStore()
	store.find_or_create_actor("Kevin Bacon")
	assert store.find_actor("kevin bacon") is None
	assert store.find_actor("Kevin Bacon ") is None
	assert "Kevin Bacon" in store
	assert "kevin bacon" not in store


def test_link_is_bidirectional_and_deduplicated():
	store = GraphStore()
	actor = store.find_or_create_actor("Ed Harris")
	movie = Movie(title="Apollo 13")
	store.link(actor, movie)
	store.link(actor, movie)
	assert actor.movies == [movie]
	assert movie.actors == [actor]


def test_register_movie_links_cast():
	store = GraphStore()
	crowe = store.find_or_create_actor("Russell Crowe")
	harris = store.find_or_create_actor("Ed Harris")
	movie = store.register_movie("A Beautiful Mind", [crowe, harris, crowe])
	assert [a.name for a in movie.actors] == ["Russell Crowe", "Ed Harris"]
	assert crowe.movies == [movie]
	assert list(store.movies()) == [movie]


def test_actor_order_and_stats():
	store = GraphStore()
	for name in ["C", "A", "B", "A"]:
		store.find_or_create_actor(name)
	assert store.actor_names() == ["C", "A", "B"]
	assert [a.name for a in store.actors()] == ["C", "A", "B"]
	store.register_movie("M", [store.find_actor("A"), store.find_actor("B")])
	assert store.stats() == {"actors": 3, "movies": 1, "memberships": 2}


if __name__ == '__main__':
	test_find_or_create_is_idempotent()
	test_names_are_case_sensitive()
	test_link_is_bidirectional_and_deduplicated()
	test_register_movie_links_cast()
	test_actor_order_and_stats()
	print("All GraphStore tests passed!")
