"""Pytest configuration and fixtures"""
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

SCENARIO = (
    "Movie: A Beautiful Mind\n"
    "Russell Crowe\n"
    "Ed Harris\n"
    "\n"
    "Movie: X-Men\n"
    "Kevin Bacon\n"
    "Ed Harris\n"
)


@pytest.fixture
def dataset_file(tmp_path):
    """The two-movie scenario dataset written to a temporary file"""
    path = tmp_path / "movies.txt"
    path.write_text(SCENARIO, encoding="utf-8")
    return path


@pytest.fixture
def client(dataset_file):
    """Test client for the FastAPI app, with the scenario graph loaded"""
    from fastapi.testclient import TestClient
    import api

    api.init_driver(dataset_file, anchor_name="Kevin Bacon")
    yield TestClient(api.app)
    api.DRIVER = None
