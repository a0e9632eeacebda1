"""
FastAPI server exposing the Bacon score API.
Endpoints:
- GET /health: basic health check with graph statistics
- GET /score?actor=...&path=false: returns the actor's score and, optionally, the hop chain

Startup loads the dataset at BACON_DATA_PATH (default data/movies.txt) once;
every request is answered from that in-memory graph.
"""

# Import standard libraries for filesystem paths and timing
import time  # measure startup and request latencies
from typing import List, Optional  # precise typing for clarity
from pathlib import Path  # path-safe filesystem handling

# Import FastAPI for building the web API and Pydantic for response models
from fastapi import FastAPI, HTTPException, Query  # FastAPI primitives
from pydantic import BaseModel  # response schema definitions

# Import our internal modules for data loading and scoring
from baconscore import config  # paths, anchor, API metadata
from baconscore.data_loader import DataLoader  # dataset -> graph
from baconscore.errors import ActorNotFoundError, MalformedDatasetError  # lookup and dataset errors
from baconscore.models import Hop, ScoreStatus  # result types
from baconscore.query_driver import QueryDriver  # resolve + search

# Import loguru for simple, structured console logging
from loguru import logger  # convenient console logger

# Instantiate the FastAPI application with metadata
app = FastAPI(title=config.API_TITLE, version=config.API_VERSION)  # web app

# Globals that hold the query driver instance and measured startup time
DRIVER: Optional[QueryDriver] = None  # will point to the initialized driver
STARTUP_TIME_S: float = 0.0  # measures how long startup took


# Pydantic model for one step of the hop chain
class HopOut(BaseModel):
	from_actor: str  # actor the step starts from
	movie: str  # movie both actors appear in
	to_actor: str  # actor the step reaches


# Pydantic model for a score answer
class ScoreResponse(BaseModel):
	actor: str  # queried actor
	anchor: str  # reference actor
	status: ScoreStatus  # found / no_bacon
	score: Optional[int] = None  # distance when found
	path: Optional[List[HopOut]] = None  # hop chain when requested
	elapsed_ms: float  # server-side time in ms


def hop_out(hop: Hop) -> HopOut:
	return HopOut(from_actor=hop.from_actor.name, movie=hop.movie.title, to_actor=hop.to_actor.name)


def init_driver(data_path: Path, anchor_name: Optional[str] = None) -> QueryDriver:
	"""Load the dataset and build the driver used by the endpoints."""
	global DRIVER  # refer to module-level global
	store = DataLoader().load_graph_from_file(data_path)  # parse dataset
	DRIVER = QueryDriver(store, anchor_name=anchor_name)  # bind store + anchor
	return DRIVER


# FastAPI startup hook to initialize the driver once
@app.on_event("startup")
async def startup_event():
	"""Load the graph and log how long it took."""
	global STARTUP_TIME_S  # refer to module-level global
	start = time.time()  # start timer for startup latency

	logger.info(f"[API] Startup: loading graph from {config.DATA_PATH}...")  # log intent
	try:
		init_driver(config.DATA_PATH)
	except (FileNotFoundError, MalformedDatasetError) as e:
		# Keep serving /health so probes can report the failure
		logger.error(f"[API] Graph not loaded: {e}")

	STARTUP_TIME_S = time.time() - start  # elapsed seconds
	logger.info(f"[API] Startup complete in {STARTUP_TIME_S:.2f}s.")  # summary log


# Simple health endpoint for readiness checks
@app.get("/health")
async def health():
	"""Return minimal health info for liveness/readiness probes."""
	return {
		"status": "ok",  # constant indicator
		"engine_ready": DRIVER is not None,  # True if graph loaded
		"startup_seconds": round(STARTUP_TIME_S, 2),  # startup latency
		"anchor": DRIVER.anchor_name if DRIVER else config.ANCHOR_NAME,  # reference actor
		"graph": DRIVER.store.stats() if DRIVER else None,  # actor/movie counts
	}


# Main score endpoint
@app.get("/score", response_model=ScoreResponse)
async def score(
	actor: str = Query(..., min_length=1, description="Exact, case-sensitive actor name"),
	path: bool = Query(False, description="Include the chain of movies"),
):
	"""Compute the actor's distance to the anchor actor."""
	if DRIVER is None:  # graph must be loaded to serve
		logger.warning("[API] Score requested but graph not loaded")  # guard log
		raise HTTPException(status_code=503, detail="Graph not loaded")

	start = time.time()  # start timer
	logger.debug(f"[API] /score actor='{actor}' path={path}")  # debug log of input

	try:
		result = DRIVER.score(actor, with_path=path)  # resolve + BFS
	except ActorNotFoundError as e:
		logger.warning(f"[API] {e}")
		raise HTTPException(status_code=404, detail={"message": "Actor not found", "suggestions": e.suggestions})

	elapsed_ms = (time.time() - start) * 1000  # compute ms
	logger.info(f"[API] /score '{actor}' -> {result.status.value} {result.score} in {elapsed_ms:.2f} ms")  # summary

	return ScoreResponse(
		actor=result.actor,
		anchor=result.anchor,
		status=result.status,
		score=result.score,
		path=[hop_out(h) for h in result.path] if result.path is not None else None,
		elapsed_ms=round(elapsed_ms, 2),
	)
