"""
Streamlit UI for Bacon Score.
Calls the local FastAPI server at http://localhost:8000 to fetch scores,
or runs locally by loading the dataset (BACON_DATA_PATH) like the API does.

Run API (optional):   uvicorn api:app --reload
Run UI:                streamlit run streamlit_app.py
"""

# HTTP client to call the API when running in API mode
import requests  # make web requests to the FastAPI server
# Streamlit framework to build a simple interactive UI
import streamlit as st  # UI primitives
# Typing to make function signatures clearer
from typing import Optional  # indicates values can be None

# Local engine imports for fallback/local mode (when API isn't used)
from baconscore import config  # dataset path, anchor, default API URL
from baconscore.data_loader import DataLoader  # load graph from file
from baconscore.errors import ActorNotFoundError  # unknown actor
from baconscore.query_driver import QueryDriver  # resolve + BFS

# Configure Streamlit page (title and layout width)
st.set_page_config(page_title="Bacon Score", layout="centered")

# Main page title
st.title("🥓 Bacon Score – Degrees of Separation")


# Cache the local driver so we only parse the dataset once per session
@st.cache_resource(show_spinner=True)
def init_local_driver(data_path: str, anchor: str) -> Optional[QueryDriver]:
	"""Create a local QueryDriver from the dataset file."""
	try:
		store = DataLoader().load_graph_from_file(data_path)  # parse dataset
		return QueryDriver(store, anchor_name=anchor)  # success
	except Exception as e:
		# Show an error in the UI so users know local mode failed
		st.error(f"Failed to load dataset: {e}")
		return None  # signal failure


def local_score(driver: QueryDriver, name: str) -> dict:
	"""Run a query in-process and shape the answer like the API response."""
	try:
		result = driver.score(name, with_path=True)
	except ActorNotFoundError as e:
		return {"error": "Actor not found", "suggestions": e.suggestions}
	return {
		"actor": result.actor,
		"anchor": result.anchor,
		"status": result.status.value,
		"score": result.score,
		"path": [
			{"from_actor": h.from_actor.name, "movie": h.movie.title, "to_actor": h.to_actor.name}
			for h in result.path
		] if result.path is not None else None,
	}


def api_score(api_url: str, name: str) -> dict:
	"""Ask the API and normalize a 404 into the same error shape as local mode."""
	resp = requests.get(f"{api_url}/score", params={"actor": name, "path": True}, timeout=30)
	if resp.status_code == 404:
		detail = resp.json().get("detail", {})
		return {"error": detail.get("message", "Actor not found"), "suggestions": detail.get("suggestions", [])}
	resp.raise_for_status()  # raise error if server responded with another error code
	return resp.json()


# Sidebar contains configuration controls
with st.sidebar:
	st.header("Settings")
	api_url = st.text_input("API URL", config.DEFAULT_API_URL)
	data_path = st.text_input("Dataset (local mode)", str(config.DATA_PATH))
	anchor = st.text_input("Anchor actor (local mode)", config.ANCHOR_NAME)
	use_local = st.toggle("Use local engine", value=False, help="If enabled or API is unreachable, the app will run fully locally.")

# If not forcing local, check quickly whether the API is reachable
api_available = False
if not use_local:
	try:
		h = requests.get(f"{api_url}/health", timeout=3)  # ping API health endpoint
		api_available = h.ok and h.json().get("engine_ready", False)
	except requests.RequestException:
		api_available = False
	if not api_available:
		st.sidebar.info("API not reachable; will use local engine.")

local_driver: Optional[QueryDriver] = None
if use_local or not api_available:
	with st.spinner("Loading dataset..."):
		local_driver = init_local_driver(data_path, anchor)
		if local_driver is not None:
			st.sidebar.success(f"Local graph ready: {local_driver.store.stats()['actors']} actors.")

name = st.text_input("Actor name (exact, case-sensitive)", placeholder="e.g., Russell Crowe")

if st.button("Score", type="primary") and name:
	with st.spinner("Searching..."):
		try:
			payload = local_score(local_driver, name) if local_driver is not None else api_score(api_url, name)
		except requests.RequestException as e:  # network/API errors
			st.error(f"API request failed: {e}")
			payload = None

	if payload is None:
		pass
	elif "error" in payload:
		st.error(payload["error"])
		if payload.get("suggestions"):
			st.caption(f"Did you mean: {', '.join(payload['suggestions'])}?")
	elif payload["status"] == "found":
		st.metric(f"Distance to {payload['anchor']}", payload["score"])
		for hop in payload.get("path") or []:
			st.write(f"{hop['from_actor']} was in *{hop['movie']}* with {hop['to_actor']}")
	else:
		st.warning("Score: No Bacon!")

# Show a footer indicator of current mode
st.sidebar.markdown("---")
if local_driver is not None:
	st.sidebar.caption("Mode: Local engine")
else:
	st.sidebar.caption("Mode: API client (ensure uvicorn api:app --reload is running)")
