"""
Streamlit UI for People Search.
Calls the local FastAPI server at http://localhost:8000 to fetch search results,
or runs locally by loading the seed documents like the API does.

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
from people_search.artists import ArtistDirectory  # genre -> artists directory
from people_search.config import get_settings  # same data paths as the API
from people_search.data_loader import DataLoader  # load seed documents
from people_search.models import SortDirection, SortKey  # sort options
from people_search.search_engine import SearchEngine  # scoring + ordering

# Default URL where the FastAPI server is expected to run locally
DEFAULT_API_URL = "http://localhost:8000"  # default API base URL

# Configure Streamlit page (title and layout width)
st.set_page_config(page_title="People Search", layout="wide")  # wide layout

# Main page title
st.title("People Search")  # header

# Cache the local engine so we only load the seed data once per session
@st.cache_resource(show_spinner=True)
def init_local_engine() -> Optional[SearchEngine]:
	"""Create a local SearchEngine from the configured seed documents."""
	try:
		settings = get_settings()  # env/.env driven paths
		loader = DataLoader()  # create loader
		artists = ArtistDirectory(loader.load_artists(settings.artists_path), policy=settings.duplicate_artist_policy)
		people = loader.load_people(settings.people_path)  # read roster
		return SearchEngine(people, artists)  # success
	except (OSError, ValueError) as e:
		# Show an error in the UI so users know local mode failed
		st.error(f"Failed to initialize local search engine: {e}")
		return None  # signal failure

# Sidebar contains configuration controls
with st.sidebar:
	st.header("Settings")  # section label
	sort = st.selectbox("Sort by", [k.value for k in SortKey], index=1)  # score by default
	sort_dir = st.radio("Direction", [d.value for d in SortDirection], index=1, horizontal=True)  # DESC by default
	api_url = st.text_input("API URL", DEFAULT_API_URL)  # where the API lives
	# Toggle to force local mode; if API health probe fails we also fall back to local
	use_local = st.toggle("Use local engine", value=False, help="If enabled or API is unreachable, the app will run fully locally.")

# If not forcing local, check quickly whether the API is reachable
api_available = False  # default assumption
if not use_local:
	try:
		h = requests.get(f"{api_url}/health", timeout=3)  # ping API health endpoint
		api_available = h.ok  # True if server responded 200 OK
	except requests.RequestException:
		api_available = False  # probe failed
		st.sidebar.info("API not reachable; will use local engine.")  # inform user

# Initialize local engine only when needed (user toggle or API not available)
local_engine: Optional[SearchEngine] = None  # placeholder
if use_local or not api_available:
	with st.spinner("Initializing local engine..."):
		local_engine = init_local_engine()  # load seed data
		if local_engine is not None:
			st.sidebar.success("Local engine ready.")  # success note
		else:
			st.sidebar.error("Local engine failed to initialize.")  # error note

# Main text input where users type a query
query = st.text_input("Search people", placeholder="e.g., Beatles, Matrix, New York")

col1, col2 = st.columns([1, 3])  # grid with ratio 1:3
with col1:
	search_btn = st.button("Search", type="primary")  # triggers a search
with col2:
	st.caption("Matches names, locations, movies, music genres and favorite artists")

# When user clicks Search and the field isn't empty, perform the query
if search_btn and query.strip():
	with st.spinner("Searching..."):
		try:
			if local_engine is not None:
				# Local mode: run the search inside this process
				res = local_engine.search(query, sort=sort, sort_dir=sort_dir)
				results_payload = {"results": [r.to_dict() for r in res], "elapsed_ms": 0.0}
			else:
				# API mode: call the server and let it perform the search
				resp = requests.get(f"{api_url}/people/search", params={"q": query, "sort": sort, "sortDir": sort_dir}, timeout=10)
				resp.raise_for_status()  # raise error if server responded with an error code
				results_payload = resp.json()  # parse JSON returned by API

			results = results_payload.get('results', [])
			st.success(f"Found {len(results)} people in {results_payload.get('elapsed_ms', 0)} ms")
			st.divider()  # visual separator

			for i, item in enumerate(results, start=1):
				st.subheader(f"{i}. {item['name']}")  # person name
				st.caption(f"Score: {item['score']} | Matched: {', '.join(item['matches'])}")  # score breakdown
			if not results:
				st.info("Nobody matched that query.")

		except requests.RequestException as e:  # network/API errors
			st.error(f"API request failed: {e}")  # show human-friendly message

# Show a footer indicator of current mode
st.sidebar.markdown("---")  # separator
if local_engine is not None:
	st.sidebar.caption("Mode: Local engine")  # mode label
else:
	st.sidebar.caption("Mode: API client (ensure uvicorn api:app --reload is running)")  # mode label
