"""
FastAPI server exposing the people search API.
Endpoints:
- GET /health: basic health check
- GET /people/search?q=...&sort=score&sortDir=DESC: ranked people with scores and matched fields
- POST /people: add a person to the roster
- GET /artists: snapshot of the genre -> artists map
- POST /artists: register an artist under a genre (409 if already there)

Startup loads the seed documents named in the settings (data/people.json and
data/artists.json by default) and builds the artist directory and search engine.
Handlers are plain async functions that never await inside a core call, so the
event loop runs every search and mutation to completion one at a time.
"""

import time  # measure startup and request latencies
from contextlib import asynccontextmanager  # lifespan hook
from typing import Dict, List, Optional  # precise typing for clarity

# Import FastAPI for building the web API and Pydantic for request/response models
from fastapi import FastAPI, Query, Request, Response  # FastAPI primitives
from fastapi.exceptions import RequestValidationError  # schema validation failures
from fastapi.responses import JSONResponse  # error payloads
from pydantic import BaseModel, ConfigDict, Field, field_validator  # request/response schema definitions
from starlette.exceptions import HTTPException  # base HTTP error type used by FastAPI routing

# Import our internal modules for data loading and search
from people_search.artists import ArtistDirectory  # genre -> artists directory
from people_search.config import configure_logging, get_settings  # env-driven settings
from people_search.data_loader import DataLoader  # loads the seed documents
from people_search.errors import DuplicateArtistError  # strict duplicate conflict
from people_search.models import Person, SortDirection, SortKey  # core data classes
from people_search.search_engine import SearchEngine  # core search engine

# Import loguru for simple, structured console logging
from loguru import logger  # convenient console logger

# Run startup once before serving requests
@asynccontextmanager
async def lifespan(app: FastAPI):
	await startup_event()
	yield


# Instantiate the FastAPI application with metadata
app = FastAPI(title="People Search API", version="1.0.0", lifespan=lifespan)  # web app

# Globals that hold the engine, the shared artist directory, and measured startup time
ENGINE: Optional[SearchEngine] = None  # will point to the initialized engine
ARTISTS: Optional[ArtistDirectory] = None  # shared with ENGINE
STARTUP_TIME_S: float = 0.0  # measures how long startup took


# Pydantic model for a single ranked search item
class PersonSearchResult(BaseModel):
	name: str  # person display name
	score: int  # sum of matched field weights
	matches: List[str]  # matched field ids


# Pydantic model for the complete search response payload
class SearchResponse(BaseModel):
	query: str  # original query string
	sort: SortKey  # primary sort key used
	sortDir: SortDirection  # direction applied to the primary key
	elapsed_ms: float  # server-side search time in ms
	results: List[PersonSearchResult]  # ranked items


# Incoming person document; unknown fields are kept as extra attributes
class PersonIn(BaseModel):
	model_config = ConfigDict(extra="allow")

	name: str = Field(..., min_length=1)
	musicGenres: List[str] = Field(default_factory=list)
	movies: List[str] = Field(default_factory=list)
	location: str = ""

	@field_validator("name")
	@classmethod
	def name_not_blank(cls, v: str) -> str:
		if not v.strip():  # same rule the seed loader applies
			raise ValueError("name must not be blank")
		return v


class PersonCreated(BaseModel):
	message: str
	name: str


class AddArtistRequest(BaseModel):
	genre: str = Field(..., min_length=1)
	artist: str = Field(..., min_length=1)


class AddArtistResponse(BaseModel):
	message: str
	genre: str
	artist: str


class ErrorResponse(BaseModel):
	error: str


def _require_engine() -> SearchEngine:
	if ENGINE is None or ARTISTS is None:  # startup hasn't run or failed
		logger.warning("[API] Request received but engine not initialized")  # guard log
		raise HTTPException(status_code=503, detail="Search engine not initialized")
	return ENGINE


# Error payloads all share the {"error": "..."} shape
@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
	errors = exc.errors()
	first = errors[0] if errors else {}
	field = ".".join(str(p) for p in first.get("loc", ()) if p not in ("query", "body"))  # drop the location prefix
	message = f"Invalid '{field}': {first.get('msg', 'invalid request')}" if field else first.get("msg", "Invalid request")
	logger.debug(f"[API] {request.method} {request.url.path} rejected: {message}")
	return JSONResponse(status_code=400, content={"error": message})


@app.exception_handler(HTTPException)
async def http_error_handler(request: Request, exc: HTTPException):
	return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})


@app.exception_handler(DuplicateArtistError)
async def duplicate_artist_handler(request: Request, exc: DuplicateArtistError):
	return JSONResponse(status_code=409, content={"error": str(exc)})


# Startup routine, run once by the lifespan hook
async def startup_event():
	"""Load the seed documents and build the artist directory and search engine."""
	global ENGINE, ARTISTS, STARTUP_TIME_S  # refer to module-level globals
	start = time.time()  # start timer for startup latency

	settings = get_settings()  # read env/.env
	configure_logging(settings.log_level)  # apply configured verbosity
	logger.info("[API] Startup: loading people and artists...")  # log intent

	loader = DataLoader()  # create loader instance
	artists_data = loader.load_artists(settings.artists_path)  # genre -> artists
	people = loader.load_people(settings.people_path)  # roster

	ARTISTS = ArtistDirectory(artists_data, policy=settings.duplicate_artist_policy)  # shared directory
	ENGINE = SearchEngine(people, ARTISTS)  # create engine

	# Compute and log startup duration
	STARTUP_TIME_S = time.time() - start  # elapsed seconds
	logger.info(
		f"[API] Startup complete in {STARTUP_TIME_S:.2f}s with {ENGINE.size()} people "
		f"(duplicate artist policy: {ARTISTS.policy.value})."
	)  # summary log


# Simple health endpoint for readiness checks
@app.get("/health")
async def health():
	"""Return minimal health info for liveness/readiness probes."""
	return {
		"status": "ok",  # constant indicator
		"engine_ready": ENGINE is not None,  # True if engine initialized
		"people": ENGINE.size() if ENGINE is not None else 0,  # roster size
		"startup_seconds": round(STARTUP_TIME_S, 2)  # startup latency
	}


# Main search endpoint that accepts a free-text query
@app.get("/people/search", response_model=SearchResponse, responses={400: {"model": ErrorResponse}})
async def search_people(
	q: str = Query(..., min_length=1, description="Text to look for in names, locations, movies, genres and artists"),
	sort: SortKey = Query(SortKey.SCORE, description="Primary sort key"),
	sort_dir: SortDirection = Query(SortDirection.DESC, alias="sortDir", description="Direction for the primary key"),
):
	"""Search the roster and return ranked people."""
	if not q.strip():  # whitespace-only queries are treated as missing
		raise HTTPException(status_code=400, detail='Query parameter "q" is required')
	engine = _require_engine()

	# Time the search for latency insight
	start = time.time()  # start timer
	logger.debug(f"[API] /people/search q='{q}' sort={sort.value} sortDir={sort_dir.value}")  # debug log of input

	# Delegate to the engine
	results = engine.search(q, sort=sort, sort_dir=sort_dir)  # run search
	elapsed_ms = (time.time() - start) * 1000  # compute ms
	logger.info(f"[API] /people/search served {len(results)} results in {elapsed_ms:.2f} ms")  # summary

	# Convert engine results to response schema
	items = [PersonSearchResult(**r.to_dict()) for r in results]
	return SearchResponse(query=q, sort=sort, sortDir=sort_dir, elapsed_ms=round(elapsed_ms, 2), results=items)


@app.post("/people", status_code=201, response_model=PersonCreated, responses={400: {"model": ErrorResponse}})
async def add_person(body: PersonIn):
	"""Append a person to the in-memory roster."""
	engine = _require_engine()
	engine.add(Person.from_dict(body.model_dump()))
	logger.info(f"[API] Added person '{body.name}'")
	return PersonCreated(message="Person added successfully", name=body.name)


@app.get("/artists")
async def list_artists() -> Dict[str, List[str]]:
	"""Return a copy of the genre -> artists map."""
	_require_engine()
	return ARTISTS.to_dict()


@app.post(
	"/artists",
	status_code=201,
	response_model=AddArtistResponse,
	responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
async def add_artist(body: AddArtistRequest, response: Response):
	"""Register an artist under a genre; duplicates are 409 under the strict policy."""
	_require_engine()
	added = ARTISTS.add_artist(body.genre, body.artist)  # DuplicateArtistError -> 409 handler
	if not added:  # idempotent policy: already present, nothing created
		response.status_code = 200
		return AddArtistResponse(message="Artist already registered", genre=body.genre, artist=body.artist)
	return AddArtistResponse(message="Artist added successfully", genre=body.genre, artist=body.artist)
