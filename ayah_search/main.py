"""Main FastAPI application for ayah search."""

import time
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from .api import health_router, metrics_router, search_router, verses_router
from .api.stats import SearchMetrics
from .config import Settings, get_settings
from .core.engine import SearchEngine
from .exceptions import AyahSearchError, RetrievalError
from .ingest import load_verses_json
from .logging_config import configure_logging
from .models.response import ErrorResponse
from .store import CorpusStore, InMemoryCorpusStore, SQLiteCorpusStore, VerseCache

logger = structlog.get_logger(__name__)
settings = get_settings()

SAMPLE_CORPUS_PATH = Path(__file__).parent / "data" / "sample_verses.json"
SQLITE_SUFFIXES = {".sqlite", ".sqlite3", ".db"}


def create_store(settings: Settings) -> CorpusStore:
    """
    Open the corpus configured by ``settings.corpus_path``.

    JSON files are loaded into memory, SQLite files are read in place, and an
    empty path falls back to the bundled sample corpus. With ``enable_cache``
    the store is wrapped in a :class:`VerseCache` snapshot.

    Raises:
        CorpusLoadError: If a JSON corpus cannot be parsed
    """
    corpus_path = Path(settings.corpus_path) if settings.corpus_path else SAMPLE_CORPUS_PATH

    if corpus_path.suffix.lower() in SQLITE_SUFFIXES:
        store: CorpusStore = SQLiteCorpusStore(corpus_path)
    else:
        store = InMemoryCorpusStore(load_verses_json(corpus_path))

    if settings.enable_cache:
        cache = VerseCache(store)
        cache.load()
        return cache
    return store


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    # Startup
    configure_logging(settings.log_level, settings.log_format)
    logger.info("Starting Ayah Search service", version=settings.app_version)

    try:
        store = create_store(settings)
    except AyahSearchError as e:
        logger.error("Failed to open corpus", error=str(e))
        raise

    app.state.engine = SearchEngine(store, settings)
    app.state.metrics = SearchMetrics()
    app.state.started_at = time.time()
    logger.info("Corpus ready", total_verses=app.state.engine.count())

    yield

    # Shutdown
    if isinstance(store, VerseCache):
        store.invalidate()
    logger.info("Shutting down Ayah Search service")


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    description="Approximate Quran verse search by transliteration and Indonesian translation",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan
)

# Add middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(GZipMiddleware, minimum_size=1000)


# Request logging middleware
@app.middleware("http")
async def log_requests(request: Request, call_next) -> Response:
    """Log all HTTP requests."""
    start_time = time.time()

    logger.info(
        "Request started",
        method=request.method,
        url=str(request.url),
        client_ip=request.client.host if request.client else None,
        user_agent=request.headers.get("user-agent")
    )

    response = await call_next(request)

    process_time = time.time() - start_time
    logger.info(
        "Request completed",
        method=request.method,
        url=str(request.url),
        status_code=response.status_code,
        process_time_ms=round(process_time * 1000, 2)
    )

    return response


@app.exception_handler(RetrievalError)
async def retrieval_exception_handler(request: Request, exc: RetrievalError) -> JSONResponse:
    """Corpus store failures are reported as service unavailable."""
    logger.error(
        "Corpus store failure",
        method=request.method,
        url=str(request.url),
        error=str(exc),
    )

    return JSONResponse(
        status_code=503,
        content=ErrorResponse(
            error="Service Unavailable",
            message="The verse corpus could not be read",
            details=exc.details if settings.debug else None
        ).model_dump(mode="json")
    )


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle global exceptions."""
    logger.error(
        "Unhandled exception",
        method=request.method,
        url=str(request.url),
        error=str(exc),
        exc_info=True
    )

    return JSONResponse(
        status_code=500,
        content=ErrorResponse(
            error="Internal Server Error",
            message="An unexpected error occurred",
            details={"exception": str(exc)} if settings.debug else None
        ).model_dump(mode="json")
    )


# Include API routers
app.include_router(search_router)
app.include_router(verses_router)
app.include_router(health_router)
app.include_router(metrics_router)


# Root endpoint
@app.get("/", summary="Root endpoint", description="Get basic information about the API")
async def root() -> dict:
    """Root endpoint with basic API information."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "description": "Approximate Quran verse search by transliteration and Indonesian translation",
        "docs_url": "/docs",
        "health_url": "/api/v1/health",
        "endpoints": {
            "search": "/api/v1/search/{mode}/{query}",
            "verse": "/api/v1/verses/{verse_key}",
            "surah": "/api/v1/surahs/{surah_id}",
            "juz": "/api/v1/juz/{juz_id}",
            "metrics": "/api/v1/metrics"
        },
        "status": "running"
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "ayah_search.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        workers=1 if settings.debug else settings.workers,
        log_level=settings.log_level.lower()
    )
