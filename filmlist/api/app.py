"""FastAPI app, CORS, and route registration."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from filmlist.config import CORS_ORIGINS, LOG_LEVEL

# Configure logging in the worker process (uvicorn --reload spawns a fresh one)
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(levelname)s: %(name)s: %(message)s",
)

from filmlist.api.state import AppState, get_state

# Import routes after state to avoid circular imports
from filmlist.api.routes import films, notices, view

__all__ = ["app", "AppState", "get_state"]

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    state = get_state()
    await state.startup()
    logger.info("Catalog ready: %d films", len(state.catalog.films))

    yield

    await state.shutdown()


app = FastAPI(
    title="Filmlist API",
    description="Film/donghua watch list backed by a spreadsheet",
    lifespan=lifespan,
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(films.router, prefix="/api/films", tags=["films"])
app.include_router(view.router, prefix="/api/view", tags=["view"])
app.include_router(notices.router, prefix="/api/notices", tags=["notices"])
