import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from .config import settings
from .database import migrate
from .routers import availabilities, events

logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    migrate()
    logger.info("Availabilities API started")
    yield


app = FastAPI(title="Availabilities API (SQLite)", lifespan=lifespan)
app.include_router(availabilities.router)
app.include_router(events.router)


@app.get("/health")
def health():
    return {"status": "ok"}
