"""FastAPI application — main entry point."""

from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import APIRouter, FastAPI
from sqlalchemy.exc import SQLAlchemyError

from eventplanner.config import get_settings
from eventplanner.core.exceptions import setup_exception_handlers
from eventplanner.core.logging import configure_logging
from eventplanner.core.middleware import setup_middleware
from eventplanner.infrastructure.database import Database

# Import routers
from eventplanner.interfaces.api.admin import router as admin_router
from eventplanner.interfaces.api.auth import router as auth_router
from eventplanner.interfaces.api.events import router as events_router

settings = get_settings()

# Configure logging immediately
configure_logging()
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan — owns the database for the life of the process."""
    logger.info("Starting Event Planner backend", env=settings.ENVIRONMENT)

    db = Database(settings.DATABASE_URL)
    try:
        db.ping()
        db.create_all()
    except SQLAlchemyError:
        # Fail fast: no retry, the process must not serve without a database
        logger.critical("Database unreachable, aborting startup")
        db.dispose()
        raise
    logger.info("Connected to database", dialect=db.engine.dialect.name)

    app.state.db = db
    try:
        yield
    finally:
        db.dispose()
        logger.info("Event Planner backend stopped")


app = FastAPI(
    title="Event Planner",
    description="API Backend — event bookings, login and role-gated administration",
    version="1.0.0",
    lifespan=lifespan,
)

setup_middleware(app, settings)
setup_exception_handlers(app)

api = APIRouter(prefix=settings.API_PREFIX)
api.include_router(auth_router)
api.include_router(events_router)
api.include_router(admin_router)
app.include_router(api)


@app.get("/")
def root():
    return {
        "name": "Event Planner",
        "version": "1.0.0",
        "status": "running",
        "docs": "/docs",
    }


@app.get("/health")
def health():
    return {"status": "healthy"}


def run() -> None:
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
