import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.errors import register_error_handlers
from app.api.goal import router as goal_router
from app.api.health import router as health_router
from app.api.weights import router as weights_router
from app.core.config import Settings, settings
from app.db import Database


# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def create_app(config: Settings | None = None, database: Database | None = None) -> FastAPI:
    """Build the API around an explicitly constructed Database.

    The database's schema is created on startup and its engine disposed on
    shutdown; tests pass their own Database to point at a scratch file.
    """
    config = config or settings
    db = database or Database(config.sqlalchemy_url, echo=config.sql_echo)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.database.init_schema()
        yield
        app.state.database.close()
        logger.info("Database connection closed")

    app = FastAPI(title="weight-tracker", version="0.1.0", lifespan=lifespan)
    app.state.database = db

    # Allow CORS for the frontend
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[config.cors_origin],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Origin", "Content-Type", "Accept"],
        expose_headers=["Content-Length"],
    )

    register_error_handlers(app)

    app.include_router(health_router)
    app.include_router(weights_router)
    app.include_router(goal_router)

    @app.get("/")
    def root():
        return {"message": "Weight tracker backend is running"}

    return app


app = create_app()


if __name__ == "__main__":
    logger.info("Starting server on port %s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
