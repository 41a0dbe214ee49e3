import logging

from sqlalchemy import create_engine, select, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker, declarative_base
from fastapi import Request

from app.core.constants import GOAL_WEIGHT_KEY

logger = logging.getLogger(__name__)

# SQLAlchemy Base class for models to inherit
Base = declarative_base()


class Database:
    """Owns the engine and session factory for one storage location.

    Built explicitly by the application (or a test) and closed explicitly;
    nothing in the package holds a module-level connection.
    """

    def __init__(self, url: str, echo: bool = False):
        self.url = url
        connect_args = {}
        if url.startswith("sqlite"):
            # Requests are served from a threadpool
            connect_args["check_same_thread"] = False
        self.engine: Engine = create_engine(
            url,
            echo=echo,
            pool_pre_ping=True,   # helps avoid stale connections
            connect_args=connect_args,
        )
        # Factory that creates DB sessions
        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
            bind=self.engine,
        )

    def init_schema(self) -> None:
        """Create tables and seed the goal_weight row. Safe to call repeatedly."""
        # Import models so their tables are registered on Base.metadata
        from app.models.setting import Setting
        from app.models.weight import WeightEntry  # noqa: F401

        logger.info("Initializing database at: %s", self.engine.url.render_as_string(hide_password=True))
        Base.metadata.create_all(bind=self.engine)

        with self.SessionLocal() as db:
            existing = db.execute(select(Setting).where(Setting.key == GOAL_WEIGHT_KEY)).scalar_one_or_none()
            if existing is None:
                db.add(Setting(key=GOAL_WEIGHT_KEY, value=None, updated_at=None))
                db.commit()
        logger.info("Database initialized successfully")

    def ping(self) -> bool:
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError:
            logger.exception("Database ping failed")
            return False

    def session(self) -> Session:
        return self.SessionLocal()

    def close(self) -> None:
        self.engine.dispose()


# Dependency we will use in FastAPI routes
def get_db(request: Request):
    db = request.app.state.database.session()
    try:
        yield db
    finally:
        db.close()
