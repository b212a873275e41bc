from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from runova.core.config import settings

# SQLAlchemy Base class for models to inherit
Base = declarative_base()


def _engine_kwargs(url: str) -> dict:
    # SQLite (local dev, tests) is used from FastAPI's worker threads
    if url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}
    return {"pool_pre_ping": True}  # helps avoid stale Postgres connections


engine = create_engine(settings.database_url, **_engine_kwargs(settings.database_url))

# One session per request; the plan + workouts write commits once
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
