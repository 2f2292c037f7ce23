from contextlib import contextmanager

from sqlalchemy import create_engine, event
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import sessionmaker, DeclarativeBase, Session
from .errors import DependencyUnavailable
from .settings import get_settings

settings = get_settings()

# Create the SQLAlchemy engine
engine = create_engine(settings.DATABASE_URL, pool_pre_ping=True)

if engine.dialect.name == "sqlite":
    # SQLite leaves FK enforcement (and ON DELETE CASCADE) off per connection
    @event.listens_for(engine, "connect")
    def _enable_sqlite_fks(dbapi_conn, _record):
        cur = dbapi_conn.cursor()
        cur.execute("PRAGMA foreign_keys=ON")
        cur.close()

# Define the base class that all models should inherit from
class Base(DeclarativeBase):
    pass

# Session factory
SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)

# Dependency for FastAPI routes
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

@contextmanager
def transaction(db: Session):
    """
    One write unit: commit on success, roll back on any error.
    A lost connection surfaces as DependencyUnavailable.
    """
    try:
        yield db
        db.commit()
    except OperationalError as e:
        db.rollback()
        raise DependencyUnavailable() from e
    except Exception:
        db.rollback()
        raise
