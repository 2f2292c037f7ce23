"""
Point the app at a throwaway SQLite database before anything imports
fittrack.settings, then create the schema and seed the catalog once.
"""
import os
import tempfile

_TMP_DIR = tempfile.mkdtemp(prefix="fittrack-tests-")
os.environ["DB_URL"] = f"sqlite:///{os.path.join(_TMP_DIR, 'test.db')}"

import pytest

from fittrack import models  # noqa: F401  # registers tables
from fittrack.db import Base, SessionLocal, engine
from fittrack.services.catalog import seed_catalog


@pytest.fixture(scope="session", autouse=True)
def _schema():
    Base.metadata.create_all(engine)
    with SessionLocal() as db:
        seed_catalog(db)
    yield
    engine.dispose()


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
