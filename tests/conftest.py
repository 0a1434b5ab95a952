import os
import tempfile

os.environ["DATABASE_URL"] = f"sqlite:///{tempfile.mkdtemp()}/homecare-test.db"
os.environ["BOOTSTRAP"] = "0"

import pytest
from fastapi.testclient import TestClient

from homecare.db import Base, SessionLocal, engine
from homecare.main import app
from homecare.api import get_prediction_engine
from homecare.seed import bootstrap_if_empty


@pytest.fixture
def seeded():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    bootstrap_if_empty()
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db(seeded):
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(seeded):
    get_prediction_engine.cache_clear()
    yield TestClient(app)
    app.dependency_overrides.clear()
