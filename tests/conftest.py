import os

os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from bar_admin import models  # noqa: F401
from bar_admin.db import Base, get_db
from bar_admin.main import app


# ═══════════════════════════════════════════════════════════
# FIXTURES
# ═══════════════════════════════════════════════════════════

@pytest.fixture
def session_factory():
    """In-memory database shared by every session of one test"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    yield TestingSessionLocal
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def db_session(session_factory):
    db = session_factory()
    yield db
    db.close()


@pytest.fixture
def client(session_factory):
    """TestClient whose get_db dependency points at the test database"""
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def seeded_options(db_session):
    """Activity and serving options available to the forms"""
    for order, name in enumerate(["Quiz", "Karaoke", "Darts"], start=1):
        db_session.add(models.Activity(name=name, display_order=order))
    for order, name in enumerate(["Beer", "Wine", "Cocktails"], start=1):
        db_session.add(models.Serving(name=name, display_order=order))
    db_session.commit()
    return {
        "activities": ["Quiz", "Karaoke", "Darts"],
        "servings": ["Beer", "Wine", "Cocktails"],
    }
