"""Shared fixtures: an in-memory SQLite database and a seeded profile."""

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

import app.db.base  # noqa: F401
from app.schemas.profile import ProfileCreate
from app.services.profile_service import ProfileService


@pytest.fixture
def engine():
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def profile(session):
    return ProfileService(session).create(ProfileCreate(id="user-1", display_name="Aiko"))


@pytest.fixture
def admin(session):
    return ProfileService(session).create(ProfileCreate(id="admin-1", display_name="Coach", role="admin"))
