# tests/conftest.py
"""Shared fixtures: in-memory SQLite session, two owners, record factories."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

# Must be set before app.config is imported
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET", "test-secret-with-enough-bytes-for-hs256")

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from app.auth.context import AuthContext
from app.database import create_tables
from app.models.profile import Profile
from app.services.record_store import OwnerScopedStore


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_tables(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def owner(db):
    db.add(Profile(id="user-a", username="capitaine.martin", avatar_url="https://img/a.png"))
    db.commit()
    return AuthContext(user_id="user-a", email="a@caserne.fr")


@pytest.fixture
def other_owner(db):
    db.add(Profile(id="user-b", username="sergent.dupont"))
    db.commit()
    return AuthContext(user_id="user-b")


@pytest.fixture
def make_vehicle(db):
    counter = {"n": 0}

    def _make(auth, **overrides):
        counter["n"] += 1
        values = {
            "name": f"FPT {counter['n']}",
            "type": "Fourgon pompe-tonne",
            "fire_station": "Caserne Centre",
            "plate_number": f"AB-{counter['n']:03d}-CD",
            "capacity": 6,
        }
        values.update(overrides)
        return OwnerScopedStore(db, auth).insert("vehicles", values)

    return _make


@pytest.fixture
def make_material(db):
    def _make(auth, name="Lance", vehicle_id=None, is_verified=False, **overrides):
        values = {
            "name": name,
            "type": "Hydraulique",
            "quantity": 1,
            "location": "Coffre 1",
            "vehicle_id": vehicle_id,
            "is_verified": is_verified,
        }
        values.update(overrides)
        return OwnerScopedStore(db, auth).insert("materials", values)

    return _make
