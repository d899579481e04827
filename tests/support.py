"""Shared test setup: in-memory SQLite database with seeded roles, and an API client wired to it."""

import os

# Settings are read once at import time; point them at SQLite before importing versex.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["AUTH_ENABLED"] = "false"
os.environ["BCRYPT_ROUNDS"] = "4"

import unittest
from collections.abc import Generator

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from versex.core.database import get_db
from versex.main import app
from versex.models import Base, Role, RoleName
from versex.schemas.users import NewUserRequest
from versex.services.users import create_user


def make_session_factory() -> sessionmaker:
    """Create a fresh in-memory database with the Admin (1) and User (2) roles."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    with factory() as db:
        db.add_all([Role(id=1, name=RoleName.ADMIN), Role(id=2, name=RoleName.USER)])
        db.commit()
    return factory


def new_user_request(
    username: str = "jdoe",
    email: str = "jdoe@versex.at",
    password: str = "correct-horse",
    roles: list[str] | None = None,
    **kwargs: object,
) -> NewUserRequest:
    """Build a NewUserRequest with sensible defaults."""
    defaults = {"first_name": "John", "last_name": "Doe"}
    defaults.update(kwargs)
    return NewUserRequest(
        username=username,
        email=email,
        password=password,
        roles=roles,
        **defaults,
    )


class DatabaseTestCase(unittest.TestCase):
    """Gives each test its own database and an open session (self.db)."""

    def setUp(self) -> None:
        self.session_factory = make_session_factory()
        self.db: Session = self.session_factory()

    def tearDown(self) -> None:
        self.db.close()
        self.session_factory.kw["bind"].dispose()

    def add_user(self, **kwargs: object):
        return create_user(self.db, new_user_request(**kwargs))


class ApiTestCase(DatabaseTestCase):
    """DatabaseTestCase plus a TestClient whose get_db dependency uses the test database."""

    prefix = "/api/v1"

    def setUp(self) -> None:
        super().setUp()

        def override_get_db() -> Generator[Session, None, None]:
            db = self.session_factory()
            try:
                yield db
            finally:
                db.close()

        app.dependency_overrides[get_db] = override_get_db
        self.client = TestClient(app)

    def tearDown(self) -> None:
        app.dependency_overrides.clear()
        super().tearDown()

    def url(self, path: str) -> str:
        return f"{self.prefix}{path}"
