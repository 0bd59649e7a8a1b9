import os

# Keep the app off Postgres before anything under app/ is imported
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from app.core.security import create_access_token
from app.db.base import Base
from app.db.session import engine_options, get_db
from app.main import app
from app.models.user import User


@pytest.fixture
def engine():
    engine = create_engine("sqlite://", **engine_options("sqlite://"))
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(engine):
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        session = TestingSession()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    # Not used as a context manager: the lifespan would try to bootstrap Postgres
    yield TestClient(app)
    app.dependency_overrides.clear()


def _make_user(db, email, role):
    user = User(email=email, first_name="Test", last_name=role.title(), role=role)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def employee(db):
    return _make_user(db, "staff@example.com", "employee")


@pytest.fixture
def admin(db):
    return _make_user(db, "admin@example.com", "admin")


@pytest.fixture
def staff_headers(employee):
    return {"Authorization": f"Bearer {create_access_token(subject=str(employee.id))}"}


@pytest.fixture
def admin_headers(admin):
    return {"Authorization": f"Bearer {create_access_token(subject=str(admin.id))}"}
