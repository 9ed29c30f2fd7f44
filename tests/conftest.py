import os
from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("ADMIN_API_TOKEN", "")

from apps.admin_api.core.db import Base, get_db, import_models
from apps.admin_api.main import app

import_models()

from apps.admin_api.models.company_model import Company
from apps.admin_api.models.job_model import Job
from apps.admin_api.models.quote_model import Quote
from apps.admin_api.models.user_model import User


@pytest.fixture()
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def db_session(engine):
    Session = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = Session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client(engine):
    Session = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def _override_get_db():
        db = Session()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.pop(get_db, None)


@pytest.fixture()
def query_counter(engine):
    """Collects every SQL statement sent through the test engine."""
    statements = []

    def _before_cursor_execute(conn, cursor, statement, parameters, context, executemany):
        statements.append(statement)

    event.listen(engine, "before_cursor_execute", _before_cursor_execute)
    try:
        yield statements
    finally:
        event.remove(engine, "before_cursor_execute", _before_cursor_execute)


def make_user(session, email, created_at, company=None, quotes=0, jobs=0, name=None):
    user = User(email=email, name=name, company=company, created_at=created_at)
    for i in range(quotes):
        user.quotes.append(Quote(title=f"Quote {i + 1} for {email}", total=100 * (i + 1), created_at=created_at))
    for i in range(jobs):
        user.jobs.append(Job(title=f"Job {i + 1} for {email}", created_at=created_at))
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


def make_company(session, name="Acme Roofing"):
    company = Company(name=name, created_at=datetime(2024, 1, 1))
    session.add(company)
    session.commit()
    session.refresh(company)
    return company
