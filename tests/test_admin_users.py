from datetime import datetime
from decimal import Decimal

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from apps.admin_api.core.db import get_db
from apps.admin_api.main import app
from conftest import make_company, make_user


def test_index_returns_users_newest_first(client, db_session):
    make_user(db_session, "a@example.com", datetime(2024, 3, 1))
    make_user(db_session, "b@example.com", datetime(2024, 3, 3))
    make_user(db_session, "c@example.com", datetime(2024, 3, 2))

    resp = client.get("/admin/users")

    assert resp.status_code == 200
    assert [u["email"] for u in resp.json()] == [
        "b@example.com",
        "c@example.com",
        "a@example.com",
    ]


def test_index_breaks_created_at_ties_by_id(client, db_session):
    same_time = datetime(2024, 5, 1, 12, 0)
    first = make_user(db_session, "first@example.com", same_time)
    second = make_user(db_session, "second@example.com", same_time)

    resp = client.get("/admin/users")

    assert [u["id"] for u in resp.json()] == [second.id, first.id]


def test_index_empty_store_returns_empty_list(client):
    resp = client.get("/admin/users")
    assert resp.status_code == 200
    assert resp.json() == []


def test_index_includes_company_and_relation_counts(client, db_session):
    company = make_company(db_session, "Northwind Builders")
    make_user(db_session, "owner@example.com", datetime(2024, 1, 2), company=company, quotes=2, jobs=3)
    make_user(db_session, "solo@example.com", datetime(2024, 1, 1))

    data = client.get("/admin/users").json()

    owner, solo = data
    assert owner["company"] == {"id": company.id, "name": "Northwind Builders"}
    assert owner["quotes_count"] == 2
    assert owner["jobs_count"] == 3
    assert solo["company"] is None
    assert solo["quotes_count"] == 0
    assert solo["jobs_count"] == 0


def test_show_returns_user_with_relations(client, db_session):
    company = make_company(db_session)
    user = make_user(
        db_session,
        "crew@example.com",
        datetime(2024, 2, 1),
        company=company,
        quotes=2,
        jobs=1,
        name="Crew Lead",
    )

    resp = client.get(f"/admin/users/{user.id}")

    assert resp.status_code == 200
    body = resp.json()
    assert body["id"] == user.id
    assert body["name"] == "Crew Lead"
    assert body["company"]["name"] == "Acme Roofing"
    assert len(body["quotes"]) == 2
    assert {Decimal(str(q["total"])) for q in body["quotes"]} == {Decimal("100"), Decimal("200")}
    assert all(q["status"] == "draft" for q in body["quotes"])
    assert len(body["jobs"]) == 1
    assert body["jobs"][0]["status"] == "scheduled"


def test_show_unknown_id_returns_404(client, db_session):
    make_user(db_session, "someone@example.com", datetime(2024, 2, 1))

    resp = client.get("/admin/users/999")

    assert resp.status_code == 404
    assert resp.json() == {"detail": "User not found"}


def test_show_non_numeric_id_returns_404(client):
    resp = client.get("/admin/users/not-a-number")
    assert resp.status_code == 404
    assert resp.json() == {"detail": "User not found"}


def test_show_id_beyond_integer_range_returns_404(client, db_session):
    make_user(db_session, "someone@example.com", datetime(2024, 2, 1))

    resp = client.get("/admin/users/" + "9" * 30)

    assert resp.status_code == 404
    assert resp.json() == {"detail": "User not found"}


@pytest.mark.parametrize("token", ["1_0", "%2010", "10%20", "+10"])
def test_show_loose_integer_syntax_returns_404(client, db_session, token):
    for i in range(10):
        make_user(db_session, f"u{i}@example.com", datetime(2024, 1, 1 + i))

    resp = client.get(f"/admin/users/{token}")

    assert resp.status_code == 404


def test_index_query_count_does_not_grow_with_users(client, db_session, query_counter):
    company = make_company(db_session)
    for i in range(2):
        make_user(db_session, f"u{i}@example.com", datetime(2024, 1, 1 + i), company=company, quotes=2, jobs=2)

    query_counter.clear()
    client.get("/admin/users")
    few_users = len(query_counter)

    for i in range(2, 8):
        make_user(db_session, f"u{i}@example.com", datetime(2024, 1, 1 + i), company=company, quotes=2, jobs=2)

    query_counter.clear()
    resp = client.get("/admin/users")
    many_users = len(query_counter)

    assert len(resp.json()) == 8
    assert few_users == many_users
    assert many_users <= 3


def test_show_uses_constant_queries(client, db_session, query_counter):
    user = make_user(db_session, "q@example.com", datetime(2024, 1, 1), company=make_company(db_session), quotes=4, jobs=4)

    query_counter.clear()
    resp = client.get(f"/admin/users/{user.id}")

    assert resp.status_code == 200
    assert len(query_counter) <= 3


def test_database_failure_returns_500(client, tmp_path):
    # SQLite cannot open a file inside a directory that does not exist
    db_path = tmp_path / "missing" / "admin.db"
    broken = create_engine(f"sqlite:///{db_path}")
    Session = sessionmaker(bind=broken)

    def _broken_db():
        db = Session()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _broken_db

    resp = client.get("/admin/users")

    assert resp.status_code == 500
    assert resp.json() == {"detail": "Internal server error"}


def test_routes_are_registered_by_name():
    assert app.url_path_for("admin.users.index") == "/admin/users"
    assert app.url_path_for("admin.users.show", user_id="7") == "/admin/users/7"
