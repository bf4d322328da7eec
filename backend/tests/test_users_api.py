"""
End-to-end tests for the /api/users routes against an in-memory database.
"""
from models import User, Report


def test_list_users_returns_everyone_in_id_order(client, auth_headers, make_user):
    first = make_user(email="ada@example.com")
    second = make_user(email="grace@example.com", first_name="Grace", last_name="Hopper")

    response = client.get("/api/users", headers=auth_headers)

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["error"] is None
    assert [u["id"] for u in body["data"]] == [first.id, second.id]
    assert body["pagination"] == {"total": 2}


def test_list_users_filters_by_email_ignoring_case(client, auth_headers, make_user):
    make_user(email="ada@example.com")
    grace = make_user(email="grace@example.com")

    response = client.get("/api/users", params={"email": "Grace@Example.com"}, headers=auth_headers)

    assert response.status_code == 200
    data = response.json()["data"]
    assert [u["id"] for u in data] == [grace.id]


def test_list_users_with_unknown_email_is_empty(client, auth_headers, make_user):
    make_user(email="ada@example.com")

    response = client.get("/api/users", params={"email": "nobody@example.com"}, headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["data"] == []
    assert response.json()["pagination"] == {"total": 0}


def test_get_user_serializes_only_public_fields(client, auth_headers, make_user):
    user = make_user(email="ada@example.com")

    response = client.get(f"/api/users/{user.id}", headers=auth_headers)

    assert response.status_code == 200
    data = response.json()["data"]
    assert set(data) == {"id", "email", "first_name", "last_name", "is_active", "created_at"}
    assert data["email"] == "ada@example.com"
    assert "password_hash" not in response.text


def test_get_missing_user_returns_404_envelope(client, auth_headers):
    response = client.get("/api/users/999", headers=auth_headers)

    assert response.status_code == 404
    body = response.json()
    assert body["success"] is False
    assert body["data"] is None
    assert body["error"]["code"] == "NOT_FOUND"
    assert body["error"]["details"] == {"resource": "User", "id": 999}


def test_get_user_with_non_numeric_id_is_422(client, auth_headers):
    response = client.get("/api/users/abc", headers=auth_headers)

    assert response.status_code == 422
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


def test_update_user_applies_only_sent_fields(client, auth_headers, make_user, db_session):
    user = make_user(email="ada@example.com", first_name="Ada", last_name="Lovelace")

    response = client.patch(
        f"/api/users/{user.id}",
        json={"first_name": "Augusta", "email": "  ADA.KING@example.com "},
        headers=auth_headers
    )

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["first_name"] == "Augusta"
    assert data["last_name"] == "Lovelace"
    assert data["email"] == "ada.king@example.com"

    db_session.expire_all()
    stored = db_session.query(User).filter(User.id == user.id).one()
    assert stored.first_name == "Augusta"
    assert stored.is_active is True


def test_update_user_can_deactivate(client, auth_headers, make_user):
    user = make_user()

    response = client.patch(f"/api/users/{user.id}", json={"is_active": False}, headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["data"]["is_active"] is False


def test_update_user_rejects_email_of_another_user(client, auth_headers, make_user):
    make_user(email="taken@example.com")
    user = make_user(email="ada@example.com")

    response = client.patch(f"/api/users/{user.id}", json={"email": "Taken@example.com"}, headers=auth_headers)

    assert response.status_code == 409
    error = response.json()["error"]
    assert error["code"] == "CONFLICT"
    assert error["details"] == {"field": "email"}


def test_update_user_keeping_own_email_is_allowed(client, auth_headers, make_user):
    user = make_user(email="ada@example.com")

    response = client.patch(f"/api/users/{user.id}", json={"email": "ada@example.com"}, headers=auth_headers)

    assert response.status_code == 200


def test_update_user_rejects_invalid_body(client, auth_headers, make_user):
    user = make_user()

    for body in ({"email": "not-an-email"}, {"role": "admin"}, {"first_name": ""}, {"last_name": None}):
        response = client.patch(f"/api/users/{user.id}", json=body, headers=auth_headers)
        assert response.status_code == 422, body
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"


def test_update_missing_user_returns_404(client, auth_headers):
    response = client.patch("/api/users/404", json={"first_name": "Nobody"}, headers=auth_headers)

    assert response.status_code == 404


def test_delete_user_then_delete_again(client, auth_headers, make_user, db_session):
    user = make_user()

    first = client.delete(f"/api/users/{user.id}", headers=auth_headers)
    second = client.delete(f"/api/users/{user.id}", headers=auth_headers)

    assert first.status_code == 200
    assert first.json()["data"] is True
    assert second.status_code == 200
    assert second.json()["data"] is False
    assert db_session.query(User).count() == 0


def test_delete_user_removes_their_reports(client, auth_headers, make_user, make_report, db_session):
    author = make_user()
    other = make_user()
    make_report(author)
    make_report(other)

    response = client.delete(f"/api/users/{author.id}", headers=auth_headers)

    assert response.status_code == 200
    assert db_session.query(Report).filter(Report.author_id == author.id).count() == 0
    assert db_session.query(Report).count() == 1


def test_routes_require_bearer_token(client, make_user):
    user = make_user()

    for method, path in (
        ("get", "/api/users"),
        ("get", f"/api/users/{user.id}"),
        ("patch", f"/api/users/{user.id}"),
        ("delete", f"/api/users/{user.id}"),
    ):
        response = client.request(method.upper(), path, json={} if method == "patch" else None)
        assert response.status_code == 401, path
        assert response.headers["WWW-Authenticate"] == "Bearer"
        assert response.json()["error"]["code"] == "UNAUTHORIZED"


def test_wrong_token_or_scheme_is_rejected(client, make_user, db_session):
    user = make_user()

    wrong_token = client.delete(f"/api/users/{user.id}", headers={"Authorization": "Bearer nope"})
    basic = client.delete(f"/api/users/{user.id}", headers={"Authorization": "Basic dGVzdA=="})

    assert wrong_token.status_code == 401
    assert basic.status_code == 401
    assert db_session.query(User).count() == 1


def test_health_check_is_public(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"
