from fastapi.testclient import TestClient

from todo_app.models import User


def test_register_returns_public_user_and_token(client: TestClient) -> None:
    resp = client.post("/users", json={"email": "a@x.com", "password": "secret1"})
    assert resp.status_code == 200
    body = resp.json()
    assert set(body) == {"_id", "email"}
    assert body["email"] == "a@x.com"
    assert resp.headers["x-auth"]

    user = User.objects(email="a@x.com").first()
    assert [t.token for t in user.tokens] == [resp.headers["x-auth"]]


def test_register_rejects_duplicates_and_bad_input(client: TestClient) -> None:
    assert client.post("/users", json={"email": "a@x.com", "password": "secret1"}).status_code == 200

    duplicate = client.post("/users", json={"email": "a@x.com", "password": "secret1"})
    assert duplicate.status_code == 400
    assert duplicate.json() == {"message": "Email already registered"}

    assert client.post("/users", json={"email": "nope", "password": "secret1"}).status_code == 400
    assert client.post("/users", json={"email": "b@x.com", "password": "123"}).status_code == 400
    assert client.post("/users", json={}).status_code == 400


def test_login_and_me(client: TestClient) -> None:
    client.post("/users", json={"email": "a@x.com", "password": "secret1"})

    login = client.post("/users/login", json={"email": "a@x.com", "password": "secret1"})
    assert login.status_code == 200
    token = login.json()["token"]
    assert login.headers["x-auth"] == token

    me = client.get("/users/me", headers={"x-auth": token})
    assert me.status_code == 200
    assert me.json()["email"] == "a@x.com"
    assert "password" not in me.json()
    assert "tokens" not in me.json()

    anonymous = client.get("/users/me")
    assert anonymous.status_code == 401
    assert anonymous.json() == {"message": "unauthorised"}


def test_login_with_wrong_password(client: TestClient) -> None:
    client.post("/users", json={"email": "a@x.com", "password": "secret1"})
    resp = client.post("/users/login", json={"email": "a@x.com", "password": "wrong!!"})
    assert resp.status_code == 401
    assert resp.json() == {"message": "Invalid email/password"}
    assert "x-auth" not in resp.headers


def test_logout_revokes_token(client: TestClient) -> None:
    token = client.post("/users", json={"email": "a@x.com", "password": "secret1"}).headers["x-auth"]

    resp = client.delete("/users/me/token", headers={"x-auth": token})
    assert resp.status_code == 200
    assert resp.content == b""

    assert client.get("/users/me", headers={"x-auth": token}).status_code == 401
    assert client.delete("/users/me/token", headers={"x-auth": token}).status_code == 401


def test_garbage_token_is_unauthorized(client: TestClient) -> None:
    resp = client.get("/users/me", headers={"x-auth": "garbage"})
    assert resp.status_code == 401
    assert resp.json() == {"message": "unauthorised"}


def test_login_with_malformed_or_missing_fields_is_unauthorized(client: TestClient) -> None:
    client.post("/users", json={"email": "a@x.com", "password": "secret1"})

    for body in ({"email": "not-an-email", "password": "secret1"}, {"email": "a@x.com"}, {}):
        resp = client.post("/users/login", json=body)
        assert resp.status_code == 401
        assert resp.json() == {"message": "Invalid email/password"}
