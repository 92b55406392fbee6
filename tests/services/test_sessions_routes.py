"""Session route — POST /api/sessions."""


async def _register(client, email="ada@example.com", password="pw"):
    await client.post("/api/users", json={"email": email, "password": password})


async def test_valid_credentials_return_session(client):
    await _register(client)
    res = await client.post(
        "/api/sessions", json={"email": "ada@example.com", "password": "pw"},
    )
    assert res.status_code == 200
    body = res.json()
    assert set(body) == {"sessionId", "token"}
    assert body["token"] != "example-jwt-token"


async def test_wrong_password_returns_401(client):
    await _register(client)
    res = await client.post(
        "/api/sessions", json={"email": "ada@example.com", "password": "nope"},
    )
    assert res.status_code == 401
    assert res.json()["error"]["code"] == "INVALID_CREDENTIALS"


async def test_unknown_email_returns_401(client):
    res = await client.post(
        "/api/sessions", json={"email": "who@example.com", "password": "pw"},
    )
    assert res.status_code == 401
