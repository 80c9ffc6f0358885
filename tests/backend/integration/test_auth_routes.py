import uuid

import pytest


pytestmark = pytest.mark.asyncio


async def signup_user(client, email: str, password: str, username: str, **extra):
    return await client.post(
        "/api/v1/auth/signup",
        json={"email": email, "password": password, "username": username, **extra},
    )


async def login_user(client, email: str, password: str):
    return await client.post(
        "/api/v1/auth/login",
        json={"email": email, "password": password},
    )


async def test_signup_and_login_flow(client):
    email = f"User_{uuid.uuid4().hex[:6]}@Example.com"
    password = "secret1"

    resp = await signup_user(client, email, password, "bob", confirmPassword=password)
    body = resp.json()
    assert resp.status_code == 200
    assert body["success"] is True
    assert body["user"]["email"] == email.lower()
    assert body["user"]["username"] == "bob"
    assert "error" not in body

    cookie = resp.headers["set-cookie"].lower()
    assert cookie.startswith("session=")
    assert "httponly" in cookie
    assert "max-age=2592000" in cookie
    assert "samesite=lax" in cookie
    assert "path=/" in cookie

    # Duplicate email in a different case
    dup = await signup_user(client, email.upper(), "other1", "bob2")
    assert dup.status_code == 200
    assert dup.json() == {"success": False, "error": "An account with this email already exists"}

    login_resp = await login_user(client, email, password)
    login_body = login_resp.json()
    assert login_resp.status_code == 200
    assert login_body["success"] is True
    assert login_body["user"]["onboardingCompleted"] is False
    assert "session" in login_resp.cookies


async def test_login_failures_are_indistinguishable(client):
    await signup_user(client, "a@x.com", "secret1", "bob")
    wrong = await login_user(client, "a@x.com", "wrong")
    unknown = await login_user(client, "nouser@x.com", "whatever")
    assert wrong.status_code == unknown.status_code == 200
    assert wrong.content == unknown.content
    assert wrong.json() == {"success": False, "error": "Invalid email or password"}
    assert "set-cookie" not in wrong.headers


async def test_signup_validation_errors(client):
    short = await signup_user(client, "s@x.com", "12345", "s")
    assert short.json()["error"] == "Password must be at least 6 characters"
    missing = await signup_user(client, "", "secret1", "s")
    assert missing.json()["error"] == "All fields are required"
    mismatch = await signup_user(client, "s@x.com", "secret1", "s", confirmPassword="secret2")
    assert mismatch.json()["error"] == "Passwords don't match"


async def test_me_onboarding_profile_and_logout(client):
    await signup_user(client, "flow@x.com", "secret1", "flow")

    me = (await client.get("/api/v1/auth/me")).json()
    assert me["success"] is True
    assert me["data"]["email"] == "flow@x.com"
    assert me["data"]["onboardingCompleted"] is False

    onboard = await client.post(
        "/api/v1/auth/onboarding",
        json={"faithStage": "new-believer", "bringsHere": "Looking for hope"},
    )
    assert onboard.json() == {"success": True}

    me = (await client.get("/api/v1/auth/me")).json()["data"]
    assert me["onboardingCompleted"] is True
    assert me["faithStage"] == "new-believer"
    assert me["currentNeeds"] == "general"
    assert me["bringsHere"] == "Looking for hope"

    profile = await client.put(
        "/api/v1/auth/profile",
        json={"username": "renamed", "faithStage": "growing", "currentNeeds": "guidance", "bringsHere": "study"},
    )
    assert profile.json() == {"success": True}
    me = (await client.get("/api/v1/auth/me")).json()["data"]
    assert me["username"] == "renamed"
    assert me["currentNeeds"] == "guidance"
    assert me["email"] == "flow@x.com"
    assert me["onboardingCompleted"] is True

    logout = await client.post("/api/v1/auth/logout")
    assert logout.status_code == 200
    assert logout.json() == {"success": True}
    assert "max-age=0" in logout.headers["set-cookie"].lower()

    me = (await client.get("/api/v1/auth/me")).json()
    assert me == {"success": True, "data": None}


async def test_me_without_session_is_null_not_error(client):
    resp = await client.get("/api/v1/auth/me")
    assert resp.status_code == 200
    assert resp.json() == {"success": True, "data": None}

    bad = await client.get("/api/v1/auth/me", headers={"Authorization": "Bearer not-a-token"})
    assert bad.json()["data"] is None


async def test_logout_without_session_succeeds(client):
    resp = await client.post("/api/v1/auth/logout")
    assert resp.json() == {"success": True}


async def test_bearer_header_is_accepted(client):
    await signup_user(client, "bearer@x.com", "secret1", "b")
    token = client.cookies.get("session")
    client.cookies.clear()
    resp = await client.get("/api/v1/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert resp.json()["data"]["email"] == "bearer@x.com"


async def test_protected_routes_require_session(client):
    unauth = await client.post(
        "/api/v1/auth/onboarding", json={"faithStage": "growing", "bringsHere": "x"}
    )
    assert unauth.status_code == 401
    assert unauth.json()["detail"] == "AUTH_REQUIRED"

    bad_token = await client.put(
        "/api/v1/auth/profile",
        json={"username": "x", "faithStage": "x", "currentNeeds": "x", "bringsHere": "x"},
        headers={"Authorization": "Bearer invalid.token.here"},
    )
    assert bad_token.status_code == 401
    assert bad_token.json()["detail"] == "AUTH_INVALID_TOKEN"


async def test_healthz(client):
    resp = await client.get("/healthz")
    assert resp.json() == {"ok": True}
