import pytest

from app.core.config import settings
from app.db.crud.colleges import seed_colleges


async def sign_in(client, sender, email="pages@example.com"):
    await client.post("/api/auth/request-otp", json={"email": email})
    await client.post("/api/auth/verify-otp", json={"email": email, "otp": sender.last_code(email)})


@pytest.mark.asyncio
async def test_public_pages(client):
    for path in ("/", "/login", "/gd-war-room", "/experiences", "/roi-calculator"):
        res = await client.get(path)
        assert res.status_code == 200, path
        assert settings.APP_NAME in res.text


@pytest.mark.asyncio
@pytest.mark.parametrize("path", ["/dashboard", "/profile", "/complete-profile", "/news", "/colleges"])
async def test_protected_pages_redirect_to_login(client, path):
    res = await client.get(path)
    assert res.status_code == 302
    assert res.headers["location"] == "/login"


@pytest.mark.asyncio
async def test_signed_in_user_skips_login(client, sender, db):
    seed_colleges(db)
    await sign_in(client, sender)

    for path in ("/", "/login"):
        res = await client.get(path)
        assert res.status_code == 302
        assert res.headers["location"] == "/dashboard"

    for path in ("/dashboard", "/profile", "/complete-profile", "/news", "/colleges"):
        assert (await client.get(path)).status_code == 200, path


@pytest.mark.asyncio
async def test_unknown_path_renders_404(client):
    res = await client.get("/no-such-page")
    assert res.status_code == 404
    assert "Page Not Found" in res.text


@pytest.mark.asyncio
async def test_security_headers(client):
    res = await client.get("/login")
    assert res.headers["X-Content-Type-Options"] == "nosniff"
    assert res.headers["X-Frame-Options"] == "DENY"
