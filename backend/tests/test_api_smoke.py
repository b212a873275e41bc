import uuid

from conftest import auth_headers


def test_root_ok(client):
    r = client.get("/")
    assert r.status_code == 200
    data = r.json()
    assert "message" in data


def test_missing_token_is_401(client):
    r = client.get("/plans")
    assert r.status_code == 401
    assert r.json() == {"error": "Unauthorized"}


def test_bad_tokens_are_401(client):
    r = client.get("/plans", headers={"Authorization": "Bearer not-a-jwt"})
    assert r.status_code == 401

    # Signed for a different audience
    r = client.get("/plans", headers=auth_headers(uuid.uuid4(), aud="someone-else"))
    assert r.status_code == 401

    # Subject that isn't a user id
    r = client.get("/plans", headers={"Authorization": "Bearer " + _token_with_sub("service-role")})
    assert r.status_code == 401


def _token_with_sub(sub: str) -> str:
    from jose import jwt
    from runova.core.config import settings

    return jwt.encode({"sub": sub, "aud": "authenticated"}, settings.supabase_jwt_secret, algorithm="HS256")


def test_list_plans_empty(client, headers):
    r = client.get("/plans", headers=headers)
    assert r.status_code == 200
    assert r.json() == []
