"""
Bearer token validation.

Sessions are issued by the hosted auth provider; we only verify the HS256
signature with the shared project secret and read the user id (``sub``) and
email claims.
"""
from typing import Dict, Optional
from uuid import UUID

from jose import JWTError, jwt

from runova.core.config import settings


def decode_access_token(token: str) -> Optional[Dict]:
    """Decode and validate a JWT token. Returns None when invalid or expired."""
    options = {"verify_aud": settings.jwt_audience is not None}
    try:
        return jwt.decode(
            token,
            settings.supabase_jwt_secret,
            algorithms=[settings.jwt_algorithm],
            audience=settings.jwt_audience,
            options=options,
        )
    except JWTError:
        return None


def user_id_from_claims(claims: Dict) -> Optional[UUID]:
    sub = claims.get("sub")
    if not sub:
        return None
    try:
        return UUID(str(sub))
    except ValueError:
        return None
