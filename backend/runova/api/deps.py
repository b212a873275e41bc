"""Dependencies shared by the API routes.

Each collaborator (caller identity, completion service, clock) is a FastAPI
dependency so tests can override it with ``app.dependency_overrides``.
"""
from dataclasses import dataclass
from datetime import date
from functools import lru_cache
from typing import Optional
from uuid import UUID

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from runova.core.errors import Unauthorized
from runova.core.security import decode_access_token, user_id_from_claims
from runova.services.completion import CompletionClient, OpenAICompletionClient


# auto_error=False so a missing header is our 401, not FastAPI's 403
security = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class CurrentUser:
    id: UUID
    email: Optional[str] = None


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> CurrentUser:
    if not credentials:
        raise Unauthorized()

    claims = decode_access_token(credentials.credentials)
    if not claims:
        raise Unauthorized()

    user_id = user_id_from_claims(claims)
    if user_id is None:
        raise Unauthorized()
    return CurrentUser(id=user_id, email=claims.get("email"))


@lru_cache
def get_completion_client() -> CompletionClient:
    return OpenAICompletionClient()


def get_today() -> date:
    return date.today()
