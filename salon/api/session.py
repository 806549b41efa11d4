from __future__ import annotations

from fastapi import Header, HTTPException

from salon.domain.entities.session import Session


def get_session(
    x_user_id: str | None = Header(None),
    authorization: str | None = Header(None),
) -> Session:
    if not x_user_id or not x_user_id.strip():
        raise HTTPException(status_code=401, detail="Missing X-User-Id header")

    token = None
    if authorization and authorization.lower().startswith("bearer "):
        token = authorization[7:].strip() or None
    return Session(user_id=x_user_id.strip(), access_token=token)
