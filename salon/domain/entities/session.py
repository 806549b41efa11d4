from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Session:
    """Authenticated salon owner; every repository call is scoped by it."""

    user_id: str
    access_token: str | None = None
