from __future__ import annotations

import logging
from typing import Any

import httpx

from salon.application.exceptions import BackendUpstreamError
from salon.domain.entities.session import Session


class BackendRestClient:
    """Thin client for the hosted store's PostgREST-style table API."""

    def __init__(
        self,
        base_url: str,
        api_key: str,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._api_key = api_key
        self._client = httpx.Client(
            base_url=f"{base_url.rstrip('/')}/rest/v1",
            timeout=timeout,
            transport=transport,
        )
        self._logger = logging.getLogger(__name__)

    def select(self, session: Session, table: str, params: dict[str, str]) -> list[dict[str, Any]]:
        return self._request(session, "GET", table, params=params)

    def insert(self, session: Session, table: str, rows: list[dict[str, Any]]) -> list[dict[str, Any]]:
        return self._request(
            session,
            "POST",
            table,
            json=rows,
            headers={"Prefer": "return=representation"},
        )

    def update(
        self,
        session: Session,
        table: str,
        params: dict[str, str],
        values: dict[str, Any],
    ) -> list[dict[str, Any]]:
        return self._request(
            session,
            "PATCH",
            table,
            params=params,
            json=values,
            headers={"Prefer": "return=representation"},
        )

    def delete(self, session: Session, table: str, params: dict[str, str]) -> list[dict[str, Any]]:
        return self._request(
            session,
            "DELETE",
            table,
            params=params,
            headers={"Prefer": "return=representation"},
        )

    def close(self) -> None:
        self._client.close()

    def _headers(self, session: Session) -> dict[str, str]:
        return {
            "apikey": self._api_key,
            "Authorization": f"Bearer {session.access_token or self._api_key}",
        }

    def _request(
        self,
        session: Session,
        method: str,
        table: str,
        params: dict[str, str] | None = None,
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> list[dict[str, Any]]:
        try:
            resp = self._client.request(
                method,
                f"/{table}",
                params=params,
                json=json,
                headers={**self._headers(session), **(headers or {})},
            )
        except httpx.HTTPError as e:
            self._logger.error("Backend request failed", extra={"error": str(e), "reason": table})
            raise BackendUpstreamError(f"{method} {table} failed: {e}") from e

        if resp.status_code >= 400:
            try:
                error_message = resp.json().get("message")
            except Exception:
                error_message = resp.text
            self._logger.error(
                "Backend returned an error",
                extra={"status": resp.status_code, "error": error_message, "reason": table},
            )
            raise BackendUpstreamError(f"{method} {table} returned {resp.status_code}: {error_message}")

        if not resp.content:
            return []
        data = resp.json()
        return data if isinstance(data, list) else [data]
