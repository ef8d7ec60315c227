"""HTTP implementation of IExternalUserRepository backed by httpx."""

from __future__ import annotations

import time
from typing import TypeVar
from urllib.parse import quote

import httpx
from pydantic import TypeAdapter, ValidationError

from external.infrastructure.observability import (
    DefaultExternalApiProbe,
    ExternalApiProbe,
)
from external.ports.exceptions import ExternalFetchError
from external.ports.jsonplaceholder_models import JsonPlaceholderUser

T = TypeVar("T")

DEFAULT_BASE_URL = "https://jsonplaceholder.typicode.com"
DEFAULT_TIMEOUT_SECONDS = 5.0

_USER_ADAPTER = TypeAdapter(JsonPlaceholderUser)
_USER_LIST_ADAPTER = TypeAdapter(list[JsonPlaceholderUser])


def _path_segment(value: str) -> str:
    """Escape a value so it stays a single URL path segment."""
    segment = quote(value, safe="")
    if segment in (".", ".."):
        return segment.replace(".", "%2E")
    return segment


class JsonPlaceholderRepository:
    """Reads users from the JSONPlaceholder REST API.

    One `httpx.Client` bound to the base URL and timeout is reused for all
    requests. A client passed in by the caller (tests use one with a mock
    transport) is left open by `close()`.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        client: httpx.Client | None = None,
        probe: ExternalApiProbe | None = None,
    ):
        self._owns_client = client is None
        self._client = client or httpx.Client(
            base_url=base_url,
            timeout=timeout_seconds,
            headers={"Accept": "application/json"},
        )
        self._probe = probe or DefaultExternalApiProbe()

    def get_user(self, user_id: str) -> JsonPlaceholderUser:
        return self._fetch(f"/users/{_path_segment(user_id)}", _USER_ADAPTER)

    def list_users(self) -> list[JsonPlaceholderUser]:
        return self._fetch("/users", _USER_LIST_ADAPTER)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def _fetch(self, path: str, adapter: TypeAdapter[T]) -> T:
        """GET `path` and parse the body with `adapter`.

        Raises:
            ExternalFetchError: On transport errors, non-2xx statuses and
                bodies that are not valid JSON of the expected shape
        """
        request = self._client.build_request("GET", path)
        url = str(request.url)
        self._probe.request_started(url=url)
        start_time = time.perf_counter()

        try:
            response = self._client.send(request)
        except httpx.HTTPError as e:
            self._probe.request_failed(url=url, reason=repr(e))
            raise ExternalFetchError(
                f"failed to fetch {path}: {e}", url=url
            ) from e

        if not response.is_success:
            self._probe.request_failed(
                url=url,
                reason="HTTP error",
                status_code=response.status_code,
            )
            raise ExternalFetchError(
                f"HTTP {response.status_code}: failed to fetch {path}",
                url=url,
                status_code=response.status_code,
            )

        try:
            result = adapter.validate_json(response.content)
        except ValidationError as e:
            self._probe.request_failed(
                url=url,
                reason="invalid body",
                status_code=response.status_code,
            )
            raise ExternalFetchError(
                f"failed to unmarshal {path}: {e}",
                url=url,
                status_code=response.status_code,
            ) from e

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        self._probe.request_succeeded(
            url=url, status_code=response.status_code, elapsed_ms=elapsed_ms
        )
        return result
