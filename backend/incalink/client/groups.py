"""Groups Client - thin httpx wrappers around the /groups endpoints.

Invariants:
    - Every call returns the parsed JSON body of a 2xx response
    - Non-2xx responses raise GroupsApiError with the server's error message
    - A client closes only the httpx.Client it created itself
"""

import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:4000/api"


class GroupsApiError(Exception):
    """Groups API answered with a non-2xx status."""

    def __init__(self, status_code: int, message: str):
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message


class GroupsClient:
    """Synchronous client for the groups resource."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 10.0,
        http_client: httpx.Client | None = None,
    ):
        self._owns_client = http_client is None
        self._http = http_client or httpx.Client(
            base_url=base_url.rstrip("/"), timeout=timeout,
        )

    def __enter__(self) -> "GroupsClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self._http.close()

    def list_groups(self) -> list[dict]:
        return self._request("GET", "/groups")

    def get_group(self, group_id: int) -> dict:
        return self._request("GET", f"/groups/{group_id}")

    def create_group(self, group: dict[str, Any]) -> dict:
        return self._request("POST", "/groups", json=group)

    def update_group(self, group_id: int, group: dict[str, Any]) -> dict:
        return self._request("PUT", f"/groups/{group_id}", json=group)

    def delete_group(self, group_id: int) -> dict:
        return self._request("DELETE", f"/groups/{group_id}")

    def _request(self, method: str, path: str, **kwargs) -> Any:
        response = self._http.request(method, path, **kwargs)
        logger.debug(f"{method} {path} -> {response.status_code}")
        if response.is_error:
            raise GroupsApiError(response.status_code, _error_message(response))
        return response.json()


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(body, dict) and "error" in body:
        return str(body["error"])
    return response.reason_phrase


# One-shot helpers for scripts; each opens and closes its own connection.

def get_groups(base_url: str = DEFAULT_BASE_URL) -> list[dict]:
    with GroupsClient(base_url) as client:
        return client.list_groups()


def get_group_by_id(group_id: int, base_url: str = DEFAULT_BASE_URL) -> dict:
    with GroupsClient(base_url) as client:
        return client.get_group(group_id)


def create_group(group: dict[str, Any], base_url: str = DEFAULT_BASE_URL) -> dict:
    with GroupsClient(base_url) as client:
        return client.create_group(group)


def update_group(
    group_id: int, group: dict[str, Any], base_url: str = DEFAULT_BASE_URL,
) -> dict:
    with GroupsClient(base_url) as client:
        return client.update_group(group_id, group)


def delete_group(group_id: int, base_url: str = DEFAULT_BASE_URL) -> dict:
    with GroupsClient(base_url) as client:
        return client.delete_group(group_id)
