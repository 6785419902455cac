# Request execution shared by every resource client
import json
import logging
from typing import Any
from urllib.parse import quote

import requests

from gphotos.errors import ApiError
from gphotos.models import ApiErrorPayload

logger = logging.getLogger(__name__)

API_ROOT = "https://photoslibrary.googleapis.com/v1"


def build_url(base: str, resource_id: str | None = None, action: str | None = None) -> str:
    """Build ``base[/{id}][:action]`` for a REST resource."""
    url = base
    if resource_id is not None:
        if not resource_id:
            raise ValueError(f"Empty resource id for {base}")
        url = f"{url}/{quote(resource_id, safe='')}"
    if action:
        url = f"{url}:{action}"
    return url


def raise_for_api_error(response: requests.Response) -> None:
    """Raise ApiError if the response status is not 2xx."""
    if 200 <= response.status_code < 300:
        return

    try:
        payload = response.json()
    except ValueError:
        payload = None

    if isinstance(payload, dict) and isinstance(payload.get("error"), dict):
        error = ApiErrorPayload.from_api(payload).error
        raise ApiError(
            code=error.code or response.status_code,
            message=error.message or "",
            status=error.status,
            http_status=response.status_code,
            payload=payload,
        )

    # Upload endpoints answer errors with plain text
    raise ApiError(
        code=response.status_code,
        message=response.text.strip() or (response.reason or ""),
        http_status=response.status_code,
        payload=payload if isinstance(payload, dict) else None,
    )


class Transport:
    """
    Issues one HTTP request per call through a pre-authenticated session.

    The session is expected to add the bearer token itself, e.g.
    ``google.auth.transport.requests.AuthorizedSession``. No retries are made.
    """

    def __init__(self, session: requests.Session, timeout: float | None = None):
        self.session = session
        self.timeout = timeout

    def request(
        self,
        method: str,
        url: str,
        *,
        params: Any = None,
        json_body: Any = None,
        data: Any = None,
        headers: dict[str, str] | None = None,
    ) -> requests.Response:
        """
        Execute a request and return the response.

        Raises:
            ApiError: If the server answers with a non-2xx status
            requests.RequestException: On connection or read failures
        """
        send_headers = dict(headers or {})
        if json_body is not None:
            data = json.dumps(json_body)
            send_headers.setdefault("Content-Type", "application/json")

        logger.debug(f"{method} {url}")
        response = self.session.request(
            method,
            url,
            params=params,
            data=data,
            headers=send_headers,
            timeout=self.timeout,
        )
        raise_for_api_error(response)
        return response

    def request_json(self, method: str, url: str, **kwargs) -> dict[str, Any]:
        """Execute a request and decode its JSON body (``{}`` when empty)."""
        response = self.request(method, url, **kwargs)
        if not response.content:
            return {}
        return response.json()
