"""Helpers for building fake HTTP responses."""

import json

import requests


def make_response(
    status_code: int = 200,
    json_data=None,
    text: str | None = None,
    headers: dict[str, str] | None = None,
) -> requests.Response:
    """Build a real requests.Response with the given body."""
    response = requests.Response()
    response.status_code = status_code
    if json_data is not None:
        response._content = json.dumps(json_data).encode("utf-8")
    else:
        response._content = (text or "").encode("utf-8")
    response.encoding = "utf-8"
    response.headers.update(headers or {})
    return response


def sent_json(call) -> dict:
    """Decode the JSON body of a recorded session.request call."""
    return json.loads(call.kwargs["data"])
