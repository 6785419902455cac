"""
Exceptions raised by the Photos Library client.

Local failures (missing files, bad ids, invalid models) surface as the
standard ``OSError``/``ValueError``/``pydantic.ValidationError`` and
connection problems as ``requests.RequestException``. The classes here cover
the two failure kinds that only exist because of the remote API.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from gphotos.models import NewMediaItemResult


class PhotosError(Exception):
    """Base class for errors reported by the Photos Library API."""


class ApiError(PhotosError):
    """
    A non-2xx response, decoded from ``{"error": {code, message, status}}``.

    Attributes:
        code: Numeric error code from the payload (HTTP status if absent)
        message: Human readable message from the payload
        status: Canonical status string, e.g. ``NOT_FOUND``
        http_status: Status code of the HTTP response
        payload: The decoded response body, or None if it was not JSON
    """

    def __init__(
        self,
        code: int,
        message: str,
        status: str | None = None,
        http_status: int | None = None,
        payload: dict[str, Any] | None = None,
    ):
        prefix = f"{code} {status}" if status else str(code)
        super().__init__(f"{prefix}: {message}")
        self.code = code
        self.message = message
        self.status = status
        self.http_status = http_status if http_status is not None else code
        self.payload = payload

    def __repr__(self) -> str:
        return f"ApiError(code={self.code!r}, status={self.status!r}, message={self.message!r})"


class BatchCreateError(PhotosError):
    """One or more items of a batch-create call did not succeed."""

    def __init__(self, results: list[NewMediaItemResult], expected: int | None = None):
        self.results = results
        self.failed = [r for r in results if not r.ok]
        self.missing = max(0, (expected or len(results)) - len(results))
        details = [
            f"{r.upload_token or '?'}: {r.status.message if r.status else 'no status'}"
            for r in self.failed
        ]
        if self.missing:
            details.append(f"{self.missing} without a result")
        super().__init__(
            f"{len(self.failed) + self.missing} of {expected or len(results)} media items "
            f"failed to create ({'; '.join(details)})"
        )
