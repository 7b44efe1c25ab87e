"""Typed failure taxonomy for the YouTubeTranscript API client.

WHY: Callers need to tell failure kinds apart to implement fallback logic.
A video without captions can go to ASR, an authentication failure needs a
new key, and a rate limit should back off using the server's hint.

HOW: A single exception type, YouTubeTranscriptError, carries an ErrorKind
discriminant plus the kind-specific payload fields (status_code,
error_code, retry_after, job_id). Callers branch on ``err.kind`` instead
of catching one subclass per kind. error_from_response() classifies a
non-2xx HTTP response into the right kind.

RULES:
- 401 AUTHENTICATION, 402 INSUFFICIENT_CREDITS, 404 NO_CAPTIONS,
  429 RATE_LIMIT, 5xx SERVER, any other status >= 400 INVALID_REQUEST
- Only statuses >= 400 are errors; 202 (job accepted) is a success
- Message: body "message", else body "error", else "API error {status}"
- retry_after is only set for RATE_LIMIT; job_id only for JOB_FAILED
- SERVER and TIMEOUT are the only retryable kinds
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Discriminant for every failure the client can raise."""

    AUTHENTICATION = "authentication"
    INSUFFICIENT_CREDITS = "insufficient_credits"
    INVALID_REQUEST = "invalid_request"
    NO_CAPTIONS = "no_captions"
    RATE_LIMIT = "rate_limit"
    SERVER = "server"
    TIMEOUT = "timeout"
    JOB_FAILED = "job_failed"
    API = "api"
    VALIDATION = "validation"


_RETRYABLE_KINDS = frozenset({ErrorKind.SERVER, ErrorKind.TIMEOUT})

_STATUS_KINDS: dict[int, ErrorKind] = {
    401: ErrorKind.AUTHENTICATION,
    402: ErrorKind.INSUFFICIENT_CREDITS,
    404: ErrorKind.NO_CAPTIONS,
    429: ErrorKind.RATE_LIMIT,
}


class YouTubeTranscriptError(Exception):
    """Raised for every failure surfaced by the client.

    WHY: One typed exception with a kind discriminant keeps handling
    exhaustive at call sites (``match err.kind`` / ``if err.kind is ...``)
    without a parallel class hierarchy.

    HOW: Wraps the kind, a human-readable message, and the optional
    payload fields that only some kinds carry.

    RULES:
    - Always include kind and message
    - status_code is set whenever the failure came from an HTTP response
    - retry_after is seconds, from the response body or Retry-After header
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        *,
        status_code: int | None = None,
        error_code: str | None = None,
        retry_after: float | None = None,
        job_id: str | None = None,
    ) -> None:
        self.kind = kind
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.retry_after = retry_after
        self.job_id = job_id
        super().__init__(message)

    @property
    def retryable(self) -> bool:
        """True for transient failures (server errors and timeouts)."""
        return self.kind in _RETRYABLE_KINDS

    def __repr__(self) -> str:
        return "YouTubeTranscriptError({}, {!r}, status_code={})".format(
            self.kind.value, self.message, self.status_code,
        )


def is_error_status(status_code: int) -> bool:
    """Return True when an HTTP status must be raised as a failure."""
    return status_code >= 400


def classify_status(status_code: int) -> ErrorKind:
    """Map an HTTP error status to its ErrorKind."""
    kind = _STATUS_KINDS.get(status_code)
    if kind is not None:
        return kind
    if status_code >= 500:
        return ErrorKind.SERVER
    return ErrorKind.INVALID_REQUEST


def error_from_response(
    status_code: int,
    body: Mapping[str, Any],
    headers: Mapping[str, str] | None = None,
) -> YouTubeTranscriptError:
    """Build the typed failure for an error response.

    Args:
        status_code: The HTTP status of the response (>= 400).
        body: The parsed JSON error body.
        headers: Response headers, consulted for Retry-After on 429s.

    Returns:
        A YouTubeTranscriptError of the matching kind (not raised).
    """
    message = _first_string(body, "message", "error") or "API error {}".format(status_code)
    error_code = body.get("error_code")
    if not isinstance(error_code, str):
        error_code = None

    kind = classify_status(status_code)
    retry_after = None
    if kind is ErrorKind.RATE_LIMIT:
        retry_after = _as_seconds(body.get("retry_after"))
        if retry_after is None and headers is not None:
            retry_after = _as_seconds(headers.get("retry-after"))

    return YouTubeTranscriptError(
        kind,
        message,
        status_code=status_code,
        error_code=error_code,
        retry_after=retry_after,
    )


def _first_string(body: Mapping[str, Any], *keys: str) -> str | None:
    for key in keys:
        value = body.get(key)
        if isinstance(value, str):
            return value
    return None


def _as_seconds(value: Any) -> float | None:
    """Parse a retry-after value given as a JSON number or numeric string."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            # HTTP-date form of Retry-After is not supported
            return None
    return None
