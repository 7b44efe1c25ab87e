"""Async HTTP client for the YouTubeTranscript.dev API.

WHY: Callers need to fetch caption transcripts, start ASR jobs and wait
for them, run batches, and read account history/stats without knowing
the API's paths, auth scheme, retry rules, or envelope quirks. This
module encapsulates all of that behind a single client class.

HOW: Uses httpx.AsyncClient for non-blocking HTTP. Every endpoint method
goes through _request(), which adds auth headers, bounds each attempt by
the request timeout, retries transient failures with exponential
backoff, and turns every failure into a YouTubeTranscriptError. Responses
are normalized into the frozen dataclasses from models.py.

RULES:
- Use as: async with YouTubeTranscriptClient() as client: ...
  (or call ``await client.aclose()`` when done)
- A caller-supplied httpx.AsyncClient is never closed by this class
- Only timeouts and 5xx responses are retried; wait 2**attempt seconds
- Any other status >= 400 raises immediately; 202 is a success
- wait_for_job polls every 10s for up to 20 minutes by default
- Batch requests are limited to 100 video IDs (checked before sending)
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable, Mapping
from typing import Any

import httpx

from youtubetranscript import __version__
from youtubetranscript.api.models import AccountStats, BatchResult, Transcript, TranscriptJob
from youtubetranscript.config import (
    DASHBOARD_URL,
    DEFAULT_POLL_INTERVAL_S,
    DEFAULT_POLL_TIMEOUT_S,
    MAX_BATCH_SIZE,
    MIN_API_KEY_LENGTH,
    YOUTUBETRANSCRIPT_BASE_URL,
    YOUTUBETRANSCRIPT_MAX_RETRIES,
    YOUTUBETRANSCRIPT_TIMEOUT,
    load_api_key,
)
from youtubetranscript.errors import (
    ErrorKind,
    YouTubeTranscriptError,
    error_from_response,
    is_error_status,
)

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_USER_AGENT = "youtubetranscript-python/{}".format(__version__)
_ERROR_SNIPPET_CHARS = 200

_ASR_FORMAT = {"timestamp": True, "paragraphs": True, "words": True}
_JOB_QUERY = {
    "include_segments": "true",
    "include_paragraphs": "true",
    "include_words": "true",
}


def _query_bool(value: bool) -> str:
    return "true" if value else "false"


class YouTubeTranscriptClient:
    """Async client for the YouTubeTranscript.dev API.

    WHY: Provides a clean, typed interface for every API operation:
    transcribe → (ASR: get_job / wait_for_job) → export, plus batches,
    history, stats, and deletion. Handles auth, retries, and error
    classification.

    HOW: Wraps an httpx.AsyncClient with Bearer token auth. If no client
    is supplied, one is created and owned by this instance; closing this
    instance closes it. The client holds no per-request mutable state,
    so concurrent calls through one instance are safe.

    RULES:
    - api_key defaults to load_api_key() from .env; it is trimmed and
      must be at least 8 characters
    - base_url defaults to YOUTUBETRANSCRIPT_BASE_URL; trailing slashes stripped
    - timeout (seconds) bounds each individual attempt
    - max_retries extra attempts are made for timeouts and 5xx responses
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        max_retries: int | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        key = (api_key if api_key is not None else load_api_key()).strip()
        if len(key) < MIN_API_KEY_LENGTH:
            raise YouTubeTranscriptError(
                ErrorKind.VALIDATION,
                "Invalid API key. Get yours at {}".format(DASHBOARD_URL),
            )

        self._api_key = key
        self._base_url = (base_url or YOUTUBETRANSCRIPT_BASE_URL).rstrip("/")
        self._timeout = YOUTUBETRANSCRIPT_TIMEOUT if timeout is None else timeout
        self._max_retries = YOUTUBETRANSCRIPT_MAX_RETRIES if max_retries is None else max_retries
        self._owns_http_client = http_client is None
        self._http_client = http_client or httpx.AsyncClient(timeout=self._timeout)

    async def __aenter__(self) -> YouTubeTranscriptClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:  # noqa: ANN001
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP connection pool if this client created it."""
        if self._owns_http_client:
            await self._http_client.aclose()

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def owns_http_client(self) -> bool:
        return self._owns_http_client

    # ------------------------------------------------------------------
    # Transcripts
    # ------------------------------------------------------------------

    async def transcribe(
        self,
        video: str,
        language: str | None = None,
        source: str | None = None,
        format: Mapping[str, bool] | None = None,
    ) -> Transcript:
        """Extract the transcript of a YouTube video.

        Args:
            video: YouTube URL or 11-character video ID.
            language: ISO 639-1 code (e.g. "es"); omit for the original language.
            source: "auto" (default server-side), "manual", or "asr".
            format: Format options, e.g. ``{"timestamp": True, "words": True}``.

        Returns:
            The normalized Transcript.
        """
        body: dict[str, Any] = {"video": video}
        if language is not None:
            body["language"] = language
        if source is not None:
            body["source"] = source
        if format is not None:
            body["format"] = dict(format)

        data = await self._request("POST", "/v2/transcribe", json_body=body)
        return Transcript.from_response(data)

    async def get_transcript(
        self,
        video_id: str,
        language: str | None = None,
        source: str | None = None,
        include_timestamps: bool = True,
    ) -> Transcript:
        """Fetch a previously extracted transcript from your history."""
        params = {"include_timestamps": _query_bool(include_timestamps)}
        if language is not None:
            params["language"] = language
        if source is not None:
            params["source"] = source

        data = await self._request("GET", "/v1/transcripts/{}".format(video_id), params=params)
        return Transcript.from_response(data)

    # ------------------------------------------------------------------
    # ASR jobs
    # ------------------------------------------------------------------

    async def transcribe_asr(
        self,
        video: str,
        language: str | None = None,
        webhook_url: str | None = None,
    ) -> TranscriptJob:
        """Start an audio (ASR) transcription job.

        WHY: Videos without caption tracks can still be transcribed from
        their audio, but the server processes these asynchronously.

        HOW: POSTs to /v2/transcribe with source="asr" and the full
        timestamp/paragraph/word format. The server usually answers 202
        with a job envelope.

        Returns:
            A TranscriptJob; pass its job_id to get_job() or wait_for_job().
        """
        body: dict[str, Any] = {
            "video": video,
            "source": "asr",
            "format": dict(_ASR_FORMAT),
        }
        if language is not None:
            body["language"] = language
        if webhook_url is not None:
            body["webhook_url"] = webhook_url

        data = await self._request("POST", "/v2/transcribe", json_body=body)
        job = TranscriptJob.from_response(data)
        logger.info("Started ASR job %s for %s (%s)", job.job_id, video, job.status)
        return job

    async def get_job(self, job_id: str) -> TranscriptJob:
        """Check the status of an ASR job, including its transcript when done."""
        data = await self._request("GET", "/v2/jobs/{}".format(job_id), params=dict(_JOB_QUERY))
        return TranscriptJob.from_response(data)

    async def wait_for_job(
        self,
        job_id: str,
        poll_interval: float = DEFAULT_POLL_INTERVAL_S,
        timeout: float = DEFAULT_POLL_TIMEOUT_S,
        on_status: Callable[[str], None] | None = None,
    ) -> Transcript:
        """Poll an ASR job until it completes or fails.

        WHY: ASR jobs take minutes. Callers want one awaitable that
        resolves to the finished Transcript.

        HOW: Calls get_job() immediately, then every ``poll_interval``
        seconds. The overall ``timeout`` is measured from the first call
        with time.monotonic() and is independent of the per-request
        timeout. Cancel the awaiting task to abort early.

        RULES:
        - Returns the Transcript once the job is completed
        - Raises JOB_FAILED (with job_id) when the job status is "failed"
        - Raises TIMEOUT once elapsed time exceeds ``timeout``
        - Calls on_status with a human-readable status on every poll

        Args:
            job_id: The job ID from transcribe_asr().
            poll_interval: Seconds to wait between polls.
            timeout: Maximum total seconds to wait.
            on_status: Optional callback for status updates.

        Returns:
            The completed Transcript.
        """
        start_time = time.monotonic()
        last_status = None

        while True:
            job = await self.get_job(job_id)
            elapsed = time.monotonic() - start_time

            if job.status != last_status:
                logger.info("Job %s is %s after %.0fs", job_id, job.status, elapsed)
                last_status = job.status
            if on_status:
                on_status(_describe_job(job, elapsed))

            if job.is_complete and job.transcript is not None:
                return job.transcript

            if job.is_failed:
                reason = job.raw.get("error") or "unknown"
                raise YouTubeTranscriptError(
                    ErrorKind.JOB_FAILED,
                    "ASR job {} failed: {}".format(job_id, reason),
                    job_id=job_id,
                )

            if elapsed > timeout:
                raise YouTubeTranscriptError(
                    ErrorKind.TIMEOUT,
                    "Timed out waiting for job {} after {:.0f}s".format(job_id, timeout),
                    job_id=job_id,
                )

            await asyncio.sleep(poll_interval)

    # ------------------------------------------------------------------
    # Batches
    # ------------------------------------------------------------------

    async def batch(self, video_ids: list[str], language: str | None = None) -> BatchResult:
        """Extract transcripts for up to 100 videos in one request.

        Raises:
            YouTubeTranscriptError: VALIDATION if more than 100 IDs are
                given; raised before any network call.
        """
        if len(video_ids) > MAX_BATCH_SIZE:
            raise YouTubeTranscriptError(
                ErrorKind.VALIDATION,
                "Maximum {} videos per batch request (got {})".format(MAX_BATCH_SIZE, len(video_ids)),
            )

        body: dict[str, Any] = {"video_ids": list(video_ids)}
        if language is not None:
            body["language"] = language

        data = await self._request("POST", "/v2/batch", json_body=body)
        return BatchResult.from_response(data)

    async def get_batch(self, batch_id: str) -> BatchResult:
        data = await self._request("GET", "/v2/batch/{}".format(batch_id))
        return BatchResult.from_response(data)

    # ------------------------------------------------------------------
    # History, stats, deletion
    # ------------------------------------------------------------------

    async def list_transcripts(
        self,
        search: str | None = None,
        language: str | None = None,
        status: str | None = None,
        limit: int = 10,
        page: int = 1,
    ) -> dict[str, Any]:
        """List your transcript history. Returns the raw JSON response."""
        params = {"limit": str(limit), "page": str(page)}
        if search is not None:
            params["search"] = search
        if language is not None:
            params["language"] = language
        if status is not None:
            params["status"] = status

        return await self._request("GET", "/v1/history", params=params)

    async def stats(self) -> AccountStats:
        """Get account stats: credits remaining, plan, usage."""
        data = await self._request("GET", "/v1/stats")
        return AccountStats.from_response(data)

    async def delete_transcript(
        self,
        video_id: str | None = None,
        ids: list[str] | None = None,
    ) -> dict[str, Any]:
        """Delete transcripts by video ID or record IDs. Returns the raw JSON response."""
        body: dict[str, Any] = {}
        if video_id is not None:
            body["video_id"] = video_id
        if ids is not None:
            body["ids"] = list(ids)

        return await self._request("POST", "/v1/transcripts/bulk-delete", json_body=body)

    # ------------------------------------------------------------------
    # HTTP layer
    # ------------------------------------------------------------------

    @property
    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": "Bearer {}".format(self._api_key),
            "Content-Type": "application/json",
            "User-Agent": _USER_AGENT,
        }

    async def _request(
        self,
        method: str,
        path: str,
        json_body: dict[str, Any] | None = None,
        params: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        """Execute one logical API call with retries.

        WHY: Every endpoint shares the same auth, timeout, retry, and
        error-classification policy.

        HOW: Up to ``max_retries + 1`` attempts. An attempt that times out
        or returns a 5xx status is retried after ``2 ** attempt`` seconds
        while attempts remain. Everything else returns or raises at once.

        RULES:
        - Non-timeout transport errors are wrapped as API errors, not retried
        - The last concrete failure is re-raised when retries run out

        Returns:
            The parsed JSON object from the response body.
        """
        url = self._base_url + path
        last_error: YouTubeTranscriptError | None = None

        for attempt in range(self._max_retries + 1):
            can_retry = attempt < self._max_retries
            logger.debug("%s %s (attempt %d)", method, url, attempt + 1)

            try:
                response = await asyncio.wait_for(
                    self._http_client.request(
                        method,
                        url,
                        headers=self._headers,
                        params=params,
                        json=json_body,
                        timeout=self._timeout,
                    ),
                    timeout=self._timeout,
                )
            except (asyncio.TimeoutError, httpx.TimeoutException):
                last_error = YouTubeTranscriptError(
                    ErrorKind.TIMEOUT,
                    "Request timed out after {}s".format(self._timeout),
                )
                if can_retry:
                    await self._backoff(attempt, method, path, "timeout")
                    continue
                break
            except httpx.HTTPError as exc:
                raise YouTubeTranscriptError(
                    ErrorKind.API, "HTTP error: {}".format(exc),
                ) from exc
            except Exception as exc:
                # Custom transports can raise outside the httpx hierarchy
                raise YouTubeTranscriptError(
                    ErrorKind.API, "HTTP error: {}".format(exc),
                ) from exc

            try:
                return _parse_response(response)
            except YouTubeTranscriptError as exc:
                if response.status_code >= 500 and can_retry:
                    last_error = exc
                    await self._backoff(attempt, method, path, "status {}".format(response.status_code))
                    continue
                raise

        if last_error is not None:
            raise last_error
        raise YouTubeTranscriptError(ErrorKind.API, "Request failed after retries")

    async def _backoff(self, attempt: int, method: str, path: str, reason: str) -> None:
        delay = 2 ** attempt
        logger.warning(
            "%s %s failed (%s); retrying in %ds (retry %d of %d)",
            method, path, reason, delay, attempt + 1, self._max_retries,
        )
        await asyncio.sleep(delay)


def _parse_response(response: httpx.Response) -> dict[str, Any]:
    """Decode a response body, raising the typed failure for error statuses."""
    status = response.status_code
    try:
        data = response.json()
    except ValueError:
        data = None

    if not isinstance(data, dict):
        if is_error_status(status):
            raise YouTubeTranscriptError(
                ErrorKind.API,
                "Server returned {}: {}".format(status, response.text[:_ERROR_SNIPPET_CHARS]),
                status_code=status,
            )
        raise YouTubeTranscriptError(ErrorKind.API, "Invalid JSON in response", status_code=status)

    if is_error_status(status):
        raise error_from_response(status, data, response.headers)
    return data


def _describe_job(job: TranscriptJob, elapsed: float) -> str:
    elapsed_min = int(elapsed) // 60
    elapsed_sec = int(elapsed) % 60
    if job.status == "queued":
        return "Transcription queued..."
    if job.status == "processing":
        return "Transcribing... (elapsed: {}m {:02d}s)".format(elapsed_min, elapsed_sec)
    if job.is_complete:
        return "Transcription complete."
    if job.is_failed:
        return "Transcription failed: {}".format(job.raw.get("error") or "unknown")
    return "Job status: {}".format(job.status)
