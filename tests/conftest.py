"""Shared test fixtures for the youtubetranscript test suite.

WHY: Several test modules need the same sample API payloads and the same
way of running the async client against a fake server. Centralizing them
here avoids duplication and keeps every test on the same response shapes.

HOW: Module-level dicts hold one payload per envelope shape the API has
used. ScriptedAPI is an httpx.MockTransport handler that replays queued
responses (or raises queued transport errors) and records each request.
The run_client fixture wires a YouTubeTranscriptClient to that handler
and drives it with asyncio.run().

RULES:
- The real API is never called
- Sleeps are patched out for every test (retry backoff and poll interval)
- Payload constants are deep-copied by the fixtures so tests can mutate them
"""

import asyncio
import copy
from typing import Any, Dict, List, Union
from unittest.mock import AsyncMock, patch

import httpx
import pytest

from youtubetranscript.api.client import YouTubeTranscriptClient

TEST_API_KEY = "yt-test-key-123456"
TEST_BASE_URL = "https://api.test/api"


# ---------------------------------------------------------------------------
# Sample payloads — one per envelope shape
# ---------------------------------------------------------------------------

NESTED_RESPONSE: Dict[str, Any] = {
    "status": "completed",
    "request_id": "req_abc",
    "data": {
        "video_id": "dQw4w9WgXcQ",
        "language": "en",
        "transcript": {
            "text": "Hello world",
            "segments": [
                {"text": "Hello", "start": 0, "end": 1.0},
                {"text": "world", "start": 1.0, "end": 2.0},
            ],
        },
    },
}

FLAT_RESPONSE: Dict[str, Any] = {
    "data": {
        "video_id": "dQw4w9WgXcQ",
        "segments": [
            {"text": "Hello", "start": 0, "duration": 1.0},
            {"text": "world", "start": 1.0, "duration": 1.0},
        ],
    },
}

LIST_RESPONSE: Dict[str, Any] = {
    "video_id": "dQw4w9WgXcQ",
    "language": "de",
    "transcript": [
        {"text": "Hello", "start": 0, "end": 1.0},
        {"text": "world", "start": 1.0, "end": 2.0},
    ],
}

JOB_PROCESSING: Dict[str, Any] = {
    "job_id": "job_123",
    "status": "processing",
    "video_id": "vid00000001",
}

JOB_COMPLETED: Dict[str, Any] = {
    "job_id": "job_123",
    "status": "completed",
    "data": {
        "video_id": "vid00000001",
        "language": "en",
        "transcript": {
            "segments": [
                {
                    "text": "hi there",
                    "start": 0,
                    "end": 1.2,
                    "words": [
                        {"word": "hi", "start": 0, "end": 0.5},
                        {"word": "there", "start": 0.6, "end": 1.2},
                    ],
                },
            ],
        },
    },
}

BATCH_RESPONSE: Dict[str, Any] = {
    "batch_id": "batch_9",
    "status": "completed",
    "completed": [
        {"video_id": "aaa", "segments": [{"text": "first", "start": 0, "end": 1}]},
        "not-an-object",
        {"video_id": "bbb", "transcript": {"text": "second video", "segments": []}},
    ],
    "failed": [
        {"video_id": "ccc", "error": "no_captions"},
    ],
}

STATS_RESPONSE: Dict[str, Any] = {
    "credits_left": 42,
    "credits_used": 8,
    "transcripts_created": 5,
    "plan": "pro",
}


@pytest.fixture
def nested_response():
    return copy.deepcopy(NESTED_RESPONSE)


@pytest.fixture
def flat_response():
    return copy.deepcopy(FLAT_RESPONSE)


@pytest.fixture
def list_response():
    return copy.deepcopy(LIST_RESPONSE)


@pytest.fixture
def job_processing():
    return copy.deepcopy(JOB_PROCESSING)


@pytest.fixture
def job_completed():
    return copy.deepcopy(JOB_COMPLETED)


@pytest.fixture
def batch_response():
    return copy.deepcopy(BATCH_RESPONSE)


@pytest.fixture
def stats_response():
    return copy.deepcopy(STATS_RESPONSE)


# ---------------------------------------------------------------------------
# Fake server
# ---------------------------------------------------------------------------


class ScriptedAPI:
    """httpx.MockTransport handler that replays a fixed list of outcomes.

    Each outcome is either an httpx.Response to return or an exception
    to raise (e.g. httpx.ReadTimeout). Every request is recorded.
    """

    def __init__(self, *outcomes: Union[httpx.Response, Exception]) -> None:
        self.outcomes = list(outcomes)
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self.outcomes:
            raise AssertionError("Unexpected request: {} {}".format(request.method, request.url))
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


@pytest.fixture(autouse=True)
def no_sleep():
    """Patch asyncio.sleep so backoff and poll delays return instantly."""
    with patch("youtubetranscript.api.client.asyncio.sleep", new_callable=AsyncMock) as sleep:
        yield sleep


@pytest.fixture
def run_client():
    """Run ``action(client)`` against a ScriptedAPI and return its result.

    Usage: ``run_client(api, lambda client: client.stats())``. Extra
    keyword arguments are passed to the YouTubeTranscriptClient constructor.
    """

    def _run(api, action, **client_kwargs):
        async def _main():
            async with httpx.AsyncClient(transport=httpx.MockTransport(api)) as http_client:
                client = YouTubeTranscriptClient(
                    api_key=TEST_API_KEY,
                    base_url=TEST_BASE_URL,
                    http_client=http_client,
                    **client_kwargs,
                )
                return await action(client)

        return asyncio.run(_main())

    return _run
