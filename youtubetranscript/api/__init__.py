"""YouTubeTranscript API package — async HTTP client and response models.

WHY: Every call to the YouTubeTranscript.dev service needs the same auth,
retry, and envelope-normalization handling. This package keeps all of it
in one place.

HOW: YouTubeTranscriptClient (client.py) performs the HTTP calls via
httpx; response JSON is normalized into the frozen dataclasses defined in
models.py.

RULES:
- All HTTP calls go through YouTubeTranscriptClient (no direct httpx usage elsewhere)
- Authentication is via Bearer token from config or the constructor
"""

from youtubetranscript.api.client import YouTubeTranscriptClient
from youtubetranscript.api.models import (
    AccountStats,
    BatchResult,
    Segment,
    Transcript,
    TranscriptJob,
)

__all__ = [
    "AccountStats",
    "BatchResult",
    "Segment",
    "Transcript",
    "TranscriptJob",
    "YouTubeTranscriptClient",
]
