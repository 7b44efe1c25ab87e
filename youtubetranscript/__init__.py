"""YouTubeTranscript — Python client for the YouTubeTranscript.dev API.

WHY: The YouTubeTranscript.dev service extracts YouTube transcripts from
caption tracks or audio (ASR), but its JSON envelopes have shifted
between API versions. This package gives callers typed operations and
one stable transcript model, plus text and subtitle exports.

HOW: Three layers — HTTP (api.client), normalization (api.models), and
export (formatters). Each layer is independently testable.

RULES:
- All HTTP goes through YouTubeTranscriptClient
- All failures are YouTubeTranscriptError; branch on ``err.kind``
- All exporters consume the same Transcript model

Example::

    async with YouTubeTranscriptClient() as yt:
        transcript = await yt.transcribe("dQw4w9WgXcQ")
        print(transcript.to_srt())
"""

__version__ = "0.1.0"

from youtubetranscript.api.client import YouTubeTranscriptClient  # noqa: E402
from youtubetranscript.api.models import (  # noqa: E402
    AccountStats,
    BatchResult,
    Segment,
    Transcript,
    TranscriptJob,
)
from youtubetranscript.errors import ErrorKind, YouTubeTranscriptError  # noqa: E402

__all__ = [
    "AccountStats",
    "BatchResult",
    "ErrorKind",
    "Segment",
    "Transcript",
    "TranscriptJob",
    "YouTubeTranscriptClient",
    "YouTubeTranscriptError",
    "__version__",
]
