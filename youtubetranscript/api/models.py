"""YouTubeTranscript API response dataclasses and shape normalization.

WHY: The YouTubeTranscript API has changed its response envelope across
versions — transcripts arrive nested under ``data.transcript``, flat
under ``data.segments``, as a bare list, or without a full-text field.
Typed, immutable dataclasses give callers one stable model regardless of
which shape the server sent.

HOW: Each dataclass has a single factory (from_dict / from_response) that
probes the payload defensively and never raises on a missing or mistyped
field. Transcript segment lookup is an ordered list of extraction
strategies tried in turn; the first one that finds segments wins.

RULES:
- All dataclasses are frozen; sequences are tuples
- A missing or non-numeric time is 0.0; booleans are not numbers
- Segment end/duration are derived from each other plus start when absent
- Transcript.raw / TranscriptJob.raw / BatchResult.raw keep the full payload
- Non-object entries in segment, batch, and failure lists are skipped
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from youtubetranscript.formatters.plain_text import to_plain_text
from youtubetranscript.formatters.srt import to_srt
from youtubetranscript.formatters.timecode import format_hms, format_mmss
from youtubetranscript.formatters.timestamped_text import to_timestamped_text
from youtubetranscript.formatters.vtt import to_vtt

JsonObject = Mapping[str, Any]


# ---------------------------------------------------------------------------
# Field coercion helpers
# ---------------------------------------------------------------------------


def _number(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0.0
    return float(value)


def _integer(value: Any) -> int | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return int(value)


def _string(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def _first_string(*values: Any) -> str:
    """First value that is a string, even an empty one; "" if none is."""
    for value in values:
        if isinstance(value, str):
            return value
    return ""


def _object(value: Any) -> JsonObject | None:
    return value if isinstance(value, Mapping) else None


def _objects(value: Any) -> tuple[dict, ...]:
    if not isinstance(value, list):
        return ()
    return tuple(item for item in value if isinstance(item, Mapping))


# ---------------------------------------------------------------------------
# Segment
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Segment:
    """One caption or utterance with timing.

    WHY: Every exporter and the search helper work on segments; they need
    both an end time and a duration even though the API usually sends
    only one of the two.

    HOW: from_dict resolves the missing half from ``start`` and the half
    that was sent.

    RULES:
    - end: given end > 0, else start + duration when duration > 0, else 0.0
    - duration: given duration > 0, else end - start when end > start, else 0.0
    - words: opaque per-word records passed through untouched, None if absent
    """

    text: str
    start: float
    end: float = 0.0
    duration: float = 0.0
    words: tuple[dict, ...] | None = None

    @classmethod
    def from_dict(cls, data: JsonObject) -> Segment:
        start = max(0.0, _number(data.get("start")))
        end = _number(data.get("end"))
        duration = _number(data.get("duration"))

        if end > 0:
            resolved_end = end
        elif duration > 0:
            resolved_end = start + duration
        else:
            resolved_end = 0.0

        if duration > 0:
            resolved_duration = duration
        elif end > start:
            resolved_duration = end - start
        else:
            resolved_duration = 0.0

        words = data.get("words")
        return cls(
            text=_string(data.get("text")) or "",
            start=start,
            end=resolved_end,
            duration=resolved_duration,
            words=_objects(words) if isinstance(words, list) else None,
        )

    @property
    def start_formatted(self) -> str:
        """Start time as ``MM:SS``."""
        return format_mmss(self.start)

    @property
    def start_hms(self) -> str:
        """Start time as ``HH:MM:SS``."""
        return format_hms(self.start)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "text": self.text,
            "start": self.start,
            "end": self.end,
            "duration": self.duration,
        }
        if self.words is not None:
            data["words"] = [dict(word) for word in self.words]
        return data

    def __str__(self) -> str:
        return "[{}] {}".format(self.start_formatted, self.text)


# ---------------------------------------------------------------------------
# Transcript segment extraction strategies
# ---------------------------------------------------------------------------

# Each strategy returns the raw segment records for one envelope shape, or
# None when that shape is absent or empty.


def _non_empty_list(value: Any) -> list | None:
    return value if isinstance(value, list) and value else None


def _from_transcript_object(inner: JsonObject) -> list | None:
    transcript = _object(inner.get("transcript"))
    return _non_empty_list(transcript.get("segments")) if transcript is not None else None


def _from_transcript_list(inner: JsonObject) -> list | None:
    return _non_empty_list(inner.get("transcript"))


def _from_inner_segments(inner: JsonObject) -> list | None:
    return _non_empty_list(inner.get("segments"))


_SEGMENT_STRATEGIES: tuple[Callable[[JsonObject], list | None], ...] = (
    _from_transcript_object,
    _from_transcript_list,
    _from_inner_segments,
)


def _extract_segment_records(inner: JsonObject) -> list:
    for strategy in _SEGMENT_STRATEGIES:
        records = strategy(inner)
        if records is not None:
            return records
    return []


def _transcript_text(inner: JsonObject) -> str:
    """Full text from a ``transcript`` object, even when it has no segments."""
    transcript = _object(inner.get("transcript"))
    if transcript is None:
        return ""
    return _string(transcript.get("text")) or ""


# ---------------------------------------------------------------------------
# Transcript
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Transcript:
    """A complete video transcript.

    WHY: The stable contract between the HTTP layer and everything that
    consumes transcripts (exporters, search, caller code).

    HOW: from_response unwraps the optional ``data`` envelope, locates the
    segment list with the first matching extraction strategy, and fills
    identity fields from the inner object before the top level.

    RULES:
    - video_id and language: inner object first, then top level, else ""
    - text: the transcript object's text when non-empty, else segment
      texts joined with single spaces
    - status and request_id are read from the top level only
    - raw is the untouched top-level payload
    """

    video_id: str
    segments: tuple[Segment, ...] = ()
    text: str = ""
    language: str = ""
    status: str = "completed"
    request_id: str = ""
    raw: dict = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_response(cls, data: JsonObject) -> Transcript:
        inner = _object(data.get("data"))
        if inner is None:
            inner = data

        records = _extract_segment_records(inner)
        segments = tuple(Segment.from_dict(record) for record in records if isinstance(record, Mapping))

        full_text = _transcript_text(inner)
        if not full_text and segments:
            full_text = " ".join(segment.text for segment in segments)

        return cls(
            video_id=_first_string(inner.get("video_id"), data.get("video_id")),
            segments=segments,
            text=full_text,
            language=_first_string(inner.get("language"), data.get("language")),
            status=_string(data.get("status")) or "completed",
            request_id=_string(data.get("request_id")) or "",
            raw=dict(data),
        )

    @property
    def word_count(self) -> int:
        return len(self.text.split())

    @property
    def duration(self) -> float:
        """Total duration in seconds, taken from the last segment."""
        if not self.segments:
            return 0.0
        last = self.segments[-1]
        return last.end if last.end > 0 else last.start + last.duration

    def to_plain_text(self) -> str:
        return to_plain_text(self.segments)

    def to_timestamped_text(self) -> str:
        return to_timestamped_text(self.segments)

    def to_srt(self) -> str:
        return to_srt(self.segments)

    def to_vtt(self) -> str:
        return to_vtt(self.segments)

    def search(self, query: str) -> list[Segment]:
        """Return segments whose text contains query, ignoring case.

        An empty query matches every segment.
        """
        needle = query.casefold()
        return [segment for segment in self.segments if needle in segment.text.casefold()]

    def __str__(self) -> str:
        return "Transcript({}, {} segments, {})".format(
            self.video_id, len(self.segments), self.language,
        )


# ---------------------------------------------------------------------------
# TranscriptJob
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TranscriptJob:
    """Handle for an asynchronous ASR transcription job.

    WHY: ASR requests are queued server-side; the client polls the job
    until it reaches a terminal state.

    HOW: A completed job response doubles as a transcript envelope, so it
    is normalized with Transcript.from_response as well.

    RULES:
    - status is one of queued, processing, completed, failed, unknown
    - transcript is set only when status is "completed"
    - job_id: ``job_id``, else ``request_id``
    - video_id: top level, else ``data.video_id``
    """

    job_id: str
    status: str
    video_id: str = ""
    transcript: Transcript | None = None
    raw: dict = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_response(cls, data: JsonObject) -> TranscriptJob:
        status = _string(data.get("status")) or "unknown"
        transcript = Transcript.from_response(data) if status == "completed" else None
        inner = _object(data.get("data")) or {}

        return cls(
            job_id=_string(data.get("job_id")) or _string(data.get("request_id")) or "",
            status=status,
            video_id=_string(data.get("video_id")) or _string(inner.get("video_id")) or "",
            transcript=transcript,
            raw=dict(data),
        )

    @property
    def is_complete(self) -> bool:
        return self.status == "completed"

    @property
    def is_processing(self) -> bool:
        return self.status in ("processing", "queued")

    @property
    def is_failed(self) -> bool:
        return self.status == "failed"

    @property
    def is_terminal(self) -> bool:
        return self.is_complete or self.is_failed

    def __str__(self) -> str:
        return "TranscriptJob({}, {})".format(self.job_id, self.status)


# ---------------------------------------------------------------------------
# BatchResult
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class BatchResult:
    """Outcome of a multi-video batch request.

    RULES:
    - completed: from ``completed``, else a ``data`` list; each item is
      normalized independently as a Transcript
    - failed: per-video failure records passed through as-is
    """

    batch_id: str
    status: str = "completed"
    completed: tuple[Transcript, ...] = ()
    failed: tuple[dict, ...] = ()
    raw: dict = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_response(cls, data: JsonObject) -> BatchResult:
        items = data.get("completed")
        if not isinstance(items, list):
            items = data.get("data")

        return cls(
            batch_id=_string(data.get("batch_id")) or "",
            status=_string(data.get("status")) or "completed",
            completed=tuple(Transcript.from_response(item) for item in _objects(items)),
            failed=tuple(dict(item) for item in _objects(data.get("failed"))),
            raw=dict(data),
        )

    def __str__(self) -> str:
        return "BatchResult({}, {} completed)".format(self.batch_id, len(self.completed))


# ---------------------------------------------------------------------------
# AccountStats
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AccountStats:
    """Credits and plan snapshot from GET /v1/stats."""

    credits_remaining: int = 0
    credits_used: int = 0
    transcripts_created: int = 0
    plan: str = ""
    raw: dict = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_response(cls, data: JsonObject) -> AccountStats:
        # The API has reported remaining credits under both names.
        remaining = _integer(data.get("credits_remaining"))
        if remaining is None:
            remaining = _integer(data.get("credits_left"))

        return cls(
            credits_remaining=remaining or 0,
            credits_used=_integer(data.get("credits_used")) or 0,
            transcripts_created=_integer(data.get("transcripts_created")) or 0,
            plan=_string(data.get("plan")) or "",
            raw=dict(data),
        )

    def __str__(self) -> str:
        return "AccountStats({}, {} credits)".format(self.plan, self.credits_remaining)
