"""JSON export of a transcript with its timed segments.

WHY: Downstream tools (search indexes, editors, notebooks) want the
normalized transcript as data, not the API's version-dependent envelope.

HOW: Builds a plain dict from the Transcript and its Segment.to_dict()
records, validates it against transcript_schema.json with jsonschema,
and serializes with two-space indentation.

RULES:
- Keys: video_id, language, text, duration, segments
- ``words`` appears on a segment only when the API sent word timings
- Non-ASCII text is written as-is (ensure_ascii=False)
- Output is validated against the bundled schema before returning; raise on failure
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

import jsonschema

from youtubetranscript.formatters.base import BaseFormatter, FormatterOutput

if TYPE_CHECKING:
    from youtubetranscript.api.models import Transcript

_SCHEMA_PATH = Path(__file__).resolve().parent / "transcript_schema.json"

_CACHED_SCHEMA: dict[str, Any] | None = None


def get_schema() -> dict[str, Any]:
    """Load and cache the export schema."""
    global _CACHED_SCHEMA
    if _CACHED_SCHEMA is None:
        with open(_SCHEMA_PATH, encoding="utf-8") as f:
            _CACHED_SCHEMA = json.load(f)
    return _CACHED_SCHEMA


def to_json(transcript: Transcript) -> str:
    """Serialize the transcript to a schema-valid JSON document.

    Raises:
        jsonschema.ValidationError: If the document does not match the schema.
    """
    document = {
        "video_id": transcript.video_id,
        "language": transcript.language,
        "text": transcript.text,
        "duration": transcript.duration,
        "segments": [segment.to_dict() for segment in transcript.segments],
    }
    jsonschema.validate(instance=document, schema=get_schema())
    return json.dumps(document, indent=2, ensure_ascii=False)


class JSONFormatter(BaseFormatter):

    @property
    def name(self) -> str:
        return "JSON"

    def format(self, transcript: Transcript) -> FormatterOutput:
        return FormatterOutput(
            suffix="-transcript.json",
            content=to_json(transcript),
            media_type="application/json",
        )
