"""Export formatter registry — text and subtitle renderings of a Transcript.

WHY: Callers that save transcripts to disk need a single lookup to find
the right formatter by name. A central dict makes it trivial to add new
formats: create the formatter class, import it here, add one line.

HOW: FORMATTERS maps string keys to formatter *classes* (not instances).
Callers instantiate as needed: ``formatter = FORMATTERS["srt"]()``.
The pure functions (to_srt, to_vtt, ...) are also exported for callers
that only need a string.

RULES:
- Keys are snake_case identifiers
- Values are BaseFormatter subclasses (not instances)
- Every formatter listed here must be importable without side effects
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from youtubetranscript.formatters.json_segments import JSONFormatter, to_json
from youtubetranscript.formatters.plain_text import PlainTextFormatter, to_plain_text
from youtubetranscript.formatters.srt import SRTFormatter, to_srt
from youtubetranscript.formatters.timestamped_text import (
    TimestampedTextFormatter,
    to_timestamped_text,
)
from youtubetranscript.formatters.vtt import VTTFormatter, to_vtt

if TYPE_CHECKING:
    from youtubetranscript.formatters.base import BaseFormatter

FORMATTERS: dict[str, type[BaseFormatter]] = {
    "plain_text": PlainTextFormatter,
    "timestamped_text": TimestampedTextFormatter,
    "srt": SRTFormatter,
    "vtt": VTTFormatter,
    "json": JSONFormatter,
}

__all__ = [
    "FORMATTERS",
    "to_json",
    "to_plain_text",
    "to_srt",
    "to_timestamped_text",
    "to_vtt",
]
