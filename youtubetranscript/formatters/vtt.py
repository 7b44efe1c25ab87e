"""WebVTT subtitle export.

WHY: WebVTT is the caption format browsers play natively via <track>.

HOW: A ``WEBVTT`` header and blank line, then one unnumbered cue per
segment: the timing line, the text, and a blank line.

RULES:
- Timing format: ``HH:MM:SS.mmm`` (dot before milliseconds)
- Cue end uses the same fallback as SRT (end, start + duration, start + 2s)
- An empty segment list produces just the header block
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from youtubetranscript.formatters.base import BaseFormatter, FormatterOutput
from youtubetranscript.formatters.timecode import cue_end, format_timestamp

if TYPE_CHECKING:
    from youtubetranscript.api.models import Segment, Transcript


def to_vtt(segments: Sequence[Segment]) -> str:
    parts = ["WEBVTT\n\n"]
    for segment in segments:
        parts.append("{} --> {}\n{}\n\n".format(
            format_timestamp(segment.start, "."),
            format_timestamp(cue_end(segment), "."),
            segment.text,
        ))
    return "".join(parts)


class VTTFormatter(BaseFormatter):

    @property
    def name(self) -> str:
        return "WebVTT"

    def format(self, transcript: Transcript) -> FormatterOutput:
        return FormatterOutput(
            suffix="-transcript.vtt",
            content=to_vtt(transcript.segments),
            media_type="text/vtt",
        )
