"""SubRip (SRT) subtitle export.

WHY: SRT is the subtitle format every video player and editor accepts.

HOW: One cue per segment, numbered from 1. Each cue is the index line,
the ``start --> end`` timing line, the text, and a blank line.

RULES:
- Timing format: ``HH:MM:SS,mmm`` (comma before milliseconds)
- Cue end: segment end, else start + duration, else start + 2 seconds
- Segment text is written as-is; no line wrapping or re-segmentation
- An empty segment list produces an empty string
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from youtubetranscript.formatters.base import BaseFormatter, FormatterOutput
from youtubetranscript.formatters.timecode import cue_end, format_timestamp

if TYPE_CHECKING:
    from youtubetranscript.api.models import Segment, Transcript


def to_srt(segments: Sequence[Segment]) -> str:
    blocks = []
    for index, segment in enumerate(segments, start=1):
        blocks.append("{}\n{} --> {}\n{}\n\n".format(
            index,
            format_timestamp(segment.start, ","),
            format_timestamp(cue_end(segment), ","),
            segment.text,
        ))
    return "".join(blocks)


class SRTFormatter(BaseFormatter):

    @property
    def name(self) -> str:
        return "SubRip (SRT)"

    def format(self, transcript: Transcript) -> FormatterOutput:
        return FormatterOutput(
            suffix="-transcript.srt",
            content=to_srt(transcript.segments),
            media_type="application/x-subrip",
        )
