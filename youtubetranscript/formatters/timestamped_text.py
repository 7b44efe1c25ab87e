"""Timestamped text export — one ``[MM:SS] text`` line per segment.

WHY: Readers skimming a long video want to jump to a spot; a minute:second
prefix on every caption is the lightest format that allows it.

RULES:
- Timestamps truncate to whole seconds (a caption at 59.9s reads [00:59])
- Lines are joined with "\\n"; there is no trailing newline
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from youtubetranscript.formatters.base import BaseFormatter, FormatterOutput
from youtubetranscript.formatters.timecode import format_mmss

if TYPE_CHECKING:
    from youtubetranscript.api.models import Segment, Transcript


def to_timestamped_text(segments: Sequence[Segment]) -> str:
    return "\n".join(
        "[{}] {}".format(format_mmss(segment.start), segment.text)
        for segment in segments
    )


class TimestampedTextFormatter(BaseFormatter):

    @property
    def name(self) -> str:
        return "Timestamped Text"

    def format(self, transcript: Transcript) -> FormatterOutput:
        return FormatterOutput(
            suffix="-timestamped.txt",
            content=to_timestamped_text(transcript.segments),
            media_type="text/plain",
        )
