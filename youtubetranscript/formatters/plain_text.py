"""Plain text export — segment texts joined with single spaces."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from youtubetranscript.formatters.base import BaseFormatter, FormatterOutput

if TYPE_CHECKING:
    from youtubetranscript.api.models import Segment, Transcript


def to_plain_text(segments: Sequence[Segment]) -> str:
    return " ".join(segment.text for segment in segments)


class PlainTextFormatter(BaseFormatter):

    @property
    def name(self) -> str:
        return "Plain Text"

    def format(self, transcript: Transcript) -> FormatterOutput:
        return FormatterOutput(
            suffix="-transcript.txt",
            content=to_plain_text(transcript.segments),
            media_type="text/plain",
        )
