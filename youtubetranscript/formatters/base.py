"""Abstract base formatter and output container.

WHY: Every export format consumes the same Transcript but produces
different file content. This base class gives callers one interface so
they can write any format generically (look up a key, call format(),
save the output).

HOW: BaseFormatter is an ABC with two requirements — a ``name`` property
and a ``format()`` method. FormatterOutput is a plain dataclass that
bundles a file suffix with its content and MIME type.

RULES:
- Subclasses MUST implement ``name`` (human-readable) and ``format()``
- ``suffix`` starts with a hyphen, e.g. ``"-transcript.srt"``
- The caller is responsible for prepending a file stem (usually the video ID)
- Formatters never mutate the Transcript
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from youtubetranscript.api.models import Transcript


@dataclass
class FormatterOutput:
    """One output file produced by a formatter.

    Attributes:
        suffix: File suffix appended to the stem,
                e.g. ``"-transcript.vtt"`` → ``"dQw4w9WgXcQ-transcript.vtt"``.
        content: The file content.
        media_type: MIME type for the content, e.g. ``"text/vtt"``.
    """

    suffix: str
    content: str
    media_type: str


class BaseFormatter(ABC):
    """Abstract base for all export formatters.

    To add a new export format:
    1. Create a new module in formatters/
    2. Subclass BaseFormatter
    3. Implement format() and name
    4. Register in FORMATTERS dict in formatters/__init__.py
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable format name, e.g. 'SubRip (SRT)'."""

    @abstractmethod
    def format(self, transcript: Transcript) -> FormatterOutput:
        """Render the transcript into a single output file."""
