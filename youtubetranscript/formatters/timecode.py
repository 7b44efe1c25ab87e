"""Time formatting helpers shared by the exporters.

RULES:
- format_mmss / format_hms truncate to whole seconds (no rounding)
- format_timestamp rounds to the nearest millisecond; 999.5 ms carries
  into the next second
- Every field is zero-padded: 2 digits for hours/minutes/seconds, 3 for ms
"""

from __future__ import annotations

DEFAULT_CUE_LENGTH_S = 2.0


def format_mmss(seconds: float) -> str:
    """Format seconds as ``MM:SS``, e.g. 125.0 -> "02:05"."""
    minutes = int(seconds // 60)
    secs = int(seconds % 60)
    return "{:02d}:{:02d}".format(minutes, secs)


def format_hms(seconds: float) -> str:
    """Format seconds as ``HH:MM:SS``, e.g. 3725.0 -> "01:02:05"."""
    hours = int(seconds // 3600)
    remainder = int(seconds) % 3600
    return "{:02d}:{:02d}:{:02d}".format(hours, remainder // 60, remainder % 60)


def format_timestamp(seconds: float, separator: str) -> str:
    """Format seconds as ``HH:MM:SS<sep>mmm`` for subtitle cues.

    Args:
        seconds: Non-negative time in seconds.
        separator: "," for SRT, "." for WebVTT.
    """
    total_ms = int(seconds * 1000 + 0.5)
    total_secs, millis = divmod(total_ms, 1000)
    hours, remainder = divmod(total_secs, 3600)
    minutes, secs = divmod(remainder, 60)
    return "{:02d}:{:02d}:{:02d}{}{:03d}".format(hours, minutes, secs, separator, millis)


def cue_end(segment) -> float:
    """End time for a subtitle cue.

    Uses the segment end when set, else start + duration, else a
    2-second default caption length.
    """
    if segment.end > 0:
        return segment.end
    if segment.duration > 0:
        return segment.start + segment.duration
    return segment.start + DEFAULT_CUE_LENGTH_S

