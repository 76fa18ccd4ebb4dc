# sub_core/subtitles/timing.py
# -*- coding: utf-8 -*-
"""
ASS timestamp codec.

All timing is stored as FLOAT MILLISECONDS internally. The wire form only
carries centiseconds ("H:MM:SS.cc"), so formatting truncates: stored
milliseconds are floored, then divided down to centiseconds. Nothing is
ever rounded up.
"""
from __future__ import annotations

import math
from typing import Optional


def _parse_digits(text: str) -> Optional[int]:
    if not text or not text.isascii() or not text.isdigit():
        return None
    return int(text)


def parse_ass_time(time_str: str) -> Optional[float]:
    """
    Parse an ASS timestamp to float milliseconds.

    Format: H:MM:SS.cc where hours may have any width. Exactly one '.' and
    exactly three ':'-separated parts are required. Returns None when the
    text does not match.

    Args:
        time_str: ASS timestamp string

    Returns:
        Time in float milliseconds, or None
    """
    clock, dot, subsec = time_str.partition('.')
    if not dot or '.' in subsec:
        return None

    parts = clock.split(':', 2)
    if len(parts) != 3:
        return None
    hours, minutes, seconds = (_parse_digits(p) for p in parts)
    centiseconds = _parse_digits(subsec)
    if hours is None or minutes is None or seconds is None or centiseconds is None:
        return None

    # The fraction counts centiseconds whatever its width
    total_seconds = hours * 3600 + minutes * 60 + seconds
    return float(total_seconds * 1000 + centiseconds * 10)


def format_ass_time(ms: float) -> str:
    """
    Format float milliseconds as an ASS timestamp (H:MM:SS.cc).

    Sub-centisecond components are truncated, never rounded.
    """
    total_cs = int(math.floor(ms)) // 10
    if total_cs < 0:
        total_cs = 0

    cs = total_cs % 100
    total_seconds = total_cs // 100
    seconds = total_seconds % 60
    total_minutes = total_seconds // 60
    minutes = total_minutes % 60
    hours = total_minutes // 60

    return f"{hours}:{minutes:02d}:{seconds:02d}.{cs:02d}"


def shift_ms(ms: float, offset_ms: float) -> float:
    """Shift a time by a signed offset, saturating at zero."""
    return max(0.0, ms + offset_ms)
