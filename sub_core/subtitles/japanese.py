# sub_core/subtitles/japanese.py
"""Japanese script detection used to pick a suitable font."""
from __future__ import annotations

_JAPANESE_RANGES = (
    ('぀', 'ヿ'),  # Hiragana + Katakana
    ('ｦ', 'ﾝ'),  # Half-width Katakana
    ('一', '龯'),  # Common + Uncommon Kanji
)


def is_japanese(ch: str) -> bool:
    return any(lo <= ch <= hi for lo, hi in _JAPANESE_RANGES)


def contains_japanese(text: str) -> bool:
    return any(is_japanese(ch) for ch in text)
