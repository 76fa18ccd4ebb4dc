# sub_core/subtitles/lines.py
"""
Raw line model for ASS documents.

Each body line of a section is classified exactly once into one of four
kinds. Script Info and unknown sections keep their lines verbatim so that
comments, blanks and embedded (uuencoded) payloads survive a round-trip.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

# Longest line an embedded font/graphic payload line may have
ENCODED_MAX_LENGTH = 80


class LineKind(Enum):
    VARIABLE = 'variable'
    COMMENT = 'comment'
    ENCODED = 'encoded'
    EMPTY = 'empty'


def _is_encoded(text: str) -> bool:
    try:
        raw = text.encode('ascii')
    except UnicodeEncodeError:
        return False
    return len(raw) <= ENCODED_MAX_LENGTH and all(33 <= b <= 96 for b in raw)


@dataclass(slots=True)
class Line:
    """
    A single line inside a section.

    For VARIABLE lines `text` holds the full "key: value" line; for COMMENT
    lines it holds everything after the leading ';'.
    """

    kind: LineKind
    text: str = ''

    @classmethod
    def variable(cls, key: str, value: object) -> Line:
        return cls(LineKind.VARIABLE, f"{key}: {value}")

    @classmethod
    def comment(cls, text: str) -> Line:
        return cls(LineKind.COMMENT, text)

    @classmethod
    def encoded(cls, text: str) -> Line:
        return cls(LineKind.ENCODED, text)

    @classmethod
    def empty(cls) -> Line:
        return cls(LineKind.EMPTY)

    @classmethod
    def parse(cls, text: str) -> Optional[Line]:
        """
        Classify a raw line.

        Rules are checked in order: empty, ';' comment, "key: value",
        encoded payload. Returns None when no rule matches; callers drop
        such lines.
        """
        if not text:
            return cls.empty()
        if text.startswith(';'):
            return cls.comment(text[1:])
        if ': ' in text:
            return cls(LineKind.VARIABLE, text)
        if _is_encoded(text):
            return cls.encoded(text)
        return None

    def item(self) -> Optional[Tuple[str, str]]:
        """Return (key, value) for variable lines, None otherwise."""
        if self.kind is not LineKind.VARIABLE:
            return None
        key, sep, value = self.text.partition(': ')
        if not sep:
            return None
        return key, value

    def is_comment(self) -> bool:
        """True for ';' lines and for "Comment: ..." variables."""
        if self.kind is LineKind.COMMENT:
            return True
        pair = self.item()
        return pair is not None and pair[0] == 'Comment'

    def is_empty(self) -> bool:
        return self.kind is LineKind.EMPTY

    def is_encoded(self) -> bool:
        return self.kind is LineKind.ENCODED

    def overwrite(self, key: str, value: object) -> None:
        """Replace this line with the given key-value pair."""
        self.kind = LineKind.VARIABLE
        self.text = f"{key}: {value}"

    def set(self, value: object) -> None:
        """Replace the value of a key-value line; other kinds are left alone."""
        if self.kind is not LineKind.VARIABLE:
            return
        index = self.text.find(': ')
        if index != -1:
            self.text = f"{self.text[:index + 2]}{value}"

    def to_ass(self) -> str:
        if self.kind is LineKind.COMMENT:
            return f";{self.text}"
        if self.kind is LineKind.EMPTY:
            return ''
        return self.text
