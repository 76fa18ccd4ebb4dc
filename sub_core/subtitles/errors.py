# sub_core/subtitles/errors.py
# -*- coding: utf-8 -*-
"""Parse errors raised while reading ASS documents."""
from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    IO = 'io'
    INVALID = 'invalid'
    MISSING_SCRIPT_INFO = 'missing_script_info'
    MISSING_FORMAT = 'missing_format'
    INVALID_STYLE = 'invalid_style'
    INVALID_EVENT_TYPE = 'invalid_event_type'
    INVALID_EVENT = 'invalid_event'


_MESSAGES = {
    ErrorKind.INVALID: '.ass file is invalid',
    ErrorKind.MISSING_SCRIPT_INFO: 'missing [Script Info] header',
    ErrorKind.MISSING_FORMAT: 'missing format for styles',
    ErrorKind.INVALID_STYLE: 'style is invalid',
    ErrorKind.INVALID_EVENT_TYPE: 'event type is invalid',
    ErrorKind.INVALID_EVENT: 'event is invalid',
}


class AssParseError(Exception):
    """
    Raised when a document cannot be parsed.

    Every error carries the 1-based line number of the offending input line.
    Handlers raise with line 0 and the state machine stamps the real number
    on the way out (see with_line).
    """

    def __init__(self, kind: ErrorKind, line: int = 0):
        self.kind = kind
        self.line = line
        super().__init__(kind, line)

    def with_line(self, line: int) -> AssParseError:
        self.line = line
        return self

    def __str__(self) -> str:
        if self.kind is ErrorKind.IO:
            return f"line {self.line}: file error: {self.__cause__}"
        return f"line {self.line}: {_MESSAGES[self.kind]}"
