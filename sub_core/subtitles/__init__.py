# sub_core/subtitles/__init__.py
"""
ASS (SubStation Alpha v4+) parsing and serialization.

This package provides:
- AssDocument: ordered sections parsed from or written to .ass files
- Line, Colour and the timestamp codec used by the model
- Parsers and writers for ASS
- A builder that turns plain timed dialogue into a new document
"""

from .colour import Colour
from .data import (
    AssDocument,
    Event,
    EventKind,
    EventsSection,
    EventsView,
    GenericSection,
    ScriptInfo,
    Section,
    SectionKind,
    Style,
    StylesSection,
)
from .errors import AssParseError, ErrorKind
from .fields import EVENT_FORMAT, STYLE_FORMAT, EventField, StyleField
from .lines import Line, LineKind
from .timing import format_ass_time, parse_ass_time

__all__ = [
    # Document model
    'AssDocument',
    'Section',
    'SectionKind',
    'ScriptInfo',
    'StylesSection',
    'EventsSection',
    'GenericSection',
    'EventsView',
    'Style',
    'Event',
    'EventKind',
    # Lines and values
    'Line',
    'LineKind',
    'Colour',
    'parse_ass_time',
    'format_ass_time',
    # Format directive
    'StyleField',
    'EventField',
    'STYLE_FORMAT',
    'EVENT_FORMAT',
    # Errors
    'AssParseError',
    'ErrorKind',
]
