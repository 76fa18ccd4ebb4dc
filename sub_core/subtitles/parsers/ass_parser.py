# sub_core/subtitles/parsers/ass_parser.py
# -*- coding: utf-8 -*-
"""
ASS v4+ parser.

The parser walks the input once, line by line:
- "[V4+ Styles]" and "[Events]" open a fresh section of that kind
- any other "[...]" line opens a fresh generic section with that title
- every other line is classified and handed to the open section

Sections are never merged, even when a kind repeats. Lines that match no
classification rule are dropped. The first structurally invalid line aborts
the whole parse with an AssParseError carrying its 1-based line number.

Entry points:
- parse_ass_file(path)      file on disk (UTF-8, optional BOM)
- parse_ass_reader(reader)  any iterable of text lines, e.g. an open file
- parse_ass_string(text)    a complete in-memory document
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Iterable, Iterator, List, Optional, Union

from ..data import (
    AssDocument,
    EventsSection,
    GenericSection,
    ScriptInfo,
    Section,
    StylesSection,
)
from ..errors import AssParseError, ErrorKind
from ..lines import Line

logger = logging.getLogger(__name__)

BOM = '\ufeff'
SCRIPT_INFO_HEADER = '[Script Info]'
STYLES_HEADER = '[V4+ Styles]'
EVENTS_HEADER = '[Events]'


def _strip_newline(line: str) -> str:
    """Drop one trailing "\\n" or "\\r\\n"."""
    if line.endswith('\n'):
        line = line[:-1]
        if line.endswith('\r'):
            line = line[:-1]
    return line


def _section_title(line: str) -> Optional[str]:
    """Return the text inside a "[Title]" line, or None."""
    if len(line) >= 2 and line.startswith('[') and line.endswith(']'):
        return line[1:-1]
    return None


def _iter_string_lines(text: str) -> Iterator[str]:
    """Split on "\\n" only, tolerating "\\r\\n"; a final newline ends the last line."""
    if not text:
        return
    parts = text.split('\n')
    if parts[-1] == '':
        parts.pop()
    for part in parts:
        yield part[:-1] if part.endswith('\r') else part


class _SectionStateMachine:
    """Routes body lines into sections; always starts inside [Script Info]."""

    def __init__(self):
        self.sections: List[Section] = [ScriptInfo()]
        self.dropped = 0

    def feed(self, line: str, line_number: int) -> None:
        if line == STYLES_HEADER:
            self._open(StylesSection(), line_number)
            return
        if line == EVENTS_HEADER:
            self._open(EventsSection(), line_number)
            return
        title = _section_title(line)
        if title is not None:
            self._open(GenericSection(title=title), line_number)
            return

        parsed = Line.parse(line)
        if parsed is None:
            self.dropped += 1
            logger.debug(f"[AssParser] Dropped unclassifiable line {line_number}")
            return

        try:
            self.sections[-1].process_line(parsed)
        except AssParseError as e:
            e.with_line(line_number)
            raise

    def _open(self, section: Section, line_number: int) -> None:
        logger.debug(
            f"[AssParser] Line {line_number}: opened {section.kind.value} section"
            + (f" [{section.title}]" if isinstance(section, GenericSection) else "")
        )
        self.sections.append(section)

    def finish(self) -> AssDocument:
        document = AssDocument(sections=self.sections)
        logger.info(
            f"[AssParser] Parsed {len(self.sections)} sections, "
            f"{sum(1 for _ in document.styles())} styles, "
            f"{len(document.events())} events"
            + (f" ({self.dropped} unclassifiable lines dropped)" if self.dropped else "")
        )
        return document


def _decode(line: Union[str, bytes]) -> str:
    if isinstance(line, bytes):
        return line.decode('utf-8')
    return line


def parse_ass_reader(reader: Union[Iterable[str], IO[str], IO[bytes]]) -> AssDocument:
    """
    Parse a document from a line iterator.

    The header line is consumed first and checked on its own, so body lines
    are numbered from 2.

    Args:
        reader: Iterable yielding lines (text or UTF-8 bytes), with or without
            their line terminators

    Returns:
        Parsed AssDocument

    Raises:
        AssParseError: on the first invalid line, or IO if reading fails
    """
    iterator = iter(reader)
    line_number = 1
    try:
        first = next(iterator, '')
        header = _decode(first)
        if header.startswith(BOM):
            header = header[1:]
        if header.rstrip() != SCRIPT_INFO_HEADER:
            raise AssParseError(ErrorKind.MISSING_SCRIPT_INFO, 1)

        machine = _SectionStateMachine()
        for raw in iterator:
            line_number += 1
            machine.feed(_strip_newline(_decode(raw)), line_number)
    except (OSError, UnicodeDecodeError) as e:
        raise AssParseError(ErrorKind.IO, line_number) from e

    return machine.finish()


def parse_ass_string(text: str) -> AssDocument:
    """
    Parse a complete in-memory document.

    Every line, the header included, is counted starting at 1.

    Raises:
        AssParseError: on the first invalid line
    """
    if text.startswith(BOM):
        text = text[1:]

    lines = _iter_string_lines(text)
    if next(lines, None) != SCRIPT_INFO_HEADER:
        raise AssParseError(ErrorKind.MISSING_SCRIPT_INFO, 1)

    machine = _SectionStateMachine()
    for line_number, line in enumerate(lines, start=2):
        machine.feed(line, line_number)
    return machine.finish()


def parse_ass_file(path: Union[Path, str]) -> AssDocument:
    """
    Parse an ASS file from disk.

    Args:
        path: Path to the .ass file (UTF-8, optional BOM)

    Returns:
        Parsed AssDocument
    """
    path = Path(path)
    logger.debug(f"[AssParser] Reading {path}")
    try:
        f = open(path, 'r', encoding='utf-8', newline='\n')
    except OSError as e:
        raise AssParseError(ErrorKind.IO, 0) from e
    with f:
        return parse_ass_reader(f)
