# sub_core/subtitles/writers/ass_writer.py
# -*- coding: utf-8 -*-
"""
ASS v4+ writer.

Sections are written in document order, never reordered or merged:
- Script Info and generic sections: header, then every stored line verbatim
- Styles: header, the canonical Format line, one row per style, blank line
- Events: header, the canonical Format line, one row per event, blank line

Styles and events always use the canonical column order, whatever Format
they were parsed with. Timing is truncated to centiseconds here.
"""
from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import IO, TYPE_CHECKING, Iterator, Union

from ..fields import EVENT_FORMAT, FORMAT_SEPARATOR, STYLE_FORMAT, event_values, style_values

if TYPE_CHECKING:
    from ..data import AssDocument, Section

logger = logging.getLogger(__name__)

STYLES_FORMAT_LINE = f"Format: {FORMAT_SEPARATOR.join(STYLE_FORMAT)}"
EVENTS_FORMAT_LINE = f"Format: {FORMAT_SEPARATOR.join(EVENT_FORMAT)}"


def _section_lines(section: 'Section') -> Iterator[str]:
    info = section.as_script_info()
    if info is not None:
        yield f"[{info.TITLE}]"
        for line in info.lines:
            yield line.to_ass()
        return

    styles = section.as_styles()
    if styles is not None:
        yield f"[{styles.TITLE}]"
        yield STYLES_FORMAT_LINE
        for style in styles.styles:
            yield f"Style: {','.join(style_values(style))}"
        yield ''
        return

    events = section.as_events()
    if events is not None:
        yield f"[{events.TITLE}]"
        yield EVENTS_FORMAT_LINE
        for event in events.events:
            yield f"{event.kind.value}: {','.join(event_values(event))}"
        yield ''
        return

    generic = section.as_generic()
    if generic is not None:
        yield f"[{generic.title}]"
        for line in generic.lines:
            yield line.to_ass()


def iter_ass_lines(data: 'AssDocument') -> Iterator[str]:
    """Yield every output line (without terminator) in order."""
    for section in data.sections:
        logger.debug(f"[AssWriter] Writing {section.kind.value} section")
        yield from _section_lines(section)


def dump_ass(data: 'AssDocument') -> str:
    """Render the whole document as canonical ASS text."""
    return ''.join(f"{line}\n" for line in iter_ass_lines(data))


def write_ass(data: 'AssDocument', sink: Union[IO[bytes], IO[str]]) -> None:
    """
    Write the document to an open sink.

    Binary sinks receive UTF-8 bytes; text sinks receive str. Writes are
    streamed, so a failure part way leaves a partial output.
    """
    text_mode = isinstance(sink, io.TextIOBase)
    for line in iter_ass_lines(data):
        out = f"{line}\n"
        sink.write(out if text_mode else out.encode('utf-8'))


def write_ass_file(data: 'AssDocument', path: Union[Path, str]) -> None:
    """
    Write the document to an ASS file (UTF-8, no BOM, "\\n" line endings).

    Args:
        data: AssDocument to write
        path: Output file path
    """
    path = Path(path)
    with open(path, 'wb') as f:
        write_ass(data, f)
    logger.info(f"[AssWriter] Saved {path.name}")
