# sub_core/subtitles/data.py
"""
ASS document model.

A document is an ordered list of sections in file order:
- ScriptInfo: raw lines of [Script Info], kept verbatim
- StylesSection: active Format plus parsed Style rows
- EventsSection: active Format plus parsed Event rows
- GenericSection: any other [Title] block, kept verbatim

Sections of the same kind may repeat and are never merged. Styles and events
are re-emitted in a canonical column order on save, everything else is
written back line for line.

All timing is stored as FLOAT MILLISECONDS internally.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import IO, Any, ClassVar, Iterable, Iterator

from ..config import BuildSettings
from .colour import Colour
from .errors import AssParseError, ErrorKind
from .fields import (
    EVENT_FORMAT,
    STYLE_FORMAT,
    apply_event_row,
    apply_style_row,
    parse_format,
)
from .lines import Line
from .timing import shift_ms

# =============================================================================
# Style Definition
# =============================================================================


@dataclass
class Style:
    """
    ASS style definition with all 23 fields.

    Defaults are the format's own built-in defaults, so fields missing from a
    custom Format line keep sensible values.
    """

    name: str = "Default"
    font_name: str = "Arial"
    font_size: float = 20.0
    primary_colour: Colour = Colour.WHITE
    secondary_colour: Colour = Colour.RED
    outline_colour: Colour = Colour.BLACK
    back_colour: Colour = Colour.BLACK
    bold: bool = False
    italic: bool = False
    underline: bool = False
    strike_out: bool = False
    scale_x: float = 100.0
    scale_y: float = 100.0
    spacing: float = 0.0
    angle: float = 0.0
    border_style: int = 1  # 1 = outline + shadow, 3 = opaque box
    outline: float = 2.0
    shadow: float = 2.0
    alignment: int = 2  # Numpad style: 1-9
    margin_l: int = 10
    margin_r: int = 10
    margin_v: int = 10
    encoding: int = 1  # Character set encoding

    @classmethod
    def from_format_line(cls, format_fields: list[str], data: str) -> Style:
        """
        Parse a style from the active Format fields and a Style row.

        Raises:
            ValueError: a known field could not be parsed
        """
        style = cls()
        apply_style_row(style, format_fields, data)
        return style

    @classmethod
    def program_default(cls) -> Style:
        """Style installed when building a document from plain dialogue."""
        return cls(
            font_size=66.0,
            primary_colour=Colour.from_rgb(0xFA, 0xFA, 0xFA),
            outline_colour=Colour.from_rgb(0xB6, 0x73, 0xF2),
            spacing=1.0,
            outline=3.0,
            shadow=0.0,
            margin_v=20,
        )


# =============================================================================
# Events
# =============================================================================


class EventKind(Enum):
    DIALOGUE = "Dialogue"
    COMMENT = "Comment"
    MOVIE = "Movie"
    SOUND = "Sound"
    PICTURE = "Picture"

    @classmethod
    def parse(cls, keyword: str) -> EventKind:
        """
        Resolve an event line keyword.

        Raises:
            AssParseError: INVALID_EVENT_TYPE for any other keyword
        """
        try:
            return cls(keyword)
        except ValueError:
            raise AssParseError(ErrorKind.INVALID_EVENT_TYPE) from None

    def is_dialogue(self) -> bool:
        return self is EventKind.DIALOGUE

    def is_comment(self) -> bool:
        return self is EventKind.COMMENT


@dataclass
class Event:
    """
    Single event row with FLOAT MILLISECOND timing.

    `style` names a style by reference only; it is not checked against the
    document's styles.
    """

    kind: EventKind = EventKind.DIALOGUE
    layer: int = 0
    start_ms: float = 0.0
    end_ms: float = 0.0
    style: str = "Default"
    name: str = ""  # Actor field
    margin_l: int = 0
    margin_r: int = 0
    margin_v: int = 0
    effect: str = ""
    text: str = ""

    @property
    def duration_ms(self) -> float:
        return self.end_ms - self.start_ms

    @classmethod
    def from_format_line(
        cls, format_fields: list[str], data: str, kind: EventKind = EventKind.DIALOGUE
    ) -> Event:
        """
        Parse an event from the active Format fields and a row.

        Raises:
            ValueError: a known field could not be parsed
        """
        event = cls(kind=kind)
        apply_event_row(event, format_fields, data)
        return event

    def shift_by(self, seconds: float) -> None:
        """Move the event by a signed number of seconds, saturating at zero."""
        offset_ms = seconds * 1000.0
        self.start_ms = shift_ms(self.start_ms, offset_ms)
        self.end_ms = shift_ms(self.end_ms, offset_ms)


# =============================================================================
# Sections
# =============================================================================


class SectionKind(Enum):
    SCRIPT_INFO = "script_info"
    STYLES = "styles"
    EVENTS = "events"
    GENERIC = "generic"


class Section(ABC):
    """
    Base for the four section variants.

    Use the as_*() accessors to narrow a section to its concrete variant;
    each returns None for the other kinds.
    """

    kind: ClassVar[SectionKind]

    @abstractmethod
    def process_line(self, line: Line) -> None:
        """Route one classified body line into this section."""

    def remove_comments(self) -> None:
        """Drop comment lines. Sections without a comment concept do nothing."""

    def as_script_info(self) -> ScriptInfo | None:
        return self if isinstance(self, ScriptInfo) else None

    def as_styles(self) -> StylesSection | None:
        return self if isinstance(self, StylesSection) else None

    def as_events(self) -> EventsSection | None:
        return self if isinstance(self, EventsSection) else None

    def as_generic(self) -> GenericSection | None:
        return self if isinstance(self, GenericSection) else None


@dataclass
class ScriptInfo(Section):
    """The [Script Info] block, kept as raw lines."""

    kind: ClassVar[SectionKind] = SectionKind.SCRIPT_INFO

    lines: list[Line] = field(default_factory=list)

    TITLE: ClassVar[str] = "Script Info"

    @classmethod
    def default(cls, settings: BuildSettings | None = None) -> ScriptInfo:
        """Metadata for a generated script, followed by a blank line."""
        settings = settings or BuildSettings()
        lines = [Line.variable(key, value) for key, value in settings.script_info_items()]
        lines.append(Line.empty())
        return cls(lines=lines)

    def process_line(self, line: Line) -> None:
        if line.is_encoded():
            raise AssParseError(ErrorKind.INVALID)
        self.lines.append(line)

    def get(self, key: str) -> str | None:
        for line in self.lines:
            pair = line.item()
            if pair is not None and pair[0] == key:
                return pair[1]
        return None

    def set(self, key: str, value: Any) -> None:
        """Overwrite the first `key` line, or append one before trailing blanks."""
        for line in self.lines:
            pair = line.item()
            if pair is not None and pair[0] == key:
                line.set(value)
                return
        index = len(self.lines)
        while index > 0 and self.lines[index - 1].is_empty():
            index -= 1
        self.lines.insert(index, Line.variable(key, value))

    def title(self) -> str:
        title = self.get("Title")
        return "<untitled>" if title is None else title

    def version(self) -> str:
        return self.get("ScriptType") or ""

    def remove_comments(self) -> None:
        self.lines = [line for line in self.lines if not line.is_comment()]


@dataclass
class GenericSection(Section):
    """Any section without dedicated parsing, e.g. [Fonts] or [Aegisub Project Garbage]."""

    kind: ClassVar[SectionKind] = SectionKind.GENERIC

    title: str = ""
    lines: list[Line] = field(default_factory=list)

    def process_line(self, line: Line) -> None:
        self.lines.append(line)

    def remove_comments(self) -> None:
        self.lines = [line for line in self.lines if not line.is_comment()]


@dataclass
class StylesSection(Section):
    """The [V4+ Styles] block."""

    kind: ClassVar[SectionKind] = SectionKind.STYLES

    format: list[str] = field(default_factory=list)
    styles: list[Style] = field(default_factory=list)

    TITLE: ClassVar[str] = "V4+ Styles"

    @classmethod
    def default(cls) -> StylesSection:
        return cls(format=list(STYLE_FORMAT), styles=[Style()])

    def process_line(self, line: Line) -> None:
        if line.is_empty():
            return

        pair = line.item()
        if pair is None:
            raise AssParseError(ErrorKind.INVALID)
        key, value = pair

        if key == "Format":
            self.format = parse_format(value)
        elif key == "Style":
            if not self.format:
                raise AssParseError(ErrorKind.MISSING_FORMAT)
            try:
                self.styles.append(Style.from_format_line(self.format, value))
            except ValueError:
                raise AssParseError(ErrorKind.INVALID_STYLE) from None
        else:
            raise AssParseError(ErrorKind.INVALID)

    def find(self, name: str) -> Style | None:
        for style in self.styles:
            if style.name == name:
                return style
        return None


@dataclass
class EventsSection(Section):
    """The [Events] block."""

    kind: ClassVar[SectionKind] = SectionKind.EVENTS

    format: list[str] = field(default_factory=list)
    events: list[Event] = field(default_factory=list)

    TITLE: ClassVar[str] = "Events"

    @classmethod
    def default(cls) -> EventsSection:
        return cls(format=list(EVENT_FORMAT))

    def process_line(self, line: Line) -> None:
        if line.is_empty():
            return

        pair = line.item()
        if pair is None:
            raise AssParseError(ErrorKind.INVALID)
        key, value = pair

        if key == "Format":
            self.format = parse_format(value)
            return

        kind = EventKind.parse(key)
        if not self.format:
            raise AssParseError(ErrorKind.MISSING_FORMAT)
        try:
            self.events.append(Event.from_format_line(self.format, value, kind))
        except ValueError:
            raise AssParseError(ErrorKind.INVALID_STYLE) from None

    def remove_comments(self) -> None:
        self.events = [e for e in self.events if not e.kind.is_comment()]


# =============================================================================
# Document
# =============================================================================


class EventsView:
    """
    Lazy view over every event of every [Events] section, in document order.

    Each iteration starts from the beginning and sees the current sections.
    Events are yielded by reference, so they can be edited in place.
    """

    def __init__(self, sections: list[Section]):
        self._sections = sections

    def __iter__(self) -> Iterator[Event]:
        for section in self._sections:
            events = section.as_events()
            if events is not None:
                yield from events.events

    def __len__(self) -> int:
        return sum(len(s.events) for s in self._sections if isinstance(s, EventsSection))


@dataclass
class AssDocument:
    """A parsed ASS v4+ document."""

    sections: list[Section] = field(default_factory=list)

    # =========================================================================
    # Factory Methods
    # =========================================================================

    @classmethod
    def from_file(cls, path: Path | str) -> AssDocument:
        from .parsers.ass_parser import parse_ass_file

        return parse_ass_file(path)

    @classmethod
    def from_reader(cls, reader: Iterable[str] | IO[str]) -> AssDocument:
        from .parsers.ass_parser import parse_ass_reader

        return parse_ass_reader(reader)

    @classmethod
    def from_string(cls, text: str) -> AssDocument:
        from .parsers.ass_parser import parse_ass_string

        return parse_ass_string(text)

    @classmethod
    def from_dialogue(
        cls, dialogue: Iterable[Any], settings: BuildSettings | None = None
    ) -> AssDocument:
        """Build a fresh document from plain (start, end, text) dialogue."""
        from .builders.ass import build_from_dialogue

        return build_from_dialogue(dialogue, settings)

    # =========================================================================
    # Save Methods
    # =========================================================================

    def save(self, path: Path | str) -> None:
        from .writers.ass_writer import write_ass_file

        write_ass_file(self, path)

    def write_to(self, sink: IO[bytes]) -> None:
        from .writers.ass_writer import write_ass

        write_ass(self, sink)

    def dumps(self) -> str:
        from .writers.ass_writer import dump_ass

        return dump_ass(self)

    # =========================================================================
    # Queries
    # =========================================================================

    @property
    def script_info(self) -> ScriptInfo | None:
        for section in self.sections:
            info = section.as_script_info()
            if info is not None:
                return info
        return None

    def styles(self) -> Iterator[Style]:
        for section in self.sections:
            styles = section.as_styles()
            if styles is not None:
                yield from styles.styles

    def find_style(self, name: str) -> Style | None:
        """First style called `name` across all Styles sections."""
        return next((s for s in self.styles() if s.name == name), None)

    def events(self) -> EventsView:
        return EventsView(self.sections)

    # =========================================================================
    # Editing
    # =========================================================================

    def remove_comments(self) -> None:
        for section in self.sections:
            section.remove_comments()

    def shift_by(self, seconds: float) -> None:
        for event in self.events():
            event.shift_by(seconds)
