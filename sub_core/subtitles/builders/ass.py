# sub_core/subtitles/builders/ass.py
# -*- coding: utf-8 -*-
"""
ASS document builder for plain timed dialogue (e.g. converted SRT cues).

Generates a document with default script metadata, one style and one
[Events] section. Simple emphasis markup (<i>, <b>, <u>, <s>) is rewritten
into ASS override tags and line breaks become "\\N".
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple, Union

from ...config import BuildSettings
from ..data import AssDocument, Event, EventsSection, ScriptInfo, Style, StylesSection
from ..japanese import contains_japanese

logger = logging.getLogger(__name__)

_EMPHASIS_RE = re.compile(r'<(i|b|u|s)>(.+)</(?:i|b|u|s)>')


@dataclass
class Dialogue:
    """A plain cue: start/end in float milliseconds and raw text."""

    start_ms: float
    end_ms: float
    text: str


def markup_to_ass(text: str) -> str:
    """
    Convert emphasis markup and newlines to ASS syntax.

    "<b>hi</b>" becomes "{\\b1}hi{\\b0}" and "\\n" becomes the two characters
    "\\N".
    """
    converted = _EMPHASIS_RE.sub(
        lambda m: f"{{\\{m.group(1)}1}}{m.group(2)}{{\\{m.group(1)}0}}", text
    )
    return converted.replace('\n', '\\N')


class ASSBuilder:
    """Collects dialogue and builds an AssDocument from it."""

    def __init__(self, settings: Optional[BuildSettings] = None):
        """
        Initialize ASS builder.

        Args:
            settings: Script metadata and font choices; defaults if omitted
        """
        self.settings = settings or BuildSettings()
        self.dialogue: List[Dialogue] = []

    def add_dialogue(self, start_ms: float, end_ms: float, text: str) -> None:
        self.dialogue.append(Dialogue(start_ms, end_ms, text))

    def _build_style(self) -> Style:
        style = Style.program_default()
        # Yu Gothic UI renders Japanese well but is mostly a Windows font
        if any(contains_japanese(d.text) for d in self.dialogue):
            style.bold = True
            style.name = self.settings.japanese_font
            style.font_name = self.settings.japanese_font
        return style

    def build(self) -> AssDocument:
        style = self._build_style()

        events = EventsSection.default()
        events.events = [
            Event(
                start_ms=d.start_ms,
                end_ms=d.end_ms,
                style=style.name,
                text=markup_to_ass(d.text),
            )
            for d in self.dialogue
        ]

        styles = StylesSection.default()
        styles.styles = [style]

        logger.info(
            f"[AssBuilder] Built document with {len(events.events)} events, style '{style.name}'"
        )
        return AssDocument(sections=[ScriptInfo.default(self.settings), styles, events])


def build_from_dialogue(
    dialogue: Iterable[Union[Dialogue, Tuple[float, float, str]]],
    settings: Optional[BuildSettings] = None,
) -> AssDocument:
    """
    Build a fresh document from ordered dialogue.

    Args:
        dialogue: Cues in output order, as Dialogue objects or plain
            (start_ms, end_ms, text) tuples
        settings: Optional build settings

    Returns:
        New AssDocument
    """
    builder = ASSBuilder(settings)
    for d in dialogue:
        if isinstance(d, Dialogue):
            builder.add_dialogue(d.start_ms, d.end_ms, d.text)
        else:
            start_ms, end_ms, text = d
            builder.add_dialogue(start_ms, end_ms, text)
    return builder.build()
