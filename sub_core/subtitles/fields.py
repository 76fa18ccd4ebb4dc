# sub_core/subtitles/fields.py
# -*- coding: utf-8 -*-
"""
Format-directive field mapping for [V4+ Styles] and [Events] rows.

Each Styles/Events section declares its column order with a "Format:" line.
Data rows are zipped positionally against that order. Known field names are
routed to a typed parser; unknown names are skipped so newer or custom
formats still load. A field missing from a truncated Format keeps the
owner's default.

Splitting differs on purpose:
- Event rows split into at most as many tokens as there are fields, so the
  last field (Text) may contain commas.
- Style rows split on every comma; no style field is free text.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Tuple

from .colour import Colour
from .timing import format_ass_time, parse_ass_time


class StyleField(Enum):
    """Known [V4+ Styles] columns, in canonical order."""

    NAME = 'Name'
    FONTNAME = 'Fontname'
    FONTSIZE = 'Fontsize'
    PRIMARY_COLOUR = 'PrimaryColour'
    SECONDARY_COLOUR = 'SecondaryColour'
    OUTLINE_COLOUR = 'OutlineColour'
    BACK_COLOUR = 'BackColour'
    BOLD = 'Bold'
    ITALIC = 'Italic'
    UNDERLINE = 'Underline'
    STRIKE_OUT = 'StrikeOut'
    SCALE_X = 'ScaleX'
    SCALE_Y = 'ScaleY'
    SPACING = 'Spacing'
    ANGLE = 'Angle'
    BORDER_STYLE = 'BorderStyle'
    OUTLINE = 'Outline'
    SHADOW = 'Shadow'
    ALIGNMENT = 'Alignment'
    MARGIN_L = 'MarginL'
    MARGIN_R = 'MarginR'
    MARGIN_V = 'MarginV'
    ENCODING = 'Encoding'

    @classmethod
    def lookup(cls, name: str) -> Optional[StyleField]:
        """Return the field for a Format name, or None if unrecognized."""
        return _STYLE_BY_NAME.get(name)


class EventField(Enum):
    """Known [Events] columns, in canonical order."""

    LAYER = 'Layer'
    START = 'Start'
    END = 'End'
    STYLE = 'Style'
    NAME = 'Name'
    MARGIN_L = 'MarginL'
    MARGIN_R = 'MarginR'
    MARGIN_V = 'MarginV'
    EFFECT = 'Effect'
    TEXT = 'Text'

    @classmethod
    def lookup(cls, name: str) -> Optional[EventField]:
        return _EVENT_BY_NAME.get(name)


_STYLE_BY_NAME = {f.value: f for f in StyleField}
_EVENT_BY_NAME = {f.value: f for f in EventField}

STYLE_FORMAT: List[str] = [f.value for f in StyleField]
EVENT_FORMAT: List[str] = [f.value for f in EventField]

FORMAT_SEPARATOR = ', '


def parse_format(value: str) -> List[str]:
    """Split the value of a "Format:" line into field names."""
    return value.split(FORMAT_SEPARATOR)


# =============================================================================
# Value parsers (raise ValueError on bad input)
# =============================================================================


def _uint(bits: int) -> Callable[[str], int]:
    upper = (1 << bits) - 1

    def parse(value: str) -> int:
        if not value.isascii() or not value.isdigit():
            raise ValueError(f"not an unsigned integer: {value!r}")
        number = int(value)
        if number > upper:
            raise ValueError(f"{number} out of range (max {upper})")
        return number

    return parse


def _float(value: str) -> float:
    if value != value.strip() or '_' in value:
        raise ValueError(f"not a number: {value!r}")
    return float(value)


def _flag(value: str) -> bool:
    return value != '0'


def _colour(value: str) -> Colour:
    colour = Colour.from_ass(value)
    if colour is None:
        raise ValueError(f"not an ASS colour: {value!r}")
    return colour


def _time(value: str) -> float:
    ms = parse_ass_time(value)
    if ms is None:
        raise ValueError(f"not an ASS timestamp: {value!r}")
    return ms


def _text(value: str) -> str:
    return value


_u8 = _uint(8)
_u16 = _uint(16)

# field -> (attribute, parser)
STYLE_PARSERS: Dict[StyleField, Tuple[str, Callable[[str], Any]]] = {
    StyleField.NAME: ('name', _text),
    StyleField.FONTNAME: ('font_name', _text),
    StyleField.FONTSIZE: ('font_size', _float),
    StyleField.PRIMARY_COLOUR: ('primary_colour', _colour),
    StyleField.SECONDARY_COLOUR: ('secondary_colour', _colour),
    StyleField.OUTLINE_COLOUR: ('outline_colour', _colour),
    StyleField.BACK_COLOUR: ('back_colour', _colour),
    StyleField.BOLD: ('bold', _flag),
    StyleField.ITALIC: ('italic', _flag),
    StyleField.UNDERLINE: ('underline', _flag),
    StyleField.STRIKE_OUT: ('strike_out', _flag),
    StyleField.SCALE_X: ('scale_x', _float),
    StyleField.SCALE_Y: ('scale_y', _float),
    StyleField.SPACING: ('spacing', _float),
    StyleField.ANGLE: ('angle', _float),
    StyleField.BORDER_STYLE: ('border_style', _u8),
    StyleField.OUTLINE: ('outline', _float),
    StyleField.SHADOW: ('shadow', _float),
    StyleField.ALIGNMENT: ('alignment', _u8),
    StyleField.MARGIN_L: ('margin_l', _u16),
    StyleField.MARGIN_R: ('margin_r', _u16),
    StyleField.MARGIN_V: ('margin_v', _u16),
    StyleField.ENCODING: ('encoding', _u8),
}

EVENT_PARSERS: Dict[EventField, Tuple[str, Callable[[str], Any]]] = {
    EventField.LAYER: ('layer', _u8),
    EventField.START: ('start_ms', _time),
    EventField.END: ('end_ms', _time),
    EventField.STYLE: ('style', _text),
    EventField.NAME: ('name', _text),
    EventField.MARGIN_L: ('margin_l', _u16),
    EventField.MARGIN_R: ('margin_r', _u16),
    EventField.MARGIN_V: ('margin_v', _u16),
    EventField.EFFECT: ('effect', _text),
    EventField.TEXT: ('text', _text),
}


# =============================================================================
# Row mapping
# =============================================================================


def split_style_row(data: str) -> List[str]:
    return data.split(',')


def split_event_row(data: str, field_count: int) -> List[str]:
    return data.split(',', max(field_count - 1, 0))


def apply_style_row(target: Any, format_fields: List[str], data: str) -> None:
    """
    Assign the values of a Style row onto `target`.

    Raises ValueError if any known field fails to parse; the caller turns
    that into a single row-level error.
    """
    for name, value in zip(format_fields, split_style_row(data)):
        field = StyleField.lookup(name)
        if field is None:
            continue
        attr, parse = STYLE_PARSERS[field]
        setattr(target, attr, parse(value))


def apply_event_row(target: Any, format_fields: List[str], data: str) -> None:
    """Assign the values of an event row onto `target`. Raises ValueError."""
    for name, value in zip(format_fields, split_event_row(data, len(format_fields))):
        field = EventField.lookup(name)
        if field is None:
            continue
        attr, parse = EVENT_PARSERS[field]
        setattr(target, attr, parse(value))


# =============================================================================
# Rendering (canonical order)
# =============================================================================


def format_number(value: float) -> str:
    """Format number, removing unnecessary decimals."""
    if value == value and value not in (float('inf'), float('-inf')) and value == int(value):
        return str(int(value))
    return str(value)


def _render(value: Any) -> str:
    if isinstance(value, bool):
        return '-1' if value else '0'
    if isinstance(value, float):
        return format_number(value)
    return str(value)


def style_values(style: Any) -> List[str]:
    """Values of a style in STYLE_FORMAT order."""
    return [_render(getattr(style, attr)) for attr, _ in STYLE_PARSERS.values()]


def event_values(event: Any) -> List[str]:
    """Values of an event in EVENT_FORMAT order."""
    values = []
    for field, (attr, _) in EVENT_PARSERS.items():
        value = getattr(event, attr)
        if field in (EventField.START, EventField.END):
            values.append(format_ass_time(value))
        else:
            values.append(_render(value))
    return values
