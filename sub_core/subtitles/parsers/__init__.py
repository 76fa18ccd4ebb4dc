# sub_core/subtitles/parsers/__init__.py
# -*- coding: utf-8 -*-
"""Subtitle format parsers."""

from .ass_parser import parse_ass_file, parse_ass_reader, parse_ass_string

__all__ = ['parse_ass_file', 'parse_ass_reader', 'parse_ass_string']
