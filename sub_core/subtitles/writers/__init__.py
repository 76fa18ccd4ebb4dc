# sub_core/subtitles/writers/__init__.py
# -*- coding: utf-8 -*-
"""Subtitle format writers."""

from .ass_writer import dump_ass, iter_ass_lines, write_ass, write_ass_file

__all__ = ['dump_ass', 'iter_ass_lines', 'write_ass', 'write_ass_file']
