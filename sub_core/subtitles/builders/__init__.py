# sub_core/subtitles/builders/__init__.py
"""Builders that create new documents from plain subtitle data."""

from .ass import ASSBuilder, Dialogue, build_from_dialogue

__all__ = ['ASSBuilder', 'Dialogue', 'build_from_dialogue']
