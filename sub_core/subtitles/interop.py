# sub_core/subtitles/interop.py
# -*- coding: utf-8 -*-
"""Hand documents over to pysubs2-based tooling."""
from __future__ import annotations

from typing import TYPE_CHECKING

import pysubs2

if TYPE_CHECKING:
    from .data import AssDocument


def to_ssafile(data: 'AssDocument') -> pysubs2.SSAFile:
    """
    Load the canonical text of a document into a pysubs2.SSAFile.

    pysubs2 keeps its own model; edits made there do not flow back.
    """
    return pysubs2.SSAFile.from_string(data.dumps(), format_='ass')
