# tests/test_interop.py
import pysubs2

from sub_core.subtitles import AssDocument
from sub_core.subtitles.interop import to_ssafile


def test_to_ssafile(full_ass):
    subs = to_ssafile(AssDocument.from_string(full_ass))

    assert isinstance(subs, pysubs2.SSAFile)
    assert subs.info["Title"] == "Full Test"
    assert "Signs" in subs.styles
    assert subs.styles["Signs"].fontname == "Times New Roman"

    assert len(subs.events) == 4
    first = subs.events[0]
    assert (first.start, first.end) == (1230, 4560)
    assert first.text == "Hello, world!"
    assert subs.events[2].is_comment
    assert subs.events[3].style == "Signs"


def test_to_ssafile_sample(sample_ass):
    subs = to_ssafile(AssDocument.from_string(sample_ass))
    assert "A" in subs.styles
    assert subs.styles["A"].fontname == "Arial"
    assert subs.events[0].start == 1000
    assert subs.events[0].end == 2500
    assert subs.events[0].style == "A"
