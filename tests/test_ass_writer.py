# tests/test_ass_writer.py
import io
from pathlib import Path

from sub_core.subtitles import (
    AssDocument,
    Event,
    EventKind,
    EventsSection,
    GenericSection,
    Line,
    ScriptInfo,
    Style,
    StylesSection,
)
from sub_core.subtitles.writers.ass_writer import (
    EVENTS_FORMAT_LINE,
    STYLES_FORMAT_LINE,
    dump_ass,
    iter_ass_lines,
)

EXPECTED_SAMPLE = (
    "[Script Info]\n"
    "Title: Test\n"
    "\n"
    "[V4+ Styles]\n"
    f"{STYLES_FORMAT_LINE}\n"
    "Style: A,Arial,20,&H00FFFFFF,&H000000FF,&H00000000,&H00000000,0,0,0,0,100,100,0,0,1,2,2,2,10,10,10,1\n"
    "\n"
    "[Events]\n"
    "Format: Layer, Start, End, Style, Name, MarginL, MarginR, MarginV, Effect, Text\n"
    "Dialogue: 0,0:00:01.00,0:00:02.50,A,,0,0,0,,Hello\n"
    "\n"
)


def test_canonical_format_lines():
    assert STYLES_FORMAT_LINE.startswith("Format: Name, Fontname, Fontsize, PrimaryColour")
    assert STYLES_FORMAT_LINE.endswith("MarginV, Encoding")
    assert EVENTS_FORMAT_LINE == (
        "Format: Layer, Start, End, Style, Name, MarginL, MarginR, MarginV, Effect, Text"
    )


def test_sample_output(sample_ass):
    doc = AssDocument.from_string(sample_ass)
    assert doc.dumps() == EXPECTED_SAMPLE


def test_output_is_fixed_point(full_ass):
    once = AssDocument.from_string(full_ass).dumps()
    twice = AssDocument.from_string(once).dumps()
    assert once == twice


def test_round_trip_keeps_values(full_ass):
    first = AssDocument.from_string(full_ass)
    reparsed = AssDocument.from_string(first.dumps())

    assert list(reparsed.styles()) == list(first.styles())
    assert list(reparsed.events()) == list(first.events())
    assert reparsed.sections[1].as_generic() == first.sections[1].as_generic()
    assert reparsed.script_info.lines == first.script_info.lines


def test_verbatim_sections(full_ass):
    text = AssDocument.from_string(full_ass).dumps()
    assert text.startswith("[Script Info]\n; Script generated by Aegisub\nTitle: Full Test\n")
    assert "[Aegisub Project Garbage]\nAudio File: test.wav\nVideo File: test.mkv\n\n[V4+ Styles]\n" in text


def test_custom_format_is_rewritten_canonically():
    text = (
        "[Script Info]\n"
        "[Events]\n"
        "Format: Text, Start, End\n"
        "Dialogue: hi,0:00:00.50,0:00:01.00\n"
    )
    doc = AssDocument.from_string(text)
    assert list(doc.events())[0].text == "hi"
    lines = doc.dumps().splitlines()
    assert lines[2] == EVENTS_FORMAT_LINE
    assert lines[3] == "Dialogue: 0,0:00:00.50,0:00:01.00,Default,,0,0,0,,hi"


def test_section_order_and_kinds_preserved():
    doc = AssDocument(sections=[
        ScriptInfo(lines=[Line.variable("Title", "x")]),
        EventsSection(format=[], events=[Event(kind=EventKind.COMMENT, text="c")]),
        GenericSection(title="Fonts", lines=[Line.encoded("M4@0")]),
        StylesSection(format=[], styles=[]),
    ])
    assert list(iter_ass_lines(doc)) == [
        "[Script Info]",
        "Title: x",
        "[Events]",
        EVENTS_FORMAT_LINE,
        "Comment: 0,0:00:00.00,0:00:00.00,Default,,0,0,0,,c",
        "",
        "[Fonts]",
        "M4@0",
        "[V4+ Styles]",
        STYLES_FORMAT_LINE,
        "",
    ]


def test_bold_written_as_minus_one():
    doc = AssDocument(sections=[ScriptInfo(), StylesSection(styles=[Style(bold=True, font_size=22.5)])])
    row = dump_ass(doc).splitlines()[3]
    assert row.startswith("Style: Default,Arial,22.5,")
    assert ",-1,0,0,0," in row


def test_write_to_binary_and_text(sample_ass):
    doc = AssDocument.from_string(sample_ass)

    raw = io.BytesIO()
    doc.write_to(raw)
    assert raw.getvalue() == EXPECTED_SAMPLE.encode("utf-8")

    text = io.StringIO()
    doc.write_to(text)
    assert text.getvalue() == EXPECTED_SAMPLE


def test_save(tmp_path: Path, full_ass):
    doc = AssDocument.from_string(full_ass)
    out = tmp_path / "out.ass"
    doc.save(out)

    data = out.read_bytes()
    assert not data.startswith(b"\xef\xbb\xbf")
    assert b"\r\n" not in data
    assert data.decode("utf-8") == doc.dumps()
    assert AssDocument.from_file(out).dumps() == doc.dumps()


def test_unicode_text_survives(tmp_path: Path):
    text = (
        "[Script Info]\n"
        "Title: テスト\n"
        "[Events]\n"
        "Format: Layer, Start, End, Style, Name, MarginL, MarginR, MarginV, Effect, Text\n"
        "Dialogue: 0,0:00:01.00,0:00:02.00,Default,,0,0,0,,こんにちは\n"
    )
    out = tmp_path / "jp.ass"
    AssDocument.from_string(text).save(out)
    doc = AssDocument.from_file(out)
    assert doc.script_info.title() == "テスト"
    assert list(doc.events())[0].text == "こんにちは"


# =============================================================================
# Editing helpers
# =============================================================================


def test_remove_comments(full_ass):
    doc = AssDocument.from_string(full_ass)
    doc.remove_comments()

    assert all(e.kind is EventKind.DIALOGUE for e in doc.events())
    assert len(doc.events()) == 3
    assert not any(line.is_comment() for line in doc.script_info.lines)
    assert "Script generated" not in doc.dumps()


def test_events_view_is_live_and_restartable(full_ass):
    doc = AssDocument.from_string(full_ass)
    view = doc.events()
    assert [e.layer for e in view] == [0, 0, 0, 1]
    assert [e.layer for e in view] == [0, 0, 0, 1]

    doc.sections.append(EventsSection(events=[Event(text="late")]))
    assert len(view) == 5
    assert list(view)[-1].text == "late"

    for event in view:
        event.style = "Other"
    assert {e.style for e in doc.events()} == {"Other"}


def test_shift_by(sample_ass):
    doc = AssDocument.from_string(sample_ass)
    doc.shift_by(1.5)
    event = list(doc.events())[0]
    assert (event.start_ms, event.end_ms) == (2500.0, 4000.0)

    doc.shift_by(-3)
    assert (event.start_ms, event.end_ms) == (0.0, 1000.0)
    assert "Dialogue: 0,0:00:00.00,0:00:01.00,A" in doc.dumps()


def test_script_info_set_and_get(sample_ass):
    doc = AssDocument.from_string(sample_ass)
    info = doc.script_info
    info.set("Title", "Renamed")
    info.set("PlayResX", 640)
    assert info.get("Title") == "Renamed"
    assert info.lines == [
        Line.variable("Title", "Renamed"),
        Line.variable("PlayResX", 640),
        Line.empty(),
    ]
    assert info.version() == ""
    assert ScriptInfo().title() == "<untitled>"
