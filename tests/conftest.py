# tests/conftest.py
from pathlib import Path
import pytest

SAMPLE_ASS = (
    "[Script Info]\n"
    "Title: Test\n"
    "\n"
    "[V4+ Styles]\n"
    "Format: Name, Fontname\n"
    "Style: A,Arial\n"
    "\n"
    "[Events]\n"
    "Format: Layer, Start, End, Style, Name, MarginL, MarginR, MarginV, Effect, Text\n"
    "Dialogue: 0,0:00:01.00,0:00:02.50,A,,0,0,0,,Hello\n"
)

FULL_ASS = """[Script Info]
; Script generated by Aegisub
Title: Full Test
ScriptType: v4.00+
PlayResX: 1920
PlayResY: 1080

[Aegisub Project Garbage]
Audio File: test.wav
Video File: test.mkv

[V4+ Styles]
Format: Name, Fontname, Fontsize, PrimaryColour, SecondaryColour, OutlineColour, BackColour, Bold, Italic, Underline, StrikeOut, ScaleX, ScaleY, Spacing, Angle, BorderStyle, Outline, Shadow, Alignment, MarginL, MarginR, MarginV, Encoding
Style: Default,Arial,48,&H00FFFFFF,&H000000FF,&H00000000,&H00000000,0,0,0,0,100,100,0,0,1,2,2,2,10,10,10,1
Style: Signs,Times New Roman,36,&H00FFFF00,&H000000FF,&H00000000,&H80000000,-1,0,0,0,100,100,0,0,1,3,1,8,20,20,30,1

[Events]
Format: Layer, Start, End, Style, Name, MarginL, MarginR, MarginV, Effect, Text
Dialogue: 0,0:00:01.23,0:00:04.56,Default,,0,0,0,,Hello, world!
Dialogue: 0,0:00:05.00,0:00:08.50,Default,,0,0,0,,This is a test subtitle.
Comment: 0,0:00:10.00,0:00:12.00,Default,,0,0,0,,This is a comment.
Dialogue: 1,0:00:15.00,0:00:18.99,Signs,,0,0,0,,{\\pos(100,200)}Sign text here
"""


@pytest.fixture
def sample_ass() -> str:
    """The minimal three-section document used across tests."""
    return SAMPLE_ASS


@pytest.fixture
def full_ass() -> str:
    """A typical Aegisub-style script with comments and an extra section."""
    return FULL_ASS


@pytest.fixture
def ass_file(tmp_path: Path, full_ass: str) -> Path:
    path = tmp_path / "input.ass"
    path.write_text(full_ass, encoding="utf-8")
    return path
