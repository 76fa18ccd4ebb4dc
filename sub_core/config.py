# sub_core/config.py
# -*- coding: utf-8 -*-
"""
Settings for building new documents.

Parsing and writing take no configuration; these values only feed the
"build from plain dialogue" constructor. Settings are stored as JSON and
merged over the defaults, so older files keep working when keys are added.
"""
from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict

logger = logging.getLogger(__name__)


@dataclass
class BuildSettings:
    """Script metadata and font choices for generated documents."""

    script_type: str = 'v4.00+'
    wrap_style: int = 0
    scaled_border_and_shadow: str = 'yes'
    ycbcr_matrix: str = 'TV.709'
    play_res_x: int = 1920
    play_res_y: int = 1080
    japanese_font: str = 'Yu Gothic UI'

    def script_info_items(self) -> list[tuple[str, Any]]:
        """Key/value pairs for the [Script Info] block, in output order."""
        return [
            ('ScriptType', self.script_type),
            ('WrapStyle', self.wrap_style),
            ('ScaledBorderAndShadow', self.scaled_border_and_shadow),
            ('YCbCr Matrix', self.ycbcr_matrix),
            ('PlayResX', self.play_res_x),
            ('PlayResY', self.play_res_y),
        ]


DEFAULTS: Dict[str, Any] = asdict(BuildSettings())


def _merge_defaults(user: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(DEFAULTS)
    if user:
        merged.update({k: v for k, v in user.items() if k in DEFAULTS})
    return merged


def load_settings(path: Path | str) -> BuildSettings:
    """
    Load settings from a JSON file.

    Unknown keys are ignored. A missing or unreadable file yields the
    defaults.
    """
    p = Path(path)
    data: Dict[str, Any] = {}
    if p.exists():
        try:
            data = json.loads(p.read_text(encoding='utf-8'))
        except (OSError, ValueError) as e:
            logger.warning(f"[Settings] Could not read {p}, using defaults: {e}")
            data = {}
        if not isinstance(data, dict):
            logger.warning(f"[Settings] {p} does not hold a JSON object, using defaults")
            data = {}
    return BuildSettings(**_merge_defaults(data))


def save_settings(settings: BuildSettings, path: Path | str) -> None:
    """Write settings as JSON, replacing the target atomically."""
    p = Path(path)
    payload = {f.name: getattr(settings, f.name) for f in fields(settings)}
    tmp = p.with_suffix('.json.tmp')
    tmp.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding='utf-8')
    os.replace(tmp, p)
