"""Table settings stored as JSON.

A settings file looks like::

    {
      "style": "rounded",
      "padding": {"left": 1, "right": 1, "top": 0, "bottom": 0},
      "alignment": "center",
      "width": 80,
      "widthStrategy": "wrap",
      "keepWords": true
    }

Unknown keys are ignored. The ``PI_GRID_STYLE`` environment variable
overrides the style of loaded settings.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, Literal

from pi.grid.errors import GridError, SettingsError
from pi.grid.height import HeightIncrease, HeightLimit
from pi.grid.options import Alignment, Padding, TabWidth
from pi.grid.peaker import PEAKERS
from pi.grid.styles import PRESETS, Style
from pi.grid.width import MinWidth, Truncate, Wrap

if TYPE_CHECKING:
    from pi.grid.table import Table

logger = logging.getLogger(__name__)

STYLE_ENV_VAR = "PI_GRID_STYLE"

_KNOWN_KEYS = {
    "style",
    "padding",
    "alignment",
    "verticalAlignment",
    "tabWidth",
    "width",
    "widthStrategy",
    "height",
    "heightStrategy",
    "truncateSuffix",
    "keepWords",
    "priority",
}


@dataclass
class PaddingSettings:
    left: int = 1
    right: int = 1
    top: int = 0
    bottom: int = 0


@dataclass
class TableSettings:
    style: str = "ascii"
    padding: PaddingSettings = field(default_factory=PaddingSettings)
    alignment: Literal["left", "center", "right"] = "left"
    vertical_alignment: Literal["top", "center", "bottom"] = "top"
    tab_width: int = 4
    width: int | None = None
    width_strategy: Literal["truncate", "wrap", "increase"] = "truncate"
    height: int | None = None
    height_strategy: Literal["limit", "increase"] = "limit"
    truncate_suffix: str = ""
    keep_words: bool = False
    priority: str = "none"


def _choice(data: dict, key: str, default: str, allowed: set[str] | dict) -> str:
    value = data.get(key, default)
    if value not in allowed:
        raise SettingsError(f"invalid {key} {value!r}; expected one of {', '.join(sorted(allowed))}")
    return value


def _int(data: dict, key: str, default: int | None) -> int | None:
    value = data.get(key, default)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise SettingsError(f"{key} must be a non-negative integer, got {value!r}")
    return value


def settings_from_dict(data: dict) -> TableSettings:
    """Deserialize TableSettings from a JSON-compatible dict."""
    if not isinstance(data, dict):
        raise SettingsError(f"settings must be an object, got {type(data).__name__}")

    for key in data:
        if key not in _KNOWN_KEYS:
            logger.debug("Ignoring unknown table setting %r", key)

    pad = data.get("padding", {})
    if not isinstance(pad, dict):
        raise SettingsError(f"padding must be an object, got {pad!r}")
    defaults = PaddingSettings()
    padding = PaddingSettings(
        left=_int(pad, "left", defaults.left),
        right=_int(pad, "right", defaults.right),
        top=_int(pad, "top", defaults.top),
        bottom=_int(pad, "bottom", defaults.bottom),
    )

    return TableSettings(
        style=_choice(data, "style", "ascii", PRESETS),
        padding=padding,
        alignment=_choice(data, "alignment", "left", {"left", "center", "right"}),
        vertical_alignment=_choice(data, "verticalAlignment", "top", {"top", "center", "bottom"}),
        tab_width=_int(data, "tabWidth", 4),
        width=_int(data, "width", None),
        width_strategy=_choice(data, "widthStrategy", "truncate", {"truncate", "wrap", "increase"}),
        height=_int(data, "height", None),
        height_strategy=_choice(data, "heightStrategy", "limit", {"limit", "increase"}),
        truncate_suffix=str(data.get("truncateSuffix", "")),
        keep_words=bool(data.get("keepWords", False)),
        priority=_choice(data, "priority", "none", PEAKERS),
    )


def settings_to_dict(settings: TableSettings) -> dict:
    """Serialize TableSettings to a JSON-compatible dict."""
    return {
        "style": settings.style,
        "padding": {
            "left": settings.padding.left,
            "right": settings.padding.right,
            "top": settings.padding.top,
            "bottom": settings.padding.bottom,
        },
        "alignment": settings.alignment,
        "verticalAlignment": settings.vertical_alignment,
        "tabWidth": settings.tab_width,
        "width": settings.width,
        "widthStrategy": settings.width_strategy,
        "height": settings.height,
        "heightStrategy": settings.height_strategy,
        "truncateSuffix": settings.truncate_suffix,
        "keepWords": settings.keep_words,
        "priority": settings.priority,
    }


def load_settings(path: str | Path) -> TableSettings:
    """Load settings from a JSON file; a missing file gives the defaults."""
    path = Path(path)
    if path.exists():
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise SettingsError(f"invalid settings file {path}: {e}") from e
        settings = settings_from_dict(data)
    else:
        logger.debug("No settings file at %s, using defaults", path)
        settings = TableSettings()

    style = os.environ.get(STYLE_ENV_VAR)
    if style:
        if style not in PRESETS:
            raise SettingsError(f"invalid {STYLE_ENV_VAR} {style!r}")
        settings.style = style
    return settings


def save_settings(path: str | Path, settings: TableSettings) -> None:
    Path(path).write_text(
        json.dumps(settings_to_dict(settings), indent=2, ensure_ascii=False) + "\n",
        encoding="utf-8",
    )


def apply_settings(table: Table, settings: TableSettings) -> Table:
    """Configure *table* from *settings*; width and height go last."""
    pad = settings.padding
    try:
        table.with_(
            Style.get(settings.style),
            Padding(left=pad.left, right=pad.right, top=pad.top, bottom=pad.bottom),
            Alignment(settings.alignment, settings.vertical_alignment),
            TabWidth(settings.tab_width),
        )
    except GridError as e:
        raise SettingsError(str(e)) from e

    if settings.width is not None:
        if settings.width_strategy == "wrap":
            table.with_(Wrap(settings.width, keep_words=settings.keep_words, priority=settings.priority))
        elif settings.width_strategy == "increase":
            table.with_(MinWidth(settings.width, priority=settings.priority))
        else:
            table.with_(Truncate(settings.width, suffix=settings.truncate_suffix, priority=settings.priority))

    if settings.height is not None:
        if settings.height_strategy == "increase":
            table.with_(HeightIncrease(settings.height, priority=settings.priority))
        else:
            table.with_(HeightLimit(settings.height, priority=settings.priority))

    return table
