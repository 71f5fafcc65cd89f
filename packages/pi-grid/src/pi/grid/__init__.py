"""pi-grid: text table layout with spans, borders and width/height fitting."""

# Configuration and types
from pi.grid.borders import Border, Borders, BordersConfig, HorizontalLine, VerticalLine
from pi.grid.colors import Color, ColorMap, Colors
from pi.grid.config import EntityMap, GridConfig

# Layout engine
from pi.grid.dimension import (
    CompleteDimension,
    Dimension,
    ExactDimension,
    estimate,
    estimate_heights,
    estimate_widths,
    range_height,
    range_width,
    total_height,
    total_width,
)

# Errors
from pi.grid.errors import GridError, InvalidPositionError, SettingsError, SpanOverlapError
from pi.grid.fitter import FitResult, grow, shrink
from pi.grid.grid import Grid

# Width and height settings
from pi.grid.height import HeightIncrease, HeightLimit, HeightList
from pi.grid.highlight import Highlight
from pi.grid.measurement import Max, Measurement, Min, Percent
from pi.grid.merge import Merge

# Table options
from pi.grid.options import (
    Alignment,
    BorderChar,
    BorderColors,
    BorderOverride,
    BordersMissing,
    Colorize,
    Format,
    FormatFlags,
    Justification,
    Margin,
    Padding,
    Span,
    TabWidth,
)
from pi.grid.panel import Panel
from pi.grid.peaker import (
    Peaker,
    PriorityLeft,
    PriorityMax,
    PriorityMin,
    PriorityNone,
    PriorityRight,
    get_peaker,
)
from pi.grid.records import EmptyRecords, IterRecords, Records, VecRecords

# Settings
from pi.grid.settings import (
    TableSettings,
    apply_settings,
    load_settings,
    save_settings,
    settings_from_dict,
    settings_to_dict,
)
from pi.grid.spans import SpanMap
from pi.grid.styles import Style

# Table facade
from pi.grid.table import Table
from pi.grid.types import (
    Cell,
    Column,
    Entity,
    Formatting,
    Global,
    Indent,
    Offset,
    Position,
    Row,
    Sides,
)

# Text utilities
from pi.grid.utils import strip_ansi, string_width, text_width, truncate_text, wrap_text
from pi.grid.width import MinWidth, Truncate, WidthList, Wrap

__all__ = [
    # Configuration and types
    "Border",
    "Borders",
    "BordersConfig",
    "Cell",
    "Color",
    "ColorMap",
    "Colors",
    "Column",
    "Entity",
    "EntityMap",
    "Formatting",
    "Global",
    "GridConfig",
    "HorizontalLine",
    "Indent",
    "Offset",
    "Position",
    "Row",
    "Sides",
    "SpanMap",
    "VerticalLine",
    # Records
    "EmptyRecords",
    "IterRecords",
    "Records",
    "VecRecords",
    # Layout engine
    "CompleteDimension",
    "Dimension",
    "ExactDimension",
    "FitResult",
    "Grid",
    "Peaker",
    "PriorityLeft",
    "PriorityMax",
    "PriorityMin",
    "PriorityNone",
    "PriorityRight",
    "estimate",
    "estimate_heights",
    "estimate_widths",
    "get_peaker",
    "grow",
    "range_height",
    "range_width",
    "shrink",
    "total_height",
    "total_width",
    # Errors
    "GridError",
    "InvalidPositionError",
    "SettingsError",
    "SpanOverlapError",
    # Table and options
    "Alignment",
    "BorderChar",
    "BorderColors",
    "BorderOverride",
    "BordersMissing",
    "Colorize",
    "Format",
    "FormatFlags",
    "HeightIncrease",
    "HeightLimit",
    "HeightList",
    "Highlight",
    "Justification",
    "Margin",
    "Max",
    "Measurement",
    "Merge",
    "Min",
    "MinWidth",
    "Padding",
    "Panel",
    "Percent",
    "Span",
    "Style",
    "TabWidth",
    "Table",
    "Truncate",
    "WidthList",
    "Wrap",
    # Settings
    "TableSettings",
    "apply_settings",
    "load_settings",
    "save_settings",
    "settings_from_dict",
    "settings_to_dict",
    # Text utilities
    "strip_ansi",
    "string_width",
    "text_width",
    "truncate_text",
    "wrap_text",
]
