#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the mdsnow library.

This module centralizes the hardcoded markup, CSS blocks, and default
configuration values used across the conversion pipeline.

Constants are organized by category:
1. Output Markup - Container tag and style classes
2. CSS Blocks - Stylesheets prepended by the output wrapper
3. Alert Defaults - Fallback display values for incomplete alert definitions
4. Protection - Placeholder sentinel for protected spans
5. Configuration - Config file discovery names
"""

from __future__ import annotations

# =============================================================================
# Output Markup
# =============================================================================

CONTAINER_OPEN_TAG = "[code]"
CONTAINER_CLOSE_TAG = "[/code]"

TABLE_CLASS = "tg"
TABLE_CELL_CLASS = "tg-0pky"
HIGHLIGHT_CLASS = "highlight"

# Classes emitted by the converter itself; alert names may not reuse them
RESERVED_CLASS_NAMES = frozenset({TABLE_CLASS, TABLE_CELL_CLASS, HIGHLIGHT_CLASS})

# Line break marker emitted outside code regions
LINE_BREAK = "<br/>"

# Line break marker used to join quote and alert content lines
QUOTE_LINE_BREAK = "<br>"

# =============================================================================
# CSS Blocks
# =============================================================================

STYLE_OPEN = '<style type="text/css">\n'
STYLE_CLOSE = "</style>\n"

CODE_CSS = (
    STYLE_OPEN
    + "code { color: crimson; background-color: #f1f1f1; padding-left: 4px; padding-right: 4px; font-size: 110%; }\n"
    + STYLE_CLOSE
)

HIGHLIGHT_CSS = STYLE_OPEN + f".{HIGHLIGHT_CLASS} {{ background-color: #fff3b0; padding: 2px 4px; }}\n" + STYLE_CLOSE

TABLE_CSS = (
    STYLE_OPEN
    + ".tg  {border-collapse:collapse;border-spacing:0;}\n"
    + ".tg td{border-color:black;border-style:solid;border-width:1px;font-family:Arial, sans-serif;font-size:14px;\n"
    + "  overflow:hidden;padding:10px 5px;word-break:normal;}\n"
    + ".tg th{border-color:black;border-style:solid;border-width:1px;font-family:Arial, sans-serif;font-size:14px;\n"
    + "  font-weight:normal;overflow:hidden;padding:10px 5px;word-break:normal;}\n"
    + ".tg .tg-0pky{border-color:inherit;text-align:left;vertical-align:top}\n"
    + STYLE_CLOSE
)

# Per-alert rule; the three colors come from the merged alert definition
ALERT_CSS_RULE_TEMPLATE = (
    ".{name} {{ color: {text_color}; background-color: {background_color}; padding: 8px 12px; "
    "border-left: 4px solid {border_color}; display: block; margin: 8px 0; }}\n"
)

# =============================================================================
# Alert Defaults
# =============================================================================

DEFAULT_ALERT_EMOJI = "ℹ️"
DEFAULT_ALERT_TEXT_COLOR = "#24292f"
DEFAULT_ALERT_BACKGROUND_COLOR = "#f6f8fa"
DEFAULT_ALERT_BORDER_COLOR = "#d0d7de"

# Stored-settings (camelCase) and field-name keys mapped to AlertDefinition fields
ALERT_FIELD_ALIASES: dict[str, str] = {
    "name": "name",
    "displayName": "display_name",
    "display_name": "display_name",
    "emoji": "emoji",
    "textColor": "text_color",
    "text_color": "text_color",
    "backgroundColor": "background_color",
    "background_color": "background_color",
    "borderColor": "border_color",
    "border_color": "border_color",
}

# =============================================================================
# Protection
# =============================================================================

# Control character framing placeholder indices; stripped from input first
PLACEHOLDER_SENTINEL = "\x00"

# =============================================================================
# Configuration
# =============================================================================

CONFIG_FILENAMES = [".mdsnow.toml", ".mdsnow.yaml", ".mdsnow.yml", ".mdsnow.json"]
PYPROJECT_TOOL_SECTION = "mdsnow"

DEFAULT_SKIP_PRETTY_PRINT = False
DEFAULT_SKIP_CODE_TAGS = False
