#  Copyright (c) 2025 Tom Villani, Ph.D.
"""mdsnow - Markdown to ticketing-platform rich-text conversion.

mdsnow converts a constrained Markdown dialect into the HTML-like markup
accepted by ServiceNow-style journal and description fields, wrapped in a
``[code]...[/code]`` container with only the inline CSS the result needs.

The conversion is an ordered sequence of text-rewriting passes. Code, image
and link spans are protected from the inline formatter by placeholders, and
lists, blockquotes and tables are grouped by small line-oriented state
machines that pass malformed input through instead of raising.

Key Features
------------
- Headers, bold/italic/strikethrough/highlight, inline and fenced code
- Links, images, horizontal rules, ordered and unordered lists
- Blockquotes and typed alert callouts (``> [!NOTE]``) with a built-in
  catalog of ten types that callers can override or extend
- Pipe tables with header and body sections
- Stateless: every call is a pure function of its text and options

Examples
--------
Basic usage:

    >>> from mdsnow import convert
    >>> convert("# Title\\n**done**", skip_code_tags=True, skip_pretty_print=True)
    '<h1>Title</h1><strong>done</strong>'

Custom alert types:

    >>> from mdsnow import ConversionOptions, convert
    >>> options = ConversionOptions(custom_alerts={"deploy": {"emoji": "🚀"}})
    >>> markup = convert("> [!DEPLOY]\\n> Rolled out", options)

"""

from mdsnow.alerts import (
    BUILTIN_ALERTS,
    AlertDefinition,
    alert_css_rule,
    build_alert_pattern,
    get_builtin_alerts,
    merge_alerts,
)
from mdsnow.api import convert
from mdsnow.exceptions import (
    ConfigError,
    InvalidOptionsError,
    MdSnowError,
    ProtectionError,
    ValidationError,
)
from mdsnow.options import ConversionOptions
from mdsnow.output import collect_css, wrap_with_code_tags
from mdsnow.passes import (
    convert_blockquotes,
    convert_code_blocks,
    convert_headers,
    convert_horizontal_rules,
    convert_images,
    convert_inline_code,
    convert_links,
    convert_newlines_outside_pre,
    convert_ordered_lists,
    convert_tables,
    convert_text_formatting,
    convert_unordered_lists,
    pretty_print_html,
)
from mdsnow.protection import protect_content, restore_content

__version__ = "1.1.0"

__all__ = [
    "__version__",
    "convert",
    "ConversionOptions",
    "AlertDefinition",
    "BUILTIN_ALERTS",
    "alert_css_rule",
    "build_alert_pattern",
    "get_builtin_alerts",
    "merge_alerts",
    "protect_content",
    "restore_content",
    "collect_css",
    "wrap_with_code_tags",
    "convert_blockquotes",
    "convert_code_blocks",
    "convert_headers",
    "convert_horizontal_rules",
    "convert_images",
    "convert_inline_code",
    "convert_links",
    "convert_newlines_outside_pre",
    "convert_ordered_lists",
    "convert_tables",
    "convert_text_formatting",
    "convert_unordered_lists",
    "pretty_print_html",
    "MdSnowError",
    "ValidationError",
    "InvalidOptionsError",
    "ConfigError",
    "ProtectionError",
]
