#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/mdsnow/passes/__init__.py
"""Text-rewriting passes of the conversion pipeline.

Each pass is a plain function from working text to working text, so passes
can be composed, reused (the blockquote pass reuses the list passes on quote
interiors) and tested in isolation. The fixed order in which
:func:`mdsnow.convert` applies them is part of their contract.
"""

from mdsnow.passes.blockquotes import convert_blockquotes, format_blockquote
from mdsnow.passes.inline import (
    convert_bold,
    convert_bold_italic,
    convert_highlight,
    convert_italic,
    convert_strikethrough,
    convert_text_formatting,
)
from mdsnow.passes.linebreaks import convert_newlines_outside_pre, pretty_print_html
from mdsnow.passes.lists import convert_list, convert_ordered_lists, convert_unordered_lists
from mdsnow.passes.structural import (
    convert_code_blocks,
    convert_headers,
    convert_horizontal_rules,
    convert_images,
    convert_inline_code,
    convert_links,
)
from mdsnow.passes.tables import convert_tables, parse_table

__all__ = [
    "convert_blockquotes",
    "format_blockquote",
    "convert_bold",
    "convert_bold_italic",
    "convert_highlight",
    "convert_italic",
    "convert_strikethrough",
    "convert_text_formatting",
    "convert_newlines_outside_pre",
    "pretty_print_html",
    "convert_list",
    "convert_ordered_lists",
    "convert_unordered_lists",
    "convert_code_blocks",
    "convert_headers",
    "convert_horizontal_rules",
    "convert_images",
    "convert_inline_code",
    "convert_links",
    "convert_tables",
    "parse_table",
]
