#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdsnow/passes/linebreaks.py
"""Line break normalization and pretty printing.

The target field does not honour raw newlines, so every newline left outside
a code block becomes an explicit ``<br/>``. Pretty printing then puts
newlines back after block-level tags so the markup stays readable in the
text field it is pasted into.
"""

from __future__ import annotations

import re

from mdsnow.constants import LINE_BREAK
from mdsnow.utils.regions import map_outside_regions

# Headings already end the line; a break right after one would add a gap
_BREAK_AFTER_HEADING_RE = re.compile(rf"(</h[1-6]>){re.escape(LINE_BREAK)}")

_BLOCK_CLOSE_RE = re.compile(r"</h[1-6]>|</ul>|</ol>|</blockquote>|</pre>")
_BREAK_RE = re.compile(r"<br/?>")
_RULE_RE = re.compile(r"<hr/?>")
_LIST_ITEM_RE = re.compile(r"</?li>")


def _break_lines(part: str) -> str:
    part = part.replace("\n", LINE_BREAK)
    return _BREAK_AFTER_HEADING_RE.sub(r"\1", part)


def convert_newlines_outside_pre(text: str) -> str:
    """Replace newlines outside ``<pre><code>`` blocks with ``<br/>``.

    Parameters
    ----------
    text : str
        Fully converted markup

    Returns
    -------
    str
        Markup on one logical line, with code blocks untouched

    """
    return map_outside_regions(text, _break_lines)


def pretty_print_html(text: str) -> str:
    """Insert newlines after block closers, line breaks, rules and list item tags."""
    text = _BLOCK_CLOSE_RE.sub(r"\g<0>\n", text)
    text = _BREAK_RE.sub(r"\g<0>\n", text)
    text = _RULE_RE.sub(r"\g<0>\n", text)
    text = _LIST_ITEM_RE.sub(r"\g<0>\n", text)
    return text
