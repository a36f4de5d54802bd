#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdsnow/passes/lists.py
"""Line-oriented list grouping.

A small two-state machine (outside a list, inside a list) walks the physical
lines of the text. Consecutive lines carrying the marker become the items of
one list; the first line without it closes the list and is emitted as is.

The unordered and ordered variants are independent passes, so a run of
ordered items directly following unordered ones produces two adjacent lists.
Both are reentrant and are also applied to blockquote interiors.
"""

from __future__ import annotations

import re

from mdsnow.patterns import ORDERED_LIST_MARKER_RE, UNORDERED_LIST_MARKER_RE


def convert_list(text: str, pattern: re.Pattern[str], wrapper_tag: str) -> str:
    """Group lines matching ``pattern`` into ``<wrapper_tag>`` lists.

    Parameters
    ----------
    text : str
        Working text
    pattern : re.Pattern[str]
        Marker pattern anchored at the start of a line; the matched marker is
        stripped from the item text
    wrapper_tag : str
        List element name, ``ul`` or ``ol``

    Returns
    -------
    str
        Text with each run of marker lines replaced by a single list element

    """
    output: list[str] = []
    items: list[str] = []
    in_list = False

    def _close() -> None:
        output.append(f"<{wrapper_tag}>{''.join(items)}</{wrapper_tag}>")
        items.clear()

    for line in text.split("\n"):
        match = pattern.match(line)
        if match:
            in_list = True
            items.append(f"<li>{line[match.end():]}</li>")
            continue
        if in_list:
            _close()
            in_list = False
        output.append(line)

    if in_list:
        _close()

    return "\n".join(output)


def convert_unordered_lists(text: str) -> str:
    """Group ``-`` and ``*`` marker lines into ``<ul>`` lists."""
    return convert_list(text, UNORDERED_LIST_MARKER_RE, "ul")


def convert_ordered_lists(text: str) -> str:
    """Group ``1.`` style marker lines into ``<ol>`` lists; numbering is ignored."""
    return convert_list(text, ORDERED_LIST_MARKER_RE, "ol")
