#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdsnow/passes/blockquotes.py
"""Blockquote and alert block conversion.

Consecutive lines starting with ``>`` form one quote. When the first line of
a quote starts with a ``[!NAME]`` tag for a registered alert type, the quote
renders as a styled paragraph carrying the alert's CSS class, emoji and
label instead of a ``<blockquote>``.

Expected input:
    > [!WARNING]
    > Disk almost full
    > - clean /tmp

Output:
    <p class="warning">⚠️ <strong>WARNING:</strong> Disk almost full<br><ul><li>clean /tmp</li></ul></p>

A tag naming an unregistered type is not stripped: the quote renders as a
plain blockquote whose first line still reads ``[!NAME]``.
"""

from __future__ import annotations

import logging
from typing import Mapping

from mdsnow.alerts import AlertDefinition, build_alert_pattern, merge_alerts
from mdsnow.constants import QUOTE_LINE_BREAK
from mdsnow.passes.lists import convert_ordered_lists, convert_unordered_lists

logger = logging.getLogger(__name__)

QUOTE_MARKER = ">"


def format_blockquote(lines: list[str], alert: AlertDefinition | None = None) -> str:
    """Render accumulated quote lines as a blockquote or alert paragraph.

    Parameters
    ----------
    lines : list[str]
        Content lines with the quote marker already stripped
    alert : AlertDefinition, optional
        Resolved alert type, if the quote opened with an alert tag

    Returns
    -------
    str
        Rendered markup on a single line

    """
    content = "\n".join(lines)
    content = convert_unordered_lists(content)
    content = convert_ordered_lists(content)
    content = content.replace("\n", QUOTE_LINE_BREAK)

    if alert is not None:
        return f'<p class="{alert.name}">{alert.emoji} <strong>{alert.display_name}:</strong> {content}</p>'
    return f"<blockquote>{content}</blockquote>"


def convert_blockquotes(text: str, alerts: Mapping[str, AlertDefinition] | None = None) -> str:
    """Convert ``>`` quote runs to blockquotes or alert paragraphs.

    Parameters
    ----------
    text : str
        Working text
    alerts : Mapping[str, AlertDefinition], optional
        Merged alert definitions; defaults to the built-in catalog

    Returns
    -------
    str
        Text with every quote run replaced by one line of markup

    """
    if alerts is None:
        alerts = merge_alerts()
    alert_pattern = build_alert_pattern(alerts)

    output: list[str] = []
    quote_lines: list[str] = []
    alert: AlertDefinition | None = None
    in_quote = False

    for line in text.split("\n"):
        if not line.startswith(QUOTE_MARKER):
            if in_quote:
                output.append(format_blockquote(quote_lines, alert))
                quote_lines = []
                alert = None
                in_quote = False
            output.append(line)
            continue

        content = line[len(QUOTE_MARKER):].strip()
        if not in_quote:
            in_quote = True
            match = alert_pattern.match(content)
            if match:
                alert = alerts[match.group(1).lower()]
                content = content[match.end():].strip()
                if content:
                    quote_lines.append(content)
                continue
            if content.startswith("[!"):
                logger.debug("Unregistered alert tag left as quote content: %s", content.split("]", 1)[0] + "]")
        quote_lines.append(content)

    if in_quote:
        output.append(format_blockquote(quote_lines, alert))

    return "\n".join(output)
