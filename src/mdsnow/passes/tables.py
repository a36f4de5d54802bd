#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdsnow/passes/tables.py
"""Pipe table conversion.

Expected input:
    | Col 1 | Col 2 |
    |-------|-------|
    | A     | B     |

Output:
    <table class="tg"><thead><tr><th class="tg-0pky">Col 1</th>...</tr></thead>
    <tbody><tr><td class="tg-0pky">A</td>...</tr></tbody></table>

A run of pipe lines is only treated as a table when its second line is a
separator row whose cells are all dashes (or empty). Alignment colons are
not recognised, so such runs, like any other invalid run, pass through
unchanged.
"""

from __future__ import annotations

import logging
import re

from mdsnow.constants import TABLE_CELL_CLASS, TABLE_CLASS
from mdsnow.patterns import TABLE_RUN_RE, TABLE_SEPARATOR_CELL_RE

logger = logging.getLogger(__name__)


def split_cells(row: str) -> list[str]:
    """Split a ``|``-delimited row into stripped cells, dropping the outer edges."""
    return [cell.strip() for cell in row.split("|")[1:-1]]


def is_separator_row(row: str) -> bool:
    """Return True if every cell of ``row`` is dashes only or empty."""
    return all(cell == "" or TABLE_SEPARATOR_CELL_RE.match(cell) for cell in split_cells(row))


def parse_table(table_text: str) -> str:
    """Render one candidate run of pipe lines.

    Parameters
    ----------
    table_text : str
        Consecutive lines starting and ending with ``|``

    Returns
    -------
    str
        Table markup, or ``table_text`` unchanged if the run is not a table

    """
    lines = table_text.strip().split("\n")
    if len(lines) < 2 or not is_separator_row(lines[1]):
        logger.debug("Pipe run without separator row left unchanged (%d lines)", len(lines))
        return table_text

    parts = [f'<table class="{TABLE_CLASS}"><thead><tr>']
    parts.extend(f'<th class="{TABLE_CELL_CLASS}">{header}</th>' for header in split_cells(lines[0]))
    parts.append("</tr></thead><tbody>")

    for row in lines[2:]:
        if not row.strip():
            continue
        parts.append("<tr>")
        parts.extend(f'<td class="{TABLE_CELL_CLASS}">{cell}</td>' for cell in split_cells(row))
        parts.append("</tr>")

    parts.append("</tbody></table>")

    # Keep the line structure around the table intact
    if table_text.endswith("\n"):
        parts.append("\n")
    return "".join(parts)


def _replace_run(match: re.Match[str]) -> str:
    return parse_table(match.group(0))


def convert_tables(text: str) -> str:
    """Convert every valid pipe table in ``text``."""
    return TABLE_RUN_RE.sub(_replace_run, text)
