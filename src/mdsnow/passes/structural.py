#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdsnow/passes/structural.py
"""Single-pass block and span conversions.

Each function rewrites one construct with a single regular expression:
headers, horizontal rules, fenced code blocks, inline code, images and
links. URLs and labels are copied literally, without escaping. Image and
link syntax that starts inside a rendered ``<code>`` span stays literal.
"""

from __future__ import annotations

import re
from typing import Callable

from mdsnow.patterns import (
    FENCED_CODE_BLOCK_RE,
    HEADER_RE,
    HORIZONTAL_RULE_RE,
    IMAGE_RE,
    INLINE_CODE_ELEMENT_RE,
    INLINE_CODE_RE,
    LINK_RE,
)


def _render_header(match: re.Match[str]) -> str:
    level = len(match.group(1))
    return f"<h{level}>{match.group(2)}</h{level}>"


def convert_headers(text: str) -> str:
    """Convert ``#`` through ``######`` headers to heading tags.

    Lines with more than six hashes, or without whitespace after the hashes,
    are left unchanged. Inline markers in the heading text are preserved for
    the inline formatter.

    Examples
    --------
        >>> convert_headers("## Title")
        '<h2>Title</h2>'
        >>> convert_headers("#NoSpace")
        '#NoSpace'

    """
    return HEADER_RE.sub(_render_header, text)


def convert_horizontal_rules(text: str) -> str:
    """Convert lines of three or more ``-``, ``*`` or ``_`` to ``<hr>``."""
    return HORIZONTAL_RULE_RE.sub("<hr>", text)


def convert_code_blocks(text: str) -> str:
    """Convert fenced code blocks to ``<pre><code>``, dropping the language tag."""
    return FENCED_CODE_BLOCK_RE.sub(lambda match: f"<pre><code>{match.group(2)}</code></pre>", text)


def convert_inline_code(text: str) -> str:
    """Convert backtick spans to ``<code>``."""
    return INLINE_CODE_RE.sub(lambda match: f"<code>{match.group(1)}</code>", text)


def _sub_outside_code_spans(pattern: re.Pattern[str], render: Callable[[re.Match[str]], str], text: str) -> str:
    """Substitute ``pattern`` matches that do not start inside a ``<code>`` span.

    A skipped match is retried one character later, so a construct that
    begins after the span is still found.
    """
    spans = [match.span() for match in INLINE_CODE_ELEMENT_RE.finditer(text)]
    parts = []
    position = search_from = 0
    while True:
        match = pattern.search(text, search_from)
        if match is None:
            break
        if any(start < match.start() < end for start, end in spans):
            search_from = match.start() + 1
            continue
        parts.append(text[position : match.start()])
        parts.append(render(match))
        position = search_from = match.end()
    parts.append(text[position:])
    return "".join(parts)


def convert_images(text: str) -> str:
    """Convert ``![alt](url)`` to ``<img>``."""
    return _sub_outside_code_spans(
        IMAGE_RE, lambda match: f'<img src="{match.group(2)}" alt="{match.group(1)}">', text
    )


def convert_links(text: str) -> str:
    """Convert ``[text](url)`` to ``<a>``."""
    return _sub_outside_code_spans(LINK_RE, lambda match: f'<a href="{match.group(2)}">{match.group(1)}</a>', text)
