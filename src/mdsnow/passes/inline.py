#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdsnow/passes/inline.py
"""Inline emphasis rewriting.

Longer marker runs are consumed before shorter ones: ``***x***`` must become
bold+italic before the bold pass sees it, and bold must be gone before the
italic pass runs, or ``**x**`` would be split into two italic markers.

The caller is responsible for protecting code, image and link spans first
(see :mod:`mdsnow.protection`).
"""

from __future__ import annotations

import re

from mdsnow.constants import HIGHLIGHT_CLASS

_BOLD_ITALIC_PATTERNS = (
    re.compile(r"\*\*\*(.*?)\*\*\*"),
    re.compile(r"___(.*?)___"),
)

_BOLD_PATTERNS = (
    re.compile(r"\*\*(.*?)\*\*"),
    re.compile(r"__(.*?)__"),
)

# Single markers only: no neighbouring marker of the same kind, no leading or
# trailing whitespace inside, no line breaks. Underscores must not be
# intraword, which keeps snake_case identifiers intact.
_ITALIC_PATTERNS = (
    re.compile(r"(?<!\*)\*(?![\s*])([^*\n]*?[^\s*])\*(?!\*)"),
    re.compile(r"(?<![\w_])_(?![\s_])([^_\n]*?[^\s_])_(?![\w_])"),
)

_STRIKETHROUGH_RE = re.compile(r"~~(.*?)~~")
_HIGHLIGHT_RE = re.compile(r"==(.*?)==")


def convert_bold_italic(text: str) -> str:
    """Convert ``***x***`` and ``___x___`` to nested strong and emphasis."""
    for pattern in _BOLD_ITALIC_PATTERNS:
        text = pattern.sub(r"<strong><em>\1</em></strong>", text)
    return text


def convert_bold(text: str) -> str:
    """Convert ``**x**`` and ``__x__`` to ``<strong>``."""
    for pattern in _BOLD_PATTERNS:
        text = pattern.sub(r"<strong>\1</strong>", text)
    return text


def convert_italic(text: str) -> str:
    """Convert single ``*x*`` and ``_x_`` markers to ``<em>``."""
    for pattern in _ITALIC_PATTERNS:
        text = pattern.sub(r"<em>\1</em>", text)
    return text


def convert_strikethrough(text: str) -> str:
    """Convert ``~~x~~`` to ``<strike>``."""
    return _STRIKETHROUGH_RE.sub(r"<strike>\1</strike>", text)


def convert_highlight(text: str) -> str:
    """Convert ``==x==`` to a highlight span."""
    return _HIGHLIGHT_RE.sub(rf'<span class="{HIGHLIGHT_CLASS}">\1</span>', text)


def convert_text_formatting(text: str) -> str:
    """Apply every inline emphasis rewrite in order.

    Parameters
    ----------
    text : str
        Working text with protected spans already replaced by placeholders

    Returns
    -------
    str
        Text with emphasis markers rewritten to markup

    """
    text = convert_bold_italic(text)
    text = convert_bold(text)
    text = convert_italic(text)
    text = convert_strikethrough(text)
    text = convert_highlight(text)
    return text
