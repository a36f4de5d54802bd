#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdsnow/protection.py
"""Placeholder-based protection of code, image and link spans.

The inline formatter rewrites ``*``, ``_``, ``~`` and ``=`` markers anywhere
in the text. Spans whose content must not be touched (code, image and link
syntax) are first swapped for opaque placeholders and swapped back
afterwards, so that the later structural passes render them from their
original Markdown.

A placeholder is the sentinel control character, the decimal index of the
span in the per-call item list, and the sentinel again. Neither the
sentinel nor digits are formatting markers, so placeholders pass through the
inline formatter unchanged.

Examples
--------
    >>> text, items = protect_content("**a** `*b*`")
    >>> items
    ['`*b*`']
    >>> restore_content(text, items)
    '**a** `*b*`'

"""

from __future__ import annotations

import logging
import re

from mdsnow.constants import PLACEHOLDER_SENTINEL
from mdsnow.exceptions import ProtectionError
from mdsnow.patterns import FENCED_CODE_BLOCK_RE, IMAGE_RE, INLINE_CODE_RE, LINK_RE

logger = logging.getLogger(__name__)

# Extraction order matters: image and link syntax inside code must already
# be hidden when the image and link passes run
PROTECTED_PATTERNS: tuple[re.Pattern[str], ...] = (
    FENCED_CODE_BLOCK_RE,
    INLINE_CODE_RE,
    IMAGE_RE,
    LINK_RE,
)

PLACEHOLDER_RE = re.compile(rf"{PLACEHOLDER_SENTINEL}(\d+){PLACEHOLDER_SENTINEL}")


def make_placeholder(index: int) -> str:
    """Return the placeholder token for the span at ``index``."""
    return f"{PLACEHOLDER_SENTINEL}{index}{PLACEHOLDER_SENTINEL}"


def protect_content(text: str) -> tuple[str, list[str]]:
    """Replace protected spans with placeholders.

    Parameters
    ----------
    text : str
        Working text

    Returns
    -------
    tuple[str, list[str]]
        The text with placeholders, and the captured substrings in index
        order. A capture may itself contain the placeholder of a span
        extracted by an earlier pattern.

    """
    # Input cannot be allowed to forge a placeholder
    text = text.replace(PLACEHOLDER_SENTINEL, "")
    items: list[str] = []

    def _capture(match: re.Match[str]) -> str:
        items.append(match.group(0))
        return make_placeholder(len(items) - 1)

    for pattern in PROTECTED_PATTERNS:
        text = pattern.sub(_capture, text)

    logger.debug("Protected %d spans", len(items))
    return text, items


def restore_content(text: str, items: list[str]) -> str:
    """Replace every placeholder with its original substring.

    Parameters
    ----------
    text : str
        Text containing placeholders produced by :func:`protect_content`
    items : list[str]
        Original substrings in index order

    Returns
    -------
    str
        Text with all placeholders restored

    Raises
    ------
    ProtectionError
        If a placeholder index is out of range or appears twice, or if a
        protected span was lost by an intervening pass

    """
    restored: set[int] = set()

    def _restore(match: re.Match[str]) -> str:
        index = int(match.group(1))
        if index >= len(items):
            raise ProtectionError(f"Placeholder index {index} out of range ({len(items)} protected spans)", index)
        if index in restored:
            raise ProtectionError(f"Placeholder index {index} restored more than once", index)
        restored.add(index)
        # A link or image may enclose an earlier code span placeholder
        return PLACEHOLDER_RE.sub(_restore, items[index])

    text = PLACEHOLDER_RE.sub(_restore, text)

    if len(restored) != len(items):
        missing = min(set(range(len(items))) - restored)
        raise ProtectionError(f"Protected span {missing} was never restored", missing)

    return text
