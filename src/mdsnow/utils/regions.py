#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdsnow/utils/regions.py
"""Helpers for rewriting text outside code regions.

Once a fenced block has been rendered as ``<pre><code>...</code></pre>``,
its body must survive every later pass verbatim. Rather than teaching each
pass about code blocks, passes are applied to the text between regions only.

Regions are found by tag text alone. A raw ``<pre><code>`` typed in the
input pairs with the next ``</code></pre>``, rendered or not, so unbalanced
raw HTML can shift region boundaries.

Examples
--------
    >>> map_outside_regions("a\\n<pre><code>b\\n</code></pre>\\nc", str.upper)
    'A\\n<pre><code>b\\n</code></pre>\\nC'

"""

from __future__ import annotations

import re
from typing import Callable

from mdsnow.patterns import PRE_CODE_REGION_RE


def split_regions(text: str, region_pattern: re.Pattern[str] = PRE_CODE_REGION_RE) -> list[str]:
    """Split text into alternating outside/region parts.

    The pattern must contain exactly one capturing group around the whole
    region. Even indices of the result are outside text, odd indices are
    regions.
    """
    return region_pattern.split(text)


def map_outside_regions(
    text: str,
    func: Callable[[str], str],
    region_pattern: re.Pattern[str] = PRE_CODE_REGION_RE,
) -> str:
    """Apply ``func`` to every part of ``text`` that is not a code region.

    Parameters
    ----------
    text : str
        Working text
    func : Callable[[str], str]
        Rewriting pass applied to each outside part
    region_pattern : re.Pattern[str], default PRE_CODE_REGION_RE
        Pattern with one capturing group delimiting the preserved regions

    Returns
    -------
    str
        Text with outside parts rewritten and regions untouched

    """
    parts = split_regions(text, region_pattern)
    return "".join(part if index % 2 else func(part) for index, part in enumerate(parts))
