#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdsnow/api.py
"""Public conversion entry point.

:func:`convert` runs the passes of :mod:`mdsnow.passes` in a fixed order.
The order encodes the dependencies between passes:

1. Headers run before content protection so heading text still receives
   inline formatting.
2. Code, image and link spans are protected while the inline formatter runs
   and restored immediately after it.
3. Code, image and link rendering runs after restoration, so those spans are
   rendered from their original Markdown.
4. Lists run before blockquotes, and the blockquote pass reuses the list
   passes on quote interiors.
5. Newlines are normalized last, then the output is optionally pretty
   printed and wrapped.

Once fenced code is rendered, every later pass leaves the
``<pre><code>...</code></pre>`` regions alone. Image and link syntax is left
literal inside inline code spans as well.

Windows and classic Mac line endings are normalized to ``\\n`` first.

The output is not valid input to a second conversion; converting twice is
not idempotent.
"""

from __future__ import annotations

import logging
from typing import Any

from mdsnow.alerts import merge_alerts
from mdsnow.exceptions import InvalidOptionsError
from mdsnow.options import ConversionOptions
from mdsnow.output import wrap_with_code_tags
from mdsnow.passes.blockquotes import convert_blockquotes
from mdsnow.passes.inline import convert_text_formatting
from mdsnow.passes.linebreaks import convert_newlines_outside_pre, pretty_print_html
from mdsnow.passes.lists import convert_ordered_lists, convert_unordered_lists
from mdsnow.passes.structural import (
    convert_code_blocks,
    convert_headers,
    convert_horizontal_rules,
    convert_images,
    convert_inline_code,
    convert_links,
)
from mdsnow.passes.tables import convert_tables
from mdsnow.patterns import FENCED_CODE_REGION_RE
from mdsnow.protection import protect_content, restore_content
from mdsnow.utils.regions import map_outside_regions

logger = logging.getLogger(__name__)


def _resolve_options(options: ConversionOptions | None, kwargs: dict[str, Any]) -> ConversionOptions:
    """Combine an options object with keyword overrides."""
    if options is None:
        options = ConversionOptions()
    elif not isinstance(options, ConversionOptions):
        raise InvalidOptionsError(
            f"options must be a ConversionOptions instance, got {type(options).__name__}",
            parameter_name="options",
            parameter_value=options,
        )

    if kwargs:
        try:
            options = options.create_updated(**kwargs)
        except TypeError as e:
            raise InvalidOptionsError(
                f"Unknown conversion option(s): {sorted(kwargs)}",
                parameter_name="kwargs",
                parameter_value=kwargs,
                original_error=e,
            ) from e
    return options


def convert(markdown_text: str, options: ConversionOptions | None = None, **kwargs: Any) -> str:
    """Convert Markdown to ticketing-platform rich-text markup.

    Parameters
    ----------
    markdown_text : str
        Markdown source. Empty or whitespace-only input yields an empty or
        near-empty result, never an error.
    options : ConversionOptions, optional
        Conversion options; defaults are used when omitted
    **kwargs : Any
        Individual option fields overriding those of ``options``
        (``custom_alerts``, ``skip_pretty_print``, ``skip_code_tags``)

    Returns
    -------
    str
        Converted markup, wrapped in ``[code]...[/code]`` with inlined CSS
        unless ``skip_code_tags`` is set

    Raises
    ------
    InvalidOptionsError
        If the options or custom alert definitions have the wrong shape

    Examples
    --------
        >>> convert("**bold**", skip_code_tags=True)
        '<strong>bold</strong>'
        >>> convert("> [!TIP]\\n> Use `uv`", skip_code_tags=True)
        '<p class="tip">💡 <strong>TIP:</strong> Use <code>uv</code></p>'

    """
    options = _resolve_options(options, kwargs)
    alerts = merge_alerts(options.custom_alerts)
    markdown_text = markdown_text.replace("\r\n", "\n").replace("\r", "\n")
    logger.debug("Converting %d characters with %d alert types", len(markdown_text), len(alerts))

    text = map_outside_regions(markdown_text, convert_headers, FENCED_CODE_REGION_RE)

    text, protected = protect_content(text)
    text = convert_text_formatting(text)
    text = restore_content(text, protected)

    text = convert_code_blocks(text)
    text = map_outside_regions(text, convert_inline_code)
    text = map_outside_regions(text, convert_images)
    text = map_outside_regions(text, convert_links)
    text = map_outside_regions(text, convert_horizontal_rules)
    text = map_outside_regions(text, convert_unordered_lists)
    text = map_outside_regions(text, convert_ordered_lists)
    text = map_outside_regions(text, lambda part: convert_blockquotes(part, alerts))
    text = map_outside_regions(text, convert_tables)
    text = convert_newlines_outside_pre(text)

    if not options.skip_pretty_print:
        text = pretty_print_html(text)

    if not options.skip_code_tags:
        text = wrap_with_code_tags(text, alerts)

    return text
