#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdsnow/output.py
"""CSS selection and container wrapping of converted markup.

Only the style blocks the markup actually needs are prepended: code styling
when a ``<code>`` element is present, highlight styling for highlight spans,
one rule per alert paragraph in use, and table styling for ``tg`` tables. Alert
rules are rendered from the merged definitions, so caller overrides reach
the CSS as well as the markup.
"""

from __future__ import annotations

import logging
from typing import Mapping

from mdsnow.alerts import AlertDefinition, alert_css_rule, merge_alerts
from mdsnow.constants import (
    CODE_CSS,
    CONTAINER_CLOSE_TAG,
    CONTAINER_OPEN_TAG,
    HIGHLIGHT_CLASS,
    HIGHLIGHT_CSS,
    STYLE_CLOSE,
    STYLE_OPEN,
    TABLE_CLASS,
    TABLE_CSS,
)

logger = logging.getLogger(__name__)


def collect_alert_css(text: str, alerts: Mapping[str, AlertDefinition]) -> str:
    """Return one style block with the rules of the alert paragraphs in ``text``."""
    rules = [alert_css_rule(alert) for name, alert in alerts.items() if f'<p class="{name}">' in text]
    if not rules:
        return ""
    return STYLE_OPEN + "".join(rules) + STYLE_CLOSE


def collect_css(text: str, alerts: Mapping[str, AlertDefinition] | None = None) -> str:
    """Return the CSS blocks required by the converted markup.

    Parameters
    ----------
    text : str
        Converted markup
    alerts : Mapping[str, AlertDefinition], optional
        Merged alert definitions; defaults to the built-in catalog

    Returns
    -------
    str
        Concatenated ``<style>`` blocks, empty if none are needed

    """
    if alerts is None:
        alerts = merge_alerts()

    css = ""
    if "<code>" in text:
        css += CODE_CSS
    if f'<span class="{HIGHLIGHT_CLASS}">' in text:
        css += HIGHLIGHT_CSS
    css += collect_alert_css(text, alerts)
    if f'<table class="{TABLE_CLASS}">' in text:
        css += TABLE_CSS
    return css


def wrap_with_code_tags(text: str, alerts: Mapping[str, AlertDefinition] | None = None) -> str:
    """Prepend the needed CSS and wrap the markup in the ``[code]`` container.

    Parameters
    ----------
    text : str
        Converted markup
    alerts : Mapping[str, AlertDefinition], optional
        Merged alert definitions; defaults to the built-in catalog

    Returns
    -------
    str
        ``[code]<css>\\n<markup>[/code]``, or ``[code]<markup>[/code]`` when no
        CSS is needed

    """
    css = collect_css(text, alerts)
    if css:
        logger.debug("Prepending %d characters of CSS", len(css))
        text = css + "\n" + text
    return f"{CONTAINER_OPEN_TAG}{text}{CONTAINER_CLOSE_TAG}"
