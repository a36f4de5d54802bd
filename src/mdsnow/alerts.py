#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdsnow/alerts.py
"""Alert type catalog and configuration merging.

Alert blocks are blockquotes whose first line carries a ``[!TYPENAME]`` tag.
Each type is described by an :class:`AlertDefinition` holding the label,
emoji and colors used to render the callout and its CSS rule.

The built-in catalog is a tuple of frozen dataclasses, so it cannot be
mutated in place. Caller-supplied overrides are merged with
:func:`merge_alerts`, which always returns a new mapping.

Examples
--------
Override the emoji of a built-in type and add a new one:

    >>> alerts = merge_alerts({
    ...     "note": {"emoji": "📝"},
    ...     "deploy": {"displayName": "DEPLOY", "emoji": "🚀"},
    ... })
    >>> alerts["note"].emoji
    '📝'
    >>> alerts["note"].background_color
    '#eaf2f8'
    >>> alerts["deploy"].display_name
    'DEPLOY'

"""

from __future__ import annotations

import functools
import logging
import re
from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Mapping

from mdsnow.constants import (
    ALERT_CSS_RULE_TEMPLATE,
    ALERT_FIELD_ALIASES,
    DEFAULT_ALERT_BACKGROUND_COLOR,
    DEFAULT_ALERT_BORDER_COLOR,
    DEFAULT_ALERT_EMOJI,
    DEFAULT_ALERT_TEXT_COLOR,
    RESERVED_CLASS_NAMES,
)
from mdsnow.exceptions import InvalidOptionsError

logger = logging.getLogger(__name__)

# Alert names double as CSS class names
ALERT_NAME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9_-]*$")

# Never matches; used when no alert names are registered
_NO_MATCH_PATTERN = re.compile(r"(?!)")


@dataclass(frozen=True)
class AlertDefinition:
    """Display settings for one alert type.

    Parameters
    ----------
    name : str
        Lowercase identifier, used as the tag name and CSS class
    display_name : str
        Label rendered in bold before the alert content
    emoji : str
        Glyph rendered before the label
    text_color : str
        CSS color of the alert text
    background_color : str
        CSS background color of the alert block
    border_color : str
        CSS color of the left border

    """

    name: str
    display_name: str
    emoji: str = DEFAULT_ALERT_EMOJI
    text_color: str = DEFAULT_ALERT_TEXT_COLOR
    background_color: str = DEFAULT_ALERT_BACKGROUND_COLOR
    border_color: str = DEFAULT_ALERT_BORDER_COLOR

    def to_dict(self) -> dict[str, str]:
        """Return the definition using the camelCase keys of stored alert settings."""
        return {
            "name": self.name,
            "displayName": self.display_name,
            "emoji": self.emoji,
            "textColor": self.text_color,
            "backgroundColor": self.background_color,
            "borderColor": self.border_color,
        }


BUILTIN_ALERTS: tuple[AlertDefinition, ...] = (
    AlertDefinition("note", "NOTE", "ℹ️", "#0b5394", "#eaf2f8", "#2e86c1"),
    AlertDefinition("tip", "TIP", "💡", "#00695c", "#e6fffb", "#13c2c2"),
    AlertDefinition("important", "IMPORTANT", "❗", "#5b2c91", "#f4ecff", "#8250df"),
    AlertDefinition("warning", "WARNING", "⚠️", "#7a5b00", "#faf3d1", "#d4a72c"),
    AlertDefinition("caution", "CAUTION", "🛑", "#a40e26", "#fdecef", "#cf222e"),
    AlertDefinition("success", "SUCCESS", "✅", "#1b5e20", "#e0f2f1", "#2e7d32"),
    AlertDefinition("attention", "ATTENTION", "👀", "#7c4a03", "#f6efe3", "#d9822b"),
    AlertDefinition("blocker", "BLOCKER", "⛔", "#4527a0", "#ede7f6", "#673ab7"),
    AlertDefinition("status", "STATUS", "📊", "#343a40", "#f1f3f5", "#868e96"),
    AlertDefinition("question", "QUESTION", "❓", "#6d5d1f", "#f6f4ea", "#b7a34b"),
)

_FIELD_NAMES = frozenset(f.name for f in fields(AlertDefinition))


def get_builtin_alerts() -> dict[str, dict[str, str]]:
    """Return an independent copy of the built-in alert catalog.

    Returns
    -------
    dict[str, dict[str, str]]
        Mapping of alert name to a plain dict with camelCase keys. The result
        is freshly built on every call; mutating it has no effect on the
        catalog or on later calls.

    """
    return {alert.name: alert.to_dict() for alert in BUILTIN_ALERTS}


def validate_alert_name(name: Any) -> str:
    """Validate an alert name and return its lowercase form.

    Parameters
    ----------
    name : Any
        Candidate alert name

    Returns
    -------
    str
        Lowercased name

    Raises
    ------
    InvalidOptionsError
        If the name is not a string usable as a tag and CSS class, or
        collides with a class the converter emits itself

    """
    if not isinstance(name, str):
        raise InvalidOptionsError(
            f"Alert names must be strings, got {type(name).__name__}",
            parameter_name="custom_alerts",
            parameter_value=name,
        )
    if not ALERT_NAME_PATTERN.match(name):
        raise InvalidOptionsError(
            f"Invalid alert name {name!r}: must start with a letter and contain only letters, digits, '-' or '_'",
            parameter_name="custom_alerts",
            parameter_value=name,
        )
    if name.lower() in RESERVED_CLASS_NAMES:
        raise InvalidOptionsError(
            f"Invalid alert name {name!r}: the class is already used by converted markup",
            parameter_name="custom_alerts",
            parameter_value=name,
        )
    return name.lower()


def _normalize_fields(name: str, overrides: Mapping[str, Any]) -> dict[str, str]:
    """Translate an override mapping into AlertDefinition keyword arguments.

    Keys may use either the camelCase spelling of stored settings or the
    dataclass field names. ``None`` values count as not provided.
    """
    if not isinstance(overrides, Mapping):
        raise InvalidOptionsError(
            f"Custom alert {name!r} must be a mapping of fields, got {type(overrides).__name__}",
            parameter_name="custom_alerts",
            parameter_value=overrides,
        )

    normalized: dict[str, str] = {}
    for key, value in overrides.items():
        field_name = ALERT_FIELD_ALIASES.get(key)
        if field_name is None or field_name not in _FIELD_NAMES:
            logger.debug("Ignoring unknown field %r on custom alert %r", key, name)
            continue
        if value is None:
            continue
        normalized[field_name] = str(value)
    return normalized


def merge_alerts(custom_alerts: Mapping[str, Mapping[str, Any]] | None = None) -> dict[str, AlertDefinition]:
    """Merge caller-supplied alert definitions with the built-in catalog.

    For each built-in name, the built-in definition is kept and any fields
    supplied for that name are overlaid on it. Names that are not built in
    are added as new definitions; fields they omit fall back to display
    defaults (generic info glyph, upper-cased name as label, neutral colors).
    An entry whose ``name`` field names an alert that already exists overrides
    that alert the same way.

    Parameters
    ----------
    custom_alerts : Mapping[str, Mapping[str, Any]], optional
        Mapping of alert name to a partial definition. Names match
        case-insensitively.

    Returns
    -------
    dict[str, AlertDefinition]
        New mapping of lowercase name to merged definition, built-ins first

    Raises
    ------
    InvalidOptionsError
        If an alert name or entry has the wrong shape

    """
    merged: dict[str, AlertDefinition] = {alert.name: alert for alert in BUILTIN_ALERTS}
    if not custom_alerts:
        return merged

    for key, overrides in custom_alerts.items():
        name = validate_alert_name(key)
        values = _normalize_fields(name, overrides)

        if name in merged:
            # The identity of a built-in type cannot be renamed
            values.pop("name", None)
            merged[name] = replace(merged[name], **values)
            logger.debug("Overrode built-in alert %r fields: %s", name, sorted(values))
            continue

        if "name" in values:
            values["name"] = validate_alert_name(values["name"])
            if values["name"] in merged:
                target = values.pop("name")
                merged[target] = replace(merged[target], **values)
                logger.debug("Custom alert %r overrode alert %r fields: %s", name, target, sorted(values))
                continue
        values.setdefault("name", name)
        values.setdefault("display_name", values["name"].upper())
        definition = AlertDefinition(**values)
        merged[definition.name] = definition
        logger.debug("Added custom alert %r", definition.name)

    return merged


def alerts_to_dict(alerts: Mapping[str, AlertDefinition]) -> dict[str, dict[str, str]]:
    """Serialize merged alert definitions, e.g. for listing or persisting."""
    return {name: alert.to_dict() for name, alert in alerts.items()}


@functools.lru_cache(maxsize=32)
def _compile_alert_pattern(names: tuple[str, ...]) -> re.Pattern[str]:
    # Longest first so that a name never shadows a longer one sharing its prefix
    ordered = sorted(names, key=len, reverse=True)
    alternation = "|".join(re.escape(name) for name in ordered)
    return re.compile(rf"^\[!({alternation})\]", re.IGNORECASE)


def build_alert_pattern(alerts: Mapping[str, AlertDefinition]) -> re.Pattern[str]:
    """Build the pattern matching a leading ``[!NAME]`` tag.

    Parameters
    ----------
    alerts : Mapping[str, AlertDefinition]
        Merged alert definitions

    Returns
    -------
    re.Pattern[str]
        Case-insensitive pattern whose first group is the matched name

    """
    if not alerts:
        return _NO_MATCH_PATTERN
    return _compile_alert_pattern(tuple(sorted(alerts)))


def alert_css_rule(alert: AlertDefinition) -> str:
    """Render the CSS rule styling one alert class."""
    return ALERT_CSS_RULE_TEMPLATE.format(**asdict(alert))
