#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Conversion options for the Markdown to rich-text pipeline.

This module defines the immutable options object threaded through a single
call to :func:`mdsnow.convert`.
"""

from __future__ import annotations

import copy
import sys
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Mapping

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from mdsnow.alerts import validate_alert_name
from mdsnow.constants import DEFAULT_SKIP_CODE_TAGS, DEFAULT_SKIP_PRETTY_PRINT
from mdsnow.exceptions import InvalidOptionsError


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class ConversionOptions(CloneFrozenMixin):
    """Configuration options for Markdown to rich-text conversion.

    Parameters
    ----------
    custom_alerts : Mapping[str, Mapping[str, Any]], default empty
        Alert definitions merged over the built-in catalog. Each entry maps an
        alert name to a partial definition using either camelCase keys
        (``displayName``, ``textColor``, ``backgroundColor``, ``borderColor``)
        or the :class:`~mdsnow.alerts.AlertDefinition` field names.
    skip_pretty_print : bool, default False
        Leave the output on as few lines as possible instead of inserting
        newlines after block-level tags.
    skip_code_tags : bool, default False
        Return the bare markup without CSS blocks and the ``[code]``
        container tag.

    Examples
    --------
    Basic usage:
        >>> options = ConversionOptions(skip_code_tags=True)

    Override one field of a built-in alert:
        >>> options = ConversionOptions(custom_alerts={"note": {"emoji": "📝"}})

    """

    custom_alerts: Mapping[str, Mapping[str, Any]] = field(
        default_factory=dict,
        metadata={"help": "Custom alert definitions merged over the built-in catalog"},
    )
    skip_pretty_print: bool = field(
        default=DEFAULT_SKIP_PRETTY_PRINT,
        metadata={"help": "Do not insert newlines after block-level tags"},
    )
    skip_code_tags: bool = field(
        default=DEFAULT_SKIP_CODE_TAGS,
        metadata={"help": "Do not prepend CSS or wrap the output in [code] tags"},
    )

    def __post_init__(self) -> None:
        """Validate option values and freeze the custom alert mapping.

        Raises
        ------
        InvalidOptionsError
            If ``custom_alerts`` or one of its entries has the wrong shape

        """
        custom_alerts = self.custom_alerts if self.custom_alerts is not None else {}
        if not isinstance(custom_alerts, Mapping):
            raise InvalidOptionsError(
                f"custom_alerts must be a mapping, got {type(custom_alerts).__name__}",
                parameter_name="custom_alerts",
                parameter_value=custom_alerts,
            )

        frozen: dict[str, Mapping[str, Any]] = {}
        for name, definition in custom_alerts.items():
            validate_alert_name(name)
            if not isinstance(definition, Mapping):
                raise InvalidOptionsError(
                    f"Custom alert {name!r} must be a mapping of fields, got {type(definition).__name__}",
                    parameter_name="custom_alerts",
                    parameter_value=definition,
                )
            frozen[name] = MappingProxyType(copy.deepcopy(dict(definition)))

        # Callers keep ownership of the mapping they passed in
        object.__setattr__(self, "custom_alerts", MappingProxyType(frozen))

        for flag in ("skip_pretty_print", "skip_code_tags"):
            if not isinstance(getattr(self, flag), bool):
                raise InvalidOptionsError(
                    f"{flag} must be a bool, got {type(getattr(self, flag)).__name__}",
                    parameter_name=flag,
                    parameter_value=getattr(self, flag),
                )
