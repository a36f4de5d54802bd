#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the mdsnow library.

The converter itself never raises on malformed Markdown: unmatched markers,
broken tables and unknown alert tags degrade to passthrough output. The
exceptions below cover the remaining failure classes, which are caller
contract violations, unreadable configuration, and internal bookkeeping
defects.

Exception Hierarchy
-------------------
- MdSnowError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (malformed ConversionOptions or custom alerts)

  - ConfigError (configuration file discovery and loading)

  - ProtectionError (placeholder bookkeeping defects)

"""

from typing import Any


class MdSnowError(Exception):
    """Base exception class for all mdsnow-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(MdSnowError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """Exception raised when conversion options have the wrong shape.

    Raised when ``custom_alerts`` is not a mapping, when an alert name is not
    a string, or when an alert entry is not a mapping of fields.

    """


class ConfigError(MdSnowError):
    """Exception raised when a configuration file cannot be loaded.

    Parameters
    ----------
    message : str
        Description of the configuration problem
    config_path : str, optional
        Path of the offending configuration file
    original_error : Exception, optional
        The original parse or I/O error

    """

    def __init__(self, message: str, config_path: str | None = None, original_error: Exception | None = None):
        """Initialize the config error with the offending path."""
        super().__init__(message, original_error=original_error)
        self.config_path = config_path


class ProtectionError(MdSnowError):
    """Exception raised when protected-span bookkeeping is inconsistent.

    A placeholder that references an unknown index, is restored twice, or is
    never restored indicates a defect in a conversion pass rather than bad
    input, so it is surfaced instead of being silently repaired.

    Parameters
    ----------
    message : str
        Description of the inconsistency
    index : int, optional
        The placeholder index involved

    """

    def __init__(self, message: str, index: int | None = None):
        """Initialize the protection error with the placeholder index."""
        super().__init__(message)
        self.index = index


__all__ = [
    "MdSnowError",
    "ValidationError",
    "InvalidOptionsError",
    "ConfigError",
    "ProtectionError",
]
