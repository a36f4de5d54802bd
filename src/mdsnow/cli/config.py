#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for the mdsnow CLI.

Custom alert definitions and output flags persist between runs in a
configuration file, discovered automatically or named explicitly.

Supported files, in discovery priority order:

- ``.mdsnow.toml``
- ``.mdsnow.yaml`` / ``.mdsnow.yml``
- ``.mdsnow.json``
- ``pyproject.toml`` with a ``[tool.mdsnow]`` table

Example ``.mdsnow.toml``::

    skip_pretty_print = false

    [custom_alerts.note]
    emoji = "📝"

    [custom_alerts.deploy]
    displayName = "DEPLOY"
    emoji = "🚀"
    backgroundColor = "#e8f5e9"

"""

import json
import logging
import os
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Dict, Optional

import yaml

from mdsnow.constants import CONFIG_FILENAMES, PYPROJECT_TOOL_SECTION
from mdsnow.exceptions import ConfigError
from mdsnow.options import ConversionOptions

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "MDSNOW_CONFIG"

# Config keys mapped to ConversionOptions fields
_OPTION_KEYS = {
    "custom_alerts": "custom_alerts",
    "customAlerts": "custom_alerts",
    "skip_pretty_print": "skip_pretty_print",
    "skipPrettyPrint": "skip_pretty_print",
    "skip_code_tags": "skip_code_tags",
    "skipCodeTags": "skip_code_tags",
}


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the ``[tool.mdsnow]`` table from a pyproject.toml file.

    Parameters
    ----------
    pyproject_path : Path
        Path to pyproject.toml file

    Returns
    -------
    dict
        The table's contents, or an empty dict if there is none

    Raises
    ------
    ConfigError
        If the file cannot be parsed or the section is not a table

    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {pyproject_path}: {e}", str(pyproject_path), e) from e
    except OSError as e:
        raise ConfigError(f"Error reading {pyproject_path}: {e}", str(pyproject_path), e) from e

    config = data.get("tool", {}).get(PYPROJECT_TOOL_SECTION, {})
    if not isinstance(config, dict):
        raise ConfigError(
            f"[tool.{PYPROJECT_TOOL_SECTION}] section in {pyproject_path} must be a table, got {type(config).__name__}",
            str(pyproject_path),
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file by walking up from ``start_dir``.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory for search, defaults to current working directory

    Returns
    -------
    Path or None
        First config file found, or None

    """
    current = (start_dir or Path.cwd()).resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / "pyproject.toml"
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except ConfigError as e:
                # A broken unrelated pyproject.toml should not stop discovery
                logger.debug("Skipping %s: %s", pyproject_path, e)

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def discover_config_file(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Discover a configuration file in the parent chain, then the home directory.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory for the parent search, defaults to the cwd

    Returns
    -------
    Path or None
        Path to discovered config file, or None if not found

    """
    found = find_config_in_parents(start_dir)
    if found:
        return found

    home = Path.home()
    for filename in CONFIG_FILENAMES:
        config_path = home / filename
        if config_path.is_file():
            return config_path

    return None


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a TOML, YAML, JSON or pyproject.toml file.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Configuration dictionary

    Raises
    ------
    ConfigError
        If the file is missing, unreadable, malformed, or not a mapping

    """
    config_path = Path(config_path)

    if not config_path.is_file():
        raise ConfigError(f"Configuration file does not exist: {config_path}", str(config_path))

    if config_path.name.lower() == "pyproject.toml":
        return _load_pyproject_section(config_path)

    ext = config_path.suffix.lower()
    try:
        if ext == ".toml":
            with open(config_path, "rb") as f:
                config = tomllib.load(f)
        elif ext in (".yaml", ".yml"):
            with open(config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
        elif ext == ".json":
            with open(config_path, "r", encoding="utf-8") as f:
                config = json.load(f)
        else:
            raise ConfigError(f"Unsupported config file format: {ext}. Use .json, .toml, or .yaml", str(config_path))
    except (tomllib.TOMLDecodeError, yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigError(f"Invalid config file {config_path}: {e}", str(config_path), e) from e
    except OSError as e:
        raise ConfigError(f"Error reading config file {config_path}: {e}", str(config_path), e) from e

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigError(f"Config file must contain a mapping, got {type(config).__name__}", str(config_path))
    return config


def load_config_with_priority(
    explicit_path: Optional[str] = None,
    env_var_path: Optional[str] = None,
    discover: bool = True,
) -> Dict[str, Any]:
    """Load configuration with proper priority handling.

    Priority order (highest to lowest):
    1. Explicit config file path (``--config``)
    2. Environment variable path (``MDSNOW_CONFIG``)
    3. Auto-discovered config file

    Parameters
    ----------
    explicit_path : str, optional
        Path given on the command line
    env_var_path : str, optional
        Path from the environment; read from ``MDSNOW_CONFIG`` when omitted
    discover : bool, default True
        Whether to fall back to discovery

    Returns
    -------
    dict
        Configuration dictionary, empty when no file applies

    """
    if explicit_path:
        logger.debug("Loading config from --config: %s", explicit_path)
        return load_config_file(explicit_path)

    env_var_path = env_var_path if env_var_path is not None else os.environ.get(CONFIG_ENV_VAR)
    if env_var_path:
        logger.debug("Loading config from %s: %s", CONFIG_ENV_VAR, env_var_path)
        return load_config_file(env_var_path)

    if discover:
        discovered = discover_config_file()
        if discovered:
            logger.debug("Discovered config file: %s", discovered)
            return load_config_file(discovered)

    return {}


def options_from_config(config: Dict[str, Any]) -> ConversionOptions:
    """Build ConversionOptions from a loaded configuration dictionary.

    Unknown keys are ignored with a warning so that a config file shared with
    newer versions still loads.

    Raises
    ------
    InvalidOptionsError
        If a known key has a value of the wrong shape

    """
    values: Dict[str, Any] = {}
    for key, value in config.items():
        field_name = _OPTION_KEYS.get(key)
        if field_name is None:
            logger.warning("Ignoring unknown config key: %s", key)
            continue
        values[field_name] = value
    return ConversionOptions(**values)
