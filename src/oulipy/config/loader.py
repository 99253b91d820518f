"""
oulipy.config.loader - Configuration file discovery and loading.

Configuration lives in a .oulipy.toml file found by walking up from the
working directory. Values are merged over DEFAULT_CONFIG, then
environment variables named OULIPY_<SECTION>_<KEY> override them.
"""

from __future__ import annotations

import copy
import json
import os
from pathlib import Path
from typing import Any, Optional

import tomlkit
from tomlkit.exceptions import TOMLKitError
from tomlkit.toml_document import TOMLDocument

from oulipy.config.defaults import CONFIG_FILENAME, DEFAULT_CONFIG, ENV_PREFIX, OUTPUT_FORMATS
from oulipy.core.constraints import constraint_ids


class ConfigError(Exception):
    """Raised when a configuration file cannot be read or is invalid."""


def parse_toml_document(content: str) -> TOMLDocument:
    """Parse TOML content into a round-trippable tomlkit document.

    Raises:
        ConfigError: If the content is not valid TOML
    """
    try:
        return tomlkit.parse(content)
    except TOMLKitError as e:
        raise ConfigError(f"Invalid TOML: {e}") from e


def parse_toml(content: str) -> dict[str, Any]:
    """Parse TOML content into plain Python dicts and lists."""
    return parse_toml_document(content).unwrap()


def find_config_file(start_dir: Path) -> Optional[Path]:
    """Find the configuration file in start_dir or one of its parents.

    Args:
        start_dir: Directory to start searching from

    Returns:
        Path to the config file, or None if not found
    """
    current = start_dir.resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def merge_configs(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep-merge override into a copy of base."""
    result = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = copy.deepcopy(value)
    return result


def _try_parse_env_value(value: str) -> Any:
    """Parse an environment variable value.

    JSON arrays and objects become lists and dicts, "true"/"false" become
    booleans (case-insensitive). Anything else, malformed JSON included,
    is returned as the plain string.
    """
    lowered = value.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    if value.startswith(("[", "{")):
        try:
            return json.loads(value)
        except json.JSONDecodeError:
            return value
    return value


def _apply_env_overrides(config: dict[str, Any]) -> dict[str, Any]:
    """Apply OULIPY_<SECTION>_<KEY> environment variables to config."""
    for name, raw in os.environ.items():
        if not name.startswith(ENV_PREFIX):
            continue
        parts = name[len(ENV_PREFIX) :].lower().split("_", 1)
        if len(parts) != 2 or not all(parts):
            continue
        section, key = parts
        table = config.setdefault(section, {})
        if not isinstance(table, dict):
            raise ConfigError(f"Cannot apply {name}: [{section}] is not a table")
        table[key] = _try_parse_env_value(raw)
    return config


def _check_sections(config: dict[str, Any]) -> None:
    """Raise ConfigError if a known section is not a table."""
    for section in DEFAULT_CONFIG:
        if not isinstance(config.get(section, {}), dict):
            raise ConfigError(f"[{section}] must be a table, got {config[section]!r}")


def validate_config(config: dict[str, Any]) -> None:
    """Check the values the commands depend on.

    Raises:
        ConfigError: On a section that is not a table, an unknown
            constraint or output format, or a non-string parameter
    """
    _check_sections(config)

    param = config.get("check", {}).get("param")
    if param is not None and not isinstance(param, str):
        raise ConfigError(f"[check] param must be a letter, got {param!r}")

    constraint = config.get("check", {}).get("constraint")
    if constraint is not None and constraint not in constraint_ids():
        raise ConfigError(
            f"Unknown constraint '{constraint}' in [check] "
            f"(available: {', '.join(constraint_ids())})"
        )
    output_format = config.get("output", {}).get("format", "text")
    if output_format not in OUTPUT_FORMATS:
        raise ConfigError(
            f"Unknown output format '{output_format}' in [output] "
            f"(available: {', '.join(OUTPUT_FORMATS)})"
        )


def load_config(config_path: Optional[Path] = None) -> dict[str, Any]:
    """Load configuration, merged over defaults, with env overrides.

    Args:
        config_path: Path to a .oulipy.toml file, or None for defaults only

    Returns:
        Merged configuration dictionary

    Raises:
        ConfigError: If the file cannot be read, parsed, or validated
    """
    user_config: dict[str, Any] = {}
    if config_path is not None:
        try:
            content = config_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError(f"Cannot read {config_path}: {e}") from e
        user_config = parse_toml(content)

    config = merge_configs(DEFAULT_CONFIG, user_config)
    _check_sections(config)
    config = _apply_env_overrides(config)
    validate_config(config)
    return config


def default_config_document() -> TOMLDocument:
    """Build the commented default configuration written by `oulipy init`."""
    doc = tomlkit.document()
    doc.add(tomlkit.comment("oulipy configuration"))
    doc.add(tomlkit.nl())

    check = tomlkit.table()
    check.add("constraint", DEFAULT_CONFIG["check"]["constraint"])
    check["constraint"].comment(" | ".join(constraint_ids()))
    check.add("param", DEFAULT_CONFIG["check"]["param"])
    doc.add("check", check)

    output = tomlkit.table()
    output.add("format", DEFAULT_CONFIG["output"]["format"])
    output["format"].comment(" | ".join(OUTPUT_FORMATS))
    doc.add("output", output)
    return doc
