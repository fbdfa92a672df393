"""Load and validate the processing configuration.

A configuration file is a YAML (or JSON) mapping::

    product: foo
    version: 1.2.3
    source: src
    exclude: [third_party]
    indentSize: 2
    tools:
      NoTabs: true
      NoTrailingSpaces: true
      ExpandTemplates: true

The normalized mapping doubles as the variable environment of templates,
so it also carries the derived ``prefix``, ``versionMajor``,
``versionMinor`` and ``versionPatch`` values.

Environment variables:
    CXXTOOL_CONFIG: configuration file (default: ./cxxconfig.yaml)
"""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any, Mapping

import yaml

from cxxtool.exceptions import ConfigError
from cxxtool.lang import clone_deep

DEFAULT_CONFIG_NAME = "cxxconfig.yaml"
DEFAULT_INDENT_SIZE = 2

_PRODUCT_RE = re.compile(r"[A-Za-z_]\w*", re.ASCII)
_VERSION_RE = re.compile(r"(\d+\.)*\d+", re.ASCII)


def default_config_path() -> Path:
    """Return the configuration file path from the environment or the default."""
    return Path(os.environ.get("CXXTOOL_CONFIG", DEFAULT_CONFIG_NAME))


def load_config(path: Path | str | None = None) -> dict:
    """Read and normalize a configuration file.

    A relative ``source`` is resolved against the file's directory.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        yaml.YAMLError: If the YAML is malformed.
        ConfigError: If the content is not a valid configuration.
    """
    config_path = Path(path) if path else default_config_path()
    with open(config_path, encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict):
        raise ConfigError(f"Configuration at {config_path} is not a mapping")

    source = data.get("source")
    if isinstance(source, str) and source and not Path(source).is_absolute():
        data["source"] = str(config_path.resolve().parent / source)

    return normalize_config(data)


def normalize_config(raw: Mapping[str, Any]) -> dict:
    """Validate ``raw`` and return a new dict with defaults and derived keys.

    Raises:
        ConfigError: On a missing or invalid product, version or source.
    """
    config = clone_deep(dict(raw))

    product = config.get("product")
    if not isinstance(product, str):
        raise ConfigError("Configuration['product']: Missing product name")
    if not _PRODUCT_RE.fullmatch(product):
        raise ConfigError(f"Configuration['product']: Invalid product name '{product}'")

    version = config.get("version")
    if isinstance(version, (int, float)) and not isinstance(version, bool):
        # YAML reads an unquoted 1.2 as a float.
        raise ConfigError(f"Configuration['version']: Has to be a string, quote '{version}'")
    if not isinstance(version, str):
        raise ConfigError("Configuration['version']: Missing product version")
    if not _VERSION_RE.fullmatch(version):
        raise ConfigError(f"Configuration['version']: Invalid product version '{version}'")

    parts = [int(p) for p in version.split(".")]
    if len(parts) > 3:
        raise ConfigError(f"Configuration['version']: Invalid product version '{version}'")
    parts += [0] * (3 - len(parts))
    config["versionMajor"], config["versionMinor"], config["versionPatch"] = parts

    if not config.get("prefix"):
        config["prefix"] = product.upper()

    if not config.get("source"):
        raise ConfigError("Configuration['source']: Missing source path")

    config["exclude"] = list(config.get("exclude") or [])

    indent_size = config.get("indentSize") or DEFAULT_INDENT_SIZE
    if not isinstance(indent_size, int) or isinstance(indent_size, bool) or indent_size < 0:
        raise ConfigError(f"Configuration['indentSize']: Invalid indentation size '{indent_size}'")
    config["indentSize"] = indent_size

    tools = config.get("tools") or {}
    if not isinstance(tools, dict):
        raise ConfigError("Configuration['tools']: Has to be a mapping of tool names")
    config["tools"] = tools

    return config
