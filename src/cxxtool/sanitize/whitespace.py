"""Whitespace and line-ending sanitizers.

None of these assume a particular EOL convention; they work the same on
``\\n`` and ``\\r\\n`` documents.
"""

from __future__ import annotations

import re
from typing import Any

_TRAILING_SPACES_RE = re.compile(r"[ \t]+(\r?\n)")
_TRAILING_BREAKS_RE = re.compile(r"[\r\n]+\Z")
_ANY_EOL_RE = re.compile(r"\r?\n")

DEFAULT_INDENT_SIZE = 2


def _keep_identity(original: str, result: str) -> str:
    return original if result == original else result


def no_tabs(ctx: Any, text: str, options: dict) -> str:
    """Replace each tab with ``indentSize`` spaces."""
    size = ctx.config.get("indentSize") or DEFAULT_INDENT_SIZE
    return _keep_identity(text, text.replace("\t", " " * size))


def no_trailing_spaces(ctx: Any, text: str, options: dict) -> str:
    """Remove spaces and tabs right before a line break."""
    return _keep_identity(text, _TRAILING_SPACES_RE.sub(r"\1", text))


def no_trailing_lines(ctx: Any, text: str, options: dict) -> str:
    """Collapse trailing line breaks, keeping a final one if there was any."""
    if text.endswith("\r\n"):
        eol = "\r\n"
    elif text.endswith("\n"):
        eol = "\n"
    else:
        eol = ""
    return _keep_identity(text, _TRAILING_BREAKS_RE.sub("", text) + eol)


def unix_eol(ctx: Any, text: str, options: dict) -> str:
    """Convert ``\\r\\n`` line breaks to ``\\n``."""
    return _keep_identity(text, text.replace("\r\n", "\n"))


def windows_eol(ctx: Any, text: str, options: dict) -> str:
    """Convert every line break to ``\\r\\n``."""
    return _keep_identity(text, _ANY_EOL_RE.sub("\r\n", text))
