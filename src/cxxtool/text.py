"""String utilities shared by sanitizers, generators and templates.

Everything here is pure: functions take text and return new text. These
helpers are also exposed to embedded generator functions, so they fail
loudly on bad input instead of guessing.
"""

from __future__ import annotations

import re
from typing import Any, Iterable, Mapping

from cxxtool.exceptions import InjectRangeError, SubstitutionError

CXX_SOURCE_EXTENSIONS = (".c", ".cc", ".cpp", ".cxx", ".m", ".mm")
CXX_HEADER_EXTENSIONS = (".h", ".hh", ".hpp", ".hxx", ".inc")

_LINE_SPLIT_RE = re.compile(r"\r?\n")
_BLANK_LINE_RE = re.compile(r"[ \t]*")
_LEADING_BLANK_LINES_RE = re.compile(r"\A[ \t\r\n]*\n")
_TRAILING_BREAKS_RE = re.compile(r"[\r\n]+\Z")
_VARIABLE_RE = re.compile(r"@(\w+)@", re.ASCII)

# Characters that count as indentation when de-indenting templates.
_INDENT_CHARS = " \\"


def match_extension(name: str, ext: str | Iterable[str]) -> str | None:
    """Return the extension from ``ext`` that ``name`` ends with, or None.

    The comparison is case-insensitive; ``ext`` is a single extension or a
    sequence of them.
    """
    lowered = str(name).lower()
    candidates = [ext] if isinstance(ext, str) else list(ext)
    for candidate in candidates:
        if lowered.endswith(candidate):
            return candidate
    return None


def is_cxx_source_file(name: str) -> bool:
    """Whether ``name`` is a C, C++ or Objective-C source file name."""
    return match_extension(name, CXX_SOURCE_EXTENSIONS) is not None


def is_cxx_header_file(name: str) -> bool:
    """Whether ``name`` is a C or C++ header file name."""
    return match_extension(name, CXX_HEADER_EXTENSIONS) is not None


def apply_indentation(text: str, prefix: str) -> str:
    """Prefix every non-empty line of ``text`` with ``prefix``."""
    lines = _LINE_SPLIT_RE.split(text)
    if prefix:
        lines = [prefix + line if line else line for line in lines]
    return "\n".join(lines)


def remove_indentation(text: str) -> str:
    """Strip the indentation shared by every non-blank line of ``text``.

    Whitespace-only lines are cleared. The common prefix is the longest run
    of spaces/backslashes that starts every non-blank line. Templates can be
    written indented inside Python source and stored flush-left.
    """
    lines = _LINE_SPLIT_RE.split(text)
    pattern: str | None = None

    for i, line in enumerate(lines):
        if _BLANK_LINE_RE.fullmatch(line):
            lines[i] = ""
        elif pattern is None:
            j = 0
            while j < len(line) and line[j] in _INDENT_CHARS:
                j += 1
            pattern = line[:j]
        elif pattern:
            j = 0
            limit = min(len(pattern), len(line))
            while j < limit and line[j] == pattern[j]:
                j += 1
            pattern = line[:j]

    if pattern:
        width = len(pattern)
        lines = [line[width:] if line else line for line in lines]

    return "\n".join(lines)


def remove_lines(text: str) -> str:
    """Strip leading blank lines and collapse trailing breaks into one ``\\n``."""
    text = _LEADING_BLANK_LINES_RE.sub("", text, count=1)
    return _TRAILING_BREAKS_RE.sub("\n", text, count=1)


def inject(text: str, start: int, end: int, content: str) -> str:
    """Return ``text`` with ``text[start:end]`` replaced by ``content``."""
    if start > len(text):
        raise InjectRangeError(
            f"inject(): start ({start}) cannot be greater than the text length ({len(text)})",
        )
    if end > len(text):
        raise InjectRangeError(
            f"inject(): end ({end}) cannot be greater than the text length ({len(text)})",
        )
    return text[:start] + content + text[end:]


def substitute_variables(template: str, variables: Mapping[str, Any]) -> str:
    """Replace every ``@name@`` in ``template`` with ``str(variables[name])``.

    Raises:
        SubstitutionError: If a referenced variable is missing or None.
    """

    def _replace(match: re.Match) -> str:
        key = match.group(1)
        value = variables.get(key)
        if value is None:
            raise SubstitutionError(
                f"Couldn't substitute template variable {match.group(0)}.",
                context={"variable": key},
            )
        return str(value)

    return _VARIABLE_RE.sub(_replace, template)


def format_table(items: Iterable[Any], width: int = 80) -> str:
    """Join ``items`` with ", ", wrapping lines before they reach ``width``."""
    if not isinstance(width, int) or width <= 0:
        raise ValueError(f"format_table(): width has to be a positive integer, got {width!r}")

    out: list[str] = []
    column = 0
    for i, item in enumerate(items):
        s = str(item)
        if i:
            if column + len(s) + 1 >= width:
                out.append(",\n")
                column = 0
            else:
                out.append(", ")
                column += 2
        out.append(s)
        column += len(s)
    return "".join(out)


def parse_cxx_comment(text: str, start: int = 0) -> str | None:
    """Return the ``//`` line comment at ``start``, or None if there is none.

    Leading spaces/tabs are part of the result, and so is the terminating
    line break when present.
    """
    i = start
    n = len(text)

    while i < n and text[i] in " \t":
        i += 1

    if i + 2 > n or text[i:i + 2] != "//":
        return None
    i += 2

    newline = text.find("\n", i)
    end = n if newline == -1 else newline + 1
    return text[start:end]
