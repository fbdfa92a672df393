"""Sanitizers — order-tagged, whole-document formatting fixes.

Every sanitizer is a pure ``(ctx, text, options) -> str`` function that
returns the very same ``str`` object when it has nothing to change, so the
pipeline can tell modified files apart by identity.
"""

from cxxtool.sanitize.includes import sort_includes
from cxxtool.sanitize.whitespace import (
    no_tabs,
    no_trailing_lines,
    no_trailing_spaces,
    unix_eol,
    windows_eol,
)

__all__ = [
    "no_tabs",
    "no_trailing_lines",
    "no_trailing_spaces",
    "sort_includes",
    "unix_eol",
    "windows_eol",
]
