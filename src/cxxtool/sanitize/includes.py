"""Sort blocks of adjacent ``#include`` lines."""

from __future__ import annotations

from typing import Any

from cxxtool.exceptions import IncludeSortError
from cxxtool.text import inject

INCLUDE_DIRECTIVE = "#include"


def sort_includes(ctx: Any, text: str, options: dict) -> str:
    """Sort every run of two or more adjacent ``#include`` lines.

    A line belongs to a run when the directive starts at column 0. Lines
    are compared by code point without their ``\\r``, and line breaks stay
    where they were, so a sorted block has exactly the original length.
    """
    lines = text.split("\n")

    offsets = []
    offset = 0
    for line in lines:
        offsets.append(offset)
        offset += len(line) + 1

    i = 0
    while i < len(lines):
        if not lines[i].startswith(INCLUDE_DIRECTIVE):
            i += 1
            continue

        j = i + 1
        while j < len(lines) and lines[j].startswith(INCLUDE_DIRECTIVE):
            j += 1

        block = lines[i:j]
        # Sort on the directive text; each position keeps its own "\r".
        bodies = [line[:-1] if line.endswith("\r") else line for line in block]
        endings = [line[len(body):] for line, body in zip(block, bodies)]
        ordered = sorted(bodies)
        if len(block) > 1 and ordered != bodies:
            start = offsets[i]
            end = offsets[j - 1] + len(lines[j - 1])
            replacement = "\n".join(body + eol for body, eol in zip(ordered, endings))
            if len(replacement) != end - start:
                raise IncludeSortError(
                    f"Sorted include block at offset {start} changed length "
                    f"({end - start} -> {len(replacement)})",
                    context={"start": start, "end": end},
                )
            text = inject(text, start, end, replacement)
        i = j

    return text
