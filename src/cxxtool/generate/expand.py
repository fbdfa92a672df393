"""Expand template and generator markers in a document."""

from __future__ import annotations

import logging
import re
from typing import Any

from cxxtool.exceptions import MarkerError, UnknownReferenceError
from cxxtool.generate.functions import parse_generators
from cxxtool.text import apply_indentation, inject, substitute_variables

logger = logging.getLogger(__name__)

MARKER_RE = re.compile(r"//\s*\[@(\w+[{}]?)@\][ \t]*\r?\n")


def open_sentinel(tid: str) -> str:
    return "// [@" + tid + "{@]"


def close_sentinel(tid: str) -> str:
    return "// [@" + tid + "}@]"


def _resolve(ctx: Any, tid: str, generators: dict) -> str:
    """Return the raw content for marker ``tid``."""
    templates = ctx.registry.templates
    if tid in templates:
        return substitute_variables(templates[tid].body, ctx.config)
    if tid in generators:
        return generators[tid]()
    raise UnknownReferenceError(
        f"Unknown template/generator @{tid}@ used.",
        context={"id": tid},
    )


def expand_templates(ctx: Any, text: str, options: dict) -> str:
    """Expand every marker of ``text``, first to last.

    A plain marker ``// [@ID@]`` is replaced by the wrapped content; a
    refresh pair ``// [@ID{@]`` ... ``// [@ID}@]`` is replaced as a whole.
    The wrapped block is indented like the marker. In purge mode only the
    empty sentinel pair is left.

    Raises:
        MarkerError: On a refresh marker without its close marker, or a
            close marker without an open one.
        UnknownReferenceError: If an id is neither a registered template nor
            a generator embedded in ``text``.
    """
    purge = ctx.options.purge
    generators = parse_generators(text)
    original = text
    cursor = 0

    while True:
        match = MARKER_RE.search(text, cursor)
        if not match:
            break

        tid = match.group(1)
        start = match.start()
        end = match.end()

        while start > 0 and text[start - 1] == " ":
            start -= 1
        indentation = " " * (match.start() - start)

        if tid.endswith("}"):
            raise MarkerError(
                f"Found end mark @{tid}@ without its begin mark @{tid[:-1]}{{@",
                context={"id": tid[:-1]},
            )

        if tid.endswith("{"):
            tid = tid[:-1]
            close = MARKER_RE.search(text, end)
            if not close or close.group(1) != tid + "}":
                raise MarkerError(
                    f"Couldn't find end mark of template @{tid}{{@",
                    context={"id": tid},
                )
            end = close.end()

        content = ""
        if not purge:
            content = apply_indentation(_resolve(ctx, tid, generators), indentation)
            if content and not content.endswith("\n"):
                content += "\n"

        replacement = (
            indentation + open_sentinel(tid) + "\n"
            + content
            + indentation + close_sentinel(tid) + "\n"
        )

        old_length = len(text)
        text = inject(text, start, end, replacement)
        cursor = end + len(text) - old_length
        logger.debug("Expanded @%s@ at offset %d", tid, start)

    return original if text == original else text
