"""Extract generator functions embedded in source comments.

A generator is written as a fenced block of ``//`` comments::

    // [%MAX_PATH% {
    //   return 256 * 2
    // }%]

The comment payloads form the body of a Python function that receives the
``lang`` and ``text`` helper modules. A marker ``// [@MAX_PATH@]`` elsewhere
in the same file expands to the function's result.
"""

from __future__ import annotations

import builtins
import logging
import re
from typing import Callable

from cxxtool import lang as lang_module
from cxxtool import text as text_module
from cxxtool.exceptions import GeneratorError
from cxxtool.text import apply_indentation, parse_cxx_comment, remove_indentation

logger = logging.getLogger(__name__)

GENERATOR_OPEN_RE = re.compile(r"//\s*\[%(\w+)%\s*\{[ \t]*(?:\r?\n|\Z)")
GENERATOR_CLOSE_RE = re.compile(r"\s*//\s*\}%\]\s*")

_FUNCTION_NAME = "__generator__"

# The only builtins visible to embedded generators. This narrows what a
# generator can reach; it is not a security boundary.
SAFE_BUILTINS = {
    name: getattr(builtins, name)
    for name in (
        "abs", "all", "any", "bin", "bool", "chr", "dict", "divmod",
        "enumerate", "filter", "float", "format", "hex", "int", "isinstance",
        "len", "list", "map", "max", "min", "oct", "ord", "pow", "range",
        "repr", "reversed", "round", "set", "sorted", "str", "sum", "tuple",
        "zip", "Exception", "KeyError", "TypeError", "ValueError",
    )
}


def _collect_body(text: str, gid: str, pos: int) -> tuple[str, int]:
    """Read comment lines from ``pos`` up to the close fence.

    Returns the function body and the offset just past the close fence.
    """
    parts: list[str] = []
    while True:
        comment = parse_cxx_comment(text, pos)
        if comment is None:
            raise GeneratorError(
                f"Generator '{gid}' is invalid, unable to find the end mark \"}}%]\".",
                context={"generator": gid},
            )
        pos += len(comment)
        if GENERATOR_CLOSE_RE.fullmatch(comment):
            return "".join(parts), pos
        parts.append(comment[comment.index("//") + 2:])


def compile_generator(gid: str, body: str) -> Callable[[], str]:
    """Compile ``body`` into a zero-argument callable returning a string."""
    source = (
        f"def {_FUNCTION_NAME}(lang, text):\n"
        + apply_indentation(remove_indentation(body), "    ")
        + "\n"
    )
    namespace: dict = {"__builtins__": SAFE_BUILTINS}
    try:
        code = compile(source, f"<generator {gid}>", "exec")
        exec(code, namespace)
    except SyntaxError as exc:
        raise GeneratorError(
            f"Generator '{gid}' failed to compile:\n{body}\nError: {exc}",
            context={"generator": gid, "body": body},
        ) from exc

    fn = namespace[_FUNCTION_NAME]

    def generate() -> str:
        try:
            result = fn(lang_module, text_module)
        except Exception as exc:
            raise GeneratorError(
                f"Generator '{gid}' failed: {exc}",
                context={"generator": gid, "body": body},
            ) from exc
        if isinstance(result, (list, tuple)):
            return ", ".join(str(item) for item in result)
        return str(result)

    generate.__name__ = gid
    return generate


def parse_generators(text: str) -> dict[str, Callable[[], str]]:
    """Find every fenced generator in ``text`` and compile it.

    Raises:
        GeneratorError: On a duplicate id, a missing close fence or a body
            that does not compile.
    """
    generators: dict[str, Callable[[], str]] = {}
    pos = 0

    while True:
        match = GENERATOR_OPEN_RE.search(text, pos)
        if not match:
            break

        gid = match.group(1)
        if gid in generators:
            raise GeneratorError(
                f"Function generator '{gid}' has been already defined.",
                context={"generator": gid},
            )

        body, pos = _collect_body(text, gid, match.end())
        generators[gid] = compile_generator(gid, body)
        logger.debug("Compiled embedded generator %s", gid)

    return generators
