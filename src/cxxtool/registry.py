"""Tool and template registry.

The registry is built once per process: the built-in sanitizers,
generators and templates, plus whatever a caller adds, then frozen and
handed to every :class:`~cxxtool.context.Context` that needs it.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Iterable, Mapping

from cxxtool import catalog
from cxxtool.exceptions import RegistryError
from cxxtool.generate import expand_templates
from cxxtool.sanitize import (
    no_tabs,
    no_trailing_lines,
    no_trailing_spaces,
    sort_includes,
    unix_eol,
    windows_eol,
)
from cxxtool.text import remove_indentation, remove_lines

SANITIZER = "sanitizer"
GENERATOR = "generator"
TOOL_KINDS = (SANITIZER, GENERATOR)

Process = Callable[[Any, str, dict], str]


@dataclass(frozen=True)
class Tool:
    """A sanitizer or generator applied to a whole document."""

    name: str
    kind: str
    process: Process
    order: int = 0
    purpose: str = ""


@dataclass(frozen=True)
class Template:
    """A named block of boilerplate with ``@name@`` variables."""

    name: str
    body: str
    requires: tuple[str, ...] = ()
    purpose: str = ""


BUILTIN_TOOLS = (
    Tool("NoTabs", SANITIZER, no_tabs, order=-9,
         purpose="Replace tabs with indentSize spaces"),
    Tool("NoTrailingSpaces", SANITIZER, no_trailing_spaces, order=-8,
         purpose="Strip spaces and tabs at the end of lines"),
    Tool("NoTrailingLines", SANITIZER, no_trailing_lines, order=-7,
         purpose="Collapse blank lines at the end of the file"),
    Tool("UnixEOL", SANITIZER, unix_eol, order=9,
         purpose="Use \\n line endings"),
    Tool("WindowsEOL", SANITIZER, windows_eol, order=9,
         purpose="Use \\r\\n line endings"),
    Tool("SortIncludes", SANITIZER, sort_includes,
         purpose="Sort blocks of adjacent #include lines"),
    Tool("ExpandTemplates", GENERATOR, expand_templates,
         purpose="Expand // [@ID@] markers with templates and embedded generators"),
)


class Registry:
    """Named tools and templates, keyed by unique name."""

    def __init__(self) -> None:
        self._tools: dict[str, Tool] = {}
        self._templates: dict[str, Template] = {}
        self._frozen = False

    def _check_open(self, what: str, name: str) -> None:
        if self._frozen:
            raise RegistryError(
                f"Cannot add {what} '{name}': the registry is frozen",
                context={"name": name},
            )

    def add_tool(self, tool: Tool) -> Registry:
        self._check_open("tool", tool.name)
        if tool.name in self._tools:
            raise RegistryError(f"Tool '{tool.name}' already exists", context={"name": tool.name})
        if tool.kind not in TOOL_KINDS:
            raise RegistryError(
                f"Tool '{tool.name}' has invalid kind '{tool.kind}'",
                context={"name": tool.name},
            )
        self._tools[tool.name] = tool
        return self

    def add_template(
        self,
        name: str,
        body: str,
        requires: Iterable[str] = (),
        purpose: str = "",
    ) -> Registry:
        """Register template ``name``, normalizing its body and purpose."""
        self._check_open("template", name)
        if name in self._templates:
            raise RegistryError(f"Template '{name}' already exists", context={"name": name})
        self._templates[name] = Template(
            name=name,
            body=remove_lines(remove_indentation(body or "")),
            requires=tuple(requires),
            purpose=remove_lines(remove_indentation(purpose)).strip() if purpose else "",
        )
        return self

    def freeze(self) -> Registry:
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def tools(self) -> Mapping[str, Tool]:
        return MappingProxyType(self._tools)

    @property
    def templates(self) -> Mapping[str, Template]:
        return MappingProxyType(self._templates)

    def tool(self, name: str) -> Tool:
        try:
            return self._tools[name]
        except KeyError:
            raise RegistryError(f"Couldn't find a tool '{name}'.", context={"name": name}) from None

    def pipeline(self, selection: Mapping[str, Any]) -> list[tuple[Tool, dict]]:
        """Resolve a ``tools`` config mapping into ordered ``(tool, options)`` pairs.

        A value of ``True`` enables a tool with empty options, a mapping
        enables it with those options, and ``False``/``None`` disables it.
        Tools run by ascending ``order``; equal orders keep registration order.

        Raises:
            RegistryError: If ``selection`` names an unknown tool.
        """
        position = {name: i for i, name in enumerate(self._tools)}
        enabled: list[tuple[Tool, dict]] = []

        for name, value in selection.items():
            tool = self.tool(name)
            if value is None or value is False:
                continue
            if value is True:
                options: dict = {}
            elif isinstance(value, Mapping):
                options = dict(value)
            else:
                raise RegistryError(
                    f"Tool '{name}': options have to be true, false or a mapping",
                    context={"name": name},
                )
            enabled.append((tool, options))

        enabled.sort(key=lambda pair: (pair[0].order, position[pair[0].name]))
        return enabled


def build_registry(
    extra_tools: Iterable[Tool] = (),
    extra_templates: Iterable[Template] = (),
) -> Registry:
    """Build the frozen registry of built-ins plus caller extensions."""
    registry = Registry()

    for tool in BUILTIN_TOOLS:
        registry.add_tool(tool)
    for name, entry in catalog.TEMPLATES.items():
        registry.add_template(
            name,
            entry["template"],
            requires=entry.get("requires", ()),
            purpose=entry.get("purpose", ""),
        )

    for tool in extra_tools:
        registry.add_tool(tool)
    for template in extra_templates:
        registry.add_template(template.name, template.body, template.requires, template.purpose)

    return registry.freeze()
