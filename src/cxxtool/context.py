"""Processing context: config, registry and the per-file pipeline.

The run:
1. Validate the configuration and resolve the enabled tools once
2. Walk the source root for C/C++/Objective-C sources and headers
3. Feed each file's text through every enabled tool in order
4. Write the files whose text changed (unless in test mode)

The first error aborts the run; files written before it stay written.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, field
from typing import Any, Iterator, Mapping

from cxxtool import VERSION
from cxxtool.config import normalize_config
from cxxtool.files import SourceFile, list_dir
from cxxtool.registry import GENERATOR, SANITIZER, Registry, Tool, build_registry
from cxxtool.text import is_cxx_header_file, is_cxx_source_file

logger = logging.getLogger(__name__)


@dataclass
class RunOptions:
    """Which kinds of tools run, and whether results are written."""

    purge: bool = False
    generate: bool = False
    sanitize: bool = False
    test: bool = False
    verbose: bool = False


@dataclass
class RunResult:
    """Result of a processing run."""

    processed: list[str] = field(default_factory=list)
    modified: list[str] = field(default_factory=list)
    written: list[str] = field(default_factory=list)
    ops: dict[str, list[str]] = field(default_factory=dict)


def is_cxx_file(name: str) -> bool:
    return is_cxx_source_file(name) or is_cxx_header_file(name)


class Context:
    """Everything a tool can see while processing one file."""

    def __init__(
        self,
        config: Mapping[str, Any],
        options: RunOptions | None = None,
        registry: Registry | None = None,
    ) -> None:
        self.config = normalize_config(config)
        self.options = options or RunOptions()
        self.registry = registry or build_registry()
        self.pipeline = self.registry.pipeline(self.config["tools"])

    def is_active(self, tool: Tool) -> bool:
        if tool.kind == GENERATOR:
            return self.options.generate
        if tool.kind == SANITIZER:
            return self.options.sanitize
        return False

    def active_tools(self) -> Iterator[tuple[Tool, dict]]:
        for tool, options in self.pipeline:
            if self.is_active(tool):
                yield tool, options

    def process_text(self, text: str) -> tuple[str, list[str]]:
        """Run the pipeline over ``text``; return the result and the tools that changed it."""
        ops: list[str] = []
        for tool, options in self.active_tools():
            result = tool.process(self, text, options)
            if result is not text:
                text = result
                ops.append(tool.name)
        return text, ops

    def process_file(self, file: SourceFile) -> SourceFile:
        data, ops = self.process_text(file.data)
        return file.set_data(data, *ops)

    def run(self) -> RunResult:
        """Process every source and header file under ``config['source']``."""
        logger.debug(
            "cxxtool v%s\noptions: %s\nconfig: %s",
            VERSION,
            json.dumps(asdict(self.options), indent=2),
            json.dumps(self.config, indent=2, default=str),
        )

        result = RunResult()
        files = list_dir(self.config["source"], self.config["exclude"], is_cxx_file)

        for file in files:
            file.read()
            self.process_file(file)
            result.processed.append(file.rel_name)

            if not file.is_modified:
                logger.debug("%s: Not modified", file.rel_name)
                continue

            result.modified.append(file.rel_name)
            result.ops[file.rel_name] = list(file.ops)
            for op in file.ops:
                logger.info("%s: %s", file.rel_name, op)

            if self.options.test:
                logger.info("%s: Modified - test-mode (--test)", file.rel_name)
            else:
                logger.info("%s: Modified - writing...", file.rel_name)
                file.write()
                result.written.append(file.rel_name)

        return result
