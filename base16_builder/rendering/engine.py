"""Template engine used to render scheme bindings."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Protocol

import pystache
from pystache.common import MissingTags, PystacheError
from pystache.parsed import ParsedTemplate
from pystache.parser import ParsingError


class EngineError(Exception):
    """Raised by a template engine when a template cannot be compiled or rendered."""


class TemplateEngine(Protocol):
    """Capability needed by the registry and the render pipeline."""

    def compile(self, path: Path) -> Any: ...

    def render(self, template: Any, bindings: dict[str, Any]) -> str: ...


@dataclass(frozen=True)
class MustacheTemplate:
    """A parsed Mustache source and the file it was read from."""

    path: Path
    parsed: ParsedTemplate


class MustacheEngine:
    """Mustache engine backed by pystache.

    Variables that are not bound raise instead of rendering as empty text.
    Partials (``{{> name}}``) are looked up next to the including template.
    """

    def compile(self, path: Path) -> MustacheTemplate:
        """Read and parse a Mustache template.

        Args:
            path: Template file path

        Returns:
            Parsed template
        """
        try:
            source = path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise EngineError(f"Template not found: {path}") from e
        except UnicodeDecodeError as e:
            raise EngineError(f"Template is not UTF-8 encoded: {path}") from e
        except OSError as e:
            raise EngineError(f"Cannot read template {path}: {e}") from e

        try:
            parsed = pystache.parse(source)
        except ParsingError as e:
            raise EngineError(f"Invalid Mustache syntax in {path}: {e}") from e

        return MustacheTemplate(path=path, parsed=parsed)

    def render(self, template: MustacheTemplate, bindings: dict[str, Any]) -> str:
        renderer = pystache.Renderer(
            missing_tags=MissingTags.strict,
            search_dirs=[str(template.path.parent)],
            file_encoding="utf-8",
            string_encoding="utf-8",
        )
        try:
            return renderer.render(template.parsed, bindings)
        except (PystacheError, ParsingError) as e:
            raise EngineError(str(e)) from e
