"""Template configuration loading and template compilation."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import TypeAdapter, ValidationError

from ..core.errors import ConfigError
from ..core.models import TemplateDescriptor, TemplateSpec
from ..rendering.engine import EngineError, MustacheEngine, TemplateEngine

logger = logging.getLogger(__name__)

TEMPLATE_EXTENSION = "mustache"

_CONFIG_ADAPTER = TypeAdapter(dict[str, TemplateSpec])


def load_descriptors(config_path: Path) -> list[TemplateDescriptor]:
    """Load the template configuration document.

    The document maps each template name to ``{extension, output}``.

    Args:
        config_path: Path to ``config.yaml``

    Returns:
        Template descriptors sorted by name
    """
    try:
        raw = config_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read template config {config_path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
        specs = _CONFIG_ADAPTER.validate_python(data)
    except (yaml.YAMLError, ValidationError) as e:
        raise ConfigError(
            f"{config_path} must map template names to {{extension, output}}: {e}"
        ) from e

    descriptors = [
        TemplateDescriptor(name=name, **spec.model_dump())
        for name, spec in sorted(specs.items())
    ]
    logger.info(f"Loaded {len(descriptors)} template descriptor(s) from {config_path}")
    return descriptors


class TemplateRegistry:
    """Resolves template descriptors to compiled templates.

    Sources live at ``<templates_dir>/<name>.mustache``. Each template is
    compiled at most once.
    """

    def __init__(
        self, templates_dir: Path, engine: TemplateEngine | None = None
    ) -> None:
        self.templates_dir = templates_dir
        self.engine: TemplateEngine = engine or MustacheEngine()
        self._compiled: dict[str, Any] = {}

    def source_path(self, name: str) -> Path:
        return self.templates_dir / f"{name}.{TEMPLATE_EXTENSION}"

    def compile(self, descriptor: TemplateDescriptor) -> Any:
        if descriptor.name in self._compiled:
            return self._compiled[descriptor.name]

        path = self.source_path(descriptor.name)
        logger.debug(f"Compiling template {descriptor.name!r} from {path}")
        try:
            template = self.engine.compile(path)
        except EngineError as e:
            raise ConfigError(
                f"Template {descriptor.name!r} listed in the config: {e}"
            ) from e

        self._compiled[descriptor.name] = template
        return template
