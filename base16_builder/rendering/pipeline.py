"""Cross-product rendering of templates and schemes."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from ..core.errors import OutputIOError, RenderError
from ..core.models import Scheme, TemplateDescriptor
from ..templates.registry import TemplateRegistry
from .engine import EngineError
from .io import ensure_parent, open_output, output_path

logger = logging.getLogger(__name__)


def render_scheme(
    registry: TemplateRegistry,
    template: Any,
    descriptor: TemplateDescriptor,
    scheme: Scheme,
    path: Path,
    *,
    overwrite: bool,
) -> None:
    """Render one scheme through one compiled template into ``path``.

    The file is opened before rendering; a render failure leaves the opened
    file on disk.
    """
    ensure_parent(path)
    with open_output(path, overwrite=overwrite) as handle:
        try:
            text = registry.engine.render(template, scheme.bindings())
        except EngineError as e:
            raise RenderError(descriptor.name, scheme.name, e) from e
        try:
            handle.write(text)
        except OSError as e:
            raise OutputIOError(path, e) from e


def render_all(
    schemes: Mapping[str, Scheme],
    descriptors: Iterable[TemplateDescriptor],
    registry: TemplateRegistry,
    *,
    overwrite: bool = False,
    output_root: Path = Path("."),
) -> list[Path]:
    """Render every (template, scheme) pair.

    Args:
        schemes: Schemes keyed by name
        descriptors: Template descriptors, in generation order
        registry: Registry used to compile each template
        overwrite: Replace existing output files instead of failing
        output_root: Base directory for the descriptors' output directories

    Returns:
        List of output file paths, in generation order
    """
    outputs: list[Path] = []

    for descriptor in descriptors:
        template = registry.compile(descriptor)
        output_dir = output_root / descriptor.output

        for name, scheme in schemes.items():
            path = output_path(output_dir, descriptor.name, name, descriptor.extension)
            logger.debug(f"Rendering {descriptor.name!r} x {name!r} → {path}")
            render_scheme(
                registry, template, descriptor, scheme, path, overwrite=overwrite
            )
            outputs.append(path)

        logger.info(
            f"Rendered template {descriptor.name!r} for {len(schemes)} scheme(s) "
            f"into {output_dir}"
        )

    logger.info(f"Successfully rendered {len(outputs)} file(s)")
    return outputs
