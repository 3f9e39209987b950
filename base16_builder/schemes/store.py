"""Loading of scheme definitions from a directory of YAML files."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from ..core.errors import ConfigError, ParseError
from ..core.models import Palette, Scheme

logger = logging.getLogger(__name__)

SCHEME_EXTENSION = "yaml"


def split_scheme_file_name(file_name: str) -> tuple[str, str]:
    """Split a scheme file name into its scheme name and extension.

    Args:
        file_name: Base name of the scheme file, e.g. ``nord.yaml``

    Returns:
        Tuple of (scheme name, extension)

    Raises:
        ConfigError: If the name has no extension or the extension is not ``yaml``
    """
    if "." not in file_name:
        raise ConfigError(f"Invalid scheme file name: {file_name!r}")
    name, extension = file_name.split(".", 1)
    if extension != SCHEME_EXTENSION:
        raise ConfigError(
            f"Unsupported scheme file extension in {file_name!r}: "
            f"scheme files must have a '.{SCHEME_EXTENSION}' extension"
        )
    return name, extension


def parse_scheme(path: Path, name: str) -> Scheme:
    """Read and validate a single scheme file.

    Args:
        path: Scheme file path
        name: Scheme name derived from the file name

    Returns:
        Validated scheme

    Raises:
        ConfigError: If the file cannot be read
        ParseError: If the content is not a valid scheme document
    """
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Failed to read scheme file {path}: {e}") from e

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ParseError(path, e) from e

    if not isinstance(data, dict):
        raise ParseError(path, TypeError("scheme document must be a mapping"))

    try:
        palette = Palette.model_validate(data)
    except ValidationError as e:
        raise ParseError(path, e) from e

    return Scheme(name=name, **palette.model_dump())


def load_schemes(directory: Path) -> dict[str, Scheme]:
    """Load every scheme in a directory.

    Entries are visited in file name order. Anything that is not a regular
    file is skipped. A later scheme with the same name replaces an earlier one.

    Args:
        directory: Directory containing ``<name>.yaml`` scheme files

    Returns:
        Mapping from scheme name to scheme
    """
    logger.debug(f"Loading schemes from {directory}")

    try:
        entries = sorted(directory.iterdir(), key=lambda entry: entry.name)
    except OSError as e:
        raise ConfigError(f"Cannot read scheme directory {directory}: {e}") from e

    schemes: dict[str, Scheme] = {}
    for path in entries:
        if not path.is_file():
            continue

        name, _ = split_scheme_file_name(path.name)
        if name in schemes:
            logger.warning(f"Scheme {name!r} redefined by {path}")
        schemes[name] = parse_scheme(path, name)
        logger.debug(f"Loaded scheme {name!r} ({schemes[name].display_name})")

    logger.info(f"Loaded {len(schemes)} scheme(s)")
    return schemes
