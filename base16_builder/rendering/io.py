"""File I/O operations for rendering."""

from __future__ import annotations

from pathlib import Path
from typing import TextIO

from ..core.errors import OutputExistsError, OutputIOError

OUTPUT_PREFIX = "base16"


def output_path(
    output_dir: Path, template_name: str, scheme_name: str, extension: str
) -> Path:
    """Build the path of a generated theme file.

    Args:
        output_dir: Directory configured for the template
        template_name: Template name
        scheme_name: Scheme name
        extension: Output file extension without the dot

    Returns:
        ``<output_dir>/base16-<template>-<scheme>.<extension>``
    """
    return output_dir / f"{OUTPUT_PREFIX}-{template_name}-{scheme_name}.{extension}"


def ensure_parent(path: Path) -> None:
    """Ensure parent directories exist for the given path.

    Args:
        path: Path whose parent directories should be created
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputIOError(path.parent, e) from e


def open_output(path: Path, *, overwrite: bool) -> TextIO:
    """Open an output file for writing.

    Args:
        path: Destination file path
        overwrite: Truncate an existing file instead of failing

    Returns:
        Text handle opened for writing (UTF-8)

    Raises:
        OutputExistsError: If the file exists and ``overwrite`` is false
        OutputIOError: If the file cannot be opened
    """
    mode = "w" if overwrite else "x"
    try:
        return path.open(mode, encoding="utf-8", newline="")
    except FileExistsError as e:
        raise OutputExistsError(path) from e
    except OSError as e:
        raise OutputIOError(path, e) from e
