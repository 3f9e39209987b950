"""Error taxonomy for the theme builder."""

from __future__ import annotations

from pathlib import Path


class BuilderError(Exception):
    """Base class for every fatal error raised while building themes."""


class ConfigError(BuilderError):
    """Raised when configuration, scheme layout or template sources are invalid."""


class ParseError(BuilderError):
    """Raised when a scheme file does not match the expected shape."""

    def __init__(self, path: Path, cause: Exception) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to parse scheme {path}: {cause}")


class OutputExistsError(BuilderError):
    """Raised when an output file already exists and overwriting is disabled."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(
            f"Output file already exists: {path} (use --overwrite to replace it)"
        )


class OutputIOError(BuilderError):
    """Raised when an output directory or file cannot be created or written."""

    def __init__(self, path: Path, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to write {path}: {cause}")


class RenderError(BuilderError):
    """Raised when the template engine cannot render a scheme."""

    def __init__(self, template: str, scheme: str, cause: Exception) -> None:
        self.template = template
        self.scheme = scheme
        self.cause = cause
        super().__init__(
            f"Failed to render template {template!r} with scheme {scheme!r}: {cause}"
        )
