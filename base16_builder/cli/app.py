"""Main CLI application."""

from __future__ import annotations

import logging

import typer
from typing_extensions import Annotated

from .. import __version__
from ..core.errors import BuilderError
from ..rendering import pipeline
from ..schemes.store import load_schemes
from ..settings import Settings
from ..templates.registry import TemplateRegistry, load_descriptors

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="base16-builder",
    help="Build application themes from base16 schemes.",
    add_completion=False,
)


def _print_version(value: bool) -> None:
    if value:
        typer.echo(f"base16-builder {__version__}")
        raise typer.Exit()


@app.command()
def build(
    overwrite: Annotated[
        bool,
        typer.Option(
            "--overwrite",
            "-o",
            help="Overwrite files already existing in the target theme path.",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose logging.",
        ),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_print_version,
            is_eager=True,
            help="Show the version and exit.",
        ),
    ] = False,
) -> None:
    """Build themes from base16 schemes.

    \b
    A templates directory with a config.yaml of the following format is
    required:

    \b
        <TEMPLATE_NAME>:
            extension: <FILE_EXTENSION>
            output: <OUTPUT_DIR>

    \b
    For each template in config.yaml a <TEMPLATE_NAME>.mustache must exist
    in the templates directory. Alongside it, a schemes directory holds the
    schemes as .yaml files:

    \b
        scheme: <SCHEME_NAME>
        author: <AUTHOR>
        base00: <HEX_WITHOUT_HASH>
        ...
        base0F: <HEX_WITHOUT_HASH>

    \b
    For each template, one theme is written per scheme to
    <OUTPUT_DIR>/base16-<TEMPLATE_NAME>-<SCHEME_NAME>.<FILE_EXTENSION>.
    """
    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )

    settings = Settings()
    logger.debug(f"Settings: {settings!r}")

    try:
        schemes = load_schemes(settings.schemes_dir)
        descriptors = load_descriptors(settings.config_path)
        registry = TemplateRegistry(settings.templates_dir)
        outputs = pipeline.render_all(
            schemes,
            descriptors,
            registry,
            overwrite=overwrite,
            output_root=settings.output_root,
        )
    except BuilderError as e:
        logger.error(str(e))
        raise typer.Exit(code=1) from e

    logger.debug(f"Completed: {len(outputs)} file(s) rendered")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
