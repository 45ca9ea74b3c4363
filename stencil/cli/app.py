"""Main CLI application."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from typing_extensions import Annotated

from ..core.errors import ScaffoldCancelled, StencilError
from ..install.npm import npm_install
from ..settings import get_settings
from ..writing.manifest import write_manifest
from ..writing.prompt import FAREWELL, StaticPrompter, TyperPrompter
from .parsers import load_manifest_file, parse_assignment
from .scaffold import ScaffoldFile, collect_answers

logger = logging.getLogger(__name__)

MANIFEST_NAME = "stencil.yaml"

app = typer.Typer(
    name="stencil",
    help="Scaffold a project from a template directory without clobbering existing files.",
)


@app.command()
def scaffold(
    template_dir: Annotated[
        Path,
        typer.Argument(
            help="Template directory containing stencil.yaml.",
            exists=True,
            file_okay=False,
            resolve_path=True,
        ),
    ],
    output_arg: Annotated[
        Optional[Path],
        typer.Argument(metavar="OUTPUT", help="Destination directory (default: cwd)."),
    ] = None,
    output_opt: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Destination directory.", metavar="DIR"),
    ] = None,
    manifest_path: Annotated[
        Optional[Path],
        typer.Option(
            "--manifest",
            help=f"Manifest file (default: TEMPLATE_DIR/{MANIFEST_NAME}).",
            metavar="FILE",
        ),
    ] = None,
    assignments: Annotated[
        list[str],
        typer.Option(
            "--set",
            help="Answer a question up front (format: KEY=VALUE). Repeatable.",
            metavar="KEY=VALUE",
        ),
    ] = [],
    install: Annotated[
        bool,
        typer.Option(
            "--install/--no-install",
            help="Install the template's dependencies after writing.",
        ),
    ] = False,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Overwrite existing files without asking."),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose logging.",
        ),
    ] = False,
) -> None:
    """Write the template's files into OUTPUT."""
    settings = get_settings()

    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level.upper(),
        format="[%(levelname)s] %(message)s",
    )

    logger.debug("Starting stencil")

    output = (output_opt or output_arg or Path.cwd()).resolve()
    flags = dict(map(parse_assignment, assignments))
    flags["output"] = str(output)

    manifest_file = manifest_path or template_dir / MANIFEST_NAME
    try:
        definition = ScaffoldFile.model_validate(load_manifest_file(manifest_file))
    except ValidationError as e:
        raise typer.BadParameter(f"Invalid manifest {manifest_file}: {e}") from e
    logger.debug(f"Manifest: {len(definition.files)} file(s)")

    overwrite_prompter = (
        StaticPrompter(True) if yes or settings.assume_yes else TyperPrompter()
    )

    try:
        answers = collect_answers(definition.questions, flags, TyperPrompter())
        manifest = definition.to_manifest(template_dir, output, answers)
        write_manifest(manifest, answers=answers, prompter=overwrite_prompter)

        if install:
            npm_install(
                output,
                dependencies=definition.dependencies,
                dev_dependencies=definition.dev_dependencies,
                executable=settings.package_manager,
            )
    except ScaffoldCancelled:
        typer.echo(FAREWELL)
        raise typer.Exit(code=0)
    except StencilError as e:
        logger.error(str(e))
        raise typer.Exit(code=1) from e

    logger.debug("Completed")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
