"""CLI entrypoint for converting resx bundles into JavaScript localization files."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from .converter import convert
from .loaders import ResxLoadError
from .models import (
    ConverterOptions,
    JsonCasing,
    OutputFormat,
    OverwriteMode,
    Severity,
)

SEVERITY_COLORS = {
    Severity.TRACE: typer.colors.BRIGHT_BLACK,
    Severity.INFO: None,
    Severity.WARNING: typer.colors.YELLOW,
    Severity.ERROR: typer.colors.RED,
}

app = typer.Typer(
    help="Convert .resx resource bundles into JSON files for JavaScript localization frameworks.",
    add_completion=False,
)


@app.command()
def main(
    input_files: Annotated[
        list[Path] | None,
        typer.Option(
            "--input-file",
            "-i",
            help="A .resx file to convert. Can be repeated.",
            dir_okay=False,
            resolve_path=True,
        ),
    ] = None,
    input_folders: Annotated[
        list[Path] | None,
        typer.Option(
            "--input-folder",
            "-d",
            help="A folder to search for .resx files. Can be repeated.",
            file_okay=False,
            dir_okay=True,
            resolve_path=True,
        ),
    ] = None,
    recursive: Annotated[
        bool,
        typer.Option(
            "--recursive",
            "-r",
            help="Search input folders recursively.",
        ),
    ] = False,
    output_file: Annotated[
        Path | None,
        typer.Option(
            "--output-file",
            "-o",
            help="Single output file. Multiple bundles are merged into it.",
            dir_okay=False,
            writable=True,
            resolve_path=True,
        ),
    ] = None,
    output_folder: Annotated[
        Path | None,
        typer.Option(
            "--output-folder",
            "-f",
            help="Destination directory. Defaults to the current directory.",
            file_okay=False,
            dir_okay=True,
            writable=True,
            resolve_path=True,
        ),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            help="Target JavaScript localization framework.",
            case_sensitive=False,
        ),
    ] = OutputFormat.JSON,
    casing: Annotated[
        JsonCasing,
        typer.Option(
            "--casing",
            help="Casing applied to resource keys.",
            case_sensitive=False,
        ),
    ] = JsonCasing.NONE,
    fallback_culture: Annotated[
        str | None,
        typer.Option(
            "--fallback-culture",
            help="Culture used for the base resources (e.g., en). Required for devextreme.",
        ),
    ] = None,
    overwrite: Annotated[
        OverwriteMode,
        typer.Option(
            "--overwrite",
            help="What to do with existing read-only output files.",
            case_sensitive=False,
        ),
    ] = OverwriteMode.SKIP,
    use_fallback: Annotated[
        bool,
        typer.Option(
            "--use-fallback/--no-use-fallback",
            help="Fill missing translations with the base culture values.",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Show trace messages.",
        ),
    ] = False,
) -> None:
    """Convert resx bundles into JSON, RequireJS, i18next or DevExtreme files."""
    if not input_files and not input_folders:
        typer.secho(
            "Error: at least one --input-file or --input-folder is required.",
            fg=typer.colors.RED,
            err=True,
        )
        raise typer.Exit(code=1)

    try:
        options = ConverterOptions(
            output_format=output_format,
            casing=casing,
            fallback_culture=fallback_culture,
            overwrite=overwrite,
            use_fallback_for_missing_translation=use_fallback,
            output_file=output_file,
            output_folder=output_folder,
            recursive=recursive,
            input_files=input_files or [],
            input_folders=input_folders or [],
        )
    except ValidationError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    try:
        logger = convert(options)
    except ResxLoadError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    for entry in logger:
        if entry.severity is Severity.TRACE and not verbose:
            continue
        typer.secho(
            str(entry),
            fg=SEVERITY_COLORS[entry.severity],
            err=entry.severity is Severity.ERROR,
        )

    if logger.has_errors:
        raise typer.Exit(code=1)

    typer.secho(
        "\nConversion finished",
        fg=typer.colors.GREEN,
        bold=True,
    )


if __name__ == "__main__":
    app()
