"""Conversion pipeline from resx bundles to JavaScript localization files."""

from __future__ import annotations

from .formatters import UnknownOutputFormatError, get_formatter
from .io import write_output
from .loaders import discover_bundles, load_bundles
from .logger import ConverterLogger
from .models import INVARIANT_CULTURE, ConverterOptions, ResourceBundle
from .processing import (
    build_output_path,
    generate_json_resources,
    merge_bundles,
    resolve_output_target,
)


def collect_bundles(
    options: ConverterOptions, logger: ConverterLogger
) -> dict[str, ResourceBundle]:
    """Load bundles from input files, then from input folders.

    A folder bundle replaces a file bundle with the same base name.
    """
    bundles: dict[str, ResourceBundle] = {}
    if options.input_files:
        bundles.update(load_bundles(options.input_files, logger))
    if options.input_folders:
        bundles.update(
            discover_bundles(options.input_folders, options.recursive, logger)
        )
    return bundles


def convert(options: ConverterOptions) -> ConverterLogger:
    """Convert the configured resx bundles and return the run's diagnostics.

    Configuration problems are reported as error entries before anything is
    read or written. A read-only target under the skip policy is reported and
    skipped without stopping the run.
    """
    logger = ConverterLogger()

    try:
        formatter = get_formatter(options.output_format)
    except UnknownOutputFormatError as e:
        logger.error(str(e))
        return logger
    logger.info(f"Formatter {type(formatter).__name__} is used.")

    ok, message = formatter.check_options(options)
    if not ok:
        logger.error(message)
        return logger

    bundles = collect_bundles(options, logger)
    if not bundles:
        logger.warning("No resx files were found")
        return logger
    logger.trace(f"Found {len(bundles)} resx bundles")

    if len(bundles) > 1 and options.output_file:
        merged = merge_bundles(bundles.values(), options.output_file.stem)
        logger.trace(
            "As 'outputFile' option was specified all bundles were merged "
            f"into single bundle '{merged.base_name}'"
        )
        bundles = {merged.base_name: merged}

    written = 0
    for bundle in bundles.values():
        json_resources = generate_json_resources(formatter, bundle, options)
        base_dir, base_file_name = resolve_output_target(bundle, formatter, options)
        logger.trace(
            f"Processing '{bundle.base_name}' bundle "
            f"(contains {len(bundle.cultures)} resx files)"
        )

        documents = [(INVARIANT_CULTURE, json_resources.base_resources)]
        documents.extend(json_resources.localized_resources.items())
        for culture, document in documents:
            output_path = build_output_path(
                formatter, base_dir, base_file_name, culture, options
            )
            content = formatter.get_file_content(document, options)
            written += write_output(output_path, content, options.overwrite, logger)

    logger.trace(f"Wrote {written} files")
    return logger
