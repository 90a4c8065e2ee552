"""Resource processing: key casing, JSON generation and output paths."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from .formatters import JsonDocument, ResxToJsonFormatter
from .models import (
    INVARIANT_CULTURE,
    ConverterOptions,
    Culture,
    JsonCasing,
    ResourceBundle,
)


@dataclass(slots=True)
class JsonResources:
    base_resources: JsonDocument
    localized_resources: dict[Culture, JsonDocument] = field(default_factory=dict)


def apply_casing(key: str, casing: JsonCasing) -> str:
    """Apply a casing policy to a resource key."""
    if not key:
        return key
    if casing == JsonCasing.CAMEL:
        return key[0].lower() + key[1:]
    if casing == JsonCasing.LOWER:
        return key.lower()
    return key


def convert_values(values: dict[str, str], casing: JsonCasing) -> JsonDocument:
    return {apply_casing(key, casing): value for key, value in values.items()}


def generate_json_resources(
    formatter: ResxToJsonFormatter,
    bundle: ResourceBundle,
    options: ConverterOptions,
) -> JsonResources:
    """Build the invariant and per-culture JSON documents of a bundle.

    With ``use_fallback_for_missing_translation`` every culture document
    also receives the base values for keys it does not translate.
    """
    base_values = bundle.get_values(INVARIANT_CULTURE)
    base_json = convert_values(base_values, options.casing)
    result = JsonResources(
        base_resources=formatter.get_json_resource(
            base_json, INVARIANT_CULTURE, bundle, options
        )
    )

    for culture in bundle.cultures:
        if culture.is_invariant:
            continue
        values = bundle.get_values(culture)
        if options.use_fallback_for_missing_translation:
            for key, value in base_values.items():
                values.setdefault(key, value)
        culture_json = convert_values(values, options.casing)
        result.localized_resources[culture] = formatter.get_json_resource(
            culture_json, culture, bundle, options
        )
    return result


def merge_bundles(bundles: Iterable[ResourceBundle], base_name: str) -> ResourceBundle:
    """Fold ``bundles`` into a new bundle called ``base_name``."""
    merged = ResourceBundle(base_name=base_name)
    for bundle in bundles:
        merged.merge_with(bundle)
    return merged


def resolve_output_target(
    bundle: ResourceBundle,
    formatter: ResxToJsonFormatter,
    options: ConverterOptions,
) -> tuple[Path, str]:
    """Return the base output directory and base file name for a bundle."""
    if options.output_file:
        base_dir = options.output_file.parent
        base_file_name = options.output_file.name
    else:
        base_dir = options.resolve_output_folder()
        base_file_name = bundle.base_name.lower() + formatter.output_file_extension
    if base_dir == Path():
        base_dir = Path.cwd()
    return base_dir, base_file_name


def build_output_path(
    formatter: ResxToJsonFormatter,
    base_dir: Path,
    base_file_name: str,
    culture: Culture,
    options: ConverterOptions,
) -> Path:
    directory = formatter.get_base_output_directory(base_dir, culture, options)
    return directory / formatter.get_language_file_name(
        base_file_name, culture, options
    )
