"""Loaders for .resx resource files."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from collections.abc import Iterable
from pathlib import Path

from .logger import ConverterLogger
from .models import INVARIANT_CULTURE, Culture, ResourceBundle

RESX_EXTENSION = ".resx"


class ResxLoadError(Exception):
    """Raised when a .resx file cannot be parsed."""


def parse_resx(path: Path) -> dict[str, str]:
    """Parse the string resources of a .resx file, in document order.

    Raises:
        ResxLoadError: If the file is not well-formed XML.
    """
    try:
        root = ET.parse(path).getroot()
    except ET.ParseError as e:
        raise ResxLoadError(f"Failed to parse resx file '{path}': {e}") from e

    values: dict[str, str] = {}
    for data in root.iter("data"):
        name = data.get("name")
        # typed entries are embedded files or images
        if not name or data.get("type") or data.get("mimetype"):
            continue
        value = data.find("value")
        text = value.text if value is not None and value.text else ""
        values[name] = text
    return values


def split_resource_name(path: Path) -> tuple[str, Culture]:
    """Split ``Name.fr-FR.resx`` into its base name and culture."""
    stem = path.stem
    base_name, dot, suffix = stem.rpartition(".")
    culture = Culture.try_parse(suffix) if dot and base_name and suffix else None
    if culture is not None:
        return base_name, culture
    return stem, INVARIANT_CULTURE


def load_bundles(
    files: Iterable[Path], logger: ConverterLogger
) -> dict[str, ResourceBundle]:
    """Group resx files by base name into resource bundles."""
    bundles: dict[str, ResourceBundle] = {}
    for path in files:
        if not path.is_file():
            logger.warning(f"File {path} does not exist, skipping")
            continue
        if path.suffix.lower() != RESX_EXTENSION:
            logger.trace(f"Ignoring {path}: not a resx file")
            continue

        base_name, culture = split_resource_name(path)
        values = parse_resx(path)
        bundle = bundles.get(base_name)
        if bundle is None:
            bundle = bundles[base_name] = ResourceBundle(base_name=base_name)
        bundle.add_values(culture, values)
        logger.trace(
            f"Loaded {len(values)} resources from {path} "
            f"(culture: '{culture.name or 'invariant'}')"
        )
    return bundles


def discover_bundles(
    folders: Iterable[Path], recursive: bool, logger: ConverterLogger
) -> dict[str, ResourceBundle]:
    """Find every resx file under ``folders`` and load them as bundles."""
    pattern = f"**/*{RESX_EXTENSION}" if recursive else f"*{RESX_EXTENSION}"
    files: list[Path] = []
    for folder in folders:
        if not folder.is_dir():
            logger.warning(f"Folder {folder} does not exist, skipping")
            continue
        files.extend(sorted(path for path in folder.glob(pattern) if path.is_file()))
    return load_bundles(files, logger)
