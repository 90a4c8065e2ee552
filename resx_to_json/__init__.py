"""Convert .resx resource bundles into JavaScript localization files."""

import logging

from .converter import convert
from .formatters import get_formatter
from .logger import ConverterLogger
from .models import (
    INVARIANT_CULTURE,
    ConverterOptions,
    Culture,
    JsonCasing,
    OutputFormat,
    OverwriteMode,
    ResourceBundle,
    Severity,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "INVARIANT_CULTURE",
    "ConverterLogger",
    "ConverterOptions",
    "Culture",
    "JsonCasing",
    "OutputFormat",
    "OverwriteMode",
    "ResourceBundle",
    "Severity",
    "convert",
    "get_formatter",
]
