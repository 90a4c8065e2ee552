"""Output formatters, one per target JavaScript localization framework."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .models import ConverterOptions, Culture, OutputFormat, ResourceBundle

JsonDocument = dict[str, Any]

DEVEXTREME_TEMPLATE = """"use strict";

! function(root, factory) {{
\tif ("function" === typeof define && define.amd) {{
\t\tdefine(function(require) {{
\t\t\tfactory(require("devextreme/localization"));
\t\t}})
\t}} else {{
\t\tif ("object" === typeof module && module.exports) {{
\t\t\tfactory(require("devextreme/localization"));
\t\t}} else {{
\t\t\tfactory(DevExpress.localization);
\t\t}}
\t}}
}} (this, function(localization) {{
\tlocalization.loadMessages({messages});
}}); """


class UnknownOutputFormatError(ValueError):
    """Raised when no formatter exists for an output format."""


class ResxToJsonFormatter:
    """Plain JSON output; the base every other formatter builds on.

    The invariant culture is written to the output directory itself and
    every other culture to a sub-directory named after its tag.
    """

    output_file_extension = ".json"

    def check_options(self, options: ConverterOptions) -> tuple[bool, str]:
        return True, ""

    def get_base_output_directory(
        self, base_output_directory: Path, culture: Culture, options: ConverterOptions
    ) -> Path:
        if culture.is_invariant:
            return base_output_directory
        return base_output_directory / culture.name

    def get_language_file_name(
        self, base_file_name: str, culture: Culture, options: ConverterOptions
    ) -> str:
        return base_file_name

    def get_json_resource(
        self,
        base_values: JsonDocument,
        culture: Culture,
        bundle: ResourceBundle,
        options: ConverterOptions,
    ) -> JsonDocument:
        return base_values

    def get_file_content(self, json_doc: JsonDocument, options: ConverterOptions) -> str:
        return json.dumps(json_doc, indent=2, ensure_ascii=False)


class RequireJsFormatter(ResxToJsonFormatter):
    """AMD modules for the RequireJS i18n plugin."""

    output_file_extension = ".js"

    def get_json_resource(
        self,
        base_values: JsonDocument,
        culture: Culture,
        bundle: ResourceBundle,
        options: ConverterOptions,
    ) -> JsonDocument:
        if not culture.is_invariant:
            return base_values
        # The root module holds the base translations under "root" and
        # declares every available culture as "<tag>": true.
        root: JsonDocument = {"root": base_values}
        for bundle_culture in bundle.cultures:
            if bundle_culture.is_invariant:
                continue
            root[bundle_culture.name] = True
        return root

    def get_file_content(self, json_doc: JsonDocument, options: ConverterOptions) -> str:
        return f"define({super().get_file_content(json_doc, options)});"


class I18nextFormatter(ResxToJsonFormatter):
    """i18next layout: the invariant culture goes to ``<fallback>/``."""

    def get_base_output_directory(
        self, base_output_directory: Path, culture: Culture, options: ConverterOptions
    ) -> Path:
        if culture.is_invariant:
            return base_output_directory / (options.fallback_culture or "")
        return super().get_base_output_directory(
            base_output_directory, culture, options
        )


class DevExtremeFormatter(ResxToJsonFormatter):
    """DevExtreme message files, e.g. ``messages.fr.js``, in one directory."""

    output_file_extension = ".js"

    def check_options(self, options: ConverterOptions) -> tuple[bool, str]:
        if not options.fallback_culture:
            return False, "The parameter fallbackCulture is not specified."
        return True, ""

    def get_base_output_directory(
        self, base_output_directory: Path, culture: Culture, options: ConverterOptions
    ) -> Path:
        return base_output_directory

    def get_language_file_name(
        self, base_file_name: str, culture: Culture, options: ConverterOptions
    ) -> str:
        path = Path(base_file_name)
        return path.stem + f".{_culture_name(culture, options)}" + path.suffix

    def get_json_resource(
        self,
        base_values: JsonDocument,
        culture: Culture,
        bundle: ResourceBundle,
        options: ConverterOptions,
    ) -> JsonDocument:
        return {_culture_name(culture, options): base_values}

    def get_file_content(self, json_doc: JsonDocument, options: ConverterOptions) -> str:
        messages = json.dumps(json_doc, indent="\t", ensure_ascii=True)
        return DEVEXTREME_TEMPLATE.format(messages=messages)


def _culture_name(culture: Culture, options: ConverterOptions) -> str:
    if culture.is_invariant:
        return options.fallback_culture or ""
    return culture.name


FORMATTERS: dict[OutputFormat, type[ResxToJsonFormatter]] = {
    OutputFormat.JSON: ResxToJsonFormatter,
    OutputFormat.REQUIRE_JS: RequireJsFormatter,
    OutputFormat.I18NEXT: I18nextFormatter,
    OutputFormat.DEV_EXTREME: DevExtremeFormatter,
}


def get_formatter(output_format: OutputFormat | str) -> ResxToJsonFormatter:
    """Create the formatter registered for ``output_format``.

    Raises:
        UnknownOutputFormatError: If the format is not supported.
    """
    try:
        formatter_cls = FORMATTERS[OutputFormat(output_format)]
    except (ValueError, KeyError) as e:
        raise UnknownOutputFormatError(
            f"Unsupported output format: {output_format!r}"
        ) from e
    return formatter_cls()
