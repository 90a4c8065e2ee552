"""Pydantic models for cultures, resource bundles and converter options."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

import babel
from pydantic import BaseModel, Field, PrivateAttr


class Culture(BaseModel, frozen=True):
    """BCP-47 culture representation.

    The invariant culture has an empty language and renders as ``""``.
    """

    language: str = ""
    script: str | None = None
    region: str | None = None
    variants: tuple[str, ...] = ()

    @classmethod
    def parse(cls, tag: str | None) -> Culture:
        """Parse a BCP-47 language tag into a Culture.

        Raises:
            babel.UnknownLocaleError: If the tag names no known locale.
            ValueError: If the tag is malformed.
        """
        if not tag:
            return INVARIANT_CULTURE
        locale = babel.Locale.parse(
            tag.replace("_", "-"), sep="-", resolve_likely_subtags=False
        )
        return cls(
            language=locale.language,
            script=locale.script,
            region=locale.territory,
            variants=(locale.variant.lower(),) if locale.variant else (),
        )

    @classmethod
    def try_parse(cls, tag: str) -> Culture | None:
        """Parse ``tag``, or return None when it is not a known locale."""
        try:
            return cls.parse(tag)
        except (babel.UnknownLocaleError, ValueError):
            return None

    @property
    def is_invariant(self) -> bool:
        return not self.language

    @property
    def name(self) -> str:
        return str(self)

    def __str__(self) -> str:
        if self.is_invariant:
            return ""
        parts: list[str] = [self.language]
        if self.script:
            parts.append(self.script)
        if self.region:
            parts.append(self.region)
        parts.extend(self.variants)
        return "-".join(parts)

    def __hash__(self) -> int:
        return hash((self.language, self.script, self.region, self.variants))


INVARIANT_CULTURE = Culture()


class ResourceBundle(BaseModel):
    """All translations sharing one base name, keyed by culture."""

    base_name: str
    _resources: dict[Culture, dict[str, str]] = PrivateAttr(default_factory=dict)

    @property
    def cultures(self) -> list[Culture]:
        return list(self._resources)

    def add_values(self, culture: Culture | None, values: dict[str, str]) -> None:
        """Union ``values`` into the mapping of ``culture``; new values win."""
        if culture is None:
            culture = INVARIANT_CULTURE
        self._resources.setdefault(culture, {}).update(values)

    def get_values(self, culture: Culture | None = None) -> dict[str, str]:
        """Return a copy of the values for ``culture`` (invariant when None).

        An unknown culture yields an empty mapping.
        """
        if culture is None:
            culture = INVARIANT_CULTURE
        return dict(self._resources.get(culture, {}))

    def merge_with(self, other: ResourceBundle) -> None:
        """Merge every culture of ``other`` into this bundle.

        Values from ``other`` override existing ones on key collision and
        ``base_name`` is left untouched.
        """
        for culture in other.cultures:
            self.add_values(culture, other.get_values(culture))


class OutputFormat(str, Enum):
    JSON = "json"
    REQUIRE_JS = "requirejs"
    I18NEXT = "i18next"
    DEV_EXTREME = "devextreme"


class JsonCasing(str, Enum):
    NONE = "none"
    CAMEL = "camel"
    LOWER = "lower"


class OverwriteMode(str, Enum):
    SKIP = "skip"
    OVERWRITE = "overwrite"


class ConverterOptions(BaseModel):
    """Configuration consumed by ``convert``."""

    output_format: OutputFormat = OutputFormat.JSON
    casing: JsonCasing = JsonCasing.NONE
    fallback_culture: str | None = None
    overwrite: OverwriteMode = OverwriteMode.SKIP
    use_fallback_for_missing_translation: bool = False
    output_file: Path | None = None
    output_folder: Path | None = None
    recursive: bool = False
    input_files: list[Path] = Field(default_factory=list)
    input_folders: list[Path] = Field(default_factory=list)

    def resolve_output_folder(self) -> Path:
        """Output folder, defaulting to the current working directory."""
        return self.output_folder or Path.cwd()


class Severity(str, Enum):
    TRACE = "trace"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class LogEntry(BaseModel, frozen=True):
    """A single diagnostic produced during conversion."""

    severity: Severity
    message: str

    def __str__(self) -> str:
        return f"[{self.severity.value.upper()}] {self.message}"
