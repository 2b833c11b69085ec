"""Configuration schema for the i18n JavaScript export using nested Pydantic models."""

import codecs
from pathlib import Path
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _validate_encoding(v: str | None) -> str | None:
    """Normalise empty encodings to None and reject unknown codecs."""
    if v is None or not v.strip():
        return None
    try:
        _ = codecs.lookup(v)
    except LookupError as e:
        raise ValueError(f"Unknown text encoding: {v}") from e
    return v


class ExportConfig(BaseModel):
    """Settings of the generated JavaScript files."""

    locales: str | None = Field(
        default=None,
        description="Comma-separated list of locales to export (e.g. pt,pt_BR,en,es)",
    )
    encoding: str | None = Field(
        default=None,
        description="Text encoding of the generated files, UTF-8 when not set",
    )
    output_root: Path = Field(
        default=Path("."),
        description="Root directory the js/i18n folder is created in",
    )

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid")

    @field_validator("locales", mode="before")
    @classmethod
    def join_locale_list(cls, v: object) -> object:
        """Accept a YAML list of locales as well as a comma-separated string."""
        match v:
            case list():
                items: list[object] = list(v)  # pyright: ignore[reportUnknownArgumentType]
                for item in items:
                    # YAML reads unquoted tags such as `no` or `on` as booleans
                    if not isinstance(item, str):
                        raise ValueError(
                            f"Locale {item!r} is not a string, quote locale tags in the list"
                        )
                return ",".join(str(item) for item in items)
            case _:
                return v

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str | None) -> str | None:
        return _validate_encoding(v)


class BundlesConfig(BaseModel):
    """Location of the source resource bundles."""

    directory: Path = Field(
        default=Path("resources"),
        description="Directory containing the .properties bundles",
    )
    base_name: str = Field(
        default="messages",
        description="Base name of the bundle files (messages_<locale>.properties)",
        min_length=1,
        pattern=r"^[^/\\]+$",
    )
    source_encoding: str | None = Field(
        default=None,
        description="Text encoding of the .properties files, UTF-8 when not set",
    )

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid")

    @field_validator("source_encoding")
    @classmethod
    def validate_source_encoding(cls, v: str | None) -> str | None:
        return _validate_encoding(v)


class ExportAppConfig(BaseModel):
    """
    Configuration model for the i18n JavaScript export.

    Only ``export.locales`` is required for an export to produce files; it is
    optional here so that a missing list is reported by the exporter rather
    than failing configuration loading as a whole.
    """

    export: ExportConfig = Field(default_factory=ExportConfig)
    bundles: BundlesConfig = Field(default_factory=BundlesConfig)

    model_config: ClassVar[ConfigDict] = ConfigDict(
        str_strip_whitespace=True,
        validate_assignment=True,
        extra="forbid",
        frozen=False,
    )
