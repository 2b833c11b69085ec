"""Tests for the configuration schema."""

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from src.i18n_js_export.config.schema import (
    BundlesConfig,
    ExportAppConfig,
    ExportConfig,
)


class TestExportConfig:
    """Test cases for the export section."""

    def test_defaults(self) -> None:
        config = ExportConfig()

        assert config.locales is None
        assert config.encoding is None
        assert config.output_root == Path(".")

    def test_locales_string_kept_verbatim(self) -> None:
        config = ExportConfig(locales="pt,pt_BR, en")

        assert config.locales == "pt,pt_BR, en"

    def test_locales_list_is_joined(self) -> None:
        """Test that a YAML list of locales is accepted."""
        config = ExportConfig.model_validate({"locales": ["pt", "pt_BR", "en"]})

        assert config.locales == "pt,pt_BR,en"

    def test_unquoted_yaml_locale_rejected(self) -> None:
        """Test that `no` (Norwegian) read by YAML as False is not exported as 'False'."""
        data = yaml.safe_load("export:\n  locales: [en, no]\n")

        with pytest.raises(ValidationError, match="quote locale tags"):
            _ = ExportAppConfig.model_validate(data)

    def test_quoted_yaml_locales_accepted(self) -> None:
        data = yaml.safe_load("export:\n  locales: [en, 'no']\n")

        assert ExportAppConfig.model_validate(data).export.locales == "en,no"

    def test_misspelled_key_rejected(self) -> None:
        """Test that a typo inside the section is reported instead of ignored."""
        with pytest.raises(ValidationError, match="locale"):
            _ = ExportConfig.model_validate({"locale": "en"})

    @pytest.mark.parametrize("encoding", ["UTF-8", "utf8", "ISO-8859-1", "cp1252"])
    def test_known_encodings(self, encoding: str) -> None:
        assert ExportConfig(encoding=encoding).encoding == encoding

    @pytest.mark.parametrize("encoding", ["", "   "])
    def test_empty_encoding_means_default(self, encoding: str) -> None:
        assert ExportConfig(encoding=encoding).encoding is None

    def test_unknown_encoding(self) -> None:
        with pytest.raises(ValidationError, match="Unknown text encoding"):
            _ = ExportConfig(encoding="no-such-codec")

    def test_output_root_from_string(self) -> None:
        config = ExportConfig.model_validate({"output_root": "/srv/www"})

        assert config.output_root == Path("/srv/www")


class TestBundlesConfig:
    """Test cases for the bundles section."""

    def test_defaults(self) -> None:
        config = BundlesConfig()

        assert config.directory == Path("resources")
        assert config.base_name == "messages"
        assert config.source_encoding is None

    @pytest.mark.parametrize("base_name", ["", "sub/messages", "sub\\messages"])
    def test_invalid_base_name(self, base_name: str) -> None:
        with pytest.raises(ValidationError):
            _ = BundlesConfig(base_name=base_name)

    def test_unknown_source_encoding(self) -> None:
        with pytest.raises(ValidationError):
            _ = BundlesConfig(source_encoding="klingon")

    def test_misspelled_key_rejected(self) -> None:
        with pytest.raises(ValidationError):
            _ = BundlesConfig.model_validate({"basename": "labels"})


class TestExportAppConfig:
    """Test cases for the root model."""

    def test_defaults(self, minimal_config: ExportAppConfig) -> None:
        assert minimal_config.export == ExportConfig()
        assert minimal_config.bundles == BundlesConfig()

    def test_nested_from_dict(self) -> None:
        config = ExportAppConfig.model_validate(
            {
                "export": {"locales": "en,es", "encoding": "UTF-8"},
                "bundles": {"directory": "i18n", "base_name": "labels"},
            }
        )

        assert config.export.locales == "en,es"
        assert config.bundles.directory == Path("i18n")
        assert config.bundles.base_name == "labels"

    def test_unknown_section_rejected(self) -> None:
        with pytest.raises(ValidationError):
            _ = ExportAppConfig.model_validate({"servlet": {"context": "/"}})

    def test_assignment_is_validated(self, minimal_config: ExportAppConfig) -> None:
        with pytest.raises(ValidationError):
            minimal_config.export = "not a section"  # pyright: ignore[reportAttributeAccessIssue]
