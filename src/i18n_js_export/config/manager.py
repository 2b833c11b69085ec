"""Configuration manager for the i18n JavaScript export.

This module provides functionality for loading, validating, and saving
YAML configuration files with Pydantic model validation, and for applying
command-line overrides on top of a loaded configuration.
"""

import logging
import tempfile
from pathlib import Path

import yaml

from ..config.schema import ExportAppConfig


logger = logging.getLogger(__name__)


class ConfigManager:
    """
    Configuration manager for handling YAML config files with Pydantic validation.
    """

    @staticmethod
    def load_config(config_path: Path) -> ExportAppConfig:
        """
        Load and validate configuration from a YAML file.

        Args:
            config_path: Path to the YAML configuration file

        Returns:
            ExportAppConfig: Validated configuration object

        Raises:
            FileNotFoundError: If the config file doesn't exist
            yaml.YAMLError: If the YAML syntax is invalid
            ValueError: If the document is not a mapping
            ValidationError: If the configuration fails Pydantic validation
        """
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        try:
            with config_path.open("r", encoding="utf-8") as f:
                raw_config_data: object = yaml.safe_load(f)  # pyright: ignore[reportAny]
        except yaml.YAMLError as e:
            raise yaml.YAMLError(f"Invalid YAML syntax in {config_path}: {e}") from e

        if raw_config_data is None:
            config_data: dict[str, object] = {}
        elif isinstance(raw_config_data, dict):
            config_data = raw_config_data  # pyright: ignore[reportUnknownVariableType]
        else:
            raise ValueError(
                f"Configuration file must contain a YAML dictionary, got {type(raw_config_data).__name__}"
            )

        config = ExportAppConfig.model_validate(config_data)
        logger.debug(f"Loaded configuration from {config_path}")
        return config

    @staticmethod
    def apply_overrides(
        config: ExportAppConfig, overrides: dict[str, dict[str, object]]
    ) -> ExportAppConfig:
        """
        Return a copy of ``config`` with section values replaced.

        ``None`` values are ignored so unset command-line options keep the
        configured value.

        Args:
            config: Base configuration
            overrides: Values per section, e.g. ``{"export": {"locales": "en"}}``

        Raises:
            ValidationError: If an override fails validation
        """
        data = config.model_dump()
        for section, values in overrides.items():
            section_data = data.setdefault(section, {})
            for key, value in values.items():
                if value is not None:
                    section_data[key] = value

        return ExportAppConfig.model_validate(data)

    @staticmethod
    def save_config(config: ExportAppConfig, config_path: Path) -> None:
        """
        Save configuration to a YAML file with atomic operation.

        Args:
            config: Configuration object to save
            config_path: Path where to save the configuration

        Raises:
            OSError: If file operations fail
        """
        content_to_write = yaml.dump(
            config.model_dump(mode="json"),
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
            indent=2,
        )

        # Atomic save operation using temporary file
        temp_file = None
        try:
            with tempfile.NamedTemporaryFile(
                mode="w",
                encoding="utf-8",
                dir=config_path.parent,
                prefix=f".{config_path.name}.",
                suffix=".tmp",
                delete=False,
            ) as temp_file:
                _ = temp_file.write(content_to_write)
                temp_file.flush()
                temp_path = Path(temp_file.name)

            _ = temp_path.replace(config_path)

        except Exception as e:
            if temp_file and Path(temp_file.name).exists():
                Path(temp_file.name).unlink(missing_ok=True)
            raise OSError(f"Failed to save configuration to {config_path}: {e}") from e

        logger.info(f"Configuration saved to {config_path}")
