"""
Export of resource bundles to ``$.msg`` JavaScript files.

This is the startup hook of the component: it resolves the configured
locales, then loads, renders and writes one script per locale. Failures are
contained per locale so one broken bundle never blocks the others, and a
configuration problem never propagates to the hosting application.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, override

from ..utils.core.exceptions import ConfigurationError, ResourceNotFoundError
from .bundle_store import PropertiesBundleStore
from .locales import LocaleSpec, resolve_locales
from .script_renderer import render_bundle
from .script_writer import script_path, write_script

if TYPE_CHECKING:
    from ..config.schema import ExportAppConfig


class ExportResult:
    """Result of an export run."""

    def __init__(self, dry_run: bool = False) -> None:
        self.dry_run: bool = dry_run
        self.exported_files: list[Path] = []
        self.empty_locales: list[LocaleSpec] = []
        self.missing_locales: list[LocaleSpec] = []
        self.failed_locales: list[tuple[LocaleSpec, Exception]] = []
        self.total_locales: int = 0
        self.configuration_error: ConfigurationError | None = None

    @property
    def success_count(self) -> int:
        """Number of locales whose script was written."""
        return len(self.exported_files)

    @property
    def empty_count(self) -> int:
        return len(self.empty_locales)

    @property
    def missing_count(self) -> int:
        return len(self.missing_locales)

    @property
    def failure_count(self) -> int:
        return len(self.failed_locales)

    @property
    def success_rate(self) -> float:
        """Share of locales exported or skipped as empty, as a percentage."""
        if self.total_locales == 0:
            return 0.0 if self.configuration_error else 100.0
        return ((self.success_count + self.empty_count) / self.total_locales) * 100.0

    @property
    def ok(self) -> bool:
        """True when the configuration was usable and no locale went wrong."""
        return (
            self.configuration_error is None
            and not self.missing_locales
            and not self.failed_locales
        )

    @override
    def __str__(self) -> str:
        return (
            f"Export Results: "
            f"{self.success_count} exported, "
            f"{self.empty_count} empty, "
            f"{self.missing_count} missing, "
            f"{self.failure_count} failed "
            f"({self.success_rate:.1f}% success rate)"
        )


class JavascriptExporter:
    """
    Exports every configured locale's bundle to a JavaScript file.

    Args:
        locales: Comma-separated locale list, e.g. "pt,pt_BR,en,es"
        store: Store the bundles are loaded from
        output_root: Root directory the ``js/i18n`` tree is written to
        encoding: Output encoding, UTF-8 when None
        dry_run: Render the scripts but do not write them
        logger: Logger to report to (defaults to this module's logger)
    """

    def __init__(
        self,
        locales: str | None,
        store: PropertiesBundleStore,
        output_root: Path,
        encoding: str | None = None,
        dry_run: bool = False,
        logger: logging.Logger | None = None,
    ) -> None:
        self.locales: str | None = locales
        self.store: PropertiesBundleStore = store
        self.output_root: Path = output_root
        self.encoding: str | None = encoding
        self.dry_run: bool = dry_run
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    @classmethod
    def from_config(
        cls,
        config: ExportAppConfig,
        dry_run: bool = False,
        logger: logging.Logger | None = None,
    ) -> JavascriptExporter:
        """Build an exporter from a loaded application configuration."""
        store = PropertiesBundleStore(
            directory=config.bundles.directory,
            base_name=config.bundles.base_name,
            encoding=config.bundles.source_encoding,
            logger=logger,
        )
        return cls(
            locales=config.export.locales,
            store=store,
            output_root=config.export.output_root,
            encoding=config.export.encoding,
            dry_run=dry_run,
            logger=logger,
        )

    def export_locale(self, locale: LocaleSpec) -> Path | None:
        """
        Load, render and write the script for a single locale.

        Returns:
            Path of the (would-be, in dry-run mode) script, or None when the
            bundle is empty and nothing was written

        Raises:
            ResourceNotFoundError: If the locale has no bundle
            OSError: If the script cannot be written
        """
        bundle = self.store.load(self.store.base_name, locale)

        script = render_bundle(bundle)
        if script is None:
            self._logger.warning(
                f"Bundle for locale {locale} has no keys, no file was written"
            )
            return None

        if self.dry_run:
            target = script_path(self.output_root, locale)
            self._logger.info(f"DRY RUN: Would write {target}")
            return target

        return write_script(script, self.output_root, self.encoding, logger=self._logger)

    def run(self) -> ExportResult:
        """
        Export all configured locales.

        Never raises: configuration errors abort the export only, and errors
        for one locale are logged before moving on to the next one.
        """
        result = ExportResult(dry_run=self.dry_run)
        self._logger.info("Generating the Javascript files for i18n.")

        try:
            locales = resolve_locales(self.locales)
        except ConfigurationError as e:
            self._logger.error(f"Could not deploy the Javascript files: {e}")
            result.configuration_error = e
            return result

        result.total_locales = len(locales)

        for locale in locales:
            try:
                target = self.export_locale(locale)
            except ResourceNotFoundError as e:
                self._logger.error(f"Skipping locale {locale}: {e}")
                result.missing_locales.append(locale)
                continue
            except Exception as e:
                self._logger.error(
                    f"Could not deploy the Javascript file for locale {locale}: {e}",
                    exc_info=True,
                )
                result.failed_locales.append((locale, e))
                continue

            if target is None:
                result.empty_locales.append(locale)
            else:
                result.exported_files.append(target)

        self._logger.info(str(result))
        return result


def export_javascript_files(
    config: ExportAppConfig,
    dry_run: bool = False,
    logger: logging.Logger | None = None,
) -> ExportResult:
    """
    Run the export once for the given configuration.

    Intended to be called from the host application's startup sequence.
    """
    return JavascriptExporter.from_config(config, dry_run=dry_run, logger=logger).run()
