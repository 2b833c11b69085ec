"""
Global test configuration fixtures for the i18n JavaScript export tests.

This module provides reusable pytest fixtures for creating bundle
directories, output roots and ExportAppConfig instances.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from src.i18n_js_export.config.schema import (
    BundlesConfig,
    ExportAppConfig,
    ExportConfig,
)
from src.i18n_js_export.i18n.bundle_store import PropertiesBundleStore
from tests.utils.test_helpers import write_properties


# == BUNDLE FIXTURES ==


@pytest.fixture
def bundle_dir(tmp_path: Path) -> Path:
    """
    Create a resources directory with a base bundle and two locale bundles.

    Layout:
        messages.properties        - app.title, app.footer
        messages_en.properties     - greeting, farewell, app.title
        messages_pt_BR.properties  - greeting, multiline
        messages_empty.properties  - comments only
    """
    resources = tmp_path / "resources"
    resources.mkdir()

    _ = write_properties(
        resources / "messages.properties",
        "# Base bundle\napp.title=Application\napp.footer=All rights reserved\n",
    )
    _ = write_properties(
        resources / "messages_en.properties",
        "greeting=Hello\nfarewell=Goodbye\napp.title=My Application\n",
    )
    _ = write_properties(
        resources / "messages_pt_BR.properties",
        "greeting=Ol\\u00e1\nmultiline=linha um\\nlinha dois\n",
    )
    _ = write_properties(
        resources / "messages_empty.properties",
        "# nothing here\n! still nothing\n",
    )

    return resources


@pytest.fixture
def isolated_bundle_dir(tmp_path: Path) -> Path:
    """A resources directory without a base bundle, so lookups can fail."""
    resources = tmp_path / "isolated"
    resources.mkdir()

    _ = write_properties(resources / "messages_en.properties", "a=x\nb=y\\nz\n")
    _ = write_properties(resources / "messages_none.properties", "")

    return resources


@pytest.fixture
def output_root(tmp_path: Path) -> Path:
    """Web root the js/i18n tree is written to."""
    root = tmp_path / "webroot"
    root.mkdir()
    return root


@pytest.fixture
def bundle_store(bundle_dir: Path) -> PropertiesBundleStore:
    return PropertiesBundleStore(bundle_dir)


@pytest.fixture
def test_logger() -> logging.Logger:
    """Logger injected into components under test."""
    return logging.getLogger("tests.i18n_js_export")


# == CONFIGURATION FIXTURES ==


@pytest.fixture
def base_config(bundle_dir: Path, output_root: Path) -> ExportAppConfig:
    """Configuration exporting the English and Brazilian Portuguese bundles."""
    return ExportAppConfig(
        export=ExportConfig(locales="en,pt_BR", output_root=output_root),
        bundles=BundlesConfig(directory=bundle_dir),
    )


@pytest.fixture
def minimal_config() -> ExportAppConfig:
    """Configuration with every value left at its default."""
    return ExportAppConfig()
