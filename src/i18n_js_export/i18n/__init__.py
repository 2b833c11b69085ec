"""
Conversion of resource bundles into $.msg JavaScript lookup scripts.

This package provides the locale list parser, the .properties bundle store,
the script renderer and writer, and the exporter tying them together.
"""

from .bundle_store import PropertiesBundleStore, parse_properties
from .exporter import ExportResult, JavascriptExporter, export_javascript_files
from .locales import LocaleSpec, resolve_locales
from .script_renderer import escape_value, render_bundle
from .script_writer import script_path, write_script
from .types import RenderedScript, TranslationBundle

__all__ = [
    "PropertiesBundleStore",
    "parse_properties",
    "ExportResult",
    "JavascriptExporter",
    "export_javascript_files",
    "LocaleSpec",
    "resolve_locales",
    "escape_value",
    "render_bundle",
    "script_path",
    "write_script",
    "RenderedScript",
    "TranslationBundle",
]
