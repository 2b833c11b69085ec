"""Deployment of rendered scripts to ``<root>/js/i18n/messages_<locale>.js``."""

from __future__ import annotations

import logging
from pathlib import Path

from .locales import LocaleSpec
from .types import RenderedScript

DEFAULT_OUTPUT_ENCODING = "UTF-8"
SCRIPT_SUBDIRECTORY = Path("js") / "i18n"


def script_directory(output_root: Path) -> Path:
    """Directory that receives the generated scripts."""
    return output_root.resolve() / SCRIPT_SUBDIRECTORY


def script_path(output_root: Path, locale: LocaleSpec) -> Path:
    """Full path of the script generated for ``locale``."""
    return script_directory(output_root) / f"messages_{locale}.js"


def write_script(
    script: RenderedScript,
    output_root: Path,
    encoding: str | None = None,
    logger: logging.Logger | None = None,
) -> Path:
    """
    Write a rendered script, replacing any file previously deployed for its locale.

    Args:
        script: Script to write
        output_root: Root directory the ``js/i18n`` tree is created in
        encoding: Output text encoding; UTF-8 when None or empty
        logger: Logger to report to (defaults to this module's logger)

    Returns:
        Path of the written file

    Raises:
        OSError: If the destination folder cannot be created or the file
            cannot be written
        UnicodeEncodeError: If the content cannot be represented in the
            encoding; an existing file is left untouched
        LookupError: If the encoding is unknown
    """
    logger = logger or logging.getLogger(__name__)
    target_dir = script_directory(output_root)

    try:
        target_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OSError(
            f"Could not create the destination folder of i18n javascript files: {target_dir}"
        ) from e

    if not target_dir.is_dir():
        raise OSError(
            f"Could not create the destination folder of i18n javascript files: {target_dir}"
        )

    target = target_dir / script.file_name

    # Encoded before the old file is removed so an unrepresentable value
    # leaves the previous deployment in place
    data = script.content.encode(encoding or DEFAULT_OUTPUT_ENCODING)

    # Delete and create
    if target.exists():
        target.unlink()

    _ = target.write_bytes(data)

    logger.info(f"The file {target.name} was deployed successfully.")
    return target
