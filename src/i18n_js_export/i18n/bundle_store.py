"""
Loading of Java-style ``.properties`` resource bundles.

Bundles are looked up the way resource bundles are resolved on the JVM: the
most specific ``<base>_<locale>.properties`` file wins, and less specific
files in the fallback chain (down to ``<base>.properties``) act as parents
whose keys are inherited when the bundle itself does not define them.
"""

from __future__ import annotations

import logging
import re
import string
from pathlib import Path

from ..utils.core.exceptions import ResourceNotFoundError
from .locales import LocaleSpec
from .types import TranslationBundle

DEFAULT_BASE_NAME = "messages"
DEFAULT_SOURCE_ENCODING = "utf-8"
FALLBACK_SOURCE_ENCODING = "iso-8859-1"
PROPERTIES_SUFFIX = ".properties"

_LINE_BREAK = re.compile(r"\r\n|\r|\n")
_WHITESPACE = " \t\f"
_SEPARATORS = "=:"
_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}


def _has_continuation(line: str) -> bool:
    """A line continues when it ends with an odd number of backslashes."""
    trailing = len(line) - len(line.rstrip("\\"))
    return trailing % 2 == 1


def _logical_lines(text: str) -> list[str]:
    lines: list[str] = []
    buffer: str | None = None

    for natural_line in _LINE_BREAK.split(text):
        line = natural_line.lstrip(_WHITESPACE)

        if buffer is None and (not line or line[0] in "#!"):
            continue

        if _has_continuation(line):
            buffer = (buffer or "") + line[:-1]
            continue

        lines.append((buffer or "") + line)
        buffer = None

    if buffer is not None:
        lines.append(buffer)

    return lines


def _unescape(text: str) -> str:
    chars: list[str] = []
    i = 0
    while i < len(text):
        char = text[i]
        if char != "\\":
            chars.append(char)
            i += 1
            continue

        i += 1
        if i >= len(text):
            break

        char = text[i]
        if char == "u":
            code = text[i + 1 : i + 5]
            if len(code) != 4 or any(c not in string.hexdigits for c in code):
                raise ValueError(f"Malformed \\uxxxx encoding: \\u{code}")
            chars.append(chr(int(code, 16)))
            i += 5
            continue

        chars.append(_ESCAPES.get(char, char))
        i += 1

    # \uXXXX pairs may encode a surrogate pair; join them into one code point
    return (
        "".join(chars)
        .encode("utf-16-le", "surrogatepass")
        .decode("utf-16-le", "surrogatepass")
    )


def _split_entry(line: str) -> tuple[str, str]:
    i = 0
    while i < len(line):
        char = line[i]
        if char == "\\":
            i += 2
            continue
        if char in _SEPARATORS or char in _WHITESPACE:
            break
        i += 1

    key = line[:i]
    rest = line[i:].lstrip(_WHITESPACE)
    if rest[:1] and rest[0] in _SEPARATORS:
        rest = rest[1:].lstrip(_WHITESPACE)

    return _unescape(key), _unescape(rest)


def parse_properties(text: str) -> dict[str, str]:
    """
    Parse the contents of a ``.properties`` file.

    Supports ``#``/``!`` comments, ``=``, ``:`` and whitespace separators,
    backslash line continuation and the ``\\t \\n \\r \\f \\uXXXX`` escapes.
    A key defined twice keeps its first position but takes the last value.

    Args:
        text: Decoded file contents

    Returns:
        Mapping of keys to values in file order

    Raises:
        ValueError: If a ``\\uXXXX`` escape is malformed
    """
    messages: dict[str, str] = {}
    for line in _logical_lines(text):
        key, value = _split_entry(line)
        messages[key] = value
    return messages


class PropertiesBundleStore:
    """
    Read-only store of resource bundles kept as ``.properties`` files.

    Files are decoded with the configured source encoding; files that are not
    valid in that encoding are read as ISO-8859-1, the historical encoding of
    property files.
    """

    def __init__(
        self,
        directory: Path,
        base_name: str = DEFAULT_BASE_NAME,
        encoding: str | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.directory: Path = directory
        self.base_name: str = base_name
        self.encoding: str = encoding or DEFAULT_SOURCE_ENCODING
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    def candidate_paths(self, base_name: str, locale: LocaleSpec) -> list[Path]:
        """Return the bundle files to look for, most specific first."""
        paths: list[Path] = []
        for suffix in locale.fallback_chain():
            name = f"{base_name}_{suffix}" if suffix else base_name
            paths.append(self.directory / f"{name}{PROPERTIES_SUFFIX}")
        return paths

    def read_file(self, path: Path) -> dict[str, str]:
        """Read and parse a single ``.properties`` file."""
        raw = path.read_bytes()
        try:
            text = raw.decode(self.encoding)
        except UnicodeDecodeError:
            self._logger.debug(
                f"{path} is not valid {self.encoding}, reading as {FALLBACK_SOURCE_ENCODING}"
            )
            text = raw.decode(FALLBACK_SOURCE_ENCODING)

        if text.startswith("\ufeff"):
            text = text[1:]

        try:
            return parse_properties(text)
        except ValueError as e:
            raise ValueError(f"Invalid properties file {path}: {e}") from e

    def load(self, base_name: str, locale: LocaleSpec) -> TranslationBundle:
        """
        Load the bundle for ``locale``.

        Args:
            base_name: Bundle base name, e.g. "messages"
            locale: Locale to load

        Returns:
            TranslationBundle with the bundle's own keys first, followed by
            keys inherited from its parents

        Raises:
            ResourceNotFoundError: If no file of the fallback chain exists
            ValueError: If a bundle file cannot be parsed
        """
        candidates = self.candidate_paths(base_name, locale)
        existing = [path for path in candidates if path.is_file()]

        if not existing:
            raise ResourceNotFoundError(
                f"Can't find bundle for base name {base_name}, locale {locale}",
                locale=locale.tag,
                searched=[str(path) for path in candidates],
            )

        messages: dict[str, str] = {}
        for path in existing:
            for key, value in self.read_file(path).items():
                _ = messages.setdefault(key, value)

        bundle = TranslationBundle(
            locale=locale, messages=messages, sources=tuple(existing)
        )
        self._logger.debug(
            f"Loaded {len(bundle)} message(s) for locale {locale} from "
            + ", ".join(path.name for path in existing)
        )
        return bundle
