"""Parsing of the configured locale list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import override

from ..utils.core.exceptions import ConfigurationError

LOCALE_SEPARATOR = ","


@dataclass(frozen=True)
class LocaleSpec:
    """
    A locale identifier taken verbatim from configuration (e.g. "en", "pt_BR").

    The tag is never normalised or validated; it is used as-is both for the
    bundle lookup and for the generated file name.
    """

    tag: str

    def fallback_chain(self) -> list[str]:
        """
        Return the locale suffixes to try when resolving a resource bundle.

        The most specific suffix comes first and the base bundle (empty
        suffix) last, e.g. ``pt_BR`` yields ``["pt_BR", "pt", ""]``.
        """
        parts = self.tag.split("_")
        chain = ["_".join(parts[:i]) for i in range(len(parts), 0, -1)]
        chain = [suffix for suffix in chain if suffix]
        chain.append("")
        return chain

    @override
    def __str__(self) -> str:
        return self.tag


def resolve_locales(config: str | None) -> list[LocaleSpec]:
    """
    Parse a comma-separated locale list into LocaleSpec objects.

    Args:
        config: The configured value, e.g. ``"pt,pt_BR,en,es"``

    Returns:
        One LocaleSpec per non-empty segment, in input order

    Raises:
        ConfigurationError: If the value is missing, empty or has no segments
    """
    if not config:
        raise ConfigurationError(
            "Could not find any languages in the 'locales' parameter.",
            context=config,
        )

    locales = [
        LocaleSpec(segment)
        for segment in config.split(LOCALE_SEPARATOR)
        if segment
    ]

    if not locales:
        raise ConfigurationError(
            f"The 'locales' parameter does not contain any languages: {config!r}",
            context=config,
        )

    return locales
