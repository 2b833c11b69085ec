"""Data types shared by the bundle store, the renderer and the writer."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .locales import LocaleSpec


@dataclass(frozen=True)
class TranslationBundle:
    """Key to localized string mapping for a single locale."""

    locale: LocaleSpec
    messages: Mapping[str, str]
    sources: tuple[Path, ...] = field(default=())

    def __len__(self) -> int:
        return len(self.messages)

    def __iter__(self) -> Iterator[str]:
        return iter(self.messages)

    @property
    def is_empty(self) -> bool:
        return not self.messages


@dataclass(frozen=True)
class RenderedScript:
    """Generated ``$.msg`` script source for one locale."""

    locale: LocaleSpec
    content: str

    @property
    def file_name(self) -> str:
        """Name of the file the script is deployed to, e.g. messages_pt_BR.js."""
        return f"messages_{self.locale}.js"
