from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Union

from .text_utils import Text

Reference = tuple[str, int]  # (source path, line number)


# Entries may hold fragment lists and a msgstr mapping, so they are not
# hashable; use translations.key_of(entry) as the map key.
@dataclass(frozen=True, slots=True)
class Translation:
    msgid: Text
    msgstr: Text = ""
    msgctxt: Text | None = None
    flags: frozenset[str] = frozenset()
    references: tuple[Reference, ...] = ()
    comments: tuple[str, ...] = ()
    extracted_comments: tuple[str, ...] = ()
    po_source_line: int | None = None  # None for entries built in memory

    __hash__ = None  # type: ignore[assignment]


@dataclass(frozen=True, slots=True)
class PluralTranslation:
    msgid: Text
    msgid_plural: Text
    msgstr: Mapping[int, Text] = field(default_factory=dict)  # plural index → text
    msgctxt: Text | None = None
    flags: frozenset[str] = frozenset()
    references: tuple[Reference, ...] = ()
    comments: tuple[str, ...] = ()
    extracted_comments: tuple[str, ...] = ()
    po_source_line: int | None = None

    __hash__ = None  # type: ignore[assignment]


TranslationEntry = Union[Translation, PluralTranslation]
