"""Identity and classification helpers for catalog translation entries.

Every decision about whether two entries are "the same message" goes through
:func:`key_of`; flags, references, comments and translated text never take
part in identity.
"""

from __future__ import annotations

import dataclasses
import re
from collections.abc import Iterable
from typing import Union

from .model import PluralTranslation, Translation, TranslationEntry
from .text_utils import flatten_text

# On-disk vocabulary shared with other catalog tools; keep verbatim.
AUTOGENERATED_FLAG = "elixir-format"
FUZZY_FLAG = "fuzzy"

IdKey = Union[str, tuple[str, str]]
Key = tuple[str, IdKey]


def is_autogenerated(entry: TranslationEntry) -> bool:
    """Return whether *entry* was generated by tooling rather than hand-written.

    An entry counts as autogenerated when it carries the ``elixir-format`` flag.
    """
    return AUTOGENERATED_FLAG in entry.flags


def is_protected(entry: TranslationEntry, pattern: re.Pattern[str] | None) -> bool:
    """Return whether any reference path of *entry* matches *pattern*.

    Protected entries must survive automatic purging. Without a pattern, or
    without references, nothing is protected. Line numbers are ignored.
    """
    if pattern is None:
        return False
    if not entry.references:
        return False
    return any(pattern.search(path) for path, _line in entry.references)


def _id_key(entry: TranslationEntry) -> IdKey:
    match entry:
        case PluralTranslation(msgid=msgid, msgid_plural=msgid_plural):
            return (flatten_text(msgid), flatten_text(msgid_plural))
        case Translation(msgid=msgid):
            return flatten_text(msgid)
    raise TypeError(f"Not a translation entry: {type(entry).__name__}")


def key_of(entry: TranslationEntry) -> Key:
    """Return the identity key ``(context, id_part)`` of *entry*.

    ``id_part`` is the flattened ``msgid`` for singular entries and the pair
    ``(msgid, msgid_plural)`` for plural ones, so the two variants never
    collide. An absent context flattens to ``""``.

    >>> key_of(Translation(msgid="foo"))
    ('', 'foo')
    >>> key_of(PluralTranslation(msgctxt="bar", msgid="foo", msgid_plural="foos"))
    ('bar', ('foo', 'foos'))
    """
    ctx = "" if entry.msgctxt is None else flatten_text(entry.msgctxt)
    return (ctx, _id_key(entry))


def are_same(first: TranslationEntry, second: TranslationEntry) -> bool:
    """Return whether both entries describe the same message."""
    return key_of(first) == key_of(second)


def find_same(
    entries: Iterable[TranslationEntry], target: TranslationEntry
) -> TranslationEntry | None:
    """Return the first entry in *entries* that is the same as *target*."""
    return next((e for e in entries if are_same(e, target)), None)


def mark_as_fuzzy(entry: TranslationEntry) -> TranslationEntry:
    """Return a copy of *entry* with the ``fuzzy`` flag added."""
    return dataclasses.replace(entry, flags=frozenset(entry.flags) | {FUZZY_FLAG})
