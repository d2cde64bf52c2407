"""Key-based indexing helpers for merge and purge callers."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

import xxhash

from .model import TranslationEntry
from .translations import Key, key_of

_HASH_MASK = 0xFFFFFFFFFFFFFFFF
# Unit/record separators never appear in catalog text, so the encoding is unambiguous.
_FIELD_SEP = "\x1f"
_PLURAL_SEP = "\x1e"


@dataclass(frozen=True, slots=True)
class DuplicateReport:
    """Describe an entry that repeats the identity of an earlier one."""

    key: Key
    entry: TranslationEntry
    first: TranslationEntry

    @property
    def line(self) -> int | None:
        return self.entry.po_source_line

    @property
    def first_line(self) -> int | None:
        return self.first.po_source_line

    def message(self) -> str:
        """Return a human-readable description of the duplicate."""
        ctx, id_part = self.key
        msgid = id_part[0] if isinstance(id_part, tuple) else id_part
        where = f"line {self.line}" if self.line is not None else "unknown line"
        text = f"found duplicate on {where} for msgid: {msgid!r}"
        if ctx:
            text += f" (msgctxt: {ctx!r})"
        if self.first_line is not None:
            text += f", first defined on line {self.first_line}"
        return text


def index_by_key(entries: Iterable[TranslationEntry]) -> dict[Key, TranslationEntry]:
    """Map each identity key to the first entry carrying it."""
    index: dict[Key, TranslationEntry] = {}
    for entry in entries:
        index.setdefault(key_of(entry), entry)
    return index


def find_duplicates(
    entries: Iterable[TranslationEntry],
) -> tuple[DuplicateReport, ...]:
    """Return a report for every entry whose key was already seen, in order."""
    seen: dict[Key, TranslationEntry] = {}
    out: list[DuplicateReport] = []
    for entry in entries:
        key = key_of(entry)
        first = seen.get(key)
        if first is None:
            seen[key] = entry
            continue
        out.append(DuplicateReport(key=key, entry=entry, first=first))
    return tuple(out)


def _order_key(key: Key) -> tuple[str, str, int, str]:
    ctx, id_part = key
    if isinstance(id_part, tuple):
        return (ctx, id_part[0], 1, id_part[1])
    return (ctx, id_part, 0, "")


def sort_entries(entries: Iterable[TranslationEntry]) -> list[TranslationEntry]:
    """Return *entries* sorted by context, msgid, variant and plural msgid.

    Singular entries sort before plural entries sharing the same msgid. The
    sort is stable, so same-key entries keep their input order.
    """
    return sorted(entries, key=lambda entry: _order_key(key_of(entry)))


def _encode_key(key: Key) -> bytes:
    ctx, id_part = key
    if isinstance(id_part, tuple):
        body = f"P{_FIELD_SEP}{id_part[0]}{_PLURAL_SEP}{id_part[1]}"
    else:
        body = f"S{_FIELD_SEP}{id_part}"
    return f"{ctx}{_FIELD_SEP}{body}".encode("utf-8", "surrogatepass")


def key_hash(entry: TranslationEntry) -> int:
    """Return an unsigned 64-bit digest of the identity key of *entry*.

    Equal keys always hash equal; use :func:`key_of` to confirm a hit.
    """
    digest = int(xxhash.xxh64(_encode_key(key_of(entry))).intdigest())
    return digest & _HASH_MASK
