"""Backend-core public surface – re-export runtime API."""

from __future__ import annotations

from .model import PluralTranslation, Translation, TranslationEntry
from .text_utils import MalformedTextError, flatten_text
from .translations import (
    AUTOGENERATED_FLAG,
    FUZZY_FLAG,
    are_same,
    find_same,
    is_autogenerated,
    is_protected,
    key_of,
    mark_as_fuzzy,
)

__all__ = [
    "AUTOGENERATED_FLAG",
    "FUZZY_FLAG",
    "MalformedTextError",
    "PluralTranslation",
    "Translation",
    "TranslationEntry",
    "are_same",
    "find_same",
    "flatten_text",
    "is_autogenerated",
    "is_protected",
    "key_of",
    "mark_as_fuzzy",
]
