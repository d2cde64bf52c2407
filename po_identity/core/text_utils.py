"""Helpers for coalescing message text fragments into plain strings."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Union

Text = Union[str, Sequence["Text"]]


class MalformedTextError(ValueError):
    """Represent a text value that contains a non-text fragment."""

    def __init__(self, *, fragment: object) -> None:
        """Initialize the instance."""
        super().__init__(
            f"Cannot flatten {type(fragment).__name__} fragment into text: "
            f"{fragment!r}"
        )
        self.fragment = fragment


def _collect(value: object, out: list[str]) -> None:
    if isinstance(value, str):
        out.append(value)
        return
    if isinstance(value, (list, tuple)):
        for part in value:
            _collect(part, out)
        return
    raise MalformedTextError(fragment=value)


def flatten_text(value: Text) -> str:
    """Concatenate *value* (a string or nested fragment list) into one string.

    Lists and tuples are walked in order; anything that is not a ``str`` at
    the leaves raises :class:`MalformedTextError`.
    """
    if isinstance(value, str):  # fast path
        return value
    parts: list[str] = []
    _collect(value, parts)
    return "".join(parts)
