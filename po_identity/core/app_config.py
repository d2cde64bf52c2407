"""Catalog configuration loading utilities for repository-local settings."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

try:
    import tomllib
except ModuleNotFoundError:  # Python 3.10: config files are ignored
    tomllib = None  # type: ignore[assignment]

_LOG = logging.getLogger(__name__)

CONFIG_RELPATH = Path("config") / "catalog.toml"
_PATTERN_FLAGS = {"i": re.IGNORECASE}


class InvalidProtectedPatternError(ValueError):
    """Represent a configured protected pattern that cannot be compiled."""

    def __init__(self, *, pattern: str, reason: str) -> None:
        """Initialize the instance."""
        super().__init__(f"Invalid protected pattern {pattern!r}: {reason}")
        self.pattern = pattern
        self.reason = reason


@dataclass(frozen=True, slots=True)
class CatalogConfig:
    """Store purge settings consumed by catalog merge callers."""

    protected_pattern: str | None = None
    protected_pattern_flags: str = ""

    def protected_regex(self) -> re.Pattern[str] | None:
        """Compile the protected pattern, or return None when none is set."""
        if self.protected_pattern is None:
            return None
        flags = 0
        for char in self.protected_pattern_flags.lower():
            flag = _PATTERN_FLAGS.get(char)
            if flag is None:
                raise InvalidProtectedPatternError(
                    pattern=self.protected_pattern,
                    reason=f"unsupported flag {char!r}",
                )
            flags |= flag
        try:
            return re.compile(self.protected_pattern, flags)
        except re.error as exc:
            raise InvalidProtectedPatternError(
                pattern=self.protected_pattern, reason=str(exc)
            ) from exc


def _candidate_roots(root: Path | None) -> list[Path]:
    # Working directory first; an explicit root overrides it.
    bases = [Path.cwd()] if root is None else [Path.cwd(), root]
    return list(dict.fromkeys(base.resolve() for base in bases))


def _read_config_table(path: Path) -> dict[str, Any]:
    if tomllib is None or not path.is_file():
        return {}
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except OSError:
        return {}
    except tomllib.TOMLDecodeError as exc:
        _LOG.warning("skipping unreadable catalog config %s: %s", path, exc)
        return {}


def _normalize_pattern(value: Any, *, default: str | None) -> str | None:
    if not isinstance(value, str) or not value.strip():
        return default
    return value


def _normalize_flags(value: Any, *, default: str) -> str:
    if not isinstance(value, str):
        return default
    return "".join(sorted({ch for ch in value.lower() if ch in _PATTERN_FLAGS}))


@lru_cache(maxsize=8)
def load(root: Path | None = None) -> CatalogConfig:
    """Load and merge catalog configuration from `config/catalog.toml` candidates."""
    cfg = CatalogConfig()
    for base in _candidate_roots(root):
        path = base / CONFIG_RELPATH
        data = _read_config_table(path)
        if not data:
            continue
        _LOG.debug("applying catalog config from %s", path)
        purge = data.get("purge", {})
        if isinstance(purge, dict):
            cfg = CatalogConfig(
                protected_pattern=_normalize_pattern(
                    purge.get("protected_pattern"),
                    default=cfg.protected_pattern,
                ),
                protected_pattern_flags=_normalize_flags(
                    purge.get("protected_pattern_flags"),
                    default=cfg.protected_pattern_flags,
                ),
            )
    return cfg
