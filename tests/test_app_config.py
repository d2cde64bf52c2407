"""Test module for catalog config loading and protected patterns."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from po_identity.core import app_config
from po_identity.core.model import Translation
from po_identity.core.translations import is_protected

requires_toml = pytest.mark.skipif(
    app_config.tomllib is None, reason="tomllib unavailable"
)


def _write_config(tmp_path: Path, text: str) -> None:
    cfg = tmp_path / "config"
    cfg.mkdir(parents=True, exist_ok=True)
    (cfg / "catalog.toml").write_text(text, encoding="utf-8")


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path_factory: pytest.TempPathFactory, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path_factory.mktemp("cwd"))
    app_config.load.cache_clear()


def test_load_defaults_disable_protection(tmp_path: Path) -> None:
    """Verify missing config yields no protected pattern."""
    cfg = app_config.load(tmp_path)
    assert cfg.protected_pattern is None
    assert cfg.protected_regex() is None


@requires_toml
def test_load_reads_protected_pattern_from_toml(tmp_path: Path) -> None:
    """Verify purge settings are loaded from catalog.toml."""
    _write_config(
        tmp_path,
        """
[purge]
protected_pattern = "^web/static/"
""".strip()
        + "\n",
    )
    cfg = app_config.load(tmp_path)
    assert cfg.protected_pattern == "^web/static/"
    entry = Translation(msgid="Hello", references=(("web/static/js/app.js", 42),))
    assert is_protected(entry, cfg.protected_regex())


@requires_toml
def test_load_applies_case_insensitive_flag(tmp_path: Path) -> None:
    """Verify the optional flags string is normalized and applied."""
    _write_config(
        tmp_path,
        """
[purge]
protected_pattern = "^WEB/"
protected_pattern_flags = "Ix"
""".strip()
        + "\n",
    )
    cfg = app_config.load(tmp_path)
    assert cfg.protected_pattern_flags == "i"
    regex = cfg.protected_regex()
    assert regex is not None
    assert regex.search("web/app.js")


@requires_toml
def test_load_keeps_defaults_for_invalid_payload(tmp_path: Path) -> None:
    """Verify blank or non-string values keep safe defaults."""
    _write_config(
        tmp_path,
        """
[purge]
protected_pattern = "   "
protected_pattern_flags = 3
""".strip()
        + "\n",
    )
    cfg = app_config.load(tmp_path)
    assert cfg == app_config.CatalogConfig()


@requires_toml
def test_load_ignores_non_table_purge_section(tmp_path: Path) -> None:
    """Verify a scalar purge value is ignored."""
    _write_config(tmp_path, 'purge = "web"\n')
    assert app_config.load(tmp_path) == app_config.CatalogConfig()


@requires_toml
def test_root_config_overrides_cwd_config(tmp_path: Path) -> None:
    """Verify the explicit root is applied after the working directory."""
    _write_config(Path.cwd(), '[purge]\nprotected_pattern = "^cwd/"\n')
    _write_config(tmp_path, '[purge]\nprotected_pattern = "^root/"\n')
    assert app_config.load(tmp_path).protected_pattern == "^root/"
    app_config.load.cache_clear()
    assert app_config.load().protected_pattern == "^cwd/"


@requires_toml
def test_load_logs_applied_config(tmp_path: Path, caplog) -> None:
    """Verify config loading emits a debug record per applied file."""
    _write_config(tmp_path, '[purge]\nprotected_pattern = "^web/"\n')
    with caplog.at_level(logging.DEBUG, logger=app_config.__name__):
        app_config.load(tmp_path)
    assert any("catalog.toml" in rec.getMessage() for rec in caplog.records)


def test_protected_regex_rejects_invalid_pattern() -> None:
    """Verify a broken pattern fails loudly instead of disabling protection."""
    cfg = app_config.CatalogConfig(protected_pattern="web/(")
    with pytest.raises(app_config.InvalidProtectedPatternError) as info:
        cfg.protected_regex()
    assert info.value.pattern == "web/("
    assert isinstance(info.value, ValueError)


def test_protected_regex_rejects_unknown_flag_on_direct_config() -> None:
    """Verify unsupported flags on a hand-built config raise a pattern error."""
    cfg = app_config.CatalogConfig(
        protected_pattern="^web/", protected_pattern_flags="m"
    )
    with pytest.raises(app_config.InvalidProtectedPatternError) as info:
        cfg.protected_regex()
    assert info.value.pattern == "^web/"
    assert "'m'" in info.value.reason


def test_protected_regex_accepts_uppercase_flag_on_direct_config() -> None:
    """Verify supported flags are case-insensitive without config loading."""
    cfg = app_config.CatalogConfig(
        protected_pattern="^WEB/", protected_pattern_flags="I"
    )
    regex = cfg.protected_regex()
    assert regex is not None
    assert regex.search("web/static/app.js")


@requires_toml
def test_load_skips_unparsable_toml_with_warning(tmp_path: Path, caplog) -> None:
    """Verify a broken config file keeps defaults and logs a warning."""
    _write_config(tmp_path, "[purge\nprotected_pattern = \n")
    with caplog.at_level(logging.WARNING, logger=app_config.__name__):
        cfg = app_config.load(tmp_path)
    assert cfg == app_config.CatalogConfig()
    assert any(rec.levelno == logging.WARNING for rec in caplog.records)
