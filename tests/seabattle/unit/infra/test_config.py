from __future__ import annotations

import os

from seabattle.infra.config import (
    EngineSettings,
    load_default_env_files,
    load_env_file,
    load_settings,
    resolve_log_level_name,
)


def test_load_env_file_sets_values_with_overwrite_by_default(tmp_path, monkeypatch) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text(
        "A=1\nB='two'\n#comment\nINVALID\nC=three\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("C", "already")
    monkeypatch.delenv("A", raising=False)
    monkeypatch.delenv("B", raising=False)
    load_env_file(str(env_file))
    assert os.environ.get("A") == "1"
    assert os.environ.get("B") == "two"
    assert os.environ.get("C") == "three"


def test_load_env_file_can_preserve_existing_values(tmp_path, monkeypatch) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("C=three\n", encoding="utf-8")
    monkeypatch.setenv("C", "already")
    load_env_file(str(env_file), override_existing=False)
    assert os.environ.get("C") == "already"


def test_load_default_env_files_later_files_win(tmp_path, monkeypatch) -> None:
    base = tmp_path / ".env"
    local = tmp_path / ".env.local"
    base.write_text("SEABATTLE_RULESET=classic\nSEABATTLE_AI_MODE=probe\n", encoding="utf-8")
    local.write_text("SEABATTLE_RULESET=russian\n", encoding="utf-8")
    monkeypatch.delenv("SEABATTLE_RULESET", raising=False)
    monkeypatch.delenv("SEABATTLE_AI_MODE", raising=False)

    load_default_env_files(paths=(str(base), str(local), str(tmp_path / "missing")))

    settings = load_settings()
    assert settings.ruleset == "russian"
    assert settings.ai_mode == "probe"


def test_load_settings_defaults(monkeypatch) -> None:
    for name in (
        "SEABATTLE_BOARD_SIZE",
        "SEABATTLE_RULESET",
        "SEABATTLE_AI_MODE",
        "SEABATTLE_PLACEMENT_ATTEMPTS",
        "SEABATTLE_SEED",
    ):
        monkeypatch.delenv(name, raising=False)
    assert load_settings() == EngineSettings()


def test_load_settings_tolerates_malformed_values(monkeypatch) -> None:
    monkeypatch.setenv("SEABATTLE_BOARD_SIZE", "ten")
    monkeypatch.setenv("SEABATTLE_AI_MODE", "oracle")
    monkeypatch.setenv("SEABATTLE_PLACEMENT_ATTEMPTS", "-5")
    monkeypatch.setenv("SEABATTLE_SEED", "abc")
    settings = load_settings()
    assert settings.board_size == 10
    assert settings.ai_mode == "hunt"
    assert settings.placement_attempts == 1
    assert settings.seed is None


def test_load_settings_reads_seed_and_size(monkeypatch) -> None:
    monkeypatch.setenv("SEABATTLE_BOARD_SIZE", "12")
    monkeypatch.setenv("SEABATTLE_SEED", "42")
    settings = load_settings()
    assert settings.board_size == 12
    assert settings.seed == 42


def test_resolve_log_level_prefers_app_override(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "warning")
    monkeypatch.delenv("SEABATTLE_LOG_LEVEL", raising=False)
    assert resolve_log_level_name() == "WARNING"
    monkeypatch.setenv("SEABATTLE_LOG_LEVEL", "debug")
    assert resolve_log_level_name() == "DEBUG"
