"""Engine configuration and env loading."""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from seabattle.core.fleet import DEFAULT_PLACEMENT_ATTEMPTS
from seabattle.core.models import BOARD_SIZE

AI_MODES: tuple[str, ...] = ("hunt", "probe")


@dataclass(frozen=True, slots=True)
class EngineSettings:
    """Immutable engine settings sourced from environment."""

    board_size: int = BOARD_SIZE
    ruleset: str = "classic"
    ai_mode: str = "hunt"
    placement_attempts: int = DEFAULT_PLACEMENT_ATTEMPTS
    seed: int | None = None


def load_env_file(path: str = ".env", *, override_existing: bool = True) -> None:
    """Load KEY=VALUE pairs from an env file into process environment.

    By default, values from the env file overwrite existing environment variables.
    """
    env_path = Path(path)
    if not env_path.exists():
        return

    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue

        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key:
            continue

        if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
            value = value[1:-1]

        if override_existing or key not in os.environ:
            os.environ[key] = value


def load_default_env_files(
    *, override_existing: bool = True, paths: Sequence[str] | None = None
) -> None:
    """Load ``.env`` then ``.env.local``; later files win."""
    to_load = tuple(paths) if paths is not None else (".env", ".env.local")
    for path in to_load:
        load_env_file(path, override_existing=override_existing)


def load_settings() -> EngineSettings:
    """Load engine settings from env vars, falling back to defaults."""
    ai_mode = os.getenv("SEABATTLE_AI_MODE", "hunt").strip().lower()
    return EngineSettings(
        board_size=max(1, _int("SEABATTLE_BOARD_SIZE", BOARD_SIZE)),
        ruleset=os.getenv("SEABATTLE_RULESET", "classic").strip() or "classic",
        ai_mode=ai_mode if ai_mode in AI_MODES else "hunt",
        placement_attempts=max(1, _int("SEABATTLE_PLACEMENT_ATTEMPTS", DEFAULT_PLACEMENT_ATTEMPTS)),
        seed=_optional_int("SEABATTLE_SEED"),
    )


def resolve_log_level_name(default: str = "INFO") -> str:
    """Resolve log level with app-prefixed override."""
    value = os.getenv("SEABATTLE_LOG_LEVEL")
    if value is None:
        value = os.getenv("LOG_LEVEL", default)
    return value.strip().upper()


def _int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _optional_int(name: str) -> int | None:
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        return None
