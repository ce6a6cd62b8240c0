"""Configuration loading utilities for the bytesz command line."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any
import os
import textwrap

try:
    import tomllib
except ModuleNotFoundError:  # pragma: no cover - Python <3.11 fallback
    import tomli as tomllib  # type: ignore

__all__ = ["Config", "default_config_path", "load_config", "write_default_config", "DEFAULT_CONFIG_TOML"]

DEFAULT_CONFIG_TOML = textwrap.dedent(
    """
    [output]
    json = false
    color = true

    [logging]
    level = "WARNING"
    file = ""
    """
)

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


@dataclass(slots=True)
class Config:
    """Runtime configuration for the bytesz command."""

    json: bool = False
    color: bool = True
    log_level: str = "WARNING"
    log_file: str = ""


def default_config_path() -> Path:
    return Path.home() / ".config" / "bytesz" / "config.toml"


def load_config(config_path: str | Path | None = None) -> Config:
    """Load configuration from a candidate list of paths.

    Resolution order:
        1. explicit ``config_path`` argument
        2. ``BYTESZ_CONFIG`` environment variable
        3. ``~/.config/bytesz/config.toml``
        4. packaged default configuration

    An explicit path that does not exist is an error; missing candidates
    further down the list are skipped.
    """

    if config_path:
        path = Path(config_path).expanduser()
        if not path.is_file():
            raise FileNotFoundError(f"config file not found: {path}")
        return _config_from_path(path)

    candidates: list[Path] = []
    env_path = os.environ.get("BYTESZ_CONFIG")
    if env_path:
        candidates.append(Path(env_path).expanduser())

    candidates.append(default_config_path())

    for candidate in candidates:
        if candidate.is_file():
            return _config_from_path(candidate)

    return _config_from_toml(DEFAULT_CONFIG_TOML)


def _config_from_path(path: Path) -> Config:
    raw = path.read_text(encoding="utf-8")
    return _config_from_toml(raw)


def _config_from_toml(content: str) -> Config:
    data = tomllib.loads(content)
    output = _typed_or_default(data.get("output"), dict, {})
    logging_section = _typed_or_default(data.get("logging"), dict, {})

    level = _typed_or_default(logging_section.get("level"), str, "WARNING").upper()
    if level not in LOG_LEVELS:
        level = "WARNING"

    return Config(
        json=_typed_or_default(output.get("json"), bool, False),
        color=_typed_or_default(output.get("color"), bool, True),
        log_level=level,
        log_file=_typed_or_default(logging_section.get("file"), str, ""),
    )


def _typed_or_default(value: Any, expected: type, fallback: Any) -> Any:
    if isinstance(value, expected):
        return value
    return fallback


def write_default_config(target_path: str | Path) -> Path:
    """Write the default configuration to ``target_path``.

    Creates parent directories if needed and returns the absolute path
    to the created file.
    """

    target = Path(target_path).expanduser()
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(DEFAULT_CONFIG_TOML, encoding="utf-8")
    return target.resolve()
