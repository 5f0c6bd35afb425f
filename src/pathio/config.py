from __future__ import annotations

"""Settings sources.

CONTRACT
- Inputs: YAML settings file, mapping, or process environment
- Outputs (required):
  - SettingSource exposing get_setting(key) -> str | None
  - resolve_charset() returns the charset to decode files with
- Invariants:
  - Missing/empty charset falls back to DEFAULT_CHARSET ("utf-8")
  - EnvSettings reads os.environ on every lookup (no caching)
- Failure:
  - Raises ValueError on invalid settings file schema
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Protocol

import yaml
from loguru import logger

DEFAULT_CHARSET = "utf-8"
ENV_PREFIX = "PATHIO_"


class SettingSource(Protocol):
    def get_setting(self, key: str) -> str | None: ...


@dataclass(frozen=True)
class StaticSettings:
    values: Mapping[str, Any] = field(default_factory=dict)

    def get_setting(self, key: str) -> str | None:
        value = self.values.get(key)
        return None if value is None else str(value)


@dataclass(frozen=True)
class EnvSettings:
    prefix: str = ENV_PREFIX

    def get_setting(self, key: str) -> str | None:
        return os.environ.get(f"{self.prefix}{key.upper()}") or None


def default_settings() -> SettingSource:
    return EnvSettings()


def resolve_charset(settings: SettingSource | None = None) -> str:
    source = settings if settings is not None else default_settings()
    return source.get_setting("charset") or DEFAULT_CHARSET


SETTINGS_SCHEMA = {
    "type": "object",
    "properties": {
        "charset": {"type": "string", "minLength": 1},
    },
}


def load_settings_file(path: Path) -> StaticSettings:
    import jsonschema  # lazy import

    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}

    try:
        jsonschema.validate(instance=data, schema=SETTINGS_SCHEMA)
    except jsonschema.ValidationError as e:
        raise ValueError(f"Invalid settings file: {e.message}") from e

    logger.debug(f"Loaded settings from {path}: {sorted(data)}")
    return StaticSettings(values=dict(data))


if __name__ == "__main__":
    import argparse
    import sys

    parser = argparse.ArgumentParser(description="Settings Loader CLI")
    parser.add_argument("--settings", help="Path to settings YAML (default: environment)")
    args = parser.parse_args()

    try:
        source = load_settings_file(Path(args.settings)) if args.settings else default_settings()
        print(f"charset: {resolve_charset(source)}")
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
