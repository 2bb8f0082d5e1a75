from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from cssbuilder.errors import ConfigError

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class CssBuilderConfig:
    log_level: str = "WARNING"
    json_indent: int | None = None  # None = compact separators
    sort_keys: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> CssBuilderConfig:
        """Build a config from ``CSSBUILDER_*`` environment variables."""
        env = os.environ if environ is None else environ
        defaults = cls()

        indent = defaults.json_indent
        raw_indent = env.get("CSSBUILDER_JSON_INDENT", "").strip()
        if raw_indent:
            try:
                indent = int(raw_indent)
            except ValueError as exc:
                raise ConfigError(
                    f"CSSBUILDER_JSON_INDENT must be an integer, got {raw_indent!r}"
                ) from exc

        sort_keys = defaults.sort_keys
        raw_sort = env.get("CSSBUILDER_SORT_KEYS", "").strip()
        if raw_sort:
            sort_keys = raw_sort.lower() in _TRUE_VALUES

        return cls(
            log_level=env.get("CSSBUILDER_LOG_LEVEL", defaults.log_level).upper(),
            json_indent=indent,
            sort_keys=sort_keys,
        )
