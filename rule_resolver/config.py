import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from jsonschema import Draft202012Validator

from rule_resolver.constants import (
    APP_NAME,
    CONFIG_FILENAME,
    PATTERNS_KEY,
    RULE_SUFFIXES,
    RULES_DIR_ENV,
    RULES_DIRNAME,
)
from rule_resolver.errors import InvalidConfigError
from rule_resolver.utils import read_json_safe


CONFIG_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "properties": {
        "rules_dir": {"type": "string", "minLength": 1},
        "patterns_key": {"type": "string", "minLength": 1},
        "suffixes": {
            "type": "array",
            "items": {"type": "string", "pattern": r"^\.[^/\\]+$"},
            "minItems": 1,
            "uniqueItems": True,
        },
    },
    "additionalProperties": False,
}


def format_schema_error(error: Any) -> str:
    path = ".".join([str(part) for part in error.path])
    return f"{error.message} at {path}" if path else str(error.message)


@dataclass(frozen=True)
class ResolverConfig:
    rules_dir: Path = field(default_factory=lambda: Path.cwd() / RULES_DIRNAME)
    patterns_key: str = PATTERNS_KEY
    suffixes: tuple[str, ...] = RULE_SUFFIXES


class ConfigRepository:
    def __init__(self, root: Optional[Path] = None) -> None:
        self._root = root or _default_config_root()
        self._validator = Draft202012Validator(CONFIG_SCHEMA)

    @property
    def root(self) -> Path:
        return self._root

    @property
    def config_path(self) -> Path:
        return self.root / CONFIG_FILENAME

    def load_raw(self) -> dict[str, Any]:
        payload, error = read_json_safe(self.config_path)
        if error is not None:
            raise InvalidConfigError(self.config_path, f"invalid JSON: {error}")
        if payload is None:
            return {}
        schema_error = next(iter(self._validator.iter_errors(payload)), None)
        if schema_error is not None:
            raise InvalidConfigError(self.config_path, format_schema_error(schema_error))
        return payload

    def load(self, rules_dir: Optional[Path] = None) -> ResolverConfig:
        """Settings file, then the environment, then `rules_dir` if given."""
        payload = self.load_raw()
        defaults = ResolverConfig()

        resolved_dir = defaults.rules_dir
        if "rules_dir" in payload:
            resolved_dir = Path(payload["rules_dir"])
        env_dir = os.environ.get(RULES_DIR_ENV)
        if env_dir:
            resolved_dir = Path(env_dir)
        if rules_dir is not None:
            resolved_dir = rules_dir

        return ResolverConfig(
            rules_dir=resolved_dir.expanduser().resolve(),
            patterns_key=payload.get("patterns_key", defaults.patterns_key),
            suffixes=tuple(payload.get("suffixes", defaults.suffixes)),
        )


def _default_config_root() -> Path:
    xdg = os.environ.get("XDG_CONFIG_HOME")
    base = Path(xdg) if xdg else Path.home() / ".config"
    return base / APP_NAME
