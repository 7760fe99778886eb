import json
import re
from pathlib import Path
from typing import Any

from rule_resolver.constants import PATH_SEPARATOR

_DRIVE_RE = re.compile(r"^[A-Za-z]:")


def read_json(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as handle:
        return json.load(handle)


def read_json_safe(path: Path) -> tuple[Any | None, str | None]:
    if not path.exists():
        return None, None
    if path.stat().st_size == 0:
        return None, None
    try:
        return read_json(path), None
    except (OSError, ValueError) as exc:
        return None, str(exc)


def normalize_path(path: str | Path) -> str:
    """Normalize a file path into the forward-slash form patterns match against.

    Backslashes become `/`, a drive letter is dropped, and empty or `.`
    segments are collapsed. `..` is kept as a literal segment.
    """
    text = str(path).replace("\\", PATH_SEPARATOR)
    text = _DRIVE_RE.sub("", text)
    segments = [part for part in text.split(PATH_SEPARATOR) if part not in ("", ".")]
    return PATH_SEPARATOR.join(segments)


def relative_rule_path(path: Path, root: Path) -> str:
    """Path of `path` relative to `root` when under it, otherwise as given, normalized."""
    try:
        return normalize_path(path.resolve().relative_to(root.resolve()).as_posix())
    except ValueError:
        return normalize_path(path.as_posix())


def compact_home_path(path: str | Path) -> str:
    text = str(path)
    home = str(Path.home())
    if text == home:
        return "~"
    home_prefix = f"{home}/"
    if text.startswith(home_prefix):
        return f"~/{text[len(home_prefix):]}"
    return text


def compact_home_paths_in_text(text: str) -> str:
    home = str(Path.home())
    if text == home:
        return "~"
    return text.replace(f"{home}/", "~/")
