import sys
from pathlib import Path
from typing import Any, Callable

from click.testing import CliRunner
import pytest


def _ensure_repo_on_path() -> None:
    repo_root = Path(__file__).resolve().parent.parent
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


_ensure_repo_on_path()

from rule_resolver.constants import RULES_DIR_ENV  # noqa: E402
from rule_resolver.rules.models import RuleSource  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / ".config"))
    monkeypatch.delenv(RULES_DIR_ENV, raising=False)
    monkeypatch.setattr(Path, "home", lambda: tmp_path)


@pytest.fixture
def config_root(tmp_path: Path) -> Path:
    return tmp_path / ".config" / "rule-resolver"


@pytest.fixture
def rules_dir(tmp_path: Path) -> Path:
    path = tmp_path / "rules"
    path.mkdir()
    return path


@pytest.fixture
def write_rule(rules_dir: Path) -> Callable[..., Path]:
    def _write(name: str, patterns: list[str] | None = None, body: str = "Body.\n") -> Path:
        path = rules_dir / name
        path.parent.mkdir(parents=True, exist_ok=True)
        if patterns is None:
            text = body
        else:
            lines = ["---", "patterns:"]
            lines.extend(f'  - "{pattern}"' for pattern in patterns)
            lines.extend(["---", "", body])
            text = "\n".join(lines)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def make_source() -> Callable[..., RuleSource]:
    def _make(rule_id: str, patterns: list[str] | None = None, body: str = "Body.\n") -> RuleSource:
        if patterns is None:
            return RuleSource(rule_id=rule_id, text=body)
        lines = ["---", "patterns:"]
        lines.extend(f"  - '{pattern}'" for pattern in patterns)
        lines.extend(["---", body])
        return RuleSource(rule_id=rule_id, text="\n".join(lines))

    return _make


@pytest.fixture
def cli_runner(tmp_path: Path) -> CliRunner:
    class HomeCliRunner(CliRunner):
        def invoke(self, cli: Any, args: Any = None, **kwargs: Any):  # type: ignore[override]
            env = dict(kwargs.pop("env", {}) or {})
            env.setdefault("HOME", str(tmp_path))
            env.setdefault("XDG_CONFIG_HOME", str(tmp_path / ".config"))
            kwargs["env"] = env
            return super().invoke(cli, args=args, **kwargs)

    return HomeCliRunner()
