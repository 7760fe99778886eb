"""Tests for the rule-resolver CLI commands."""

from pathlib import Path

from rule_resolver.__main__ import cli


def test_resolve_prints_bundle(rules_dir: Path, write_rule, cli_runner) -> None:
    write_rule("clean.md")
    write_rule("ts-rules.md", ["src/**/*.ts"])
    write_rule("py-rules.md", ["**/*.py"])

    result = cli_runner.invoke(cli, ["--rules-dir", str(rules_dir), "resolve", "src/app/main.ts"])
    assert result.exit_code == 0, result.output
    assert "clean" in result.output
    assert "ts-rules" in result.output
    assert "py-rules" not in result.output


def test_resolve_multiple_paths_with_content(rules_dir: Path, write_rule, cli_runner) -> None:
    write_rule("clean.md", body="Keep functions small.\n")
    write_rule("py.md", ["**/*.py"], body="Prefer explicit imports.\n")

    result = cli_runner.invoke(
        cli, ["--rules-dir", str(rules_dir), "resolve", "--content", "a.py", "b.txt"]
    )
    assert result.exit_code == 0, result.output
    assert result.output.count("Keep functions small.") == 2
    assert result.output.count("Prefer explicit imports.") == 1


def test_resolve_no_guidance(rules_dir: Path, write_rule, cli_runner) -> None:
    write_rule("py.md", ["**/*.py"])
    result = cli_runner.invoke(cli, ["--rules-dir", str(rules_dir), "resolve", "README.md"])
    assert result.exit_code == 0, result.output
    assert "No guidance applies." in result.output


def test_resolve_invalid_header_fails(rules_dir: Path, write_rule, cli_runner) -> None:
    (rules_dir / "bad.md").write_text("---\npatterns: 3\n---\n", encoding="utf-8")
    result = cli_runner.invoke(cli, ["--rules-dir", str(rules_dir), "resolve", "a.py"])
    assert result.exit_code != 0
    assert "Invalid rule header" in result.output


def test_resolve_missing_rules_dir_fails(tmp_path: Path, cli_runner) -> None:
    result = cli_runner.invoke(
        cli, ["--rules-dir", str(tmp_path / "missing"), "resolve", "a.py"]
    )
    assert result.exit_code != 0
    assert "Rules directory does not exist" in result.output


def test_resolve_uses_configured_rules_dir(
    tmp_path: Path, config_root: Path, rules_dir: Path, write_rule, cli_runner
) -> None:
    write_rule("clean.md")
    config_root.mkdir(parents=True)
    (config_root / "config.json").write_text(
        '{"rules_dir": "%s"}' % rules_dir.as_posix(), encoding="utf-8"
    )
    result = cli_runner.invoke(cli, ["resolve", "a.py"])
    assert result.exit_code == 0, result.output
    assert "clean" in result.output
