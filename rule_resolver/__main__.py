import logging
from pathlib import Path
from typing import Any, Dict, Optional

import click
from rich.console import Console
from rich.logging import RichHandler

from rule_resolver.config import ConfigRepository, ResolverConfig
from rule_resolver.errors import RuleResolverError
from rule_resolver.rules.merge import merge
from rule_resolver.rules.store import RuleStore
from rule_resolver.service import RuleActivationService
from rule_resolver.tui import ResolverConsoleUI


def _config_from_obj(obj: Dict[str, Any]) -> ResolverConfig:
    try:
        return ConfigRepository().load(rules_dir=obj.get("rules_dir"))
    except RuleResolverError as exc:
        raise click.ClickException(str(exc))


def _service_from_obj(obj: Dict[str, Any]) -> RuleActivationService:
    return RuleActivationService.from_config(_config_from_obj(obj))


def _load_store(service: RuleActivationService) -> RuleStore:
    try:
        return service.reload()
    except RuleResolverError as exc:
        raise click.ClickException(f"Fatal: {exc}")


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--rules-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory holding rule documents.",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, rules_dir: Optional[Path], verbose: bool) -> None:
    """Resolve which guidance rules apply to a file."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
    ctx.obj = {"rules_dir": rules_dir}


@cli.command(help="Show the ordered rule bundle for each path.")
@click.argument("paths", nargs=-1, required=True)
@click.option(
    "--root",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Project root that paths are made relative to (default: current directory).",
)
@click.option("--content", is_flag=True, help="Also print rule bodies.")
@click.pass_obj
def resolve(obj: Dict[str, Any], paths: tuple[str, ...], root: Optional[Path], content: bool) -> None:
    ui = ResolverConsoleUI(Console())
    service = _service_from_obj(obj)
    store = _load_store(service)
    project_root = (root or Path.cwd()).resolve()

    for path in paths:
        normalized = service.normalize(path, project_root)
        activated = service.activated_for(path, project_root)
        bundle = merge(activated)
        ui.render_bundle(
            normalized, bundle, activated, store=store, show_content=content
        )


@cli.group(help="Inspect the loaded rule set.")
def rules() -> None:
    pass


@rules.command("list", help="List rules in load order.")
@click.pass_obj
def rules_list(obj: Dict[str, Any]) -> None:
    ui = ResolverConsoleUI(Console())
    store = _load_store(_service_from_obj(obj))
    ui.render_rules(store)


@rules.command("show", help="Show one rule's metadata and body.")
@click.argument("rule_id")
@click.pass_obj
def rules_show(obj: Dict[str, Any], rule_id: str) -> None:
    ui = ResolverConsoleUI(Console())
    store = _load_store(_service_from_obj(obj))
    descriptor = store.get(rule_id)
    if descriptor is None:
        raise click.ClickException(f"Rule not found: {rule_id}")
    ui.render_rule(descriptor, store.payload(descriptor.payload_ref) or "")


@cli.command(help="Validate the rule set and report pattern warnings.")
@click.option("--strict", is_flag=True, help="Fail when any pattern warning is reported.")
@click.pass_obj
def check(obj: Dict[str, Any], strict: bool) -> None:
    ui = ResolverConsoleUI(Console())
    store = _load_store(_service_from_obj(obj))
    ui.render_check(store)
    if strict and store.warnings:
        raise click.exceptions.Exit(1)


def main() -> int:
    try:
        result = cli(standalone_mode=False)
    except click.exceptions.Exit as exc:
        code = exc.exit_code
        return code if isinstance(code, int) else 1
    except click.ClickException as exc:
        exc.show()
        return 2
    return result if isinstance(result, int) else 0


if __name__ == "__main__":
    raise SystemExit(main())
