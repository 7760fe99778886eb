from rich.console import Console
from rich.markup import escape

from rule_resolver.rules.models import LoadWarning, RuleBundle, RuleDescriptor
from rule_resolver.rules.store import RuleStore
from rule_resolver.tui.enums import UIStyle
from rule_resolver.tui.sections import UISection
from rule_resolver.tui.tables import BundleTable, RulesTable
from rule_resolver.utils import compact_home_path, compact_home_paths_in_text


class ResolverConsoleUI:
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render_bundle(
        self,
        path: str,
        bundle: RuleBundle,
        activated: list[RuleDescriptor],
        store: RuleStore | None = None,
        show_content: bool = False,
    ) -> None:
        title = f"rules for {path or '<empty path>'}"
        if bundle.is_empty():
            self.console.print(
                UISection.note(title, "No guidance applies.", style=UIStyle.YELLOW.value)
            )
            return

        self.console.print(
            UISection.wrap(
                title,
                BundleTable.bundle_table(bundle, activated),
                style=UIStyle.BLUE.value,
                subtitle=f"{len(bundle)} active",
            )
        )
        if not show_content or store is None:
            return

        for rule_id, payload_ref in zip(bundle.rule_ids, bundle.payload_refs):
            self.console.print(UISection.payload(rule_id, store.payload(payload_ref) or ""))

    def render_rules(self, store: RuleStore) -> None:
        descriptors = list(store.all())
        self.console.print(
            UISection.wrap(
                "rule set",
                RulesTable.summary_block(descriptors, warnings=len(store.warnings)),
                style=UIStyle.BLUE.value,
            )
        )
        if not descriptors:
            self.console.print(
                UISection.note("rules", "No rules found.", style=UIStyle.YELLOW.value)
            )
            return
        self.console.print(
            UISection.wrap(
                "rules",
                RulesTable.descriptors_table(descriptors),
                style=UIStyle.CYAN.value,
            )
        )
        self.render_warnings(list(store.warnings))

    def render_rule(self, descriptor: RuleDescriptor, body: str) -> None:
        self.console.print(
            UISection.wrap(
                descriptor.id,
                RulesTable.descriptors_table([descriptor]),
                style=UIStyle.CYAN.value,
                subtitle=compact_home_path(descriptor.payload_ref),
            )
        )
        self.console.print(UISection.payload("content", body))

    def render_warnings(self, warnings: list[LoadWarning]) -> None:
        if not warnings:
            return
        warning_text = "\n".join(
            [f"- {escape(compact_home_paths_in_text(str(item)))}" for item in warnings]
        )
        self.console.print(
            UISection.note("warnings", warning_text, style=UIStyle.YELLOW.value)
        )

    def render_check(self, store: RuleStore) -> None:
        style = UIStyle.YELLOW.value if store.warnings else UIStyle.GREEN.value
        self.console.print(
            UISection.wrap(
                "check",
                RulesTable.summary_block(list(store.all()), warnings=len(store.warnings)),
                style=style,
            )
        )
        self.render_warnings(list(store.warnings))
