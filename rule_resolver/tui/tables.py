from collections import Counter

from rich.markup import escape
from rich.table import Column, Table

from rule_resolver.rules.models import RuleBundle, RuleDescriptor
from rule_resolver.tui.enums import RULE_SCOPE_STYLE, UIStyle
from rule_resolver.utils import compact_home_path


def _scope_text(descriptor: RuleDescriptor) -> str:
    style = RULE_SCOPE_STYLE.get(descriptor.scope, UIStyle.WHITE.value)
    return f"[{style}]{descriptor.scope.value}[/{style}]"


class RulesTable:
    @staticmethod
    def summary_block(descriptors: list[RuleDescriptor], warnings: int):
        counts = Counter(descriptor.scope.value for descriptor in descriptors)
        chips = [f"{key}={value}" for key, value in sorted(counts.items()) if value > 0]
        if not chips:
            chips = ["none"]

        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        table.add_row("Rules", str(len(descriptors)))
        table.add_row("Scopes", "  ".join(chips))
        table.add_row("Warnings", str(warnings))
        return table

    @staticmethod
    def descriptors_table(descriptors: list[RuleDescriptor]) -> Table:
        table = Table(
            Column(header="Id", overflow="fold"),
            Column(header="Scope", width=12),
            Column(header="Priority", justify="right", width=8),
            Column(header="Patterns", overflow="fold"),
            Column(header="Description", overflow="ellipsis"),
            expand=True,
            header_style="bold",
        )
        for descriptor in descriptors:
            table.add_row(
                escape(descriptor.id),
                _scope_text(descriptor),
                str(descriptor.priority),
                escape("\n".join(descriptor.patterns)) or "-",
                escape(descriptor.description),
            )
        return table


class BundleTable:
    @staticmethod
    def bundle_table(bundle: RuleBundle, activated: list[RuleDescriptor]) -> Table:
        table = Table(
            Column(header="#", justify="right", width=3),
            Column(header="Id", overflow="fold"),
            Column(header="Scope", width=12),
            Column(header="Priority", justify="right", width=8),
            Column(header="Payload", overflow="ellipsis"),
            expand=True,
            header_style="bold",
        )
        by_id = {descriptor.id: descriptor for descriptor in activated}
        for index, (rule_id, payload_ref) in enumerate(
            zip(bundle.rule_ids, bundle.payload_refs), start=1
        ):
            descriptor = by_id[rule_id]
            table.add_row(
                str(index),
                escape(rule_id),
                _scope_text(descriptor),
                str(descriptor.priority),
                escape(compact_home_path(payload_ref)),
            )
        return table
