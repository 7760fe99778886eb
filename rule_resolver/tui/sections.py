from typing import Optional

from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from rule_resolver.tui.enums import UIStyle


class UISection:
    @staticmethod
    def wrap(title: str, body, style: str = UIStyle.BLUE.value, subtitle: Optional[str] = None) -> Panel:
        return Panel(
            body,
            title=escape(title),
            subtitle=escape(subtitle) if subtitle else None,
            border_style=style,
            padding=(0, 1),
        )

    @staticmethod
    def note(title: str, body: str, style: str) -> Panel:
        return Panel(body, title=escape(title), border_style=style, padding=(0, 1))

    @staticmethod
    def payload(title: str, body: str) -> Panel:
        # Rule bodies are opaque; print them verbatim, never as markup.
        return Panel(
            Text(body.strip()),
            title=escape(title),
            border_style=UIStyle.DIM.value,
            padding=(0, 1),
        )
