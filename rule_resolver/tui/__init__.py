from rule_resolver.tui.renderers import ResolverConsoleUI

__all__ = ["ResolverConsoleUI"]
