from enum import Enum

from rule_resolver.rules.models import RuleScope


class UIStyle(str, Enum):
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"
    CYAN = "cyan"
    MAGENTA = "magenta"
    DIM = "dim"
    WHITE = "white"


RULE_SCOPE_STYLE = {
    RuleScope.UNIVERSAL: UIStyle.GREEN.value,
    RuleScope.CONDITIONAL: UIStyle.CYAN.value,
}
