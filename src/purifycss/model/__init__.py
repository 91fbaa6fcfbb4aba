from purifycss.model.selector import (
    Selector,
    SelectorKind,
    SelectorPart,
    render_selector,
    unescape_identifier,
)
from purifycss.model.stylesheet import (
    AtRule,
    AtRuleKind,
    Comment,
    Node,
    Rule,
    Stylesheet,
)

__all__ = [
    "AtRule",
    "AtRuleKind",
    "Comment",
    "Node",
    "Rule",
    "Selector",
    "SelectorKind",
    "SelectorPart",
    "Stylesheet",
    "render_selector",
    "unescape_identifier",
]
