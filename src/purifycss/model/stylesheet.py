"""Stylesheet model: Rule, AtRule, Comment, and Stylesheet dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Union

from purifycss.model.selector import Selector, SelectorKind

# At-rules whose block holds nested rules that are filtered like top-level ones.
CONDITIONAL_AT_RULES = frozenset(
    {"media", "supports", "document", "container", "layer", "scope", "starting-style"}
)


class AtRuleKind(Enum):
    CONDITIONAL = "conditional"
    NON_CONDITIONAL = "non-conditional"


def at_rule_name(keyword: str) -> str:
    """Normalize an at-keyword: ``@-moz-document`` -> ``document``."""
    name = keyword.lstrip("@").lower()
    if name.startswith("-"):
        # Vendor prefix: -webkit-keyframes, -moz-document
        _, _, rest = name[1:].partition("-")
        name = rest or name
    return name


@dataclass
class Comment:
    """A ``/* ... */`` comment kept verbatim."""

    text: str
    leading: str = ""


@dataclass
class Rule:
    """A style rule: comma-separated selectors plus an opaque block.

    ``block`` includes the surrounding braces and is never inspected.
    """

    selectors: list[Selector]
    block: str
    leading: str = ""

    @property
    def prelude(self) -> str:
        # Whitespace before the first selector belongs to ``leading``.
        return ",".join(s.raw for s in self.selectors).lstrip()


@dataclass
class AtRule:
    """An ``@`` construct.

    Attributes:
        keyword: The at-keyword as written, e.g. ``@media``.
        prelude: Everything between the keyword and the block or ``;``.
        block: The opaque block text including braces, for non-conditional
            at-rules that have one; ``None`` otherwise.
        children: Nested stylesheet for conditional at-rules.
        leading: Whitespace preceding the at-rule.
    """

    keyword: str
    prelude: str
    block: str | None = None
    children: Stylesheet | None = None
    leading: str = ""

    @property
    def name(self) -> str:
        return at_rule_name(self.keyword)

    @property
    def kind(self) -> AtRuleKind:
        if self.children is not None:
            return AtRuleKind.CONDITIONAL
        return AtRuleKind.NON_CONDITIONAL

    @property
    def is_conditional(self) -> bool:
        return self.kind is AtRuleKind.CONDITIONAL


Node = Union[Rule, AtRule, Comment]


@dataclass
class Stylesheet:
    """An ordered sequence of rules, at-rules and comments."""

    nodes: list[Node] = field(default_factory=list)
    trailing: str = ""

    # ---- traversal ----

    def rules(self) -> Iterator[Rule]:
        """Yield every rule, descending into conditional at-rules."""
        for node in self.nodes:
            if isinstance(node, Rule):
                yield node
            elif isinstance(node, AtRule) and node.children is not None:
                yield from node.children.rules()

    def twigs(self) -> Iterator[Selector]:
        for rule in self.rules():
            yield from rule.selectors

    def _values(self, kind: SelectorKind, special: bool | None = None) -> list[str]:
        seen: dict[str, None] = {}
        for twig in self.twigs():
            for part in twig.parts:
                if part.kind is not kind:
                    continue
                if special is not None and part.is_special is not special:
                    continue
                seen.setdefault(part.value, None)
        return list(seen)

    # ---- usage candidates ----

    @property
    def classes(self) -> list[str]:
        return self._values(SelectorKind.CLASS, special=False)

    @property
    def special_classes(self) -> list[str]:
        return self._values(SelectorKind.CLASS, special=True)

    @property
    def ids(self) -> list[str]:
        return self._values(SelectorKind.ID, special=False)

    @property
    def special_ids(self) -> list[str]:
        return self._values(SelectorKind.ID, special=True)

    @property
    def tags(self) -> list[str]:
        return self._values(SelectorKind.TAG)

    @property
    def attr_selectors(self) -> list[str]:
        return self._values(SelectorKind.ATTRIBUTE)
