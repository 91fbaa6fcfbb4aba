"""Selector filter: prune twigs, rules and at-rules unused by the content.

A twig survives only if every tag, class, id and attribute part is in the
matching usage set. Combinators, pseudo-classes, pseudo-elements and ``*``
cannot be verified from content and never reject a twig on their own.
"""

from __future__ import annotations

from typing import Collection

from purifycss.extraction import UsageSet
from purifycss.model.selector import Selector, SelectorKind
from purifycss.model.stylesheet import AtRule, Comment, Node, Rule, Stylesheet

__all__ = [
    "filter_at_rules",
    "filter_selectors",
    "filter_stylesheet",
    "twig_is_used",
]


def twig_is_used(
    twig: Selector,
    classes: Collection[str],
    tags: Collection[str],
    ids: Collection[str],
    attrs: Collection[str],
) -> bool:
    """Return True if every checkable part of *twig* is in its usage set."""
    lookup = {
        SelectorKind.CLASS: classes,
        SelectorKind.TAG: tags,
        SelectorKind.ID: ids,
        SelectorKind.ATTRIBUTE: attrs,
    }
    for part in twig.parts:
        if part.is_checked and part.value not in lookup[part.kind]:
            return False
    return True


def _filter_rule(
    rule: Rule,
    classes: Collection[str],
    tags: Collection[str],
    ids: Collection[str],
    attrs: Collection[str],
    rejected: list[Selector],
) -> bool:
    """Drop unused twigs from *rule*; return True if any twig survives."""
    kept: list[Selector] = []
    for twig in rule.selectors:
        if twig_is_used(twig, classes, tags, ids, attrs):
            kept.append(twig)
        else:
            rejected.append(twig)
    rule.selectors = kept
    return bool(kept)


def filter_selectors(
    stylesheet: Stylesheet,
    classes: Collection[str],
    tags: Collection[str],
    ids: Collection[str],
    attrs: Collection[str],
) -> list[Selector]:
    """Prune the top-level rules of *stylesheet* in place.

    Returns the rejected twigs in source order. Rules left with no twigs are
    removed; at-rules are left to filter_at_rules().
    """
    rejected: list[Selector] = []
    nodes: list[Node] = []
    for node in stylesheet.nodes:
        if isinstance(node, Rule):
            if not _filter_rule(node, classes, tags, ids, attrs, rejected):
                continue
        nodes.append(node)
    stylesheet.nodes = nodes
    return rejected


def _filter_conditional(
    at_rule: AtRule,
    classes: Collection[str],
    tags: Collection[str],
    ids: Collection[str],
    attrs: Collection[str],
    rejected: list[Selector],
) -> bool:
    """Prune a conditional at-rule's children; return True if any remain."""
    assert at_rule.children is not None
    nodes: list[Node] = []
    for node in at_rule.children.nodes:
        if isinstance(node, Rule):
            if not _filter_rule(node, classes, tags, ids, attrs, rejected):
                continue
        elif isinstance(node, AtRule):
            if node.is_conditional and not _filter_conditional(
                node, classes, tags, ids, attrs, rejected
            ):
                continue
        elif not isinstance(node, Comment):
            raise TypeError(f"Unknown stylesheet node: {node!r}")
        nodes.append(node)
    at_rule.children.nodes = nodes
    return any(not isinstance(node, Comment) for node in nodes)


def filter_at_rules(
    stylesheet: Stylesheet,
    classes: Collection[str],
    tags: Collection[str],
    ids: Collection[str],
    attrs: Collection[str],
) -> list[Selector]:
    """Prune the rules nested in conditional at-rules, recursively, in place.

    A conditional at-rule left without rules is removed. Non-conditional
    at-rules (``@font-face``, ``@keyframes``, ``@import``, ...) are kept
    untouched. Returns the rejected twigs in source order.
    """
    rejected: list[Selector] = []
    nodes: list[Node] = []
    for node in stylesheet.nodes:
        if isinstance(node, AtRule) and node.is_conditional:
            if not _filter_conditional(node, classes, tags, ids, attrs, rejected):
                continue
        nodes.append(node)
    stylesheet.nodes = nodes
    return rejected


def filter_stylesheet(stylesheet: Stylesheet, usage: UsageSet) -> list[Selector]:
    """Run filter_selectors() then filter_at_rules() with one usage set."""
    args = (usage.classes, usage.tags, usage.ids, usage.attributes)
    rejected = filter_selectors(stylesheet, *args)
    rejected += filter_at_rules(stylesheet, *args)
    return rejected
