"""Render a (possibly pruned) Stylesheet back to CSS text."""

from __future__ import annotations

from purifycss.model.stylesheet import AtRule, Comment, Node, Rule, Stylesheet

__all__ = ["to_src"]


def _node_src(node: Node) -> str:
    if isinstance(node, Rule):
        return node.leading + node.prelude + node.block
    if isinstance(node, AtRule):
        head = node.leading + node.keyword + node.prelude
        if node.children is not None:
            return head + "{" + to_src(node.children) + "}"
        if node.block is not None:
            return head + node.block
        return head + ";"
    if isinstance(node, Comment):
        return node.leading + node.text
    raise TypeError(f"Unknown stylesheet node: {node!r}")


def to_src(stylesheet: Stylesheet) -> str:
    """Concatenate the raw text of every node, in order, without reformatting.

    An unpruned stylesheet serializes byte-identical to the text it was
    parsed from.
    """
    return "".join(_node_src(node) for node in stylesheet.nodes) + stylesheet.trailing
