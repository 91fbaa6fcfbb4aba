"""Lark Transformer that converts a CSS parse tree into a Stylesheet model."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from lark import Lark, Token, Transformer, Tree, v_args
from lark.exceptions import LarkError, VisitError
from lark.tree import Meta

from purifycss.model.stylesheet import (
    CONDITIONAL_AT_RULES,
    AtRule,
    Comment,
    Node,
    Rule,
    Stylesheet,
    at_rule_name,
)
from purifycss.parser.errors import ParseError
from purifycss.parser.selectors import parse_selector_list

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

log = logging.getLogger("purifycss.parser")


@dataclass(frozen=True)
class _Span:
    """Source offsets of a block, braces included."""

    start: int
    end: int


@dataclass(frozen=True)
class _Statement:
    node: Node
    start: int
    end: int


@v_args(meta=True)
class CssTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into Stylesheet nodes.

    Every node's text is sliced out of *source* by position, so nothing the
    grammar skips is lost: the gaps between statements (whitespace, stray
    ``;`` and ``<!--``/``-->`` markers) become the ``leading`` text of the
    following node.
    """

    def __init__(self, source: str, parser: Lark) -> None:
        super().__init__()
        self.source = source
        self.parser = parser

    # ---- blocks ----

    def block(self, meta: Meta, items: list[object]) -> _Span:
        return _Span(meta.start_pos, meta.end_pos)

    # ---- statements ----

    def comment(self, meta: Meta, items: list[Token]) -> _Statement:
        token = items[0]
        return _Statement(Comment(text=str(token)), token.start_pos, token.end_pos)

    def rule(self, meta: Meta, items: list[object]) -> _Statement:
        block = items[-1]
        assert isinstance(block, _Span)
        prelude = self.source[meta.start_pos : block.start]
        rule = Rule(
            selectors=parse_selector_list(prelude),
            block=self.source[block.start : block.end],
        )
        return _Statement(rule, meta.start_pos, meta.end_pos)

    def at_rule(self, meta: Meta, items: list[object]) -> _Statement:
        keyword = items[0]
        assert isinstance(keyword, Token)
        last = items[-1]
        if isinstance(last, _Span):
            body_start = last.start
        else:
            assert isinstance(last, Token)
            body_start = last.start_pos
        at_rule = AtRule(
            keyword=str(keyword),
            prelude=self.source[keyword.end_pos : body_start],
        )
        if isinstance(last, _Span):
            block_text = self.source[last.start : last.end]
            if at_rule_name(at_rule.keyword) in CONDITIONAL_AT_RULES:
                at_rule.children = self._nested(block_text[1:-1], keyword)
            if at_rule.children is None:
                at_rule.block = block_text
        return _Statement(at_rule, meta.start_pos, meta.end_pos)

    def start(self, meta: Meta, items: list[object]) -> Stylesheet:
        stylesheet = Stylesheet()
        cursor = 0
        for stmt in items:
            if not isinstance(stmt, _Statement):
                # Stray ; <!-- --> tokens are left in the gap.
                continue
            stmt.node.leading = self.source[cursor : stmt.start]
            stylesheet.nodes.append(stmt.node)
            cursor = stmt.end
        stylesheet.trailing = self.source[cursor:]
        return stylesheet

    # ---- helpers ----

    def _nested(self, inner: str, keyword: Token) -> Stylesheet | None:
        """Parse the body of a conditional at-rule as a stylesheet.

        A body that is not a list of statements (declarations written
        directly inside ``@media``, say) is kept opaque instead.
        """
        try:
            tree = self.parser.parse(inner)
        except LarkError as exc:
            log.debug(
                "Keeping %s block at line %s opaque: %s", keyword, keyword.line, exc
            )
            return None
        return _transform(inner, tree, self.parser)


def _parse(source: str, parser: Lark) -> Stylesheet:
    try:
        tree = parser.parse(source)
    except LarkError as e:
        # UnexpectedInput carries line/column, other LarkErrors do not.
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        raise ParseError(str(e), line=line, column=column) from e
    return _transform(source, tree, parser)


def _transform(source: str, tree: Tree, parser: Lark) -> Stylesheet:
    try:
        return CssTransformer(source, parser).transform(tree)
    except VisitError as e:
        # Surface the SelectorError (or other failure) raised by a callback.
        orig = e.orig_exc
        while isinstance(orig, VisitError):
            orig = orig.orig_exc
        raise orig from None


def parse_css(source: str) -> Stylesheet:
    """Parse CSS source text into a Stylesheet.

    Raises ParseError when the text is malformed (unterminated block,
    string or comment, stray closing brace, undecomposable selector).
    """
    parser = Lark(
        GRAMMAR_PATH.read_text(),
        parser="lalr",
        start="start",
        propagate_positions=True,
    )
    return _parse(source, parser)
