"""Tests for the selector and stylesheet models."""

import pytest

from purifycss.model import (
    AtRule,
    AtRuleKind,
    Selector,
    SelectorKind,
    SelectorPart,
    Stylesheet,
    render_selector,
    unescape_identifier,
)
from purifycss.model.stylesheet import at_rule_name
from purifycss.parser import parse_css, parse_selector


# ---------------------------------------------------------------------------
# Escapes
# ---------------------------------------------------------------------------


class TestUnescapeIdentifier:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("foo\\:bar", "foo:bar"),
            ("w-1\\/2", "w-1/2"),
            ("p-1\\.5", "p-1.5"),
            ("\\31 23", "123"),
            ("caf\\E9 ", "café"),
            ("plain", "plain"),
        ],
    )
    def test_unescape(self, raw, expected):
        assert unescape_identifier(raw) == expected

    def test_out_of_range_code_point(self):
        assert unescape_identifier("\\110000") == "�"


# ---------------------------------------------------------------------------
# Selector parts
# ---------------------------------------------------------------------------


class TestSelectorPart:
    def test_checked_kinds(self):
        checked = {
            kind for kind in SelectorKind if SelectorPart(kind, "x", "x").is_checked
        }
        assert checked == {
            SelectorKind.TAG,
            SelectorKind.CLASS,
            SelectorKind.ID,
            SelectorKind.ATTRIBUTE,
        }

    def test_special_only_for_class_and_id(self):
        assert SelectorPart(SelectorKind.CLASS, "a\\:b", ".a\\:b").is_special
        assert SelectorPart(SelectorKind.ID, "a\\:b", "#a\\:b").is_special
        assert not SelectorPart(SelectorKind.ATTRIBUTE, "a\\:b", "[a\\:b]").is_special

    def test_part_is_frozen(self):
        part = SelectorPart(SelectorKind.TAG, "a", "a")
        with pytest.raises(AttributeError):
            part.value = "b"  # type: ignore[misc]


class TestRenderSelector:
    @pytest.mark.parametrize(
        "text, rendered",
        [
            (".a .b", ".a .b"),
            ("ul > li", "ul > li"),
            ("ul>li", "ul > li"),
            ("a[href^='http']:hover", "a[href]:hover"),
            ("#main.foo\\:bar", "#main.foo\\:bar"),
            ("*::before", "*::before"),
            ("\n  div\n  span", "div span"),
        ],
    )
    def test_render(self, text, rendered):
        assert render_selector(parse_selector(text)) == rendered

    def test_str_uses_render(self):
        assert str(parse_selector(".x  .y")) == ".x .y"

    def test_empty_twig(self):
        assert render_selector(Selector()) == ""


# ---------------------------------------------------------------------------
# Stylesheet
# ---------------------------------------------------------------------------


class TestAtRuleName:
    @pytest.mark.parametrize(
        "keyword, name",
        [
            ("@media", "media"),
            ("@MEDIA", "media"),
            ("@-webkit-keyframes", "keyframes"),
            ("@-moz-document", "document"),
            ("@font-face", "font-face"),
        ],
    )
    def test_name(self, keyword, name):
        assert at_rule_name(keyword) == name

    def test_kind_follows_children(self):
        assert AtRule("@media", " x", children=Stylesheet()).kind is AtRuleKind.CONDITIONAL
        assert AtRule("@page", "", block="{}").kind is AtRuleKind.NON_CONDITIONAL


class TestCandidates:
    @pytest.fixture()
    def stylesheet(self) -> Stylesheet:
        return parse_css(
            """
            .a, .b .a, div.c { x: 1 }
            #main, #\\31 23 { x: 1 }
            .sm\\:flex { x: 1 }
            a[href], [data-x] { x: 1 }
            @media print { my-widget .d { x: 1 } }
            @font-face { font-family: x }
            """
        )

    def test_classes_deduplicated_in_order(self, stylesheet: Stylesheet):
        assert stylesheet.classes == ["a", "b", "c", "d"]

    def test_special_classes(self, stylesheet: Stylesheet):
        assert stylesheet.special_classes == ["sm\\:flex"]

    def test_ids(self, stylesheet: Stylesheet):
        assert stylesheet.ids == ["main"]
        assert stylesheet.special_ids == ["\\31 23"]

    def test_tags_include_nested(self, stylesheet: Stylesheet):
        assert stylesheet.tags == ["div", "a", "my-widget"]

    def test_attr_selectors(self, stylesheet: Stylesheet):
        assert stylesheet.attr_selectors == ["href", "data-x"]

    def test_twigs_walk_conditionals(self, stylesheet: Stylesheet):
        assert len(list(stylesheet.twigs())) == 9
