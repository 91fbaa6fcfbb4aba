"""Usage extraction: which selector names appear in the content corpus.

Matching is plain substring containment on a lower-cased corpus. Content
embeds class names in attributes, string literals and template expressions
that a tokenizer would miss, so no word-boundary logic is applied. A false
positive only keeps unused CSS; a false negative would drop used CSS.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from purifycss.model.selector import unescape_identifier
from purifycss.model.stylesheet import Stylesheet
from purifycss.tags import HTML_ELEMENTS

__all__ = ["ContentSelectorExtraction", "UsageSet", "build_usage"]


@dataclass(frozen=True)
class UsageSet:
    """Selector values found in content, as written in the stylesheet."""

    classes: frozenset[str] = frozenset()
    ids: frozenset[str] = frozenset()
    tags: frozenset[str] = frozenset()
    attributes: frozenset[str] = frozenset()


class ContentSelectorExtraction:
    """Substring lookups against one normalized corpus."""

    def __init__(self, content: str) -> None:
        self.content = content.lower()

    def _contains(self, needle: str) -> bool:
        return bool(needle) and needle.lower() in self.content

    def filter(self, names: Iterable[str]) -> list[str]:
        """Return the simple names that occur in the corpus, in input order."""
        used: dict[str, None] = {}
        for name in names:
            if name not in used and self._contains(name):
                used[name] = None
        return list(used)

    def filter_by_search(self, names: Iterable[str]) -> list[str]:
        """Like filter(), but search for each name with its escapes removed.

        ``foo\\:bar`` is looked up as ``foo:bar``, which is how it appears in
        markup. The returned names keep their escaped form.
        """
        used: dict[str, None] = {}
        for name in names:
            if name not in used and self._contains(unescape_identifier(name)):
                used[name] = None
        return list(used)


def build_usage(stylesheet: Stylesheet, content: str) -> UsageSet:
    """Collect the stylesheet's candidate names that the content uses."""
    extraction = ContentSelectorExtraction(content)

    classes = extraction.filter(stylesheet.classes)
    classes += extraction.filter_by_search(stylesheet.special_classes)
    ids = extraction.filter(stylesheet.ids)
    ids += extraction.filter_by_search(stylesheet.special_ids)
    attributes = extraction.filter_by_search(stylesheet.attr_selectors)

    # Tags outside the reference list (custom elements, SVG) are still
    # candidates so they are never rejected just for being unknown.
    tag_candidates = sorted(HTML_ELEMENTS) + stylesheet.tags
    tags = extraction.filter(tag_candidates)

    return UsageSet(
        classes=frozenset(classes),
        ids=frozenset(ids),
        tags=frozenset(tags),
        attributes=frozenset(attributes),
    )
