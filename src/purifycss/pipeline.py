"""Top-level purify pipeline: parse, extract usage, filter, serialize."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from pathlib import Path

import rcssmin

from purifycss.config import DEFAULT_OPTIONS, PurifyOptions
from purifycss.extraction import UsageSet, build_usage
from purifycss.filtering import filter_stylesheet
from purifycss.model.selector import Selector
from purifycss.parser import parse_css
from purifycss.report import log_info, log_rejected
from purifycss.serializer import to_src
from purifycss.sources import Source, load_content, load_css

__all__ = ["PurifyResult", "purify", "purify_css"]


@dataclass
class PurifyResult:
    """Purified CSS plus what was dropped to get there."""

    css: str
    rejected: list[Selector] = field(default_factory=list)
    usage: UsageSet = field(default_factory=UsageSet)


def purify_css(css: str, content: str) -> PurifyResult:
    """Remove the rules of *css* whose selectors *content* never mentions.

    *content* is the normalized corpus (lower-cased, scripts compacted).
    Raises ParseError if *css* is malformed.
    """
    tree = parse_css(css)
    usage = build_usage(tree, content)
    rejected = filter_stylesheet(tree, usage)
    return PurifyResult(css=to_src(tree), rejected=rejected, usage=usage)


def purify(
    content: Source,
    css: Source,
    options: PurifyOptions | None = None,
) -> str:
    """Purify *css* against *content* and return the resulting CSS.

    Both arguments accept either raw text or a list of file paths. Script
    files among the content paths are compacted before matching.
    """
    options = options or DEFAULT_OPTIONS
    start = time.monotonic()

    css_text = load_css(css)
    corpus = load_content(content)

    result = purify_css(css_text, corpus)
    source = result.css
    if options.minify:
        source = rcssmin.cssmin(source)

    if options.info:
        log_info(len(css_text), len(source), time.monotonic() - start)
    if options.rejected:
        log_rejected(result.rejected)

    if options.output:
        Path(options.output).write_text(source, encoding="utf-8")
    return source
