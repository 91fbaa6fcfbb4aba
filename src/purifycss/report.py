"""Info and rejected-selector reports, emitted through logging."""

from __future__ import annotations

import logging
from typing import Iterable

from purifycss.model.selector import Selector, render_selector

log = logging.getLogger("purifycss")

_RULE = "#" * 34


def size_ratio(before: int, after: int) -> float:
    """How many times smaller the output is, floored to one decimal."""
    if after == 0:
        return float("inf") if before else 1.0
    return int(before / after * 10) / 10


def log_info(
    before: int, after: int, elapsed: float, logger: logging.Logger | None = None
) -> None:
    out = logger or log
    out.info(_RULE)
    out.info("Before purify, CSS was %d chars long.", before)
    out.info(
        "After purify, CSS is %d chars long. (%s times smaller)",
        after,
        size_ratio(before, after),
    )
    out.info(_RULE)
    out.info("This function took: %.0fms", elapsed * 1000)


def log_rejected(
    rejected: Iterable[Selector], logger: logging.Logger | None = None
) -> None:
    out = logger or log
    out.info(_RULE)
    out.info("Rejected selectors:")
    out.info("\n".join(render_selector(twig) for twig in rejected))
    out.info(_RULE)
