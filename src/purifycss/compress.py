"""Script compaction ahead of usage matching.

Collapsing whitespace and comments out of script sources puts identifiers
next to the quotes and operators around them, the way they are written in
markup. The compacted text is searched in addition to the raw source, never
instead of it: rjsmin is not a JSX or TypeScript parser and may cut text it
mistakes for a comment (``http://`` inside JSX text, for one).
"""

from __future__ import annotations

import logging

import rjsmin

log = logging.getLogger("purifycss.compress")

# Suffixes of content files treated as script sources.
SCRIPT_SUFFIXES = frozenset({".js", ".mjs", ".cjs", ".jsx", ".ts", ".tsx"})


def compress_code(code: str) -> str:
    """Return *code* compacted with rjsmin, or unchanged if that fails."""
    try:
        return rjsmin.jsmin(code)
    except Exception as exc:
        log.debug("Compression failed, using raw source: %s", exc)
        return code


def widen_with_compressed(code: str) -> str:
    """Return *code* followed by its compacted form.

    The result contains every substring of the raw source, so adding the
    compacted text can only mark more selectors as used.
    """
    compact = compress_code(code)
    if compact == code:
        return code
    return code + " " + compact
