"""Hand-written scanner that decomposes selector preludes into twigs.

Example:
    ``ul > li.item:not(.x), a[href^="http"]`` becomes two twigs:
    ``tag(ul) combinator(>) tag(li) class(item) pseudo-class(not)`` and
    ``tag(a) attribute(href)``.
"""

from __future__ import annotations

import re

from purifycss.model.selector import Selector, SelectorKind, SelectorPart
from purifycss.parser.errors import SelectorError

__all__ = ["parse_selector", "parse_selector_list"]

_ESCAPE = r"\\(?:[0-9a-fA-F]{1,6}[ \t\n\r\f]?|[^\n\r\f0-9a-fA-F])"
_IDENT = rf"(?:[\w-]|[^\x00-\x7f]|{_ESCAPE})+"
_STRING = r"""(?:"(?:[^"\\]|\\[\s\S])*"|'(?:[^'\\]|\\[\s\S])*')"""

# Whitespace and comments, optionally around an explicit combinator. Besides
# > + ~ this accepts the shadow-piercing >>> and /deep/ (/ident/) forms
# still emitted by Vue and Angular style compilers.
_COMBINATOR_RE = re.compile(
    r"""
    (?P<before>(?:[ \t\n\r\f]+|/\*[\s\S]*?\*/)*)
    (?P<symbol>>>>|/[a-zA-Z-]+/|[>+~]?)
    (?P<after>(?:[ \t\n\r\f]+|/\*[\s\S]*?\*/)*)
    """,
    re.VERBOSE,
)

_CLASS_RE = re.compile(rf"\.(?P<name>{_IDENT})")
_ID_RE = re.compile(rf"\#(?P<name>{_IDENT})")

# [ns|name op "value" i]
_ATTRIBUTE_RE = re.compile(
    rf"""
    \[
    [ \t\n\r\f]*
    (?:(?:{_IDENT}|\*)?\|(?!=))?       # optional namespace prefix
    (?P<name>{_IDENT})
    (?:[^\]"'\\]|\\[\s\S]|{_STRING})*   # operator, value, flags
    \]
    """,
    re.VERBOSE,
)

_PSEUDO_RE = re.compile(rf"(?P<colons>::?)(?P<name>{_IDENT})")

# ns|tag, *|*, tag, *
_TYPE_RE = re.compile(
    rf"""
    (?:(?:{_IDENT}|\*)?\|(?!=))?
    (?P<name>{_IDENT}|\*)
    """,
    re.VERBOSE,
)


def _skip_string(text: str, pos: int) -> int:
    """Return the index just past the string literal starting at *pos*."""
    quote = text[pos]
    i = pos + 1
    while i < len(text):
        ch = text[i]
        if ch == "\\":
            i += 2
            continue
        if ch == quote:
            return i + 1
        i += 1
    raise SelectorError(f"Unterminated string in selector: {text!r}")


def _skip_comment(text: str, pos: int) -> int:
    end = text.find("*/", pos + 2)
    if end < 0:
        raise SelectorError(f"Unterminated comment in selector: {text!r}")
    return end + 2


def _scan_balanced(text: str, pos: int) -> int:
    """Return the index just past the bracket group opening at *pos*."""
    closing = {"(": ")", "[": "]"}
    stack = [closing[text[pos]]]
    i = pos + 1
    while i < len(text):
        ch = text[i]
        if ch == "\\":
            i += 2
            continue
        if ch in "\"'":
            i = _skip_string(text, i)
            continue
        if text.startswith("/*", i):
            i = _skip_comment(text, i)
            continue
        if ch in closing:
            stack.append(closing[ch])
        elif ch in ")]":
            if ch != stack[-1]:
                raise SelectorError(f"Mismatched {ch!r} in selector: {text!r}")
            stack.pop()
            if not stack:
                return i + 1
        i += 1
    raise SelectorError(f"Unbalanced brackets in selector: {text!r}")


def _split_top_level(text: str) -> list[str]:
    """Split on commas that are not nested in strings, brackets or comments."""
    pieces: list[str] = []
    start = 0
    i = 0
    while i < len(text):
        ch = text[i]
        if ch == "\\":
            i += 2
        elif ch in "\"'":
            i = _skip_string(text, i)
        elif text.startswith("/*", i):
            i = _skip_comment(text, i)
        elif ch in "([":
            i = _scan_balanced(text, i)
        elif ch == ",":
            pieces.append(text[start:i])
            i += 1
            start = i
        else:
            i += 1
    pieces.append(text[start:])
    return pieces


def _next_part(text: str, pos: int) -> tuple[SelectorPart, int]:
    """Scan one simple-selector part at *pos* (never a combinator)."""
    ch = text[pos]

    if ch == ".":
        m = _CLASS_RE.match(text, pos)
        if m:
            part = SelectorPart(SelectorKind.CLASS, m.group("name"), m.group(0))
            return part, m.end()

    elif ch == "#":
        m = _ID_RE.match(text, pos)
        if m:
            return SelectorPart(SelectorKind.ID, m.group("name"), m.group(0)), m.end()

    elif ch == "[":
        end = _scan_balanced(text, pos)
        raw = text[pos:end]
        m = _ATTRIBUTE_RE.fullmatch(raw)
        if m:
            return SelectorPart(SelectorKind.ATTRIBUTE, m.group("name"), raw), end

    elif ch == ":":
        m = _PSEUDO_RE.match(text, pos)
        if m:
            end = m.end()
            if end < len(text) and text[end] == "(":
                end = _scan_balanced(text, end)
            kind = (
                SelectorKind.PSEUDO_ELEMENT
                if m.group("colons") == "::"
                else SelectorKind.PSEUDO_CLASS
            )
            return SelectorPart(kind, m.group("name"), text[pos:end]), end

    elif ch == "&":
        # Nesting selector: stands for its parent, never checked on its own.
        return SelectorPart(SelectorKind.UNIVERSAL, "&", "&"), pos + 1

    else:
        m = _TYPE_RE.match(text, pos)
        if m:
            name = m.group("name")
            kind = SelectorKind.UNIVERSAL if name == "*" else SelectorKind.TAG
            return SelectorPart(kind, name, m.group(0)), m.end()

    raise SelectorError(
        f"Unexpected {ch!r} at offset {pos} in selector: {text!r}", column=pos + 1
    )


def parse_selector(text: str) -> Selector:
    """Decompose one comma-free selector into a twig."""
    twig = Selector()
    pos = 0

    lead = _COMBINATOR_RE.match(text, pos)
    if lead and not lead.group("symbol"):
        twig.prefix = lead.group(0)
        pos = lead.end()

    while pos < len(text):
        m = _COMBINATOR_RE.match(text, pos)
        if m and m.end() > pos:
            if m.end() == len(text) and not m.group("symbol"):
                twig.suffix = m.group(0)
                break
            symbol = m.group("symbol") or " "
            twig.parts.append(SelectorPart(SelectorKind.COMBINATOR, symbol, m.group(0)))
            pos = m.end()
            continue
        part, pos = _next_part(text, pos)
        twig.parts.append(part)

    if not twig.parts:
        raise SelectorError(f"Empty selector: {text!r}")
    return twig


def parse_selector_list(text: str) -> list[Selector]:
    """Split a rule prelude on top-level commas and decompose each selector."""
    return [parse_selector(piece) for piece in _split_top_level(text)]
