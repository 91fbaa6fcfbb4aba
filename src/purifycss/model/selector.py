"""Selector twig model: SelectorKind, SelectorPart, and Selector."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum


class SelectorKind(Enum):
    """Kind of an atomic selector part."""

    COMBINATOR = "combinator"
    TAG = "tag"
    CLASS = "class"
    ID = "id"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"
    UNIVERSAL = "universal"


# Parts whose usage can be checked against content. Everything else passes.
CHECKED_KINDS = frozenset(
    {SelectorKind.TAG, SelectorKind.CLASS, SelectorKind.ID, SelectorKind.ATTRIBUTE}
)

_ESCAPE_RE = re.compile(r"\\(?:([0-9a-fA-F]{1,6})[ \t\n\f]?|\r\n|(.))", re.DOTALL)


def unescape_identifier(value: str) -> str:
    """Decode CSS escapes in an identifier (``foo\\:bar`` -> ``foo:bar``)."""

    def _replace(match: re.Match[str]) -> str:
        hex_digits, char = match.group(1), match.group(2)
        if hex_digits:
            code = int(hex_digits, 16)
            if code == 0 or code > 0x10FFFF or 0xD800 <= code <= 0xDFFF:
                return "�"
            return chr(code)
        if char is None or char in "\n\f\r":
            # Escaped newline is a line continuation.
            return ""
        return char

    return _ESCAPE_RE.sub(_replace, value)


@dataclass(frozen=True)
class SelectorPart:
    """One atomic piece of a selector.

    Attributes:
        kind: What the part selects on.
        value: The identifying text: the identifier for tags, classes and
            ids (escapes kept), the attribute name for attribute selectors,
            the combinator symbol (``" "``, ``">"``, ``"+"``, ``"~"``).
        raw: The exact source text of the part.
    """

    kind: SelectorKind
    value: str
    raw: str

    @property
    def is_special(self) -> bool:
        """True for class/id identifiers that carry CSS escapes."""
        return (
            self.kind in (SelectorKind.CLASS, SelectorKind.ID) and "\\" in self.value
        )

    @property
    def is_checked(self) -> bool:
        return self.kind in CHECKED_KINDS


@dataclass
class Selector:
    """A single comma-separated selector (a twig).

    ``prefix`` and ``suffix`` hold whitespace and comments surrounding the
    parts so that ``raw`` always reproduces the source text.
    """

    parts: list[SelectorPart] = field(default_factory=list)
    prefix: str = ""
    suffix: str = ""

    @property
    def raw(self) -> str:
        return self.prefix + "".join(p.raw for p in self.parts) + self.suffix

    def __str__(self) -> str:
        return render_selector(self)


def render_selector(twig: Selector) -> str:
    """Rebuild a readable selector string from a twig, for reporting."""
    out: list[str] = []
    for part in twig.parts:
        if part.kind is SelectorKind.COMBINATOR:
            out.append(" " if part.value == " " else f" {part.value} ")
        elif part.kind is SelectorKind.CLASS:
            out.append("." + part.value)
        elif part.kind is SelectorKind.ID:
            out.append("#" + part.value)
        elif part.kind is SelectorKind.ATTRIBUTE:
            out.append("[" + part.value + "]")
        elif part.kind is SelectorKind.TAG:
            out.append(part.value)
        elif part.kind in (
            SelectorKind.PSEUDO_CLASS,
            SelectorKind.PSEUDO_ELEMENT,
            SelectorKind.UNIVERSAL,
        ):
            out.append(part.raw)
        else:  # pragma: no cover
            raise TypeError(f"Unknown selector part kind: {part.kind!r}")
    return "".join(out)
