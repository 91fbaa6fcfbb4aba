"""Read and concatenate CSS and content sources."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Union

from purifycss.compress import SCRIPT_SUFFIXES, widen_with_compressed

Source = Union[str, Iterable[Union[str, Path]]]


def concat_files(files: Iterable[str | Path], compress: bool = False) -> str:
    """Join the text of *files*, each followed by a single space.

    With *compress*, script files also contribute their compacted text
    (see widen_with_compressed()).
    Read errors propagate unchanged.
    """
    chunks: list[str] = []
    for file in files:
        path = Path(file)
        code = path.read_text(encoding="utf-8")
        if compress and path.suffix.lower() in SCRIPT_SUFFIXES:
            code = widen_with_compressed(code)
        chunks.append(code + " ")
    return "".join(chunks)


def load_css(css: Source) -> str:
    """Return CSS text from a raw string or a list of file paths."""
    if isinstance(css, str):
        return css
    return concat_files(css)


def load_content(content: Source) -> str:
    """Return the lower-cased corpus from a raw string or a list of paths."""
    if isinstance(content, str):
        return content.lower()
    return concat_files(content, compress=True).lower()
