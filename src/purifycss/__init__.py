"""purifycss: remove CSS rules whose selectors the content never uses."""

__version__ = "0.1.0"

from purifycss.config import PurifyOptions  # noqa: E402
from purifycss.parser import ParseError, parse_css  # noqa: E402
from purifycss.pipeline import PurifyResult, purify, purify_css  # noqa: E402
from purifycss.serializer import to_src  # noqa: E402

__all__ = [
    "ParseError",
    "PurifyOptions",
    "PurifyResult",
    "__version__",
    "parse_css",
    "purify",
    "purify_css",
    "to_src",
]
