from purifycss.parser.errors import ParseError, SelectorError
from purifycss.parser.selectors import parse_selector, parse_selector_list
from purifycss.parser.transformer import parse_css

__all__ = [
    "ParseError",
    "SelectorError",
    "parse_css",
    "parse_selector",
    "parse_selector_list",
]
