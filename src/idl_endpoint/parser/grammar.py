"""Lark grammar for endpoint notation and the rule tree producer.

Example of the notation::

    GET /register/{id:string}?type:string&order:string RQ -> RS
"""

import logging
from functools import lru_cache

from lark import Lark, Tree
from lark.exceptions import UnexpectedInput

from .errors import EndpointSyntaxError

logger = logging.getLogger(__name__)

ENDPOINT_GRAMMAR = r"""
    endpoint: method _WS path query_params (_WS request_type _WS? _ARROW _WS? response_type)? _WS?

    method: METHOD

    // --- Path ---
    path: ("/" (segment | "{" variable "}"))+
    segment: SEGMENT

    // --- Variables ---
    variable: NAME ":" variable_type
    variable_type: NAME
    query_params: ("?" variable ("&" variable)*)?

    // --- Payload types ---
    request_type: NAME
    response_type: NAME

    METHOD: "GET"i | "POST"i | "PUT"i | "DELETE"i
    SEGMENT: /[^\/{}?&\s]+/
    NAME: /[A-Za-z_][A-Za-z0-9_]*/
    _ARROW: "->"
    _WS: /[ \t]+/
"""

START_RULES = (
    "endpoint",
    "method",
    "path",
    "segment",
    "variable",
    "variable_type",
    "query_params",
    "request_type",
    "response_type",
)

TERMINAL_NAMES = {
    "METHOD": "method",
    "SEGMENT": "path segment",
    "NAME": "identifier",
    "SLASH": "'/'",
    "LBRACE": "'{'",
    "RBRACE": "'}'",
    "COLON": "':'",
    "QMARK": "'?'",
    "AMPERSAND": "'&'",
    "_ARROW": "'->'",
    "_WS": "whitespace",
    "$END": "end of input",
    "<END-OF-FILE>": "end of input",
}


@lru_cache(maxsize=1)
def get_parser() -> Lark:
    """Build the LALR parser once; every rule is usable as a start rule."""
    return Lark(ENDPOINT_GRAMMAR, start=list(START_RULES), parser="lalr")


def parse_tree(text: str, rule: str = "endpoint") -> Tree:
    """Run the grammar over ``text`` and return the tree rooted at ``rule``.

    Raises EndpointSyntaxError when the text is not accepted. Only
    syntax is checked here; type names and rule tags are handled by
    the converters.
    """
    if rule not in START_RULES:
        raise ValueError(f"Unknown rule: {rule}")

    try:
        return get_parser().parse(text, start=rule)
    except UnexpectedInput as e:
        expected = _describe_expected(e)
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        logger.debug("Rejected %r as %s at %s:%s", text, rule, line, column)
        raise EndpointSyntaxError(
            f"Invalid {rule} at line {line}, column {column}: expected one of {', '.join(expected)}",
            line=line,
            column=column,
            expected=expected,
        ) from e


def _describe_expected(e: UnexpectedInput) -> list[str]:
    """Readable names of the terminals that would have been accepted.

    LALR states are shared between contexts, so the state's lookahead set
    can name terminals that are invalid here; ``accepts`` replays the
    parser to keep only the ones that really continue the input.
    """
    names = getattr(e, "accepts", None) or getattr(e, "expected", None) or getattr(e, "allowed", None) or []
    return sorted({TERMINAL_NAMES.get(name, name) for name in names})
