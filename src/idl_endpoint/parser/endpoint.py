"""Endpoint notation parser.

Parses one line of endpoint notation into an Endpoint model::

    >>> parse_endpoint("POST /x/{n:int}").method
    <Method.POST: 'POST'>
"""

import logging

from .base import Endpoint
from .convert import to_endpoint
from .grammar import parse_tree

logger = logging.getLogger(__name__)


def parse_endpoint(text: str) -> Endpoint:
    """Parse endpoint notation into an Endpoint.

    Raises a ParseError subclass: EndpointSyntaxError when the text does
    not match the grammar, UnsupportedTypeError for an unknown variable
    type, UnexpectedRuleError when a tree reaches the wrong converter.
    """
    tree = parse_tree(text, "endpoint")
    endpoint = to_endpoint(tree)
    logger.debug("Parsed %r as %s with %d path elements", text, endpoint.method.value, len(endpoint.path))
    return endpoint
