"""Conversion from lark rule trees to endpoint models.

Each ``to_*`` function checks the rule tag of the tree it receives before
looking at its children, so a tree built for the wrong rule always fails
with UnexpectedRuleError. Children whose presence the grammar guarantees
are fetched with ``_child``; a missing one means the grammar and the
converters disagree, which is a bug rather than bad input.
"""

import logging
from typing import Callable, TypeVar

from lark import Token, Tree

from .base import Endpoint, Method, PathElement, PathVariable, Segment, TypeName, Variable, VariableType
from .errors import ParseError, UnexpectedRuleError, UnsupportedTypeError

logger = logging.getLogger(__name__)

T = TypeVar("T")

_VARIABLE_TYPES = {t.value: t for t in VariableType}
_METHODS = {m.value: m for m in Method}


def _guard(tree: Tree, rule: str) -> None:
    if tree.data != rule:
        raise UnexpectedRuleError(rule, str(tree.data))


def _child(tree: Tree, index: int) -> Tree | Token:
    try:
        return tree.children[index]
    except IndexError:
        raise AssertionError(f"Rule '{tree.data}' is missing child {index}") from None


def _text(node: Tree | Token) -> str:
    if isinstance(node, Token):
        return str(node)
    return "".join(str(token) for token in node.scan_values(lambda v: isinstance(v, Token)))


def to_variable_type(tree: Tree) -> VariableType:
    _guard(tree, "variable_type")
    name = _text(_child(tree, 0)).lower()
    try:
        return _VARIABLE_TYPES[name]
    except KeyError:
        raise UnsupportedTypeError(name) from None


def to_variable(tree: Tree) -> Variable:
    _guard(tree, "variable")
    name = _child(tree, 0)
    var_type = to_variable_type(_child(tree, 1))
    return Variable(name=_text(name), type=var_type)


def to_method(tree: Tree) -> Method:
    _guard(tree, "method")
    verb = _text(_child(tree, 0)).upper()
    if verb not in _METHODS:
        raise AssertionError(f"Grammar accepted unknown method '{verb}'")
    return _METHODS[verb]


def to_path_element(tree: Tree) -> PathElement:
    """Convert a ``segment`` or ``variable`` tree into one path element."""
    if tree.data == "segment":
        return Segment(literal=_text(_child(tree, 0)))
    if tree.data == "variable":
        variable = to_variable(tree)
        return PathVariable(name=variable.name, type=variable.type)
    raise UnexpectedRuleError("segment or variable", str(tree.data))


def to_path(tree: Tree) -> list[PathElement]:
    _guard(tree, "path")
    return [to_path_element(child) for child in tree.children]


def to_query_params(tree: Tree) -> list[Variable]:
    _guard(tree, "query_params")
    return [to_variable(child) for child in tree.children]


def _type_name_converter(rule: str) -> Callable[[Tree], TypeName]:
    def convert(tree: Tree) -> TypeName:
        _guard(tree, rule)
        return _text(tree)

    convert.__name__ = f"to_{rule}"
    convert.__doc__ = f"Return the identifier text of a ``{rule}`` tree."
    return convert


to_request_type = _type_name_converter("request_type")
to_response_type = _type_name_converter("response_type")


def _probe(convert: Callable[[Tree], T], node: Tree | None) -> T | None:
    """Try ``convert`` on an optional node, returning None on any parse failure."""
    if node is None:
        return None
    try:
        return convert(node)
    except ParseError as e:
        logger.debug("Optional %s not present: %s", convert.__name__[3:], e)
        return None


def to_endpoint(tree: Tree) -> Endpoint:
    """Assemble an Endpoint from an ``endpoint`` tree.

    The trailing ``RequestType -> ResponseType`` clause has no marker of
    its own, so the remaining children are probed: the response type is
    only looked for after a request type converted, and a response type
    that fails to convert becomes None instead of an error.
    """
    _guard(tree, "endpoint")

    method = to_method(_child(tree, 0))
    path = to_path(_child(tree, 1))
    query_params = to_query_params(_child(tree, 2))

    rest = iter(tree.children[3:])
    request_type = _probe(to_request_type, next(rest, None))
    response_type = None
    if request_type is not None:
        response_type = _probe(to_response_type, next(rest, None))

    return Endpoint(
        method=method,
        path=path,
        query_params=query_params,
        request_type=request_type,
        response_type=response_type,
    )
