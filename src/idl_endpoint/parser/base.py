"""Typed data models for parsed endpoint notation.

Every converter in ``idl_endpoint.parser.convert`` produces one of these
models. All of them are frozen: an ``Endpoint`` is built once per parse
call and handed to the caller as-is.
"""

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

TypeName = str


class Method(str, Enum):
    """HTTP verbs accepted by the notation."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class VariableType(str, Enum):
    """Primitive types a path variable or query parameter may carry."""

    STRING = "string"
    SHORT = "short"
    INT = "int"
    LONG = "long"
    FLOAT = "float"
    DOUBLE = "double"
    BOOL = "bool"


class Variable(BaseModel):
    """A ``name:type`` pair, used for query parameters."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: VariableType


class Segment(BaseModel):
    """A fixed path component, e.g. ``register`` in ``/register``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["segment"] = "segment"
    literal: str


class PathVariable(BaseModel):
    """A ``{name:type}`` placeholder inside the path."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["variable"] = "variable"
    name: str
    type: VariableType


PathElement = Annotated[Segment | PathVariable, Field(discriminator="kind")]


class Endpoint(BaseModel):
    """A single endpoint declaration with all its parts."""

    model_config = ConfigDict(frozen=True)

    method: Method
    path: list[PathElement] = Field(min_length=1)  # source order
    query_params: list[Variable] = []
    request_type: TypeName | None = None
    response_type: TypeName | None = None
