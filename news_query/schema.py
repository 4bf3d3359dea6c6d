"""
Endpoint schemas and the kind check that runs before any serialization.

A schema maps each accepted parameter name to the Kind its value must have.
Passing `verify` only guarantees shape; enumeration membership, list bounds
and the like are checked later by `urlbuilder`.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping

from .exceptions import TypeMismatch, UnknownParameter
from .params import Kind, is_parameter_value

Schema = Mapping[str, Kind]


def _schema(**kinds: Kind) -> Schema:
    return MappingProxyType(dict(kinds))


TOP_HEADLINES_SCHEMA: Schema = _schema(
    country=Kind.TEXT,
    category=Kind.TEXT,
    sources=Kind.TEXT_LIST,
    q=Kind.TEXT,
    pageSize=Kind.INTEGER,
    page=Kind.INTEGER,
)

# "from" is a keyword, so this one cannot go through _schema(**kinds).
EVERYTHING_SCHEMA: Schema = MappingProxyType({
    "q": Kind.TEXT,
    "sources": Kind.TEXT_LIST,
    "domains": Kind.TEXT_LIST,
    "from": Kind.TEXT,
    "to": Kind.TEXT,
    "language": Kind.TEXT,
    "sortBy": Kind.TEXT,
    "pageSize": Kind.INTEGER,
    "page": Kind.INTEGER,
})

SOURCES_SCHEMA: Schema = _schema(
    country=Kind.TEXT,
    category=Kind.TEXT,
    language=Kind.TEXT,
)


def _kind_name(value: Any) -> str:
    if is_parameter_value(value):
        return value.kind.value
    return type(value).__name__


def verify(schema: Schema, params: Mapping[str, Any]) -> None:
    """
    Check every key of `params` against `schema`.

    Raises UnknownParameter for keys the schema lacks and TypeMismatch when a
    value's kind differs from the declared one. Returns None on success.
    """
    for key, value in params.items():
        expected = schema.get(key)
        if expected is None:
            raise UnknownParameter(key)
        if not is_parameter_value(value) or value.kind is not expected:
            raise TypeMismatch(key, expected.value, _kind_name(value))
