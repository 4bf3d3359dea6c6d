from __future__ import annotations

import logging
from typing import Callable, FrozenSet, List, Mapping, Optional, Tuple
from urllib.parse import urlencode

from .constants import CATEGORIES, COUNTRY_CODES, LANGUAGES, MAX_SOURCES, SORT_BY_OPTIONS
from .exceptions import (
    EmptyList,
    EmptyQuery,
    TooManyValues,
    TypeMismatch,
    UnhandledParameter,
    UnsupportedValue,
)
from .params import Integer, Kind, ParameterValue, Text, TextList
from .schema import Schema, verify

logger = logging.getLogger(__name__)

# A rule returns the encoded value, or None to leave the key out of the URL.
Rule = Callable[[str, ParameterValue], Optional[str]]


def _member_of(allowed: FrozenSet[str], label: str) -> Rule:
    def rule(key: str, value: ParameterValue) -> Optional[str]:
        if not isinstance(value, Text) or value.value not in allowed:
            raise UnsupportedValue(key, getattr(value, "value", value), label)
        return value.value
    return rule


def _text_list(limit: Optional[int] = None) -> Rule:
    def rule(key: str, value: ParameterValue) -> Optional[str]:
        if not isinstance(value, TextList):
            raise TypeMismatch(key, Kind.TEXT_LIST.value, value.kind.value)
        n = len(value)
        if n == 0:
            raise EmptyList(key)
        if limit is not None and n > limit:
            raise TooManyValues(key, n, limit)
        return value.joined(",")
    return rule


def _query(key: str, value: ParameterValue) -> Optional[str]:
    if not isinstance(value, Text):
        raise TypeMismatch(key, Kind.TEXT.value, value.kind.value)
    if value.value == "":
        raise EmptyQuery(key)
    return value.value


def _integer(key: str, value: ParameterValue) -> Optional[str]:
    if not isinstance(value, Integer):
        logger.warning("Skipping %s: expected an integer, got %s", key, value.kind.value)
        return None
    return str(value.value)


# TODO: add ISO 8601 rules for from/to; everything rejects them until then.
RULES: Mapping[str, Rule] = {
    "country": _member_of(COUNTRY_CODES, "country code"),
    "category": _member_of(CATEGORIES, "category"),
    "language": _member_of(LANGUAGES, "language"),
    "sortBy": _member_of(SORT_BY_OPTIONS, "sort by type"),
    "sources": _text_list(limit=MAX_SOURCES),
    "domains": _text_list(),
    "q": _query,
    "pageSize": _integer,
    "page": _integer,
}


def encode_params(params: Mapping[str, ParameterValue]) -> str:
    """
    Serialize a verified parameter set into a query string.

    Keys are sorted so the same parameters always give the same string.
    """
    pairs: List[Tuple[str, str]] = []
    for key in sorted(params):
        rule = RULES.get(key)
        if rule is None:
            raise UnhandledParameter(key)
        encoded = rule(key, params[key])
        if encoded is not None:
            pairs.append((key, encoded))
    return urlencode(pairs)


def build_url(base: str, schema: Schema, params: Mapping[str, ParameterValue]) -> str:
    """
    Validate `params` against `schema`, apply the per-key rules and append the
    encoded query string to `base`.

    `base` is used verbatim; endpoint paths already end with "?".
    Raises a ParameterError subclass; never touches the network.
    """
    verify(schema, params)
    url = base + encode_params(params)
    logger.debug("Built request URL %s", url)
    return url
