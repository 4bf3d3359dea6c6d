from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Mapping, Tuple, Union


class Kind(str, enum.Enum):
    """Semantic kind of a parameter value."""
    TEXT = "text"
    INTEGER = "integer"
    TEXT_LIST = "text-list"


@dataclass(frozen=True)
class Text:
    value: str
    kind = Kind.TEXT

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError(f"Text expects a str, got {type(self.value).__name__}")


@dataclass(frozen=True)
class Integer:
    value: int
    kind = Kind.INTEGER

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise TypeError(f"Integer expects an int, got {type(self.value).__name__}")


@dataclass(frozen=True)
class TextList:
    values: Tuple[str, ...]
    kind = Kind.TEXT_LIST

    def __init__(self, values) -> None:
        # Any iterable of str, but not a bare string.
        if isinstance(values, (str, bytes)):
            raise TypeError("TextList expects an iterable of str, not a single string")
        values = tuple(values)
        for v in values:
            if not isinstance(v, str):
                raise TypeError(f"TextList items must be str, got {type(v).__name__}")
        object.__setattr__(self, "values", values)

    def __len__(self) -> int:
        return len(self.values)

    def joined(self, sep: str = ",") -> str:
        return sep.join(self.values)


ParameterValue = Union[Text, Integer, TextList]
Parameters = Mapping[str, ParameterValue]

_VARIANTS = (Text, Integer, TextList)


def is_parameter_value(value: Any) -> bool:
    return isinstance(value, _VARIANTS)


def to_parameter_value(value: Any) -> Any:
    """
    Wrap a plain Python value into its tagged variant.

    str -> Text, int -> Integer (bool is rejected), list/tuple of str -> TextList.
    Variants pass through unchanged. Anything else is returned as is, so
    schema.verify reports it as a TypeMismatch.
    """
    if is_parameter_value(value):
        return value
    if isinstance(value, str):
        return Text(value)
    if isinstance(value, int) and not isinstance(value, bool):
        return Integer(value)
    if isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value):
        return TextList(value)
    return value


def make_parameters(raw: Mapping[str, Any]) -> dict:
    """Build a parameter set from plain values, e.g. {"country": "gb", "pageSize": 5}."""
    return {k: to_parameter_value(v) for k, v in raw.items()}
