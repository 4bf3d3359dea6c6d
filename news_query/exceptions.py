from __future__ import annotations

from typing import Optional


class NewsQueryError(Exception):
    """Base class for every error raised by news_query."""


class ParameterError(NewsQueryError):
    """Raised when a parameter set cannot be turned into a request URL."""

    def __init__(self, key: str, message: str) -> None:
        super().__init__(message)
        self.key = key


class UnknownParameter(ParameterError):
    """Raised when a key is not part of the endpoint schema."""

    def __init__(self, key: str) -> None:
        super().__init__(key, f"Invalid parameter {key}")


class TypeMismatch(ParameterError):
    """Raised when a value's kind differs from the kind the schema declares."""

    def __init__(self, key: str, expected: str, actual: str) -> None:
        super().__init__(
            key,
            f"Invalid type for parameter {key} expected type {expected} got type {actual}",
        )
        self.expected = expected
        self.actual = actual


class UnsupportedValue(ParameterError):
    """Raised when a value is not in the enumeration allowed for its key."""

    def __init__(self, key: str, value: object, label: str) -> None:
        super().__init__(key, f"Unsupported {label} {value}")
        self.value = value


class EmptyList(ParameterError):
    def __init__(self, key: str) -> None:
        super().__init__(key, f"Empty list of {key}")


class TooManyValues(ParameterError):
    def __init__(self, key: str, count: int, limit: int) -> None:
        super().__init__(key, f"Maximum of {limit} {key} got {count}")
        self.count = count
        self.limit = limit


class EmptyQuery(ParameterError):
    def __init__(self, key: str = "q") -> None:
        super().__init__(key, "Expected query got empty string")


class UnhandledParameter(ParameterError):
    """Raised for a schema-approved key that has no serialization rule."""

    def __init__(self, key: str) -> None:
        super().__init__(key, f"Unhandled parameter {key}")


class RequestError(NewsQueryError):
    """Raised when the HTTP exchange with the API fails."""


class MissingCredential(RequestError):
    """Raised before any network call when no API key is configured."""


class TransportFailure(RequestError):
    """Raised on network errors or undecodable non-2xx responses."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class RemoteAPIFailure(RequestError):
    """Raised on a non-2xx response carrying an API error message."""

    def __init__(self, status_code: int, code: Optional[str], message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.code = code
        self.message = message


class ResponseDecodeError(NewsQueryError):
    """Raised when a successful response body cannot be decoded into results."""
