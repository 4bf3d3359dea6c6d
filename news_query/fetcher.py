from __future__ import annotations

import logging
from typing import Optional, Tuple

import requests

from .exceptions import MissingCredential, RemoteAPIFailure, TransportFailure

logger = logging.getLogger(__name__)

API_KEY_HEADER = "X-Api-Key"


def _error_message(resp: requests.Response) -> Tuple[Optional[str], Optional[str]]:
    """Pull (code, message) out of an API error body; (None, None) if it has none."""
    try:
        data = resp.json()
    except ValueError:
        return None, None
    if not isinstance(data, dict):
        return None, None
    code = data.get("code")
    if not isinstance(code, str):
        code = None
    message = data.get("message")
    if not isinstance(message, str) or not message:
        return code, None
    return code, message


def make_request(
    url: str,
    *,
    api_key: Optional[str],
    timeout: float,
    session: Optional[requests.Session] = None,
) -> str:
    """
    GET `url` with the API key header and return the response body.

    Raises MissingCredential when no key is set (before any network call),
    TransportFailure on network errors and RemoteAPIFailure when the API
    answers non-2xx with an error message.
    """
    if not api_key:
        raise MissingCredential("Expected API key got nothing")

    get = session.get if session is not None else requests.get
    try:
        resp = get(url, headers={API_KEY_HEADER: api_key}, timeout=timeout)
    except requests.RequestException as e:
        raise TransportFailure(f"Request failed: {e}") from e

    if not 200 <= resp.status_code < 300:
        code, message = _error_message(resp)
        logger.warning("News API answered %s (%s)", resp.status_code, code or "no code")
        if message:
            raise RemoteAPIFailure(resp.status_code, code, message)
        raise TransportFailure(
            f"Request failed with HTTP status {resp.status_code}",
            status_code=resp.status_code,
        )
    return resp.text
