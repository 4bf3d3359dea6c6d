from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

from .exceptions import ResponseDecodeError
from .models import Article, ArticleResults, Source, SourceResults


def _load_object(body: str) -> Dict[str, Any]:
    try:
        data = json.loads(body)
    except ValueError as e:
        raise ResponseDecodeError(f"Response body is not valid JSON ({e})") from e
    if not isinstance(data, dict):
        raise ResponseDecodeError(f"Expected a JSON object, got {type(data).__name__}")
    return data


def _opt_str(entry: Dict[str, Any], key: str) -> Optional[str]:
    val = entry.get(key)
    if val is None:
        return None
    if not isinstance(val, str):
        raise ResponseDecodeError(f"Field {key!r} should be a string, got {type(val).__name__}")
    return val


def _items(data: Dict[str, Any], key: str) -> List[Dict[str, Any]]:
    items = data.get(key)
    if items is None:
        return []
    if not isinstance(items, list):
        raise ResponseDecodeError(f"Field {key!r} should be a list, got {type(items).__name__}")
    for it in items:
        if not isinstance(it, dict):
            raise ResponseDecodeError(f"Entries of {key!r} should be objects, got {type(it).__name__}")
    return items


def to_source(entry: Dict[str, Any]) -> Source:
    return Source(
        id=_opt_str(entry, "id"),
        name=_opt_str(entry, "name") or "",
        description=_opt_str(entry, "description"),
        url=_opt_str(entry, "url"),
        category=_opt_str(entry, "category"),
        language=_opt_str(entry, "language"),
        country=_opt_str(entry, "country"),
    )


def to_article(entry: Dict[str, Any]) -> Article:
    """
    Convert one raw article object into an Article.

    Missing text fields become "" (title, url) or None; a missing source
    becomes an unnamed Source.
    """
    src = entry.get("source") or {}
    if not isinstance(src, dict):
        raise ResponseDecodeError(f"Field 'source' should be an object, got {type(src).__name__}")

    return Article(
        source=to_source(src),
        title=_opt_str(entry, "title") or "",
        url=_opt_str(entry, "url") or "",
        author=_opt_str(entry, "author"),
        description=_opt_str(entry, "description"),
        url_to_image=_opt_str(entry, "urlToImage"),
        published_at=_opt_str(entry, "publishedAt"),
        content=_opt_str(entry, "content"),
    )


def to_article_results(body: str) -> ArticleResults:
    data = _load_object(body)
    total = data.get("totalResults") or 0
    if not isinstance(total, int) or isinstance(total, bool):
        raise ResponseDecodeError(f"Field 'totalResults' should be an integer, got {type(total).__name__}")
    return ArticleResults(
        status=_opt_str(data, "status") or "",
        total_results=total,
        articles=[to_article(e) for e in _items(data, "articles")],
    )


def to_source_results(body: str) -> SourceResults:
    data = _load_object(body)
    return SourceResults(
        status=_opt_str(data, "status") or "",
        sources=[to_source(e) for e in _items(data, "sources")],
    )
