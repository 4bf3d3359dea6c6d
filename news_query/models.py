from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class Source:
    """
    A news source. Articles only carry id/name; the sources endpoint fills
    in the rest.
    """
    id: Optional[str]
    name: str
    description: Optional[str] = None
    url: Optional[str] = None
    category: Optional[str] = None
    language: Optional[str] = None
    country: Optional[str] = None


@dataclass(frozen=True)
class Article:
    source: Source
    title: str
    url: str
    author: Optional[str] = None
    description: Optional[str] = None
    url_to_image: Optional[str] = None
    published_at: Optional[str] = None
    content: Optional[str] = None


@dataclass(frozen=True)
class ArticleResults:
    """Decoded body of top-headlines and everything."""
    status: str
    total_results: int
    articles: List[Article] = field(default_factory=list)


@dataclass(frozen=True)
class SourceResults:
    """Decoded body of the sources endpoint."""
    status: str
    sources: List[Source] = field(default_factory=list)
