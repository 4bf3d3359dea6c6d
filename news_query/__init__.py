"""
news_query

A small client for the NewsAPI.org v2 REST API (top-headlines, everything, sources).

Core ideas:
- Input: a parameter set per call (country, q, sources, page, ...)
- Process: verify against the endpoint schema → apply per-key rules → encode → GET → decode
- Output: ArticleResults / SourceResults

Example
-------
from news_query import NewsClient

client = NewsClient("YOUR_API_KEY")

results = client.top_headlines(country="gb", category="technology", pageSize=5)

for article in results.articles:
    print(article.published_at, article.source.name, article.title)

Parameter errors (unknown keys, bad country codes, empty queries, ...) are
raised before any network call as ParameterError subclasses.
"""
import logging

from .core import NewsClient
from .exceptions import (
    NewsQueryError,
    ParameterError,
    RequestError,
    ResponseDecodeError,
)
from .models import Article, ArticleResults, Source, SourceResults
from .params import Integer, Kind, Text, TextList, make_parameters
from .urlbuilder import build_url

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "NewsClient",
    "Article",
    "ArticleResults",
    "Source",
    "SourceResults",
    "Text",
    "Integer",
    "TextList",
    "Kind",
    "make_parameters",
    "build_url",
    "NewsQueryError",
    "ParameterError",
    "RequestError",
    "ResponseDecodeError",
]
