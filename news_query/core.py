from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

import requests

from .constants import (
    API_KEY_ENV,
    API_URL,
    DEFAULT_TIMEOUT_SEC,
    EVERYTHING_PATH,
    SOURCES_PATH,
    TOP_HEADLINES_PATH,
)
from .fetcher import make_request
from .models import ArticleResults, SourceResults
from .normalizer import to_article_results, to_source_results
from .params import ParameterValue, make_parameters
from .schema import EVERYTHING_SCHEMA, SOURCES_SCHEMA, TOP_HEADLINES_SCHEMA, Schema
from .urlbuilder import build_url

logger = logging.getLogger(__name__)


@dataclass
class ClientOptions:
    api_key: Optional[str] = None
    api_url: str = API_URL
    timeout_sec: float = DEFAULT_TIMEOUT_SEC
    session: Optional[requests.Session] = None


class NewsClient:
    """
    High-level API: validate parameters, build the request URL, call the API
    and decode the body.

    Pipeline: make_parameters → verify → serialize → GET → decode
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        api_url: str = API_URL,
        timeout_sec: float = DEFAULT_TIMEOUT_SEC,
        session: Optional[requests.Session] = None,
    ) -> None:
        # Fall back to the environment when no key is passed; a missing key
        # is only rejected when a request is made.
        key = api_key or os.getenv(API_KEY_ENV)
        self.options = ClientOptions(
            api_key=key,
            api_url=api_url.rstrip("/"),
            timeout_sec=timeout_sec,
            session=session,
        )

    def build_url(self, path: str, schema: Schema, params: Mapping[str, ParameterValue]) -> str:
        return build_url(self.options.api_url + path, schema, params)

    def _get(self, path: str, schema: Schema, params: Optional[Mapping[str, Any]], extra: Dict[str, Any]) -> str:
        merged: Dict[str, Any] = dict(params or {})
        merged.update(extra)
        url = self.build_url(path, schema, make_parameters(merged))
        logger.info("Requesting %s", path.rstrip("?"))
        return make_request(
            url,
            api_key=self.options.api_key,
            timeout=self.options.timeout_sec,
            session=self.options.session,
        )

    def top_headlines(self, params: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> ArticleResults:
        """
        Live top and breaking headlines.

        Accepts country, category, sources, q, pageSize, page.
        """
        body = self._get(TOP_HEADLINES_PATH, TOP_HEADLINES_SCHEMA, params, kwargs)
        results = to_article_results(body)
        logger.info("top-headlines returned %d of %d articles", len(results.articles), results.total_results)
        return results

    def everything(self, params: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> ArticleResults:
        """
        Search all indexed articles.

        Accepts q, sources, domains, language, sortBy, pageSize, page. The
        schema also lists from/to, but they have no serialization rule yet and
        raise UnhandledParameter.
        """
        body = self._get(EVERYTHING_PATH, EVERYTHING_SCHEMA, params, kwargs)
        results = to_article_results(body)
        logger.info("everything returned %d of %d articles", len(results.articles), results.total_results)
        return results

    def sources(self, params: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> SourceResults:
        body = self._get(SOURCES_PATH, SOURCES_SCHEMA, params, kwargs)
        results = to_source_results(body)
        logger.info("sources returned %d sources", len(results.sources))
        return results
