from __future__ import annotations

from typing import FrozenSet

API_URL = "https://newsapi.org/v2"
TOP_HEADLINES_PATH = "/top-headlines?"
EVERYTHING_PATH = "/everything?"
SOURCES_PATH = "/sources?"

DEFAULT_TIMEOUT_SEC = 30.0
API_KEY_ENV = "NEWS_API_KEY"

# API caps the number of sources per request.
MAX_SOURCES = 20

COUNTRY_CODES: FrozenSet[str] = frozenset({
    "ae", "ar", "at", "au", "be", "bg", "br", "ca", "ch", "cn", "co", "cu",
    "cz", "de", "eg", "fr", "gb", "gr", "hk", "hu", "id", "ie", "il", "in",
    "it", "jp", "kr", "lt", "lv", "ma", "mx", "my", "ng", "nl", "no", "nz",
    "ph", "pl", "pt", "ro", "rs", "ru", "sa", "se", "sg", "si", "sk", "th",
    "tr", "tw", "ua", "us", "ve", "za",
})

CATEGORIES: FrozenSet[str] = frozenset({
    "business", "entertainment", "general", "health", "science", "sports", "technology",
})

LANGUAGES: FrozenSet[str] = frozenset({
    "ar", "de", "en", "es", "fr", "he", "it", "nl", "no", "pt", "ru", "se", "ud", "zh",
})

SORT_BY_OPTIONS: FrozenSet[str] = frozenset({"publishedAt", "relevancy", "popularity"})
