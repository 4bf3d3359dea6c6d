import pytest

from news_query import NewsClient
from news_query.exceptions import (
    EmptyQuery,
    TypeMismatch,
    MissingCredential,
    RemoteAPIFailure,
    ResponseDecodeError,
    UnhandledParameter,
    UnknownParameter,
    UnsupportedValue,
)
from news_query.models import ArticleResults, SourceResults
from news_query.params import Integer, Text, TextList


def test_defaults():
    client = NewsClient("key")
    assert client.options.api_key == "key"
    assert client.options.api_url == "https://newsapi.org/v2"
    assert client.options.timeout_sec == 30.0
    assert client.options.session is None


def test_api_key_from_environment(monkeypatch):
    monkeypatch.setenv("NEWS_API_KEY", "from-env")
    assert NewsClient().options.api_key == "from-env"
    assert NewsClient("explicit").options.api_key == "explicit"


def test_top_headlines(fake_get, make_response, articles_payload):
    fake_get.response = make_response(200, payload=articles_payload)
    client = NewsClient("key", timeout_sec=2.0)

    results = client.top_headlines(country="gb", pageSize=5)

    assert isinstance(results, ArticleResults)
    assert results.total_results == 2
    assert results.articles[0].source.name == "BBC News"
    call = fake_get.calls[0]
    assert call["url"] == "https://newsapi.org/v2/top-headlines?country=gb&pageSize=5"
    assert call["headers"] == {"X-Api-Key": "key"}
    assert call["timeout"] == 2.0


def test_params_mapping_and_kwargs_merge(fake_get, make_response, articles_payload):
    fake_get.response = make_response(200, payload=articles_payload)
    client = NewsClient("key")
    client.top_headlines({"sources": TextList(["bbc-news", "cnn"]), "page": Integer(2)}, q="economy")
    assert fake_get.calls[0]["url"] == (
        "https://newsapi.org/v2/top-headlines?page=2&q=economy&sources=bbc-news%2Ccnn"
    )


def test_everything(fake_get, make_response, articles_payload):
    fake_get.response = make_response(200, payload=articles_payload)
    client = NewsClient("key", api_url="http://localhost:8080/v2/")

    results = client.everything(q="bitcoin", domains=["coindesk.com"], sortBy="relevancy")

    assert len(results.articles) == 2
    assert fake_get.calls[0]["url"] == (
        "http://localhost:8080/v2/everything?domains=coindesk.com&q=bitcoin&sortBy=relevancy"
    )


def test_sources(fake_get, make_response, sources_payload):
    fake_get.response = make_response(200, payload=sources_payload)
    results = NewsClient("key").sources(language="en", country="gb")
    assert isinstance(results, SourceResults)
    assert results.sources[0].id == "bbc-news"
    assert fake_get.calls[0]["url"] == "https://newsapi.org/v2/sources?country=gb&language=en"


def test_no_parameters(fake_get, make_response, sources_payload):
    fake_get.response = make_response(200, payload=sources_payload)
    NewsClient("key").sources()
    assert fake_get.calls[0]["url"] == "https://newsapi.org/v2/sources?"


@pytest.mark.parametrize(
    "method, kwargs, error",
    [
        ("top_headlines", {"invalid": "string"}, UnknownParameter),
        ("top_headlines", {"country": "zz"}, UnsupportedValue),
        ("everything", {"q": ""}, EmptyQuery),
        ("everything", {"params": {"from": Text("2024-01-01")}}, UnhandledParameter),
        ("sources", {"q": "news"}, UnknownParameter),
    ],
)
def test_parameter_errors_raise_before_request(fake_get, method, kwargs, error):
    client = NewsClient("key")
    with pytest.raises(error):
        getattr(client, method)(**kwargs)
    assert fake_get.calls == []


@pytest.mark.parametrize(
    "method, kwargs, error",
    [
        ("top_headlines", {"pageSize": 5.0}, TypeMismatch),
        ("top_headlines", {"page": True}, TypeMismatch),
        ("top_headlines", {"sources": ["bbc-news", None]}, TypeMismatch),
        ("everything", {"q": None}, TypeMismatch),
        ("top_headlines", {"invalid": None}, UnknownParameter),
        ("sources", {"country": 1.5}, TypeMismatch),
    ],
)
def test_wrong_kind_values_raise_typed_errors(fake_get, method, kwargs, error):
    client = NewsClient("key")
    with pytest.raises(error):
        getattr(client, method)(**kwargs)
    assert fake_get.calls == []


def test_type_mismatch_names_python_type(fake_get):
    with pytest.raises(TypeMismatch) as exc:
        NewsClient("key").top_headlines(pageSize=5.0)
    assert exc.value.key == "pageSize"
    assert exc.value.expected == "integer"
    assert exc.value.actual == "float"


def test_missing_key(fake_get):
    with pytest.raises(MissingCredential):
        NewsClient().top_headlines(country="us")
    assert fake_get.calls == []


def test_api_error(fake_get, make_response, error_payload):
    fake_get.response = make_response(401, payload=error_payload)
    with pytest.raises(RemoteAPIFailure, match="Your API key is invalid"):
        NewsClient("bad").everything(q="x")


def test_decode_error_is_not_swallowed(fake_get, make_response):
    fake_get.response = make_response(200, text="<html>maintenance</html>")
    with pytest.raises(ResponseDecodeError):
        NewsClient("key").top_headlines()
