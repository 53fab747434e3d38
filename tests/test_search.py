import asyncio
import time

import pytest

from scriptbot import search
from scriptbot.search import (
    SEARCH_CLARIFY_MESSAGE,
    SEARCH_FAILURE_MESSAGE,
    SIMULATED_NOTE,
    DuckDuckGoSearchProvider,
    SearchError,
    SearchProvider,
    SimulatedSearchProvider,
    WebSearchStub,
    classify_bucket,
)


@pytest.fixture
def stub():
    return WebSearchStub(SimulatedSearchProvider(delay=0))


@pytest.mark.parametrize("text", [
    "search for python tutorials",
    "Can you look up black holes?",
    "google the eiffel tower",
    "what's the latest space news",
    "current weather in Paris",
    "today's headlines",
])
def test_triggers(text):
    assert WebSearchStub.is_triggered(text)


@pytest.mark.parametrize("text", [
    "hello there",
    "tell me about research",
    "what is 2 + 2",
])
def test_no_trigger(text):
    assert not WebSearchStub.is_triggered(text)


@pytest.mark.parametrize("text,expected", [
    ("search for python tutorials", "python tutorials"),
    ("look up about black holes?", "black holes"),
    ("search the web for stock prices!", "stock prices"),
    ("latest news on the election", "news on the election"),
])
def test_extract_query(text, expected):
    assert WebSearchStub.extract_query(text) == expected


@pytest.mark.parametrize("query,bucket", [
    ("weather in paris", "weather"),
    ("news about the weather", "weather"),
    ("election headlines", "news"),
    ("stock market crash", "market"),
    ("python tutorials", "programming"),
    ("nasa mars mission", "science"),
    ("cute cats", "general"),
])
def test_classify_bucket(query, bucket):
    assert classify_bucket(query) == bucket


def test_untriggered_text_returns_none(stub):
    assert asyncio.run(stub.search("hello")) is None


def test_empty_query_asks_for_clarification(stub):
    assert asyncio.run(stub.search("search for ?")) == SEARCH_CLARIFY_MESSAGE


def test_simulated_result_interpolates_query(stub):
    result = asyncio.run(stub.search("search for python tutorials"))
    assert 'Developer results for "python tutorials"' in result
    assert result.endswith(SIMULATED_NOTE)


def test_simulated_provider_waits_for_delay():
    provider = SimulatedSearchProvider(delay=0.05)
    start = time.monotonic()
    asyncio.run(provider.search("cats"))
    assert time.monotonic() - start >= 0.05


def test_simulated_failure_returns_apology():
    stub = WebSearchStub(SimulatedSearchProvider(delay=0, failure_rate=1.0))
    assert asyncio.run(stub.search("search for cats")) == SEARCH_FAILURE_MESSAGE


def test_provider_exception_is_converted():
    class Broken(SearchProvider):
        async def search(self, query):
            raise RuntimeError("connection reset")

    stub = WebSearchStub(Broken())
    assert asyncio.run(stub.search("look up cats")) == SEARCH_FAILURE_MESSAGE


def test_provider_timeout_is_converted():
    stub = WebSearchStub(SimulatedSearchProvider(delay=1.0), timeout=0.01)
    assert asyncio.run(stub.search("look up cats")) == SEARCH_FAILURE_MESSAGE


class FakeDDGS:
    results = [
        {'title': 'Cats blog', 'href': 'https://example.com/cats', 'body': 'All about cats.'},
        {'title': 'Cat', 'href': 'https://en.wikipedia.org/wiki/Cat', 'body': 'The cat is a mammal.'},
    ]

    def text(self, query, **kwargs):
        return list(self.results)


def test_live_provider_ranks_reference_domains_first(monkeypatch):
    monkeypatch.setattr(search, "DDGS", FakeDDGS)
    provider = DuckDuckGoSearchProvider(max_results=2)

    result = asyncio.run(provider.search("cats"))

    assert result.startswith('🔍 **Web results for "cats"**')
    assert result.index("wikipedia.org") < result.index("example.com")


def test_live_provider_without_results_raises(monkeypatch):
    class EmptyDDGS(FakeDDGS):
        results = []

    monkeypatch.setattr(search, "DDGS", EmptyDDGS)
    provider = DuckDuckGoSearchProvider()
    monkeypatch.setattr(provider, "_search_instant_answer", lambda query: [])

    with pytest.raises(SearchError):
        asyncio.run(provider.search("zzzz"))
    assert asyncio.run(WebSearchStub(provider).search("look up zzzz")) == SEARCH_FAILURE_MESSAGE
