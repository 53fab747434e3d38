"""Web search stage: trigger detection plus swappable search providers.

The default provider is a deterministic stand-in: it never touches the
network and every block it returns says the results are simulated.
DuckDuckGoSearchProvider performs a real search for consumers that need
live data.
"""

import asyncio
import logging
import random
import re
from typing import Dict, List, Optional

import requests
from ddgs import DDGS

from . import config

logger = logging.getLogger(__name__)

# ═══════════════════════════════════════════════════════════════════════════════
# § 1  TRIGGERS
# ═══════════════════════════════════════════════════════════════════════════════

# Explicit search intent
_EXPLICIT_TRIGGERS = [re.compile(p, re.I) for p in (
    r'\bsearch\s+(?:the\s+)?(?:web|internet|online)(?:\s+for)?\b',
    r'\bsearch\s+for\b',
    r'^\s*search\b',
    r'\blook\s+up\b',
    r'\bgoogle\b',
    r'\bfind\s+(?:information|info|out)\b',
)]

# Implicit need for current information
_IMPLICIT_TRIGGERS = [re.compile(p, re.I) for p in (
    r'\blatest\b',
    r'\brecent\s+news\b',
    r'\bcurrent\s+(?:events|news|price|prices|weather|temperature|score|status)\b',
    r"\btoday'?s\b",
    r"\bthis\s+week'?s\b",
    r'\bright\s+now\b',
    r'\bbreaking\s+news\b',
    r'\bup[\s-]to[\s-]date\b',
)]

_LEADING_PREP_RE = re.compile(r'^(?:about|for|on|regarding)\s+', re.I)
_TRAILING_PUNCT_RE = re.compile(r'[\s?!.,]+$')

# ═══════════════════════════════════════════════════════════════════════════════
# § 2  REPLY TEXT
# ═══════════════════════════════════════════════════════════════════════════════

SEARCH_CLARIFY_MESSAGE = (
    "What would you like me to search for? Please give me a topic or a question. 🔍"
)
SEARCH_FAILURE_MESSAGE = (
    "Sorry, I couldn't complete that search right now. 😕\n\n"
    "Try asking me something from my knowledge base instead, like "
    "\"What is photosynthesis?\" or \"Who is Marie Curie?\""
)
SIMULATED_NOTE = "*(Simulated search results: live web search is not connected.)*"

# Coarse topic buckets, checked in this order
_BUCKETS = [
    ('weather', ('weather', 'temperature', 'forecast', 'rain', 'snow', 'sunny')),
    ('news', ('news', 'headline', 'happening', 'election', 'breaking')),
    ('market', ('stock', 'market', 'price', 'shares', 'bitcoin', 'crypto', 'economy')),
    ('programming', ('python', 'javascript', 'programming', 'code', 'software',
                     'framework', 'api')),
    ('science', ('science', 'research', 'space', 'nasa', 'physics', 'biology',
                 'discovery')),
]

_CANNED_RESULTS = {
    'weather': (
        "🌤️ **Weather results for \"{query}\"**\n\n"
        "• Current conditions: partly cloudy, 22°C (72°F)\n"
        "• Today: high of 25°C, low of 16°C, 10% chance of rain\n"
        "• Tomorrow: mostly sunny with light winds\n\n"
        "For live conditions, check a weather service such as https://weather.gov"
    ),
    'news': (
        "📰 **Top stories for \"{query}\"**\n\n"
        "• Officials announce new plans after a week of discussions\n"
        "• Experts weigh in on what the latest developments mean\n"
        "• Analysis: three things to watch in the coming days\n\n"
        "For real headlines, visit a news source such as https://apnews.com"
    ),
    'market': (
        "📈 **Market results for \"{query}\"**\n\n"
        "• Major indices closed slightly higher in the last session\n"
        "• Trading volume was in line with the 30-day average\n"
        "• Analysts expect continued volatility this quarter\n\n"
        "Markets move fast! Check a live source before making any decisions."
    ),
    'programming': (
        "💻 **Developer results for \"{query}\"**\n\n"
        "• Official documentation: getting started guide and API reference\n"
        "• Stack Overflow: top-voted answers on common pitfalls\n"
        "• Tutorial: a step-by-step walkthrough with `code` examples\n\n"
        "Tip: official docs are usually the most reliable place to start."
    ),
    'science': (
        "🔬 **Science results for \"{query}\"**\n\n"
        "• Overview article summarizing the key findings\n"
        "• Recent peer-reviewed research on the topic\n"
        "• Explainer video covering the fundamentals\n\n"
        "Science is always evolving, so look for recent sources!"
    ),
    'general': (
        "🔍 **Search results for \"{query}\"**\n\n"
        "• Encyclopedia entry with a general overview\n"
        "• Frequently asked questions and answers\n"
        "• Related topics you might find interesting\n\n"
        "Want me to explain anything from my own knowledge base?"
    ),
}


class SearchError(Exception):
    """Raised by a provider when no usable result could be produced."""


def classify_bucket(query: str) -> str:
    """Pick the coarse topic bucket of a cleaned query."""
    q = query.lower()
    for bucket, keywords in _BUCKETS:
        if any(k in q for k in keywords):
            return bucket
    return 'general'


# ═══════════════════════════════════════════════════════════════════════════════
# § 3  PROVIDERS
# ═══════════════════════════════════════════════════════════════════════════════

class SearchProvider:
    """Interface for anything that can answer a search query with text."""

    name = 'base'

    async def search(self, query: str) -> str:
        raise NotImplementedError


class SimulatedSearchProvider(SearchProvider):
    """
    Deterministic stand-in for a network search.
    Waits a fixed delay, then returns a canned block for the query's bucket.
    """

    name = 'simulated'

    def __init__(self, delay: float = None, failure_rate: float = 0.0,
                 rng: random.Random = None):
        self.delay = config.SEARCH_DELAY if delay is None else delay
        self.failure_rate = failure_rate
        self.rng = rng or random.Random()

    async def search(self, query: str) -> str:
        await asyncio.sleep(self.delay)
        if self.failure_rate and self.rng.random() < self.failure_rate:
            raise SearchError("Simulated network failure")

        bucket = classify_bucket(query)
        logger.debug(f"Simulated search bucket {bucket!r} for {query!r}")
        return _CANNED_RESULTS[bucket].format(query=query) + "\n\n" + SIMULATED_NOTE


# High-quality reference domains to prefer when ranking results
_PREFERRED_DOMAINS = (
    'wikipedia.org', 'britannica.com', 'stackoverflow.com', 'docs.python.org',
    'developer.mozilla.org', 'github.com', 'reuters.com', 'apnews.com',
    'nature.com', 'nasa.gov', 'weather.gov',
)


def _rank(items: List[Dict[str, str]]) -> List[Dict[str, str]]:
    """Sort results so preferred domains come first."""
    def score(item: Dict[str, str]) -> int:
        url = item.get('url', '').lower()
        return 10 if any(domain in url for domain in _PREFERRED_DOMAINS) else 0

    return sorted(items, key=score, reverse=True)


class DuckDuckGoSearchProvider(SearchProvider):
    """
    Live web search: DuckDuckGo text search first, the DuckDuckGo
    Instant Answer API as a fallback. Blocking calls run in a worker
    thread so the event loop stays responsive.
    """

    name = 'duckduckgo'

    def __init__(self, max_results: int = None, session: requests.Session = None):
        self.max_results = max_results or config.MAX_SEARCH_RESULTS
        self.session = session or requests.Session()
        self.session.headers.update({'User-Agent': config.USER_AGENT})
        self._ddgs = DDGS()

    async def search(self, query: str) -> str:
        results = await asyncio.to_thread(self._search_sync, query)
        if not results:
            raise SearchError(f"No results for {query!r}")
        return self._format(query, results)

    def _search_sync(self, query: str) -> List[Dict[str, str]]:
        results = self._search_ddg(query)
        if not results:
            results = self._search_instant_answer(query)
        logger.info(f"Search: {len(results)} results for {query!r}")
        return results

    def _search_ddg(self, query: str) -> List[Dict[str, str]]:
        """DuckDuckGo text search (primary)."""
        try:
            raw = list(self._ddgs.text(
                query,
                max_results=self.max_results + 2,
                safesearch='moderate',
            ))
        except Exception as e:
            logger.warning(f"DuckDuckGo search failed: {e}")
            return []

        items = [
            {'title': r.get('title', ''), 'url': r.get('href', ''),
             'snippet': r.get('body', '')}
            for r in raw
        ]
        return _rank(items)[:self.max_results]

    def _search_instant_answer(self, query: str) -> List[Dict[str, str]]:
        """DuckDuckGo Instant Answer API (fallback)."""
        try:
            resp = self.session.get(
                config.INSTANT_ANSWER_URL,
                params={'q': query, 'format': 'json', 'no_html': 1, 'skip_disambig': 1},
                timeout=config.REQUEST_TIMEOUT,
            )
            resp.raise_for_status()
            data = resp.json()
        except (requests.RequestException, ValueError) as e:
            logger.warning(f"Instant answer lookup failed: {e}")
            return []

        items = []
        if data.get('AbstractText'):
            items.append({'title': data.get('Heading', query),
                          'url': data.get('AbstractURL', ''),
                          'snippet': data['AbstractText']})
        for topic in data.get('RelatedTopics', []):
            if len(items) >= self.max_results:
                break
            if topic.get('Text'):
                items.append({'title': topic['Text'].split(' - ')[0],
                              'url': topic.get('FirstURL', ''),
                              'snippet': topic['Text']})
        return items

    @staticmethod
    def _format(query: str, results: List[Dict[str, str]]) -> str:
        lines = [f"🔍 **Web results for \"{query}\"**"]
        for i, item in enumerate(results, 1):
            lines.append(f"\n{i}. **{item['title']}**\n{item['snippet']}\n{item['url']}")
        return "\n".join(lines)


# ═══════════════════════════════════════════════════════════════════════════════
# § 4  PIPELINE STAGE
# ═══════════════════════════════════════════════════════════════════════════════

class WebSearchStub:
    """
    Pipeline stage that answers messages asking for a search or for
    current information. Provider failures never escape: they become
    SEARCH_FAILURE_MESSAGE.
    """

    def __init__(self, provider: SearchProvider = None, timeout: float = None):
        self.provider = provider or SimulatedSearchProvider()
        self.timeout = timeout or config.SEARCH_TIMEOUT

    @staticmethod
    def is_triggered(text: str) -> bool:
        return any(p.search(text) for p in _EXPLICIT_TRIGGERS + _IMPLICIT_TRIGGERS)

    @staticmethod
    def extract_query(text: str) -> str:
        """Strip trigger phrases, leading prepositions and trailing punctuation."""
        q = text
        for pattern in _EXPLICIT_TRIGGERS + _IMPLICIT_TRIGGERS:
            q = pattern.sub(' ', q)
        q = re.sub(r'\s+', ' ', q).strip()
        while True:
            stripped = _LEADING_PREP_RE.sub('', q)
            if stripped == q:
                break
            q = stripped
        return _TRAILING_PUNCT_RE.sub('', q)

    async def search(self, text: str) -> Optional[str]:
        if not self.is_triggered(text):
            return None

        query = self.extract_query(text)
        if len(query) < config.MIN_SEARCH_QUERY_LENGTH:
            return SEARCH_CLARIFY_MESSAGE

        try:
            return await asyncio.wait_for(self.provider.search(query), timeout=self.timeout)
        except asyncio.TimeoutError:
            logger.warning(f"{self.provider.name} search timed out for {query!r}")
        except Exception as e:
            logger.warning(f"{self.provider.name} search failed for {query!r}: {e}")
        return SEARCH_FAILURE_MESSAGE
