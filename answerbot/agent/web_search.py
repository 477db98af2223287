"""
Web search fallback: Google results page, DuckDuckGo instant answers, Wikipedia intros.

Backends are tried one after another and the first usable snippet wins. Each
backend catches its own failures, so a timeout on Google never stops
DuckDuckGo from being asked.
"""

import logging
from collections.abc import Callable
from typing import Any

import httpx
from bs4 import BeautifulSoup

from answerbot.core.config import (
    DUCKDUCKGO_API_URL,
    DUCKDUCKGO_TIMEOUT,
    GOOGLE_SEARCH_URL,
    GOOGLE_TIMEOUT,
    SEARCH_USER_AGENT,
    WIKIPEDIA_API_URL,
    WIKIPEDIA_TIMEOUT,
)
from answerbot.core.errors import ProviderError
from answerbot.services.text_processing import first_sentences, looks_english

logger = logging.getLogger(__name__)

# Result snippet containers on Google's basic-HTML results page
GOOGLE_SNIPPET_SELECTOR = "div.BNeawe.s3v9rd.AP7Wnd, div.IsZvec"
MIN_SNIPPET_LENGTH = 40
MAX_SNIPPETS = 5
MAX_SENTENCES = 3
WIKIPEDIA_CANDIDATES = 2


def no_answer_reply(query: str) -> str:
    return f'I couldn\'t find a clear English answer for "{query}".'


def extract_google_snippets(html: str) -> str:
    """Clean, English, de-duplicated snippet text from a Google results page (first 3 sentences)."""
    soup = BeautifulSoup(html, "lxml")
    texts: list[str] = []
    for el in soup.select(GOOGLE_SNIPPET_SELECTOR):
        t = el.get_text().strip()
        if len(t) > MIN_SNIPPET_LENGTH and looks_english(t):
            texts.append(t)
    unique = list(dict.fromkeys(texts))[:MAX_SNIPPETS]
    return first_sentences(" ".join(unique), MAX_SENTENCES)


def _json_object(response: httpx.Response, provider: str) -> dict[str, Any]:
    response.raise_for_status()
    data = response.json()
    if not isinstance(data, dict):
        raise ProviderError(provider, f"unexpected response type {type(data).__name__}")
    return data


class WebSearchAggregator:
    def __init__(
        self,
        transport: httpx.BaseTransport | None = None,
        user_agent: str = SEARCH_USER_AGENT,
    ) -> None:
        self._transport = transport
        self.user_agent = user_agent

    def _client(self, timeout: float, **kwargs: Any) -> httpx.Client:
        return httpx.Client(timeout=timeout, transport=self._transport, follow_redirects=True, **kwargs)

    @property
    def backends(self) -> list[tuple[str, Callable[[str], str | None]]]:
        return [
            ("Google", self.google),
            ("DuckDuckGo", self.duckduckgo),
            ("Wikipedia", self.wikipedia),
        ]

    # --- Backends ---

    def google(self, query: str) -> str | None:
        logger.info("[web_search:google] IN  query=%r", query)
        try:
            with self._client(GOOGLE_TIMEOUT, headers={"User-Agent": self.user_agent}) as client:
                response = client.get(GOOGLE_SEARCH_URL, params={"q": query, "hl": "en"})
            response.raise_for_status()
            result = extract_google_snippets(response.text)
        except Exception as e:
            logger.warning("[web_search:google] failed: %s", e)
            return None
        return result or None

    def duckduckgo(self, query: str) -> str | None:
        logger.info("[web_search:duckduckgo] IN  query=%r", query)
        params = {"q": query, "format": "json", "no_html": "1"}
        try:
            with self._client(DUCKDUCKGO_TIMEOUT) as client:
                data = _json_object(client.get(DUCKDUCKGO_API_URL, params=params), "duckduckgo")
            abstract = data.get("AbstractText")
            if abstract and looks_english(abstract):
                return abstract
            topics = data.get("RelatedTopics") or []
            related = topics[0].get("Text") if topics and isinstance(topics[0], dict) else None
            if related and looks_english(related):
                return related
        except Exception as e:
            logger.warning("[web_search:duckduckgo] failed: %s", e)
        return None

    def wikipedia(self, query: str) -> str | None:
        logger.info("[web_search:wikipedia] IN  query=%r", query)
        search_params = {
            "action": "query",
            "list": "search",
            "srsearch": query,
            "utf8": "",
            "format": "json",
            "srlimit": WIKIPEDIA_CANDIDATES,
        }
        try:
            with self._client(WIKIPEDIA_TIMEOUT) as client:
                data = _json_object(client.get(WIKIPEDIA_API_URL, params=search_params), "wikipedia")
                pages = (data.get("query") or {}).get("search") or []
                for page in pages:
                    title = page.get("title")
                    if not title:
                        continue
                    extract = self._wikipedia_extract(client, title)
                    if extract and looks_english(extract):
                        return first_sentences(extract, MAX_SENTENCES)
        except Exception as e:
            logger.warning("[web_search:wikipedia] failed: %s", e)
        return None

    @staticmethod
    def _wikipedia_extract(client: httpx.Client, title: str) -> str | None:
        params = {
            "action": "query",
            "prop": "extracts",
            "exintro": "1",
            "explaintext": "1",
            "format": "json",
            "titles": title,
        }
        data = _json_object(client.get(WIKIPEDIA_API_URL, params=params), "wikipedia")
        pages = (data.get("query") or {}).get("pages") or {}
        if not isinstance(pages, dict):
            raise ProviderError("wikipedia", "pages is not an object")
        first = next(iter(pages.values()), None) or {}
        return first.get("extract")

    # --- Aggregate ---

    def search(self, query: str) -> str:
        """First usable backend answer, prefixed with its source; otherwise a fixed apology."""
        for name, backend in self.backends:
            result = backend(query)
            if result:
                logger.info("[web_search:search] OUT source=%s answer_len=%d", name, len(result))
                return f"From {name}: {result}"
        logger.info("[web_search:search] OUT no backend produced an answer")
        return no_answer_reply(query)
