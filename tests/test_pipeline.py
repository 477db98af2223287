"""
Tests for the resolution pipeline: stage order, short-circuiting, totality.
"""

import httpx
import pytest

from answerbot.agent.llm import ChatCompletionProvider
from answerbot.agent.web_search import WebSearchAggregator
from answerbot.core.corpus import CorpusEntry
from answerbot.services.personality import CREATOR_REPLY
from answerbot.services.pipeline import FALLBACK_REPLY, ResolutionPipeline, build_pipeline

CORPUS = (CorpusEntry("What is your name?", "I am ChatBot."),)

GOOGLE_HTML = (
    '<html><body><div class="BNeawe s3v9rd AP7Wnd">'
    "The answer to life, the universe and everything is forty-two. Douglas Adams wrote it."
    "</div></body></html>"
)


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers every host it was asked for."""

    def __init__(self, handler=None) -> None:
        self.hosts: list[str] = []

        def record(request: httpx.Request) -> httpx.Response:
            self.hosts.append(request.url.host)
            if handler is None:
                return httpx.Response(503)
            return handler(request)

        super().__init__(record)


def _llm_answer(content: str):
    return lambda r: httpx.Response(200, json={"choices": [{"message": {"content": content}}]})


def _pipeline(corpus=(), llm_key: str = "test-key", llm_handler=None, web_handler=None):
    llm_transport = RecordingTransport(llm_handler)
    web_transport = RecordingTransport(web_handler)
    pipeline = build_pipeline(
        corpus,
        llm=ChatCompletionProvider(api_key=llm_key, transport=llm_transport),
        web=WebSearchAggregator(transport=web_transport),
    )
    return pipeline, llm_transport, web_transport


def test_default_stage_order() -> None:
    pipeline, _, _ = _pipeline()
    assert pipeline.stage_names == ["personality", "corpus", "llm", "web_search"]


def test_personality_reply_makes_no_external_calls() -> None:
    pipeline, llm, web = _pipeline(CORPUS, llm_handler=_llm_answer("should not be used"))
    assert pipeline.resolve("who created you") == CREATOR_REPLY
    assert llm.hosts == []
    assert web.hosts == []


def test_corpus_match_beats_llm() -> None:
    pipeline, llm, web = _pipeline(CORPUS, llm_handler=_llm_answer("LLM answer"))
    assert pipeline.resolve("what is your name") == "I am ChatBot."
    assert llm.hosts == []
    assert web.hosts == []


def test_llm_answer_when_corpus_empty() -> None:
    pipeline, llm, web = _pipeline(llm_handler=_llm_answer("42"))
    assert pipeline.resolve("anything") == "42"
    assert llm.hosts == ["api.groq.com"]
    assert web.hosts == []


def test_google_when_llm_unconfigured() -> None:
    pipeline, llm, _ = _pipeline(
        llm_key="",
        web_handler=lambda r: httpx.Response(200, text=GOOGLE_HTML),
    )
    answer = pipeline.resolve("meaning of life")
    assert answer.startswith("From Google: ")
    assert "forty-two" in answer
    assert llm.hosts == []


def test_google_when_llm_fails() -> None:
    pipeline, llm, _ = _pipeline(
        llm_handler=lambda r: httpx.Response(500),
        web_handler=lambda r: httpx.Response(200, text=GOOGLE_HTML),
    )
    assert pipeline.resolve("meaning of life").startswith("From Google: ")
    assert llm.hosts == ["api.groq.com"]


def test_everything_fails_gives_apology() -> None:
    pipeline, _, web = _pipeline(llm_handler=lambda r: httpx.Response(500))
    query = "zxqv blorf"
    assert pipeline.resolve(query) == f'I couldn\'t find a clear English answer for "{query}".'
    assert web.hosts == ["www.google.com", "api.duckduckgo.com", "en.wikipedia.org"]


@pytest.mark.parametrize("query", ["hello", "who made you", "what is your name", "?"])
def test_resolve_is_total(query: str) -> None:
    pipeline, _, _ = _pipeline(CORPUS, llm_key="")
    answer = pipeline.resolve(query)
    assert isinstance(answer, str) and answer


def test_stops_at_first_answer() -> None:
    calls: list[str] = []

    def stage(name: str, answer):
        def provider(query: str):
            calls.append(name)
            return answer
        return name, provider

    pipeline = ResolutionPipeline([stage("a", None), stage("b", ""), stage("c", "yes"), stage("d", "no")])
    assert pipeline.resolve("q") == "yes"
    assert calls == ["a", "b", "c"]


def test_no_provider_answers_uses_fallback_reply() -> None:
    pipeline = ResolutionPipeline([("nothing", lambda q: None)])
    assert pipeline.resolve("q") == FALLBACK_REPLY
