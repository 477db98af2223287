"""
Resolution pipeline: personality → corpus → LLM → web search.

Responsibility: Try each answer provider in priority order and return the first
non-empty answer. Cheap local checks run first, paid and slow network calls
last. Called by the API; no HTTP here.
"""

import logging
from collections.abc import Callable, Sequence

from answerbot.agent.llm import ChatCompletionProvider
from answerbot.agent.web_search import WebSearchAggregator
from answerbot.core.corpus import CorpusEntry
from answerbot.services.matcher import CorpusMatcher
from answerbot.services.personality import PersonalityResponder

logger = logging.getLogger(__name__)

Provider = Callable[[str], str | None]

FALLBACK_REPLY = "Sorry, I couldn't find a clear answer."


class ResolutionPipeline:
    def __init__(self, providers: Sequence[tuple[str, Provider]]) -> None:
        self.providers = list(providers)

    @property
    def stage_names(self) -> list[str]:
        return [name for name, _ in self.providers]

    def resolve(self, query: str) -> str:
        logger.info("[pipeline:resolve] IN  query=%r", query)
        for name, provider in self.providers:
            answer = provider(query)
            if answer:
                logger.info("[pipeline:resolve] OUT stage=%s answer_len=%d", name, len(answer))
                return answer
        logger.warning("[pipeline:resolve] OUT no stage answered; using fallback reply")
        return FALLBACK_REPLY


def build_pipeline(
    corpus: Sequence[CorpusEntry],
    personality: PersonalityResponder | None = None,
    llm: ChatCompletionProvider | None = None,
    web: WebSearchAggregator | None = None,
) -> ResolutionPipeline:
    """Wire the default chain around an already loaded corpus."""
    personality = personality or PersonalityResponder()
    matcher = CorpusMatcher(corpus)
    llm = llm or ChatCompletionProvider()
    web = web or WebSearchAggregator()
    return ResolutionPipeline([
        ("personality", personality.reply),
        ("corpus", matcher.match),
        ("llm", llm.ask),
        ("web_search", web.search),
    ])
