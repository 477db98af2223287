"""
Corpus matcher: best keyword match of a query against the local Q&A corpus.

Responsibility: Scan every entry, keep the single best-scoring one, answer only
when it clears the threshold. No caching; each call is a fresh scan.
"""

import logging
from collections.abc import Callable, Sequence

from answerbot.core.config import CONTAINMENT_FLOOR, MATCH_THRESHOLD
from answerbot.core.corpus import CorpusEntry
from answerbot.services.text_processing import score

logger = logging.getLogger(__name__)


class CorpusMatcher:
    def __init__(
        self,
        corpus: Sequence[CorpusEntry],
        threshold: float = MATCH_THRESHOLD,
        scorer: Callable[[str, str], float] | None = None,
    ) -> None:
        self._corpus = tuple(corpus)
        self.threshold = threshold
        self._scorer = scorer or (lambda a, b: score(a, b, containment_floor=CONTAINMENT_FLOOR))

    def __len__(self) -> int:
        return len(self._corpus)

    def best_match(self, query: str) -> tuple[CorpusEntry | None, float]:
        """Highest-scoring entry and its score. Ties keep the earlier entry."""
        best: CorpusEntry | None = None
        best_score = 0.0
        for entry in self._corpus:
            s = self._scorer(query, entry.question)
            if s > best_score:
                best, best_score = entry, s
        return best, best_score

    def match(self, query: str) -> str | None:
        best, best_score = self.best_match(query)
        if best is not None and best_score >= self.threshold:
            logger.info("[matcher:match] OUT dataset match score=%.2f question=%r", best_score, best.question)
            return best.answer
        logger.info("[matcher:match] OUT no dataset match best=%.2f", best_score)
        return None
