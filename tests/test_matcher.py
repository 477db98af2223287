"""
Unit tests for the corpus matcher and personality responder.
"""

from answerbot.core.corpus import CorpusEntry
from answerbot.services.matcher import CorpusMatcher
from answerbot.services.personality import (
    CREATOR_REPLY,
    RELATIONSHIP_REPLY,
    PersonalityResponder,
    PersonalityRule,
)

CORPUS = (
    CorpusEntry("What is your name?", "I am ChatBot."),
    CorpusEntry("What is the capital of India?", "New Delhi."),
    CorpusEntry("How are you?", "Fine, thanks."),
)


class TestCorpusMatcher:
    """Tests for CorpusMatcher.match()."""

    def test_matches_close_question(self) -> None:
        assert CorpusMatcher(CORPUS).match("what is your name") == "I am ChatBot."

    def test_no_match_below_threshold(self) -> None:
        assert CorpusMatcher(CORPUS).match("explain quantum entanglement") is None

    def test_empty_corpus_never_matches(self) -> None:
        matcher = CorpusMatcher(())
        assert len(matcher) == 0
        assert matcher.match("what is your name") is None

    def test_first_entry_wins_ties(self) -> None:
        corpus = (CorpusEntry("your name", "first"), CorpusEntry("your name", "second"))
        assert CorpusMatcher(corpus).match("your name") == "first"

    def test_threshold_is_inclusive(self) -> None:
        matcher = CorpusMatcher(CORPUS, threshold=0.5, scorer=lambda a, b: 0.5)
        assert matcher.match("anything") == "I am ChatBot."

    def test_custom_threshold(self) -> None:
        # {capital, india} vs {capital, india, city}: 2/3
        query = "capital city of India"
        assert CorpusMatcher(CORPUS).match(query) == "New Delhi."
        assert CorpusMatcher(CORPUS, threshold=0.9).match(query) is None

    def test_deterministic(self) -> None:
        matcher = CorpusMatcher(CORPUS)
        results = {matcher.match("capital of india please") for _ in range(5)}
        assert len(results) == 1

    def test_best_match_reports_score(self) -> None:
        entry, best = CorpusMatcher(CORPUS).best_match("How are you?")
        assert entry == CORPUS[2]
        assert best == 1.0

    def test_does_not_mutate_corpus(self) -> None:
        corpus = list(CORPUS)
        CorpusMatcher(corpus).match("what is your name")
        assert tuple(corpus) == CORPUS


class TestPersonalityResponder:
    """Tests for PersonalityResponder.reply()."""

    def test_creator_question(self) -> None:
        assert PersonalityResponder().reply("Hey, WHO CREATED YOU?") == CREATOR_REPLY
        assert PersonalityResponder().reply("who made you") == CREATOR_REPLY

    def test_relationship_question(self) -> None:
        assert PersonalityResponder().reply("Do you have a girlfriend?") == RELATIONSHIP_REPLY

    def test_unrelated_returns_none(self) -> None:
        assert PersonalityResponder().reply("what is the weather") is None
        assert PersonalityResponder().reply("") is None

    def test_rules_checked_in_order(self) -> None:
        rules = (
            PersonalityRule(("hello",), "first"),
            PersonalityRule(("hello there",), "second"),
        )
        assert PersonalityResponder(rules).reply("hello there") == "first"
