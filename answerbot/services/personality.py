"""
Personality replies: fixed answers to identity and small-talk questions.

Rules are checked in order before any corpus or network lookup. Adding a reply
means adding a PersonalityRule, not a new branch.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PersonalityRule:
    patterns: tuple[str, ...]
    response: str

    def matches(self, text: str) -> bool:
        """Case-insensitive substring check; `text` must already be lowercased."""
        return any(p in text for p in self.patterns)


CREATOR_REPLY = "My creator is Abhiranjan Singh: smart, funny, and a bit pagal 😜"
RELATIONSHIP_REPLY = "Haha, still single. My love life is stuck in beta mode 🤖💕"

DEFAULT_RULES: tuple[PersonalityRule, ...] = (
    PersonalityRule(("who created you", "who made you"), CREATOR_REPLY),
    PersonalityRule(("girlfriend", "boyfriend"), RELATIONSHIP_REPLY),
)


class PersonalityResponder:
    def __init__(self, rules: Sequence[PersonalityRule] = DEFAULT_RULES) -> None:
        self._rules = tuple(rules)

    def reply(self, query: str) -> str | None:
        text = (query or "").lower()
        for rule in self._rules:
            if rule.matches(text):
                logger.info("[personality:reply] OUT matched patterns=%s", rule.patterns)
                return rule.response
        return None
