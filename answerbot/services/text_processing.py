"""
Text processing for matching and search cleanup.

normalize/keywords/score drive the local corpus match; looks_english and
first_sentences clean up snippets returned by the web search backends.
"""

import re

STOPWORDS: frozenset[str] = frozenset({
    "the", "is", "in", "at", "which", "on", "a", "an", "and", "of", "for",
    "to", "from", "by", "what", "who", "when", "where", "why", "how", "about",
    "tell", "me",
})

_NON_WORD = re.compile(r"[^\w\s]")
_WHITESPACE = re.compile(r"\s+")
_SENTENCE_END = re.compile(r"(?<=[.?!])\s+")
_ASCII_LETTER = re.compile(r"[A-Za-z]")
_NON_ASCII = re.compile(r"[^\x00-\x7F]")


def normalize(text: str | None) -> str:
    """Lowercase, turn punctuation into spaces, collapse whitespace, trim."""
    if not text:
        return ""
    text = _NON_WORD.sub(" ", text.lower())
    return _WHITESPACE.sub(" ", text).strip()


def keywords(text: str | None) -> set[str]:
    """Non-stopword tokens of the normalized text."""
    return {w for w in normalize(text).split(" ") if w and w not in STOPWORDS}


def score(a: str | None, b: str | None, containment_floor: float = 0.8) -> float:
    """
    Symmetric similarity in [0, 1].

    Jaccard overlap of the keyword sets, raised to containment_floor when one
    normalized string contains the other. The override lets a short query that
    appears verbatim inside a long corpus question still win even though the
    long question dilutes the overlap ratio.
    """
    kw_a = keywords(a)
    kw_b = keywords(b)
    if not kw_a or not kw_b:
        return 0.0
    result = len(kw_a & kw_b) / len(kw_a | kw_b)
    norm_a = normalize(a)
    norm_b = normalize(b)
    if norm_b in norm_a or norm_a in norm_b:
        result = max(result, min(containment_floor, 1.0))
    return result


def looks_english(text: str | None) -> bool:
    """Cheap filter: more than 5 ASCII letters and under 15% non-ASCII characters."""
    if not text:
        return False
    letters = len(_ASCII_LETTER.findall(text))
    non_ascii = len(_NON_ASCII.findall(text))
    return letters > 5 and non_ascii / len(text) < 0.15


def first_sentences(text: str, limit: int = 3) -> str:
    """Keep the first `limit` sentences (split after . ? or ! followed by whitespace)."""
    return " ".join(_SENTENCE_END.split(text)[:limit])
