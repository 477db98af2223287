"""
Q&A corpus loading.

Reads data/data.json (relative to the working directory unless CORPUS_PATH is
absolute) once at startup. The result is an immutable tuple shared by every
request.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CorpusEntry:
    question: str
    answer: str


def parse_corpus(raw: object) -> tuple[CorpusEntry, ...]:
    """Turn decoded JSON into entries. Non-object items are skipped; missing fields become ""."""
    if not isinstance(raw, list):
        logger.error("[corpus:parse] expected a JSON array, got %s", type(raw).__name__)
        return ()
    entries: list[CorpusEntry] = []
    for item in raw:
        if not isinstance(item, dict):
            continue
        entries.append(
            CorpusEntry(
                question=str(item.get("question") or ""),
                answer=str(item.get("answer") or ""),
            )
        )
    return tuple(entries)


def load_corpus(path: str | Path) -> tuple[CorpusEntry, ...]:
    """Load the corpus file. An unreadable or invalid file yields an empty corpus."""
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.error("[corpus:load] could not read %s: %s", path, e)
        return ()
    entries = parse_corpus(raw)
    logger.info("[corpus:load] loaded %s (%d entries)", path, len(entries))
    return entries
