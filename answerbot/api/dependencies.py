"""
FastAPI dependencies. The pipeline is built once per process around the corpus
loaded from CORPUS_PATH; tests swap it via app.dependency_overrides.
"""

from functools import lru_cache

from answerbot.core.config import CORPUS_PATH
from answerbot.core.corpus import load_corpus
from answerbot.services.pipeline import ResolutionPipeline, build_pipeline


@lru_cache(maxsize=1)
def get_pipeline() -> ResolutionPipeline:
    return build_pipeline(load_corpus(CORPUS_PATH))
