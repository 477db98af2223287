"""
Generative answers via an OpenAI-compatible chat completions API (Groq by default).

ask() never raises: a missing key, transport error, bad status or odd payload
all come back as None so the pipeline can fall through to web search.
"""

import logging
from typing import Any

import httpx

from answerbot.core.config import (
    GROQ_API_KEY,
    GROQ_CHAT_URL,
    GROQ_MODEL,
    LLM_API_TIMEOUT,
    LLM_SYSTEM_PROMPT,
)
from answerbot.core.errors import ProviderError

logger = logging.getLogger(__name__)


def _extract_content(data: Any) -> str:
    """First completion's text, stripped. Empty string when the model said nothing."""
    if not isinstance(data, dict):
        raise ProviderError("groq", f"unexpected response type {type(data).__name__}")
    choices = data.get("choices") or []
    if not choices or not isinstance(choices[0], dict):
        return ""
    msg = choices[0].get("message") or {}
    return (msg.get("content") or "").strip()


class ChatCompletionProvider:
    def __init__(
        self,
        api_key: str = GROQ_API_KEY,
        model: str = GROQ_MODEL,
        url: str = GROQ_CHAT_URL,
        timeout: float = LLM_API_TIMEOUT,
        system_prompt: str = LLM_SYSTEM_PROMPT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.api_key = api_key
        self.model = model
        self.url = url
        self.timeout = timeout
        self.system_prompt = system_prompt
        self._transport = transport

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    def ask(self, prompt: str) -> str | None:
        if not self.configured:
            logger.error("[llm:ask] missing GROQ_API_KEY; skipping generative answer")
            return None
        logger.info("[llm:ask] IN  model=%s prompt=%r", self.model, prompt)
        headers = {"Authorization": f"Bearer {self.api_key}", "Content-Type": "application/json"}
        payload = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": self.system_prompt},
                {"role": "user", "content": prompt},
            ],
        }
        try:
            with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
                response = client.post(self.url, json=payload, headers=headers)
            response.raise_for_status()
            out = _extract_content(response.json())
        except httpx.HTTPStatusError as e:
            logger.warning("[llm:ask] Groq error %s: %s", e.response.status_code, e.response.text[:200])
            return None
        except Exception as e:
            logger.warning("[llm:ask] request failed: %s", e)
            return None
        if not out:
            logger.info("[llm:ask] OUT empty completion")
            return None
        logger.info("[llm:ask] OUT response_len=%d", len(out))
        return out
