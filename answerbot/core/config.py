"""
Application configuration (env, settings, constants).

Responsibility: Centralize config loading, environment variables, and app-wide
constants. Keeps the rest of the app decoupled from how config is sourced.
"""

import os

from dotenv import load_dotenv

load_dotenv()

# Server
HOST: str = os.getenv("HOST", "0.0.0.0").strip() or "0.0.0.0"
PORT: int = int(os.getenv("PORT", "5000"))
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO"

# CORS: comma-separated list of allowed origins
_DEFAULT_CORS_ORIGINS = "http://localhost:3000,http://localhost:5000"
CORS_ORIGINS: list[str] = [
    o.strip() for o in os.getenv("CORS_ORIGINS", _DEFAULT_CORS_ORIGINS).split(",") if o.strip()
]

# Q&A corpus (JSON array of {"question", "answer"})
CORPUS_PATH: str = os.getenv("CORPUS_PATH", "data/data.json").strip() or "data/data.json"


def env_fraction(name: str, default: float) -> float:
    """Float env var clamped to [0, 1]; scores live in that range."""
    return min(max(float(os.getenv(name, str(default))), 0.0), 1.0)


# Corpus matching (tuning these changes which questions are answered locally)
MATCH_THRESHOLD: float = env_fraction("MATCH_THRESHOLD", 0.55)
CONTAINMENT_FLOOR: float = env_fraction("CONTAINMENT_FLOOR", 0.8)

# Groq chat completions (OpenAI-compatible)
GROQ_API_KEY: str = os.getenv("GROQ_API_KEY", "").strip()
GROQ_MODEL: str = (
    os.getenv("GROQ_MODEL", "llama-3.3-70b-versatile").strip() or "llama-3.3-70b-versatile"
)
GROQ_CHAT_URL: str = (
    os.getenv("GROQ_CHAT_URL", "https://api.groq.com/openai/v1/chat/completions").strip()
    or "https://api.groq.com/openai/v1/chat/completions"
)
LLM_SYSTEM_PROMPT: str = "You are a helpful AI assistant."

# Web search endpoints (no key required)
GOOGLE_SEARCH_URL: str = "https://www.google.com/search"
DUCKDUCKGO_API_URL: str = "https://api.duckduckgo.com/"
WIKIPEDIA_API_URL: str = "https://en.wikipedia.org/w/api.php"
SEARCH_USER_AGENT: str = "Mozilla/5.0"

# API timeouts (seconds)
LLM_API_TIMEOUT: float = 20.0
GOOGLE_TIMEOUT: float = 12.0
DUCKDUCKGO_TIMEOUT: float = 10.0
WIKIPEDIA_TIMEOUT: float = 10.0
