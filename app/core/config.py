"""
Application configuration (env, settings, constants).

Responsibility: Centralize config loading, environment variables, and app-wide
constants. Keeps the rest of the app decoupled from how config is sourced.
"""

import os

from dotenv import load_dotenv

load_dotenv()

# AI fallback credential (from env). Unset or empty means the fallback path is disabled.
AI_API_KEY: str | None = os.getenv("AI_API_KEY", "").strip() or None

# DuckDuckGo Instant Answer API (free, no key required)
SEARCH_URL: str = (
    os.getenv("SEARCH_URL", "https://api.duckduckgo.com/").strip()
    or "https://api.duckduckgo.com/"
)
SEARCH_FORMAT: str = "json"


def env_float(name: str, default: float) -> float:
    """Read a float from env; unset, empty or non-numeric values give default."""
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


# API timeouts (seconds)
SEARCH_API_TIMEOUT: float = env_float("SEARCH_API_TIMEOUT", 10.0)

# Answer templates
NO_RESULTS_TEMPLATE: str = "No results found for: {query}"
AI_PLACEHOLDER_RESPONSE: str = (
    "AI response placeholder. Configure your API key to enable AI features."
)
