"""Runtime constants and environment access for the Brunel Engine API.

Fixed values live here as module constants; anything deployment-specific is
read from the environment (populated from the repo-root .env by main.py).
"""

import os

# Model sent upstream, and the display name reported by /api/health
MODEL_ID = "claude-sonnet-4-20250514"
MODEL_LABEL = "claude-sonnet-4"

# Output budgets per endpoint
CHAT_MAX_TOKENS = 500
ANALYSIS_MAX_TOKENS = 2000

# Incoming JSON bodies are capped at 1 MB
MAX_BODY_BYTES = 1024 * 1024

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000


_PLACEHOLDER_API_KEY = "your-api-key-here"


def get_api_key() -> str | None:
    """Return the Anthropic key, treating the .env.example placeholder as unset."""
    api_key = os.environ.get("ANTHROPIC_API_KEY")
    if not api_key or api_key == _PLACEHOLDER_API_KEY:
        return None
    return api_key


def has_api_key() -> bool:
    return get_api_key() is not None


def get_cors_origins() -> list[str]:
    """Origins allowed by CORS. Defaults to any origin."""
    raw = os.environ.get("CORS_ORIGINS", "*")
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or ["*"]


def get_listen_address() -> tuple[str, int]:
    host = os.environ.get("HOST", DEFAULT_HOST)
    port = int(os.environ.get("PORT", DEFAULT_PORT))
    return host, port
