"""Provider/runtime configuration for the Gemini relay.

Architectural role:
    Centralizes endpoint selection, credential lookup and transport settings for
    `app.llm.client` and `app.api.http_api`.

Model call flow integration:
    - `client.send_generate_request` consumes `GEMINI_URL` and `REQUEST_TIMEOUT`.
    - `http_api.relay_question_image` resolves the credential through `get_api_key`.

Determinism:
    Endpoint, model and timeout are resolved once at import time. The API key is
    re-read from the process environment on every call to `get_api_key`.

Failure behavior:
    Missing key material is represented as `None`; the HTTP adapter turns it into
    a configuration error response.
"""

import os
from dotenv import load_dotenv

load_dotenv()

# Environment variable holding the Gemini credential.
API_KEY_ENV = "GEMINI_API_KEY"

MODEL_NAME = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")

GEMINI_URL_TEMPLATE = (
    "https://generativelanguage.googleapis.com/v1beta/models/"
    "{model}:generateContent"
)

GEMINI_URL = GEMINI_URL_TEMPLATE.format(model=MODEL_NAME)

# Default MIME type applied when the caller does not tag the image.
DEFAULT_MIME_TYPE = "image/png"

# Request-level debug logging is opt-in.
DEBUG = os.getenv("DEBUG") == "true"


def _load_timeout(raw):
    """Parse the optional outbound timeout in seconds.

    Args:
        raw: Raw `GEMINI_TIMEOUT` value or `None`.

    Returns:
        Positive float, or `None` to leave `requests` without a timeout.

    Edge cases:
        - Unset, empty, non-numeric and non-positive values all yield `None`.
    """
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    return value if value > 0 else None


REQUEST_TIMEOUT = _load_timeout(os.getenv("GEMINI_TIMEOUT"))


def get_api_key():
    """Return the Gemini API key from the process environment.

    Returns:
        Key string, or `None` when the variable is unset or empty.
    """
    return os.getenv(API_KEY_ENV) or None
