"""Transport client for Gemini `generateContent` requests.

Architectural role:
    Executes the single outbound HTTP call of the relay and materializes the
    upstream reply without interpreting it.

Model invocation flow:
    `http_api.relay_question_image` -> `service.build_payload` ->
    `send_generate_request(payload, api_key)` -> `UpstreamResponse`.

Retry behavior:
    No retry loop is implemented. Each call is attempted once; the timeout comes
    from `REQUEST_TIMEOUT` (no timeout when unset).

Failure handling model:
    Non-2xx statuses are returned as ordinary responses. Transport failures
    (`requests.exceptions.RequestException`) propagate to the caller.
"""

from typing import NamedTuple, Optional

import requests

from app.llm.provider_config import GEMINI_URL, REQUEST_TIMEOUT


class UpstreamResponse(NamedTuple):
    """Raw upstream reply relayed back to the caller."""

    status_code: int
    text: str
    content_type: Optional[str] = None


def send_generate_request(payload: dict, api_key: str) -> UpstreamResponse:
    """POST one payload to the Gemini endpoint and capture the raw reply.

    Args:
        payload: Request body built by `app.llm.service.build_payload`.
        api_key: Credential sent in the `x-goog-api-key` header.

    Returns:
        `UpstreamResponse` with the upstream status, body text and content type.

    Raises:
        requests.exceptions.RequestException: On connection, timeout or
            body-read failures.
    """
    headers = {
        "Content-Type": "application/json",
        "x-goog-api-key": api_key,
    }

    response = requests.post(
        GEMINI_URL,
        headers=headers,
        json=payload,
        timeout=REQUEST_TIMEOUT,
    )

    return UpstreamResponse(
        status_code=response.status_code,
        text=response.text,
        content_type=response.headers.get("Content-Type"),
    )
