"""
HTTP API adapter for the question-image relay.

Architectural role:
- Expose a single relay endpoint for test-question screenshots.
- Enforce adapter-level method, configuration and input validation.
- Delegate payload construction to `app.llm.service.build_payload` and the
  outbound call to `app.llm.client.send_generate_request`.
- Relay the upstream status and body to the caller unmodified.

Endpoint responsibilities:
- `POST /api/gemini`: validate, build payload, call Gemini, pass through.
- Any other method on `/api/gemini`: HTTP 405 with the same JSON body, from
  the handler or, for methods the router rejects, `method_not_allowed_handler`.

API request lifecycle (`POST /api/gemini`):
1. Reject non-POST methods.
2. Resolve `GEMINI_API_KEY` from the environment.
3. Parse the JSON body (`image_base64`, optional `mime_type`).
4. Build the `generateContent` payload with the fixed extraction prompt.
5. Await the blocking outbound call in a worker thread.
6. Return the upstream status and raw body text.

Input validation behavior:
- Wrong method -> HTTP 405.
- Missing API key -> HTTP 500.
- Missing/empty `image_base64` -> HTTP 400. Empty, non-JSON, non-object and
  non-`application/json` bodies are treated the same way.
- A non-string `mime_type` is ignored and falls back to `image/png`.

Error handling strategy:
- Validation failures return structured `{"error": ...}` JSON responses.
- Any exception raised by the outbound call is logged and returned as HTTP 500
  with the exception text. There is no retry.
- Upstream non-2xx replies are relayed verbatim, not treated as errors.

Side effects:
- One outbound HTTP request per valid call.
- Emits debug logs only when `DEBUG == "true"`.
"""

import asyncio
import json
import logging

from fastapi import FastAPI, Request, Response
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.schemas import QuestionImageRequest
from app.llm.client import send_generate_request
from app.llm.provider_config import API_KEY_ENV, DEBUG, get_api_key
from app.llm.service import build_payload

logger = logging.getLogger(__name__)

app = FastAPI()

RELAY_PATH = "/api/gemini"

# Methods outside this list are rejected by the router; see `method_not_allowed_handler`.
RELAY_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"]


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build the `{"error": message}` body used by every failure path."""
    return JSONResponse(status_code=status_code, content={"error": message})


@app.exception_handler(StarletteHTTPException)
async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException):
    """
    Give router-level 405s on the relay path the same body as the handler.

    Any other HTTP exception falls through to the FastAPI default.
    """
    if exc.status_code == 405 and request.url.path == RELAY_PATH:
        return error_response(405, "Method not allowed")
    return await http_exception_handler(request, exc)


def has_json_content_type(request: Request) -> bool:
    """Return whether the request declares an `application/json` body."""
    content_type = request.headers.get("content-type", "")
    return content_type.split(";", 1)[0].strip().lower() == "application/json"


async def parse_question_request(request: Request) -> QuestionImageRequest:
    """
    Read the request body into a `QuestionImageRequest`.

    Edge cases:
    - Bodies not declared as `application/json` are not parsed and yield an
      empty request, like serverless runtimes that only decode JSON bodies.
    - Empty body, invalid JSON and non-object JSON yield an empty request.
    - An unusable `image_base64` (e.g. a number) also yields an empty
      request, which the caller reports as a missing image. An unusable
      `mime_type` is dropped by the schema instead.
    """
    if not has_json_content_type(request):
        return QuestionImageRequest()

    raw = await request.body()
    if not raw:
        return QuestionImageRequest()

    try:
        body = json.loads(raw)
    except ValueError:
        return QuestionImageRequest()

    if not isinstance(body, dict):
        return QuestionImageRequest()

    try:
        return QuestionImageRequest(**body)
    except ValidationError:
        return QuestionImageRequest()


# ============================================================
# Question Image Relay
# ============================================================

@app.api_route(RELAY_PATH, methods=RELAY_METHODS)
async def relay_question_image(request: Request):
    """
    Relay a question screenshot to Gemini and pass the reply through.

    Error handling strategy:
    - Method, configuration and input checks short-circuit in that order.
    - Outbound failures of any kind become HTTP 500 `{"error": str(exc)}`.

    Response formatting:
    - Success path returns the upstream status code and body text unchanged,
      with the upstream `Content-Type` when one was sent.
    """
    if request.method != "POST":
        return error_response(405, "Method not allowed")

    api_key = get_api_key()
    if not api_key:
        logger.error("%s is not configured; rejecting request", API_KEY_ENV)
        return error_response(500, f"{API_KEY_ENV} is not set")

    question = await parse_question_request(request)
    if not question.image_base64:
        return error_response(400, "image_base64 is required")

    payload = build_payload(question.image_base64, question.mime_type)

    if DEBUG:
        logger.debug(
            "Relaying question image: mime_type=%r image_chars=%d",
            question.mime_type,
            len(question.image_base64),
        )

    try:
        upstream = await asyncio.to_thread(send_generate_request, payload, api_key)
    except Exception as exc:
        logger.exception("Gemini request failed")
        return error_response(500, str(exc))

    if DEBUG:
        logger.debug("Gemini responded: status=%d", upstream.status_code)

    return Response(
        content=upstream.text,
        status_code=upstream.status_code,
        media_type=upstream.content_type,
    )
