"""Image-to-payload adapter for Gemini invocation.

Architectural role:
    Bridges the fixed extraction prompt (`app.prompting`) and the caller's image
    into the `generateContent` request body consumed by `app.llm.client`.

Model call flow:
    image + prompt -> payload construction -> `client.send_generate_request(...)`.

Determinism:
    Payload construction is deterministic for fixed inputs. A new dict is built
    on every call; nothing is shared between requests.
"""

from app.llm.provider_config import DEFAULT_MIME_TYPE
from app.prompting.prompt_builder import build_question_prompt


def build_payload(image_base64: str, mime_type=None) -> dict:
    """Build the `generateContent` body for one question screenshot.

    Args:
        image_base64: Base64 image data exactly as received from the caller.
        mime_type: Image MIME type; falls back to `DEFAULT_MIME_TYPE` when
            missing or empty.

    Returns:
        Payload with a single content entry holding the inline image part
        followed by the prompt text part.
    """
    return {
        "contents": [
            {
                "parts": [
                    {
                        "inline_data": {
                            "mime_type": mime_type or DEFAULT_MIME_TYPE,
                            "data": image_base64,
                        }
                    },
                    {"text": build_question_prompt()},
                ]
            }
        ]
    }
