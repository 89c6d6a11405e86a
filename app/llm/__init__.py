"""LLM access package.

Architectural role:
    Provides provider configuration, request-payload construction, and the
    transport adapter used by the HTTP layer to call Gemini.

Module split:
    - `provider_config`: environment-driven endpoint, model and key lookup.
    - `service`: image-to-payload adapter.
    - `client`: HTTP transport returning the raw upstream reply.
"""
