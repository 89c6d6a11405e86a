"""Question-image relay API adapter package.

Architectural role:
- Defines the external HTTP boundary of the relay.
- Performs transport-level validation and response shaping.
- Delegates payload construction and the outbound call to `app.llm`.

Scope:
- Request lifecycle control for adapter concerns only.
- No direct model invocation logic is implemented in this package root.
"""
