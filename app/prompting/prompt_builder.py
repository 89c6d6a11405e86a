"""Prompt assembly for test-question extraction.

This module only holds the fixed instruction sent alongside every screenshot.
Image handling, payload construction and model invocation happen outside it.

Design constraints:
    - Deterministic construction; the prompt never depends on request input.
    - No hidden side effects (no I/O, no global state mutation).

Prompt safety model:
    - The output format is instruction-led, not parser-enforced.
    - The model reply is relayed unparsed, so callers must validate it themselves.
"""


# =========================================================
# QUESTION EXTRACTION PROMPT
# =========================================================
# The screenshot is a Russian-language test question. The model extracts:
#   1) the question text
#   2) the answer options
#   3) the correct answer, taken from a "Правильный ответ: ..." line if present
# and answers with a bare JSON object.

QUESTION_PROMPT = """
Ты получишь скриншот тестового вопроса на русском языке.
Нужно извлечь:
1) вопрос
2) список вариантов ответов
3) правильный ответ (по строке "Правильный ответ: ...", если есть)

Ответ верни строго в JSON без пояснений:
{"question":"...","options":["...","..."],"correct_answer":"..."}
"""


def build_question_prompt() -> str:
    """Return the extraction prompt with surrounding whitespace stripped."""
    return QUESTION_PROMPT.strip()
