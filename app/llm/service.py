"""Response-to-text adapter for Gemini replies.

Architectural role:
    Turns the provider's nested `candidates[0].content.parts[*].text` shape into
    a single string for the bullet formatter.

Failure handling:
    `extract_text` is total. Missing structure and type mismatches are reported
    through `ExtractionResult.is_sentinel` with fixed fallback text; nothing is
    raised to the caller.
"""

from typing import Any

from app.core.result_types import ExtractionResult


NO_RESPONSE_TEXT = "No response from AI"
NO_CONTENT_TEXT = "No content in response"
EXTRACTION_ERROR_TEXT = "Error extracting AI response"


def _sentinel(text: str) -> ExtractionResult:
    return ExtractionResult(text=text, is_sentinel=True)


def extract_text(data: Any) -> ExtractionResult:
    """Extract concatenated model text from a provider response.

    Args:
        data: Decoded JSON response body (any JSON value).

    Returns:
        `ExtractionResult` with the stripped concatenation of every part's text
        from the first candidate, or a sentinel result.

    Edge cases:
        - Non-object body, missing/`null`/empty `candidates` -> `NO_RESPONSE_TEXT`.
        - Missing/`null` content, missing/`null`/empty `parts` -> `NO_CONTENT_TEXT`.
        - Parts without `text` contribute an empty string.
        - Any other shape mismatch -> `EXTRACTION_ERROR_TEXT`.
    """
    candidates = data.get("candidates") if isinstance(data, dict) else None
    if candidates is None:
        return _sentinel(NO_RESPONSE_TEXT)
    if not isinstance(candidates, list):
        return _sentinel(EXTRACTION_ERROR_TEXT)
    if not candidates:
        return _sentinel(NO_RESPONSE_TEXT)

    first = candidates[0]
    if first is None:
        return _sentinel(NO_CONTENT_TEXT)
    if not isinstance(first, dict):
        return _sentinel(EXTRACTION_ERROR_TEXT)

    content = first.get("content")
    if content is None:
        return _sentinel(NO_CONTENT_TEXT)
    if not isinstance(content, dict):
        return _sentinel(EXTRACTION_ERROR_TEXT)

    parts = content.get("parts")
    if parts is None:
        return _sentinel(NO_CONTENT_TEXT)
    if not isinstance(parts, list):
        return _sentinel(EXTRACTION_ERROR_TEXT)
    if not parts:
        return _sentinel(NO_CONTENT_TEXT)

    chunks = []
    for part in parts:
        if not isinstance(part, dict):
            return _sentinel(EXTRACTION_ERROR_TEXT)
        text = part.get("text") or ""
        if not isinstance(text, str):
            return _sentinel(EXTRACTION_ERROR_TEXT)
        chunks.append(text)

    return ExtractionResult(text="".join(chunks).strip())
