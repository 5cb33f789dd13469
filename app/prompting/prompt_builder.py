"""Provider payload assembly for advisor requests.

This module is intentionally narrow: it only converts caller messages into the
Gemini `contents` list. Transport, response parsing and formatting happen
outside this module.

Design constraints:
    - Deterministic construction for identical inputs.
    - The system instruction is always the first content block.
    - No hidden side effects (no I/O, no global state mutation).

Prompt safety model:
    - Safety is instruction-led, not parser-enforced.
    - User text is forwarded as raw strings.
"""

from typing import Any

from app.core.errors import ValidationError
from app.core.result_types import Message


# =========================================================
# SYSTEM INSTRUCTION
# =========================================================
# Sent as a `user` turn because the payload carries no separate
# `systemInstruction` field.

SYSTEM_INSTRUCTION = (
    "You are an expert agricultural advisor. Provide farming advice in short "
    "bullet points, no more than six.\n\n"
    "Cover these categories, one bullet each:\n"
    "1. Precautions when handling\n"
    "2. Treatment for infected leaves\n"
    "3. Safe pesticides to use\n"
    "4. Organic treatment alternatives\n"
    "5. Future prevention methods\n"
    "6. Fertilizers + irrigation advice\n\n"
    "Keep each point to one sentence only. Be specific and practical."
)


def system_content() -> dict[str, Any]:
    """Return a fresh system-instruction content block."""
    return {"role": "user", "parts": [{"text": SYSTEM_INSTRUCTION}]}


def to_message(entry: Any) -> Message | None:
    """Normalize one raw message entry.

    Returns `None` for entries that carry no usable text: non-object entries and
    entries whose `text` is falsy. Non-string text is converted with `str()`.
    """
    if not isinstance(entry, dict):
        return None

    text = entry.get("text")
    if not text:
        return None

    return Message(role=str(entry.get("role") or "user"), text=str(text))


# =========================================================
# CONTENTS BUILDER
# =========================================================

def build_contents(messages: Any) -> list[dict[str, Any]]:
    """Build the provider `contents` list from caller messages.

    Args:
        messages: Raw `messages` value from the request body.

    Returns:
        System instruction block followed by one block per usable message, in
        original order. `assistant` maps to `model`; every other role maps to
        `user`.

    Raises:
        ValidationError: `messages` is not a list.

    Edge cases:
        - An empty list (or a list without usable text) yields only the
          system instruction block.
    """
    if not isinstance(messages, list):
        raise ValidationError("messages must be an array")

    contents = [system_content()]

    for entry in messages:
        message = to_message(entry)
        if message is None:
            continue
        contents.append({
            "role": message.provider_role,
            "parts": [{"text": message.text}],
        })

    return contents
