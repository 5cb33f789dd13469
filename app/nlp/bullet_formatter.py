"""Rule-based bullet normalization for model replies.

Parsing rules:
- Split on `\\n` / `\\r\\n`, strip each line, drop empty lines.
- Apply `STRIP_RULES` in order, each at most once per line, so a line can lose
  several consecutive markers (for example `1. a. text` -> `text`).
- Strip the result again.
- Numeric and letter enumerations need whitespace after the dot, so `1.Do X`,
  `1.5 kg` and `e.g. text` are kept as written. Bullet glyphs do not
  (`-Mulch` -> `Mulch`).

Determinism:
- Fully deterministic; no I/O and no shared state.

Edge cases:
- `None`, empty or whitespace-only input yields `[EMPTY_RESPONSE_TEXT]`.
- Output length always equals the number of non-empty stripped lines; a line
  consisting only of a marker becomes an empty string rather than being dropped.
"""

import re


EMPTY_RESPONSE_TEXT = "No response received"

LINE_BREAK = re.compile(r"\r?\n")


# ---------------------------------------------------------
# Marker strip rules (pattern -> replacement), applied in order
# ---------------------------------------------------------

STRIP_RULES: list[tuple[re.Pattern[str], str]] = [
    # Dash, asterisk and common Unicode bullet glyphs
    (re.compile(r"^[-•*➤▪▫◦‣⁃]\s*"), ""),
    # Numeric enumeration: "1. ", "12. "
    (re.compile(r"^\d+\.\s+"), ""),
    # Single-letter enumeration: "a. ", "B. "
    (re.compile(r"^[a-zA-Z]\.\s+"), ""),
    # Residual asterisk left after another marker
    (re.compile(r"^\*\s+"), ""),
]


def strip_marker(line: str) -> str:
    """Remove leading list markers from one already-stripped line."""
    for pattern, replacement in STRIP_RULES:
        line = pattern.sub(replacement, line, count=1)
    return line.strip()


def format_as_bullets(text: str | None) -> list[str]:
    """Convert free-form model text into a flat list of bullet strings.

    Args:
        text: Extracted model reply (or sentinel text).

    Returns:
        One string per non-empty source line, in original order.
    """
    if not text or not text.strip():
        return [EMPTY_RESPONSE_TEXT]

    lines = (line.strip() for line in LINE_BREAK.split(text))
    return [strip_marker(line) for line in lines if line]
