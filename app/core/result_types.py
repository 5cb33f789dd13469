"""Data contracts shared by the prompting, LLM and engine layers.

Determinism:
    The data classes are purely structural and state-free.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Message:
    """One caller-supplied conversation turn.

    Attributes:
        role: Caller role label (`"user"` or `"assistant"`; anything else is
            treated as `"user"` by the payload builder).
        text: Non-empty message text.
    """

    role: str
    text: str

    @property
    def provider_role(self) -> str:
        return "model" if self.role == "assistant" else "user"


@dataclass(frozen=True)
class ExtractionResult:
    """Outcome of pulling text out of a provider response.

    `is_sentinel` is `True` when `text` is a fixed fallback string rather than
    model output.
    """

    text: str
    is_sentinel: bool = False
