"""Core request pipeline for advisor chat requests.

Architectural role:
    Provides the single execution path used by the HTTP router and the terminal
    client to turn caller messages into a bullet list.

Control-flow model:
    1. Build provider contents (`prompting.prompt_builder.build_contents`).
    2. Call the provider once (`llm.client.send_request`) in a worker thread.
    3. Extract reply text (`llm.service.extract_text`).
    4. Normalize into bullets (`nlp.bullet_formatter.format_as_bullets`).

Error handling strategy:
    `ValidationError`, `ConfigurationError` and `ProviderError` propagate to the
    caller unchanged. Extraction never fails; sentinel results are logged and
    still formatted so the caller always receives a bullet list.

Side effects:
    One outbound HTTP request per call. No state survives the call.
"""

import asyncio
import logging
from typing import Any

from app.llm.client import send_request
from app.llm.provider_config import Settings
from app.llm.service import extract_text
from app.nlp.bullet_formatter import format_as_bullets
from app.prompting.prompt_builder import build_contents


logger = logging.getLogger(__name__)


async def process_chat(messages: Any, settings: Settings) -> list[str]:
    """Run one chat request through the provider and return bullet strings.

    Args:
        messages: Raw `messages` value from the caller.
        settings: Active configuration.

    Returns:
        Ordered bullet strings.

    Raises:
        ValidationError: `messages` is not a list.
        ConfigurationError: No API key configured.
        ProviderError: Outbound call failed.
    """
    contents = build_contents(messages)

    data = await asyncio.to_thread(send_request, contents, settings)

    extraction = extract_text(data)
    if extraction.is_sentinel:
        logger.warning("Provider reply had no usable text: %s", extraction.text)

    return format_as_bullets(extraction.text)
