"""Gemini transport client for advisor requests.

Architectural role:
    Executes the single outbound HTTP request per inbound chat request and
    returns the decoded JSON body untouched. Text extraction lives in
    `app.llm.service`.

Model invocation flow:
    `engine.process_chat` -> `send_request(contents, settings)` -> Gemini
    `generateContent` -> parsed JSON dict.

Retry behavior:
    No retry loop is implemented. Each HTTP call is attempted once with
    `timeout=settings.timeout_seconds`.

Failure handling model:
    Transport errors, timeouts, non-2xx statuses and non-JSON bodies are raised
    as `ProviderError` carrying the upstream diagnostic payload when available.
    Every failure is logged before it is raised.
"""

import logging
from typing import Any

import requests

from app.core.errors import ProviderError
from app.llm.provider_config import API_KEY_HEADER, Settings


logger = logging.getLogger(__name__)


def _diagnostic_payload(err: requests.exceptions.RequestException) -> Any:
    """Return the most useful description of a failed request.

    Resolution order:
        1. Upstream response body decoded as JSON (unless it is `null`).
        2. Upstream response body as text (when non-empty).
        3. `str(err)`.
    """
    response = getattr(err, "response", None)
    if response is None:
        return str(err)

    try:
        payload = response.json()
    except ValueError:
        return response.text or str(err)

    return str(err) if payload is None else payload


def send_request(contents: list[dict[str, Any]], settings: Settings) -> Any:
    """Send one `generateContent` request and return the decoded JSON body.

    Args:
        contents: Provider `contents` list from `build_contents`.
        settings: Active configuration (key, model URL, timeout).

    Returns:
        Decoded JSON response body (usually a dict).

    Raises:
        ConfigurationError: No API key configured.
        ProviderError: Timeout, transport failure, non-2xx status or a body that
            is not valid JSON.
    """
    api_key = settings.require_api_key()

    headers = {
        "Content-Type": "application/json",
        API_KEY_HEADER: api_key,
    }

    logger.debug("Sending %d content blocks to %s", len(contents), settings.model)

    try:
        response = requests.post(
            settings.generate_url,
            headers=headers,
            json={"contents": contents},
            timeout=settings.timeout_seconds,
        )
        response.raise_for_status()
    except requests.exceptions.RequestException as err:
        details = _diagnostic_payload(err)
        logger.error("Gemini API error: %s", details)
        raise ProviderError(details) from err

    try:
        data = response.json()
    except ValueError as err:
        details = response.text or str(err)
        logger.error("Gemini API returned invalid JSON: %s", details)
        raise ProviderError(details) from err

    logger.debug("Gemini response received (status %s)", response.status_code)
    return data
