"""Provider/runtime configuration for the advisor service.

Architectural role:
    Builds the single `Settings` object consumed by `app.api.http_api`,
    `app.core.engine` and `app.llm.client`. Settings are read once at process
    start and passed explicitly; no module reads the environment per request.

Environment variables:
    - `GEMINI_API_KEY`: provider key (required for chat requests only).
    - `GEMINI_MODEL`: model identifier, defaults to `DEFAULT_MODEL`.
    - `ALLOWED_ORIGIN`: CORS origin, defaults to `*`.
    - `GEMINI_TIMEOUT`: outbound request timeout in seconds.
    - `DEBUG`: `"true"` enables payload debug logging.
    - `LOG_LEVEL`: root log level when `DEBUG` is off.

Failure behavior:
    A missing key is represented as `None` and only rejected by
    `Settings.require_api_key`. An unusable timeout raises `ConfigurationError`
    at load time.
"""

import os
from dataclasses import dataclass
from typing import Mapping

from dotenv import load_dotenv

from app.core.errors import ConfigurationError


DEFAULT_MODEL = "gemini-2.5-pro"
DEFAULT_ORIGIN = "*"
DEFAULT_TIMEOUT_SECONDS = 20.0

API_KEY_HEADER = "x-goog-api-key"

GEMINI_URL_TEMPLATE = (
    "https://generativelanguage.googleapis.com/v1beta/models/"
    "{model}:generateContent"
)


@dataclass(frozen=True)
class Settings:
    """Process-level configuration shared read-only by every request.

    Attributes:
        api_key: Gemini API key or `None` when not configured.
        model: Model identifier used in the request URL path.
        allowed_origin: Value of the `Access-Control-Allow-Origin` header.
        timeout_seconds: Upper bound for the single outbound provider call.
        debug: Enables logging of incoming messages and produced bullets.
        log_level: Root log level name.
    """

    api_key: str | None = None
    model: str = DEFAULT_MODEL
    allowed_origin: str = DEFAULT_ORIGIN
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    debug: bool = False
    log_level: str = "INFO"

    @property
    def generate_url(self) -> str:
        """Return the `generateContent` endpoint for the configured model."""
        return GEMINI_URL_TEMPLATE.format(model=self.model)

    def require_api_key(self) -> str:
        """Return the API key or raise `ConfigurationError`.

        The error message is generic and never echoes configuration values.
        """
        if not self.api_key:
            raise ConfigurationError("Missing Gemini API key")
        return self.api_key


def _read(env: Mapping[str, str], name: str) -> str | None:
    value = env.get(name)
    if value is None:
        return None
    value = value.strip()
    return value or None


def _parse_timeout(raw: str | None) -> float:
    if raw is None:
        return DEFAULT_TIMEOUT_SECONDS
    try:
        timeout = float(raw)
    except ValueError:
        raise ConfigurationError("Invalid GEMINI_TIMEOUT value") from None
    if timeout <= 0:
        raise ConfigurationError("Invalid GEMINI_TIMEOUT value")
    return timeout


def load_settings(env: Mapping[str, str] | None = None) -> Settings:
    """Build `Settings` from the process environment or an explicit mapping.

    Args:
        env: Optional mapping used instead of `os.environ` (tests pass fixture
            dictionaries here). When omitted, a local `.env` file is loaded first.

    Returns:
        Frozen `Settings` instance.

    Edge cases:
        - Empty or whitespace-only values count as unset.
        - `DEBUG=true` forces the log level to `DEBUG`.
    """
    if env is None:
        load_dotenv()
        env = os.environ

    debug = (_read(env, "DEBUG") or "").lower() == "true"
    log_level = "DEBUG" if debug else (_read(env, "LOG_LEVEL") or "INFO").upper()

    return Settings(
        api_key=_read(env, "GEMINI_API_KEY"),
        model=_read(env, "GEMINI_MODEL") or DEFAULT_MODEL,
        allowed_origin=_read(env, "ALLOWED_ORIGIN") or DEFAULT_ORIGIN,
        timeout_seconds=_parse_timeout(_read(env, "GEMINI_TIMEOUT")),
        debug=debug,
        log_level=log_level,
    )
