"""Error taxonomy for the advisor request pipeline.

Each class carries the HTTP status the router maps it to and the text placed in
the JSON `error` field. Extraction problems are not represented here: the
response extractor returns sentinel text instead of raising.
"""

from typing import Any


class AdvisorError(Exception):
    """Base class for failures that end a request with a JSON error body."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.public_message = message


class ClientInputError(AdvisorError):
    """Malformed request body (for example invalid JSON)."""

    status_code = 400


class ValidationError(ClientInputError):
    """Request body parsed but does not have the required shape."""


class ConfigurationError(AdvisorError):
    """Required server configuration is missing or unusable."""

    status_code = 500


class ProviderError(AdvisorError):
    """Outbound provider call failed.

    Attributes:
        details: Upstream diagnostic payload (parsed JSON body or raw text) when
            available, otherwise the local error description.
    """

    status_code = 500

    def __init__(self, details: Any, message: str = "Gemini request failed"):
        super().__init__(message)
        self.details = details
