"""LLM access package.

Architectural role:
    Provides provider configuration, transport and response extraction used by the
    core pipeline to call the Gemini `generateContent` API.

Module split:
    - `provider_config`: `Settings` and environment-driven configuration.
    - `client`: HTTP transport with timeout and error mapping.
    - `service`: response-to-text extraction with sentinel fallbacks.
"""
