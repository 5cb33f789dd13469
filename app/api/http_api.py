"""
HTTP API adapter for the crop advisor pipeline.

Architectural role:
- Expose the single advisor route over HTTP.
- Enforce adapter-level method dispatch, path guards and body validation.
- Delegate provider work to `app.core.engine.process_chat`.
- Map pipeline errors to JSON error bodies.

Endpoint responsibilities (every path, one catch-all route):
- `OPTIONS`: CORS preflight, empty 200.
- `GET`: liveness probe with status, configured model and timestamp.
- `POST`: `{"messages": [...]}` -> `{"bullets": [...]}`.
- Any other method: 405.

Request lifecycle (`POST`):
1. Reject paths ending in `/` (404) before any dispatch.
2. Reject missing API key (500) before reading the body.
3. Parse JSON body and validate `messages` (400).
4. Run the engine pipeline (provider failures -> 500 with upstream details).

Response headers:
- `Access-Control-Allow-Origin`, `-Methods` and `-Headers` are added to every
  response by an HTTP middleware.

Side effects:
- One outbound provider request per successful `POST`.
- Incoming messages and produced bullets are logged only when `DEBUG == "true"`.
"""

import logging
from datetime import datetime, timezone
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel

from app.core.engine import process_chat
from app.core.errors import AdvisorError, ClientInputError, ProviderError
from app.llm.provider_config import Settings, load_settings


logger = logging.getLogger(__name__)

STATUS_TEXT = "Serverless API running"

ROUTE_METHODS = ["GET", "POST", "OPTIONS"]

ALLOWED_METHODS = "GET,POST,OPTIONS"
ALLOWED_HEADERS = "Content-Type"


# ============================================================
# Response Schemas
# ============================================================

class BulletResponse(BaseModel):
    bullets: list[str]


class HealthStatus(BaseModel):
    status: str
    model: str
    time: str


class ErrorResponse(BaseModel):
    error: str
    details: Any = None


def cors_headers(settings: Settings) -> dict[str, str]:
    """Return the CORS headers attached to every response."""
    return {
        "Access-Control-Allow-Origin": settings.allowed_origin,
        "Access-Control-Allow-Methods": ALLOWED_METHODS,
        "Access-Control-Allow-Headers": ALLOWED_HEADERS,
    }


def utc_timestamp() -> str:
    """Return the current UTC time as ISO-8601 with millisecond precision."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def error_response(status_code: int, error: str, details: Any = None) -> JSONResponse:
    body = ErrorResponse(error=error, details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


def guard_request(request: Request) -> JSONResponse | None:
    """
    Apply path and method guards before routing.

    Runs for every request, including methods no route registers, so the
    trailing-slash 404 wins over the 405 and both use the JSON `error` shape.
    """
    if request.url.path.endswith("/"):
        return error_response(404, "Not found")

    if request.method not in ROUTE_METHODS:
        return error_response(405, "Method not allowed")

    return None


# ============================================================
# Application Factory
# ============================================================

def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the FastAPI application bound to one `Settings` instance.

    Args:
        settings: Configuration to serve with. Loaded from the environment
            when omitted.

    Returns:
        Configured `FastAPI` instance. Slash redirects are disabled so that
        trailing-slash paths reach the 404 guard instead of redirecting.
    """
    settings = settings or load_settings()

    api = FastAPI(redirect_slashes=False)
    api.state.settings = settings

    @api.middleware("http")
    async def apply_guards_and_cors(request: Request, call_next):
        response = guard_request(request)
        if response is None:
            response = await call_next(request)
        response.headers.update(cors_headers(settings))
        return response

    @api.api_route("/{path:path}", methods=ROUTE_METHODS)
    async def advisor_route(request: Request, path: str):
        """
        Dispatch one guarded request by HTTP method.

        Error handling strategy:
        - Pipeline errors (`AdvisorError`) map to their status code and message.
        - Provider failures add the upstream diagnostic payload as `details`.
        - Unexpected exceptions follow FastAPI default handling.
        """
        if request.method == "OPTIONS":
            return Response(status_code=200)

        if request.method == "GET":
            status = HealthStatus(status=STATUS_TEXT, model=settings.model, time=utc_timestamp())
            return JSONResponse(status_code=200, content=status.model_dump())

        try:
            return await handle_chat(request, settings)
        except ProviderError as err:
            return error_response(err.status_code, err.public_message, err.details)
        except AdvisorError as err:
            log = logger.error if err.status_code >= 500 else logger.info
            log("Request rejected (%s): %s", err.status_code, err.public_message)
            return error_response(err.status_code, err.public_message)

    return api


async def handle_chat(request: Request, settings: Settings) -> JSONResponse:
    """
    Validate a chat `POST` and run it through the engine.

    Input validation behavior:
    - Missing API key -> `ConfigurationError` (checked before the body is read).
    - Unparseable JSON -> `ClientInputError`.
    - Non-object body or non-list `messages` -> `ValidationError`.
    """
    settings.require_api_key()

    try:
        body = await request.json()
    except ValueError:
        raise ClientInputError("Invalid JSON body") from None

    messages = body.get("messages") if isinstance(body, dict) else None

    if settings.debug:
        logger.debug("Incoming messages: %s", messages)

    bullets = await process_chat(messages, settings)

    if settings.debug:
        logger.debug("Bullets: %s", bullets)

    return JSONResponse(status_code=200, content=BulletResponse(bullets=bullets).model_dump())


app = create_app()
