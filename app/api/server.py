"""
Local server entrypoint for the crop advisor HTTP API.

Usage:
    crop-advisor-server --host 0.0.0.0 --port 8000

Equivalent to `uvicorn app.api.http_api:app`, but configures logging from
`Settings.log_level` first.
"""

import argparse
import logging

import uvicorn

from app.api.http_api import create_app
from app.llm.provider_config import load_settings


LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str) -> None:
    """Install a root stream handler at `level` (no-op if one already exists)."""
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run the crop advisor HTTP API.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    settings = load_settings()
    configure_logging(settings.log_level)

    if not settings.api_key:
        logging.getLogger(__name__).warning("GEMINI_API_KEY is not set; chat requests will fail")

    uvicorn.run(
        create_app(settings),
        host=args.host,
        port=args.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
