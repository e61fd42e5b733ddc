"""
FastAPI server entry point for the YouTube Transcript Summarizer.
"""

import argparse
from typing import Dict, Any, List, Optional

import uvicorn
from dotenv import load_dotenv

from app.config import config

APP_IMPORT_PATH = "app.api.app:app"


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="YouTube Transcript Summarizer API")
    parser.add_argument("--host", default="0.0.0.0", help="Host to bind the server to")
    parser.add_argument("--port", type=int, default=8000, help="Port to bind the server to")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload for development")
    parser.add_argument("--log-level", default=config.LOG_LEVEL.lower(),
                        choices=["critical", "error", "warning", "info", "debug"],
                        help="uvicorn log level")
    return parser.parse_args(argv)


def uvicorn_options(args: argparse.Namespace) -> Dict[str, Any]:
    """Keyword arguments for uvicorn.run."""
    return {
        "host": args.host,
        "port": args.port,
        "reload": args.reload,
        "log_level": args.log_level,
    }


def main(argv: Optional[List[str]] = None):
    """Run the FastAPI server."""
    load_dotenv()
    args = parse_args(argv)

    providers = config.get_providers()
    print(f"Starting {config.APP_NAME} API v{config.APP_VERSION} on {args.host}:{args.port}")
    for name, provider in providers.items():
        state = "configured" if provider["key_configured"] else "per-request only"
        print(f"  {name}: {provider['url']} (key {state})")

    uvicorn.run(APP_IMPORT_PATH, **uvicorn_options(args))


if __name__ == "__main__":
    main()
