#!/usr/bin/env python3
"""
Run the Roblox GamePass Proxy API server.

Usage:
    python run_api.py
    python run_api.py --port 8080
    python run_api.py --host 127.0.0.1 --port 3000 --reload

Defaults come from the environment (PORT, GAMEPASS_PROXY_*).
"""

import argparse
import logging

import uvicorn

from core.config import get_settings
from core.logging_setup import setup_logging


def main():
    settings = get_settings()

    parser = argparse.ArgumentParser(description="Run Roblox GamePass Proxy API server")
    parser.add_argument(
        "--host",
        default=settings.host,
        help=f"Host to bind to (default: {settings.host})",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=settings.port,
        help=f"Port to listen on (default: {settings.port})",
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level.lower(),
        choices=["debug", "info", "warning", "error"],
        help=f"Log level (default: {settings.log_level.lower()})",
    )

    args = parser.parse_args()

    setup_logging(args.log_level, settings.log_file)
    logger = logging.getLogger(__name__)
    logger.info(f"[SERVER] Roblox GamePass Proxy running on port {args.port}")
    logger.info(f"[SERVER] Access at: http://localhost:{args.port}")

    uvicorn.run(
        "api.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=args.log_level,
        log_config=None,
    )


if __name__ == "__main__":
    main()
