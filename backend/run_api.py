#!/usr/bin/env python
"""
Run the TaskBridge API server.

Usage:
    python run_api.py
    python run_api.py --reload  # Development mode
"""

import argparse
import logging

import uvicorn

from shared.config import get_settings


def main():
    parser = argparse.ArgumentParser(description="Run TaskBridge API server")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    parser.add_argument("--host", type=str, help="Host to bind to")
    parser.add_argument("--port", type=int, help="Port to bind to")
    args = parser.parse_args()

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    uvicorn.run(
        "api.app:app",
        host=args.host or settings.host,
        port=args.port or settings.port,
        reload=args.reload or settings.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
