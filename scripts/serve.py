#!/usr/bin/env python3
"""
Run the match tracker API with uvicorn.

Usage:
  python scripts/serve.py [--host 0.0.0.0] [--port 8080]
"""
from __future__ import annotations

import argparse

import uvicorn

from matches_api.core.config import get_settings


def main() -> None:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Start the match tracker API.")
    parser.add_argument("--host", default=settings.host)
    parser.add_argument("--port", type=int, default=settings.port)
    args = parser.parse_args()

    if args.port <= 0 or args.port > 65535:
        parser.error("Port must be between 1 and 65535.")

    print(f"Starting server on {args.host}:{args.port} ...")
    uvicorn.run("matches_api.app:create_app", factory=True, host=args.host, port=args.port)


if __name__ == "__main__":
    main()
