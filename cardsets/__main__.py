"""CLI for the cardsets service.

Usage:
    python -m cardsets serve [--host H] [--port P] [--reload]   Run the HTTP API
    python -m cardsets init-db                                  Create database tables
"""

import argparse
import asyncio
import logging

import uvicorn

from cardsets.config import settings
from cardsets.database import Database


async def cmd_init_db(args: argparse.Namespace) -> None:
    """Create tables if they don't exist."""
    database = Database(settings.database_url, echo=settings.debug)
    try:
        await database.create_all()
    finally:
        await database.dispose()
    print("Database ready.")


def cmd_serve(args: argparse.Namespace) -> None:
    uvicorn.run(
        "cardsets.main:create_app",
        factory=True,
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level="debug" if args.verbose else settings.log_level.lower(),
    )


def main() -> None:
    """Entry point for the cardsets CLI."""
    parser = argparse.ArgumentParser(
        prog="cardsets",
        description="Flashcard sets learning backend",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default=settings.host, help=f"Bind address (default: {settings.host})")
    serve_parser.add_argument("--port", type=int, default=settings.port, help=f"Port (default: {settings.port})")
    serve_parser.add_argument("--reload", action="store_true", help="Reload on code changes")

    subparsers.add_parser("init-db", help="Create database tables")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    if not args.command:
        parser.print_help()
        return

    if args.command == "serve":
        cmd_serve(args)
        return

    asyncio.run(cmd_init_db(args))


if __name__ == "__main__":
    main()
