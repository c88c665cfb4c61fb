"""CLI for the listings API: run the server, inspect seed data."""

from __future__ import annotations

import argparse
import logging
import sys
from collections import Counter

from app.config import get_settings


def cmd_serve(args):
    """Run the API with uvicorn."""
    import uvicorn

    settings = get_settings()
    host = args.host or settings.server.host
    port = args.port or settings.server.port
    print(f"API:    http://localhost:{port}/api/properties")
    print(f"Health: http://localhost:{port}/health")
    uvicorn.run("app.main:app", host=host, port=port, reload=args.reload,
                log_level=settings.log_level.lower())


def cmd_check_seed(args):
    """Load the seed file the way the server does and summarize it."""
    from app.exceptions import SeedDataError
    from app.services.listing_store import ListingStore

    path = args.path or get_settings().seed.path
    try:
        store = ListingStore.from_seed_file(path)
    except SeedDataError as e:
        print(f"Seed data error: {e}")
        sys.exit(1)

    listings = store.list()
    print(f"{len(listings)} listings in {path}")
    by_city = Counter((p.city, p.type) for p in listings)
    for (city, prop_type), count in sorted(by_city.items(), key=lambda kv: (str(kv[0][0]), kv[0][1])):
        print(f"  {str(city):<20} {prop_type:<5} {count}")


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(description="Listings API CLI")
    subparsers = parser.add_subparsers(dest="command")

    # serve
    sv = subparsers.add_parser("serve", help="Run the HTTP API")
    sv.add_argument("--host", default="", help="Bind address (defaults to config)")
    sv.add_argument("--port", type=int, default=0, help="Port (defaults to config)")
    sv.add_argument("--reload", action="store_true", help="Reload on code changes")

    # check-seed
    cs = subparsers.add_parser("check-seed", help="Validate and summarize the seed dataset")
    cs.add_argument("--path", default="", help="Seed JSON file (defaults to config)")

    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        sys.exit(1)

    logging.basicConfig(
        level=get_settings().log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "serve":
        cmd_serve(args)
    elif args.command == "check-seed":
        cmd_check_seed(args)


if __name__ == "__main__":
    main()
