"""Order Service management CLI.

Usage:
    python src/manage.py setup-db   # Create the orders and order_line_items tables
    python src/manage.py drop-db    # Drop them
    python src/manage.py serve      # Run the API with uvicorn (PORT, default 8080)
"""

import argparse
import os
import sys


def setup_database():
    from ordering.domain import ordering
    from ordering.utils.db import setup_db

    print("Initializing ordering domain...")
    ordering.init()
    print("Creating ordering database schema...")
    setup_db(ordering)
    print("Done.")


def drop_database():
    from ordering.domain import ordering
    from ordering.utils.db import drop_db

    print("Initializing ordering domain...")
    ordering.init()
    print("Dropping ordering database schema...")
    drop_db(ordering)
    print("Done.")


def serve(host, port):
    import uvicorn

    uvicorn.run("app:app", host=host, port=port)


def main():
    parser = argparse.ArgumentParser(description="Order Service management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default="0.0.0.0")
    serve_parser.add_argument("--port", type=int, default=int(os.getenv("PORT", "8080")))

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    elif args.command == "serve":
        serve(args.host, args.port)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
