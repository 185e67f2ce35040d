import argparse
import logging
import sys

from vidtube.adapters.sqlite.migrator import SQLiteMigrator
from vidtube.api.deps import get_settings
from vidtube.rules.loader import load_rules

logger = logging.getLogger("cli")


def handle_migrate(args: argparse.Namespace) -> None:
    settings = get_settings()
    applied = SQLiteMigrator(settings.db_path).run_migrations()
    if applied:
        print(f"Applied {len(applied)} migration(s): {', '.join(applied)}")
    else:
        print("Database is up to date.")


def handle_check_rules(args: argparse.Namespace) -> None:
    settings = get_settings()
    try:
        rules = load_rules(settings.rules_path)
    except (FileNotFoundError, ValueError) as e:
        logger.error("Rules check failed: %s", e)
        sys.exit(1)
    print(f"Rules OK ({rules.project.slug} v{rules.project.rules_version})")


def handle_serve(args: argparse.Namespace) -> None:
    import uvicorn

    uvicorn.run("vidtube.api.main:app", host=args.host, port=args.port, reload=args.reload)


def main() -> None:
    logging.basicConfig(level=logging.INFO)

    parser = argparse.ArgumentParser(description="VidTube API CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("migrate", help="Apply pending database migrations")
    subparsers.add_parser("check-rules", help="Validate the rules file")

    serve_parser = subparsers.add_parser("serve", help="Run the API server")
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8000)
    serve_parser.add_argument("--reload", action="store_true", help="Reload on code changes")

    args = parser.parse_args()

    if args.command == "migrate":
        handle_migrate(args)
    elif args.command == "check-rules":
        handle_check_rules(args)
    elif args.command == "serve":
        handle_serve(args)


if __name__ == "__main__":
    main()
