"""CLI commands for Soup Shoppe."""

import argparse
import asyncio
import getpass
import logging
import sys
from datetime import date as date_cls
from pathlib import Path

from sqlalchemy.orm import Session

from app.database import SessionLocal
from app.display.catalog_cache import CatalogRepository, JsonFileCatalogStore
from app.display.menu_client import MenuClient, MenuClientError
from app.display.tv_export import render_tv_png
from app.services.auth import get_auth_provider
from app.services.auth.local_provider import UsernameTakenError


def create_admin(username: str, password: str | None = None) -> None:
    """Create an admin user."""
    db: Session = SessionLocal()

    try:
        if not password:
            password = getpass.getpass("Password: ")
            password_confirm = getpass.getpass("Confirm password: ")
            if password != password_confirm:
                print("Error: Passwords do not match.")
                sys.exit(1)

        if len(password) < 8:
            print("Error: Password must be at least 8 characters.")
            sys.exit(1)

        try:
            asyncio.run(get_auth_provider().create_user(db, username, password, is_admin=True))
        except UsernameTakenError:
            print(f"Error: User '{username}' already exists.")
            sys.exit(1)

        print(f"Admin user created successfully: {username}")

    finally:
        db.close()


def reset_password(username: str) -> None:
    """Set a temporary password for a user and print it."""
    db: Session = SessionLocal()

    try:
        provider = get_auth_provider()
        user = provider.get_user_by_username(db, username)
        if not user:
            print(f"Error: User '{username}' not found.")
            sys.exit(1)

        temp_password = asyncio.run(provider.reset_password(db, user))
        revoked = asyncio.run(provider.revoke_all_sessions(db, user.id))
        print(f"Temporary password for {username}: {temp_password}")
        print(f"Signed out {revoked} session(s).")

    finally:
        db.close()


async def _fetch_display_menu(base_url: str, date: str, cache_path: str | None):
    client = MenuClient(base_url)
    if not cache_path:
        return await client.get_display_menu(date)

    # Resolve against the local catalog cache so a flaky server still renders
    repository = CatalogRepository(JsonFileCatalogStore(cache_path), client)
    await repository.hydrate()
    payload = await client.get_menu(date)
    return repository.resolve_menu(payload)


def tv_export(base_url: str, date: str, output: str | None, cache_path: str | None = None) -> None:
    """Fetch a published menu from a running server and write the TV PNG."""
    try:
        menu = asyncio.run(_fetch_display_menu(base_url, date, cache_path))
    except MenuClientError as e:
        print(f"Error: Could not fetch menu for {date}: {e}")
        sys.exit(1)

    if not menu.is_published:
        print(f"Error: Menu for {date} is not published.")
        sys.exit(1)

    path = Path(output or f"menu-{date}.png")
    path.write_bytes(render_tv_png(menu))
    print(f"Wrote {path}")


def main(argv=None):
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    parser = argparse.ArgumentParser(description="Soup Shoppe CLI")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    create_admin_parser = subparsers.add_parser(
        "create-admin", help="Create an admin user"
    )
    create_admin_parser.add_argument(
        "--username", required=True, help="Admin username"
    )
    create_admin_parser.add_argument(
        "--password", help="Admin password (will prompt if not provided)"
    )

    reset_parser = subparsers.add_parser(
        "reset-password", help="Reset a user's password to a temporary one"
    )
    reset_parser.add_argument("--username", required=True)

    tv_parser = subparsers.add_parser(
        "tv-export", help="Render a published menu as a TV screen PNG"
    )
    tv_parser.add_argument(
        "--base-url", default="http://localhost:8000", help="Menu server URL"
    )
    tv_parser.add_argument(
        "--date", default=date_cls.today().isoformat(), help="Menu date (YYYY-MM-DD)"
    )
    tv_parser.add_argument("--output", help="Output file (default menu-<date>.png)")
    tv_parser.add_argument(
        "--cache", help="JSON file for the local catalog cache"
    )

    args = parser.parse_args(argv)

    if args.command == "create-admin":
        create_admin(args.username, args.password)
    elif args.command == "reset-password":
        reset_password(args.username)
    elif args.command == "tv-export":
        tv_export(args.base_url, args.date, args.output, args.cache)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
