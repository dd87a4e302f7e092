#!/usr/bin/env python
"""
Command line client for the store rating backend.

The session is kept in the configured session file, so a login carries over
to later invocations.

Usage:
    storerate login alice@example.com 'Secret#Pass1'
    storerate view --name coffee --sort-by address --order desc
    storerate rate 42 4
    storerate logout
"""

import argparse
import asyncio
import sys

from pydantic import ValidationError as PydanticValidationError

from core.app import ClientApp
from core.display import configure_logging, console, format_header, render_view
from modules.listing import FilterCriteria, SortCriteria, SortOrder
from modules.router import Screen
from modules.stores import StoreListView
from shared.config import get_settings
from shared.exceptions import StoreRateError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Store rating client")
    parser.add_argument("--backend-url", type=str, help="Backend base URL")
    sub = parser.add_subparsers(dest="command", required=True)

    login = sub.add_parser("login", help="Log in")
    login.add_argument("email")
    login.add_argument("password")

    signup = sub.add_parser("signup", help="Create an account and log in")
    signup.add_argument("name")
    signup.add_argument("email")
    signup.add_argument("address")
    signup.add_argument("password")

    sub.add_parser("logout", help="Forget the stored session")
    sub.add_parser("whoami", help="Show the logged-in user")

    password = sub.add_parser("password", help="Change your password")
    password.add_argument("old_password")
    password.add_argument("new_password")

    view = sub.add_parser("view", help="Show the view for your role")
    view.add_argument("--name", default="")
    view.add_argument("--email", default="")
    view.add_argument("--address", default="")
    view.add_argument("--role", default="", choices=["", "admin", "user", "owner"])
    view.add_argument("--sort-by", default="name")
    view.add_argument("--order", default="asc", choices=[o.value for o in SortOrder])

    rate = sub.add_parser("rate", help="Rate a store (1-5)")
    rate.add_argument("store_id")
    rate.add_argument("score", type=int, choices=range(1, 6))

    return parser


def criteria_from_args(args: argparse.Namespace) -> tuple[FilterCriteria, SortCriteria]:
    filters = FilterCriteria(
        name=args.name, email=args.email, address=args.address, role=args.role
    )
    sort = SortCriteria(by=args.sort_by, order=SortOrder(args.order))
    return filters, sort


def _first_error(error: PydanticValidationError) -> str:
    first = error.errors()[0]
    field = ".".join(str(part) for part in first["loc"])
    return f"{field}: {first['msg']}" if field else first["msg"]


async def run(args: argparse.Namespace) -> int:
    settings = get_settings()
    if args.backend_url:
        settings = settings.model_copy(update={"backend_url": args.backend_url})

    async with ClientApp(settings=settings) as app:
        if args.command == "login":
            form = app.login_form
            form.email, form.password = args.email, args.password
            if not await form.submit():
                console.print(f"[red]{form.error}[/red]")
                return 1
            console.print(format_header(app.session.user))
            return 0

        if args.command == "signup":
            form = app.signup_form
            form.name, form.email = args.name, args.email
            form.address, form.password = args.address, args.password
            if not await form.submit():
                console.print(f"[red]{form.error}[/red]")
                return 1
            console.print(format_header(app.session.user))
            return 0

        if args.command == "logout":
            app.logout()
            console.print("Logged out")
            return 0

        if app.screen in (Screen.LOGIN, Screen.SIGNUP):
            console.print("[red]Not logged in. Run 'login' or 'signup' first.[/red]")
            return 1

        if args.command == "whoami":
            console.print(format_header(app.session.user))
            return 0

        if args.command == "password":
            form = app.password_form
            form.old_password, form.new_password = args.old_password, args.new_password
            ok = await form.submit()
            console.print(form.message if ok else f"[red]{form.message}[/red]")
            return 0 if ok else 1

        if args.command == "view":
            try:
                filters, sort = criteria_from_args(args)
                view = app.build_view(filters=filters, sort=sort)
            except PydanticValidationError as e:
                console.print(f"[red]Invalid view options: {_first_error(e)}[/red]")
                return 2
            except StoreRateError as e:
                console.print(f"[red]{e.message}[/red]")
                return 2
            await view.load()
            console.print(format_header(app.session.user))
            console.print(render_view(view))
            return 0

        if args.command == "rate":
            view = app.view
            if not isinstance(view, StoreListView):
                console.print("[red]Only user accounts can rate stores.[/red]")
                return 1
            ok = await view.rate(args.store_id, args.score)
            if not ok:
                await view.load()
            console.print(render_view(view))
            return 0 if ok else 1

    return 1


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()

    configure_logging(get_settings().log_level)
    sys.exit(asyncio.run(run(args)))


if __name__ == "__main__":
    main()
