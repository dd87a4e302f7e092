"""Rich terminal rendering for the role views."""

import logging
from typing import Any, Optional

from rich.console import Console, Group, RenderableType
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from modules.admin import AdminDashboard
from modules.owner import OwnerDashboardView
from modules.session import UserProfile
from modules.stores import MAX_SCORE, MIN_SCORE, StoreListView

console = Console()

PLACEHOLDER = "-"


def configure_logging(level: str = "WARNING") -> None:
    """Route log records through rich on stderr."""
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
    )


def format_value(value: Any) -> str:
    """Format an optional value, using a dash for missing ones."""
    if value is None:
        return PLACEHOLDER
    return str(value)


def format_header(user: UserProfile) -> str:
    return f"Logged in as {user.name} ({user.role.value})"


def rating_stars(my_rating: Optional[int]) -> Text:
    """Render the 1..5 rating buttons, highlighting up to the user's rating."""
    text = Text()
    for n in range(MIN_SCORE, MAX_SCORE + 1):
        style = "bold yellow" if my_rating is not None and my_rating >= n else "dim"
        text.append(f" {n} ", style=style)
    return text


def _error_line(message: Optional[str]) -> Optional[Text]:
    if not message:
        return None
    return Text(message, style="red")


def render_admin(view: AdminDashboard) -> RenderableType:
    stats = view.stats
    totals = Table.grid(padding=(0, 4))
    totals.add_row(
        f"Total Users: [bold]{format_value(stats.total_users if stats else None)}[/bold]",
        f"Total Stores: [bold]{format_value(stats.total_stores if stats else None)}[/bold]",
        f"Total Ratings: [bold]{format_value(stats.total_ratings if stats else None)}[/bold]",
    )

    users = Table(title="Users", expand=True)
    for column in ("Name", "Email", "Address", "Role"):
        users.add_column(column)
    for u in view.users.items:
        users.add_row(u.name, u.email, u.address, u.role)

    stores = Table(title="Stores", expand=True)
    for column in ("Name", "Email", "Address", "Average Rating", "Ratings Count"):
        stores.add_column(column)
    for s in view.stores.items:
        stores.add_row(
            s.name,
            s.email,
            s.address,
            format_value(s.average_rating),
            str(s.rating_count),
        )

    parts: list[RenderableType] = [totals]
    for message in (view.stats_error, view.users.error, view.stores.error):
        line = _error_line(message)
        if line is not None:
            parts.append(line)
    parts.extend([users, stores])
    return Group(*parts)


def render_store_list(view: StoreListView) -> RenderableType:
    table = Table(title="Stores", expand=True)
    table.add_column("ID", style="dim")
    table.add_column("Name", style="bold")
    table.add_column("Address")
    table.add_column("Overall Rating")
    table.add_column("Your Rating")
    table.add_column("Rate")
    for s in view.items:
        table.add_row(
            str(s.id),
            s.name,
            s.address,
            format_value(s.overall_rating),
            format_value(s.my_rating),
            rating_stars(s.my_rating),
        )

    parts: list[RenderableType] = []
    for message in (view.stores.error, view.rating_error):
        line = _error_line(message)
        if line is not None:
            parts.append(line)
    parts.append(table)
    return Group(*parts)


def render_owner(view: OwnerDashboardView) -> RenderableType:
    panels: list[RenderableType] = []
    line = _error_line(view.error)
    if line is not None:
        panels.append(line)

    for entry in view.items:
        ratings = Table(expand=True)
        for column in ("User", "Email", "Score"):
            ratings.add_column(column)
        for r in entry.ratings:
            ratings.add_row(r.user_name, r.user_email, str(r.score))
        panels.append(
            Panel(
                Group(
                    Text(f"Average Rating: {format_value(entry.average_rating)}"),
                    ratings,
                ),
                title=entry.store.name,
                border_style="blue",
            )
        )
    return Group(*panels)


def render_view(view: Any) -> RenderableType:
    """Dispatch to the renderer for a role view."""
    if isinstance(view, AdminDashboard):
        return render_admin(view)
    if isinstance(view, StoreListView):
        return render_store_list(view)
    if isinstance(view, OwnerDashboardView):
        return render_owner(view)
    raise TypeError(f"No renderer for {type(view).__name__}")
