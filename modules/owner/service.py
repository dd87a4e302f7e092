"""
Owner dashboard: one ratings report per owned store, fetched once.
"""

from typing import Optional

from shared.http import BackendClient
from modules.listing import QueryListController
from modules.session.interfaces import ISessionStore

from .models import OwnerDashboardEntry


class OwnerDashboardView:
    def __init__(self, client: BackendClient, session: ISessionStore):
        self.entries: QueryListController[OwnerDashboardEntry] = QueryListController(
            client,
            session,
            "/owner/dashboard",
            OwnerDashboardEntry,
        )

    @property
    def items(self) -> list[OwnerDashboardEntry]:
        return self.entries.items

    @property
    def error(self) -> Optional[str]:
        return self.entries.error

    async def load(self) -> bool:
        return await self.entries.refresh()
