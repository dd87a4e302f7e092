"""
Administrative overview.

Stats are fetched once when the view loads. The user and store tables share
one set of filter/sort criteria; changing it refreshes whichever tables the
change affects.
"""

import asyncio
import logging
from typing import Optional

from pydantic import ValidationError as PydanticValidationError

from shared.exceptions import StoreRateError
from shared.http import BackendClient
from modules.errors import raise_for_error
from modules.listing import FilterCriteria, QueryListController, SortCriteria, SortOrder
from modules.session.interfaces import ISessionStore

from .models import AdminStats, AdminStoreRecord, AdminUserRecord

logger = logging.getLogger(__name__)

USER_FILTER_FIELDS = ("name", "email", "address", "role")
STORE_FILTER_FIELDS = ("name", "email", "address")
ADMIN_SORT_FIELDS = ("name", "email", "address", "role")
ROLE_CHOICES = ("admin", "user", "owner")


class AdminDashboard:
    """
    Stats plus filterable/sortable user and store tables.

    Attributes:
        stats: Totals from the last successful stats fetch
        stats_error: Message of the last failed stats fetch
        users: Controller for the user table
        stores: Controller for the store table
    """

    def __init__(
        self,
        client: BackendClient,
        session: ISessionStore,
        filters: Optional[FilterCriteria] = None,
        sort: Optional[SortCriteria] = None,
    ):
        self._client = client
        self._session = session
        self.stats: Optional[AdminStats] = None
        self.stats_error: Optional[str] = None
        self.users: QueryListController[AdminUserRecord] = QueryListController(
            client,
            session,
            "/admin/users",
            AdminUserRecord,
            filter_fields=USER_FILTER_FIELDS,
            sort_fields=ADMIN_SORT_FIELDS,
            filters=filters,
            sort=sort,
        )
        self.stores: QueryListController[AdminStoreRecord] = QueryListController(
            client,
            session,
            "/admin/stores",
            AdminStoreRecord,
            filter_fields=STORE_FILTER_FIELDS,
            sort_fields=ADMIN_SORT_FIELDS,
            filters=filters,
            sort=sort,
        )

    @property
    def filters(self) -> FilterCriteria:
        return self.users.filters

    @property
    def sort(self) -> SortCriteria:
        return self.users.sort

    async def load(self) -> None:
        """Fetch stats and both tables."""
        await asyncio.gather(
            self.load_stats(),
            self.users.refresh(),
            self.stores.refresh(),
        )

    async def load_stats(self) -> bool:
        try:
            token = self._session.require_token()
            response = await self._client.get("/admin/dashboard", token=token)
            await raise_for_error(response)
            stats = AdminStats.model_validate_json(response.content)
        except StoreRateError as e:
            logger.warning(f"Fetching admin stats failed: {e.message}")
            self.stats_error = e.message
            return False
        except PydanticValidationError:
            self.stats_error = "Unexpected response from server"
            return False

        self.stats = stats
        self.stats_error = None
        return True

    async def update(
        self,
        filters: Optional[FilterCriteria] = None,
        sort: Optional[SortCriteria] = None,
    ) -> bool:
        """
        Replace the shared criteria on both tables.

        Returns:
            True if either table fetched
        """
        results = await asyncio.gather(
            self.users.update(filters=filters, sort=sort),
            self.stores.update(filters=filters, sort=sort),
        )
        return any(results)

    async def set_filter(self, field: str, value: str) -> bool:
        return await self.update(filters=self.filters.with_field(field, value))

    async def set_sort(self, by: Optional[str] = None, order: Optional[SortOrder] = None) -> bool:
        sort = SortCriteria(
            by=by or self.sort.by,
            order=SortOrder(order) if order is not None else self.sort.order,
        )
        return await self.update(sort=sort)
