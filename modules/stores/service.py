"""
Store browsing view and the rating flow.

A rating is never patched into the local list: after a successful submit the
whole list is fetched again so averages and the user's own rating come from
the backend.
"""

import logging
from typing import Optional

from shared.exceptions import StoreRateError
from shared.http import BackendClient
from modules.errors import raise_for_error
from modules.listing import FilterCriteria, QueryListController, SortCriteria
from modules.session.interfaces import ISessionStore

from .exceptions import InvalidScoreError
from .models import MAX_SCORE, MIN_SCORE, RatingRequest, StoreRecord

logger = logging.getLogger(__name__)

STORE_FILTER_FIELDS = ("name", "address")
STORE_SORT_FIELDS = ("name", "address")


class StoreListView:
    """
    Browsable, ratable store list for the user role.

    Attributes:
        stores: Controller holding the store list and its criteria
        rating_error: Message of the last failed rating, cleared on success
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
        self.stores: QueryListController[StoreRecord] = QueryListController(
            client,
            session,
            "/stores",
            StoreRecord,
            filter_fields=STORE_FILTER_FIELDS,
            sort_fields=STORE_SORT_FIELDS,
            filters=filters,
            sort=sort,
        )
        self.rating_error: Optional[str] = None

    @property
    def items(self) -> list[StoreRecord]:
        return self.stores.items

    async def load(self) -> bool:
        return await self.stores.refresh()

    async def rate(self, store_id: int | str, score: int) -> bool:
        """
        Submit a rating for a store, then reload the list.

        Returns:
            True if the rating was accepted

        Raises:
            InvalidScoreError: If score is not an integer in 1..5
        """
        if isinstance(score, bool) or not isinstance(score, int) or not (
            MIN_SCORE <= score <= MAX_SCORE
        ):
            raise InvalidScoreError(score)

        self.rating_error = None
        try:
            token = self._session.require_token()
            response = await self._client.post(
                f"/stores/{store_id}/rating",
                token=token,
                json=RatingRequest(score=score).model_dump(),
            )
            await raise_for_error(response)
        except StoreRateError as e:
            logger.warning(f"Rating store {store_id} failed: {e.message}")
            self.rating_error = e.message
            return False

        logger.info(f"Rated store {store_id} with {score}")
        await self.stores.refresh()
        return True
