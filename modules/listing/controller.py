"""
Query-driven list controller.

Binds filter/sort criteria to a backend read endpoint and keeps a result
collection current. Each criteria change issues exactly one fetch; each
successful fetch replaces the whole collection.

Every fetch is numbered. A response is applied only if it belongs to the
most recently issued fetch, so an older request that resolves late can never
overwrite newer results.
"""

import logging
from typing import Generic, Optional, Sequence, TypeVar

from pydantic import TypeAdapter, ValidationError as PydanticValidationError

from shared.exceptions import StoreRateError
from shared.http import BackendClient
from modules.errors import raise_for_error
from modules.session.interfaces import ISessionStore

from .exceptions import InvalidCriteriaError
from .models import FilterCriteria, SortCriteria, SortOrder

logger = logging.getLogger(__name__)

T = TypeVar("T")


class QueryListController(Generic[T]):
    """
    Keeps `items` in sync with the current criteria.

    Attributes:
        items: Result of the last applied fetch
        error: Message of the last failed fetch, cleared on success
    """

    def __init__(
        self,
        client: BackendClient,
        session: ISessionStore,
        path: str,
        item_type: type[T],
        filter_fields: Sequence[str] = (),
        sort_fields: Sequence[str] = (),
        filters: Optional[FilterCriteria] = None,
        sort: Optional[SortCriteria] = None,
    ):
        """
        Initialize the controller.

        Args:
            client: Backend transport
            session: Source of the bearer token
            path: Read endpoint, relative to the backend URL
            item_type: Model each collection element is decoded into
            filter_fields: Filter fields sent as query parameters, in order
            sort_fields: Allowed sort keys; empty means the endpoint is unsorted
            filters: Initial filter criteria
            sort: Initial sort criteria
        """
        self._client = client
        self._session = session
        self._path = path
        self._adapter = TypeAdapter(list[item_type])
        self._filter_fields = tuple(filter_fields)
        self._sort_fields = tuple(sort_fields)

        unknown = set(self._filter_fields) - set(FilterCriteria.model_fields)
        if unknown:
            raise InvalidCriteriaError(
                f"Unknown filter fields: {', '.join(sorted(unknown))}"
            )

        self._filters = filters or FilterCriteria()
        self._sort = sort or SortCriteria()
        self._check_sort(self._sort)

        self.items: list[T] = []
        self.error: Optional[str] = None
        self._issued = 0
        self._in_flight = 0

    @property
    def path(self) -> str:
        return self._path

    @property
    def filters(self) -> FilterCriteria:
        return self._filters

    @property
    def sort(self) -> SortCriteria:
        return self._sort

    @property
    def loading(self) -> bool:
        return self._in_flight > 0

    @property
    def requests_issued(self) -> int:
        return self._issued

    def _check_sort(self, sort: SortCriteria) -> None:
        if self._sort_fields and sort.by not in self._sort_fields:
            raise InvalidCriteriaError(
                f"Cannot sort {self._path} by {sort.by}", field=sort.by
            )

    def build_params(
        self,
        filters: Optional[FilterCriteria] = None,
        sort: Optional[SortCriteria] = None,
    ) -> dict[str, str]:
        """Query parameters for the given (default: current) criteria."""
        filters = filters or self._filters
        sort = sort or self._sort
        params = {name: getattr(filters, name) for name in self._filter_fields}
        if self._sort_fields:
            params["sort_by"] = sort.by
            params["order"] = sort.order.value
        return params

    async def update(
        self,
        filters: Optional[FilterCriteria] = None,
        sort: Optional[SortCriteria] = None,
    ) -> bool:
        """
        Replace the criteria and fetch if they changed.

        Criteria are compared by the query they produce, so replacing them
        with an equal value issues no request.

        Returns:
            True if a fetch was issued

        Raises:
            InvalidCriteriaError: If sort.by is not an allowed sort key
        """
        new_filters = self._filters if filters is None else filters
        new_sort = self._sort if sort is None else sort
        self._check_sort(new_sort)

        unchanged = self.build_params(new_filters, new_sort) == self.build_params()
        self._filters = new_filters
        self._sort = new_sort
        if unchanged:
            return False

        await self._fetch()
        return True

    async def set_filters(self, filters: FilterCriteria) -> bool:
        return await self.update(filters=filters)

    async def set_filter(self, field: str, value: str) -> bool:
        return await self.update(filters=self._filters.with_field(field, value))

    async def set_sort(self, by: Optional[str] = None, order: Optional[SortOrder] = None) -> bool:
        sort = SortCriteria(
            by=by or self._sort.by,
            order=SortOrder(order) if order is not None else self._sort.order,
        )
        return await self.update(sort=sort)

    async def refresh(self) -> bool:
        """Fetch with the current criteria whether or not they changed."""
        return await self._fetch()

    async def _fetch(self) -> bool:
        self._issued += 1
        seq = self._issued
        params = self.build_params()

        self._in_flight += 1
        try:
            token = self._session.require_token()
            response = await self._client.get(self._path, token=token, params=params or None)
            await raise_for_error(response)
            items = self._adapter.validate_json(response.content)
        except StoreRateError as e:
            return self._fail(seq, e.message)
        except PydanticValidationError as e:
            logger.debug(f"Undecodable payload from {self._path}: {e}")
            return self._fail(seq, "Unexpected response from server")
        finally:
            self._in_flight -= 1

        if seq != self._issued:
            logger.debug(f"Discarding stale response #{seq} for {self._path}")
            return False

        self.items = items
        self.error = None
        logger.debug(f"Loaded {len(items)} items from {self._path}")
        return True

    def _fail(self, seq: int, message: str) -> bool:
        if seq != self._issued:
            logger.debug(f"Discarding stale failure #{seq} for {self._path}")
            return False
        logger.warning(f"Fetching {self._path} failed: {message}")
        self.error = message
        return False
