"""Tests for the admin dashboard."""

import pytest

from modules.admin import AdminDashboard
from modules.listing import FilterCriteria, InvalidCriteriaError, SortOrder

USERS = [
    {"id": 1, "name": "Admin Person Full Name", "email": "a@x.com", "address": "A", "role": "admin"},
    {"id": 2, "name": "Regular Person Full Name", "email": "u@x.com", "address": "B", "role": "user"},
]
STORES = [
    {"id": 5, "name": "Shop", "email": "s@x.com", "address": "C", "average_rating": 3.5, "rating_count": 2},
    {"id": 6, "name": "Empty", "email": "e@x.com", "address": "D", "average_rating": None, "rating_count": 0},
]


@pytest.fixture
def routed(backend):
    backend.route("GET", "/admin/dashboard", json_body={"total_users": 2, "total_stores": 2, "total_ratings": 2})
    backend.route("GET", "/admin/users", json_body=USERS)
    backend.route("GET", "/admin/stores", json_body=STORES)
    return backend


@pytest.fixture
def dashboard(client, admin_session):
    return AdminDashboard(client, admin_session)


class TestLoad:
    @pytest.mark.asyncio
    async def test_load_fetches_stats_and_tables(self, routed, dashboard):
        """Loading should fetch stats, users and stores once each."""
        await dashboard.load()
        assert dashboard.stats.total_ratings == 2
        assert [u.role for u in dashboard.users.items] == ["admin", "user"]
        assert dashboard.stores.items[0].average_rating == 3.5
        assert dashboard.stores.items[1].average_rating is None
        assert len(routed.calls("GET", "/admin/dashboard")) == 1

    @pytest.mark.asyncio
    async def test_query_fields_per_table(self, routed, dashboard):
        """Users should be filtered by role too; stores should not."""
        await dashboard.load()
        users = routed.calls("GET", "/admin/users")[0].url.params
        stores = routed.calls("GET", "/admin/stores")[0].url.params
        assert list(users.keys()) == ["name", "email", "address", "role", "sort_by", "order"]
        assert list(stores.keys()) == ["name", "email", "address", "sort_by", "order"]

    @pytest.mark.asyncio
    async def test_stats_failure(self, backend, dashboard):
        """A failed stats fetch should leave stats unset and record the error."""
        backend.route("GET", "/admin/dashboard", status=403, json_body={"detail": "Admins only"})
        assert await dashboard.load_stats() is False
        assert dashboard.stats is None
        assert dashboard.stats_error == "Admins only"


class TestSharedCriteria:
    @pytest.mark.asyncio
    async def test_shared_filter_refreshes_both(self, routed, dashboard):
        """A name filter change should refetch both tables."""
        assert await dashboard.set_filter("name", "Sh") is True
        assert routed.calls("GET", "/admin/users")[-1].url.params["name"] == "Sh"
        assert routed.calls("GET", "/admin/stores")[-1].url.params["name"] == "Sh"
        assert dashboard.filters.name == "Sh"

    @pytest.mark.asyncio
    async def test_role_filter_only_refreshes_users(self, routed, dashboard):
        """The role filter does not apply to stores, so only users refetch."""
        await dashboard.set_filter("role", "owner")
        assert len(routed.calls("GET", "/admin/users")) == 1
        assert routed.calls("GET", "/admin/stores") == []
        assert dashboard.stores.filters.role == "owner"

    @pytest.mark.asyncio
    async def test_sort_change_refreshes_both(self, routed, dashboard):
        """A sort change should refetch both tables with the new order."""
        await dashboard.set_sort(by="email", order=SortOrder.DESC)
        for path in ("/admin/users", "/admin/stores"):
            params = routed.calls("GET", path)[-1].url.params
            assert params["sort_by"] == "email"
            assert params["order"] == "desc"

    @pytest.mark.asyncio
    async def test_identical_update_is_noop(self, routed, dashboard):
        """Re-applying the current criteria should not fetch."""
        await dashboard.update(filters=FilterCriteria(email="x"))
        count = len(routed.requests)
        assert await dashboard.update(filters=FilterCriteria(email="x")) is False
        assert len(routed.requests) == count

    @pytest.mark.asyncio
    async def test_invalid_sort(self, routed, dashboard):
        """Sorting by an unknown column should raise."""
        with pytest.raises(InvalidCriteriaError):
            await dashboard.set_sort(by="rating")
