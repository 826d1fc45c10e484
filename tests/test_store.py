import pytest

from fleet.models.driver import Driver
from fleet.models.route import Route


def _route(route_id: str, origin: str = "Nairobi") -> Route:
    return Route(
        id=route_id, from_location=origin, to_location="Nakuru",
        optimized_route="placeholder", distance="100km", time_estimate=3600,
    )


@pytest.mark.asyncio
async def test_insert_and_get_by_id(stores):
    await stores.routes.insert(_route("r-001"))

    result = await stores.routes.get_by_id("r-001")
    assert result is not None
    assert result.to_location == "Nakuru"
    assert await stores.routes.get_by_id("r-404") is None


@pytest.mark.asyncio
async def test_insert_is_upsert(stores):
    await stores.routes.insert(_route("r-001", origin="Nairobi"))
    await stores.routes.insert(_route("r-001", origin="Kisumu"))

    routes = await stores.routes.list_all()
    assert len(routes) == 1
    assert routes[0].from_location == "Kisumu"


@pytest.mark.asyncio
async def test_list_all_in_ascending_id_order(stores):
    for route_id in ["r-c", "r-a", "r-b"]:
        await stores.routes.insert(_route(route_id))

    assert [r.id for r in await stores.routes.list_all()] == ["r-a", "r-b", "r-c"]


@pytest.mark.asyncio
async def test_find_by_exact_match_only(stores):
    await stores.routes.insert(_route("r-001", origin="Nairobi"))
    await stores.routes.insert(_route("r-002", origin="Nairobi West"))

    matches = await stores.routes.find_by("from_location", "Nairobi")
    assert [r.id for r in matches] == ["r-001"]


@pytest.mark.asyncio
async def test_delete(stores):
    await stores.drivers.insert(Driver(
        id="d-001", owner="p", name="Wanjiru", license_number="DL-9",
        contact_info="wanjiru@example.com", points=0, created_at="2026-01-01T00:00:00+00:00",
    ))

    assert await stores.drivers.delete("d-001") is True
    assert await stores.drivers.get_by_id("d-001") is None
    assert await stores.drivers.delete("d-001") is False
