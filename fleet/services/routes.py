"""Route records. Nothing is optimized; distance and time are fixed placeholders."""
import logging

from fleet.models.route import Route
from fleet.results import Ok, Result, invalid_payload
from fleet.schemas.route import RouteCreate
from fleet.services.common import fetch, non_empty
from fleet.store import Stores, new_id
from fleet.validation import any_blank

logger = logging.getLogger(__name__)

PLACEHOLDER_DISTANCE = "100km"
PLACEHOLDER_TIME_ESTIMATE = 3600  # seconds


async def create_route(stores: Stores, payload: RouteCreate) -> Result[Route]:
    if any_blank(payload.from_location, payload.to_location):
        return invalid_payload("Invalid route data")

    route = Route(
        id=new_id(),
        from_location=payload.from_location,
        to_location=payload.to_location,
        optimized_route=f"Optimized route from {payload.from_location} to {payload.to_location}",
        distance=PLACEHOLDER_DISTANCE,
        time_estimate=PLACEHOLDER_TIME_ESTIMATE,
    )
    route = await stores.routes.insert(route)
    logger.info("Route %s created", route.id)
    return Ok(route)


async def get_routes(stores: Stores) -> Result[list[Route]]:
    return non_empty(await stores.routes.list_all(), "No routes found")


async def get_route_by_id(stores: Stores, route_id: str) -> Result[Route]:
    return await fetch(stores.routes, route_id, "Route")
