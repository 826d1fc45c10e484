from fastapi import APIRouter, Depends

from fleet.dependencies import get_stores
from fleet.schemas.route import RouteCreate, RouteResponse
from fleet.services import routes as route_service
from fleet.store import Stores
from fleet.utils.exceptions import unwrap
from fleet.utils.response import dump, dump_all, success_response

router = APIRouter(prefix="/routes", tags=["routes"])


@router.post("", status_code=201)
async def create_route(payload: RouteCreate, stores: Stores = Depends(get_stores)):
    route = unwrap(await route_service.create_route(stores, payload))
    return success_response(data=dump(RouteResponse, route))


@router.get("")
async def get_routes(stores: Stores = Depends(get_stores)):
    routes = unwrap(await route_service.get_routes(stores))
    return success_response(data=dump_all(RouteResponse, routes))


@router.get("/{route_id}")
async def get_route_by_id(route_id: str, stores: Stores = Depends(get_stores)):
    route = unwrap(await route_service.get_route_by_id(stores, route_id))
    return success_response(data=dump(RouteResponse, route))
