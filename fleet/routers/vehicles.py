from fastapi import APIRouter, Depends

from fleet.dependencies import get_stores
from fleet.schemas.vehicle import VehicleCreate, VehicleResponse, VehicleStatusUpdate
from fleet.services import vehicles as vehicle_service
from fleet.store import Stores
from fleet.utils.exceptions import raise_for_error, unwrap
from fleet.utils.response import dump, dump_all, success_response

router = APIRouter(prefix="/vehicles", tags=["vehicles"])


@router.post("", status_code=201)
async def create_vehicle(payload: VehicleCreate, stores: Stores = Depends(get_stores)):
    vehicle = unwrap(await vehicle_service.create_vehicle(stores, payload))
    return success_response(data=dump(VehicleResponse, vehicle))


@router.get("")
async def get_vehicles(stores: Stores = Depends(get_stores)):
    vehicles = unwrap(await vehicle_service.get_vehicles(stores))
    return success_response(data=dump_all(VehicleResponse, vehicles))


@router.get("/registration/{registration_number:path}")
async def get_vehicle_by_registration_number(registration_number: str, stores: Stores = Depends(get_stores)):
    vehicle = unwrap(await vehicle_service.get_vehicle_by_registration_number(stores, registration_number))
    return success_response(data=dump(VehicleResponse, vehicle))


@router.get("/model/{model:path}")
async def get_vehicle_by_model(model: str, stores: Stores = Depends(get_stores)):
    vehicles = unwrap(await vehicle_service.get_vehicle_by_model(stores, model))
    return success_response(data=dump_all(VehicleResponse, vehicles))


@router.get("/{vehicle_id}")
async def get_vehicle_by_id(vehicle_id: str, stores: Stores = Depends(get_stores)):
    vehicle = unwrap(await vehicle_service.get_vehicle_by_id(stores, vehicle_id))
    return success_response(data=dump(VehicleResponse, vehicle))


@router.delete("/{vehicle_id}")
async def delete_vehicle(vehicle_id: str, stores: Stores = Depends(get_stores)):
    message = raise_for_error(await vehicle_service.delete_vehicle(stores, vehicle_id))
    return success_response(message=message.text)


@router.patch("/{vehicle_id}/status")
async def update_vehicle_status(
    vehicle_id: str,
    payload: VehicleStatusUpdate,
    stores: Stores = Depends(get_stores),
):
    vehicle = unwrap(await vehicle_service.update_vehicle_status(stores, vehicle_id, payload.status))
    return success_response(data=dump(VehicleResponse, vehicle))
