from fastapi import APIRouter, Depends

from fleet.dependencies import get_caller, get_stores
from fleet.schemas.driver import DriverCreate, DriverResponse
from fleet.services import drivers as driver_service
from fleet.store import Stores
from fleet.utils.exceptions import raise_for_error, unwrap
from fleet.utils.response import dump, dump_all, success_response

router = APIRouter(prefix="/drivers", tags=["drivers"])


@router.post("", status_code=201)
async def create_driver(
    payload: DriverCreate,
    stores: Stores = Depends(get_stores),
    caller: str = Depends(get_caller),
):
    driver = unwrap(await driver_service.create_driver(stores, payload, caller))
    return success_response(data=dump(DriverResponse, driver))


@router.get("")
async def get_drivers(stores: Stores = Depends(get_stores)):
    drivers = unwrap(await driver_service.get_drivers(stores))
    return success_response(data=dump_all(DriverResponse, drivers))


@router.get("/me")
async def get_driver_by_principal(
    stores: Stores = Depends(get_stores),
    caller: str = Depends(get_caller),
):
    driver = unwrap(await driver_service.get_driver_by_principal(stores, caller))
    return success_response(data=dump(DriverResponse, driver))


@router.get("/license/{license_number:path}")
async def get_driver_by_license_number(license_number: str, stores: Stores = Depends(get_stores)):
    driver = unwrap(await driver_service.get_driver_by_license_number(stores, license_number))
    return success_response(data=dump(DriverResponse, driver))


@router.get("/{driver_id}")
async def get_driver_by_id(driver_id: str, stores: Stores = Depends(get_stores)):
    driver = unwrap(await driver_service.get_driver_by_id(stores, driver_id))
    return success_response(data=dump(DriverResponse, driver))


@router.delete("/{driver_id}")
async def delete_driver(driver_id: str, stores: Stores = Depends(get_stores)):
    message = raise_for_error(await driver_service.delete_driver(stores, driver_id))
    return success_response(message=message.text)
