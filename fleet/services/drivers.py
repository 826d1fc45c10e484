import logging

from fleet.models.driver import Driver
from fleet.results import Message, Ok, Result, invalid_payload, not_found, success
from fleet.schemas.driver import DriverCreate
from fleet.services.common import fetch, first, non_empty
from fleet.store import Stores, new_id
from fleet.validation import any_blank, is_blank, to_timestamp, utcnow

logger = logging.getLogger(__name__)


async def create_driver(stores: Stores, payload: DriverCreate, caller: str) -> Result[Driver]:
    if any_blank(payload.name, payload.license_number, payload.contact_info):
        return invalid_payload("Missing required fields")

    driver = Driver(
        id=new_id(),
        owner=caller,
        name=payload.name,
        license_number=payload.license_number,
        contact_info=payload.contact_info,
        points=0,
        created_at=to_timestamp(utcnow()),
    )
    driver = await stores.drivers.insert(driver)
    logger.info("Driver %s created by %s", driver.id, caller)
    return Ok(driver)


async def get_drivers(stores: Stores) -> Result[list[Driver]]:
    return non_empty(await stores.drivers.list_all(), "No drivers found")


async def get_driver_by_id(stores: Stores, driver_id: str) -> Result[Driver]:
    return await fetch(stores.drivers, driver_id, "Driver")


async def get_driver_by_principal(stores: Stores, caller: str) -> Result[Driver]:
    return first(await stores.drivers.find_by("owner", caller), "Driver not found")


async def get_driver_by_license_number(stores: Stores, license_number: str) -> Result[Driver]:
    if is_blank(license_number):
        return invalid_payload("Invalid license number")
    return first(
        await stores.drivers.find_by("license_number", license_number),
        "Driver not found",
    )


async def delete_driver(stores: Stores, driver_id: str) -> Message:
    if is_blank(driver_id):
        return invalid_payload("Invalid driver id")
    if not await stores.drivers.delete(driver_id):
        return not_found("Driver not found")
    # bookings and other records keep their dangling driver_id
    logger.info("Driver %s deleted", driver_id)
    return success(f"Driver {driver_id} deleted successfully")
