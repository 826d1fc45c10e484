import logging

from fleet.models.enums import VehicleStatus
from fleet.models.vehicle import Vehicle
from fleet.results import Message, Ok, Result, invalid_payload, not_found, success
from fleet.schemas.vehicle import VehicleCreate
from fleet.services.common import fetch, first, non_empty
from fleet.store import Stores, new_id
from fleet.validation import any_blank, is_blank, to_timestamp, utcnow

logger = logging.getLogger(__name__)

# largest value the INTEGER column holds
MAX_CAPACITY = 2**63 - 1


async def create_vehicle(stores: Stores, payload: VehicleCreate) -> Result[Vehicle]:
    if any_blank(payload.registration_number, payload.model, payload.location):
        return invalid_payload("Missing required fields")
    if payload.capacity <= 0:
        return invalid_payload("Capacity must be greater than zero")
    if payload.capacity > MAX_CAPACITY:
        return invalid_payload("Capacity is too large")

    vehicle = Vehicle(
        id=new_id(),
        registration_number=payload.registration_number,
        model=payload.model,
        capacity=payload.capacity,
        status=VehicleStatus.AVAILABLE.value,
        location=payload.location,
        created_at=to_timestamp(utcnow()),
    )
    vehicle = await stores.vehicles.insert(vehicle)
    logger.info("Vehicle %s (%s) registered", vehicle.id, vehicle.registration_number)
    return Ok(vehicle)


async def get_vehicles(stores: Stores) -> Result[list[Vehicle]]:
    return non_empty(await stores.vehicles.list_all(), "No vehicles found")


async def get_vehicle_by_id(stores: Stores, vehicle_id: str) -> Result[Vehicle]:
    return await fetch(stores.vehicles, vehicle_id, "Vehicle")


async def get_vehicle_by_registration_number(stores: Stores, registration_number: str) -> Result[Vehicle]:
    if is_blank(registration_number):
        return invalid_payload("Invalid registration number")
    return first(
        await stores.vehicles.find_by("registration_number", registration_number),
        "Vehicle not found",
    )


async def get_vehicle_by_model(stores: Stores, model: str) -> Result[list[Vehicle]]:
    if is_blank(model):
        return invalid_payload("Invalid model")
    return non_empty(await stores.vehicles.find_by("model", model), "Vehicle not found")


async def delete_vehicle(stores: Stores, vehicle_id: str) -> Message:
    if is_blank(vehicle_id):
        return invalid_payload("Invalid vehicle id")
    if not await stores.vehicles.delete(vehicle_id):
        return not_found("Vehicle not found")
    logger.info("Vehicle %s deleted", vehicle_id)
    return success(f"Vehicle {vehicle_id} deleted successfully")


async def update_vehicle_status(
    stores: Stores, vehicle_id: str, status: VehicleStatus | str
) -> Result[Vehicle]:
    """Overwrite the vehicle status. Any status may follow any other."""
    try:
        status = VehicleStatus(status)
    except ValueError:
        return invalid_payload(f"Unknown vehicle status: {status}")

    found = await fetch(stores.vehicles, vehicle_id, "Vehicle")
    if isinstance(found, Message):
        return found

    vehicle = found.value
    previous = vehicle.status
    vehicle.status = status.value
    vehicle = await stores.vehicles.insert(vehicle)
    logger.info("Vehicle %s status %s -> %s", vehicle.id, previous, vehicle.status)
    return Ok(vehicle)
