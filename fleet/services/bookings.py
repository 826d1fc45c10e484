import logging

from fleet.models.booking import Booking
from fleet.models.enums import VehicleStatus
from fleet.results import Ok, Result, error, invalid_payload, not_found
from fleet.schemas.booking import BookingCreate
from fleet.services.common import fetch, non_empty
from fleet.store import Stores, new_id
from fleet.validation import any_blank, is_after, is_blank, to_timestamp, utcnow

logger = logging.getLogger(__name__)


async def create_booking(stores: Stores, payload: BookingCreate) -> Result[Booking]:
    now = utcnow()
    if any_blank(payload.vehicle_id, payload.driver_id, payload.from_location, payload.to_location):
        return invalid_payload("Invalid booking data")
    if not is_after(payload.start_time, now):
        return invalid_payload("Booking must start in the future")

    vehicle = await stores.vehicles.get_by_id(payload.vehicle_id)
    if vehicle is None:
        return not_found("Vehicle not found")
    if await stores.drivers.get_by_id(payload.driver_id) is None:
        return not_found("Driver not found")
    if vehicle.status != VehicleStatus.AVAILABLE.value:
        logger.info("Booking refused: vehicle %s is %s", vehicle.id, vehicle.status)
        return error("Vehicle is not available")

    booking = Booking(
        id=new_id(),
        vehicle_id=payload.vehicle_id,
        driver_id=payload.driver_id,
        from_location=payload.from_location,
        to_location=payload.to_location,
        start_time=to_timestamp(payload.start_time),
        end_time=to_timestamp(payload.end_time),
        status="pending",
        created_at=to_timestamp(now),
    )
    booking = await stores.bookings.insert(booking)
    logger.info("Booking %s created for vehicle %s", booking.id, booking.vehicle_id)
    return Ok(booking)


async def get_bookings(stores: Stores) -> Result[list[Booking]]:
    return non_empty(await stores.bookings.list_all(), "No bookings found")


async def get_booking_by_id(stores: Stores, booking_id: str) -> Result[Booking]:
    return await fetch(stores.bookings, booking_id, "Booking")


async def get_booking_by_vehicle_id(stores: Stores, vehicle_id: str) -> Result[list[Booking]]:
    if is_blank(vehicle_id):
        return invalid_payload("Invalid vehicle id")
    return non_empty(await stores.bookings.find_by("vehicle_id", vehicle_id), "No bookings found")


async def get_booking_by_driver_id(stores: Stores, driver_id: str) -> Result[list[Booking]]:
    if is_blank(driver_id):
        return invalid_payload("Invalid driver id")
    return non_empty(await stores.bookings.find_by("driver_id", driver_id), "No bookings found")
