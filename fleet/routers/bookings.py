from fastapi import APIRouter, Depends

from fleet.dependencies import get_stores
from fleet.schemas.booking import BookingCreate, BookingResponse
from fleet.services import bookings as booking_service
from fleet.store import Stores
from fleet.utils.exceptions import unwrap
from fleet.utils.response import dump, dump_all, success_response

router = APIRouter(prefix="/bookings", tags=["bookings"])


@router.post("", status_code=201)
async def create_booking(payload: BookingCreate, stores: Stores = Depends(get_stores)):
    booking = unwrap(await booking_service.create_booking(stores, payload))
    return success_response(data=dump(BookingResponse, booking))


@router.get("")
async def get_bookings(stores: Stores = Depends(get_stores)):
    bookings = unwrap(await booking_service.get_bookings(stores))
    return success_response(data=dump_all(BookingResponse, bookings))


@router.get("/vehicle/{vehicle_id}")
async def get_booking_by_vehicle_id(vehicle_id: str, stores: Stores = Depends(get_stores)):
    bookings = unwrap(await booking_service.get_booking_by_vehicle_id(stores, vehicle_id))
    return success_response(data=dump_all(BookingResponse, bookings))


@router.get("/driver/{driver_id}")
async def get_booking_by_driver_id(driver_id: str, stores: Stores = Depends(get_stores)):
    bookings = unwrap(await booking_service.get_booking_by_driver_id(stores, driver_id))
    return success_response(data=dump_all(BookingResponse, bookings))


@router.get("/{booking_id}")
async def get_booking_by_id(booking_id: str, stores: Stores = Depends(get_stores)):
    booking = unwrap(await booking_service.get_booking_by_id(stores, booking_id))
    return success_response(data=dump(BookingResponse, booking))
