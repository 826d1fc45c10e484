import logging

from fleet.models.fuel import FuelConsumption
from fleet.results import Ok, Result, invalid_payload, not_found
from fleet.schemas.fuel import FuelConsumptionCreate
from fleet.services.common import non_empty
from fleet.store import Stores, new_id
from fleet.validation import is_blank, parse_positive_amount, to_timestamp

logger = logging.getLogger(__name__)


async def record_fuel_consumption(stores: Stores, payload: FuelConsumptionCreate) -> Result[FuelConsumption]:
    if parse_positive_amount(payload.amount) is None:
        return invalid_payload("Amount must be greater than zero")
    if is_blank(payload.vehicle_id):
        return invalid_payload("Invalid vehicle id")
    if await stores.vehicles.get_by_id(payload.vehicle_id) is None:
        return not_found("Vehicle not found")

    record = FuelConsumption(
        id=new_id(),
        vehicle_id=payload.vehicle_id,
        amount=payload.amount.strip(),
        date=to_timestamp(payload.date),
    )
    record = await stores.fuel_consumptions.insert(record)
    logger.info("Fuel consumption %s recorded for vehicle %s", record.id, record.vehicle_id)
    return Ok(record)


async def get_fuel_consumptions(stores: Stores) -> Result[list[FuelConsumption]]:
    return non_empty(
        await stores.fuel_consumptions.list_all(),
        "No fuel consumption records found",
    )
