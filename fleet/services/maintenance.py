import logging

from fleet.models.maintenance import Maintenance
from fleet.results import Ok, Result, invalid_payload, not_found
from fleet.schemas.maintenance import MaintenanceCreate
from fleet.services.common import non_empty
from fleet.store import Stores, new_id
from fleet.validation import any_blank, is_after, to_timestamp, utcnow

logger = logging.getLogger(__name__)


async def schedule_maintenance(stores: Stores, payload: MaintenanceCreate) -> Result[Maintenance]:
    now = utcnow()
    if any_blank(payload.vehicle_id, payload.description) or not is_after(payload.scheduled_date, now):
        return invalid_payload("Invalid maintenance data")
    if await stores.vehicles.get_by_id(payload.vehicle_id) is None:
        return not_found("Vehicle not found")

    maintenance = Maintenance(
        id=new_id(),
        vehicle_id=payload.vehicle_id,
        description=payload.description,
        scheduled_date=to_timestamp(payload.scheduled_date),
        status="pending",
        created_at=to_timestamp(now),
    )
    maintenance = await stores.maintenances.insert(maintenance)
    logger.info("Maintenance %s scheduled for vehicle %s", maintenance.id, maintenance.vehicle_id)
    return Ok(maintenance)


async def get_maintenances(stores: Stores) -> Result[list[Maintenance]]:
    return non_empty(await stores.maintenances.list_all(), "No maintenance records found")
