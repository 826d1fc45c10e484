import logging

from fleet.models.emergency import EmergencyAssistance
from fleet.results import Ok, Result, invalid_payload, not_found
from fleet.schemas.emergency import EmergencyAssistanceCreate
from fleet.services.common import non_empty
from fleet.store import Stores, new_id
from fleet.validation import any_blank, to_timestamp, utcnow

logger = logging.getLogger(__name__)


async def request_emergency_assistance(
    stores: Stores, payload: EmergencyAssistanceCreate
) -> Result[EmergencyAssistance]:
    if any_blank(payload.vehicle_id, payload.description, payload.location):
        return invalid_payload("Invalid emergency assistance data")
    if await stores.vehicles.get_by_id(payload.vehicle_id) is None:
        return not_found("Vehicle not found")

    request = EmergencyAssistance(
        id=new_id(),
        vehicle_id=payload.vehicle_id,
        description=payload.description,
        location=payload.location,
        status="pending",
        created_at=to_timestamp(utcnow()),
    )
    request = await stores.emergency_assistances.insert(request)
    logger.warning(
        "Emergency assistance %s requested for vehicle %s at %s",
        request.id, request.vehicle_id, request.location,
    )
    return Ok(request)


async def get_emergency_assistances(stores: Stores) -> Result[list[EmergencyAssistance]]:
    return non_empty(
        await stores.emergency_assistances.list_all(),
        "No emergency assistance records found",
    )
