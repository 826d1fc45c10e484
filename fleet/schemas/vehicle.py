from pydantic import BaseModel

from fleet.models.enums import VehicleStatus


class VehicleCreate(BaseModel):
    registration_number: str
    model: str
    capacity: int
    location: str


class VehicleStatusUpdate(BaseModel):
    status: VehicleStatus


class VehicleResponse(BaseModel):
    id: str
    registration_number: str
    model: str
    capacity: int
    status: VehicleStatus
    location: str
    created_at: str

    model_config = {"from_attributes": True}
