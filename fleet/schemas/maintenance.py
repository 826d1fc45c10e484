from datetime import datetime

from pydantic import BaseModel


class MaintenanceCreate(BaseModel):
    vehicle_id: str
    description: str
    scheduled_date: datetime


class MaintenanceResponse(BaseModel):
    id: str
    vehicle_id: str
    description: str
    scheduled_date: str
    status: str
    created_at: str

    model_config = {"from_attributes": True}
