from datetime import datetime

from pydantic import BaseModel


class FuelConsumptionCreate(BaseModel):
    vehicle_id: str
    amount: str
    date: datetime


class FuelConsumptionResponse(BaseModel):
    id: str
    vehicle_id: str
    amount: str
    date: str

    model_config = {"from_attributes": True}
