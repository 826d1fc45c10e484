from datetime import datetime

from pydantic import BaseModel


class BookingCreate(BaseModel):
    vehicle_id: str
    driver_id: str
    from_location: str
    to_location: str
    start_time: datetime
    end_time: datetime


class BookingResponse(BaseModel):
    id: str
    vehicle_id: str
    driver_id: str
    from_location: str
    to_location: str
    start_time: str
    end_time: str
    status: str
    created_at: str

    model_config = {"from_attributes": True}
