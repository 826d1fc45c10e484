from pydantic import BaseModel


class EmergencyAssistanceCreate(BaseModel):
    vehicle_id: str
    description: str
    location: str


class EmergencyAssistanceResponse(BaseModel):
    id: str
    vehicle_id: str
    description: str
    location: str
    status: str
    created_at: str

    model_config = {"from_attributes": True}
