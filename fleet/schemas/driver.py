from pydantic import BaseModel


class DriverCreate(BaseModel):
    name: str
    license_number: str
    contact_info: str


class DriverResponse(BaseModel):
    id: str
    owner: str
    name: str
    license_number: str
    contact_info: str
    points: int
    created_at: str

    model_config = {"from_attributes": True}
