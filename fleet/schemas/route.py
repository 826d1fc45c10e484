from pydantic import BaseModel


class RouteCreate(BaseModel):
    from_location: str
    to_location: str


class RouteResponse(BaseModel):
    id: str
    from_location: str
    to_location: str
    optimized_route: str
    distance: str
    time_estimate: int

    model_config = {"from_attributes": True}
