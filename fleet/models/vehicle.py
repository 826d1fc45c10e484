from sqlalchemy import Column, String, Integer

from fleet.database import Base
from fleet.models.enums import VehicleStatus


class Vehicle(Base):
    __tablename__ = "vehicles"

    id = Column(String, primary_key=True)
    registration_number = Column(String, nullable=False, index=True)
    model = Column(String, nullable=False, index=True)
    capacity = Column(Integer, nullable=False)
    status = Column(String, nullable=False, default=VehicleStatus.AVAILABLE.value)
    location = Column(String, nullable=False)
    created_at = Column(String, nullable=False)
