from sqlalchemy import Column, String

from fleet.database import Base


class FuelConsumption(Base):
    __tablename__ = "fuel_consumptions"

    id = Column(String, primary_key=True)
    vehicle_id = Column(String, nullable=False, index=True)
    amount = Column(String, nullable=False)
    date = Column(String, nullable=False)
