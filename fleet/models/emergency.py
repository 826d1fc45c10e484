from sqlalchemy import Column, String

from fleet.database import Base


class EmergencyAssistance(Base):
    __tablename__ = "emergency_assistances"

    id = Column(String, primary_key=True)
    vehicle_id = Column(String, nullable=False, index=True)
    description = Column(String, nullable=False)
    location = Column(String, nullable=False)
    status = Column(String, nullable=False, default="pending")
    created_at = Column(String, nullable=False)
