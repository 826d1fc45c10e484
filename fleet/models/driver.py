from sqlalchemy import Column, String, Integer

from fleet.database import Base


class Driver(Base):
    __tablename__ = "drivers"

    id = Column(String, primary_key=True)
    owner = Column(String, nullable=False, index=True)
    name = Column(String, nullable=False)
    license_number = Column(String, nullable=False, index=True)
    contact_info = Column(String, nullable=False)
    points = Column(Integer, nullable=False, default=0)
    created_at = Column(String, nullable=False)
