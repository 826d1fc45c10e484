from sqlalchemy import Column, String

from fleet.database import Base


class Booking(Base):
    __tablename__ = "bookings"

    # vehicle_id/driver_id are checked at creation only, deletes do not cascade
    id = Column(String, primary_key=True)
    vehicle_id = Column(String, nullable=False, index=True)
    driver_id = Column(String, nullable=False, index=True)
    from_location = Column(String, nullable=False)
    to_location = Column(String, nullable=False)
    start_time = Column(String, nullable=False)
    end_time = Column(String, nullable=False)
    status = Column(String, nullable=False, default="pending")
    created_at = Column(String, nullable=False)
