from sqlalchemy import Column, String, Integer

from fleet.database import Base


class Route(Base):
    __tablename__ = "routes"

    id = Column(String, primary_key=True)
    from_location = Column(String, nullable=False)
    to_location = Column(String, nullable=False)
    optimized_route = Column(String, nullable=False)
    distance = Column(String, nullable=False)
    time_estimate = Column(Integer, nullable=False)
