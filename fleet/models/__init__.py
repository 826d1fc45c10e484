from fleet.models.enums import UserRole, VehicleStatus
from fleet.models.driver import Driver
from fleet.models.vehicle import Vehicle
from fleet.models.booking import Booking
from fleet.models.fuel import FuelConsumption
from fleet.models.maintenance import Maintenance
from fleet.models.emergency import EmergencyAssistance
from fleet.models.route import Route

__all__ = [
    "UserRole",
    "VehicleStatus",
    "Driver",
    "Vehicle",
    "Booking",
    "FuelConsumption",
    "Maintenance",
    "EmergencyAssistance",
    "Route",
]
