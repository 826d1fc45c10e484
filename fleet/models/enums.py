from enum import Enum


class VehicleStatus(str, Enum):
    AVAILABLE = "Available"
    BOOKED = "Booked"
    MAINTENANCE = "Maintenance"


class UserRole(str, Enum):
    """Caller roles. Declared for clients; no operation checks them."""

    USER = "User"
    ADMIN = "Admin"
    MANAGER = "Manager"
    DRIVER = "Driver"
