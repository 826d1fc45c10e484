import uuid
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from fleet.database import Base
from fleet.models import (
    Booking,
    Driver,
    EmergencyAssistance,
    FuelConsumption,
    Maintenance,
    Route,
    Vehicle,
)

ModelT = TypeVar("ModelT", bound=Base)


def new_id() -> str:
    return str(uuid.uuid4())


class EntityStore(Generic[ModelT]):
    """Keyed table of one record type, ordered by id."""

    def __init__(self, session: AsyncSession, model: type[ModelT]):
        self.session = session
        self.model = model

    async def insert(self, record: ModelT) -> ModelT:
        stored = await self.session.merge(record)
        await self.session.commit()
        await self.session.refresh(stored)
        return stored

    async def get_by_id(self, record_id: str) -> ModelT | None:
        return await self.session.get(self.model, record_id)

    async def list_all(self) -> list[ModelT]:
        result = await self.session.execute(select(self.model).order_by(self.model.id))
        return list(result.scalars().all())

    async def find_by(self, field: str, value: Any) -> list[ModelT]:
        column = getattr(self.model, field)
        result = await self.session.execute(
            select(self.model).where(column == value).order_by(self.model.id)
        )
        return list(result.scalars().all())

    async def delete(self, record_id: str) -> bool:
        record = await self.session.get(self.model, record_id)
        if record is None:
            return False
        await self.session.delete(record)
        await self.session.commit()
        return True


@dataclass
class Stores:
    drivers: EntityStore[Driver]
    vehicles: EntityStore[Vehicle]
    bookings: EntityStore[Booking]
    fuel_consumptions: EntityStore[FuelConsumption]
    maintenances: EntityStore[Maintenance]
    emergency_assistances: EntityStore[EmergencyAssistance]
    routes: EntityStore[Route]

    @classmethod
    def from_session(cls, session: AsyncSession) -> "Stores":
        return cls(
            drivers=EntityStore(session, Driver),
            vehicles=EntityStore(session, Vehicle),
            bookings=EntityStore(session, Booking),
            fuel_consumptions=EntityStore(session, FuelConsumption),
            maintenances=EntityStore(session, Maintenance),
            emergency_assistances=EntityStore(session, EmergencyAssistance),
            routes=EntityStore(session, Route),
        )
