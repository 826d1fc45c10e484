"""Fuel, maintenance and emergency logs: create and list only."""
from fastapi import APIRouter, Depends

from fleet.dependencies import get_stores
from fleet.schemas.emergency import EmergencyAssistanceCreate, EmergencyAssistanceResponse
from fleet.schemas.fuel import FuelConsumptionCreate, FuelConsumptionResponse
from fleet.schemas.maintenance import MaintenanceCreate, MaintenanceResponse
from fleet.services import emergency as emergency_service
from fleet.services import fuel as fuel_service
from fleet.services import maintenance as maintenance_service
from fleet.store import Stores
from fleet.utils.exceptions import unwrap
from fleet.utils.response import dump, dump_all, success_response

router = APIRouter(tags=["records"])


@router.post("/fuel-consumptions", status_code=201)
async def record_fuel_consumption(payload: FuelConsumptionCreate, stores: Stores = Depends(get_stores)):
    record = unwrap(await fuel_service.record_fuel_consumption(stores, payload))
    return success_response(data=dump(FuelConsumptionResponse, record))


@router.get("/fuel-consumptions")
async def get_fuel_consumptions(stores: Stores = Depends(get_stores)):
    records = unwrap(await fuel_service.get_fuel_consumptions(stores))
    return success_response(data=dump_all(FuelConsumptionResponse, records))


@router.post("/maintenances", status_code=201)
async def schedule_maintenance(payload: MaintenanceCreate, stores: Stores = Depends(get_stores)):
    record = unwrap(await maintenance_service.schedule_maintenance(stores, payload))
    return success_response(data=dump(MaintenanceResponse, record))


@router.get("/maintenances")
async def get_maintenances(stores: Stores = Depends(get_stores)):
    records = unwrap(await maintenance_service.get_maintenances(stores))
    return success_response(data=dump_all(MaintenanceResponse, records))


@router.post("/emergency-assistances", status_code=201)
async def request_emergency_assistance(payload: EmergencyAssistanceCreate, stores: Stores = Depends(get_stores)):
    record = unwrap(await emergency_service.request_emergency_assistance(stores, payload))
    return success_response(data=dump(EmergencyAssistanceResponse, record))


@router.get("/emergency-assistances")
async def get_emergency_assistances(stores: Stores = Depends(get_stores)):
    records = unwrap(await emergency_service.get_emergency_assistances(stores))
    return success_response(data=dump_all(EmergencyAssistanceResponse, records))
