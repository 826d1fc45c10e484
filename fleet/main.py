import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware

from fleet.config import settings
from fleet.database import create_tables
from fleet.dependencies import verify_api_key
from fleet.routers.bookings import router as bookings_router
from fleet.routers.drivers import router as drivers_router
from fleet.routers.records import router as records_router
from fleet.routers.routes import router as routes_router
from fleet.routers.vehicles import router as vehicles_router
from fleet.utils.exceptions import register_exception_handlers

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(level=settings.log_level)
    await create_tables()
    logger.info("Fleet records API ready")
    yield


app = FastAPI(
    title="Fleet Records API",
    description="Drivers, vehicles, bookings and fleet logs",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

_api_key_dep = [Depends(verify_api_key)]

app.include_router(drivers_router, prefix="/api/v1", dependencies=_api_key_dep)
app.include_router(vehicles_router, prefix="/api/v1", dependencies=_api_key_dep)
app.include_router(bookings_router, prefix="/api/v1", dependencies=_api_key_dep)
app.include_router(records_router, prefix="/api/v1", dependencies=_api_key_dep)
app.include_router(routes_router, prefix="/api/v1", dependencies=_api_key_dep)


@app.get("/health")
async def health_check():
    return {"status": "success", "data": {"service": "fleet-records-api", "version": "0.1.0"}, "message": None}
