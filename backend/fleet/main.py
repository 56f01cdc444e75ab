import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from fleet.api import auth, calendar, history, maintenance, reports, vehicles
from fleet.core.config import settings
from fleet.core.database import check_database_health, init_db
from fleet.core.exceptions import GatewayError

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info("Fleet API started")
    yield


app = FastAPI(
    title="Fleet Manager API",
    description="Vehicle registry, maintenance logs, calendar and public incident reports",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(GatewayError)
async def gateway_error_handler(request: Request, exc: GatewayError):
    logger.error(f"Datastore error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=503, content={"detail": f"Datastore error: {exc}"})


@app.exception_handler(ValidationError)
async def record_validation_handler(request: Request, exc: ValidationError):
    # Raised when a patch would leave a stored record invalid
    return JSONResponse(
        status_code=422,
        content={"detail": exc.errors(include_url=False, include_context=False)},
    )


# Include routers
app.include_router(auth.router, prefix="/api/auth", tags=["Authentication"])
app.include_router(vehicles.router, prefix="/api/vehicles", tags=["Vehicles"])
app.include_router(maintenance.router, prefix="/api/maintenance", tags=["Maintenance"])
app.include_router(reports.router, prefix="/api/reports", tags=["Reports"])
app.include_router(calendar.router, prefix="/api/calendar", tags=["Calendar"])
app.include_router(history.router, prefix="/api/history", tags=["History"])


@app.get("/")
async def root():
    return {"message": "Fleet Manager API", "version": "1.0.0"}


@app.get("/health")
def health_check():
    database = check_database_health()
    return {"status": database["status"], "database": database}
