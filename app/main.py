import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from app.core.config import settings
from app.core.logging import configure_logging
from app.api.distribution import router as distribution_router
from app.api.employees import router as employees_router
from app.api.settings import router as settings_router
from app.api.datasets import router as datasets_router
from snapshots.store import DatasetConflictError, DatasetError, DatasetNotFoundError
from store.errors import EmployeeFrozenError, EmployeeNotFoundError, StoreError

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    logger.info(f"{settings.service_name} starting ({settings.environment})")
    yield

app = FastAPI(
    title=settings.service_name,
    lifespan=lifespan
)

# CORS middleware - allow the calibration UI to call the API
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(distribution_router, prefix="/v1")
app.include_router(employees_router, prefix="/v1")
app.include_router(settings_router, prefix="/v1")
app.include_router(datasets_router, prefix="/v1")


def _status_for(exc: Exception) -> int:
    if isinstance(exc, (EmployeeNotFoundError, DatasetNotFoundError)):
        return 404
    if isinstance(exc, (EmployeeFrozenError, DatasetConflictError)):
        return 409
    return 400


@app.exception_handler(StoreError)
@app.exception_handler(DatasetError)
async def store_error_handler(request: Request, exc: Exception):
    status_code = _status_for(exc)
    logger.info(f"{request.method} {request.url.path} -> {status_code}: {exc}")
    return JSONResponse(status_code=status_code, content={"error": str(exc)})


@app.get("/health")
async def health():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host=settings.api_host, port=settings.api_port)
