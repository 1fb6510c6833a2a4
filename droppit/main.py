import logging
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from droppit.api.deps import engine
from droppit.api.routers.health import router as health_router
from droppit.api.routers.payments import router as payments_router
from droppit.api.routers.sizing import router as sizing_router
from droppit.infrastructure.db.tables import metadata

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Create the local store table (dev/demo databases)
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
    yield
    await engine.dispose()

app = FastAPI(
    title="Droppit Checkout API",
    version="0.1.0",
    lifespan=lifespan
)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """
    Log unhandled exceptions with an error_id and hide the details from clients.
    """
    error_id = str(uuid.uuid4())

    logger.error(
        "Unhandled exception occurred",
        exc_info=exc,
        extra={
            "error_id": error_id,
            "path": request.url.path,
            "method": request.method,
            "client_host": request.client.host if request.client else None,
        }
    )

    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "error_id": error_id,
        }
    )


app.include_router(health_router, tags=["Health"])
app.include_router(payments_router, prefix="/api", tags=["Payments"])
app.include_router(sizing_router, prefix="/api", tags=["Sizing"])
