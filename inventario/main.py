from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from inventario.db.Connection import database
from inventario.core.config import settings
from inventario.db.Models import models
from inventario.api import productos, centros_costo
from inventario.core.logging_config import configure_logging

logger = configure_logging()
logger.info(
    f"Application '{settings.PROJECT_NAME}' starting up "
    f"(cost table {settings.COST_TABLE}, barcode layout {settings.BARCODE_LAYOUT})."
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    models.Base.metadata.create_all(bind=database.engine)
    logger.info("Database models initialized/checked.")
    database.verify_redis_connection()
    yield
    logger.info("Shutting down gracefully...")
    database.close_connections()


app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Inventory service: productos, centros de costo, coded costs and barcodes",
    lifespan=lifespan,
)

app.include_router(productos.router, prefix="/api/v1")
app.include_router(centros_costo.router, prefix="/api/v1")

@app.get("/health", tags=["health"])
def health_check():
    return {"status": "healthy", "service": "inventario"}

@app.get("/ready", tags=["health"])
def readiness():
    details = {
        "db": "ok" if database.verify_database_connection() else "error",
        "redis": "ok" if database.verify_redis_connection() else "unavailable",
    }
    # Redis only backs the barcode cache, so the service is ready without it
    return {"ready": details["db"] == "ok", "details": details}

@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})
