import logging
from typing import Optional
import redis.exceptions
from inventario.core.config import settings
from inventario.db.Connection import database
from inventario.schemas.producto import ProductoResponse

logger = logging.getLogger(__name__)


def _cache_key(codigo_barras: str) -> str:
    return f"producto:barras:{codigo_barras}"


def get(codigo_barras: str) -> Optional[ProductoResponse]:
    if not settings.REDIS_ENABLED:
        return None

    try:
        cached = database.redis_client.get(_cache_key(codigo_barras))
    except redis.exceptions.ConnectionError:
        logger.warning(f"Redis connection failed for {codigo_barras}")
        return None

    if not cached:
        return None

    if isinstance(cached, (bytes, bytearray)):
        cached = cached.decode()
    logger.info(f"Barcode cache HIT for {codigo_barras}")
    return ProductoResponse.model_validate_json(cached)


def put(producto: ProductoResponse):
    if not settings.REDIS_ENABLED or not producto.codigo_barras:
        return

    try:
        database.redis_client.setex(
            _cache_key(producto.codigo_barras), settings.CACHE_TTL, producto.model_dump_json()
        )
        logger.debug(f"Cached {producto.codigo_barras} -> producto {producto.id}")
    except redis.exceptions.ConnectionError:
        logger.warning(f"Failed to cache {producto.codigo_barras}, Redis unavailable")


def invalidate(codigo_barras: Optional[str]):
    if not settings.REDIS_ENABLED or not codigo_barras:
        return

    try:
        database.redis_client.delete(_cache_key(codigo_barras))
    except redis.exceptions.ConnectionError:
        logger.warning(f"Failed to invalidate {codigo_barras}, Redis unavailable")
