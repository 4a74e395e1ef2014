import logging
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from inventario.core.config import settings
from redis.connection import ConnectionPool
import redis

logger = logging.getLogger(__name__)


def build_engine(url: str) -> Engine:
    """Engine for ``url``; SQLite URLs (local runs, the backfill script on a file) skip the thread check."""
    if url.startswith("sqlite"):
        return create_engine(url, connect_args={"check_same_thread": False}, future=True)
    return create_engine(url, pool_pre_ping=True, future=True)


SQLALCHEMY_DATABASE_URL = settings.database_url
engine = build_engine(SQLALCHEMY_DATABASE_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine, future=True)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

# Only the barcode lookup cache talks to Redis; the pool connects lazily on first use
pool = ConnectionPool(
    host=settings.REDIS_HOST,
    port=settings.REDIS_PORT,
    db=settings.REDIS_DB,
    decode_responses=True,
    max_connections=settings.REDIS_MAX_CONNECTIONS,
    socket_connect_timeout=2,
    socket_keepalive=True,
    retry_on_timeout=True,
)

redis_client = redis.Redis(connection_pool=pool)

def verify_redis_connection():
    if not settings.REDIS_ENABLED:
        logger.info("Redis disabled by configuration, barcode cache off")
        return False
    try:
        redis_client.ping()
        logger.info(f"Redis connection verified ({settings.REDIS_HOST}:{settings.REDIS_PORT}/{settings.REDIS_DB})")
        return True
    except redis.exceptions.ConnectionError as e:
        logger.warning(f"Redis connection failed: {e}. Barcode lookups will go straight to the database.")
        return False


def verify_database_connection():
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        logger.info("Database connection verified")
        return True
    except Exception as e:
        logger.error(f"Database connection failed: {e}")
        return False


def close_connections():
    engine.dispose()
    if not settings.REDIS_ENABLED:
        return
    try:
        redis_client.close()
    except redis.exceptions.RedisError:
        logger.debug("Error closing Redis client")
