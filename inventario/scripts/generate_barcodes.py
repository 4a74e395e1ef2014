"""Assign a unique codigo_barras to every producto that does not have one yet.

Usage: python -m inventario.scripts.generate_barcodes
"""
import sys

from inventario.core.logging_config import configure_logging
from inventario.db.Connection import database
from inventario.services.productos import ProductoService

logger = configure_logging()


def run(session_factory=database.SessionLocal) -> int:
    db = session_factory()
    try:
        updated = ProductoService.assign_missing_codigos_barras(db)
        logger.info("Barcodes generated for %s productos", updated)
        return updated
    finally:
        db.close()


def main():
    try:
        run()
    except Exception:
        logger.exception("Barcode backfill failed")
        sys.exit(1)
    finally:
        database.close_connections()


if __name__ == "__main__":
    main()
