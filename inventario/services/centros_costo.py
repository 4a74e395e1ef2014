import logging
from typing import List, Optional, Tuple
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from inventario.db import repository
from inventario.db.Models.models import CentroCosto
from inventario.schemas.centro_costo import CentroCostoCreateRequest, CentroCostoUpdateRequest

logger = logging.getLogger(__name__)


class CentroCostoService:

    @staticmethod
    def list_centros(db: Session) -> List[Tuple[CentroCosto, int]]:
        return repository.list_centros_costo(db)

    @staticmethod
    def create_centro(db: Session, request: CentroCostoCreateRequest) -> CentroCosto:
        nombre = request.nombre.strip()
        if not nombre:
            raise ValueError("Centro de costo nombre is required")
        if repository.get_centro_costo_by_nombre(db, nombre):
            logger.warning(f"Centro de costo collision: '{nombre}'")
            raise ValueError("Centro de costo already exists")
        try:
            return repository.create_centro_costo(db, nombre, request.activo)
        except IntegrityError:
            raise ValueError("Centro de costo already exists")

    @staticmethod
    def update_centro(db: Session, centro_id: int, request: CentroCostoUpdateRequest) -> Optional[CentroCosto]:
        centro = repository.get_centro_costo(db, centro_id)
        if centro is None:
            return None

        fields = {}
        if request.nombre is not None:
            nombre = request.nombre.strip()
            if not nombre:
                raise ValueError("Centro de costo nombre is required")
            fields["nombre"] = nombre
        if request.activo is not None:
            fields["activo"] = request.activo

        try:
            return repository.update_centro_costo(db, centro, **fields)
        except IntegrityError:
            raise ValueError("Centro de costo already exists")

    @staticmethod
    def delete_centro(db: Session, centro_id: int) -> bool:
        centro = repository.get_centro_costo(db, centro_id)
        if centro is None:
            return False

        productos = repository.count_productos_in_centro(db, centro_id)
        if productos > 0:
            raise ValueError(f"Cannot delete centro de costo: {productos} producto(s) assigned")

        repository.delete_centro_costo(db, centro)
        logger.info("Deleted centro de costo id=%s", centro_id)
        return True

    @staticmethod
    def product_count(db: Session, centro_id: int) -> int:
        return repository.count_productos_in_centro(db, centro_id)
