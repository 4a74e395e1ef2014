import logging
from typing import List, Optional, Tuple
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from inventario.db import repository
from inventario.db.Models.models import Producto
from inventario.schemas.producto import ProductoCreateRequest, ProductoResponse, ProductoUpdateRequest
from inventario.services import RedisProductCache
from inventario.utils.barcode import barcode_generator
from inventario.utils.encryption import cost_codec

logger = logging.getLogger(__name__)


def _upper(value: Optional[str]) -> Optional[str]:
    return value.strip().upper() if value else None


class ProductoService:

    @staticmethod
    def _fields_from_request(request: ProductoCreateRequest) -> dict:
        return dict(
            proveedor=_upper(request.proveedor),
            referencia=_upper(request.referencia),
            producto=_upper(request.producto),
            cantidad=request.cantidad,
            unidades=_upper(request.unidades),
            costo=_upper(request.costo),
            costo_real=cost_codec.decode(request.costo),
            precio_venta=request.precio_venta,
            codigo=request.codigo,
            embalaje=_upper(request.embalaje),
            centro_costo_id=request.centro_costo_id,
        )

    @staticmethod
    def _validate_centro_costo(db: Session, centro_costo_id: Optional[int]):
        if centro_costo_id is None:
            return
        centro = repository.get_centro_costo(db, centro_costo_id)
        if centro is None:
            raise ValueError(f"Centro de costo {centro_costo_id} does not exist")
        if not centro.activo:
            raise ValueError(f"Centro de costo '{centro.nombre}' is inactive")

    @staticmethod
    def generate_codigo_barras(db: Session, codigo: str, costo: str) -> str:
        return barcode_generator.generate_unique(
            codigo, costo, lambda candidate: repository.codigo_barras_exists(db, candidate)
        )

    @staticmethod
    def create_producto(db: Session, request: ProductoCreateRequest) -> Producto:
        ProductoService._validate_centro_costo(db, request.centro_costo_id)
        fields = ProductoService._fields_from_request(request)
        fields["codigo_barras"] = ProductoService.generate_codigo_barras(db, request.codigo, request.costo)
        logger.info("Creating producto codigo=%s codigo_barras=%s", request.codigo, fields["codigo_barras"])

        try:
            return repository.create_producto(db, **fields)
        except IntegrityError:
            raise ValueError("Could not generate a unique codigo_barras, try again")

    @staticmethod
    def update_producto(db: Session, producto_id: int, request: ProductoUpdateRequest) -> Optional[Producto]:
        producto = repository.get_producto(db, producto_id)
        if producto is None:
            return None
        # Rows already in a deactivated centro stay editable; only moves into one are refused
        if request.centro_costo_id != producto.centro_costo_id:
            ProductoService._validate_centro_costo(db, request.centro_costo_id)

        # codigo_barras is assigned once at creation and never regenerated
        fields = ProductoService._fields_from_request(request)
        try:
            producto = repository.update_producto(db, producto, **fields)
        except IntegrityError:
            raise ValueError("Producto update violates a uniqueness constraint")
        RedisProductCache.invalidate(producto.codigo_barras)
        return producto

    @staticmethod
    def delete_producto(db: Session, producto_id: int) -> bool:
        producto = repository.get_producto(db, producto_id)
        if producto is None:
            return False
        codigo_barras = producto.codigo_barras
        repository.delete_producto(db, producto)
        RedisProductCache.invalidate(codigo_barras)
        logger.info("Deleted producto id=%s", producto_id)
        return True

    @staticmethod
    def get_producto(db: Session, producto_id: int) -> Optional[Producto]:
        return repository.get_producto(db, producto_id)

    @staticmethod
    def find_by_codigo_barras(db: Session, codigo_barras: str) -> Optional[ProductoResponse]:
        cached = RedisProductCache.get(codigo_barras)
        if cached:
            return cached

        producto = repository.get_producto_by_codigo_barras(db, codigo_barras)
        if producto is None:
            return None
        response = ProductoResponse.model_validate(producto)
        RedisProductCache.put(response)
        return response

    @staticmethod
    def list_productos(db: Session, skip: int, limit: int,
                       centro_costo_id: Optional[int] = None,
                       q: Optional[str] = None) -> Tuple[int, List[Producto]]:
        return repository.list_productos(db, skip, limit, centro_costo_id, q)

    @staticmethod
    def assign_missing_codigos_barras(db: Session) -> int:
        """Give every producto without a barcode a freshly generated one."""
        productos = repository.list_productos_sin_codigo_barras(db)
        logger.info("Found %s productos without codigo_barras", len(productos))
        for producto in productos:
            codigo_barras = ProductoService.generate_codigo_barras(db, producto.codigo, producto.costo)
            repository.update_producto(db, producto, codigo_barras=codigo_barras)
            logger.info("%s (%s) -> %s", producto.producto, producto.codigo, codigo_barras)
        return len(productos)
