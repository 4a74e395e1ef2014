from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.orm import Session
from typing import Optional
import logging

from inventario.db.Connection import database
from inventario.schemas.producto import (
    CostoDecodificadoResponse,
    PaginatedProductoList,
    ProductoCreateRequest,
    ProductoResponse,
    ProductoUpdateRequest,
)
from inventario.services.productos import ProductoService
from inventario.utils.encryption import cost_codec, format_cost, normalize_cost

logger = logging.getLogger(__name__)

router = APIRouter(tags=["productos"])

@router.post("/productos", response_model=ProductoResponse, status_code=status.HTTP_201_CREATED)
def create_producto_endpoint(producto_request: ProductoCreateRequest, db: Session = Depends(database.get_db)):
    try:
        producto = ProductoService.create_producto(db, producto_request)
    except ValueError as e:
        logger.error(f"Failed to create producto codigo={producto_request.codigo} due to: {str(e)}")
        raise HTTPException(status_code=409, detail=str(e))

    logger.info(f"API success: Created producto {producto.id} with codigo_barras {producto.codigo_barras}")
    return producto

@router.get("/productos", response_model=PaginatedProductoList)
def list_productos_endpoint(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    centro_costo_id: Optional[int] = None,
    q: Optional[str] = None,
    db: Session = Depends(database.get_db)
):
    total, productos = ProductoService.list_productos(db, skip, limit, centro_costo_id, q)
    return PaginatedProductoList(
        total=total,
        skip=skip,
        limit=limit,
        productos=[ProductoResponse.model_validate(p) for p in productos]
    )

@router.get("/productos/buscar", response_model=ProductoResponse)
def find_producto_by_barcode_endpoint(codigo_barras: Optional[str] = None, db: Session = Depends(database.get_db)):
    if not codigo_barras or not codigo_barras.strip():
        raise HTTPException(status_code=400, detail="codigo_barras is required")

    producto = ProductoService.find_by_codigo_barras(db, codigo_barras.strip())
    if producto is None:
        logger.warning(f"Barcode 404: codigo_barras not found: {codigo_barras}")
        raise HTTPException(status_code=404, detail="Producto not found")
    return producto

@router.get("/productos/{producto_id}", response_model=ProductoResponse)
def get_producto_endpoint(producto_id: int, db: Session = Depends(database.get_db)):
    producto = ProductoService.get_producto(db, producto_id)
    if producto is None:
        logger.warning(f"Producto 404: id not found: {producto_id}")
        raise HTTPException(status_code=404, detail="Producto not found")
    return producto

@router.put("/productos/{producto_id}", response_model=ProductoResponse)
def update_producto_endpoint(producto_id: int, producto_request: ProductoUpdateRequest, db: Session = Depends(database.get_db)):
    try:
        producto = ProductoService.update_producto(db, producto_id, producto_request)
    except ValueError as e:
        logger.error(f"Failed to update producto {producto_id} due to: {str(e)}")
        raise HTTPException(status_code=409, detail=str(e))

    if producto is None:
        raise HTTPException(status_code=404, detail="Producto not found")
    return producto

@router.delete("/productos/{producto_id}")
def delete_producto_endpoint(producto_id: int, db: Session = Depends(database.get_db)):
    if not ProductoService.delete_producto(db, producto_id):
        raise HTTPException(status_code=404, detail="Producto not found")
    return {"detail": "Producto deleted"}

@router.get("/costos/decodificar", response_model=CostoDecodificadoResponse)
def decode_costo_endpoint(costo: str = Query(..., min_length=1)):
    costo_real = cost_codec.decode(costo)
    return CostoDecodificadoResponse(
        costo=normalize_cost(costo),
        valido=cost_codec.is_valid_encoding(costo),
        costo_real=costo_real,
        costo_formateado=format_cost(costo_real),
    )
