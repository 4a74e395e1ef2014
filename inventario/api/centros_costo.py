from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List
import logging

from inventario.db.Connection import database
from inventario.db.Models.models import CentroCosto
from inventario.schemas.centro_costo import (
    CentroCostoCreateRequest,
    CentroCostoResponse,
    CentroCostoUpdateRequest,
)
from inventario.services.centros_costo import CentroCostoService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/centros-costo", tags=["centros-costo"])


def _to_response(centro: CentroCosto, productos: int) -> CentroCostoResponse:
    return CentroCostoResponse(
        id=centro.id,
        nombre=centro.nombre,
        activo=centro.activo,
        productos=productos,
        created_at=centro.created_at,
        updated_at=centro.updated_at,
    )

@router.get("", response_model=List[CentroCostoResponse])
def list_centros_endpoint(db: Session = Depends(database.get_db)):
    return [_to_response(centro, count) for centro, count in CentroCostoService.list_centros(db)]

@router.post("", response_model=CentroCostoResponse, status_code=status.HTTP_201_CREATED)
def create_centro_endpoint(centro_request: CentroCostoCreateRequest, db: Session = Depends(database.get_db)):
    try:
        centro = CentroCostoService.create_centro(db, centro_request)
    except ValueError as e:
        logger.error(f"Failed to create centro de costo '{centro_request.nombre}' due to: {str(e)}")
        raise HTTPException(status_code=409, detail=str(e))
    logger.info(f"Centro de costo created: {centro.nombre} (id={centro.id})")
    return _to_response(centro, 0)

@router.put("/{centro_id}", response_model=CentroCostoResponse)
def update_centro_endpoint(centro_id: int, centro_request: CentroCostoUpdateRequest, db: Session = Depends(database.get_db)):
    try:
        centro = CentroCostoService.update_centro(db, centro_id, centro_request)
    except ValueError as e:
        logger.error(f"Failed to update centro de costo {centro_id} due to: {str(e)}")
        raise HTTPException(status_code=409, detail=str(e))

    if centro is None:
        logger.warning(f"Centro de costo 404: id not found: {centro_id}")
        raise HTTPException(status_code=404, detail="Centro de costo not found")
    return _to_response(centro, CentroCostoService.product_count(db, centro_id))

@router.delete("/{centro_id}")
def delete_centro_endpoint(centro_id: int, db: Session = Depends(database.get_db)):
    try:
        deleted = CentroCostoService.delete_centro(db, centro_id)
    except ValueError as e:
        logger.error(f"Failed to delete centro de costo {centro_id} due to: {str(e)}")
        raise HTTPException(status_code=409, detail=str(e))

    if not deleted:
        raise HTTPException(status_code=404, detail="Centro de costo not found")
    return {"detail": "Centro de costo deleted"}
