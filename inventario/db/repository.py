from typing import List, Optional, Tuple
from sqlalchemy import func, or_
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
import logging

from inventario.db.Models.models import CentroCosto, Producto

logger = logging.getLogger(__name__)


def _commit_and_refresh(db: Session, item):
    try:
        db.add(item)
        db.commit()
        db.refresh(item)
        return item
    except IntegrityError as e:
        db.rollback()
        logger.warning(
            "IntegrityError saving %s id=%s: %s",
            type(item).__name__, getattr(item, "id", None), str(e.orig) if hasattr(e, 'orig') else str(e)
        )
        raise


# Productos

def get_producto(db: Session, producto_id: int) -> Optional[Producto]:
    return db.get(Producto, producto_id)

def get_producto_by_codigo_barras(db: Session, codigo_barras: str) -> Optional[Producto]:
    return db.query(Producto).filter(Producto.codigo_barras == codigo_barras).first()

def codigo_barras_exists(db: Session, codigo_barras: str) -> bool:
    return db.query(
        db.query(Producto.id).filter(Producto.codigo_barras == codigo_barras).exists()
    ).scalar()

def list_productos(
    db: Session,
    skip: int = 0,
    limit: int = 100,
    centro_costo_id: Optional[int] = None,
    q: Optional[str] = None,
) -> Tuple[int, List[Producto]]:
    query = db.query(Producto)
    if centro_costo_id is not None:
        query = query.filter(Producto.centro_costo_id == centro_costo_id)
    if q:
        pattern = f"%{q.strip()}%"
        query = query.filter(or_(
            Producto.producto.ilike(pattern),
            Producto.referencia.ilike(pattern),
            Producto.codigo.ilike(pattern),
        ))
    total = query.count()
    productos = (
        query.order_by(Producto.created_at.desc(), Producto.id.desc())
        .offset(skip)
        .limit(limit)
        .all()
    )
    return total, productos

def list_productos_sin_codigo_barras(db: Session) -> List[Producto]:
    return db.query(Producto).filter(
        or_(Producto.codigo_barras.is_(None), Producto.codigo_barras == "")
    ).all()

def create_producto(db: Session, **fields) -> Producto:
    return _commit_and_refresh(db, Producto(**fields))

def update_producto(db: Session, item: Producto, **fields) -> Producto:
    # "producto" is a column name, so the row travels as `item`
    for name, value in fields.items():
        setattr(item, name, value)
    return _commit_and_refresh(db, item)

def delete_producto(db: Session, producto: Producto) -> None:
    db.delete(producto)
    db.commit()

def count_productos_in_centro(db: Session, centro_costo_id: int) -> int:
    return db.query(func.count(Producto.id)).filter(Producto.centro_costo_id == centro_costo_id).scalar()


# Centros de costo

def get_centro_costo(db: Session, centro_costo_id: int) -> Optional[CentroCosto]:
    return db.get(CentroCosto, centro_costo_id)

def get_centro_costo_by_nombre(db: Session, nombre: str) -> Optional[CentroCosto]:
    return db.query(CentroCosto).filter(CentroCosto.nombre == nombre).first()

def list_centros_costo(db: Session) -> List[Tuple[CentroCosto, int]]:
    return (
        db.query(CentroCosto, func.count(Producto.id))
        .outerjoin(Producto, Producto.centro_costo_id == CentroCosto.id)
        .group_by(CentroCosto.id)
        .order_by(CentroCosto.nombre.asc())
        .all()
    )

def create_centro_costo(db: Session, nombre: str, activo: bool = True) -> CentroCosto:
    return _commit_and_refresh(db, CentroCosto(nombre=nombre, activo=activo))

def update_centro_costo(db: Session, item: CentroCosto, **fields) -> CentroCosto:
    for name, value in fields.items():
        setattr(item, name, value)
    return _commit_and_refresh(db, item)

def delete_centro_costo(db: Session, centro: CentroCosto) -> None:
    db.delete(centro)
    db.commit()
