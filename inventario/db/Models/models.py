from sqlalchemy import Column, String, Integer, Float, DateTime, Boolean, ForeignKey
from sqlalchemy.orm import declarative_base, relationship
from datetime import datetime

Base = declarative_base()

class CentroCosto(Base):
    __tablename__ = "centros_costo"

    id = Column(Integer, primary_key=True, autoincrement=True)
    nombre = Column(String, unique=True, index=True, nullable=False)
    activo = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    productos = relationship("Producto", back_populates="centro_costo")

class Producto(Base):
    __tablename__ = "productos"

    id = Column(Integer, primary_key=True, autoincrement=True)
    proveedor = Column(String, nullable=False)
    referencia = Column(String, nullable=False)
    producto = Column(String, index=True, nullable=False)
    cantidad = Column(Float, nullable=False, default=0)
    unidades = Column(String, nullable=False)

    # Letter-coded cost as typed, and its decoded numeric value
    costo = Column(String, nullable=False)
    costo_real = Column(Integer, nullable=False, default=0)
    precio_venta = Column(String, nullable=False)

    # Not unique: several products may share a supplier code
    codigo = Column(String, index=True, nullable=False)
    # Nullable for rows created before barcodes existed; see scripts/generate_barcodes.py
    codigo_barras = Column(String, unique=True, index=True, nullable=True)
    embalaje = Column(String, nullable=True)

    centro_costo_id = Column(Integer, ForeignKey("centros_costo.id"), nullable=True, index=True)
    centro_costo = relationship("CentroCosto", back_populates="productos")

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
