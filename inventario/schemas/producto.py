from pydantic import BaseModel, Field, field_validator
from datetime import datetime
from typing import Literal, Optional, List

from inventario.utils.encryption import cost_codec

# Request DTOs
class ProductoCreateRequest(BaseModel):
    proveedor: Literal["bodega", "alea"]
    referencia: str = Field(..., min_length=1)
    producto: str = Field(..., min_length=1)
    cantidad: float = Field(..., ge=0)
    unidades: Literal["metros", "yardas", "gramos", "unidad"]
    costo: str = Field(..., min_length=1, pattern=r"^[A-Za-z]+$")
    precio_venta: str = Field(..., min_length=1)
    codigo: str = Field(..., min_length=1)
    embalaje: Optional[str] = None
    centro_costo_id: Optional[int] = None

    @field_validator('proveedor', 'unidades', mode='before')
    def lowercase_choice(cls, v):
        return v.lower() if isinstance(v, str) else v

    @field_validator('costo')
    def validate_costo(cls, v):
        if not cost_codec.is_valid_encoding(v):
            raise ValueError('costo may only contain letters of the configured cost table')
        return v

    @field_validator('codigo')
    def validate_codigo(cls, v):
        v = v.strip()
        if not v:
            raise ValueError('codigo must not be blank')
        return v


class ProductoUpdateRequest(ProductoCreateRequest):
    pass


# Response DTOs
class ProductoResponse(BaseModel):
    id: int
    proveedor: str
    referencia: str
    producto: str
    cantidad: float
    unidades: str
    costo: str
    costo_real: int
    precio_venta: str
    codigo: str
    codigo_barras: Optional[str] = None
    embalaje: Optional[str] = None
    centro_costo_id: Optional[int] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class PaginatedProductoList(BaseModel):
    total: int
    skip: int
    limit: int
    productos: List[ProductoResponse]


class CostoDecodificadoResponse(BaseModel):
    costo: str
    valido: bool
    costo_real: int
    costo_formateado: str
