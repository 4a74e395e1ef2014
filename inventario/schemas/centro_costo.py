from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

class CentroCostoCreateRequest(BaseModel):
    nombre: str = Field(..., min_length=1)
    activo: bool = True

class CentroCostoUpdateRequest(BaseModel):
    nombre: Optional[str] = None
    activo: Optional[bool] = None

class CentroCostoResponse(BaseModel):
    id: int
    nombre: str
    activo: bool
    productos: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
