# re-export common schemas for simpler imports
from .producto import (
    ProductoCreateRequest,
    ProductoUpdateRequest,
    ProductoResponse,
    PaginatedProductoList,
    CostoDecodificadoResponse,
)
from .centro_costo import CentroCostoCreateRequest, CentroCostoUpdateRequest, CentroCostoResponse

__all__ = [
    "ProductoCreateRequest",
    "ProductoUpdateRequest",
    "ProductoResponse",
    "PaginatedProductoList",
    "CostoDecodificadoResponse",
    "CentroCostoCreateRequest",
    "CentroCostoUpdateRequest",
    "CentroCostoResponse",
]
