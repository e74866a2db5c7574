"""DTOs del protocolo cliente-servidor."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class OperationStatus(str, Enum):
    """Resultado de dominio de una operacion sobre el inventario."""

    OK = "ok"
    CAPACITY_EXCEEDED = "capacity_exceeded"
    PRODUCT_NOT_FOUND = "product_not_found"
    INSUFFICIENT_STOCK = "insufficient_stock"


@dataclass(slots=True)
class AddProductRequest:
    """Solicitud para agregar un producto al inventario."""

    id: int
    nombre: str
    cantidad: int
    precio: float


@dataclass(slots=True)
class UpdateStockRequest:
    """Solicitud para reemplazar el stock de un producto."""

    id: int
    nueva_cantidad: int


@dataclass(slots=True)
class PlaceOrderRequest:
    """Solicitud para descontar stock por un pedido."""

    id: int
    cantidad: int


@dataclass(slots=True)
class ProductRow:
    """Fila de producto tal como la ve el cliente."""

    id: int
    nombre: str
    cantidad: int
    precio: float


@dataclass(slots=True)
class OperationResponse:
    """Respuesta de una operacion con mensaje listo para mostrar."""

    status: OperationStatus
    message: str
    product: ProductRow | None = None

    @property
    def ok(self) -> bool:
        return self.status is OperationStatus.OK


@dataclass(slots=True)
class ListProductsResponse:
    """Respuesta con los productos vigentes en orden de ingreso."""

    products: list[ProductRow] = field(default_factory=list)
    capacidad: int = 0


@dataclass(slots=True)
class SaveInventoryResponse:
    """Respuesta de guardado con ruta y cantidad de productos escritos."""

    path: str
    count: int
