"""Gateway de comunicacion cliente-servidor."""

from __future__ import annotations

import logging
from typing import Protocol

from servidor.domain.models import OperationResult, Producto
from servidor.services.inventory_store import InventoryStore
from servidor.services.persistence import InventoryPersistence
from shared.errors import ServiceError
from shared.protocol import (
    AddProductRequest,
    ListProductsResponse,
    OperationResponse,
    OperationStatus,
    PlaceOrderRequest,
    ProductRow,
    SaveInventoryResponse,
    UpdateStockRequest,
)

LOGGER = logging.getLogger(__name__)

PRODUCT_NOT_FOUND_MESSAGE = "Producto no encontrado."
INVENTORY_FULL_MESSAGE = "Inventario lleno. No se pueden agregar mas productos."


class InventoryGateway(Protocol):
    """Interfaz de acceso del cliente al inventario del servidor."""

    def add_product(self, request: AddProductRequest) -> OperationResponse:
        """Solicita agregar un producto."""

    def update_stock(self, request: UpdateStockRequest) -> OperationResponse:
        """Solicita reemplazar el stock de un producto."""

    def place_order(self, request: PlaceOrderRequest) -> OperationResponse:
        """Solicita descontar stock por un pedido."""

    def list_products(self) -> ListProductsResponse:
        """Solicita el listado de productos."""

    def save_inventory(self) -> SaveInventoryResponse:
        """Solicita guardar el inventario en disco."""


class LocalInventoryGateway:
    """Implementacion local del gateway usando el inventario en memoria."""

    def __init__(self, store: InventoryStore, persistence: InventoryPersistence) -> None:
        self._store = store
        self._persistence = persistence

    def add_product(self, request: AddProductRequest) -> OperationResponse:
        """Agrega un producto delegando en el inventario."""
        try:
            result = self._store.add_product(
                request.id,
                request.nombre,
                request.cantidad,
                request.precio,
            )
        except ServiceError:
            raise
        except Exception as exc:
            LOGGER.exception("Fallo inesperado al agregar producto.")
            raise ServiceError("No fue posible agregar el producto.") from exc

        return _to_response(result, ok_message="Producto agregado correctamente.")

    def update_stock(self, request: UpdateStockRequest) -> OperationResponse:
        """Reemplaza el stock delegando en el inventario."""
        try:
            result = self._store.update_stock(request.id, request.nueva_cantidad)
        except ServiceError:
            raise
        except Exception as exc:
            LOGGER.exception("Fallo inesperado al actualizar stock.")
            raise ServiceError("No fue posible actualizar el stock.") from exc

        return _to_response(result, ok_message="Stock actualizado para: {nombre}")

    def place_order(self, request: PlaceOrderRequest) -> OperationResponse:
        """Registra un pedido delegando en el inventario."""
        try:
            result = self._store.place_order(request.id, request.cantidad)
        except ServiceError:
            raise
        except Exception as exc:
            LOGGER.exception("Fallo inesperado al realizar pedido.")
            raise ServiceError("No fue posible realizar el pedido.") from exc

        return _to_response(result, ok_message="Pedido realizado para: {nombre}")

    def list_products(self) -> ListProductsResponse:
        """Retorna los productos vigentes en orden de ingreso."""
        snapshot = self._store.snapshot()
        return ListProductsResponse(
            products=[_to_row(producto) for producto in snapshot.productos],
            capacidad=snapshot.capacidad,
        )

    def save_inventory(self) -> SaveInventoryResponse:
        """Guarda el inventario en disco de forma sincronica."""
        try:
            saved = self._persistence.save(self._store)
        except ServiceError:
            raise
        except Exception as exc:
            LOGGER.exception("Fallo inesperado al guardar inventario.")
            raise ServiceError("No fue posible guardar el inventario.") from exc

        return SaveInventoryResponse(path=str(saved.path), count=saved.cantidad_productos)


def _to_row(producto: Producto) -> ProductRow:
    return ProductRow(
        id=producto.id,
        nombre=producto.nombre,
        cantidad=producto.cantidad,
        precio=producto.precio,
    )


def _to_response(result: OperationResult, ok_message: str) -> OperationResponse:
    """Traduce un resultado de dominio a respuesta con mensaje para la UI."""
    row = _to_row(result.producto) if result.producto is not None else None
    nombre = row.nombre if row is not None else ""

    if result.status is OperationStatus.OK:
        message = ok_message.format(nombre=nombre)
    elif result.status is OperationStatus.CAPACITY_EXCEEDED:
        message = INVENTORY_FULL_MESSAGE
    elif result.status is OperationStatus.INSUFFICIENT_STOCK:
        message = f"Stock insuficiente para: {nombre}"
    else:
        message = PRODUCT_NOT_FOUND_MESSAGE

    return OperationResponse(status=result.status, message=message, product=row)
