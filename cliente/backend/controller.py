"""Controlador principal del cliente."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from servidor.services.autosave import AutoSaveWorker
from shared.errors import ServiceError
from shared.protocol import (
    AddProductRequest,
    ListProductsResponse,
    OperationResponse,
    PlaceOrderRequest,
    ProductRow,
    SaveInventoryResponse,
    UpdateStockRequest,
)

from .gateway import InventoryGateway
from .product_formatter import format_inventory_report
from .validators import (
    parse_order_quantity,
    parse_price,
    parse_product_id,
    parse_product_name,
    parse_quantity,
)

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

LOGGER = logging.getLogger(__name__)


class AppController:
    """Coordina acciones de UI y servicios de inventario."""

    def __init__(
        self,
        gateway: InventoryGateway,
        autosave: AutoSaveWorker | None = None,
    ) -> None:
        self._gateway = gateway
        self._autosave = autosave
        self._closed = False

    @property
    def is_closed(self) -> bool:
        return self._closed

    def on_add_product(
        self,
        id_raw: str,
        nombre_raw: str,
        cantidad_raw: str,
        precio_raw: str,
    ) -> OperationResponse:
        """Valida datos del formulario y agrega el producto."""
        request = AddProductRequest(
            id=parse_product_id(id_raw),
            nombre=parse_product_name(nombre_raw),
            cantidad=parse_quantity(cantidad_raw),
            precio=parse_price(precio_raw),
        )
        response = self._gateway.add_product(request)
        LOGGER.info(
            "Accion ejecutada: agregar producto id=%s -> %s",
            request.id,
            response.status.value,
        )
        return response

    def on_update_stock(self, id_raw: str, cantidad_raw: str) -> OperationResponse:
        """Valida datos y reemplaza el stock de un producto."""
        request = UpdateStockRequest(
            id=parse_product_id(id_raw),
            nueva_cantidad=parse_quantity(cantidad_raw, "Nueva cantidad"),
        )
        response = self._gateway.update_stock(request)
        LOGGER.info(
            "Accion ejecutada: actualizar stock id=%s -> %s",
            request.id,
            response.status.value,
        )
        return response

    def on_place_order(self, id_raw: str, cantidad_raw: str) -> OperationResponse:
        """Valida datos y descuenta stock por un pedido."""
        request = PlaceOrderRequest(
            id=parse_product_id(id_raw),
            cantidad=parse_order_quantity(cantidad_raw),
        )
        response = self._gateway.place_order(request)
        LOGGER.info(
            "Accion ejecutada: realizar pedido id=%s -> %s",
            request.id,
            response.status.value,
        )
        return response

    def list_inventory(self) -> ListProductsResponse:
        """Retorna productos vigentes y capacidad del inventario."""
        return self._gateway.list_products()

    def list_products(self) -> list[ProductRow]:
        """Lista productos vigentes en orden de ingreso."""
        return self.list_inventory().products

    def inventory_report(self) -> str:
        """Construye el texto del estado del inventario."""
        return format_inventory_report(self.list_products())

    def save_now(self) -> SaveInventoryResponse:
        """Guarda el inventario de forma sincronica."""
        response = self._gateway.save_inventory()
        LOGGER.info("Inventario guardado manualmente: %s", response.path)
        return response

    def on_exit(
        self,
        app: QApplication | Callable[[], None] | None,
    ) -> None:
        """Detiene el autoguardado, guarda y cierra la aplicacion."""
        if self._closed:
            return
        self._closed = True
        LOGGER.info("Accion ejecutada: salir")

        if self._autosave is not None:
            self._autosave.stop()

        try:
            self._gateway.save_inventory()
        except ServiceError:
            LOGGER.exception("No fue posible guardar el inventario al salir.")

        if callable(app):
            app()
            return

        if app is not None:
            app.quit()
