"""Inventario en memoria con capacidad fija y acceso serializado."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable

from servidor.domain.models import InventorySnapshot, OperationResult, Producto
from shared.errors import ValidationError
from shared.protocol import OperationStatus

LOGGER = logging.getLogger(__name__)


class InventoryStore:
    """Administra la lista autoritativa de productos.

    Los productos vigentes ocupan un prefijo contiguo de la lista y nunca
    superan la capacidad. Todas las operaciones, incluidas las lecturas, toman
    el mismo lock; ninguna lo mantiene durante E/S.

    La busqueda por id es lineal y retorna la primera coincidencia; no se
    valida unicidad de ids.
    """

    def __init__(self, capacidad: int, productos: Iterable[Producto] = ()) -> None:
        if isinstance(capacidad, bool) or not isinstance(capacidad, int) or capacidad <= 0:
            raise ValidationError(f"La capacidad debe ser un entero positivo: {capacidad!r}")

        initial = list(productos)
        if len(initial) > capacidad:
            raise ValidationError(
                f"Se entregaron {len(initial)} productos para una capacidad de {capacidad}."
            )

        self._lock = threading.Lock()
        self._capacidad = capacidad
        self._productos: list[Producto] = initial

    @property
    def capacidad(self) -> int:
        return self._capacidad

    def __len__(self) -> int:
        with self._lock:
            return len(self._productos)

    def add_product(
        self,
        producto_id: int,
        nombre: str,
        cantidad: int,
        precio: float,
    ) -> OperationResult:
        """Agrega un producto al final si queda capacidad disponible."""
        with self._lock:
            if len(self._productos) >= self._capacidad:
                LOGGER.warning(
                    "Inventario lleno (%d/%d). No se agrega producto id=%s.",
                    len(self._productos),
                    self._capacidad,
                    producto_id,
                )
                return OperationResult(OperationStatus.CAPACITY_EXCEEDED)

            producto = Producto(id=producto_id, nombre=nombre, cantidad=cantidad, precio=precio)
            self._productos.append(producto)

        LOGGER.info("Producto agregado: id=%s, nombre=%s", producto.id, producto.nombre)
        return OperationResult(OperationStatus.OK, producto)

    def update_stock(self, producto_id: int, nueva_cantidad: int) -> OperationResult:
        """Reemplaza la cantidad del primer producto con el id indicado."""
        with self._lock:
            index = self._index_of(producto_id)
            if index is None:
                LOGGER.warning("Producto no encontrado para actualizar stock: id=%s", producto_id)
                return OperationResult(OperationStatus.PRODUCT_NOT_FOUND)

            producto = self._productos[index].with_cantidad(nueva_cantidad)
            self._productos[index] = producto

        LOGGER.info(
            "Stock actualizado para: %s (id=%s, cantidad=%s)",
            producto.nombre,
            producto.id,
            producto.cantidad,
        )
        return OperationResult(OperationStatus.OK, producto)

    def place_order(self, producto_id: int, cantidad: int) -> OperationResult:
        """Descuenta stock del primer producto con el id si alcanza la cantidad."""
        with self._lock:
            index = self._index_of(producto_id)
            if index is None:
                LOGGER.warning("Producto no encontrado para pedido: id=%s", producto_id)
                return OperationResult(OperationStatus.PRODUCT_NOT_FOUND)

            actual = self._productos[index]
            if actual.cantidad < cantidad:
                LOGGER.warning(
                    "Stock insuficiente para: %s (disponible=%s, pedido=%s)",
                    actual.nombre,
                    actual.cantidad,
                    cantidad,
                )
                return OperationResult(OperationStatus.INSUFFICIENT_STOCK, actual)

            producto = actual.with_cantidad(actual.cantidad - cantidad)
            self._productos[index] = producto

        LOGGER.info(
            "Pedido realizado para: %s (id=%s, restante=%s)",
            producto.nombre,
            producto.id,
            producto.cantidad,
        )
        return OperationResult(OperationStatus.OK, producto)

    def find(self, producto_id: int) -> Producto | None:
        """Retorna el primer producto con el id indicado, o None."""
        with self._lock:
            index = self._index_of(producto_id)
            return None if index is None else self._productos[index]

    def list_all(self) -> list[Producto]:
        """Retorna una copia de los productos vigentes en orden de ingreso."""
        with self._lock:
            return list(self._productos)

    def snapshot(self) -> InventorySnapshot:
        """Toma una copia consistente de capacidad y productos."""
        with self._lock:
            return InventorySnapshot(capacidad=self._capacidad, productos=tuple(self._productos))

    def _index_of(self, producto_id: int) -> int | None:
        # Requiere self._lock tomado.
        for index, producto in enumerate(self._productos):
            if producto.id == producto_id:
                return index
        return None
