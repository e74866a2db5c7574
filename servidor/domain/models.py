"""Modelos de dominio de inventario."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path

from shared.protocol import OperationStatus


@dataclass(frozen=True, slots=True)
class Producto:
    """Representa un producto en inventario."""

    id: int
    nombre: str
    cantidad: int
    precio: float

    def with_cantidad(self, cantidad: int) -> Producto:
        """Retorna una copia del producto con otra cantidad en stock."""
        return replace(self, cantidad=cantidad)


@dataclass(frozen=True, slots=True)
class OperationResult:
    """Resultado de una operacion del inventario."""

    status: OperationStatus
    producto: Producto | None = None

    @property
    def ok(self) -> bool:
        return self.status is OperationStatus.OK


@dataclass(frozen=True, slots=True)
class InventorySnapshot:
    """Copia consistente del inventario tomada bajo lock."""

    capacidad: int
    productos: tuple[Producto, ...]

    @property
    def cantidad_productos(self) -> int:
        return len(self.productos)


@dataclass(frozen=True, slots=True)
class SavedInventory:
    """Ruta escrita y cantidad de productos del snapshot guardado."""

    path: Path
    cantidad_productos: int
