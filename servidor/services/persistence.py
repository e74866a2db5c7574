"""Persistencia del inventario en un archivo JSON versionado."""

from __future__ import annotations

import json
import logging
import threading
from pathlib import Path
from typing import Any

from parametros import INVENTORY_FILE
from servidor.domain.models import InventorySnapshot, Producto, SavedInventory
from servidor.services.inventory_store import InventoryStore
from shared.errors import PersistenceError, ValidationError
from shared.inventory_schema import (
    CAPACITY_KEY,
    COUNT_KEY,
    FORMAT_KEY,
    FORMAT_NAME,
    FORMAT_VERSION,
    PRODUCTS_KEY,
    VERSION_KEY,
    is_supported_header,
    missing_product_fields,
)

LOGGER = logging.getLogger(__name__)


def encode_inventory(snapshot: InventorySnapshot) -> dict[str, Any]:
    """Convierte un snapshot del inventario al documento JSON canonico."""
    return {
        FORMAT_KEY: FORMAT_NAME,
        VERSION_KEY: FORMAT_VERSION,
        CAPACITY_KEY: snapshot.capacidad,
        COUNT_KEY: snapshot.cantidad_productos,
        PRODUCTS_KEY: [
            {
                "id": producto.id,
                "nombre": producto.nombre,
                "cantidad": producto.cantidad,
                "precio": producto.precio,
            }
            for producto in snapshot.productos
        ],
    }


def decode_inventory(data: Any) -> list[Producto]:
    """Parsea el documento JSON canonico y retorna los productos en orden."""
    if not isinstance(data, dict):
        raise ValidationError("El inventario debe ser un objeto JSON.")

    if not is_supported_header(data.get(FORMAT_KEY), data.get(VERSION_KEY)):
        raise ValidationError(
            "Formato de inventario no soportado: "
            f"{data.get(FORMAT_KEY)!r} version {data.get(VERSION_KEY)!r}"
        )

    raw_products = data.get(PRODUCTS_KEY)
    if not isinstance(raw_products, list):
        raise ValidationError("productos debe ser una lista.")

    count = data.get(COUNT_KEY)
    if not _is_int(count) or count != len(raw_products):
        raise ValidationError(
            f"cantidad_productos ({count!r}) no coincide con los registros ({len(raw_products)})."
        )

    productos: list[Producto] = []
    for position, record in enumerate(raw_products):
        productos.append(_parse_product(record, position))
    return productos


def _parse_product(record: Any, position: int) -> Producto:
    """Parsea un registro de producto validando tipos de cada campo."""
    if not isinstance(record, dict):
        raise ValidationError(f"El registro {position} debe ser un objeto JSON.")

    missing = missing_product_fields(record)
    if missing:
        raise ValidationError(f"Al registro {position} le faltan campos: {', '.join(missing)}")

    producto_id = record["id"]
    nombre = record["nombre"]
    cantidad = record["cantidad"]
    precio = record["precio"]

    if not _is_int(producto_id) or not _is_int(cantidad):
        raise ValidationError(f"id y cantidad deben ser enteros en el registro {position}.")
    if not isinstance(nombre, str):
        raise ValidationError(f"nombre debe ser texto en el registro {position}.")
    if isinstance(precio, bool) or not isinstance(precio, (int, float)):
        raise ValidationError(f"precio debe ser numerico en el registro {position}.")

    return Producto(id=producto_id, nombre=nombre, cantidad=cantidad, precio=float(precio))


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class InventoryPersistence:
    """Guarda y carga el inventario completo en una ruta fija."""

    def __init__(self, path: Path = INVENTORY_FILE) -> None:
        self._path = path
        # Serializa snapshot + escritura para que el ultimo guardado sea el estado mas nuevo.
        self._save_lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._path

    def save(self, store: InventoryStore) -> SavedInventory:
        """Escribe el inventario de manera segura (temp + replace)."""
        with self._save_lock:
            snapshot = store.snapshot()

            temp_path = self._path.with_name(f"{self._path.name}.tmp")
            try:
                serialized = json.dumps(encode_inventory(snapshot), ensure_ascii=False, indent=2)
                payload = (serialized + "\n").encode("utf-8")
                self._path.parent.mkdir(parents=True, exist_ok=True)
                temp_path.write_bytes(payload)
                temp_path.replace(self._path)
            except (OSError, ValueError) as exc:
                # ValueError cubre textos no codificables en UTF-8 (surrogates sueltos).
                LOGGER.error("Error al guardar inventario en %s: %s", self._path, exc)
                raise PersistenceError(
                    f"No fue posible guardar el inventario: {self._path}"
                ) from exc
            finally:
                if temp_path.exists():
                    temp_path.unlink(missing_ok=True)

        LOGGER.info(
            "Inventario guardado en %s (%d productos).",
            self._path,
            snapshot.cantidad_productos,
        )
        return SavedInventory(path=self._path, cantidad_productos=snapshot.cantidad_productos)

    def load(self, capacidad: int) -> InventoryStore:
        """Carga el inventario guardado o retorna uno vacio si no es legible."""
        try:
            productos = self._read_products()
        except FileNotFoundError:
            LOGGER.info("No se encontro inventario previo en %s. Inicio vacio.", self._path)
            return InventoryStore(capacidad)
        except (OSError, ValueError, RecursionError, ValidationError) as exc:
            # ValueError incluye JSONDecodeError, UnicodeDecodeError y enteros demasiado largos.
            LOGGER.warning(
                "Inventario en %s no es legible (%s). Inicio vacio.",
                self._path,
                exc,
            )
            return InventoryStore(capacidad)

        if len(productos) > capacidad:
            LOGGER.warning(
                "El inventario guardado tiene %d productos y supera la capacidad %d. "
                "Se amplia la capacidad para no perder datos.",
                len(productos),
                capacidad,
            )
            capacidad = len(productos)

        LOGGER.info("Inventario cargado desde %s (%d productos).", self._path, len(productos))
        return InventoryStore(capacidad, productos)

    def _read_products(self) -> list[Producto]:
        """Lee y decodifica el archivo de inventario."""
        raw_text = self._path.read_text(encoding="utf-8")
        return decode_inventory(json.loads(raw_text))
