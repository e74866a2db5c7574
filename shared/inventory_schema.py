"""Esquema canonico del archivo de inventario compartido por cliente/servidor."""

from __future__ import annotations

FORMAT_KEY = "formato"
VERSION_KEY = "version"
CAPACITY_KEY = "capacidad"
COUNT_KEY = "cantidad_productos"
PRODUCTS_KEY = "productos"

FORMAT_NAME = "gestor-stock/inventario"
FORMAT_VERSION = 1

PRODUCT_FIELDS: tuple[str, ...] = (
    "id",
    "nombre",
    "cantidad",
    "precio",
)


def missing_product_fields(record: dict[str, object]) -> list[str]:
    """Retorna los campos de producto ausentes en un registro."""
    return [field for field in PRODUCT_FIELDS if field not in record]


def is_supported_header(formato: object, version: object) -> bool:
    """Indica si formato y version corresponden al esquema vigente."""
    return formato == FORMAT_NAME and version == FORMAT_VERSION and not isinstance(version, bool)
