"""Pure formatter for inventory listings."""

from __future__ import annotations

import math
from collections.abc import Iterable

from shared.protocol import ProductRow

EMPTY_INVENTORY_TEXT = "Inventario vacio."
REPORT_TITLE = "Estado del inventario:"


def format_price(precio: float) -> str:
    """Formats a unit price with two decimals and thousands separator."""
    if not math.isfinite(precio):
        return str(precio)
    return f"${precio:,.2f}"


def format_product_line(row: ProductRow) -> str:
    """Builds one ``Campo: valor`` line for a product."""
    return (
        f"ID: {row.id}, Nombre: {row.nombre}, "
        f"Cantidad: {row.cantidad}, Precio: {format_price(row.precio)}"
    )


def format_inventory_report(rows: Iterable[ProductRow]) -> str:
    """Builds the full inventory text, one product per line."""
    lines = [format_product_line(row) for row in rows]
    if not lines:
        return EMPTY_INVENTORY_TEXT
    return "\n".join([REPORT_TITLE, *lines])


def format_stock_value(rows: Iterable[ProductRow]) -> str:
    """Returns the total stock value (quantity times price) as a price text."""
    total = math.fsum(row.cantidad * row.precio for row in rows)
    return format_price(total)
