"""Muestra en consola el inventario guardado en disco."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from cliente.backend.product_formatter import format_inventory_report, format_stock_value
from parametros import DEFAULT_MAX_PRODUCTS, INVENTORY_FILE
from servidor.services.persistence import InventoryPersistence
from shared.protocol import ProductRow

LOGGER = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parsea argumentos CLI."""
    parser = argparse.ArgumentParser(
        description="Imprime el estado de un archivo de inventario guardado."
    )
    parser.add_argument(
        "--file",
        type=Path,
        default=INVENTORY_FILE,
        help=f"Ruta del archivo de inventario (default: {INVENTORY_FILE}).",
    )
    parser.add_argument(
        "--capacity",
        type=int,
        default=DEFAULT_MAX_PRODUCTS,
        help="Capacidad con la que se carga el inventario.",
    )
    return parser.parse_args(argv)


def configure_logging() -> None:
    """Configura logging para salida en consola."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s | %(levelname)s | %(message)s",
    )


def show_inventory(path: Path, capacidad: int) -> int:
    """Carga el inventario e imprime el reporte. Retorna codigo de salida."""
    if not path.is_file():
        LOGGER.error("No existe archivo de inventario: %s", path)
        return 1
    if capacidad <= 0:
        LOGGER.error("--capacity debe ser mayor a 0.")
        return 1

    store = InventoryPersistence(path).load(capacidad)
    rows = [
        ProductRow(
            id=producto.id,
            nombre=producto.nombre,
            cantidad=producto.cantidad,
            precio=producto.precio,
        )
        for producto in store.list_all()
    ]

    print(format_inventory_report(rows))
    print(f"Productos: {len(rows)}/{store.capacidad} | Valor total: {format_stock_value(rows)}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Punto de entrada CLI."""
    configure_logging()
    args = parse_args(argv)
    return show_inventory(path=args.file, capacidad=args.capacity)


if __name__ == "__main__":
    raise SystemExit(main())
