"""Tests for inventory text formatter."""

from __future__ import annotations

import unittest

from cliente.backend.product_formatter import (
    format_inventory_report,
    format_price,
    format_product_line,
    format_stock_value,
)
from shared.protocol import ProductRow


class ProductFormatterTests(unittest.TestCase):
    """Validates listing text for the inventory views."""

    def test_format_price_two_decimals_and_thousands(self) -> None:
        """Formats prices with two decimals and comma thousands separator."""
        self.assertEqual(format_price(2.5), "$2.50")
        self.assertEqual(format_price(1234.5), "$1,234.50")

    def test_format_product_line(self) -> None:
        """Builds the single-product line with every field."""
        line = format_product_line(ProductRow(1, "Widget", 6, 2.5))

        self.assertEqual(line, "ID: 1, Nombre: Widget, Cantidad: 6, Precio: $2.50")

    def test_empty_report(self) -> None:
        """Reports an empty inventory explicitly."""
        self.assertEqual(format_inventory_report([]), "Inventario vacio.")

    def test_report_keeps_row_order(self) -> None:
        """Lists products under the title in the given order."""
        report = format_inventory_report(
            [ProductRow(2, "Gadget", 0, 9.99), ProductRow(1, "Widget", 6, 2.5)]
        )

        lines = report.splitlines()
        self.assertEqual(lines[0], "Estado del inventario:")
        self.assertTrue(lines[1].startswith("ID: 2, Nombre: Gadget"))
        self.assertTrue(lines[2].startswith("ID: 1, Nombre: Widget"))

    def test_stock_value_sums_quantity_times_price(self) -> None:
        """Multiplies quantity and price per row."""
        rows = [ProductRow(1, "Widget", 6, 2.5), ProductRow(2, "Gadget", 2, 10.0)]

        self.assertEqual(format_stock_value(rows), "$35.00")
        self.assertEqual(format_stock_value([]), "$0.00")


if __name__ == "__main__":
    unittest.main()
