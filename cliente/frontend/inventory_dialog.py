"""Dialogo para visualizar y copiar el estado del inventario."""

from __future__ import annotations

from collections.abc import Sequence

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QColor
from PyQt6.QtWidgets import (
    QAbstractItemView,
    QApplication,
    QDialog,
    QGraphicsDropShadowEffect,
    QHBoxLayout,
    QHeaderView,
    QLabel,
    QPushButton,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from cliente.backend.product_formatter import (
    EMPTY_INVENTORY_TEXT,
    format_inventory_report,
    format_price,
    format_stock_value,
)
from shared.protocol import ProductRow


class InventoryDialog(QDialog):
    """Dialogo de solo lectura con la tabla de productos."""

    _HEADERS = ("ID", "Nombre", "Cantidad", "Precio")

    def __init__(
        self,
        rows: Sequence[ProductRow],
        capacidad: int,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._rows = list(rows)
        self._capacidad = capacidad

        self.setWindowTitle("Inventario")
        self.setModal(True)
        self.resize(640, 440)

        self._build_ui()
        self._apply_styles()

    def _build_ui(self) -> None:
        """Construye layout y widgets del dialogo."""
        root_layout = QVBoxLayout(self)
        root_layout.setContentsMargins(18, 18, 18, 18)
        root_layout.setSpacing(12)

        title_label = QLabel("Estado del inventario", self)
        title_label.setObjectName("detailsTitle")

        summary_label = QLabel(
            f"{len(self._rows)} de {self._capacidad} productos | "
            f"Valor total: {format_stock_value(self._rows)}",
            self,
        )
        summary_label.setObjectName("summaryLabel")

        table = QTableWidget(len(self._rows), len(self._HEADERS), self)
        table.setHorizontalHeaderLabels(self._HEADERS)
        table.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        table.setSelectionBehavior(QAbstractItemView.SelectionBehavior.SelectRows)
        table.verticalHeader().setVisible(False)
        table.horizontalHeader().setSectionResizeMode(1, QHeaderView.ResizeMode.Stretch)
        for row_index, row in enumerate(self._rows):
            values = (str(row.id), row.nombre, str(row.cantidad), format_price(row.precio))
            for column_index, value in enumerate(values):
                item = QTableWidgetItem(value)
                if column_index != 1:
                    item.setTextAlignment(
                        Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter
                    )
                table.setItem(row_index, column_index, item)

        empty_label = QLabel(EMPTY_INVENTORY_TEXT, self)
        empty_label.setObjectName("summaryLabel")
        empty_label.setVisible(not self._rows)

        buttons_layout = QHBoxLayout()
        buttons_layout.setSpacing(10)

        copy_button = QPushButton("Copiar", self)
        back_button = QPushButton("Regresar", self)
        back_button.setObjectName("backButton")

        copy_button.clicked.connect(self._copy_to_clipboard)
        back_button.clicked.connect(self.close)

        buttons_layout.addWidget(copy_button)
        buttons_layout.addWidget(back_button)

        root_layout.addWidget(title_label)
        root_layout.addWidget(summary_label)
        root_layout.addWidget(table)
        root_layout.addWidget(empty_label)
        root_layout.addLayout(buttons_layout)

        shadow = QGraphicsDropShadowEffect(self)
        shadow.setBlurRadius(22)
        shadow.setOffset(0, 4)
        shadow.setColor(QColor(0, 0, 0, 24))
        self.setGraphicsEffect(shadow)

    def _apply_styles(self) -> None:
        """Aplica estilos alineados al look general de la app."""
        self.setStyleSheet(
            """
            QDialog {
                background-color: #ffffff;
                border: 1px solid #dbe2ea;
                border-radius: 14px;
            }
            QLabel#detailsTitle {
                color: #334155;
                font-family: "Segoe UI";
                font-size: 16px;
                font-weight: 600;
            }
            QLabel#summaryLabel {
                color: #475569;
                font-family: "Segoe UI";
                font-size: 13px;
            }
            QTableWidget {
                background-color: #f8fafc;
                border: 1px solid #d1d5db;
                border-radius: 8px;
                color: #111827;
                font-family: "Segoe UI";
                font-size: 13px;
            }
            QPushButton {
                background-color: #2563eb;
                border: none;
                border-radius: 10px;
                color: #ffffff;
                font-family: "Segoe UI";
                font-size: 13px;
                font-weight: 600;
                min-height: 36px;
                padding: 6px 12px;
            }
            QPushButton:hover {
                background-color: #1d4ed8;
            }
            QPushButton#backButton {
                background-color: #e5e7eb;
                color: #1f2937;
            }
            QPushButton#backButton:hover {
                background-color: #d1d5db;
            }
            """
        )

    def _copy_to_clipboard(self) -> None:
        """Copia el reporte del inventario al portapapeles."""
        QApplication.clipboard().setText(format_inventory_report(self._rows))
