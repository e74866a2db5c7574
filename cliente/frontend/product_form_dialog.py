"""Dialogo de formulario para operaciones de inventario."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QColor
from PyQt6.QtWidgets import (
    QDialog,
    QFrame,
    QGraphicsDropShadowEffect,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from cliente.frontend.dialogs import show_error, show_info, show_warning
from shared.errors import ServiceError, ValidationError
from shared.protocol import OperationResponse


@dataclass(frozen=True, slots=True)
class FormField:
    """Campo de texto del formulario."""

    key: str
    label: str
    placeholder: str = ""


ADD_PRODUCT_FIELDS: tuple[FormField, ...] = (
    FormField("id", "ID de producto", "1"),
    FormField("nombre", "Nombre", "Widget"),
    FormField("cantidad", "Cantidad", "10"),
    FormField("precio", "Precio", "2.50"),
)

UPDATE_STOCK_FIELDS: tuple[FormField, ...] = (
    FormField("id", "ID de producto a actualizar", "1"),
    FormField("cantidad", "Nueva cantidad en stock", "0"),
)

PLACE_ORDER_FIELDS: tuple[FormField, ...] = (
    FormField("id", "ID de producto a pedir", "1"),
    FormField("cantidad", "Cantidad del pedido", "1"),
)


class ProductFormDialog(QDialog):
    """Dialogo modal que envia los valores ingresados al controller."""

    def __init__(
        self,
        title: str,
        fields: Sequence[FormField],
        on_submit: Callable[[dict[str, str]], OperationResponse],
        submit_text: str = "Aceptar",
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._title = title
        self._fields = tuple(fields)
        self._on_submit = on_submit
        self._submit_text = submit_text
        self._inputs: dict[str, QLineEdit] = {}

        self.setWindowTitle(title)
        self.setModal(True)
        self.setMinimumSize(420, 160 + 70 * len(self._fields))

        self._build_ui()
        self._apply_styles()

    def _build_ui(self) -> None:
        """Construye widgets del dialogo."""
        root_layout = QVBoxLayout(self)
        root_layout.setContentsMargins(18, 18, 18, 18)

        card = QFrame(self)
        card.setObjectName("dialogCard")
        card_layout = QVBoxLayout(card)
        card_layout.setContentsMargins(24, 24, 24, 24)
        card_layout.setSpacing(10)

        title_label = QLabel(self._title, card)
        title_label.setObjectName("titleLabel")
        title_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        card_layout.addWidget(title_label)
        card_layout.addSpacing(4)

        for form_field in self._fields:
            label = QLabel(form_field.label, card)
            label.setObjectName("fieldLabel")
            line_edit = QLineEdit(card)
            line_edit.setPlaceholderText(form_field.placeholder)
            line_edit.returnPressed.connect(self._on_submit_clicked)
            self._inputs[form_field.key] = line_edit
            card_layout.addWidget(label)
            card_layout.addWidget(line_edit)

        buttons_layout = QHBoxLayout()
        buttons_layout.addStretch(1)

        cancel_button = QPushButton("Cancelar", card)
        cancel_button.setObjectName("cancelButton")
        submit_button = QPushButton(self._submit_text, card)

        cancel_button.clicked.connect(self.reject)
        submit_button.clicked.connect(self._on_submit_clicked)

        buttons_layout.addWidget(cancel_button)
        buttons_layout.addWidget(submit_button)
        card_layout.addSpacing(4)
        card_layout.addLayout(buttons_layout)

        shadow = QGraphicsDropShadowEffect(card)
        shadow.setBlurRadius(30)
        shadow.setOffset(0, 6)
        shadow.setColor(QColor(0, 0, 0, 35))
        card.setGraphicsEffect(shadow)

        root_layout.addWidget(card)
        if self._fields:
            self._inputs[self._fields[0].key].setFocus()

    def _apply_styles(self) -> None:
        """Aplica estilos visuales consistentes con la app."""
        self.setStyleSheet(
            """
            QDialog {
                background-color: #eef1f4;
            }
            QFrame#dialogCard {
                background-color: #ffffff;
                border-radius: 16px;
            }
            QLabel#titleLabel {
                color: #20232a;
                font-family: "Segoe UI";
                font-size: 20px;
                font-weight: 700;
            }
            QLabel#fieldLabel {
                color: #334155;
                font-family: "Segoe UI";
                font-size: 13px;
                font-weight: 600;
            }
            QLineEdit {
                background-color: #f8fafc;
                border: 1px solid #d1d5db;
                border-radius: 8px;
                color: #111827;
                font-family: "Segoe UI";
                font-size: 13px;
                padding: 8px;
            }
            QLineEdit:focus {
                border: 1px solid #2563eb;
                background-color: #ffffff;
            }
            QPushButton {
                background-color: #2563eb;
                border: none;
                border-radius: 10px;
                color: #ffffff;
                font-family: "Segoe UI";
                font-size: 13px;
                font-weight: 600;
                min-height: 38px;
                min-width: 100px;
                padding: 8px 12px;
            }
            QPushButton:hover {
                background-color: #1d4ed8;
            }
            QPushButton#cancelButton {
                background-color: #e5e7eb;
                color: #1f2937;
            }
            QPushButton#cancelButton:hover {
                background-color: #d1d5db;
            }
            """
        )

    def values(self) -> dict[str, str]:
        """Retorna el texto ingresado por campo."""
        return {key: line_edit.text() for key, line_edit in self._inputs.items()}

    def _on_submit_clicked(self) -> None:
        """Envia los valores; cierra solo si la operacion fue exitosa."""
        try:
            response = self._on_submit(self.values())
        except (ValidationError, ServiceError) as exc:
            show_error(self, "Dato invalido", str(exc))
            return

        if not response.ok:
            show_warning(self, self._title, response.message)
            return

        show_info(self, self._title, response.message)
        self.accept()
