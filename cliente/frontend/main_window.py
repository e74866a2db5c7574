"""Ventana principal de Gestor de Stock."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QCloseEvent, QColor, QFont
from PyQt6.QtWidgets import (
    QApplication,
    QFrame,
    QGraphicsDropShadowEffect,
    QLabel,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from cliente.backend.controller import AppController
from cliente.frontend.dialogs import show_error
from cliente.frontend.inventory_dialog import InventoryDialog
from cliente.frontend.product_form_dialog import (
    ADD_PRODUCT_FIELDS,
    PLACE_ORDER_FIELDS,
    UPDATE_STOCK_FIELDS,
    ProductFormDialog,
)
from shared.errors import ServiceError


class MainWindow(QMainWindow):
    """Ventana principal con el menu de acciones del inventario."""

    def __init__(self, controller: AppController) -> None:
        super().__init__()
        self._controller = controller

        self._add_button: QPushButton
        self._update_button: QPushButton
        self._order_button: QPushButton
        self._display_button: QPushButton
        self._exit_button: QPushButton

        self.setWindowTitle("Gestor de Stock")
        self.resize(520, 560)
        self.setMinimumSize(420, 480)
        self._build_ui()
        self._apply_styles()
        self._connect_signals()

    def _build_ui(self) -> None:
        """Construye la pagina de menu principal."""
        page = QWidget(self)
        self.setCentralWidget(page)

        root_layout = QVBoxLayout(page)
        root_layout.setContentsMargins(40, 40, 40, 40)
        root_layout.setAlignment(Qt.AlignmentFlag.AlignCenter)

        card = QFrame(page)
        card.setObjectName("mainCard")
        card_layout = QVBoxLayout(card)
        card_layout.setContentsMargins(40, 40, 40, 40)
        card_layout.setSpacing(16)

        title_label = QLabel("Gestor de Stock", card)
        title_label.setObjectName("titleLabel")
        title_label.setFont(QFont("Segoe UI", 22, QFont.Weight.Bold))
        title_label.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._add_button = self._build_button("Agregar producto")
        self._update_button = self._build_button("Actualizar stock")
        self._order_button = self._build_button("Realizar pedido")
        self._display_button = self._build_button("Ver inventario")
        self._exit_button = self._build_button("Salir")
        self._exit_button.setObjectName("exitButton")

        card_layout.addWidget(title_label)
        card_layout.addSpacing(18)
        card_layout.addWidget(self._add_button)
        card_layout.addWidget(self._update_button)
        card_layout.addWidget(self._order_button)
        card_layout.addWidget(self._display_button)
        card_layout.addSpacing(8)
        card_layout.addWidget(self._exit_button)

        shadow = QGraphicsDropShadowEffect(card)
        shadow.setBlurRadius(38)
        shadow.setOffset(0, 8)
        shadow.setColor(QColor(0, 0, 0, 38))
        card.setGraphicsEffect(shadow)

        root_layout.addWidget(card)

    def _apply_styles(self) -> None:
        """Aplica estilos QSS de la interfaz."""
        self.setStyleSheet(
            """
            QMainWindow {
                background-color: #eef1f4;
            }
            QFrame#mainCard {
                background-color: #ffffff;
                border-radius: 18px;
                min-width: 340px;
                max-width: 420px;
            }
            QLabel#titleLabel {
                color: #111827;
            }
            QPushButton {
                background-color: #C80202;
                border: none;
                border-radius: 10px;
                color: #ffffff;
                font-family: "Segoe UI";
                font-size: 15px;
                font-weight: 600;
                min-height: 48px;
                padding: 10px 14px;
            }
            QPushButton:hover {
                background-color: #A30202;
            }
            QPushButton:pressed {
                background-color: #820101;
            }
            QPushButton#exitButton {
                background-color: #e5e7eb;
                color: #1f2937;
            }
            QPushButton#exitButton:hover {
                background-color: #d1d5db;
            }
            """
        )

    def _connect_signals(self) -> None:
        """Conecta botones de UI con acciones del controller."""
        self._add_button.clicked.connect(self._on_add_clicked)
        self._update_button.clicked.connect(self._on_update_clicked)
        self._order_button.clicked.connect(self._on_order_clicked)
        self._display_button.clicked.connect(self._on_display_clicked)
        self._exit_button.clicked.connect(self._on_exit_clicked)

    def _on_add_clicked(self, _checked: bool = False) -> None:
        """Abre formulario para agregar un producto."""
        dialog = ProductFormDialog(
            title="Agregar producto",
            fields=ADD_PRODUCT_FIELDS,
            on_submit=lambda values: self._controller.on_add_product(
                values["id"],
                values["nombre"],
                values["cantidad"],
                values["precio"],
            ),
            submit_text="Agregar",
            parent=self,
        )
        dialog.exec()

    def _on_update_clicked(self, _checked: bool = False) -> None:
        """Abre formulario para reemplazar stock."""
        dialog = ProductFormDialog(
            title="Actualizar stock",
            fields=UPDATE_STOCK_FIELDS,
            on_submit=lambda values: self._controller.on_update_stock(
                values["id"],
                values["cantidad"],
            ),
            submit_text="Actualizar",
            parent=self,
        )
        dialog.exec()

    def _on_order_clicked(self, _checked: bool = False) -> None:
        """Abre formulario para registrar un pedido."""
        dialog = ProductFormDialog(
            title="Realizar pedido",
            fields=PLACE_ORDER_FIELDS,
            on_submit=lambda values: self._controller.on_place_order(
                values["id"],
                values["cantidad"],
            ),
            submit_text="Pedir",
            parent=self,
        )
        dialog.exec()

    def _on_display_clicked(self, _checked: bool = False) -> None:
        """Muestra la tabla con el estado del inventario."""
        try:
            inventory = self._controller.list_inventory()
        except ServiceError as exc:
            show_error(self, "Inventario", str(exc))
            return

        dialog = InventoryDialog(inventory.products, inventory.capacidad, parent=self)
        dialog.exec()

    def _on_exit_clicked(self) -> None:
        """Solicita al controller el cierre de la app."""
        self._controller.on_exit(QApplication.instance())

    def closeEvent(self, event: QCloseEvent) -> None:  # noqa: N802
        """Guarda antes de cerrar la ventana."""
        self._controller.on_exit(None)
        event.accept()

    @staticmethod
    def _build_button(text: str) -> QPushButton:
        """Construye un boton estandar del menu principal."""
        button = QPushButton(text)
        button.setCursor(Qt.CursorShape.PointingHandCursor)
        return button
