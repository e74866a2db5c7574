"""Inicializacion de la aplicacion de cliente."""

from __future__ import annotations

import logging
import sys

from PyQt6.QtWidgets import QApplication, QInputDialog

from cliente.backend.controller import AppController
from cliente.backend.gateway import LocalInventoryGateway
from cliente.backend.validators import parse_max_products
from cliente.frontend.dialogs import show_error
from cliente.frontend.main_window import MainWindow
from parametros import DEFAULT_MAX_PRODUCTS
from servidor.services.autosave import AutoSaveWorker
from servidor.services.persistence import InventoryPersistence
from shared.errors import ValidationError

LOGGER = logging.getLogger(__name__)


def ask_max_products() -> int | None:
    """Pide la capacidad maxima hasta recibir un valor valido; None si se cancela."""
    while True:
        raw, accepted = QInputDialog.getText(
            None,
            "Gestor de Stock",
            "Ingrese el numero maximo de productos:",
            text=str(DEFAULT_MAX_PRODUCTS),
        )
        if not accepted:
            return None
        try:
            return parse_max_products(raw)
        except ValidationError as exc:
            show_error(None, "Dato invalido", str(exc))


def main() -> int:
    """Ejecuta la aplicacion grafica."""
    app = QApplication(sys.argv)

    capacidad = ask_max_products()
    if capacidad is None:
        LOGGER.info("Inicio cancelado por el usuario.")
        return 0

    persistence = InventoryPersistence()
    store = persistence.load(capacidad)
    autosave = AutoSaveWorker(store, persistence)
    autosave.start()

    gateway = LocalInventoryGateway(store=store, persistence=persistence)
    controller = AppController(gateway=gateway, autosave=autosave)
    window = MainWindow(controller=controller)
    window.show()

    LOGGER.info("Aplicacion iniciada con capacidad %d.", store.capacidad)
    return app.exec()
