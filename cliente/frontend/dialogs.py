"""Helpers de dialogos para frontend."""

from __future__ import annotations

from PyQt6.QtWidgets import QMessageBox, QWidget


def show_info(parent: QWidget | None, title: str, message: str) -> None:
    """Muestra el resultado exitoso de una operacion."""
    QMessageBox.information(parent, title, message)


def show_warning(parent: QWidget | None, title: str, message: str) -> None:
    """Muestra una operacion rechazada por el inventario (lleno, sin stock, no encontrado)."""
    QMessageBox.warning(parent, title, message)


def show_error(parent: QWidget | None, title: str, message: str) -> None:
    """Muestra un error de validacion o de servicio."""
    QMessageBox.critical(parent, title, message)
