"""Validaciones para entradas del cliente."""

from __future__ import annotations

import math

from shared.errors import ValidationError


def parse_int_field(raw: str | None, field_label: str) -> int:
    """Parsea un entero desde texto ingresado por el usuario."""
    text = (raw or "").strip()
    if not text:
        raise ValidationError(f"{field_label} no puede estar vacio.")

    try:
        return int(text)
    except ValueError as exc:
        raise ValidationError(f"{field_label} debe ser un numero entero: {text}") from exc


def parse_product_id(raw: str | None) -> int:
    """Parsea el ID de producto."""
    return parse_int_field(raw, "ID de producto")


def parse_product_name(raw: str | None) -> str:
    """Valida que el nombre de producto no este vacio."""
    name = (raw or "").strip()
    if not name:
        raise ValidationError("El nombre del producto no puede estar vacio.")
    return name


def parse_quantity(raw: str | None, field_label: str = "Cantidad") -> int:
    """Parsea una cantidad de stock (entero >= 0)."""
    value = parse_int_field(raw, field_label)
    if value < 0:
        raise ValidationError(f"{field_label} no puede ser negativa.")
    return value


def parse_order_quantity(raw: str | None) -> int:
    """Parsea la cantidad de un pedido (entero > 0)."""
    value = parse_int_field(raw, "Cantidad del pedido")
    if value <= 0:
        raise ValidationError("Cantidad del pedido debe ser mayor a 0.")
    return value


def parse_price(raw: str | None) -> float:
    """Parsea un precio finito y no negativo; acepta coma decimal."""
    text = (raw or "").strip().replace(",", ".")
    if not text:
        raise ValidationError("Precio no puede estar vacio.")

    try:
        value = float(text)
    except ValueError as exc:
        raise ValidationError(f"Precio debe ser numerico: {text}") from exc

    if not math.isfinite(value):
        raise ValidationError(f"Precio invalido: {text}")
    if value < 0:
        raise ValidationError("Precio no puede ser negativo.")
    return value


def parse_max_products(raw: str | None) -> int:
    """Parsea la capacidad maxima del inventario (entero > 0)."""
    value = parse_int_field(raw, "Maximo de productos")
    if value <= 0:
        raise ValidationError("Maximo de productos debe ser mayor a 0.")
    return value
