"""Validaciones y parseo de entradas del cliente."""

from __future__ import annotations

import math

from shared.errors import ValidationError


def parse_menu_option(raw: str) -> int:
    """Convierte la opcion del menu a entero."""
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise ValidationError("Entrada invalida. Por favor, ingrese un numero.") from exc


def parse_price(raw: str) -> float:
    """Parsea un precio decimal; acepta coma o punto como separador."""
    text = raw.strip().replace(",", ".")
    try:
        value = float(text)
    except ValueError as exc:
        raise ValidationError(
            "Entrada invalida para Precio. Por favor, ingrese un numero decimal."
        ) from exc

    if not math.isfinite(value):
        raise ValidationError(
            "Entrada invalida para Precio. Por favor, ingrese un numero decimal."
        )
    return value


def parse_stock(raw: str) -> int:
    """Parsea un stock entero."""
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise ValidationError(
            "Entrada invalida para Stock. Por favor, ingrese un numero entero."
        ) from exc


def parse_optional_name(raw: str) -> str | None:
    """Retorna el nombre sin espacios extremos o None si viene en blanco."""
    name = raw.strip()
    return name or None


def parse_optional_price(raw: str) -> float | None:
    """Como parse_price, pero una entrada en blanco significa sin cambios."""
    if not raw.strip():
        return None
    return parse_price(raw)


def parse_optional_stock(raw: str) -> int | None:
    """Como parse_stock, pero una entrada en blanco significa sin cambios."""
    if not raw.strip():
        return None
    return parse_stock(raw)
