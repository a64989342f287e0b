"""Modelos de dominio de inventario."""

from __future__ import annotations

from typing import Any

from parametros import MAX_PRICE, MIN_PRICE, PRODUCT_ID_PATTERN, PRODUCT_NAME_PATTERN
from shared.errors import ValidationError


class Product:
    """Representa un producto en inventario.

    El constructor aplica las reglas completas de alta (patrones de ID y
    nombre, rango de precio). Los setters de ``name``, ``price`` y ``stock``
    aplican reglas mas laxas: nombre no vacio, precio mayor a cero y stock no
    negativo. El ``id`` no cambia despues de construido.
    """

    __slots__ = ("_id", "_name", "_price", "_stock")

    def __init__(self, id: str, name: str, price: float, stock: int) -> None:
        if not _has_text(id):
            raise ValidationError("El ID del producto no puede ser nulo o vacio.")
        if not PRODUCT_ID_PATTERN.fullmatch(id):
            raise ValidationError(
                "ID invalido. Usa entre 3 y 20 letras, numeros, guiones o guiones bajos."
            )

        if not _has_text(name):
            raise ValidationError("El nombre del producto no puede ser nulo o vacio.")
        if not PRODUCT_NAME_PATTERN.fullmatch(name):
            raise ValidationError(
                "Nombre invalido. Usa entre 3 y 50 letras, numeros, espacios o .,'-"
            )

        _ensure_number(price)
        if not MIN_PRICE <= price <= MAX_PRICE:
            raise ValidationError(
                f"El precio del producto debe estar entre {MIN_PRICE:.2f} y {MAX_PRICE:.2f}."
            )

        _ensure_stock(stock)

        self._id = id
        self._name = name
        self._price = price
        self._stock = stock

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        if not _has_text(value):
            raise ValidationError("El nombre del producto no puede ser nulo o vacio.")
        self._name = value

    @property
    def price(self) -> float:
        return self._price

    @price.setter
    def price(self, value: float) -> None:
        _ensure_number(value)
        if not value > 0:
            raise ValidationError("El precio del producto debe ser mayor que cero.")
        self._price = value

    @property
    def stock(self) -> int:
        return self._stock

    @stock.setter
    def stock(self, value: int) -> None:
        _ensure_stock(value)
        self._stock = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Product):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"Product(id={self._id!r}, name={self._name!r}, "
            f"price={self._price!r}, stock={self._stock!r})"
        )


def _has_text(value: Any) -> bool:
    """Indica si el valor es un string con contenido distinto de espacios."""
    return isinstance(value, str) and bool(value.strip())


def _ensure_number(value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError("El precio del producto debe ser numerico.")


def _ensure_stock(value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError("El stock del producto debe ser un numero entero.")
    if value < 0:
        raise ValidationError("El stock del producto no puede ser negativo.")
