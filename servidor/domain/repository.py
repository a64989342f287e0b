"""Contrato de almacenamiento de productos."""

from __future__ import annotations

from typing import Protocol

from .models import Product


class ProductRepository(Protocol):
    """Interfaz de acceso de los casos de uso al almacen de productos."""

    def save(self, product: Product) -> None:
        """Guarda o reemplaza un producto segun su ID."""

    def find_by_id(self, product_id: str) -> Product | None:
        """Retorna el producto con el ID indicado o None si no existe."""

    def find_all(self) -> list[Product]:
        """Retorna una copia de la coleccion de productos."""

    def delete(self, product_id: str) -> None:
        """Elimina el producto con el ID indicado si existe."""
