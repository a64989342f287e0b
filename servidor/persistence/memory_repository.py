"""Almacen de productos en memoria."""

from __future__ import annotations

import logging

from servidor.domain.models import Product

LOGGER = logging.getLogger(__name__)


class InMemoryProductRepository:
    """Implementacion de ProductRepository sobre un dict indexado por ID.

    El contenido vive solo mientras dure el proceso. Cada instancia es
    independiente; no existe un almacen global.
    """

    def __init__(self) -> None:
        self._products: dict[str, Product] = {}

    def save(self, product: Product) -> None:
        """Inserta o sobrescribe el producto."""
        self._products[product.id] = product
        LOGGER.debug("Producto guardado: id=%s", product.id)

    def find_by_id(self, product_id: str) -> Product | None:
        """Busca un producto por su ID."""
        return self._products.get(product_id)

    def find_all(self) -> list[Product]:
        """Retorna una lista nueva; modificarla no altera el almacen."""
        return list(self._products.values())

    def delete(self, product_id: str) -> None:
        """Elimina el producto; no hace nada si el ID no existe."""
        if self._products.pop(product_id, None) is not None:
            LOGGER.debug("Producto eliminado: id=%s", product_id)

    def __len__(self) -> int:
        return len(self._products)
