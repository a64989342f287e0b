"""Casos de uso de productos: agregar, actualizar, eliminar y listar."""

from __future__ import annotations

import logging

from servidor.domain.models import Product
from servidor.domain.repository import ProductRepository
from shared.errors import (
    DuplicateIdError,
    InvalidProductDataError,
    NotFoundError,
    ValidationError,
)

LOGGER = logging.getLogger(__name__)

# Las verificaciones de existencia previas a save/delete asumen un unico
# llamador a la vez; con acceso concurrente requieren un lock por ID.


class AddProductUseCase:
    """Agrega un producto nuevo validando que su ID no exista."""

    def __init__(self, repository: ProductRepository) -> None:
        self._repository = repository

    def execute(self, id: str, name: str, price: float, stock: int) -> Product:
        """Crea y guarda el producto.

        Raises:
            DuplicateIdError: si ya existe un producto con ese ID.
            InvalidProductDataError: si los datos no pasan la validacion del
                producto. El mensaje es generico; el detalle queda encadenado.
        """
        if self._repository.find_by_id(id) is not None:
            raise DuplicateIdError(f"Ya existe un producto con el ID: {id}")

        try:
            product = Product(id, name, price, stock)
        except ValidationError as exc:
            LOGGER.warning("Alta rechazada por datos invalidos: %s", exc)
            raise InvalidProductDataError("Datos de producto invalidos.") from exc

        self._repository.save(product)
        LOGGER.info("Producto agregado: id=%s", product.id)
        return product


class UpdateProductUseCase:
    """Actualiza los campos indicados de un producto existente."""

    def __init__(self, repository: ProductRepository) -> None:
        self._repository = repository

    def execute(
        self,
        id: str,
        name: str | None = None,
        price: float | None = None,
        stock: int | None = None,
    ) -> Product:
        """Aplica cada campo no nulo en orden nombre, precio, stock.

        Los cambios no se revierten: si el precio es invalido, un nombre
        valido ya aplicado se mantiene.

        Raises:
            NotFoundError: si el producto no existe.
            ValidationError: si algun campo no pasa la validacion del setter.
        """
        product = self._repository.find_by_id(id)
        if product is None:
            raise NotFoundError(f"Producto con ID {id} no encontrado para actualizar.")

        if name is not None:
            product.name = name
        if price is not None:
            product.price = price
        if stock is not None:
            product.stock = stock

        self._repository.save(product)
        LOGGER.info("Producto actualizado: id=%s", product.id)
        return product


class DeleteProductUseCase:
    """Elimina un producto existente."""

    def __init__(self, repository: ProductRepository) -> None:
        self._repository = repository

    def execute(self, id: str) -> None:
        """Raises NotFoundError si el producto no existe."""
        if self._repository.find_by_id(id) is None:
            raise NotFoundError(f"Producto con ID {id} no encontrado para eliminar.")

        self._repository.delete(id)
        LOGGER.info("Producto eliminado: id=%s", id)


class ListAllProductsUseCase:
    """Lista todos los productos del almacen."""

    def __init__(self, repository: ProductRepository) -> None:
        self._repository = repository

    def execute(self) -> list[Product]:
        return self._repository.find_all()
