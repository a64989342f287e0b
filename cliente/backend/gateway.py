"""Gateway de comunicacion cliente-servidor."""

from __future__ import annotations

import logging
from typing import Protocol

from servidor.domain.models import Product
from servidor.domain.repository import ProductRepository
from servidor.persistence.memory_repository import InMemoryProductRepository
from servidor.services.product_use_cases import (
    AddProductUseCase,
    DeleteProductUseCase,
    ListAllProductsUseCase,
    UpdateProductUseCase,
)
from shared.errors import ServiceError, ValidationError
from shared.protocol import (
    AddProductRequest,
    AddProductResponse,
    DeleteProductRequest,
    DeleteProductResponse,
    ListProductsResponse,
    ProductView,
    UpdateProductRequest,
    UpdateProductResponse,
)

LOGGER = logging.getLogger(__name__)


class ServerGateway(Protocol):
    """Interfaz de acceso del cliente a servicios del servidor."""

    def add_product(self, request: AddProductRequest) -> AddProductResponse:
        """Solicita el alta de un producto."""

    def update_product(self, request: UpdateProductRequest) -> UpdateProductResponse:
        """Solicita la actualizacion de un producto."""

    def delete_product(self, request: DeleteProductRequest) -> DeleteProductResponse:
        """Solicita la eliminacion de un producto."""

    def list_products(self) -> ListProductsResponse:
        """Solicita el listado completo de productos."""


class LocalServerGateway:
    """Implementacion local del gateway usando casos de uso en memoria."""

    def __init__(self, repository: ProductRepository | None = None) -> None:
        repository = repository if repository is not None else InMemoryProductRepository()
        self._add_product = AddProductUseCase(repository)
        self._update_product = UpdateProductUseCase(repository)
        self._delete_product = DeleteProductUseCase(repository)
        self._list_products = ListAllProductsUseCase(repository)

    def add_product(self, request: AddProductRequest) -> AddProductResponse:
        """Agrega un producto delegando en el caso de uso."""
        try:
            product = self._add_product.execute(
                request.id,
                request.name,
                request.price,
                request.stock,
            )
        except (ServiceError, ValidationError):
            raise
        except Exception as exc:
            LOGGER.exception("Fallo inesperado al agregar producto.")
            raise ServiceError("No fue posible agregar el producto.") from exc

        return AddProductResponse(product=to_view(product))

    def update_product(self, request: UpdateProductRequest) -> UpdateProductResponse:
        """Actualiza un producto delegando en el caso de uso."""
        try:
            product = self._update_product.execute(
                request.id,
                name=request.name,
                price=request.price,
                stock=request.stock,
            )
        except (ServiceError, ValidationError):
            raise
        except Exception as exc:
            LOGGER.exception("Fallo inesperado al actualizar producto.")
            raise ServiceError("No fue posible actualizar el producto.") from exc

        return UpdateProductResponse(product=to_view(product))

    def delete_product(self, request: DeleteProductRequest) -> DeleteProductResponse:
        """Elimina un producto delegando en el caso de uso."""
        try:
            self._delete_product.execute(request.id)
        except (ServiceError, ValidationError):
            raise
        except Exception as exc:
            LOGGER.exception("Fallo inesperado al eliminar producto.")
            raise ServiceError("No fue posible eliminar el producto.") from exc

        return DeleteProductResponse(id=request.id)

    def list_products(self) -> ListProductsResponse:
        """Lista los productos como vistas de solo lectura."""
        try:
            products = self._list_products.execute()
        except Exception as exc:
            LOGGER.exception("Fallo inesperado al listar productos.")
            raise ServiceError("No fue posible listar los productos.") from exc

        return ListProductsResponse(products=[to_view(product) for product in products])


def to_view(product: Product) -> ProductView:
    """Construye una copia inmutable del producto."""
    return ProductView(
        id=product.id,
        name=product.name,
        price=product.price,
        stock=product.stock,
    )
