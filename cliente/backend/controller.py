"""Controlador principal del cliente."""

from __future__ import annotations

import logging

from shared.errors import NotFoundError, ServiceError, ValidationError
from shared.protocol import (
    AddProductRequest,
    DeleteProductRequest,
    OperationResult,
    ProductView,
    UpdateProductRequest,
)

from .gateway import ServerGateway
from .product_formatter import format_product_list

LOGGER = logging.getLogger(__name__)


class ProductController:
    """Coordina acciones del menu y servicios de negocio.

    Los errores de dominio se convierten en mensajes para el usuario; ninguna
    accion propaga excepciones de servicio hacia el menu.
    """

    def __init__(self, gateway: ServerGateway) -> None:
        self._gateway = gateway

    def add_product(self, id: str, name: str, price: float, stock: int) -> OperationResult:
        """Agrega un producto y retorna el mensaje de resultado."""
        request = AddProductRequest(id=id, name=name, price=price, stock=stock)
        try:
            response = self._gateway.add_product(request)
        except (ServiceError, ValidationError) as exc:
            LOGGER.warning("No se pudo agregar producto id=%s: %s", id, exc)
            return OperationResult(ok=False, message=f"Error al agregar producto: {exc}")

        return OperationResult(
            ok=True,
            message=f"Producto '{response.product.name}' agregado con exito.",
        )

    def update_product(
        self,
        id: str,
        name: str | None = None,
        price: float | None = None,
        stock: int | None = None,
    ) -> OperationResult:
        """Actualiza los campos no nulos del producto."""
        request = UpdateProductRequest(id=id, name=name, price=price, stock=stock)
        if not request.has_changes():
            LOGGER.debug("Actualizacion sin campos a modificar: id=%s", id)

        try:
            self._gateway.update_product(request)
        except NotFoundError as exc:
            LOGGER.warning("No se pudo actualizar producto id=%s: %s", id, exc)
            return OperationResult(ok=False, message=f"Error al actualizar producto: {exc}")
        except ValidationError as exc:
            LOGGER.warning("Actualizacion invalida para id=%s: %s", id, exc)
            return OperationResult(
                ok=False,
                message=f"Error de validacion al actualizar producto: {exc}",
            )
        except ServiceError as exc:
            return OperationResult(ok=False, message=f"Error al actualizar producto: {exc}")

        return OperationResult(ok=True, message=f"Producto con ID '{id}' actualizado con exito.")

    def delete_product(self, id: str) -> OperationResult:
        """Elimina el producto indicado."""
        try:
            self._gateway.delete_product(DeleteProductRequest(id=id))
        except ServiceError as exc:
            LOGGER.warning("No se pudo eliminar producto id=%s: %s", id, exc)
            return OperationResult(ok=False, message=f"Error al eliminar producto: {exc}")

        return OperationResult(ok=True, message=f"Producto con ID '{id}' eliminado con exito.")

    def list_products(self) -> list[ProductView]:
        """Retorna todos los productos como vistas de solo lectura."""
        return self._gateway.list_products().products

    def list_products_text(self) -> OperationResult:
        """Retorna el listado de productos formateado para consola."""
        try:
            products = self.list_products()
        except ServiceError as exc:
            return OperationResult(ok=False, message=f"Error al listar productos: {exc}")

        return OperationResult(ok=True, message=format_product_list(products))
