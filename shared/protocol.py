"""DTOs del protocolo cliente-servidor."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class ProductView:
    """Copia de solo lectura de un producto para la capa cliente."""

    id: str
    name: str
    price: float
    stock: int


@dataclass(slots=True)
class AddProductRequest:
    """Solicitud para agregar un producto."""

    id: str
    name: str
    price: float
    stock: int


@dataclass(slots=True)
class AddProductResponse:
    """Respuesta con el producto agregado."""

    product: ProductView


@dataclass(slots=True)
class UpdateProductRequest:
    """Solicitud de actualizacion; los campos en None no se modifican."""

    id: str
    name: str | None = None
    price: float | None = None
    stock: int | None = None

    def has_changes(self) -> bool:
        """Indica si la solicitud trae al menos un campo a modificar."""
        return any(value is not None for value in (self.name, self.price, self.stock))


@dataclass(slots=True)
class UpdateProductResponse:
    """Respuesta con el estado del producto tras actualizar."""

    product: ProductView


@dataclass(slots=True)
class DeleteProductRequest:
    """Solicitud para eliminar un producto."""

    id: str


@dataclass(slots=True)
class DeleteProductResponse:
    """Respuesta con el ID eliminado."""

    id: str


@dataclass(slots=True)
class ListProductsResponse:
    """Respuesta con todos los productos del inventario."""

    products: list[ProductView] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class OperationResult:
    """Resultado de una accion del controlador listo para mostrar."""

    ok: bool
    message: str
