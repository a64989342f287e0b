"""Formato de texto de productos para la consola."""

from __future__ import annotations

from collections.abc import Sequence

from shared.protocol import ProductView

EMPTY_INVENTORY_MESSAGE = "No hay productos en el inventario."
LIST_HEADER = "--- Lista de Productos ---"
LIST_FOOTER = "--------------------------"


def format_product_line(product: ProductView) -> str:
    """Construye la linea ``ID: x, Nombre: y, Precio: 0.00, Stock: n``."""
    return (
        f"ID: {product.id}, Nombre: {product.name}, "
        f"Precio: {product.price:.2f}, Stock: {product.stock}"
    )


def format_product_list(products: Sequence[ProductView]) -> str:
    """Construye el bloque de listado, o el aviso de inventario vacio."""
    if not products:
        return EMPTY_INVENTORY_MESSAGE

    lines = [LIST_HEADER]
    lines.extend(format_product_line(product) for product in products)
    lines.append(LIST_FOOTER)
    return "\n".join(lines)
