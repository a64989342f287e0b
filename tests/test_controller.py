"""Tests de mensajes y manejo de errores en ProductController."""

from __future__ import annotations

import unittest
from unittest import mock

from cliente.backend.controller import ProductController
from cliente.backend.gateway import LocalServerGateway
from cliente.backend.product_formatter import EMPTY_INVENTORY_MESSAGE
from shared.errors import ServiceError


class ProductControllerTests(unittest.TestCase):
    """Valida conversion de resultados y errores a mensajes."""

    def setUp(self) -> None:
        self.gateway = LocalServerGateway()
        self.controller = ProductController(gateway=self.gateway)

    def test_add_product_success_message(self) -> None:
        """Debe informar el nombre del producto agregado."""
        result = self.controller.add_product("abc123", "Widget", 9.99, 5)

        self.assertTrue(result.ok)
        self.assertEqual(result.message, "Producto 'Widget' agregado con exito.")

    def test_add_duplicate_returns_error_without_raising(self) -> None:
        """Debe retornar error al repetir ID."""
        self.controller.add_product("abc123", "Widget", 9.99, 5)

        with self.assertLogs("cliente.backend.controller", level="WARNING"):
            result = self.controller.add_product("abc123", "Other", 1.0, 1)

        self.assertFalse(result.ok)
        self.assertIn("Ya existe un producto con el ID: abc123", result.message)
        self.assertEqual(len(self.controller.list_products()), 1)

    def test_add_invalid_data_uses_generic_message(self) -> None:
        """Debe mostrar mensaje generico ante datos invalidos."""
        result = self.controller.add_product("abc123", "Widget", 0, 5)

        self.assertFalse(result.ok)
        self.assertEqual(result.message, "Error al agregar producto: Datos de producto invalidos.")

    def test_update_missing_product(self) -> None:
        """Debe informar que el producto no existe."""
        result = self.controller.update_product("nope", stock=3)

        self.assertFalse(result.ok)
        self.assertTrue(result.message.startswith("Error al actualizar producto:"))
        self.assertIn("nope", result.message)

    def test_update_invalid_value_reports_validation_error(self) -> None:
        """Debe distinguir errores de validacion en la actualizacion."""
        self.controller.add_product("abc123", "Widget", 9.99, 5)

        result = self.controller.update_product("abc123", price=-1)

        self.assertFalse(result.ok)
        self.assertEqual(
            result.message,
            "Error de validacion al actualizar producto: "
            "El precio del producto debe ser mayor que cero.",
        )

    def test_update_success(self) -> None:
        """Debe actualizar y confirmar por ID."""
        self.controller.add_product("abc123", "Widget", 9.99, 5)

        result = self.controller.update_product("abc123", name="Widget Pro")

        self.assertTrue(result.ok)
        self.assertEqual(result.message, "Producto con ID 'abc123' actualizado con exito.")
        self.assertEqual(self.controller.list_products()[0].name, "Widget Pro")

    def test_delete_success_and_missing(self) -> None:
        """Debe eliminar una vez y fallar la segunda."""
        self.controller.add_product("abc123", "Widget", 9.99, 5)

        first = self.controller.delete_product("abc123")
        second = self.controller.delete_product("abc123")

        self.assertTrue(first.ok)
        self.assertEqual(first.message, "Producto con ID 'abc123' eliminado con exito.")
        self.assertFalse(second.ok)
        self.assertTrue(second.message.startswith("Error al eliminar producto:"))

    def test_list_products_text(self) -> None:
        """Debe formatear inventario vacio y con productos."""
        self.assertEqual(self.controller.list_products_text().message, EMPTY_INVENTORY_MESSAGE)

        self.controller.add_product("abc123", "Widget", 9.99, 5)
        text = self.controller.list_products_text().message

        self.assertIn("ID: abc123, Nombre: Widget, Precio: 9.99, Stock: 5", text)

    def test_service_failures_become_messages(self) -> None:
        """Errores de servicio inesperados no deben propagarse."""
        with mock.patch.object(
            self.gateway,
            "list_products",
            side_effect=ServiceError("No fue posible listar los productos."),
        ):
            result = self.controller.list_products_text()

        self.assertFalse(result.ok)
        self.assertIn("No fue posible listar los productos.", result.message)


if __name__ == "__main__":
    unittest.main()
