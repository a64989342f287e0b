"""Tests para InMemoryProductRepository."""

from __future__ import annotations

import unittest

from servidor.domain.models import Product
from servidor.persistence.memory_repository import InMemoryProductRepository


class InMemoryProductRepositoryTests(unittest.TestCase):
    """Valida upsert, busqueda, listado y borrado en memoria."""

    def setUp(self) -> None:
        self.repository = InMemoryProductRepository()

    def test_find_all_on_empty_store_returns_empty_list(self) -> None:
        """Debe retornar lista vacia si no hay productos."""
        self.assertEqual(self.repository.find_all(), [])

    def test_save_then_find_by_id_returns_same_instance(self) -> None:
        """Debe retornar la instancia guardada."""
        product = Product("abc123", "Widget", 9.99, 5)
        self.repository.save(product)

        self.assertIs(self.repository.find_by_id("abc123"), product)
        self.assertIsNone(self.repository.find_by_id("nope"))

    def test_save_overwrites_existing_id(self) -> None:
        """Debe sobrescribir sin error cuando el ID ya existe."""
        self.repository.save(Product("abc123", "Widget", 9.99, 5))
        replacement = Product("abc123", "Otro", 1.0, 1)
        self.repository.save(replacement)

        self.assertEqual(len(self.repository), 1)
        self.assertEqual(self.repository.find_by_id("abc123").name, "Otro")

    def test_find_all_returns_defensive_copy(self) -> None:
        """Modificar la lista retornada no debe afectar el almacen."""
        self.repository.save(Product("abc123", "Widget", 9.99, 5))

        listed = self.repository.find_all()
        listed.clear()
        listed.append(Product("xyz789", "Intruso", 1.0, 1))

        self.assertEqual([p.id for p in self.repository.find_all()], ["abc123"])
        self.assertIsNot(self.repository.find_all(), self.repository.find_all())

    def test_find_all_returns_every_saved_product(self) -> None:
        """Debe retornar exactamente N productos tras N altas distintas."""
        for index in range(5):
            self.repository.save(Product(f"prod-{index}", f"Producto {index}", 1.0, index))

        self.assertEqual(len(self.repository.find_all()), 5)

    def test_delete_removes_product(self) -> None:
        """Debe eliminar el producto existente."""
        self.repository.save(Product("abc123", "Widget", 9.99, 5))
        self.repository.delete("abc123")

        self.assertIsNone(self.repository.find_by_id("abc123"))
        self.assertEqual(len(self.repository), 0)

    def test_delete_missing_id_is_noop(self) -> None:
        """No debe fallar al eliminar un ID inexistente."""
        self.repository.save(Product("abc123", "Widget", 9.99, 5))
        self.repository.delete("nope")

        self.assertEqual(len(self.repository), 1)

    def test_instances_do_not_share_state(self) -> None:
        """Cada almacen debe ser independiente."""
        self.repository.save(Product("abc123", "Widget", 9.99, 5))

        self.assertEqual(InMemoryProductRepository().find_all(), [])


if __name__ == "__main__":
    unittest.main()
