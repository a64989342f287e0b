"""Menu de consola del inventario."""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from typing import TextIO, TypeVar

from cliente.backend.controller import ProductController
from cliente.backend.validators import (
    parse_menu_option,
    parse_optional_name,
    parse_optional_price,
    parse_optional_stock,
    parse_price,
    parse_stock,
)
from parametros import APP_NAME
from shared.errors import ValidationError
from shared.protocol import OperationResult

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")

OPTION_EXIT = 0
OPTION_ADD = 1
OPTION_UPDATE = 2
OPTION_DELETE = 3
OPTION_LIST = 4

MENU_LINES: tuple[str, ...] = (
    f"--- {APP_NAME} ---",
    "1. Agregar Producto",
    "2. Actualizar Producto",
    "3. Eliminar Producto",
    "4. Listar Todos los Productos",
    "0. Salir",
)
GOODBYE_MESSAGE = "Saliendo de la aplicacion. Hasta luego!"


class ConsoleMenu:
    """Bucle de menu numerado que delega cada opcion en el controlador."""

    def __init__(
        self,
        controller: ProductController,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        self._controller = controller
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self._stderr = stderr if stderr is not None else sys.stderr
        self._actions: dict[int, Callable[[], None]] = {
            OPTION_ADD: self._add_product,
            OPTION_UPDATE: self._update_product,
            OPTION_DELETE: self._delete_product,
            OPTION_LIST: self._list_products,
        }

    def run(self) -> int:
        """Ejecuta el menu hasta elegir Salir o agotar la entrada."""
        LOGGER.info("Menu de consola iniciado.")
        while True:
            self._print_menu()
            try:
                raw_option = self._read_line()
            except EOFError:
                break

            try:
                option = parse_menu_option(raw_option)
            except ValidationError as exc:
                self._error(str(exc))
                self._write("")
                continue

            if option == OPTION_EXIT:
                break

            action = self._actions.get(option)
            if action is None:
                self._write("Opcion no valida. Por favor, intente de nuevo.")
            else:
                try:
                    action()
                except EOFError:
                    break
            self._write("")

        self._write(GOODBYE_MESSAGE)
        LOGGER.info("Menu de consola finalizado.")
        return 0

    def _add_product(self) -> None:
        id = self._prompt("Ingrese ID del producto: ")
        name = self._prompt("Ingrese Nombre del producto: ")
        price = self._prompt_parsed("Ingrese Precio del producto: ", parse_price)
        stock = self._prompt_parsed("Ingrese Stock del producto: ", parse_stock)
        self._show(self._controller.add_product(id, name, price, stock))

    def _update_product(self) -> None:
        id = self._prompt("Ingrese ID del producto a actualizar: ")
        self._write("Ingrese nuevos datos (deje en blanco si no desea actualizar):")
        name = parse_optional_name(self._prompt("Nuevo Nombre del producto: "))
        price = self._prompt_parsed("Nuevo Precio del producto: ", parse_optional_price)
        stock = self._prompt_parsed("Nuevo Stock del producto: ", parse_optional_stock)
        self._show(self._controller.update_product(id, name=name, price=price, stock=stock))

    def _delete_product(self) -> None:
        id = self._prompt("Ingrese ID del producto a eliminar: ")
        self._show(self._controller.delete_product(id))

    def _list_products(self) -> None:
        self._show(self._controller.list_products_text())

    def _prompt_parsed(self, prompt: str, parser: Callable[[str], T]) -> T:
        """Repite la pregunta hasta que la entrada pueda parsearse."""
        while True:
            raw = self._prompt(prompt)
            try:
                return parser(raw)
            except ValidationError as exc:
                self._error(str(exc))

    def _prompt(self, prompt: str) -> str:
        self._stdout.write(prompt)
        self._stdout.flush()
        return self._read_line().strip()

    def _read_line(self) -> str:
        line = self._stdin.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    def _print_menu(self) -> None:
        for line in MENU_LINES:
            self._write(line)
        self._stdout.write("Seleccione una opcion: ")
        self._stdout.flush()

    def _show(self, result: OperationResult) -> None:
        if result.ok:
            self._write(result.message)
        else:
            self._error(result.message)

    def _write(self, text: str) -> None:
        print(text, file=self._stdout)

    def _error(self, text: str) -> None:
        print(text, file=self._stderr)
