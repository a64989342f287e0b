"""Inicializacion de la aplicacion de cliente."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from typing import TextIO

from cliente.backend.controller import ProductController
from cliente.backend.gateway import LocalServerGateway
from cliente.frontend.console_menu import ConsoleMenu
from parametros import APP_NAME, DEFAULT_LOG_LEVEL, LOG_FORMAT, LOG_LEVEL_CHOICES
from servidor.persistence.memory_repository import InMemoryProductRepository

LOGGER = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parsea argumentos CLI."""
    parser = argparse.ArgumentParser(
        prog="inventario",
        description=f"{APP_NAME}: administra productos en memoria desde un menu de consola.",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVEL_CHOICES,
        default=logging.getLevelName(DEFAULT_LOG_LEVEL),
        help="Nivel de logging enviado a stderr (por defecto: WARNING).",
    )
    return parser.parse_args(argv)


def configure_logging(level: int | str = DEFAULT_LOG_LEVEL) -> None:
    """Configura logging para salida en consola."""
    logging.basicConfig(level=level, format=LOG_FORMAT)


def build_controller() -> ProductController:
    """Compone almacen, gateway y controlador."""
    repository = InMemoryProductRepository()
    gateway = LocalServerGateway(repository=repository)
    return ProductController(gateway=gateway)


def main(
    argv: Sequence[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """Ejecuta la aplicacion de consola."""
    args = parse_args(argv)
    configure_logging(args.log_level)

    controller = build_controller()
    LOGGER.info("Aplicacion iniciada.")
    menu = ConsoleMenu(controller, stdin=stdin, stdout=stdout, stderr=stderr)
    return menu.run()


if __name__ == "__main__":
    raise SystemExit(main())
