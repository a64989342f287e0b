"""Excepciones compartidas del proyecto."""

from __future__ import annotations


class ValidationError(Exception):
    """Error de validacion de datos de entrada."""


class ServiceError(Exception):
    """Error en la ejecucion de servicios."""


class DuplicateIdError(ServiceError):
    """Ya existe un producto registrado con el ID indicado."""


class NotFoundError(ServiceError):
    """No existe un producto con el ID indicado."""


class InvalidProductDataError(ServiceError):
    """Los datos entregados no permiten construir un producto valido.

    El mensaje publico es generico; el detalle queda en ``__cause__``.
    """
