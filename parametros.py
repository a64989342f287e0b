"""Parametros globales del proyecto."""

from __future__ import annotations

import logging
import re

APP_NAME = "Sistema de Gestion de Inventario"

PRODUCT_ID_PATTERN = re.compile(r"^[a-zA-Z0-9_-]{3,20}$")
PRODUCT_NAME_PATTERN = re.compile(r"^[a-zA-Z0-9À-ÖØ-öø-ÿ .,'-]{3,50}$")
MIN_PRICE = 0.01
MAX_PRICE = 10000.0

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DEFAULT_LOG_LEVEL = logging.WARNING
LOG_LEVEL_CHOICES: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR")
