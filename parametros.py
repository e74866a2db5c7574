"""Parametros globales del proyecto."""

from __future__ import annotations

import logging
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent
DATA_DIR = BASE_DIR / "data"
INVENTORY_FILENAME = "inventario.json"
INVENTORY_FILE = DATA_DIR / INVENTORY_FILENAME

DEFAULT_MAX_PRODUCTS = 100
AUTOSAVE_INTERVAL_SEC = 30.0
STOP_TIMEOUT_SEC = 5.0

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
)
