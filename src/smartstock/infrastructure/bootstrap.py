"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import os
from pathlib import Path

from smartstock.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from smartstock.infrastructure.persistence.json_settings_repository import (
    JsonSettingsRepository,
)

DATA_DIR_ENV = "SMARTSTOCK_DATA_DIR"
PRODUCTS_FILE = "products.json"
SETTINGS_FILE = "settings.json"

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_dir() -> Path:
    override = os.environ.get(DATA_DIR_ENV)
    return Path(override) if override else _DEFAULT_DATA_DIR


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(data_dir() / PRODUCTS_FILE)


def settings_repository() -> JsonSettingsRepository:
    return JsonSettingsRepository(data_dir() / SETTINGS_FILE)
