"""Configuration and property catalog for springls."""

from .catalog import (
    CatalogError,
    PropertyCatalog,
    PropertyEntry,
    load_catalog,
    load_catalog_file,
)

__all__ = [
    "CatalogError",
    "PropertyCatalog",
    "PropertyEntry",
    "load_catalog",
    "load_catalog_file",
]
