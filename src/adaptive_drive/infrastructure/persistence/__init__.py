"""
Catalog persistence for the AdaptiveDrive application.
"""

from .catalog_repository import (
    InMemoryCatalogRepository,
    default_catalog,
    load_catalog_file
)

__all__ = [
    'InMemoryCatalogRepository',
    'default_catalog',
    'load_catalog_file'
]
