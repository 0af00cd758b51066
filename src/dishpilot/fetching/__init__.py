"""HTTP utilities for downloading recipe catalogs."""

from .retry import retry_on_connection_error
from .session import CatalogSession

__all__ = ["CatalogSession", "retry_on_connection_error"]
