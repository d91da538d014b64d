from .domain.models import ColumnMetadata, Found, IndexMetadata, LoadResult, NotFound, TableMetadata
from .exceptions import ConfigurationError, ConnectivityError, TableMetaException
from .metadata import load, load_without_column_metadata

__all__ = [
    "ColumnMetadata",
    "IndexMetadata",
    "TableMetadata",
    "Found",
    "NotFound",
    "LoadResult",
    "TableMetaException",
    "ConnectivityError",
    "ConfigurationError",
    "load",
    "load_without_column_metadata",
]
