from .dialect import get_schema, register_schema_resolver
from .table import is_table_exist, load, load_without_column_metadata

__all__ = [
    "get_schema",
    "register_schema_resolver",
    "is_table_exist",
    "load",
    "load_without_column_metadata",
]
