"""
Table metadata loading.

Both entry points open exactly one connection per call, probe for the
table on it and release it on every exit path. `load` then reflects
columns and indexes on that same connection; `load_without_column_metadata`
stops at the existence check, for tables that are not individually
configured and only need to be known to exist.
"""
import logging
from typing import Callable
from sqlalchemy import Connection, inspect
from sqlalchemy.exc import SQLAlchemyError
from ..domain.interfaces import ColumnLoader, DataSource, IndexLoader
from ..domain.models import Found, LoadResult, NotFound, TableMetadata
from ..exceptions import ConnectivityError
from . import column, index
from .dialect import get_schema

logger = logging.getLogger(__name__)

def load(
    data_source: DataSource,
    table: str,
    database_type: str,
    *,
    column_loader: ColumnLoader = column.load,
    index_loader: IndexLoader = index.load,
) -> LoadResult:
    """
    Loads the full snapshot (columns and indexes) of `table`.

    Returns NotFound when the table does not exist.
    Raises ConnectivityError when the database cannot be reached or introspected.
    """
    def build(connection: Connection) -> TableMetadata:
        columns = column_loader(connection, table, database_type)
        indexes = index_loader(connection, table, database_type)
        logger.debug("Loaded %s: %d columns, %d indexes", table, len(columns), len(indexes))
        return TableMetadata(name=table, columns=tuple(columns), indexes=frozenset(indexes))

    return _load(data_source, table, database_type, build)

def load_without_column_metadata(data_source: DataSource, table: str, database_type: str) -> LoadResult:
    """
    Loads `table` without column and index metadata, for unconfigured tables.
    Only existence is checked; the snapshot is always empty.
    """
    return _load(data_source, table, database_type, lambda connection: TableMetadata(name=table))

def is_table_exist(connection: Connection, table: str, database_type: str) -> bool:
    """
    Probes for `table` by exact name in the connection's catalog and the
    dialect's schema. Views count as tables.
    """
    schema = get_schema(connection, database_type)
    return inspect(connection).has_table(table, schema=schema)

def _load(
    data_source: DataSource,
    table: str,
    database_type: str,
    build: Callable[[Connection], TableMetadata],
) -> LoadResult:
    try:
        with data_source.connect() as connection:
            if not is_table_exist(connection, table, database_type):
                logger.debug("Table %s not found (%s)", table, database_type)
                return NotFound(table_name=table)
            return Found(metadata=build(connection))
    except SQLAlchemyError as e:
        raise ConnectivityError(f"Failed to load metadata for {table}: {e}", orig=e) from e
