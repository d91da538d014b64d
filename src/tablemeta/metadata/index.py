from typing import FrozenSet
from sqlalchemy import Connection, inspect
from ..domain.models import IndexMetadata
from .dialect import get_schema

def load(connection: Connection, table: str, database_type: str) -> FrozenSet[IndexMetadata]:
    """
    Reflects the named indexes of `table` on the given connection.
    Primary keys are not reported as indexes.
    """
    schema = get_schema(connection, database_type)
    indexes = inspect(connection).get_indexes(table, schema=schema)
    return frozenset(
        IndexMetadata(
            name=index["name"],
            # Expression-based index entries come back as None
            column_names=tuple(name for name in index.get("column_names", []) if name),
            unique=bool(index.get("unique", False)),
        )
        for index in indexes
        if index.get("name")
    )
