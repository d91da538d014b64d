from typing import Tuple
from sqlalchemy import Connection, inspect
from ..domain.models import ColumnMetadata
from .dialect import get_schema

def _is_generated(column: dict) -> bool:
    # "autoincrement" may also be the string "auto"; only an explicit True counts
    return column.get("autoincrement") is True or "computed" in column or "identity" in column

def load(connection: Connection, table: str, database_type: str) -> Tuple[ColumnMetadata, ...]:
    """
    Reflects the columns of `table`, in declared order, on the given connection.
    """
    schema = get_schema(connection, database_type)
    inspector = inspect(connection)
    columns_info = inspector.get_columns(table, schema=schema)
    pk_constraint = inspector.get_pk_constraint(table, schema=schema)
    pk_cols = pk_constraint.get("constrained_columns") or []

    return tuple(
        ColumnMetadata(
            name=col["name"],
            data_type=str(col["type"]),
            nullable=col.get("nullable", True),
            primary_key=col["name"] in pk_cols,
            generated=_is_generated(col),
        )
        for col in columns_info
    )
