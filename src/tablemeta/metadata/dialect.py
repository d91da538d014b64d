"""
Dialect-specific schema resolution.

Databases disagree on what addresses a table: MySQL scopes by catalog
(the database), PostgreSQL and SQL Server by schema inside the catalog,
Oracle by the session user. Every introspection call in this package asks
`get_schema` for the qualifier instead of special-casing dialects itself.
"""
import logging
from typing import Callable, Dict, Optional
from sqlalchemy import Connection, text

logger = logging.getLogger(__name__)

SchemaResolver = Callable[[Connection], Optional[str]]

def _no_schema(connection: Connection) -> Optional[str]:
    return None

def _default_schema(connection: Connection) -> Optional[str]:
    return connection.dialect.default_schema_name

def _current_schema_query(sql: str) -> SchemaResolver:
    """Builds a resolver that asks the live session for its current schema."""
    statement = text(sql)

    def resolve(connection: Connection) -> Optional[str]:
        return connection.execute(statement).scalar()

    return resolve

_RESOLVERS: Dict[str, SchemaResolver] = {
    "mysql": _no_schema,
    "mariadb": _no_schema,
    "oracle": _no_schema,
    "sqlite": _no_schema,
    "postgresql": _current_schema_query("SELECT current_schema()"),
    "opengauss": _current_schema_query("SELECT current_schema()"),
    "sqlserver": _current_schema_query("SELECT SCHEMA_NAME()"),
    "mssql": _current_schema_query("SELECT SCHEMA_NAME()"),
    "h2": _current_schema_query("SELECT SCHEMA()"),
}

def register_schema_resolver(database_type: str, resolver: SchemaResolver) -> None:
    """Adds (or replaces) the schema strategy for a dialect."""
    _RESOLVERS[database_type.lower()] = resolver

def get_schema(connection: Connection, database_type: str) -> Optional[str]:
    """
    Returns the schema qualifier to use for introspection on this connection,
    or None when the dialect does not scope tables by schema.
    Errors raised by a live lookup propagate to the caller.
    """
    resolver = _RESOLVERS.get(database_type.lower(), _default_schema)
    schema = resolver(connection)
    logger.debug("Resolved schema %r for database type %s", schema, database_type)
    return schema or None
