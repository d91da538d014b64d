import logging
from sqlalchemy import Engine, create_engine, event
from ..exceptions import ConnectivityError

logger = logging.getLogger(__name__)

# Metadata loading only ever reads; these are the statement heads the
# supported dialects use for introspection and session setup.
ALLOWED_STARTS = (
    "SELECT",
    "WITH",
    "EXPLAIN",
    "DESCRIBE",
    "SHOW",
    "SET",
    "PRAGMA",        # SQLite reflection
    "ALTER SESSION", # Oracle session config
)

def enforce_read_only(conn, cursor, statement, parameters, context, executemany):
    """
    before_cursor_execute hook.
    Blocks any SQL that doesn't start with a whitelisted keyword.
    """
    sql = statement.strip().upper()

    if not sql.startswith(ALLOWED_STARTS):
        raise PermissionError(
            f"SAFETY BLOCK: Operation blocked! Only read-only queries are allowed. "
            f"Attempted: {sql[:50]}..."
        )

def create_data_source(connection_string: str, read_only: bool = True, **engine_kwargs) -> Engine:
    """
    Creates a SQLAlchemy engine to serve as a data source.
    The engine is lazy: no connection is opened until the first load.
    """
    try:
        engine = create_engine(connection_string, **engine_kwargs)
    except Exception as e:
        raise ConnectivityError(f"Failed to create engine: {e}", orig=e) from e

    if read_only:
        event.listen(engine, "before_cursor_execute", enforce_read_only)
    logger.debug("Created data source for %s (read_only=%s)", engine.url.render_as_string(), read_only)
    return engine
