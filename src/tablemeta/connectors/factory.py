import logging
from typing import Optional, Union
from sqlalchemy import Engine
from ..config import DatabaseConfig
from ..exceptions import ConfigurationError
from .base import create_data_source

logger = logging.getLogger(__name__)

# Global flag to ensure Oracle Client is initialized only once
_ORACLE_CLIENT_INITIALIZED = False

def _init_oracle_client(lib_dir: Optional[str] = None) -> None:
    """
    Helper to initialize Oracle Instant Client for Thick Mode.
    Ensures it's called only once per process.
    """
    global _ORACLE_CLIENT_INITIALIZED
    if _ORACLE_CLIENT_INITIALIZED:
        return

    try:
        import oracledb
    except ImportError as e:
        raise ConfigurationError(
            "Oracle thick mode requires python-oracledb. Install it with `pip install 'tablemeta[oracle]'`"
        ) from e
    oracledb.init_oracle_client(lib_dir=lib_dir)
    _ORACLE_CLIENT_INITIALIZED = True
    logger.info("Initialized Oracle client (lib_dir=%s)", lib_dir)

def get_data_source(config: Union[str, DatabaseConfig], read_only: bool = True) -> Engine:
    """
    Factory function to create the data source for a database.
    Accepts either a connection string (str) or a DatabaseConfig object.
    """
    if not isinstance(config, DatabaseConfig):
        return create_data_source(config, read_only=read_only)

    # oracledb is in thick mode once the client is initialized; the engine must not get `thick_mode`
    if config.type.lower() == "oracle" and config.oracle_thick_mode:
        _init_oracle_client(config.oracle_lib_dir)

    return create_data_source(config.connection_string, read_only=config.read_only)
