class TableMetaException(Exception):
    """Base Exception Class"""
    pass

class ConnectivityError(TableMetaException):
    """Connection, introspection or metadata loading failure"""

    def __init__(self, message: str, orig: Exception = None):
        super().__init__(message)
        self.orig = orig

class ConfigurationError(TableMetaException):
    """Configuration Error"""
    pass
