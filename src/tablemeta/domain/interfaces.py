from typing import Any, ContextManager, FrozenSet, Protocol, Sequence
from .models import ColumnMetadata, IndexMetadata

class DataSource(Protocol):
    """
    Anything that hands out scoped connections.
    A SQLAlchemy Engine satisfies this protocol; leaving the context
    returns the connection to its pool (or closes it).
    """
    def connect(self) -> ContextManager[Any]:
        ...

class ColumnLoader(Protocol):
    def __call__(self, connection: Any, table: str, database_type: str) -> Sequence[ColumnMetadata]:
        ...

class IndexLoader(Protocol):
    def __call__(self, connection: Any, table: str, database_type: str) -> FrozenSet[IndexMetadata]:
        ...
