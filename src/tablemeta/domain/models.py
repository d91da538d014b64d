from typing import FrozenSet, List, Optional, Tuple, Union
from pydantic import BaseModel, ConfigDict, Field

class ColumnMetadata(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    data_type: str
    nullable: bool = True
    primary_key: bool = False
    generated: bool = False

class IndexMetadata(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    column_names: Tuple[str, ...] = ()
    unique: bool = False

class TableMetadata(BaseModel):
    """
    Snapshot of one table's shape at load time.
    Immutable: a new load produces a new instance.
    """
    model_config = ConfigDict(frozen=True)

    name: str
    columns: Tuple[ColumnMetadata, ...] = ()
    indexes: FrozenSet[IndexMetadata] = Field(default_factory=frozenset)

    @property
    def column_names(self) -> List[str]:
        return [column.name for column in self.columns]

    @property
    def primary_key_columns(self) -> List[str]:
        return [column.name for column in self.columns if column.primary_key]

    def get_column(self, name: str) -> Optional[ColumnMetadata]:
        index = self.find_column_index(name)
        return self.columns[index] if index >= 0 else None

    def find_column_index(self, name: str) -> int:
        # Column names are matched case-insensitively, like unquoted SQL identifiers
        lowered = name.lower()
        for position, column in enumerate(self.columns):
            if column.name.lower() == lowered:
                return position
        return -1

    def is_primary_key(self, index: int) -> bool:
        if index < 0 or index >= len(self.columns):
            return False
        return self.columns[index].primary_key

    def get_index(self, name: str) -> Optional[IndexMetadata]:
        lowered = name.lower()
        for index in self.indexes:
            if index.name.lower() == lowered:
                return index
        return None

class Found(BaseModel):
    """The table exists; carries its snapshot."""
    model_config = ConfigDict(frozen=True)

    metadata: TableMetadata

class NotFound(BaseModel):
    """The table does not exist. An expected outcome, not an error."""
    model_config = ConfigDict(frozen=True)

    table_name: str

LoadResult = Union[Found, NotFound]
