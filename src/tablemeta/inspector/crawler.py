import logging
from typing import Dict, Iterable, List
from pydantic import BaseModel
from ..domain.interfaces import DataSource
from ..domain.models import Found, TableMetadata
from ..metadata import table as table_loader

logger = logging.getLogger(__name__)

class SchemaReport(BaseModel):
    tables: Dict[str, TableMetadata] = {}
    missing: List[str] = []

class SchemaCrawler:
    """
    Loads metadata for a batch of tables.
    Configured tables get their columns and indexes; every other table is
    only checked for existence.
    """
    def __init__(self, data_source: DataSource, database_type: str, configured_tables: Iterable[str] = ()):
        self.data_source = data_source
        self.database_type = database_type
        self.configured_tables = set(configured_tables)

    def load(self, tables: Iterable[str]) -> SchemaReport:
        report = SchemaReport()
        for name in tables:
            if name in self.configured_tables:
                result = table_loader.load(self.data_source, name, self.database_type)
            else:
                result = table_loader.load_without_column_metadata(self.data_source, name, self.database_type)

            if isinstance(result, Found):
                report.tables[name] = result.metadata
            else:
                logger.info("Table %s does not exist", name)
                report.missing.append(name)
        return report
