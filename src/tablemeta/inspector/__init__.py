from .crawler import SchemaCrawler, SchemaReport

__all__ = ["SchemaCrawler", "SchemaReport"]
