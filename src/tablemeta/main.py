import logging
import typer
from typing import List, Optional
from pathlib import Path
from .config import AppConfig, DatabaseConfig
from .connectors.factory import get_data_source
from .domain.models import NotFound
from .exceptions import TableMetaException
from .inspector import SchemaCrawler
from .metadata import load as load_table, load_without_column_metadata

app = typer.Typer(help="Table metadata loader for heterogeneous databases")

EXIT_NOT_FOUND = 2

def _setup_logging(app_config: AppConfig, verbose: bool) -> None:
    level = logging.DEBUG if verbose else app_config.log_level
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

def _load_db_config(config: Path, db: str, verbose: bool) -> DatabaseConfig:
    try:
        app_config = AppConfig.from_yaml(config)
        _setup_logging(app_config, verbose)
        return app_config.get_db_config(db)
    except TableMetaException as e:
        typer.echo(f"Error loading config: {e}", err=True)
        raise typer.Exit(code=1)

@app.command()
def load(
    config: Path = typer.Option(..., "--config", "-c", help="Path to configuration file"),
    db: str = typer.Option(..., "--db", help="Database alias from the configuration"),
    table: str = typer.Option(..., "--table", "-t", help="Exact table name"),
    shape_only: bool = typer.Option(False, "--shape-only", help="Only check existence, skip columns and indexes"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
):
    """
    Load the metadata of one table and print it as JSON.
    """
    db_config = _load_db_config(config, db, verbose)

    try:
        data_source = get_data_source(db_config)
        try:
            if shape_only:
                result = load_without_column_metadata(data_source, table, db_config.type)
            else:
                result = load_table(data_source, table, db_config.type)
        finally:
            data_source.dispose()
    except (TableMetaException, PermissionError) as e:
        typer.secho(f"❌ {db_config.alias}: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    if isinstance(result, NotFound):
        typer.secho(f"Table '{table}' not found in {db_config.alias}", fg=typer.colors.YELLOW, err=True)
        raise typer.Exit(code=EXIT_NOT_FOUND)

    typer.echo(result.metadata.model_dump_json(indent=2))

@app.command()
def crawl(
    tables: Optional[List[str]] = typer.Argument(None, help="Tables to load (default: the configured ones)"),
    config: Path = typer.Option(..., "--config", "-c", help="Path to configuration file"),
    db: str = typer.Option(..., "--db", help="Database alias from the configuration"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
):
    """
    Load several tables: configured ones in full, the rest shape-only.
    """
    db_config = _load_db_config(config, db, verbose)
    targets = tables or db_config.tables
    if not targets:
        typer.echo("Error: no tables given and none configured", err=True)
        raise typer.Exit(code=1)

    try:
        data_source = get_data_source(db_config)
        try:
            report = SchemaCrawler(data_source, db_config.type, db_config.tables).load(targets)
        finally:
            data_source.dispose()
    except (TableMetaException, PermissionError) as e:
        typer.secho(f"❌ {db_config.alias}: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    for name, metadata in report.tables.items():
        if db_config.is_configured(name):
            typer.secho(
                f"✅ {name}: {len(metadata.columns)} columns, {len(metadata.indexes)} indexes",
                fg=typer.colors.GREEN,
            )
        else:
            typer.secho(f"✅ {name}: exists (shape not loaded)", fg=typer.colors.GREEN)
    for name in report.missing:
        typer.secho(f"⚠️ {name}: not found", fg=typer.colors.YELLOW)

if __name__ == "__main__":
    app()
