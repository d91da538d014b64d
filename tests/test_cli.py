import sys
import pytest
from typer.testing import CliRunner
from tablemeta import main
from tablemeta.connectors import factory
from tablemeta.main import EXIT_NOT_FOUND, app

runner = CliRunner()

@pytest.fixture
def config_file(tmp_path, db_url):
    path = tmp_path / "tablemeta.yaml"
    path.write_text(
        "databases:\n"
        "  - alias: shop\n"
        "    type: sqlite\n"
        f"    connection_string: {db_url}\n"
        "    tables: [orders]\n"
    )
    return path

def test_load_prints_snapshot(config_file):
    result = runner.invoke(app, ["load", "-c", str(config_file), "--db", "shop", "--table", "orders"])

    assert result.exit_code == 0
    assert '"name": "orders"' in result.output
    assert "idx_total" in result.output

def test_load_shape_only(config_file):
    result = runner.invoke(app, ["load", "-c", str(config_file), "--db", "shop", "-t", "orders", "--shape-only"])

    assert result.exit_code == 0
    assert '"columns": []' in result.output

def test_load_missing_table(config_file):
    result = runner.invoke(app, ["load", "-c", str(config_file), "--db", "shop", "-t", "ghost"])

    assert result.exit_code == EXIT_NOT_FOUND
    assert "not found" in result.output

def test_load_unknown_alias(config_file):
    result = runner.invoke(app, ["load", "-c", str(config_file), "--db", "warehouse", "-t", "orders"])

    assert result.exit_code == 1
    assert "Error loading config" in result.output

def test_crawl(config_file):
    result = runner.invoke(app, ["crawl", "-c", str(config_file), "--db", "shop", "orders", "big_orders", "ghost"])

    assert result.exit_code == 0
    assert "orders: 2 columns, 1 indexes" in result.output
    assert "big_orders: exists (shape not loaded)" in result.output
    assert "ghost: not found" in result.output

def test_crawl_defaults_to_configured_tables(config_file):
    result = runner.invoke(app, ["crawl", "-c", str(config_file), "--db", "shop"])

    assert result.exit_code == 0
    assert "orders: 2 columns" in result.output

def test_load_rejects_unknown_log_level(config_file):
    config_file.write_text(config_file.read_text() + "log_level: verbose\n")

    result = runner.invoke(app, ["load", "-c", str(config_file), "--db", "shop", "-t", "orders"])

    assert result.exit_code == 1
    assert "Error loading config" in result.output
    assert "log_level" in result.output

def test_load_without_oracle_driver(tmp_path, monkeypatch):
    monkeypatch.setitem(sys.modules, "oracledb", None)
    monkeypatch.setattr(factory, "_ORACLE_CLIENT_INITIALIZED", False)
    path = tmp_path / "oracle.yaml"
    path.write_text(
        "databases:\n"
        "  - alias: ledger\n"
        "    type: oracle\n"
        "    connection_string: oracle+oracledb://user:pw@localhost:1521/?service_name=LEDGER\n"
        "    oracle_thick_mode: true\n"
    )

    result = runner.invoke(app, ["load", "-c", str(path), "--db", "ledger", "-t", "orders"])

    assert result.exit_code == 1
    assert "❌ ledger" in result.output
    assert "python-oracledb" in result.output

def test_load_blocked_statement(config_file, monkeypatch):
    def blocked(data_source, table, database_type):
        raise PermissionError("SAFETY BLOCK: Operation blocked!")

    monkeypatch.setattr(main, "load_table", blocked)

    result = runner.invoke(app, ["load", "-c", str(config_file), "--db", "shop", "-t", "orders"])

    assert result.exit_code == 1
    assert "❌ shop: SAFETY BLOCK" in result.output
