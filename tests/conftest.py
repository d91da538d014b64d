import pytest
from sqlalchemy import create_engine, event, text
from tablemeta.connectors.base import create_data_source

@pytest.fixture
def db_url(tmp_path):
    """SQLite database holding an `orders` table with one index and a view over it."""
    url = f"sqlite:///{tmp_path / 'shop.db'}"
    setup_engine = create_engine(url)
    with setup_engine.begin() as conn:
        conn.execute(text("CREATE TABLE orders (id INTEGER PRIMARY KEY, total NUMERIC(10, 2) NOT NULL)"))
        conn.execute(text("CREATE INDEX idx_total ON orders (total)"))
        conn.execute(text("CREATE VIEW big_orders AS SELECT id FROM orders WHERE total > 100"))
    setup_engine.dispose()
    return url

class PoolCounter:
    def __init__(self, engine):
        self.checkouts = 0
        self.checkins = 0
        event.listen(engine, "checkout", self._on_checkout)
        event.listen(engine, "checkin", self._on_checkin)

    def _on_checkout(self, dbapi_connection, connection_record, connection_proxy):
        self.checkouts += 1

    def _on_checkin(self, dbapi_connection, connection_record):
        self.checkins += 1

@pytest.fixture
def data_source(db_url):
    engine = create_data_source(db_url)
    yield engine
    engine.dispose()

@pytest.fixture
def pool_counter(data_source):
    return PoolCounter(data_source)
