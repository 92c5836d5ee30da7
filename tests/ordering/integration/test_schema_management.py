"""`manage.py setup-db` / `drop-db` against a SQLite database.

Each command runs in its own interpreter, the way an operator invokes it,
so no table models are registered ahead of time.
"""

import os
import subprocess
import sys
from pathlib import Path

import pytest
from sqlalchemy import create_engine, inspect

_MANAGE = Path(__file__).resolve().parents[3] / "src" / "manage.py"


@pytest.fixture()
def database_url(tmp_path):
    return f"sqlite:///{tmp_path / 'orders.db'}"


@pytest.fixture()
def manage(database_url, tmp_path):
    env = {
        **os.environ,
        "PROTEAN_ENV": "sqlite",
        "DATABASE_URL": database_url,
        "LOG_DIR": str(tmp_path / "logs"),
    }

    def run(command):
        subprocess.run([sys.executable, str(_MANAGE), command], env=env, check=True, capture_output=True)

    return run


def _tables(database_url):
    engine = create_engine(database_url)
    try:
        return set(inspect(engine).get_table_names())
    finally:
        engine.dispose()


class TestSchemaCommands:
    def test_setup_db_creates_order_tables(self, manage, database_url):
        manage("setup-db")
        assert {"orders", "order_line_items"} <= _tables(database_url)

    def test_drop_db_in_a_fresh_process_removes_order_tables(self, manage, database_url):
        manage("setup-db")

        manage("drop-db")

        assert not {"orders", "order_line_items"} & _tables(database_url)
